"""FilterSet definitions for listing search."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Listing


class ListingFilterSet(django_filters.FilterSet):
    """Search filters: city substring, category, price bounds and guest count."""

    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    category = django_filters.ChoiceFilter(field_name="category", choices=Listing.Category.choices)
    min_price = django_filters.NumberFilter(field_name="price_per_night", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price_per_night", lookup_expr="lte")
    capacity = django_filters.NumberFilter(method="filter_capacity")
    owner = django_filters.NumberFilter(field_name="owner_id", lookup_expr="exact")

    class Meta:
        model = Listing
        fields = [
            "city",
            "category",
            "owner",
        ]

    def filter_capacity(self, queryset, name, value):  # type: ignore
        # Listings without a capacity accept any number of guests.
        return queryset.filter(
            Q(capacity__gte=value) | Q(capacity__isnull=True)
        )
