"""FilterSet for the review list."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Review


class ReviewFilterSet(django_filters.FilterSet):
    listing = django_filters.NumberFilter(field_name='listing_id', lookup_expr='exact')
    author = django_filters.NumberFilter(field_name='author_id', lookup_expr='exact')

    class Meta:
        model = Review
        fields = ['listing', 'author']
