"""Serializers for listing endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.availability import booked_periods
from apps.users.serializers import UserShortSerializer

from .models import Listing


class ListingSerializer(serializers.ModelSerializer):
    """Read serializer; rating figures come from queryset annotations."""

    owner = UserShortSerializer(read_only=True)
    average_rating = serializers.SerializerMethodField()
    review_count = serializers.SerializerMethodField()

    class Meta:
        model = Listing
        fields = [
            "id",
            "owner",
            "title",
            "description",
            "category",
            "price_per_night",
            "city",
            "address",
            "postal_code",
            "country",
            "capacity",
            "bedrooms",
            "bathrooms",
            "house_rules",
            "is_active",
            "average_rating",
            "review_count",
            "created_at",
            "updated_at",
        ]

    def get_average_rating(self, obj: Listing) -> float:
        value = getattr(obj, "average_rating", None)
        return round(float(value), 2) if value is not None else 0.0

    def get_review_count(self, obj: Listing) -> int:
        return getattr(obj, "review_count", 0) or 0


class ListingDetailSerializer(ListingSerializer):
    """Adds the periods held by active bookings so clients can grey out dates."""

    booked_periods = serializers.SerializerMethodField()

    class Meta(ListingSerializer.Meta):
        fields = ListingSerializer.Meta.fields + ["booked_periods"]

    def get_booked_periods(self, obj: Listing) -> list[dict[str, str]]:
        return [
            {"arrival": period.arrival.isoformat(), "departure": period.departure.isoformat()}
            for period in booked_periods(obj.pk)
        ]


class ListingWriteSerializer(serializers.ModelSerializer):
    """Serializer for create/update operations."""

    class Meta:
        model = Listing
        fields = [
            "title",
            "description",
            "category",
            "price_per_night",
            "city",
            "address",
            "postal_code",
            "country",
            "capacity",
            "bedrooms",
            "bathrooms",
            "house_rules",
            "is_active",
        ]

    def validate_price_per_night(self, value):  # type: ignore
        if value < 0:
            raise serializers.ValidationError("Price per night cannot be negative.")
        return value

    def validate_capacity(self, value):  # type: ignore
        if value is not None and value < 1:
            raise serializers.ValidationError("Capacity must be at least 1.")
        return value

    def create(self, validated_data):  # type: ignore
        return Listing.objects.create(owner=self.context["request"].user, **validated_data)
