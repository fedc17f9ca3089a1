"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer

from .models import Booking


def _validate_period(attrs):  # type: ignore
    arrival = attrs.get("arrival")
    departure = attrs.get("departure")
    if arrival is not None and departure is not None and departure <= arrival:
        raise serializers.ValidationError({"departure": "Departure must be after arrival."})
    return attrs


class BookingCreateSerializer(serializers.Serializer):
    """Input for a new booking; the listing is resolved by the service."""

    listing = serializers.IntegerField(min_value=1)
    arrival = serializers.DateTimeField()
    departure = serializers.DateTimeField()
    guest_count = serializers.IntegerField(min_value=1, default=1)
    title = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")

    def validate(self, attrs):  # type: ignore
        return _validate_period(attrs)


class BookingUpdateSerializer(serializers.Serializer):
    """Partial update: a status transition, new dates, or both."""

    status = serializers.ChoiceField(choices=Booking.Status.choices, required=False)
    arrival = serializers.DateTimeField(required=False)
    departure = serializers.DateTimeField(required=False)

    def validate(self, attrs):  # type: ignore
        if ("arrival" in attrs) != ("departure" in attrs):
            raise serializers.ValidationError("Arrival and departure must be changed together.")
        if not attrs:
            raise serializers.ValidationError("Nothing to update.")
        return _validate_period(attrs)


class AvailabilityQuerySerializer(serializers.Serializer):
    listing = serializers.IntegerField(min_value=1)
    arrival = serializers.DateTimeField()
    departure = serializers.DateTimeField()

    def validate(self, attrs):  # type: ignore
        return _validate_period(attrs)


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation."""

    requester = UserShortSerializer(read_only=True)
    listing_id = serializers.ReadOnlyField(source="listing.id")
    listing_title = serializers.ReadOnlyField(source="listing.title")
    nights = serializers.SerializerMethodField()
    snapshot = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "requester",
            "listing_id",
            "listing_title",
            "title",
            "arrival",
            "departure",
            "nights",
            "guest_count",
            "total_price",
            "status",
            "snapshot",
            "created_at",
            "updated_at",
        ]

    def get_nights(self, obj: Booking) -> int:
        return obj.period.nights

    def get_snapshot(self, obj: Booking) -> dict[str, str]:
        snapshot = obj.snapshot
        return {"city": snapshot.city, "address": snapshot.address, "contact": snapshot.contact}
