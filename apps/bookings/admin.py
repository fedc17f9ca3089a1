"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "listing",
        "requester",
        "status",
        "arrival",
        "departure",
        "guest_count",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "arrival", "departure")
    search_fields = ("listing__title", "requester__email", "snapshot_city")
    readonly_fields = (
        "total_price",
        "snapshot_city",
        "snapshot_address",
        "snapshot_contact",
        "created_at",
        "updated_at",
    )
