"""Admin registrations for listings."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Listing


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = ("title", "owner", "city", "category", "price_per_night", "capacity", "is_active", "created_at")
    list_filter = ("category", "is_active", "city")
    search_fields = ("title", "city", "address", "owner__email")
    readonly_fields = ("availability_revision", "created_at", "updated_at")
    autocomplete_fields = ("owner",)
