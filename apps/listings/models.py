"""Listing domain models for ETNAir.

A listing is a property offered for nightly rental by its owner. Bookings,
reviews and favorites all hang off a listing and are removed with it.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Listing(models.Model):
    """Property published for nightly rental."""

    class Category(models.TextChoices):
        APARTMENT = "APARTMENT", _("Apartment")
        HOUSE = "HOUSE", _("House")
        VILLA = "VILLA", _("Villa")
        STUDIO = "STUDIO", _("Studio")
        ROOM = "ROOM", _("Room")
        OTHER = "OTHER", _("Other")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="listings",
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(
        max_length=20,
        choices=Category.choices,
        default=Category.APARTMENT,
    )
    price_per_night = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    city = models.CharField(max_length=120)
    address = models.CharField(max_length=255)
    postal_code = models.CharField(max_length=20, blank=True)
    country = models.CharField(max_length=120, blank=True)
    capacity = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        help_text=_("Maximum number of guests; empty means unlimited."),
    )
    bedrooms = models.PositiveSmallIntegerField(null=True, blank=True)
    bathrooms = models.PositiveSmallIntegerField(null=True, blank=True)
    house_rules = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    availability_revision = models.PositiveIntegerField(
        default=0,
        editable=False,
        help_text=_("Bumped by every booking write; the update doubles as the per-listing lock."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Listing")
        verbose_name_plural = _("Listings")
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["city"], name="listing_city_idx"),
            models.Index(fields=["is_active", "category"], name="listing_active_category_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price_per_night__gte=0),
                name="listing_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.city})"
