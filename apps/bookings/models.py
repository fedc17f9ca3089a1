"""Booking domain models for ETNAir."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import BookingSnapshot, StayPeriod


class Booking(models.Model):
    """A reservation of a listing for the stay ``[arrival, departure)``."""

    class Status(models.TextChoices):
        PENDING = "PENDING", _("Pending")
        CONFIRMED = "CONFIRMED", _("Confirmed")
        COMPLETED = "COMPLETED", _("Completed")
        CANCELLED = "CANCELLED", _("Cancelled")

    # Bookings in these statuses hold their dates.
    ACTIVE_STATUSES = (Status.PENDING, Status.CONFIRMED)

    TRANSITIONS = {
        Status.PENDING.value: frozenset({Status.CONFIRMED.value, Status.CANCELLED.value}),
        Status.CONFIRMED.value: frozenset({Status.COMPLETED.value, Status.CANCELLED.value}),
        Status.COMPLETED.value: frozenset(),
        Status.CANCELLED.value: frozenset(),
    }

    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    listing = models.ForeignKey(
        "listings.Listing",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    title = models.CharField(max_length=255, blank=True)
    arrival = models.DateTimeField()
    departure = models.DateTimeField()
    guest_count = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )

    # Listing details as they were when the booking was made.
    snapshot_city = models.CharField(max_length=120, blank=True)
    snapshot_address = models.CharField(max_length=255, blank=True)
    snapshot_contact = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(departure__gt=models.F("arrival")),
                name="booking_valid_dates",
            ),
            models.CheckConstraint(
                condition=models.Q(guest_count__gte=1),
                name="booking_guest_count_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["listing", "arrival", "departure"], name="booking_listing_period_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} for listing {self.listing_id} ({self.status})"

    @property
    def period(self) -> StayPeriod:
        return StayPeriod(self.arrival, self.departure)

    @property
    def snapshot(self) -> BookingSnapshot:
        return BookingSnapshot(
            city=self.snapshot_city,
            address=self.snapshot_address,
            contact=self.snapshot_contact,
        )

    def apply_snapshot(self, snapshot: BookingSnapshot) -> None:
        self.snapshot_city = snapshot.city
        self.snapshot_address = snapshot.address
        self.snapshot_contact = snapshot.contact

    @property
    def is_active(self) -> bool:
        return self.status in self.ACTIVE_STATUSES

    def can_transition_to(self, status: str) -> bool:
        return status in self.TRANSITIONS.get(self.status, frozenset())
