"""Availability engine.

Decides whether a listing is free for a stay. Stays are half-open
``[arrival, departure)`` intervals, so a departure and the next arrival may
share the same instant. Only ``PENDING`` and ``CONFIRMED`` bookings hold
dates.
"""

from __future__ import annotations

from datetime import datetime

from django.db.models import Q, QuerySet  # type: ignore

from shared.domain.value_objects import StayPeriod

from .models import Booking


def overlap_filter(period: StayPeriod) -> Q:
    """ORM form of ``StayPeriod.overlaps``."""
    return Q(arrival__lt=period.departure) & Q(departure__gt=period.arrival)


def conflicting_bookings(
    listing_id,
    arrival: datetime,
    departure: datetime,
    exclude_booking_id=None,
) -> QuerySet:
    """Active bookings of ``listing_id`` overlapping the requested stay.

    Raises ``InvalidRangeError`` when ``departure`` is not after ``arrival``.
    """

    period = StayPeriod(arrival, departure)
    queryset = Booking.objects.filter(
        listing_id=listing_id,
        status__in=Booking.ACTIVE_STATUSES,
    ).filter(overlap_filter(period))

    if exclude_booking_id is not None:
        queryset = queryset.exclude(pk=exclude_booking_id)
    return queryset


def is_available(
    listing_id,
    arrival: datetime,
    departure: datetime,
    exclude_booking_id=None,
) -> bool:
    return not conflicting_bookings(
        listing_id,
        arrival,
        departure,
        exclude_booking_id=exclude_booking_id,
    ).exists()


def booked_periods(listing_id) -> list[StayPeriod]:
    """Periods held by active bookings, earliest first."""

    rows = (
        Booking.objects.filter(listing_id=listing_id, status__in=Booking.ACTIVE_STATUSES)
        .order_by("arrival", "id")
        .values_list("arrival", "departure")
    )
    return [StayPeriod(arrival, departure) for arrival, departure in rows]
