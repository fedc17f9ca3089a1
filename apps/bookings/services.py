"""Domain services for booking workflows.

Every write that can change which dates a listing holds starts its
transaction by bumping ``Listing.availability_revision``. That UPDATE takes
the row lock on PostgreSQL and the database write lock on SQLite, so the
availability check and the insert that follows cannot interleave with
another writer on the same listing.
"""

from __future__ import annotations

import logging
from datetime import datetime

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import F, QuerySet  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.listings.models import Listing
from apps.users.policy import Action, Actor, ensure_can_act
from shared.domain.errors import (
    AvailabilityConflictError,
    FailedTransitionError,
    InactiveListingError,
    NotFoundError,
    ValidationError,
)
from shared.domain.value_objects import BookingSnapshot, StayPeriod

from .availability import is_available
from .models import Booking

logger = logging.getLogger(__name__)

# Name of the PostgreSQL exclusion constraint installed by migration 0002.
NO_OVERLAP_CONSTRAINT = "booking_no_overlap"


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def _as_actor(actor) -> Actor:  # type: ignore
    return actor if isinstance(actor, Actor) else Actor.from_user(actor)


def _lock_listing(listing_id) -> Listing:
    """Enter the per-listing critical section and return the listing.

    Must be the first statement of the surrounding transaction.
    """

    updated = Listing.objects.filter(pk=listing_id).update(
        availability_revision=F("availability_revision") + 1
    )
    if not updated:
        raise NotFoundError("Listing not found.")
    return Listing.objects.select_related("owner").get(pk=listing_id)


def _get_booking(booking_id, *, lock: bool = False) -> Booking:
    queryset = Booking.objects.filter(pk=booking_id)
    if lock:
        queryset = _lock_queryset_if_possible(queryset)
    booking = queryset.first()
    if booking is None:
        raise NotFoundError("Booking not found.")
    return booking


def _is_overlap_violation(exc: IntegrityError) -> bool:
    return NO_OVERLAP_CONSTRAINT in str(exc)


def create_booking(
    requester,
    listing_id,
    arrival: datetime,
    departure: datetime,
    guest_count: int = 1,
    title: str = "",
) -> Booking:
    """Reserve ``listing_id`` for ``[arrival, departure)`` on behalf of ``requester``."""

    period = StayPeriod(arrival, departure)
    if guest_count is None or guest_count < 1:
        raise ValidationError("At least one guest is required.")

    with transaction.atomic():
        listing = _lock_listing(listing_id)

        if not listing.is_active:
            raise InactiveListingError()
        if listing.capacity is not None and guest_count > listing.capacity:
            raise ValidationError(
                f"This listing accommodates at most {listing.capacity} guests."
            )
        if not is_available(listing.pk, period.arrival, period.departure):
            logger.warning(
                f"Booking rejected for listing {listing.pk}: {period} overlaps an active booking"
            )
            raise AvailabilityConflictError()

        booking = Booking(
            requester=requester,
            listing=listing,
            title=title or listing.title,
            arrival=period.arrival,
            departure=period.departure,
            guest_count=guest_count,
            total_price=period.price_for(listing.price_per_night),
            status=Booking.Status.PENDING,
        )
        booking.apply_snapshot(BookingSnapshot.capture(listing))

        try:
            with transaction.atomic():
                booking.save()
        except IntegrityError as exc:
            if _is_overlap_violation(exc):
                raise AvailabilityConflictError() from exc
            raise

    logger.info(
        f"Booking {booking.pk} created for listing {listing.pk} by user {booking.requester_id}: "
        f"{period}, {period.nights} nights, total {booking.total_price}"
    )
    return booking


def transition_booking(booking_id, actor, target_status: str) -> Booking:
    """Move a booking to ``target_status`` if the actor and the state machine allow it."""

    if target_status not in Booking.Status.values:
        raise ValidationError(f"Unknown booking status: {target_status}.")
    actor = _as_actor(actor)

    with transaction.atomic():
        booking = _get_booking(booking_id, lock=True)
        ensure_can_act(
            actor,
            Action.for_status(target_status),
            owner_id=booking.requester_id,
            listing_owner_id=booking.listing.owner_id,
        )
        if not booking.can_transition_to(target_status):
            logger.warning(
                f"Rejected transition of booking {booking.pk}: {booking.status} -> {target_status}"
            )
            raise FailedTransitionError(
                f"Cannot change booking status from {booking.status} to {target_status}."
            )

        previous = booking.status
        booking.status = target_status
        booking.save(update_fields=["status", "updated_at"])

    logger.info(f"Booking {booking.pk} moved {previous} -> {target_status} by user {actor.id}")
    return booking


def reschedule_booking(booking_id, actor, arrival: datetime, departure: datetime) -> Booking:
    """Move a pending booking to new dates, ignoring its own current period."""

    period = StayPeriod(arrival, departure)
    actor = _as_actor(actor)

    with transaction.atomic():
        # Lock the listing through the booking so the write comes first.
        updated = Listing.objects.filter(bookings__pk=booking_id).update(
            availability_revision=F("availability_revision") + 1
        )
        if not updated:
            raise NotFoundError("Booking not found.")

        booking = _get_booking(booking_id, lock=True)
        ensure_can_act(
            actor,
            Action.EDIT,
            owner_id=booking.requester_id,
            listing_owner_id=booking.listing.owner_id,
        )
        if booking.status != Booking.Status.PENDING:
            raise FailedTransitionError("Only pending bookings can be rescheduled.")
        if not is_available(
            booking.listing_id,
            period.arrival,
            period.departure,
            exclude_booking_id=booking.pk,
        ):
            raise AvailabilityConflictError()

        booking.arrival = period.arrival
        booking.departure = period.departure
        booking.total_price = period.price_for(booking.listing.price_per_night)
        try:
            with transaction.atomic():
                booking.save(update_fields=["arrival", "departure", "total_price", "updated_at"])
        except IntegrityError as exc:
            if _is_overlap_violation(exc):
                raise AvailabilityConflictError() from exc
            raise

    logger.info(f"Booking {booking.pk} rescheduled to {period} by user {actor.id}")
    return booking


def update_booking(
    booking_id,
    actor,
    *,
    arrival: datetime | None = None,
    departure: datetime | None = None,
    target_status: str | None = None,
) -> Booking:
    """Reschedule and/or change the status of a booking as one unit.

    Both steps share a transaction: if the status change is rejected, the
    new dates are rolled back as well.
    """

    if (arrival is None) != (departure is None):
        raise ValidationError("Arrival and departure must be changed together.")
    if arrival is None and target_status is None:
        raise ValidationError("Nothing to update.")

    with transaction.atomic():
        booking = None
        if arrival is not None:
            booking = reschedule_booking(booking_id, actor, arrival, departure)
        if target_status is not None:
            booking = transition_booking(booking_id, actor, target_status)
    return booking


def delete_booking(booking_id, actor) -> bool:
    """Remove a booking. Only its requester or an administrator may do so."""

    actor = _as_actor(actor)
    with transaction.atomic():
        booking = _get_booking(booking_id, lock=True)
        ensure_can_act(
            actor,
            Action.DELETE,
            owner_id=booking.requester_id,
            listing_owner_id=booking.listing.owner_id,
            message="Only the requester or an administrator can delete a booking.",
        )
        booking.delete()

    logger.info(f"Booking {booking_id} deleted by user {actor.id}")
    return True


def check_availability(listing_id, arrival: datetime, departure: datetime) -> bool:
    if not Listing.objects.filter(pk=listing_id).exists():
        raise NotFoundError("Listing not found.")
    return is_available(listing_id, arrival, departure)


def bookings_for_requester(user_id) -> QuerySet:
    return (
        Booking.objects.filter(requester_id=user_id)
        .select_related("listing", "requester")
        .order_by("-created_at", "-id")
    )


def bookings_for_listing(listing_id, ordering: list[str] | tuple[str, ...] | None = None) -> QuerySet:
    queryset = Booking.objects.filter(listing_id=listing_id).select_related("listing", "requester")
    return queryset.order_by(*(ordering or ("-created_at", "-id")))


def bookings_received(owner_id) -> QuerySet:
    """Bookings made on any listing owned by ``owner_id``."""
    return (
        Booking.objects.filter(listing__owner_id=owner_id)
        .select_related("listing", "requester")
        .order_by("-created_at", "-id")
    )
