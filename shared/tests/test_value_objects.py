"""Tests for the stay period and booking snapshot value objects."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from shared.domain.errors import InvalidRangeError, ValidationError
from shared.domain.value_objects import BookingSnapshot, StayPeriod


def day(n: int, hour: int = 0) -> datetime:
    return datetime(2030, 1, n, hour, tzinfo=timezone.utc)


def test_departure_must_follow_arrival():
    with pytest.raises(InvalidRangeError):
        StayPeriod(day(10), day(10))
    with pytest.raises(ValidationError):
        StayPeriod(day(12), day(10))


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((10, 13), (12, 15), True),
        ((10, 13), (13, 15), False),
        ((10, 15), (11, 12), True),
        ((10, 11), (14, 15), False),
    ],
)
def test_overlap_is_symmetric(first, second, expected):
    a = StayPeriod(day(first[0]), day(first[1]))
    b = StayPeriod(day(second[0]), day(second[1]))

    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


def test_one_microsecond_of_shared_time_overlaps():
    a = StayPeriod(day(10), day(13))
    b = StayPeriod(day(13) - timedelta(microseconds=1), day(15))

    assert a.overlaps(b)


def test_nights_round_up_partial_days():
    assert StayPeriod(day(10), day(13)).nights == 3
    assert StayPeriod(day(10, 14), day(11, 10)).nights == 1
    assert StayPeriod(day(10, 14), day(12, 15)).nights == 3


def test_price_for_multiplies_nightly_price():
    assert StayPeriod(day(13), day(15)).price_for(Decimal("100")) == Decimal("200.00")


def test_snapshot_captures_listing_and_owner_contact():
    listing = SimpleNamespace(
        city="Lyon",
        address="1 rue de la République",
        owner=SimpleNamespace(email="host@example.com"),
    )

    snapshot = BookingSnapshot.capture(listing)

    assert snapshot == BookingSnapshot("Lyon", "1 rue de la République", "host@example.com")
