"""
Common Value Objects

Value objects used across the reservation domain:
- StayPeriod: a half-open [arrival, departure) interval of a stay
- BookingSnapshot: listing details frozen at the moment a booking is made
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from shared.domain.base import ValueObject
from shared.domain.errors import InvalidRangeError

ONE_NIGHT = timedelta(days=1)


@dataclass(frozen=True)
class StayPeriod(ValueObject):
    """
    Stay period value object

    Represents a range from arrival (inclusive) to departure (exclusive).
    Used for booking periods and availability checks.
    """
    arrival: datetime
    departure: datetime

    def __post_init__(self):
        if self.departure <= self.arrival:
            raise InvalidRangeError(
                f"Departure ({self.departure.isoformat()}) must be after arrival ({self.arrival.isoformat()})."
            )

    def overlaps(self, other: 'StayPeriod') -> bool:
        """
        Check if this period overlaps with another

        End instants are excluded, so a stay departing at T and one
        arriving at T do not overlap.

        Examples:
            - [10, 13) overlaps with [12, 15) -> True
            - [10, 13) overlaps with [13, 15) -> False (adjacent)
        """
        if not isinstance(other, StayPeriod):
            raise TypeError("Can only check overlap with another StayPeriod")

        return self.arrival < other.departure and other.arrival < self.departure

    @property
    def nights(self) -> int:
        """Number of started 24h periods, rounded up."""
        return -((self.arrival - self.departure) // ONE_NIGHT)

    def price_for(self, nightly_price: Decimal) -> Decimal:
        return (Decimal(nightly_price) * self.nights).quantize(Decimal("0.01"))

    def __str__(self):
        return f"{self.arrival.isoformat()} - {self.departure.isoformat()}"

    def __repr__(self):
        return f"StayPeriod({self.arrival!r}, {self.departure!r})"


@dataclass(frozen=True)
class BookingSnapshot(ValueObject):
    """
    Listing details copied onto a booking when it is created

    Later edits to the listing or its owner never rewrite these values.
    """
    city: str = ''
    address: str = ''
    contact: str = ''

    @classmethod
    def capture(cls, listing) -> 'BookingSnapshot':
        owner = getattr(listing, 'owner', None)
        return cls(
            city=listing.city or '',
            address=listing.address or '',
            contact=getattr(owner, 'email', '') or '',
        )
