"""Racing review submissions by the same author."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from decimal import Decimal
from unittest import mock

from django.db import connection
from django.test import TestCase, TransactionTestCase

from apps.bookings.models import Booking
from apps.listings.models import Listing
from apps.reviews import services
from apps.reviews.models import Review
from apps.users.models import User
from shared.domain.errors import DuplicateError


class _CompletedStayMixin:
    def _setup_stay(self) -> None:
        owner = User.objects.create_user(email='host@example.com', password='StrongPass123')
        self.guest = User.objects.create_user(email='guest@example.com', password='StrongPass123')
        self.listing = Listing.objects.create(
            owner=owner,
            title='House by the lake',
            city='Annecy',
            address='1 quai',
            price_per_night=Decimal('150.00'),
        )
        Booking.objects.create(
            requester=self.guest,
            listing=self.listing,
            arrival=datetime(2030, 2, 1, tzinfo=timezone.utc),
            departure=datetime(2030, 2, 4, tzinfo=timezone.utc),
            total_price=Decimal('450.00'),
            status=Booking.Status.COMPLETED,
        )


class ConcurrentReviewTests(_CompletedStayMixin, TransactionTestCase):
    def setUp(self) -> None:
        self._setup_stay()

    def test_only_one_of_two_simultaneous_reviews_is_kept(self) -> None:
        barrier = threading.Barrier(2)
        results: list[object] = [None, None]

        def attempt(index: int) -> None:
            try:
                barrier.wait()
                results[index] = services.create_review(self.guest, self.listing.id, 4 + index)
            except Exception as exc:  # noqa: BLE001
                results[index] = exc
            finally:
                connection.close()

        threads = [threading.Thread(target=attempt, args=(i,)) for i in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        created = [r for r in results if isinstance(r, Review)]
        duplicates = [r for r in results if isinstance(r, DuplicateError)]
        self.assertEqual(len(created), 1, results)
        self.assertEqual(len(duplicates), 1, results)
        self.assertEqual(Review.objects.filter(author=self.guest, listing=self.listing).count(), 1)


class ReviewInsertRaceTests(_CompletedStayMixin, TestCase):
    def setUp(self) -> None:
        self._setup_stay()

    def test_unique_violation_becomes_duplicate_error(self) -> None:
        # The other request's review lands between our check and our insert.
        Review.objects.create(author=self.guest, listing=self.listing, rating=5)
        not_found = mock.Mock()
        not_found.exists.return_value = False

        with mock.patch.object(Review.objects, 'filter', return_value=not_found):
            with self.assertRaises(DuplicateError):
                services.create_review(self.guest, self.listing.id, 3)

        self.assertEqual(Review.objects.filter(author=self.guest).count(), 1)
