"""Concurrent and racing favorite toggles."""

from __future__ import annotations

import threading
from decimal import Decimal
from unittest import mock

from django.db import connection
from django.test import TestCase, TransactionTestCase

from apps.favorites import services
from apps.favorites.models import Favorite
from apps.listings.models import Listing
from apps.users.models import User


def _listing(owner: User) -> Listing:
    return Listing.objects.create(
        owner=owner,
        title='Chalet',
        city='Zermatt',
        address='Bahnhofstrasse 5',
        price_per_night=Decimal('250.00'),
    )


class ConcurrentToggleTests(TransactionTestCase):
    def setUp(self) -> None:
        owner = User.objects.create_user(email='host@example.com', password='StrongPass123')
        self.user = User.objects.create_user(email='fan@example.com', password='StrongPass123')
        self.listing = _listing(owner)

    def test_two_toggles_never_crash_or_duplicate(self) -> None:
        barrier = threading.Barrier(2)
        results: list[object] = [None, None]

        def attempt(index: int) -> None:
            try:
                barrier.wait()
                results[index] = services.toggle_favorite(self.user, self.listing.id)
            except Exception as exc:  # noqa: BLE001
                results[index] = exc
            finally:
                connection.close()

        threads = [threading.Thread(target=attempt, args=(i,)) for i in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertTrue(all(isinstance(r, dict) for r in results), results)
        rows = Favorite.objects.filter(user=self.user, listing=self.listing).count()
        self.assertLessEqual(rows, 1)
        states = sorted(r['is_favorite'] for r in results)  # type: ignore
        # Both inserts raced (one row) or the second toggle removed the first (no row).
        self.assertIn((states, rows), [([True, True], 1), ([False, True], 0)])


class ToggleInsertRaceTests(TestCase):
    def setUp(self) -> None:
        owner = User.objects.create_user(email='host@example.com', password='StrongPass123')
        self.user = User.objects.create_user(email='fan@example.com', password='StrongPass123')
        self.listing = _listing(owner)

    def test_unique_violation_reports_favorited(self) -> None:
        # Another request inserted the row after our delete found nothing.
        Favorite.objects.create(user=self.user, listing=self.listing)
        nothing_deleted = mock.Mock()
        nothing_deleted.delete.return_value = (0, {})

        with mock.patch.object(Favorite.objects, 'filter', return_value=nothing_deleted):
            result = services.toggle_favorite(self.user, self.listing.id)

        self.assertEqual(result, {'is_favorite': True})
        self.assertEqual(Favorite.objects.filter(user=self.user, listing=self.listing).count(), 1)
