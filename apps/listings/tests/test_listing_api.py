"""Tests for listing search, details and management."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.listings.models import Listing
from apps.reviews.models import Review
from apps.users.models import User


def at(day: int) -> datetime:
    return datetime(2030, 3, day, 15, tzinfo=timezone.utc)


class ListingAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(email="host@example.com", password="StrongPass123")
        self.guest = User.objects.create_user(email="guest@example.com", password="StrongPass123")
        self.admin = User.objects.create_user(
            email="admin@example.com",
            password="StrongPass123",
            role=User.RoleChoices.ADMIN,
        )
        self.paris = Listing.objects.create(
            owner=self.owner,
            title="Loft in Paris",
            city="Paris",
            address="10 rue de Rivoli",
            category=Listing.Category.APARTMENT,
            price_per_night=Decimal("120.00"),
            capacity=4,
        )
        self.nice = Listing.objects.create(
            owner=self.owner,
            title="Villa in Nice",
            city="Nice",
            address="2 promenade des Anglais",
            category=Listing.Category.VILLA,
            price_per_night=Decimal("300.00"),
            capacity=8,
        )
        self.hidden = Listing.objects.create(
            owner=self.owner,
            title="Closed studio",
            city="Paris",
            address="3 rue Oberkampf",
            category=Listing.Category.STUDIO,
            price_per_night=Decimal("60.00"),
            is_active=False,
        )

    def _ids(self, response) -> list[int]:  # type: ignore
        return [item["id"] for item in response.data]

    def test_public_list_shows_active_listings_newest_first(self) -> None:
        response = self.client.get(reverse("listing-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(self._ids(response), [self.nice.id, self.paris.id])

    def test_owner_also_sees_inactive_listings(self) -> None:
        self.client.force_authenticate(self.owner)
        response = self.client.get(reverse("listing-list"))
        self.assertIn(self.hidden.id, self._ids(response))

    def test_filters(self) -> None:
        url = reverse("listing-list")
        self.assertEqual(self._ids(self.client.get(url, {"city": "par"})), [self.paris.id])
        self.assertEqual(self._ids(self.client.get(url, {"category": "VILLA"})), [self.nice.id])
        self.assertEqual(self._ids(self.client.get(url, {"min_price": 100, "max_price": 200})), [self.paris.id])
        self.assertEqual(self._ids(self.client.get(url, {"capacity": 6})), [self.nice.id])

    def test_detail_includes_rating_and_booked_periods(self) -> None:
        Booking.objects.create(
            requester=self.guest,
            listing=self.paris,
            arrival=at(10),
            departure=at(13),
            total_price=Decimal("360.00"),
            status=Booking.Status.COMPLETED,
        )
        Booking.objects.create(
            requester=self.guest,
            listing=self.paris,
            arrival=at(20),
            departure=at(22),
            total_price=Decimal("240.00"),
            status=Booking.Status.CONFIRMED,
        )
        Review.objects.create(author=self.guest, listing=self.paris, rating=4, comment="Nice")

        response = self.client.get(reverse("listing-detail", args=[self.paris.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["average_rating"], 4.0)
        self.assertEqual(response.data["review_count"], 1)
        self.assertEqual(len(response.data["booked_periods"]), 1)
        self.assertEqual(response.data["booked_periods"][0]["arrival"], at(20).isoformat())

    def test_create_requires_authentication(self) -> None:
        payload = {"title": "Room", "city": "Lille", "address": "1 rue", "price_per_night": "40.00"}
        response = self.client.post(reverse("listing-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.force_authenticate(self.guest)
        response = self.client.post(reverse("listing-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["owner"]["id"], self.guest.id)
        self.assertEqual(response.data["booked_periods"], [])

    def test_negative_price_is_rejected(self) -> None:
        self.client.force_authenticate(self.guest)
        payload = {"title": "Room", "city": "Lille", "address": "1 rue", "price_per_night": "-1.00"}
        response = self.client.post(reverse("listing-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_only_owner_or_admin_can_update_or_delete(self) -> None:
        url = reverse("listing-detail", args=[self.paris.id])

        self.client.force_authenticate(self.guest)
        self.assertEqual(self.client.patch(url, {"title": "Mine"}, format="json").status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.owner)
        response = self.client.patch(url, {"title": "Renamed loft"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["title"], "Renamed loft")

        self.client.force_authenticate(self.admin)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Listing.objects.filter(pk=self.paris.id).exists())
