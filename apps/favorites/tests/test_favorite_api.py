"""Tests for favorite listings."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.favorites import services
from apps.favorites.models import Favorite
from apps.listings.models import Listing
from apps.users.models import User


class FavoriteAPITests(APITestCase):
    def setUp(self) -> None:
        owner = User.objects.create_user(email='host@example.com', password='StrongPass123')
        self.user = User.objects.create_user(email='fan@example.com', password='StrongPass123')
        self.listing = Listing.objects.create(
            owner=owner,
            title='Chalet',
            city='Zermatt',
            address='Bahnhofstrasse 5',
            price_per_night=Decimal('250.00'),
        )
        self.client.force_authenticate(self.user)

    def test_toggle_adds_then_removes(self) -> None:
        url = reverse('favorite-toggle')

        response = self.client.post(url, {'listing': self.listing.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, {'is_favorite': True})
        self.assertTrue(Favorite.objects.filter(user=self.user, listing=self.listing).exists())

        response = self.client.post(url, {'listing': self.listing.id}, format='json')
        self.assertEqual(response.data, {'is_favorite': False})
        self.assertFalse(Favorite.objects.exists())

    def test_add_and_remove(self) -> None:
        url = reverse('favorite-by-listing', args=[self.listing.id])

        response = self.client.post(url)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['listing']['id'], self.listing.id)

        duplicate = self.client.post(url)
        self.assertEqual(duplicate.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(duplicate.data['code'], 'duplicate')

        self.assertEqual(self.client.delete(url).status_code, status.HTTP_204_NO_CONTENT)
        missing = self.client.delete(url)
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_and_check(self) -> None:
        check_url = reverse('favorite-check', args=[self.listing.id])
        self.assertEqual(self.client.get(check_url).data, {'is_favorite': False})

        services.add_favorite(self.user, self.listing.id)

        self.assertEqual(self.client.get(check_url).data, {'is_favorite': True})
        response = self.client.get(reverse('favorite-list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['listing']['id'] for item in response.data], [self.listing.id])
        self.assertEqual(services.favorite_count(self.listing.id), 1)

    def test_unknown_listing_is_not_found(self) -> None:
        response = self.client.post(reverse('favorite-toggle'), {'listing': 999999}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.post(reverse('favorite-by-listing', args=[999999])).status_code, 404)

    def test_requires_authentication(self) -> None:
        self.client.force_authenticate(None)
        self.assertEqual(self.client.get(reverse('favorite-list')).status_code, status.HTTP_401_UNAUTHORIZED)
