"""Tests for the health endpoint and the API exception handler."""

from __future__ import annotations

from django.test import TestCase
from django.urls import reverse
from rest_framework import exceptions, status

from shared.domain.errors import AvailabilityConflictError, NotFoundError
from shared.infrastructure.exception_handler import domain_exception_handler


class HealthTests(TestCase):
    def test_healthy(self) -> None:
        response = self.client.get(reverse('health'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'status': 'healthy', 'database': 'connected'})

    def test_only_get_is_allowed(self) -> None:
        self.assertEqual(self.client.post(reverse('health')).status_code, 405)


class ExceptionHandlerTests(TestCase):
    def test_domain_errors_carry_status_and_code(self) -> None:
        response = domain_exception_handler(AvailabilityConflictError(), {})
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data, {
            'detail': 'The selected dates are not available.',
            'code': 'availability_conflict',
        })

        response = domain_exception_handler(NotFoundError('Listing not found.'), {})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['detail'], 'Listing not found.')

    def test_framework_errors_keep_default_handling(self) -> None:
        response = domain_exception_handler(exceptions.ValidationError({'rating': ['Too high.']}), {})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'rating': ['Too high.']})

    def test_unexpected_errors_become_generic_500(self) -> None:
        response = domain_exception_handler(RuntimeError('boom'), {})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['code'], 'internal_error')
        self.assertNotIn('boom', response.data['detail'])
