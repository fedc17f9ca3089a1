"""API tests for authentication endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import RevokedToken, User
from apps.users.tasks import purge_expired_revocations


class AuthAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="guest@example.com",
            password="CorrectPassword1",
            username="guest",
        )

    def _login(self) -> dict[str, str]:
        response = self.client.post(
            reverse("auth:login"),
            {"email": self.user.email, "password": "CorrectPassword1"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        return response.data["tokens"]

    def test_register_returns_tokens(self) -> None:
        payload = {
            "email": "new@example.com",
            "username": "newcomer",
            "password": "StrongPass123",
            "password_confirm": "StrongPass123",
        }

        response = self.client.post(reverse("auth:register"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn("access", response.data["tokens"])
        self.assertIn("refresh", response.data["tokens"])
        self.assertEqual(response.data["user"]["email"], payload["email"])
        self.assertEqual(response.data["user"]["role"], User.RoleChoices.USER)

    def test_register_rejects_duplicate_email(self) -> None:
        payload = {
            "email": self.user.email,
            "password": "StrongPass123",
            "password_confirm": "StrongPass123",
        }
        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_login_with_wrong_password_fails(self) -> None:
        response = self.client.post(
            reverse("auth:login"),
            {"email": self.user.email, "password": "wrong-password"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_me_returns_current_user(self) -> None:
        tokens = self._login()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = self.client.get(reverse("auth:me"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["email"], self.user.email)

    def test_refresh_issues_new_access_token(self) -> None:
        tokens = self._login()
        response = self.client.post(reverse("auth:token_refresh"), {"refresh": tokens["refresh"]}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIn("access", response.data)

    def test_logout_revokes_access_and_refresh_tokens(self) -> None:
        tokens = self._login()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = self.client.post(reverse("auth:logout"), {"refresh": tokens["refresh"]}, format="json")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT, response.data)
        self.assertEqual(RevokedToken.objects.filter(user=self.user).count(), 2)

        me_response = self.client.get(reverse("auth:me"))
        self.assertEqual(me_response.status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.credentials()
        refresh_response = self.client.post(
            reverse("auth:token_refresh"), {"refresh": tokens["refresh"]}, format="json"
        )
        self.assertEqual(refresh_response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_logout_requires_authentication(self) -> None:
        response = self.client.post(reverse("auth:logout"), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_purge_removes_only_expired_revocations(self) -> None:
        now = timezone.now()
        RevokedToken.objects.create(
            jti="expired",
            token_type=RevokedToken.TokenType.ACCESS,
            user=self.user,
            expires_at=now - timedelta(minutes=1),
        )
        RevokedToken.objects.create(
            jti="still-valid",
            token_type=RevokedToken.TokenType.REFRESH,
            user=self.user,
            expires_at=now + timedelta(days=1),
        )

        result = purge_expired_revocations()

        self.assertEqual(result, {"purged": 1})
        self.assertEqual(list(RevokedToken.objects.values_list("jti", flat=True)), ["still-valid"])
