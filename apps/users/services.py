"""Session services: JWT revocation bookkeeping."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore
from django.utils import timezone  # type: ignore
from rest_framework_simplejwt.settings import api_settings  # type: ignore
from rest_framework_simplejwt.utils import datetime_from_epoch  # type: ignore

from .models import RevokedToken

logger = logging.getLogger(__name__)


def is_revoked(jti: str | None) -> bool:
    if not jti:
        return False
    return RevokedToken.objects.filter(jti=jti).exists()


def revoke_token(token, user=None) -> RevokedToken:  # type: ignore
    """Store the ``jti`` of a validated simplejwt token as revoked.

    Revoking an already revoked token is a no-op that returns the existing row.
    """

    jti = token[api_settings.JTI_CLAIM]
    token_type = token.get(api_settings.TOKEN_TYPE_CLAIM, RevokedToken.TokenType.ACCESS)
    expires_at = datetime_from_epoch(token["exp"])

    try:
        with transaction.atomic():
            revoked = RevokedToken.objects.create(
                jti=jti,
                token_type=token_type,
                user=user,
                expires_at=expires_at,
            )
    except IntegrityError:
        return RevokedToken.objects.get(jti=jti)

    logger.info(f"Revoked {token_type} token {jti} for user {getattr(user, 'pk', None)}")
    return revoked


def purge_expired_revocations() -> int:
    """Delete revocation rows whose tokens have expired on their own."""
    deleted, _ = RevokedToken.objects.filter(expires_at__lte=timezone.now()).delete()
    if deleted:
        logger.info(f"Purged {deleted} expired token revocations")
    return deleted
