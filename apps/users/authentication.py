"""JWT authentication that honours logout."""

from __future__ import annotations

from rest_framework_simplejwt.authentication import JWTAuthentication  # type: ignore
from rest_framework_simplejwt.exceptions import InvalidToken  # type: ignore
from rest_framework_simplejwt.settings import api_settings  # type: ignore

from .services import is_revoked


class RevocationAwareJWTAuthentication(JWTAuthentication):
    """Reject access tokens whose ``jti`` was revoked at logout."""

    def get_validated_token(self, raw_token):  # type: ignore
        token = super().get_validated_token(raw_token)
        if is_revoked(token.get(api_settings.JTI_CLAIM)):
            raise InvalidToken({"detail": "Token has been revoked.", "code": "token_revoked"})
        return token
