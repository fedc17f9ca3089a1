"""Views for authentication flows (register, login, token refresh, logout, me)."""

from __future__ import annotations

from rest_framework import status  # type: ignore
from rest_framework.permissions import AllowAny, IsAuthenticated  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore
from rest_framework_simplejwt.settings import api_settings  # type: ignore
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore
from rest_framework_simplejwt.views import TokenRefreshView  # type: ignore

from .auth_serializers import (
    LoginSerializer,
    LogoutSerializer,
    RegisterSerializer,
    RevocationAwareTokenRefreshSerializer,
)
from .serializers import UserSerializer
from .services import revoke_token


def _tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


class RegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        data = {
            "user": UserSerializer(user).data,
            "tokens": _tokens_for_user(user),
        }
        return Response(data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        data = {
            "user": UserSerializer(user).data,
            "tokens": _tokens_for_user(user),
        }
        return Response(data, status=status.HTTP_200_OK)


class RefreshView(TokenRefreshView):
    serializer_class = RevocationAwareTokenRefreshSerializer


class LogoutView(APIView):
    """Revoke the access token used for this request and, if given, the refresh token."""

    permission_classes = [IsAuthenticated]

    def post(self, request):  # type: ignore
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if request.auth is not None:
            revoke_token(request.auth, user=request.user)

        refresh = serializer.validated_data.get("refresh")
        if refresh is not None:
            if str(refresh.get(api_settings.USER_ID_CLAIM)) != str(request.user.pk):
                return Response(
                    {"refresh": ["Refresh token does not belong to this user."]},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            revoke_token(refresh, user=request.user)

        return Response(status=status.HTTP_204_NO_CONTENT)


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):  # type: ignore
        return Response(UserSerializer(request.user).data)
