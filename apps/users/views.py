"""User API views."""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.domain.errors import ForbiddenError, ValidationError

from .permissions import IsAdmin, IsSelfOrAdmin
from .serializers import RoleSerializer, UserSerializer

User = get_user_model()
logger = logging.getLogger(__name__)


class UserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """User management.

    - the list and role changes are available to administrators only
    - a profile can be read and edited by the user themself or an administrator
    - administrators can delete any account except their own
    """

    serializer_class = UserSerializer
    queryset = User.objects.all()

    def get_permissions(self):  # type: ignore
        if self.action in {"list", "destroy", "set_role"}:
            return [permissions.IsAuthenticated(), IsAdmin()]
        return [permissions.IsAuthenticated(), IsSelfOrAdmin()]

    def perform_destroy(self, instance) -> None:  # type: ignore
        if instance.pk == self.request.user.pk:
            raise ForbiddenError("Administrators cannot delete their own account.")
        logger.info(f"User {instance.pk} deleted by {self.request.user.pk}")
        instance.delete()

    @action(detail=True, methods=["patch"], url_path="role")
    def set_role(self, request, pk=None):  # type: ignore
        """Change a user's role."""
        user = self.get_object()
        serializer = RoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        role = serializer.validated_data["role"]

        if user.pk == request.user.pk and role != User.RoleChoices.ADMIN:
            raise ValidationError("Administrators cannot remove their own admin role.")

        user.role = role
        user.save(update_fields=["role", "updated_at"])
        logger.info(f"User {user.pk} role changed to {role} by {request.user.pk}")
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)
