"""API views for favorites management."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .serializers import FavoriteSerializer, FavoriteToggleSerializer


class FavoriteViewSet(viewsets.ViewSet):
    """
    Favorite listings of the current user.

    Endpoints:
    - GET /api/v1/favorites/ - list own favorites
    - POST /api/v1/favorites/toggle/ - add or remove
    - GET /api/v1/favorites/check/{listing_id}/ - is the listing a favorite
    - POST /api/v1/favorites/{listing_id}/ - add
    - DELETE /api/v1/favorites/{listing_id}/ - remove
    """

    permission_classes = [permissions.IsAuthenticated]

    def list(self, request):  # type: ignore
        favorites = services.favorites_for_user(request.user.pk)
        return Response(FavoriteSerializer(favorites, many=True, context={'request': request}).data)

    @action(detail=False, methods=['post'], url_path='toggle')
    def toggle(self, request):  # type: ignore
        serializer = FavoriteToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(services.toggle_favorite(request.user, serializer.validated_data['listing']))

    @action(detail=False, methods=['get'], url_path=r'check/(?P<listing_id>\d+)')
    def check(self, request, listing_id=None):  # type: ignore
        return Response({'is_favorite': services.is_favorite(request.user, listing_id)})

    def add(self, request, listing_id=None):  # type: ignore
        favorite = services.add_favorite(request.user, listing_id)
        return Response(FavoriteSerializer(favorite, context={'request': request}).data, status=status.HTTP_201_CREATED)

    def remove(self, request, listing_id=None):  # type: ignore
        services.remove_favorite(request.user, listing_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
