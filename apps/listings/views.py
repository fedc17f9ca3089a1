"""Listing API views."""

from __future__ import annotations

import logging

from django.db.models import Avg, Count, Q  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsOwnerOrAdminOrReadOnly
from apps.users.policy import Actor

from .filters import ListingFilterSet
from .models import Listing
from .serializers import ListingDetailSerializer, ListingSerializer, ListingWriteSerializer

logger = logging.getLogger(__name__)


class ListingViewSet(viewsets.ModelViewSet):
    """Listings: public search and detail, owner or admin management.

    Anonymous visitors only see active listings. Signed-in users also see
    their own inactive ones; administrators see everything.
    """

    queryset = Listing.objects.select_related("owner")
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsOwnerOrAdminOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = ListingFilterSet
    ordering_fields = ["price_per_night", "created_at", "capacity"]
    ordering = ["-id"]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset().annotate(
            average_rating=Avg("reviews__rating"),
            review_count=Count("reviews", distinct=True),
        )
        user = self.request.user
        actor = Actor.from_user(user)
        if actor.is_admin:
            return qs
        if actor.id is not None:
            return qs.filter(Q(is_active=True) | Q(owner_id=actor.id))
        return qs.filter(is_active=True)

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return ListingWriteSerializer
        if self.action == "retrieve":
            return ListingDetailSerializer
        return ListingSerializer

    def _detail_response(self, listing: Listing, status_code: int) -> Response:
        listing = self.get_queryset().get(pk=listing.pk)
        serializer = ListingDetailSerializer(listing, context=self.get_serializer_context())
        return Response(serializer.data, status=status_code)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = serializer.save()
        logger.info(f"Listing {listing.pk} created by user {request.user.pk}")
        return self._detail_response(listing, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        listing = serializer.save()
        return self._detail_response(listing, status.HTTP_200_OK)

    def perform_destroy(self, instance: Listing) -> None:
        logger.info(f"Listing {instance.pk} deleted by user {self.request.user.pk}")
        instance.delete()
