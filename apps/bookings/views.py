"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.listings.models import Listing
from apps.users.permissions import IsBookingStakeholder
from apps.users.policy import Action, Actor, ensure_can_act
from shared.domain.errors import NotFoundError

from . import services
from .models import Booking
from .serializers import (
    AvailabilityQuerySerializer,
    BookingCreateSerializer,
    BookingSerializer,
    BookingUpdateSerializer,
)


class BookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Bookings of the current user, plus the lifecycle operations.

    Administrators list every booking; everybody else lists their own.
    Status changes and deletion are authorized by the booking services.
    """

    queryset = Booking.objects.select_related("listing", "listing__owner", "requester").all()
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated, IsBookingStakeholder]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        actor = Actor.from_user(self.request.user)
        if actor.is_admin or self.action in {"retrieve", "partial_update", "destroy"}:
            # Object access is decided by the policy, not by the list scope.
            return qs
        return qs.filter(requester_id=actor.id)

    def _read(self, booking: Booking, status_code: int = status.HTTP_200_OK) -> Response:
        serializer = BookingSerializer(booking, context=self.get_serializer_context())
        return Response(serializer.data, status=status_code)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        booking = services.create_booking(
            request.user,
            data["listing"],
            data["arrival"],
            data["departure"],
            guest_count=data["guest_count"],
            title=data.get("title", ""),
        )
        return self._read(booking, status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):  # type: ignore
        serializer = BookingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        booking = services.update_booking(
            kwargs["pk"],
            request.user,
            arrival=data.get("arrival"),
            departure=data.get("departure"),
            target_status=data.get("status"),
        )
        booking = self.get_queryset().get(pk=booking.pk)
        return self._read(booking)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        services.delete_booking(kwargs["pk"], request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"])
    def received(self, request):  # type: ignore
        """Bookings made on the current user's listings."""
        bookings = services.bookings_received(request.user.pk)
        return Response(BookingSerializer(bookings, many=True, context=self.get_serializer_context()).data)

    @action(detail=False, methods=["get"], url_path=r"listing/(?P<listing_id>\d+)")
    def for_listing(self, request, listing_id=None):  # type: ignore
        """Bookings of one listing, by arrival date. Listing owner or admin only."""
        listing = Listing.objects.filter(pk=listing_id).only("id", "owner_id").first()
        if listing is None:
            raise NotFoundError("Listing not found.")
        ensure_can_act(Actor.from_user(request.user), Action.VIEW, owner_id=listing.owner_id)
        bookings = services.bookings_for_listing(listing.pk, ordering=("arrival", "id"))
        return Response(BookingSerializer(bookings, many=True, context=self.get_serializer_context()).data)

    @action(
        detail=False,
        methods=["get"],
        url_path="check-availability",
        permission_classes=[permissions.AllowAny],
    )
    def check_availability(self, request):  # type: ignore
        """Public availability check for ``listing``, ``arrival`` and ``departure``."""
        serializer = AvailabilityQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        available = services.check_availability(data["listing"], data["arrival"], data["departure"])
        return Response({"available": available})
