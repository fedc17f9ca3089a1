"""Booking routes.

    GET/POST            /api/v1/bookings/
    GET/PATCH/DELETE    /api/v1/bookings/{id}/
    GET                 /api/v1/bookings/received/
    GET                 /api/v1/bookings/listing/{listing_id}/
    GET                 /api/v1/bookings/check-availability/
"""

from __future__ import annotations

from rest_framework.routers import DefaultRouter  # type: ignore

from .views import BookingViewSet

router = DefaultRouter()
router.register(r"", BookingViewSet, basename="booking")

urlpatterns = router.urls
