"""Routes for user profiles and role management."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter  # type: ignore

from .views import UserViewSet

router = DefaultRouter()
router.register(r'', UserViewSet, basename='user')

# /api/v1/users/, /api/v1/users/{id}/, /api/v1/users/{id}/role/
urlpatterns = router.urls
