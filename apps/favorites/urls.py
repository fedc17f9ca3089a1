"""URL routing for favorites."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import FavoriteViewSet

router = DefaultRouter()
router.register(r'', FavoriteViewSet, basename='favorite')

favorite_by_listing = FavoriteViewSet.as_view({'post': 'add', 'delete': 'remove'})

urlpatterns = [
    path('<int:listing_id>/', favorite_by_listing, name='favorite-by-listing'),
    path('', include(router.urls)),
]
