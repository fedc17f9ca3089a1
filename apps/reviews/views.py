"""API views for managing reviews."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsAuthorOrAdminOrReadOnly

from . import services
from .filters import ReviewFilterSet
from .models import Review
from .serializers import ReviewCreateSerializer, ReviewSerializer, ReviewUpdateSerializer


class ReviewViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Viewset for creating, retrieving, editing and deleting reviews.

    Reviews are public. Writes are authorized by the review services.
    """

    queryset = Review.objects.select_related('listing', 'author').all()
    serializer_class = ReviewSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsAuthorOrAdminOrReadOnly]
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']
    filter_backends = [DjangoFilterBackend]
    filterset_class = ReviewFilterSet

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        review = services.create_review(request.user, data['listing'], data['rating'], data.get('comment', ''))
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):  # type: ignore
        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        review = services.update_review(
            kwargs['pk'],
            request.user,
            rating=data.get('rating'),
            comment=data.get('comment'),
        )
        return Response(ReviewSerializer(review).data)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        services.delete_review(kwargs['pk'], request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(
        detail=False,
        methods=['get'],
        url_path=r'listing/(?P<listing_id>\d+)/rating',
        permission_classes=[permissions.AllowAny],
    )
    def rating(self, request, listing_id=None):  # type: ignore
        """Average rating and review count of a listing."""
        return Response(services.rating_summary(listing_id))
