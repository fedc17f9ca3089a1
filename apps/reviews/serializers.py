"""Serializers for reviews."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer

from .models import MAX_COMMENT_LENGTH, MAX_RATING, MIN_RATING, Review


class ReviewSerializer(serializers.ModelSerializer):
    """Read representation of a review."""

    author = UserShortSerializer(read_only=True)
    listing_id = serializers.ReadOnlyField(source='listing.id')

    class Meta:
        model = Review
        fields = ['id', 'author', 'listing_id', 'rating', 'comment', 'created_at', 'updated_at']


class ReviewCreateSerializer(serializers.Serializer):
    listing = serializers.IntegerField(min_value=1)
    rating = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING)
    comment = serializers.CharField(max_length=MAX_COMMENT_LENGTH, required=False, allow_blank=True, default='')


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING, required=False)
    comment = serializers.CharField(max_length=MAX_COMMENT_LENGTH, required=False, allow_blank=True)
