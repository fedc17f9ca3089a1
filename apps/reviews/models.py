"""Models for the review domain.

Defines the ``Review`` entity representing feedback and ratings
submitted by guests for listings they have stayed at. Each review
includes a numerical rating, an optional comment and timestamps.
One user can leave at most one review per listing.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MaxLengthValidator, MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

MIN_RATING = 1
MAX_RATING = 5
MAX_COMMENT_LENGTH = 2000


class Review(models.Model):
    """Represents a review left by a guest for a listing."""

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews'
    )
    listing = models.ForeignKey(
        'listings.Listing', on_delete=models.CASCADE, related_name='reviews'
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)],
        help_text=_('Rating from 1 to 5'),
    )
    comment = models.TextField(
        blank=True,
        validators=[MaxLengthValidator(MAX_COMMENT_LENGTH)],
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['author', 'listing'], name='review_one_per_author_listing'),
            models.CheckConstraint(
                condition=models.Q(rating__gte=MIN_RATING) & models.Q(rating__lte=MAX_RATING),
                name='review_rating_range',
            ),
        ]

    def __str__(self) -> str:
        return f"Review {self.rating}/5 for listing {self.listing_id} by user {self.author_id}"
