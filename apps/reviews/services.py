"""Domain services for reviews."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Avg, Count, QuerySet  # type: ignore

from apps.bookings.models import Booking
from apps.listings.models import Listing
from apps.users.policy import Action, Actor, ensure_can_act
from shared.domain.errors import (
    DuplicateError,
    NotFoundError,
    PrerequisiteNotMetError,
    ValidationError,
)

from .models import MAX_COMMENT_LENGTH, MAX_RATING, MIN_RATING, Review

logger = logging.getLogger(__name__)


def _validate_rating(rating) -> int:  # type: ignore
    if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}.")
    return rating


def _validate_comment(comment: str | None) -> str:
    comment = comment or ""
    if len(comment) > MAX_COMMENT_LENGTH:
        raise ValidationError(f"Comment cannot exceed {MAX_COMMENT_LENGTH} characters.")
    return comment


def _get_review(review_id) -> Review:
    review = Review.objects.select_related("author", "listing").filter(pk=review_id).first()
    if review is None:
        raise NotFoundError("Review not found.")
    return review


def create_review(author, listing_id, rating: int, comment: str = "") -> Review:
    """Leave a review; requires a completed stay and at most one review per listing."""

    rating = _validate_rating(rating)
    comment = _validate_comment(comment)

    if not Listing.objects.filter(pk=listing_id).exists():
        raise NotFoundError("Listing not found.")

    has_completed_stay = Booking.objects.filter(
        requester_id=author.pk,
        listing_id=listing_id,
        status=Booking.Status.COMPLETED,
    ).exists()
    if not has_completed_stay:
        raise PrerequisiteNotMetError("You can only review a listing after a completed stay.")

    if Review.objects.filter(author_id=author.pk, listing_id=listing_id).exists():
        raise DuplicateError("You have already reviewed this listing.")

    try:
        with transaction.atomic():
            review = Review.objects.create(
                author=author,
                listing_id=listing_id,
                rating=rating,
                comment=comment,
            )
    except IntegrityError as exc:
        raise DuplicateError("You have already reviewed this listing.") from exc

    logger.info(f"Review {review.pk} ({rating}/5) created for listing {listing_id} by user {author.pk}")
    return review


def update_review(review_id, actor, rating: int | None = None, comment: str | None = None) -> Review:
    review = _get_review(review_id)
    actor = actor if isinstance(actor, Actor) else Actor.from_user(actor)
    ensure_can_act(actor, Action.EDIT, owner_id=review.author_id)

    update_fields = ["updated_at"]
    if rating is not None:
        review.rating = _validate_rating(rating)
        update_fields.append("rating")
    if comment is not None:
        review.comment = _validate_comment(comment)
        update_fields.append("comment")
    review.save(update_fields=update_fields)
    return review


def delete_review(review_id, actor) -> bool:
    review = _get_review(review_id)
    actor = actor if isinstance(actor, Actor) else Actor.from_user(actor)
    ensure_can_act(actor, Action.DELETE, owner_id=review.author_id)
    review.delete()
    logger.info(f"Review {review_id} deleted by user {actor.id}")
    return True


def rating_summary(listing_id) -> dict[str, float | int]:
    if not Listing.objects.filter(pk=listing_id).exists():
        raise NotFoundError("Listing not found.")
    stats = Review.objects.filter(listing_id=listing_id).aggregate(
        average=Avg("rating"),
        count=Count("id"),
    )
    average = stats["average"]
    return {
        "average": round(float(average), 2) if average is not None else 0,
        "count": stats["count"],
    }


def reviews_for_listing(listing_id) -> QuerySet:
    return Review.objects.filter(listing_id=listing_id).select_related("author").order_by("-created_at", "-id")


def reviews_by_author(author_id) -> QuerySet:
    return Review.objects.filter(author_id=author_id).select_related("listing").order_by("-created_at", "-id")
