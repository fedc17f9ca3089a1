"""Domain services for favorites."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import QuerySet  # type: ignore

from apps.listings.models import Listing
from shared.domain.errors import DuplicateError, NotFoundError

from .models import Favorite

logger = logging.getLogger(__name__)


def _ensure_listing_exists(listing_id) -> None:
    if not Listing.objects.filter(pk=listing_id).exists():
        raise NotFoundError("Listing not found.")


def toggle_favorite(user, listing_id) -> dict[str, bool]:
    """Remove the favorite if present, otherwise add it.

    A concurrent toggle that inserts first makes our insert hit the unique
    constraint; the listing is then favorited, which is what we report.
    """

    _ensure_listing_exists(listing_id)

    deleted, _ = Favorite.objects.filter(user_id=user.pk, listing_id=listing_id).delete()
    if deleted:
        return {"is_favorite": False}

    try:
        with transaction.atomic():
            Favorite.objects.create(user_id=user.pk, listing_id=listing_id)
    except IntegrityError:
        return {"is_favorite": True}
    return {"is_favorite": True}


def add_favorite(user, listing_id) -> Favorite:
    _ensure_listing_exists(listing_id)
    try:
        with transaction.atomic():
            favorite = Favorite.objects.create(user_id=user.pk, listing_id=listing_id)
    except IntegrityError as exc:
        raise DuplicateError("This listing is already in your favorites.") from exc
    logger.info(f"Listing {listing_id} added to favorites of user {user.pk}")
    return favorite


def remove_favorite(user, listing_id) -> bool:
    _ensure_listing_exists(listing_id)
    deleted, _ = Favorite.objects.filter(user_id=user.pk, listing_id=listing_id).delete()
    if not deleted:
        raise NotFoundError("This listing is not in your favorites.")
    return True


def is_favorite(user, listing_id) -> bool:
    _ensure_listing_exists(listing_id)
    return Favorite.objects.filter(user_id=user.pk, listing_id=listing_id).exists()


def favorites_for_user(user_id) -> QuerySet:
    return (
        Favorite.objects.filter(user_id=user_id)
        .select_related("listing", "listing__owner")
        .order_by("-created_at", "-id")
    )


def favorite_count(listing_id) -> int:
    _ensure_listing_exists(listing_id)
    return Favorite.objects.filter(listing_id=listing_id).count()
