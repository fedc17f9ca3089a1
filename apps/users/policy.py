"""Authorization policy shared by every service and API view.

A single pure function decides whether an actor may perform an action on a
resource, given who owns the resource and, for bookings, who owns the
listing the booking belongs to.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from shared.domain.errors import ForbiddenError


ADMIN_ROLE = "ADMIN"


class Action(str, enum.Enum):
    VIEW = "VIEW"
    EDIT = "EDIT"
    DELETE = "DELETE"
    CONFIRM = "CONFIRM"
    CANCEL = "CANCEL"
    COMPLETE = "COMPLETE"

    @classmethod
    def for_status(cls, status: str) -> "Action":
        """Action required to move a booking into ``status``."""
        if status == "CANCELLED":
            return cls.CANCEL
        if status == "COMPLETED":
            return cls.COMPLETE
        return cls.CONFIRM


OWNER_ACTIONS = frozenset(
    {Action.VIEW, Action.EDIT, Action.DELETE, Action.CANCEL, Action.COMPLETE}
)
LISTING_OWNER_ACTIONS = frozenset(
    {Action.VIEW, Action.CONFIRM, Action.CANCEL, Action.COMPLETE}
)


@dataclass(frozen=True)
class Actor:
    id: Any
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

    @classmethod
    def from_user(cls, user) -> "Actor":
        if user is None or not getattr(user, "is_authenticated", False):
            return cls(id=None, role="ANONYMOUS")
        is_admin = (
            getattr(user, "role", None) == ADMIN_ROLE
            or getattr(user, "is_superuser", False)
            or getattr(user, "is_staff", False)
        )
        return cls(id=user.pk, role=ADMIN_ROLE if is_admin else "USER")


def can_act(
    actor: Actor,
    action: Action,
    *,
    owner_id: Any,
    listing_owner_id: Any = None,
) -> bool:
    """Return whether ``actor`` may perform ``action``.

    ``owner_id`` is the resource's own owner (listing owner, booking
    requester, review author, profile user). ``listing_owner_id`` is only
    passed for bookings.
    """

    if actor.is_admin:
        return True
    if actor.id is None:
        return False
    if owner_id is not None and actor.id == owner_id and action in OWNER_ACTIONS:
        return True
    if (
        listing_owner_id is not None
        and actor.id == listing_owner_id
        and action in LISTING_OWNER_ACTIONS
    ):
        return True
    return False


def ensure_can_act(
    actor: Actor,
    action: Action,
    *,
    owner_id: Any,
    listing_owner_id: Any = None,
    message: str | None = None,
) -> None:
    if not can_act(actor, action, owner_id=owner_id, listing_owner_id=listing_owner_id):
        raise ForbiddenError(message)
