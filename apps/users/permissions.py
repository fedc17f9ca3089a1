"""DRF permission classes backed by the authorization policy."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore

from .policy import Action, Actor, can_act


METHOD_ACTIONS = {
    "GET": Action.VIEW,
    "HEAD": Action.VIEW,
    "OPTIONS": Action.VIEW,
    "PUT": Action.EDIT,
    "PATCH": Action.EDIT,
    "DELETE": Action.DELETE,
}


def _action_for(request) -> Action:  # type: ignore
    return METHOD_ACTIONS.get(request.method, Action.EDIT)


class IsAdmin(permissions.BasePermission):
    """Administrators only."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        return Actor.from_user(request.user).is_admin


class IsOwnerOrAdminOrReadOnly(permissions.BasePermission):
    """Anyone may read; writes go through the policy with ``obj.owner_id``.

    Used for listings, where the resource owner is the host.
    """

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return can_act(Actor.from_user(request.user), _action_for(request), owner_id=obj.owner_id)


class IsAuthorOrAdminOrReadOnly(permissions.BasePermission):
    """Reviews: public reads, author or admin writes."""

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return can_act(Actor.from_user(request.user), _action_for(request), owner_id=obj.author_id)


class IsBookingStakeholder(permissions.BasePermission):
    """Requester, listing owner or admin may view a booking.

    Writes are authorized by the booking services, which know the target
    status of a transition.
    """

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        return can_act(
            Actor.from_user(request.user),
            Action.VIEW,
            owner_id=obj.requester_id,
            listing_owner_id=obj.listing.owner_id,
        )


class IsSelfOrAdmin(permissions.BasePermission):
    """User profiles: the user themself or an administrator."""

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        return can_act(Actor.from_user(request.user), _action_for(request), owner_id=obj.pk)
