"""Tests for the authorization policy."""

from __future__ import annotations

from types import SimpleNamespace

from django.test import SimpleTestCase

from apps.users.policy import Action, Actor, can_act, ensure_can_act
from shared.domain.errors import ForbiddenError


ADMIN = Actor(id=1, role="ADMIN")
REQUESTER = Actor(id=2, role="USER")
HOST = Actor(id=3, role="USER")
STRANGER = Actor(id=4, role="USER")


class PolicyTests(SimpleTestCase):
    def _booking(self, actor: Actor, action: Action) -> bool:
        return can_act(actor, action, owner_id=REQUESTER.id, listing_owner_id=HOST.id)

    def test_admin_may_do_anything(self) -> None:
        for action in Action:
            self.assertTrue(self._booking(ADMIN, action), action)

    def test_requester_cannot_confirm_own_booking(self) -> None:
        self.assertFalse(self._booking(REQUESTER, Action.CONFIRM))
        for action in (Action.VIEW, Action.EDIT, Action.DELETE, Action.CANCEL, Action.COMPLETE):
            self.assertTrue(self._booking(REQUESTER, action), action)

    def test_listing_owner_confirms_but_never_edits_or_deletes(self) -> None:
        for action in (Action.VIEW, Action.CONFIRM, Action.CANCEL, Action.COMPLETE):
            self.assertTrue(self._booking(HOST, action), action)
        self.assertFalse(self._booking(HOST, Action.EDIT))
        self.assertFalse(self._booking(HOST, Action.DELETE))

    def test_unrelated_user_is_denied(self) -> None:
        for action in Action:
            self.assertFalse(self._booking(STRANGER, action), action)

    def test_anonymous_is_denied(self) -> None:
        anonymous = Actor.from_user(SimpleNamespace(is_authenticated=False))
        self.assertFalse(can_act(anonymous, Action.VIEW, owner_id=None))

    def test_from_user_treats_superusers_as_admins(self) -> None:
        user = SimpleNamespace(pk=9, role="USER", is_authenticated=True, is_superuser=True, is_staff=False)
        self.assertTrue(Actor.from_user(user).is_admin)

    def test_action_for_status(self) -> None:
        self.assertIs(Action.for_status("CANCELLED"), Action.CANCEL)
        self.assertIs(Action.for_status("COMPLETED"), Action.COMPLETE)
        self.assertIs(Action.for_status("CONFIRMED"), Action.CONFIRM)

    def test_ensure_can_act_raises_forbidden(self) -> None:
        with self.assertRaises(ForbiddenError):
            ensure_can_act(STRANGER, Action.VIEW, owner_id=REQUESTER.id)
