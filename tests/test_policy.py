"""Unit tests for app.core.policy: role order, decision table, admin and guest rules."""

import unittest

from app.core.errors import UnauthorizedError
from app.core.policy import (
    MUTATING_ACTIONS,
    POLICY,
    Access,
    Action,
    Resource,
    authorize,
    enforce,
    role_rank,
)
from app.models.user import UserRole
from app.schemas.auth import CurrentUser


def _actor(role: UserRole, user_id: int = 10) -> CurrentUser:
    return CurrentUser(id=user_id, username=f"user{user_id}", role=role)


class TestRoleRank(unittest.TestCase):
    def test_every_role_has_a_rank(self) -> None:
        ranks = [role_rank(role) for role in UserRole]
        self.assertEqual(len(set(ranks)), len(UserRole))

    def test_declaration_order_is_privilege_order(self) -> None:
        ranks = [role_rank(role) for role in UserRole]
        self.assertEqual(ranks, sorted(ranks))
        self.assertEqual(max(ranks), role_rank(UserRole.ADMIN))
        self.assertEqual(min(ranks), role_rank(UserRole.GUEST))


class TestAdminAndGuest(unittest.TestCase):
    def test_admin_allowed_everything(self) -> None:
        admin = _actor(UserRole.ADMIN)
        for resource in Resource:
            for action in Action:
                for owner in (None, admin.id, admin.id + 1):
                    with self.subTest(resource=resource, action=action, owner=owner):
                        self.assertTrue(authorize(admin, resource, action, owner).allowed)

    def test_guest_cannot_accept_terms(self) -> None:
        decision = authorize(_actor(UserRole.GUEST), Resource.AUTH, Action.ACCEPT_TERMS)
        self.assertFalse(decision.allowed)
        self.assertIsNotNone(decision.reason)

    def test_guest_denied_every_mutation_even_as_owner(self) -> None:
        guest = _actor(UserRole.GUEST)
        for resource in Resource:
            for action in MUTATING_ACTIONS:
                with self.subTest(resource=resource, action=action):
                    self.assertFalse(authorize(guest, resource, action, guest.id).allowed)

    def test_guest_may_read(self) -> None:
        guest = _actor(UserRole.GUEST)
        self.assertTrue(authorize(guest, Resource.ADDRESS, Action.GET).allowed)
        self.assertTrue(authorize(guest, Resource.CLASSROOM, Action.GET).allowed)
        self.assertTrue(authorize(guest, Resource.AUTH, Action.RENEW_SIGN_IN).allowed)


class TestDecisionTable(unittest.TestCase):
    def test_admin_only_denies_coordinator(self) -> None:
        coordinator = _actor(UserRole.COORDINATOR)
        self.assertFalse(authorize(coordinator, Resource.ADDRESS, Action.CREATE).allowed)
        self.assertFalse(authorize(coordinator, Resource.CLASSROOM, Action.GET_ALL).allowed)

    def test_staff_threshold_is_applier(self) -> None:
        expected = {
            UserRole.USER: False,
            UserRole.APPLIER: True,
            UserRole.PUBLISHER: True,
            UserRole.COORDINATOR: True,
        }
        for role, allowed in expected.items():
            with self.subTest(role=role):
                decision = authorize(_actor(role), Resource.CLASSROOM, Action.CREATE)
                self.assertEqual(decision.allowed, allowed)

    def test_owner_or_admin(self) -> None:
        owner = _actor(UserRole.USER, user_id=5)
        other = _actor(UserRole.COORDINATOR, user_id=6)
        self.assertTrue(authorize(owner, Resource.CLASSROOM, Action.UPDATE, 5).allowed)
        self.assertFalse(authorize(other, Resource.CLASSROOM, Action.UPDATE, 5).allowed)
        self.assertFalse(authorize(owner, Resource.CLASSROOM, Action.DELETE, None).allowed)

    def test_public_allows_anonymous(self) -> None:
        self.assertTrue(authorize(None, Resource.AUTH, Action.SIGN_IN).allowed)
        self.assertTrue(authorize(None, Resource.INSTITUTION, Action.GET_ALL).allowed)

    def test_authenticated_requires_actor(self) -> None:
        self.assertFalse(authorize(None, Resource.ADDRESS, Action.GET).allowed)
        self.assertTrue(authorize(_actor(UserRole.USER), Resource.ADDRESS, Action.GET).allowed)

    def test_action_missing_from_table_is_denied(self) -> None:
        self.assertNotIn(Action.GET_BY_STATE, POLICY[Resource.CLASSROOM])
        decision = authorize(_actor(UserRole.COORDINATOR), Resource.CLASSROOM, Action.GET_BY_STATE)
        self.assertFalse(decision.allowed)

    def test_every_table_entry_is_a_known_access(self) -> None:
        for table in POLICY.values():
            for access in table.values():
                self.assertIsInstance(access, Access)

    def test_decisions_are_deterministic(self) -> None:
        for role in UserRole:
            actor = _actor(role)
            for resource in Resource:
                for action in Action:
                    first = authorize(actor, resource, action, 3)
                    self.assertEqual(first, authorize(actor, resource, action, 3))


class TestEnforce(unittest.TestCase):
    def test_raises_on_denial(self) -> None:
        with self.assertRaises(UnauthorizedError) as ctx:
            enforce(_actor(UserRole.USER), Resource.ADDRESS, Action.DELETE)
        self.assertEqual(ctx.exception.status_code, 403)

    def test_returns_none_when_allowed(self) -> None:
        self.assertIsNone(enforce(_actor(UserRole.USER), Resource.ADDRESS, Action.GET))


if __name__ == "__main__":
    unittest.main()
