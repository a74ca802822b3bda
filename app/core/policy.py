"""
Role-based authorization policy.

authorize() is a pure function of (actor, resource, action, target owner):
no database access and no state. Handlers call enforce() before any
side-effecting persistence call.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Protocol, assert_never

from app.core.errors import UnauthorizedError
from app.models.user import UserRole

logger = logging.getLogger(__name__)


class Actor(Protocol):
    """Anything carrying the acting user's id and role (e.g. CurrentUser)."""

    id: int
    role: UserRole


class Resource(str, enum.Enum):
    AUTH = "auth"
    ADDRESS = "address"
    INSTITUTION = "institution"
    CLASSROOM = "classroom"


class Action(str, enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    GET = "get"
    GET_ALL = "getAll"
    GET_BY_STATE = "getByState"
    GET_ID = "getId"
    SIGN_IN = "signIn"
    SIGN_UP = "signUp"
    PASSWORDLESS_SIGN_IN = "passwordlessSignIn"
    RENEW_SIGN_IN = "renewSignIn"
    CHECK_SIGN_IN = "checkSignIn"
    ACCEPT_TERMS = "acceptTerms"


class Access(str, enum.Enum):
    """Who may perform an action."""

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    NON_GUEST = "non_guest"
    STAFF = "staff"
    OWNER_OR_ADMIN = "owner_or_admin"
    ADMIN_ONLY = "admin_only"


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: str | None = None


ALLOW = Decision(True)

# Actions a guest session can never perform.
MUTATING_ACTIONS = frozenset(
    {Action.CREATE, Action.UPDATE, Action.DELETE, Action.ACCEPT_TERMS, Action.SIGN_UP}
)

POLICY: dict[Resource, dict[Action, Access]] = {
    Resource.AUTH: {
        Action.SIGN_IN: Access.PUBLIC,
        Action.SIGN_UP: Access.PUBLIC,
        Action.PASSWORDLESS_SIGN_IN: Access.PUBLIC,
        Action.RENEW_SIGN_IN: Access.AUTHENTICATED,
        Action.CHECK_SIGN_IN: Access.AUTHENTICATED,
        Action.ACCEPT_TERMS: Access.NON_GUEST,
    },
    Resource.ADDRESS: {
        Action.CREATE: Access.ADMIN_ONLY,
        Action.UPDATE: Access.ADMIN_ONLY,
        Action.DELETE: Access.ADMIN_ONLY,
        Action.GET_ALL: Access.ADMIN_ONLY,
        Action.GET: Access.AUTHENTICATED,
        Action.GET_BY_STATE: Access.AUTHENTICATED,
        Action.GET_ID: Access.AUTHENTICATED,
    },
    Resource.INSTITUTION: {
        Action.CREATE: Access.ADMIN_ONLY,
        Action.UPDATE: Access.ADMIN_ONLY,
        Action.DELETE: Access.ADMIN_ONLY,
        Action.GET: Access.PUBLIC,
        Action.GET_ALL: Access.PUBLIC,
    },
    Resource.CLASSROOM: {
        Action.CREATE: Access.STAFF,
        Action.UPDATE: Access.OWNER_OR_ADMIN,
        Action.DELETE: Access.OWNER_OR_ADMIN,
        Action.GET: Access.AUTHENTICATED,
        Action.GET_ALL: Access.ADMIN_ONLY,
    },
}


def role_rank(role: UserRole) -> int:
    """Position of role in the global order GUEST < USER < ... < ADMIN."""
    match role:
        case UserRole.GUEST:
            return 0
        case UserRole.USER:
            return 1
        case UserRole.APPLIER:
            return 2
        case UserRole.PUBLISHER:
            return 3
        case UserRole.COORDINATOR:
            return 4
        case UserRole.ADMIN:
            return 5
        case _:
            assert_never(role)


def _check_access(
    access: Access, actor: Actor | None, target_owner_id: int | None
) -> Decision:
    match access:
        case Access.PUBLIC:
            return ALLOW
        case Access.AUTHENTICATED:
            if actor is None:
                return Decision(False, "Authentication required.")
            return ALLOW
        case Access.NON_GUEST:
            if actor is None or actor.role == UserRole.GUEST:
                return Decision(False, "Guest users cannot perform this action.")
            return ALLOW
        case Access.STAFF:
            if actor is None or role_rank(actor.role) < role_rank(UserRole.APPLIER):
                return Decision(False, "Insufficient role for this action.")
            return ALLOW
        case Access.OWNER_OR_ADMIN:
            if actor is None or target_owner_id is None or actor.id != target_owner_id:
                return Decision(False, "Only the owner or an admin can perform this action.")
            return ALLOW
        case Access.ADMIN_ONLY:
            return Decision(False, "Only admins can perform this action.")
        case _:
            assert_never(access)


def authorize(
    actor: Actor | None,
    resource: Resource,
    action: Action,
    target_owner_id: int | None = None,
) -> Decision:
    """Decide whether actor (None for anonymous requests) may perform action on resource."""
    if actor is not None and actor.role == UserRole.ADMIN:
        return ALLOW
    if actor is not None and actor.role == UserRole.GUEST and action in MUTATING_ACTIONS:
        return Decision(False, "Guest users cannot perform this action.")
    access = POLICY.get(resource, {}).get(action)
    if access is None:
        return Decision(False, "Action is not permitted on this resource.")
    return _check_access(access, actor, target_owner_id)


def enforce(
    actor: Actor | None,
    resource: Resource,
    action: Action,
    target_owner_id: int | None = None,
) -> None:
    """Raise UnauthorizedError if authorize() denies the action."""
    decision = authorize(actor, resource, action, target_owner_id)
    if decision.allowed:
        return
    logger.warning(
        "Authorization denied: actor_id=%s role=%s resource=%s action=%s",
        getattr(actor, "id", None),
        getattr(actor, "role", None),
        resource.value,
        action.value,
    )
    raise UnauthorizedError(decision.reason or "Not authorized.")
