"""
Sign-up, sign-in and session handling.

Every function takes the acting identity (or None for anonymous entry points)
as an explicit argument and consults the authorization policy before touching
the database.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
)
from app.core.policy import Action, Resource, enforce
from app.core.security import (
    create_access_token,
    expires_in_ms,
    hash_password,
    verify_password,
)
from app.models import Classroom, Institution, User, UserRole
from app.schemas.auth import (
    AcceptTermsData,
    CheckSignInData,
    CurrentUser,
    SessionData,
    SignInData,
    SignInRequest,
    SignUpRequest,
)
from app.services.persistence import commit_or_conflict, get_or_404, load_all_or_404

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

# Roles that cannot be chosen through public sign-up.
SIGN_UP_FORBIDDEN_ROLES = frozenset({UserRole.GUEST, UserRole.ADMIN})

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."


def _session_for(user: User | CurrentUser) -> SessionData:
    return SessionData(
        id=user.id,
        role=user.role,
        token=create_access_token(user.id, user.username),
        expires_in=expires_in_ms(),
        institution_id=user.institution_id,
    )


def sign_up(db: Session, payload: SignUpRequest, settings: "Settings") -> SessionData:
    """Create a user with a hashed secret and return a session for it."""
    if not settings.SIGN_UP_ENABLED:
        raise UnauthorizedError("Sign-up is disabled.")
    enforce(None, Resource.AUTH, Action.SIGN_UP)
    if payload.role in SIGN_UP_FORBIDDEN_ROLES:
        raise UnauthorizedError(f"Cannot sign up with role {payload.role.value}.")

    existing = db.query(User).filter(User.username == payload.username).first()
    if existing is not None:
        raise ConflictError("Username is already taken.")
    if payload.institution_id is not None:
        get_or_404(db, Institution, payload.institution_id, "Institution")
    classrooms = load_all_or_404(db, Classroom, payload.classrooms, "Classroom")

    user = User(
        name=payload.name,
        username=payload.username,
        password_hash=hash_password(payload.hash),
        role=payload.role,
        institution_id=payload.institution_id,
        accepted_terms=False,
        classrooms=classrooms,
    )
    db.add(user)
    commit_or_conflict(db, "Username is already taken.")
    db.refresh(user)
    logger.info("User signed up: user_id=%s role=%s", user.id, user.role.value)
    return _session_for(user)


def sign_in(db: Session, payload: SignInRequest) -> SignInData:
    """
    Check username and secret and return a session.

    Unknown usernames and wrong secrets raise the same InvalidCredentialsError.
    """
    enforce(None, Resource.AUTH, Action.SIGN_IN)
    user = db.query(User).filter(User.username == payload.username).first()
    if user is None or not verify_password(payload.hash, user.password_hash):
        logger.warning("Failed sign-in for username=%s", payload.username)
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    session = _session_for(user)
    logger.info("User signed in: user_id=%s", user.id)
    return SignInData(
        **session.model_dump(),
        accepted_terms=user.accepted_terms,
        profile_image=user.profile_image,
    )


def passwordless_sign_in(db: Session) -> SessionData:
    """Return a session bound to the guest identity."""
    enforce(None, Resource.AUTH, Action.PASSWORDLESS_SIGN_IN)
    guest = (
        db.query(User)
        .filter(User.role == UserRole.GUEST)
        .order_by(User.id)
        .first()
    )
    if guest is None:
        raise NotFoundError("Guest user not found.")
    logger.info("Passwordless sign-in: guest_id=%s", guest.id)
    return _session_for(guest)


def renew_sign_in(actor: CurrentUser) -> SessionData:
    """Issue a fresh token for an identity whose token was already verified."""
    enforce(actor, Resource.AUTH, Action.RENEW_SIGN_IN)
    return _session_for(actor)


def check_sign_in(actor: CurrentUser) -> CheckSignInData:
    enforce(actor, Resource.AUTH, Action.CHECK_SIGN_IN)
    return CheckSignInData(id=actor.id)


def accept_terms(db: Session, actor: CurrentUser) -> AcceptTermsData:
    """Mark the terms of use as accepted by the acting (non-guest) user."""
    enforce(actor, Resource.AUTH, Action.ACCEPT_TERMS)
    user = get_or_404(db, User, actor.id, "User")
    user.accepted_terms = True
    db.commit()
    logger.info("Terms accepted: user_id=%s", user.id)
    return AcceptTermsData(id=user.id, accepted_terms=user.accepted_terms)
