"""Auth dependencies: resolve the acting user from the Authorization: Bearer header."""

from typing import Annotated

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import AppError, AuthenticationError
from app.core.security import decode_access_token
from app.core.validation import MAX_DB_ID
from app.models.user import User
from app.schemas.auth import CurrentUser

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the current user. Raises 401 otherwise."""
    if credentials is None:
        raise AuthenticationError("Not authenticated.")
    claims = decode_access_token(credentials.credentials)
    user = db.query(User).filter(User.id == claims.user_id).first()
    if user is None:
        raise AuthenticationError("User not found.")
    return CurrentUser.model_validate(user)


def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser | None:
    """Soft variant for public routes: None when no usable token is sent."""
    if credentials is None:
        return None
    try:
        return get_current_user(credentials, db)
    except AppError:
        return None


ActorDep = Annotated[CurrentUser, Depends(get_current_user)]
OptionalActorDep = Annotated[CurrentUser | None, Depends(get_optional_user)]
DbDep = Annotated[Session, Depends(get_db)]
# Row id taken from the URL; out-of-range values fail validation (400).
IdPath = Annotated[int, Path(gt=0, le=MAX_DB_ID)]
