"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.core.errors import TokenExpiredError, TokenMalformedError, TokenSignatureError
from app.core.validation import MAX_DB_ID

# bcrypt only looks at the first 72 bytes; longer secrets are rejected, never truncated.
BCRYPT_MAX_BYTES = 72

REQUIRED_CLAIMS = ["sub", "username", "exp", "iat"]


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a decoded session token."""

    user_id: int
    username: str
    issued_at: datetime
    expires_at: datetime


def secret_fits_bcrypt(plain_password: str) -> bool:
    """True if the UTF-8 encoded secret is within bcrypt's 72-byte input limit."""
    return len(plain_password.encode("utf-8")) <= BCRYPT_MAX_BYTES


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Raises ValueError for secrets over 72 bytes."""
    if not secret_fits_bcrypt(plain_password):
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes in UTF-8.")
    pw_bytes = plain_password.encode("utf-8")
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    if not hashed or not secret_fits_bcrypt(plain_password):
        return False
    pw_bytes = plain_password.encode("utf-8")
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def expires_in_ms() -> int:
    """Configured token lifetime in milliseconds, as reported to clients."""
    return settings.JWT_EXPIRE_MINUTES * 60 * 1000


def create_access_token(
    user_id: int,
    username: str,
    expires_minutes: int | None = None,
) -> str:
    """Create a JWT access token with sub (user id), username, iat and exp."""
    now = datetime.now(UTC)
    minutes = settings.JWT_EXPIRE_MINUTES if expires_minutes is None else expires_minutes
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "username": username,
        "iat": now,
        "exp": now + timedelta(minutes=minutes),
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> TokenClaims:
    """
    Decode and validate a JWT; return its claims.

    Raises TokenExpiredError past exp, TokenSignatureError when the signature
    does not match the server secret and TokenMalformedError for anything else.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired.") from e
    except jwt.InvalidSignatureError as e:
        raise TokenSignatureError("Token signature is invalid.") from e
    except jwt.PyJWTError as e:
        raise TokenMalformedError("Token is malformed.") from e

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise TokenMalformedError("Token is malformed.") from e
    if not 0 < user_id <= MAX_DB_ID:
        raise TokenMalformedError("Token is malformed.")
    username = payload["username"]
    if not isinstance(username, str) or not username:
        raise TokenMalformedError("Token is malformed.")

    return TokenClaims(
        user_id=user_id,
        username=username,
        issued_at=datetime.fromtimestamp(payload["iat"], UTC),
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )
