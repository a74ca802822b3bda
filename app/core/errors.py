"""
Application error taxonomy.

Services raise these; app.main turns them into the uniform error envelope
{"error": code, "message": message, "details": ...} with the status code of
the error class.
"""

from typing import Any


class AppError(Exception):
    """Base class for errors that map to a client-facing response."""

    status_code: int = 500
    code: str = "internal_error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_envelope(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationFailedError(AppError):
    """Request body or parameters violate the declared schema."""

    status_code = 400
    code = "validation_error"


class AuthenticationError(AppError):
    """Missing or unusable bearer token."""

    status_code = 401
    code = "unauthenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class TokenExpiredError(AuthenticationError):
    code = "token_expired"


class TokenMalformedError(AuthenticationError):
    code = "token_malformed"


class TokenSignatureError(AuthenticationError):
    code = "token_invalid_signature"


class InvalidCredentialsError(AppError):
    """Username/secret pair rejected. Same message whether or not the user exists."""

    status_code = 401
    code = "invalid_credentials"


class UnauthorizedError(AppError):
    """Authorization policy denied the action."""

    status_code = 403
    code = "forbidden"


class NotFoundError(AppError):
    status_code = 404
    code = "not_found"


class ConflictError(AppError):
    """Unique constraint (or other integrity rule) would be violated."""

    status_code = 409
    code = "conflict"


class InternalError(AppError):
    status_code = 500
    code = "internal_error"
