"""Validate request payloads against declarative pydantic schemas."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationFailedError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Largest value of a 32-bit signed INTEGER primary key.
MAX_DB_ID = 2**31 - 1


def format_violations(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic/FastAPI error dicts into {field, message, type} entries."""
    violations = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        violations.append(
            {
                "field": ".".join(loc),
                "message": err.get("msg", "Invalid value"),
                "type": err.get("type", "value_error"),
            }
        )
    return violations


def validate_payload(model: type[ModelT], data: Any) -> ModelT:
    """
    Validate data against model and return the parsed instance.

    Raises ValidationFailedError listing every violation, not just the first.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        violations = format_violations(e.errors())
        first = violations[0] if violations else None
        message = (
            f"{first['field']}: {first['message']}" if first and first["field"] else "Invalid request body."
        )
        raise ValidationFailedError(message, details=violations) from e
