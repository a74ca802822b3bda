"""Shared pydantic bases: camelCase wire names, bounded ids and the success envelope."""

from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.security import BCRYPT_MAX_BYTES, secret_fits_bcrypt
from app.core.validation import MAX_DB_ID

T = TypeVar("T")

# Primary/foreign key sent by a client; must fit the INTEGER id columns.
DbId = Annotated[int, Field(gt=0, le=MAX_DB_ID)]


def _check_secret_length(value: str) -> str:
    if not secret_fits_bcrypt(value):
        raise ValueError(f"must be at most {BCRYPT_MAX_BYTES} bytes when UTF-8 encoded")
    return value


# User secret: non-empty and within bcrypt's input limit.
Secret = Annotated[str, Field(min_length=1), AfterValidator(_check_secret_length)]


class CamelModel(BaseModel):
    """Schema exchanged with clients using camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Request body schema: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class Envelope(BaseModel, Generic[T]):
    """Uniform success response: {message, data}."""

    message: str = Field(..., description="Human-readable outcome")
    data: T
