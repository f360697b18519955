"""Pydantic schemas for registration, login and JWT tokens.

Wire names are camelCase (firstName, userName, ...) to match the GraphQL
schema; Python attributes are snake_case. Both spellings are accepted on
input.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ...config import settings

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def check_password(v: str) -> str:
    """Enforce the password length rules shared by registration and update."""
    if len(v) < settings.password_min_length:
        raise ValueError(f"Password must be at least {settings.password_min_length} characters")
    if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    return v


class CamelModel(BaseModel):
    """Base model using camelCase aliases on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Author Schemas
# ============================================================================


class AuthorBase(CamelModel):
    """Fields shared by author input and output."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1)


class AuthorCreate(AuthorBase):
    """Registration payload: every field is required."""

    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        return check_password(v)


class AuthorLogin(CamelModel):
    """Login payload. First and last name are not needed here."""

    user_name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthorResponse(AuthorBase):
    """Outward representation of an author. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str


# ============================================================================
# Token Schemas
# ============================================================================


class TokenPayload(BaseModel):
    """Decoded JWT claims."""

    sub: str
    iss: str
    iat: int | None = None
    exp: int


class TokenResponse(BaseModel):
    """Body returned by a successful login."""

    token: str
