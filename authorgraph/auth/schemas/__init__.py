"""Authentication Pydantic schemas for API validation."""

from .auth import (
    AuthorBase,
    AuthorCreate,
    AuthorLogin,
    AuthorResponse,
    TokenPayload,
    TokenResponse,
    check_password,
)

__all__ = [
    "AuthorBase",
    "AuthorCreate",
    "AuthorLogin",
    "AuthorResponse",
    "TokenPayload",
    "TokenResponse",
    "check_password",
]
