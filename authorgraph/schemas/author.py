"""Schema for the updateAuthor mutation input."""

from pydantic import Field, field_validator

from ..auth.schemas.auth import CamelModel, check_password


class AuthorUpdate(CamelModel):
    """
    Partial author update.

    Only `id` is required. Each other field overwrites the stored value
    only when it is present and non-empty, so `None` and `""` both mean
    "leave unchanged".
    """

    id: str = Field(..., min_length=1)
    first_name: str | None = None
    last_name: str | None = None
    user_name: str | None = None
    password: str | None = None

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str | None) -> str | None:
        if not v:
            return v
        return check_password(v)

    def changes(self) -> dict[str, str]:
        """Return the non-empty fields to apply, keyed by attribute name."""
        fields = ("first_name", "last_name", "user_name", "password")
        return {name: getattr(self, name) for name in fields if getattr(self, name)}
