"""Authentication service: password hashing, registration, login and token checks.

All functions take the Store explicitly. Hashing happens before the
collection lock is taken, so a slow bcrypt round never blocks readers.
"""

import logging

import bcrypt
import jwt

from ..config import settings
from ..db import Lookup, Store
from ..db.author import AuthorRecord
from ..exceptions import AuthenticationError
from . import token
from .schemas import AuthorCreate, AuthorLogin, AuthorResponse, TokenPayload

logger = logging.getLogger(__name__)

# Same message for unknown username and wrong password
LOGIN_FAILED = "invalid username or password"


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str) -> str:
    """Hash a password with bcrypt using the configured work factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def to_response(author: AuthorRecord) -> AuthorResponse:
    """Outward view of an author, without the password hash."""
    return AuthorResponse.model_validate(author)


def list_authors(store: Store) -> list[AuthorResponse]:
    return [to_response(a) for a in store.author.list()]


def get_author(store: Store, author_id: str) -> Lookup[AuthorResponse]:
    lookup = store.author.get_by_id(author_id)
    return Lookup(to_response(lookup.value)) if lookup.found else Lookup.missing()


# ============================================================================
# Registration and Login
# ============================================================================


def register_author(store: Store, data: AuthorCreate) -> list[AuthorResponse]:
    """
    Register a new author.

    Args:
        store: Store to append to
        data: Validated registration payload

    Returns:
        Every author after the append, in store order

    Raises:
        ValidationError: If the username is already taken
    """
    password_hash = hash_password(data.password)
    with store.author.atomic():
        author = store.author.create(
            first_name=data.first_name,
            last_name=data.last_name,
            user_name=data.user_name,
            password_hash=password_hash,
        )
        authors = list_authors(store)

    logger.info(f"Author registered: {author.user_name} ({author.id})")
    return authors


def authenticate(store: Store, data: AuthorLogin) -> str:
    """
    Verify credentials and issue an access token.

    Uses the first author whose username matches.

    Returns:
        Signed JWT for the author

    Raises:
        AuthenticationError: If the username is unknown or the password is wrong
    """
    lookup = store.author.get_by_username(data.user_name)
    if not lookup.found:
        logger.warning(f"Login attempt for unknown username: {data.user_name}")
        raise AuthenticationError(LOGIN_FAILED, {"userName": data.user_name})

    author = lookup.value
    if not verify_password(data.password, author.password_hash):
        logger.warning(f"Failed login attempt for username: {data.user_name}")
        raise AuthenticationError(LOGIN_FAILED, {"userName": data.user_name})

    logger.info(f"Successful login: {author.user_name}")
    return token.generate_access_token(to_response(author))


def verify_token(token_str: str | None) -> TokenPayload:
    """
    Verify an access token presented with a request.

    Returns:
        Decoded claims; `sub` is the authenticated author's ID

    Raises:
        AuthenticationError: If the token is missing, expired or invalid
    """
    if not token_str:
        raise AuthenticationError("Authentication required", {"code": "missing_token"})

    try:
        return token.validate_access_token(token_str)
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        raise AuthenticationError("Token has expired", {"code": "token_expired"})
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT token: {e}")
        raise AuthenticationError("Invalid token", {"code": "invalid_token"})


# ============================================================================
# Author Mutations
# ============================================================================


def update_author(store: Store, author_id: str, changes: dict[str, str]) -> list[AuthorResponse] | None:
    """
    Apply a partial update to an author.

    Args:
        changes: Non-empty fields keyed by attribute name (see
            AuthorUpdate.changes). A "password" entry is hashed before
            it reaches the store.

    Returns:
        Every author after the update, or None if no author has this ID

    Raises:
        ValidationError: If the new username belongs to another author
    """
    changes = dict(changes)
    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))

    with store.author.atomic():
        lookup = store.author.update(author_id, changes)
        if not lookup.found:
            return None
        authors = list_authors(store)

    logger.info(f"Author updated: {author_id} ({', '.join(sorted(changes))})")
    return authors


def delete_author(store: Store, author_id: str) -> list[AuthorResponse] | None:
    """
    Remove an author. Their articles are kept.

    Returns:
        Every remaining author, or None if no author has this ID
    """
    with store.author.atomic():
        if not store.author.delete(author_id):
            return None
        authors = list_authors(store)

    logger.info(f"Author deleted: {author_id}")
    return authors
