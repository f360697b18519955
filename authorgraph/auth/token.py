"""JWT token generation and validation.

Tokens are compact JWTs signed with the shared secret from settings.
Claims:
- sub: author ID
- iss: issuer tag (settings.jwt_issuer)
- iat: issued-at, Unix seconds
- exp: iat + settings.jwt_expiry_hours

Validation only accepts HMAC algorithms. A token whose header names
"none" or an asymmetric algorithm is rejected before its signature is
looked at.
"""

from datetime import timedelta

import jwt
from pydantic import ValidationError as PydanticValidationError

from ..config import HMAC_ALGORITHMS, settings
from ..utils import isodatetime
from .schemas import AuthorResponse, TokenPayload

REQUIRED_CLAIMS = ["sub", "iss", "exp"]


def generate_access_token(author: AuthorResponse) -> str:
    """
    Issue a signed access token for an author.

    Args:
        author: The authenticated author

    Returns:
        Encoded JWT string
    """
    issued_at = isodatetime.now_unix()
    payload = {
        "sub": author.id,
        "iss": settings.jwt_issuer,
        "iat": issued_at,
        "exp": issued_at + int(timedelta(hours=settings.jwt_expiry_hours).total_seconds()),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def validate_access_token(token: str) -> TokenPayload:
    """
    Verify a token and return its claims.

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is malformed, tampered with,
            signed with a non-HMAC algorithm, from another issuer, or
            missing a required claim
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=list(HMAC_ALGORITHMS),
        issuer=settings.jwt_issuer,
        options={"require": REQUIRED_CLAIMS},
    )
    try:
        return TokenPayload(**payload)
    except PydanticValidationError as e:
        raise jwt.InvalidTokenError(f"Malformed claims: {e.error_count()} invalid field(s)") from e


def decode_token_no_validation(token: str) -> dict:
    """Decode claims without checking signature or expiry. For introspection only."""
    return jwt.decode(token, options={"verify_signature": False, "verify_exp": False})


def get_token_expiry_remaining(token: str) -> timedelta | None:
    """
    Time left before a valid token expires.

    Returns:
        Remaining lifetime, or None if the token is invalid or expired
    """
    try:
        payload = validate_access_token(token)
    except jwt.InvalidTokenError:
        return None
    remaining = payload.exp - isodatetime.now_unix()
    return timedelta(seconds=remaining) if remaining > 0 else None


def is_token_expired(token: str) -> bool:
    """True if the token is expired or otherwise unusable."""
    return get_token_expiry_remaining(token) is None
