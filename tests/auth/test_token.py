"""
Tests for JWT Token Service.

Tests verify that:
- Tokens are generated with correct claims (sub, iss, iat, exp)
- Expiry is exactly the configured lifetime after issuance
- Tampered, expired, malformed and wrong-issuer tokens are rejected
- Tokens using a non-HMAC algorithm are rejected
- Token expiry introspection works correctly
"""

import base64
import json
from datetime import timedelta

import jwt as pyjwt
import pytest

from authorgraph.auth.schemas import AuthorResponse
from authorgraph.auth.token import (
    decode_token_no_validation,
    generate_access_token,
    get_token_expiry_remaining,
    is_token_expired,
    validate_access_token,
)
from authorgraph.config import settings
from authorgraph.utils import isodatetime

SECRET = settings.jwt_secret_key
AUTHOR_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def author():
    return AuthorResponse(id=AUTHOR_ID, first_name="Ada", last_name="Lovelace", user_name="ada")


def _encode(payload, key=SECRET, algorithm="HS256"):
    return pyjwt.encode(payload, key, algorithm=algorithm)


def _b64(data: dict) -> str:
    return base64.urlsafe_b64encode(json.dumps(data).encode()).rstrip(b"=").decode()


# ============================================================================
# Token Generation Tests
# ============================================================================


class TestGenerateAccessToken:
    """Tests for generate_access_token function."""

    def test_token_contains_required_claims(self, author):
        token = generate_access_token(author)
        payload = pyjwt.decode(token, options={"verify_signature": False})

        assert payload["sub"] == AUTHOR_ID
        assert payload["iss"] == "bes"
        assert isinstance(payload["iat"], int)
        assert isinstance(payload["exp"], int)

    def test_token_does_not_leak_profile(self, author):
        """Only identity claims go into the token."""
        payload = decode_token_no_validation(generate_access_token(author))
        assert set(payload) == {"sub", "iss", "iat", "exp"}

    def test_expiry_is_exactly_one_hour_after_issuance(self, author):
        before = isodatetime.now_unix()
        payload = decode_token_no_validation(generate_access_token(author))
        after = isodatetime.now_unix()

        assert payload["exp"] - payload["iat"] == 60 * 60
        assert before <= payload["iat"] <= after

    def test_expiry_follows_settings(self, author, monkeypatch):
        monkeypatch.setattr(settings, "jwt_expiry_hours", 3)
        payload = decode_token_no_validation(generate_access_token(author))
        assert payload["exp"] - payload["iat"] == 3 * 60 * 60

    def test_token_uses_configured_secret_key(self, author):
        """Token should verify with the configured secret and HS256."""
        token = generate_access_token(author)
        payload = pyjwt.decode(token, SECRET, algorithms=["HS256"], issuer="bes")
        assert payload["sub"] == AUTHOR_ID

    def test_token_header_algorithm(self, author):
        header = pyjwt.get_unverified_header(generate_access_token(author))
        assert header["alg"] == "HS256"


# ============================================================================
# Token Validation Tests
# ============================================================================


class TestValidateAccessToken:
    """Tests for validate_access_token function."""

    def test_validate_valid_token(self, author):
        payload = validate_access_token(generate_access_token(author))

        assert payload.sub == AUTHOR_ID
        assert payload.iss == "bes"
        assert payload.exp > isodatetime.now_unix()

    def test_wrong_secret_rejected(self, author):
        """Re-signing the claims with another secret must not verify."""
        claims = decode_token_no_validation(generate_access_token(author))
        forged = _encode(claims, key="wrong-secret-that-is-long-enough-32b")

        with pytest.raises(pyjwt.InvalidSignatureError):
            validate_access_token(forged)

    def test_tampered_payload_rejected(self, author):
        """Swapping the payload segment breaks the signature."""
        header, _payload, signature = generate_access_token(author).split(".")
        claims = decode_token_no_validation(generate_access_token(author))
        claims["sub"] = "someone-else"
        tampered = ".".join([header, _b64(claims), signature])

        with pytest.raises(pyjwt.InvalidTokenError):
            validate_access_token(tampered)

    def test_expired_token_rejected(self):
        past = isodatetime.now_unix() - 60
        expired = _encode({"sub": AUTHOR_ID, "iss": "bes", "iat": past - 3600, "exp": past})

        with pytest.raises(pyjwt.ExpiredSignatureError):
            validate_access_token(expired)

    def test_wrong_issuer_rejected(self):
        now = isodatetime.now_unix()
        token = _encode({"sub": AUTHOR_ID, "iss": "someone-else", "iat": now, "exp": now + 60})

        with pytest.raises(pyjwt.InvalidIssuerError):
            validate_access_token(token)

    @pytest.mark.parametrize("missing", ["sub", "iss", "exp"])
    def test_missing_required_claim_rejected(self, missing):
        now = isodatetime.now_unix()
        claims = {"sub": AUTHOR_ID, "iss": "bes", "iat": now, "exp": now + 60}
        del claims[missing]

        with pytest.raises(pyjwt.InvalidTokenError):
            validate_access_token(_encode(claims))

    def test_none_algorithm_rejected(self):
        """An unsigned token claiming alg=none must not be accepted."""
        now = isodatetime.now_unix()
        unsigned = ".".join([
            _b64({"alg": "none", "typ": "JWT"}),
            _b64({"sub": AUTHOR_ID, "iss": "bes", "exp": now + 60}),
            "",
        ])

        with pytest.raises(pyjwt.InvalidTokenError):
            validate_access_token(unsigned)

    def test_other_hmac_algorithm_accepted(self):
        """Any HMAC-family algorithm with the shared secret verifies."""
        now = isodatetime.now_unix()
        token = _encode({"sub": AUTHOR_ID, "iss": "bes", "exp": now + 60}, algorithm="HS512")
        assert validate_access_token(token).sub == AUTHOR_ID

    @pytest.mark.parametrize("token", ["not-a-jwt", "invalid.token.here", ""])
    def test_malformed_token_rejected(self, token):
        with pytest.raises(pyjwt.InvalidTokenError):
            validate_access_token(token)


# ============================================================================
# Token Introspection Tests
# ============================================================================


class TestGetTokenExpiryRemaining:
    """Tests for get_token_expiry_remaining function."""

    def test_remaining_time_for_valid_token(self, author):
        remaining = get_token_expiry_remaining(generate_access_token(author))

        assert isinstance(remaining, timedelta)
        assert timedelta(minutes=59) < remaining <= timedelta(hours=1)

    def test_expired_token_returns_none(self):
        past = isodatetime.now_unix() - 60
        expired = _encode({"sub": AUTHOR_ID, "iss": "bes", "exp": past})
        assert get_token_expiry_remaining(expired) is None

    def test_invalid_token_returns_none(self):
        assert get_token_expiry_remaining("invalid-token") is None


class TestIsTokenExpired:
    """Tests for is_token_expired function."""

    def test_valid_token_returns_false(self, author):
        assert is_token_expired(generate_access_token(author)) is False

    def test_expired_token_returns_true(self):
        past = isodatetime.now_unix() - 60
        assert is_token_expired(_encode({"sub": AUTHOR_ID, "iss": "bes", "exp": past})) is True

    def test_invalid_token_returns_true(self):
        assert is_token_expired("invalid-token") is True
        assert is_token_expired("") is True


class TestDecodeTokenNoValidation:
    """Tests for decode_token_no_validation function."""

    def test_decode_forged_token_succeeds_without_verification(self):
        """Forged claims are visible without verification, which is why it is introspection only."""
        now = isodatetime.now_unix()
        forged = _encode({"sub": "forged", "iss": "bes", "exp": now + 60}, key="wrong-secret-that-is-long-enough-32b")
        assert decode_token_no_validation(forged)["sub"] == "forged"

    def test_decode_expired_token(self):
        past = isodatetime.now_unix() - 60
        payload = decode_token_no_validation(_encode({"sub": AUTHOR_ID, "iss": "bes", "exp": past}))
        assert payload["exp"] == past
