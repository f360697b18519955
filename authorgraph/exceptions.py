"""Custom exceptions for authorgraph.

Every exception carries a human-readable message and an optional
details dict. The Flask error handlers in main.py and the GraphQL
error formatter in graph/api.py both render these two attributes.
"""


class AuthorGraphError(Exception):
    """Base exception for all authorgraph errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(AuthorGraphError):
    """Missing or malformed input. Rendered as HTTP 400."""


class AuthenticationError(AuthorGraphError):
    """Wrong password or an invalid, expired or missing token. Rendered as HTTP 401."""


class ResourceNotFound(AuthorGraphError):
    """Lookup by identity failed. Rendered as HTTP 404."""
