"""Pydantic schemas for GraphQL inputs and outputs.

Article and author-update schemas are defined here. Auth schemas are
re-exported from the auth module for use in resolvers.
"""

from ..auth.schemas import AuthorCreate, AuthorLogin, AuthorResponse, TokenPayload, TokenResponse
from .article import ArticleCreate, ArticleResponse
from .author import AuthorUpdate

__all__ = [
    "ArticleCreate",
    "ArticleResponse",
    "AuthorUpdate",
    # Auth schemas (re-exported from authorgraph.auth.schemas)
    "AuthorCreate",
    "AuthorLogin",
    "AuthorResponse",
    "TokenPayload",
    "TokenResponse",
]
