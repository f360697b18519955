"""Schemas for articles."""

from pydantic import BaseModel, ConfigDict, Field


class ArticleCreate(BaseModel):
    """
    Input for the createArticle mutation.

    `id` and `author` are accepted so that clients sending a full article
    object are not rejected, but both are ignored: the server assigns the
    identity and takes the author from the verified token.
    """

    id: str | None = None
    author: str | None = None
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class ArticleResponse(BaseModel):
    """Outward representation of an article."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    author: str
    title: str
    content: str
