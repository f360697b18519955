"""In-memory data store for authorgraph.

This module provides the Store, which owns the two record collections
(authors and articles) and hands out operations objects for each.

ARCHITECTURE:
- Store is created by the application factory and kept in app.extensions;
  there are no module-level collections
- Each collection has its own lock; operations run under it
- Reads return copies, so callers never alias stored records

    store = Store()
    lookup = store.author.get_by_id(author_id)
    if lookup.found:
        print(lookup.value.user_name)

ID GENERATION POLICY:
Record IDs are auto-generated UUIDs (utils.uid). Callers never pass an
ID into create(). Seed data is the only exception and goes through
create(..., record_id=...).
"""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from flask import current_app

from ..exceptions import ResourceNotFound

if TYPE_CHECKING:
    from .article import ArticleOperations, ArticleRecord
    from .author import AuthorOperations, AuthorRecord

T = TypeVar("T")

EXTENSION_KEY = "authorgraph.store"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Result of a lookup by identity: either found with a value, or not found."""

    value: T | None = None

    @property
    def found(self) -> bool:
        return self.value is not None

    def unwrap(self, what: str = "Record") -> T:
        """Return the value or raise ResourceNotFound."""
        if self.value is None:
            raise ResourceNotFound(f"{what} not found")
        return self.value

    @classmethod
    def missing(cls) -> "Lookup[T]":
        return cls(None)


class Store:
    """
    Owner of the author and article collections.

    Provides access to per-collection operations through properties.
    """

    def __init__(self):
        self._authors: list["AuthorRecord"] = []
        self._articles: list["ArticleRecord"] = []
        self._author_lock = threading.RLock()
        self._article_lock = threading.RLock()
        self._author_ops = None
        self._article_ops = None

    @property
    def author(self) -> "AuthorOperations":
        """Credential store operations.

        Lazy-loaded to avoid circular import issues.
        """
        if self._author_ops is None:
            from .author import AuthorOperations
            self._author_ops = AuthorOperations(self._authors, self._author_lock)
        return self._author_ops

    @property
    def article(self) -> "ArticleOperations":
        """Content store operations."""
        if self._article_ops is None:
            from .article import ArticleOperations
            self._article_ops = ArticleOperations(self._articles, self._article_lock)
        return self._article_ops

    def clear(self):
        """Drop every record from both collections."""
        with self._author_lock:
            self._authors.clear()
        with self._article_lock:
            self._articles.clear()


def get_store() -> Store:
    """
    Get the Store owned by the current Flask application.

    Raises:
        RuntimeError: If called outside an application context or the
            application was not built by create_app()
    """
    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError:
        raise RuntimeError("No store registered on this application; build it with create_app()")


__all__ = ["Lookup", "Store", "get_store", "EXTENSION_KEY"]
