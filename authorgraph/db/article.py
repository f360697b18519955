"""Content store operations.

Articles reference their author by ID only. Nothing here checks that the
author exists, and deleting an author leaves their articles in place.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

from ..utils import uid
from . import Lookup


@dataclass
class ArticleRecord:
    id: str
    author: str
    title: str
    content: str


class ArticleOperations:
    """Article collection operations."""

    def __init__(self, articles: list[ArticleRecord], lock: threading.RLock):
        self._articles = articles
        self._lock = lock

    def atomic(self) -> threading.RLock:
        """Hold the collection lock across several operations."""
        return self._lock

    def list(self) -> list[ArticleRecord]:
        with self._lock:
            return [replace(a) for a in self._articles]

    def count(self) -> int:
        with self._lock:
            return len(self._articles)

    def get_by_id(self, article_id: str) -> Lookup[ArticleRecord]:
        with self._lock:
            for article in self._articles:
                if article.id == article_id:
                    return Lookup(replace(article))
        return Lookup.missing()

    def list_by_author(self, author_id: str) -> list[ArticleRecord]:
        with self._lock:
            return [replace(a) for a in self._articles if a.author == author_id]

    def create(
        self,
        author: str,
        title: str,
        content: str,
        record_id: str | None = None
    ) -> ArticleRecord:
        """Append a new article with an auto-generated ID.

        Args:
            author: ID of the author, taken from a verified token
            record_id: Fixed ID, only used for seed data
        """
        article = ArticleRecord(
            id=record_id or uid.generate_uuid(),
            author=author,
            title=title,
            content=content,
        )
        with self._lock:
            self._articles.append(article)
        return replace(article)
