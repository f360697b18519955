"""Credential store operations.

Authors are kept in insertion order. Lookups by username return the
first match in that order; create() and update() keep usernames unique
so the first match is also the only one.

IMPORT CONVENTION:
- Store accesses these through store.author property
- NO direct import needed when using the Store API
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

from ..exceptions import ValidationError
from ..utils import uid
from . import Lookup


@dataclass
class AuthorRecord:
    """A stored author. password_hash is always a bcrypt hash."""

    id: str
    first_name: str
    last_name: str
    user_name: str
    password_hash: str


class AuthorOperations:
    """Author collection operations.

    Every method takes the collection lock, and every record handed out
    is a copy.
    """

    def __init__(self, authors: list[AuthorRecord], lock: threading.RLock):
        self._authors = authors
        self._lock = lock

    def atomic(self) -> threading.RLock:
        """Hold the collection lock across several operations.

        >>> with store.author.atomic():
        ...     store.author.create(...)
        ...     snapshot = store.author.list()
        """
        return self._lock

    def list(self) -> list[AuthorRecord]:
        """Snapshot of every author, in store order."""
        with self._lock:
            return [replace(a) for a in self._authors]

    def count(self) -> int:
        with self._lock:
            return len(self._authors)

    def get_by_id(self, author_id: str) -> Lookup[AuthorRecord]:
        with self._lock:
            for author in self._authors:
                if author.id == author_id:
                    return Lookup(replace(author))
        return Lookup.missing()

    def get_by_username(self, user_name: str) -> Lookup[AuthorRecord]:
        """First author whose username matches exactly."""
        with self._lock:
            for author in self._authors:
                if author.user_name == user_name:
                    return Lookup(replace(author))
        return Lookup.missing()

    def create(
        self,
        first_name: str,
        last_name: str,
        user_name: str,
        password_hash: str,
        record_id: str | None = None
    ) -> AuthorRecord:
        """Append a new author with an auto-generated ID.

        Args:
            password_hash: bcrypt hash; plaintext never reaches the store
            record_id: Fixed ID, only used for seed data

        Raises:
            ValidationError: If the username is already taken
        """
        with self._lock:
            self._ensure_username_free(user_name)
            author = AuthorRecord(
                id=record_id or uid.generate_uuid(),
                first_name=first_name,
                last_name=last_name,
                user_name=user_name,
                password_hash=password_hash,
            )
            self._authors.append(author)
            return replace(author)

    def update(self, author_id: str, changes: dict[str, str]) -> Lookup[AuthorRecord]:
        """Overwrite the given fields of an author in place.

        Args:
            changes: Attribute name to new value. Only first_name,
                last_name, user_name and password_hash are accepted.

        Returns:
            Lookup holding the updated record, or not found

        Raises:
            ValidationError: If the new username belongs to another author
        """
        allowed = {"first_name", "last_name", "user_name", "password_hash"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValueError(f"Cannot update author fields: {', '.join(sorted(unknown))}")

        with self._lock:
            for index, author in enumerate(self._authors):
                if author.id != author_id:
                    continue
                if "user_name" in changes:
                    self._ensure_username_free(changes["user_name"], exclude_id=author_id)
                updated = replace(author, **changes)
                self._authors[index] = updated
                return Lookup(replace(updated))
        return Lookup.missing()

    def delete(self, author_id: str) -> bool:
        """Remove the first author with this ID.

        Returns:
            True if an author was removed
        """
        with self._lock:
            for index, author in enumerate(self._authors):
                if author.id == author_id:
                    del self._authors[index]
                    return True
        return False

    def _ensure_username_free(self, user_name: str, exclude_id: str | None = None):
        for author in self._authors:
            if author.user_name == user_name and author.id != exclude_id:
                raise ValidationError(
                    "Username already exists",
                    {"fields": ["userName"], "userName": user_name}
                )
