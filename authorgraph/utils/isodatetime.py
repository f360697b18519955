"""Datetime and Unix timestamp utilities.

JWT claims (iat, exp) are integer Unix timestamps; everything that reads
or writes them goes through these functions.
"""

from datetime import datetime, UTC


def now() -> datetime:
    """Get the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def now_unix() -> int:
    """Get the current time as an integer Unix timestamp."""
    return int(now().timestamp())
