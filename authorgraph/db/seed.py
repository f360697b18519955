"""Demo data loaded into a fresh Store on startup."""

import logging

from ..auth.service import hash_password
from . import Store

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "123456789"

DEMO_AUTHORS = [
    {"record_id": "1", "first_name": "Bes", "last_name": "Sejio", "user_name": "bes"},
    {"record_id": "2", "first_name": "Besio", "last_name": "Sejion", "user_name": "besio"},
]

DEMO_ARTICLES = [
    {"record_id": "1", "author": "1", "title": "the road to ikigai", "content": "Confidence"},
]


def seed_store(store: Store):
    """Add the demo authors and articles. Demo passwords are stored hashed."""
    for author in DEMO_AUTHORS:
        store.author.create(password_hash=hash_password(DEMO_PASSWORD), **author)
    for article in DEMO_ARTICLES:
        store.article.create(**article)

    logger.info(f"Seeded {len(DEMO_AUTHORS)} authors and {len(DEMO_ARTICLES)} articles")
