"""Record IDs for authors and articles.

Registration and createArticle give each new record a random UUID v4.
Seed records keep their fixed IDs ("1", "2") and never come through here.
"""

from uuid import uuid4


def generate_uuid() -> str:
    """New random record ID in canonical hyphenated form."""
    return str(uuid4())
