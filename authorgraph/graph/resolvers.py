"""Resolvers for the GraphQL schema.

Each resolver receives the GraphContext as info.context. Resolvers return
plain dicts with camelCase keys so the default field resolver can read
them; nested fields (Author.articles, Article.writer) have their own
resolvers below.

Lookup misses resolve to null rather than an error.
"""

import logging
from dataclasses import dataclass

from ..api.validation import parse_model
from ..auth import service
from ..db import Store
from ..db.article import ArticleRecord
from ..schemas import ArticleCreate, ArticleResponse, AuthorResponse, AuthorUpdate

logger = logging.getLogger(__name__)


@dataclass
class GraphContext:
    """Per-request execution context."""

    store: Store
    token: str | None = None


def _author(author: AuthorResponse) -> dict:
    return author.model_dump(by_alias=True)


def _article(article: ArticleRecord) -> dict:
    return ArticleResponse.model_validate(article).model_dump()


def _articles(store: Store) -> list[dict]:
    return [_article(a) for a in store.article.list()]


# ============================================================================
# Query
# ============================================================================


def resolve_authors(root, info) -> list[dict]:
    return [_author(a) for a in service.list_authors(info.context.store)]


def resolve_author(root, info, id: str) -> dict | None:
    lookup = service.get_author(info.context.store, id)
    return _author(lookup.value) if lookup.found else None


def resolve_articles(root, info) -> list[dict]:
    return _articles(info.context.store)


def resolve_article(root, info, id: str) -> dict | None:
    lookup = info.context.store.article.get_by_id(id)
    return _article(lookup.value) if lookup.found else None


def resolve_author_articles(author: dict, info) -> list[dict]:
    """Articles written by an author."""
    return [_article(a) for a in info.context.store.article.list_by_author(author["id"])]


def resolve_article_writer(article: dict, info) -> dict | None:
    """The author an article references, or null once that author is deleted."""
    return resolve_author(None, info, article["author"])


# ============================================================================
# Mutation
# ============================================================================


def resolve_delete_author(root, info, id: str) -> list[dict] | None:
    authors = service.delete_author(info.context.store, id)
    return None if authors is None else [_author(a) for a in authors]


def resolve_update_author(root, info, author: dict | None = None) -> list[dict] | None:
    data = parse_model(AuthorUpdate, author or {})
    authors = service.update_author(info.context.store, data.id, data.changes())
    return None if authors is None else [_author(a) for a in authors]


def resolve_create_article(root, info, article: dict | None = None) -> list[dict]:
    """
    Create an article as the author named by the request token.

    The token is checked before the input, so an unauthenticated request
    never learns whether its payload was valid. Any author or id in the
    input is ignored.
    """
    store = info.context.store
    claims = service.verify_token(info.context.token)
    data = parse_model(ArticleCreate, article or {})

    with store.article.atomic():
        created = store.article.create(author=claims.sub, title=data.title, content=data.content)
        articles = _articles(store)

    logger.info(f"Article created: {created.id} by {claims.sub}")
    return articles
