"""GraphQL endpoint for authorgraph.

POST <settings.graphql_path>?token=<jwt>

Request body:
```json
{
    "query": "mutation ($a: ArticleInput) { createArticle(article: $a) { id author } }",
    "variables": {"a": {"title": "t", "content": "c"}},
    "operationName": null
}
```

The token is read from the `token` query parameter, falling back to an
`Authorization: Bearer <token>` header. It is only checked by resolvers
that need it (createArticle).

Execution errors are returned with status 200 in the `errors` array.
Errors raised as authorgraph exceptions keep their message and carry
`extensions.type` and `extensions.details`; anything else is logged and
reported as an internal error.
"""

import logging

from flask import Blueprint, jsonify, request
from graphql import GraphQLError, graphql_sync
from pydantic import BaseModel, Field

from ..api.validation import validate_request
from ..db import get_store
from ..exceptions import AuthorGraphError
from .resolvers import GraphContext
from .schema import schema

logger = logging.getLogger(__name__)


graph_bp = Blueprint("graph", __name__)


class GraphQLRequest(BaseModel):
    """GraphQL-over-HTTP request body."""

    query: str = Field(..., min_length=1)
    variables: dict | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


def request_token() -> str | None:
    """Token from ?token=..., else from a Bearer Authorization header."""
    token = request.args.get("token")
    if token:
        return token

    auth_header = request.headers.get("Authorization", "")
    parts = auth_header.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def format_error(error: GraphQLError) -> dict:
    """Render an execution error, adding type and details for known exceptions."""
    formatted = dict(error.formatted)
    original = error.original_error

    if isinstance(original, AuthorGraphError):
        extensions = dict(formatted.get("extensions") or {})
        extensions["type"] = original.__class__.__name__
        if original.details:
            extensions["details"] = original.details
        formatted["extensions"] = extensions
    elif original is not None:
        logger.error(f"Resolver error at {error.path}: {original!r}")
        formatted["message"] = "An internal error occurred"
        formatted["extensions"] = {"type": "InternalServerError"}

    return formatted


@graph_bp.route("", methods=["POST"])
@validate_request
def execute(data: GraphQLRequest):
    """Execute a GraphQL query or mutation against the application's store."""
    context = GraphContext(store=get_store(), token=request_token())
    result = graphql_sync(
        schema,
        data.query,
        context_value=context,
        variable_values=data.variables,
        operation_name=data.operation_name,
    )

    response = {"data": result.data}
    if result.errors:
        response["errors"] = [format_error(e) for e in result.errors]
    return jsonify(response), 200
