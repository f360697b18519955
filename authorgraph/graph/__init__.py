"""GraphQL layer: schema, resolvers and the HTTP endpoint that executes them."""

from .resolvers import GraphContext
from .schema import schema

__all__ = ["GraphContext", "schema"]
