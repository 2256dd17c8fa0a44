"""
GraphQL API.

Exposes the strawberry schema, the context factory and the router that
mounts them on the FastAPI app.
"""

from .context import GraphQLContext, get_context
from .router import SocialDeckGraphQLRouter
from .schema import schema

__all__ = ["GraphQLContext", "get_context", "SocialDeckGraphQLRouter", "schema"]
