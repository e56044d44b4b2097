from typing import Any, Dict

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from relay_resolver.api.graphql.dataloaders import RequestLoaders
from relay_resolver.api.graphql.registry import TYPE_REGISTRY
from relay_resolver.api.graphql.schema import schema
from relay_resolver.core.config import get_settings
from relay_resolver.db.base import get_db

async def get_context(request: Request, db: AsyncSession = Depends(get_db)) -> Dict[str, Any]:
    """
    Creates a per-request context for GraphQL resolvers.

    Loaders are created here so their caches never outlive the request.
    """
    return {
        "request": request,
        "db": db,
        "registry": TYPE_REGISTRY,
        "loaders": RequestLoaders(db, TYPE_REGISTRY),
    }

# Create a GraphQL router for FastAPI
graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphiql=get_settings().GRAPHIQL,
)
