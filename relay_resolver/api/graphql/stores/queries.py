import strawberry
from typing import Optional
from strawberry.scalars import JSON
from strawberry.types import Info
from relay_resolver.api.graphql.stores.types import Store
from relay_resolver.api.graphql.common.connection import Connection
from relay_resolver.api.graphql.common.inputs import OrderInput

@strawberry.type
class StoreQuery:
    @strawberry.field
    async def store(self, info: Info, id: strawberry.ID) -> Optional[Store]:
        """Get a store by global ID."""
        from relay_resolver.api.graphql.stores.resolvers import StoreResolver
        return await StoreResolver.get_by_global_id(info, id)

    @strawberry.field
    async def stores_connection(
        self,
        info: Info,
        first: Optional[int] = None,
        after: Optional[str] = None,
        last: Optional[int] = None,
        before: Optional[str] = None,
        skip: Optional[int] = None,
        order: Optional[OrderInput] = None,
        filter: Optional[JSON] = None,
        search: Optional[str] = None,
    ) -> Connection[Store]:
        """Get a paginated connection of stores."""
        from relay_resolver.api.graphql.stores.resolvers import StoreResolver
        request = StoreResolver.connection_request(first, after, last, before, skip, order, filter, search)
        return await StoreResolver.get_connection(info, request)
