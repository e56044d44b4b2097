import strawberry
from typing import Optional
from strawberry.scalars import JSON
from strawberry.types import Info
from relay_resolver.api.graphql.products.types import Product
from relay_resolver.api.graphql.common.connection import Connection
from relay_resolver.api.graphql.common.inputs import OrderInput

@strawberry.type
class ProductQuery:
    @strawberry.field
    async def product(self, info: Info, id: strawberry.ID) -> Optional[Product]:
        """Get a product by global ID."""
        from relay_resolver.api.graphql.products.resolvers import ProductResolver
        return await ProductResolver.get_by_global_id(info, id)

    @strawberry.field
    async def products_connection(
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
    ) -> Connection[Product]:
        """Get a paginated connection of products."""
        from relay_resolver.api.graphql.products.resolvers import ProductResolver
        request = ProductResolver.connection_request(first, after, last, before, skip, order, filter, search)
        return await ProductResolver.get_connection(info, request)
