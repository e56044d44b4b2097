from datetime import datetime
from typing import Optional
from uuid import UUID

import strawberry
from strawberry.scalars import ID, JSON
from strawberry.types import Info

from relay_resolver.api.graphql.common.connection import Connection
from relay_resolver.api.graphql.common.inputs import OrderInput
from relay_resolver.api.graphql.common.types import Node
from relay_resolver.api.graphql.customers.types import Customer
from relay_resolver.api.graphql.products.types import Product

@strawberry.type
class Store(Node):
    id: ID
    platform: str
    shop_domain: str
    currency: str
    is_active: bool
    created_at: Optional[datetime] = None
    local_id: strawberry.Private[UUID] = None

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
        """Products of this store."""
        from relay_resolver.api.graphql.products.resolvers import ProductResolver
        from relay_resolver.api.graphql.stores.resolvers import StoreResolver
        request = ProductResolver.connection_request(first, after, last, before, skip, order, filter, search)
        source = StoreResolver.owned_by(info, ProductResolver, self.local_id)
        return await ProductResolver.get_connection(info, request, source)

    @strawberry.field
    async def customers_connection(
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
    ) -> Connection[Customer]:
        """Customers of this store."""
        from relay_resolver.api.graphql.customers.resolvers import CustomerResolver
        from relay_resolver.api.graphql.stores.resolvers import StoreResolver
        request = CustomerResolver.connection_request(first, after, last, before, skip, order, filter, search)
        source = StoreResolver.owned_by(info, CustomerResolver, self.local_id)
        return await CustomerResolver.get_connection(info, request, source)
