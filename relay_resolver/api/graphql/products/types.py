from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, List, Optional
from uuid import UUID

import strawberry
from strawberry.scalars import ID
from strawberry.types import Info

from relay_resolver.api.graphql.common.types import Node

if TYPE_CHECKING:
    from relay_resolver.api.graphql.stores.types import Store

@strawberry.type
class ProductVariant(Node):
    id: ID
    product_id: ID
    title: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[Decimal] = None
    inventory_quantity: Optional[int] = None

@strawberry.type
class Product(Node):
    id: ID
    store_id: ID
    platform_product_id: str
    title: str
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    approved: bool = False
    platform_created_at: Optional[datetime] = None
    local_id: strawberry.Private[UUID] = None

    @strawberry.field
    async def store(
        self, info: Info
    ) -> Optional[Annotated["Store", strawberry.lazy("relay_resolver.api.graphql.stores.types")]]:
        from relay_resolver.api.graphql.stores.resolvers import StoreResolver
        return await StoreResolver.get_by_global_id(info, self.store_id)

    @strawberry.field
    async def variants(self, info: Info) -> List[ProductVariant]:
        from relay_resolver.api.graphql.products.resolvers import ProductVariantResolver
        return await ProductVariantResolver.get_for_product(info, self.local_id)
