from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, Optional

import strawberry
from strawberry.scalars import ID
from strawberry.types import Info

from relay_resolver.api.graphql.common.types import Node

if TYPE_CHECKING:
    from relay_resolver.api.graphql.stores.types import Store

@strawberry.type
class Customer(Node):
    id: ID
    store_id: ID
    platform_customer_id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    orders_count: int = 0
    total_spent: Decimal = Decimal("0")
    platform_created_at: Optional[datetime] = None

    @strawberry.field
    def average_order_value(self) -> Decimal:
        if self.orders_count > 0:
            return self.total_spent / self.orders_count
        return Decimal("0")

    @strawberry.field
    async def store(
        self, info: Info
    ) -> Optional[Annotated["Store", strawberry.lazy("relay_resolver.api.graphql.stores.types")]]:
        from relay_resolver.api.graphql.stores.resolvers import StoreResolver
        return await StoreResolver.get_by_global_id(info, self.store_id)
