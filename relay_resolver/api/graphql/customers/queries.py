import strawberry
from typing import Optional
from strawberry.scalars import JSON
from strawberry.types import Info
from relay_resolver.api.graphql.customers.types import Customer
from relay_resolver.api.graphql.common.connection import Connection
from relay_resolver.api.graphql.common.inputs import OrderInput

@strawberry.type
class CustomerQuery:
    @strawberry.field
    async def customer(self, info: Info, id: strawberry.ID) -> Optional[Customer]:
        """Get a customer by global ID."""
        from relay_resolver.api.graphql.customers.resolvers import CustomerResolver
        return await CustomerResolver.get_by_global_id(info, id)

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
        """Get a paginated list of customers."""
        from relay_resolver.api.graphql.customers.resolvers import CustomerResolver
        request = CustomerResolver.connection_request(first, after, last, before, skip, order, filter, search)
        return await CustomerResolver.get_connection(info, request)
