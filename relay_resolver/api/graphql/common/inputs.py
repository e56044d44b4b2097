import strawberry

from relay_resolver.api.graphql.common.enums import OrderDirection
from relay_resolver.schemas.connection import OrderSpec

@strawberry.input
class OrderInput:
    by: str = "id"
    direction: OrderDirection = OrderDirection.desc

    def to_spec(self) -> OrderSpec:
        return OrderSpec(by=self.by, direction=self.direction)
