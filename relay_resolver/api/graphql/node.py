from typing import Optional

import strawberry
from strawberry.types import Info

from relay_resolver.api.graphql.common.global_id import from_global_id
from relay_resolver.api.graphql.common.types import Node

@strawberry.type
class NodeQuery:
    @strawberry.field
    async def node(self, info: Info, id: strawberry.ID) -> Optional[Node]:
        """Fetch any registered object by its global ID."""
        registry = info.context["registry"]
        type_name, _ = from_global_id(id, registry)
        descriptor = registry.resolve_type_descriptor(type_name)
        return await descriptor.resolver.get_by_global_id(info, id)
