from typing import Type
from uuid import UUID

from strawberry.types import Info

from relay_resolver.db.models.store import Store as StoreModel
from relay_resolver.api.graphql.stores.types import Store
from relay_resolver.api.graphql.resolvers import BaseResolver
from relay_resolver.api.graphql.common.global_id import to_global_id
from relay_resolver.services.datasource.base import DataSource, Operator, Predicate

class StoreResolver(BaseResolver[StoreModel, Store]):
    """Resolver for Store-related operations."""

    model_class = StoreModel
    graphql_type_class = Store
    type_name = "Store"
    search_columns = ("shop_domain",)

    @classmethod
    def to_graphql_type(cls, model: StoreModel) -> Store:
        """Convert a StoreModel to a GraphQL Store type."""
        return Store(
            id=to_global_id(cls.type_name, model.id),
            local_id=model.id,
            platform=model.platform,
            shop_domain=model.shop_domain,
            currency=model.currency,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    @classmethod
    def owned_by(cls, info: Info, resolver: Type[BaseResolver], store_id: UUID) -> DataSource:
        """Data source of `resolver`'s type narrowed to one store."""
        return resolver.data_source(info).filter([Predicate("store_id", Operator.EQ, store_id)])
