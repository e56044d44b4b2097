from relay_resolver.db.models.customer import Customer as CustomerModel
from relay_resolver.api.graphql.customers.types import Customer
from relay_resolver.api.graphql.resolvers import BaseResolver
from relay_resolver.api.graphql.common.global_id import to_global_id

class CustomerResolver(BaseResolver[CustomerModel, Customer]):
    """Resolver for Customer-related operations."""

    model_class = CustomerModel
    graphql_type_class = Customer
    type_name = "Customer"
    search_columns = ("email", "first_name", "last_name")
    raw_id_fields = ("platform_customer_id",)
    id_field_types = {"store_id": "Store"}

    @classmethod
    def to_graphql_type(cls, model: CustomerModel) -> Customer:
        """Convert a CustomerModel to a GraphQL Customer type."""
        return Customer(
            id=to_global_id(cls.type_name, model.id),
            store_id=to_global_id("Store", model.store_id),
            platform_customer_id=model.platform_customer_id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            orders_count=model.orders_count,
            total_spent=model.total_spent,
            platform_created_at=model.platform_created_at,
        )
