import strawberry

# Import feature queries
from relay_resolver.api.graphql.node import NodeQuery
from relay_resolver.api.graphql.stores.queries import StoreQuery
from relay_resolver.api.graphql.products.queries import ProductQuery
from relay_resolver.api.graphql.products.types import ProductVariant
from relay_resolver.api.graphql.customers.queries import CustomerQuery

# Define root Query type by combining all feature queries
@strawberry.type
class Query(NodeQuery, StoreQuery, ProductQuery, CustomerQuery):
    pass

# Create schema; the API is read-only, so there is no Mutation type
schema = strawberry.Schema(query=Query, types=[ProductVariant])
