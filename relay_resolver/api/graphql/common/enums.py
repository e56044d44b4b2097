import strawberry

from relay_resolver.schemas.connection import SortDirection

# Common enums that can be shared across features

OrderDirection = strawberry.enum(SortDirection, name="OrderDirection", description="Sort direction")
