import strawberry

# Common types that can be shared across features

@strawberry.interface
class Node:
    """An object that can be fetched again through `node(id:)`."""
    id: strawberry.ID
