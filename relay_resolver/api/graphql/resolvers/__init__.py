from relay_resolver.api.graphql.resolvers.base import BaseResolver, resolve_connection

__all__ = ['BaseResolver', 'resolve_connection']
