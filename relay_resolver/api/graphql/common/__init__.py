# Common module for shared Strawberry elements across features
from relay_resolver.api.graphql.common.connection import Connection, Edge, PageInfo, encode_cursor, decode_cursor
from relay_resolver.api.graphql.common.global_id import to_global_id, from_global_id

__all__ = [
    'Connection', 'Edge', 'PageInfo', 'encode_cursor', 'decode_cursor',
    'to_global_id', 'from_global_id',
]
