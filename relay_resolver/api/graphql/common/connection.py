import base64
import binascii
from typing import TypeVar, Generic, List, Optional
import strawberry

from relay_resolver.core.errors import MalformedCursor

T = TypeVar('T')  # Type for the node in the connection

CURSOR_PREFIX = "arrayconnection:"

@strawberry.type
class PageInfo:
    """Information about pagination in a connection."""
    has_next_page: bool
    has_previous_page: bool
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None

@strawberry.type
class Edge(Generic[T]):
    """An edge in a connection."""
    node: T
    cursor: str

@strawberry.type
class Connection(Generic[T]):
    """A connection to a list of items.

    ``total_pages`` and ``current_page`` address the same sequence by page
    number for clients that do not navigate with cursors. They need a full
    count of the filtered collection, so cursors remain the cheaper way to
    walk a connection.
    """
    edges: List[Edge[T]]
    page_info: PageInfo
    total_count: int
    total_pages: Optional[int] = None
    current_page: Optional[int] = None

# Helper functions for pagination
def encode_cursor(position: int) -> str:
    """Encode a zero-based position in the filtered, ordered sequence."""
    if position < 0:
        raise ValueError(f"Cursor position must be non-negative, got {position}")
    return base64.b64encode(f"{CURSOR_PREFIX}{position}".encode()).decode()

def decode_cursor(cursor: str, argument: str = "after") -> int:
    """Decode a cursor back into its position."""
    try:
        value = base64.b64decode(cursor.encode("ascii"), validate=True).decode("ascii")
    except (AttributeError, binascii.Error, UnicodeError) as e:
        raise MalformedCursor(argument, cursor) from e
    if not value.startswith(CURSOR_PREFIX):
        raise MalformedCursor(argument, cursor)
    offset = value[len(CURSOR_PREFIX):]
    if not offset.isdigit():
        raise MalformedCursor(argument, cursor)
    return int(offset)
