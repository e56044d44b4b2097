"""Windowing of a filtered, ordered data source into a Connection.

Cursors encode absolute zero-based positions in the filtered, ordered
sequence, so a cursor is only meaningful for the ordering and filter it
was issued under.

Window resolution:

* ``after`` starts the window right after its position; otherwise the
  window starts at ``skip``.
* ``before`` caps the window at its position (exclusive).
* ``first`` takes that many rows from the start, ``last`` takes that many
  rows from the end, and with neither the configured maximum page size is
  taken from the start.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from relay_resolver.api.graphql.common.connection import Connection, Edge, PageInfo, decode_cursor, encode_cursor
from relay_resolver.core.errors import InvalidArguments
from relay_resolver.schemas.connection import ConnectionRequest
from relay_resolver.services.datasource.base import DataSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CursorBounds:
    after: Optional[int] = None
    before: Optional[int] = None


def validate_window_arguments(request: ConnectionRequest) -> CursorBounds:
    """Check argument combinations and decode the cursors.

    Runs before any data source call so that a rejected request never
    touches storage.
    """
    if request.first is not None and request.last is not None:
        raise InvalidArguments("first", "cannot be combined with 'last'")
    if request.first is not None and request.before is not None:
        raise InvalidArguments("before", "pairs with 'last', not with 'first'")
    if request.last is not None and request.after is not None:
        raise InvalidArguments("after", "pairs with 'first', not with 'last'")

    after = decode_cursor(request.after, "after") if request.after is not None else None
    before = decode_cursor(request.before, "before") if request.before is not None else None
    return CursorBounds(after=after, before=before)


class ResolutionScope:
    """Per-resolution memo; a new one is created for every connection field."""

    def __init__(self):
        self._total_count: Optional[int] = None

    async def total_count(self, source: DataSource) -> int:
        if self._total_count is None:
            self._total_count = await source.count()
        return self._total_count


class ConnectionBuilder:
    def __init__(self, max_page_size: int):
        self.max_page_size = max_page_size

    def window(self, request: ConnectionRequest, bounds: CursorBounds, total: int) -> Tuple[int, int]:
        """Return the ``[start, stop)`` positions of the requested page."""
        start = bounds.after + 1 if bounds.after is not None else request.skip
        end = total if bounds.before is None else min(bounds.before, total)

        if request.last is not None:
            lo = max(start, end - request.last)
            return lo, max(lo, end)

        size = request.first if request.first is not None else self.max_page_size
        return start, max(start, min(start + size, end))

    def page_numbers(self, request: ConnectionRequest, total: int) -> Tuple[int, int]:
        page_size = request.first if request.first is not None else self.max_page_size
        if page_size == 0:
            return 0, 1
        total_pages = -(-total // page_size)
        return total_pages, request.skip // page_size + 1

    async def build(
        self,
        source: DataSource,
        request: ConnectionRequest,
        node_factory: Optional[Callable[[Any], Any]] = None,
        scope: Optional[ResolutionScope] = None,
        bounds: Optional[CursorBounds] = None,
    ) -> Connection:
        if bounds is None:
            bounds = validate_window_arguments(request)
        scope = scope or ResolutionScope()

        total = await scope.total_count(source)
        start, stop = self.window(request, bounds, total)
        logger.debug(f"Resolved window [{start}, {stop}) of {total}")

        rows = []
        if stop > start:
            rows = await source.offset(start).limit(stop - start).materialize()

        edges = [
            Edge(node=node_factory(row) if node_factory else row, cursor=encode_cursor(start + index))
            for index, row in enumerate(rows)
        ]
        page_info = PageInfo(
            has_next_page=stop < total,
            has_previous_page=start > 0 and total > 0,
            start_cursor=edges[0].cursor if edges else None,
            end_cursor=edges[-1].cursor if edges else None,
        )
        total_pages, current_page = self.page_numbers(request, total)

        return Connection(
            edges=edges,
            page_info=page_info,
            total_count=total,
            total_pages=total_pages,
            current_page=current_page,
        )
