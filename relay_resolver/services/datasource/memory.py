import re
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from relay_resolver.core.errors import InvalidArguments, InvalidFilter
from relay_resolver.schemas.connection import OrderSpec, SortDirection
from relay_resolver.services.datasource.base import DataSource, Operator, Predicate, ensure_handlers


def get_value(item: Any, field: str) -> Any:
    """Read a field from a mapping or an attribute-style object."""
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


def _compare(check):
    def handler(actual: Any, expected: Any) -> bool:
        if actual is None:
            return False
        return check(actual, expected)
    return handler


def _regex(actual: Any, expected: str) -> bool:
    return isinstance(actual, str) and re.search(expected, actual) is not None


def glob_to_regex(pattern: str) -> "re.Pattern[str]":
    """Translate a wildcard pattern where ``*`` matches a non-empty run."""
    parts = re.split(r"(\*)", pattern)
    body = "".join(".+" if part == "*" else re.escape(part) for part in parts)
    return re.compile(body, re.DOTALL)


def _glob(actual: Any, expected: str) -> bool:
    return isinstance(actual, str) and glob_to_regex(expected).fullmatch(actual) is not None


def _start_with(actual: Any, expected: str) -> bool:
    return isinstance(actual, str) and actual.startswith(expected)


def _elem_match(actual: Any, expected: Tuple[Predicate, ...]) -> bool:
    if not actual:
        return False
    return any(all(matches(element, predicate) for predicate in expected) for element in actual)


_HANDLERS = ensure_handlers({
    Operator.EQ: lambda actual, expected: actual == expected,
    Operator.NE: lambda actual, expected: actual != expected,
    Operator.IN: lambda actual, expected: actual in expected,
    Operator.NIN: lambda actual, expected: actual not in expected,
    Operator.GT: _compare(lambda actual, expected: actual > expected),
    Operator.GTE: _compare(lambda actual, expected: actual >= expected),
    Operator.LT: _compare(lambda actual, expected: actual < expected),
    Operator.LTE: _compare(lambda actual, expected: actual <= expected),
    Operator.REGEX: _regex,
    Operator.GLOB: _glob,
    Operator.ELEM_MATCH: _elem_match,
    Operator.START_WITH: _start_with,
}, "InMemorySource")


def matches(item: Any, predicate: Predicate) -> bool:
    actual = get_value(item, predicate.field)
    try:
        return _HANDLERS[predicate.operator](actual, predicate.value)
    except TypeError as e:
        raise InvalidFilter(
            predicate.field, f"cannot apply '{predicate.operator.value}' to {actual!r} and {predicate.value!r}"
        ) from e


def _sorted(items: List[Any], field: str, reverse: bool) -> List[Any]:
    # None values always go last, whatever the direction.
    present = [item for item in items if get_value(item, field) is not None]
    missing = [item for item in items if get_value(item, field) is None]
    try:
        present.sort(key=lambda item: get_value(item, field), reverse=reverse)
    except TypeError as e:
        raise InvalidArguments("order.by", f"values of '{field}' have no common ordering") from e
    return present + missing


class InMemorySource(DataSource):
    """Data source over an in-process sequence of mappings or objects."""

    def __init__(
        self,
        items: Iterable[Any],
        search_fields: Sequence[str] = (),
        *,
        predicates: Tuple[Predicate, ...] = (),
        order_spec: Optional[OrderSpec] = None,
        offset_value: int = 0,
        limit_value: Optional[int] = None,
        search_term: Optional[str] = None,
    ):
        self.items = tuple(items)
        self.search_fields = tuple(search_fields)
        self.predicates = predicates
        self.order_spec = order_spec
        self.offset_value = offset_value
        self.limit_value = limit_value
        self.search_term = search_term

    def _copy(self, **changes: Any) -> "InMemorySource":
        state = {
            "predicates": self.predicates,
            "order_spec": self.order_spec,
            "offset_value": self.offset_value,
            "limit_value": self.limit_value,
            "search_term": self.search_term,
        }
        state.update(changes)
        return InMemorySource(self.items, self.search_fields, **state)

    def filter(self, predicates: Iterable[Predicate]) -> "InMemorySource":
        return self._copy(predicates=self.predicates + tuple(predicates))

    def order(self, spec: OrderSpec) -> "InMemorySource":
        return self._copy(order_spec=spec)

    def offset(self, n: int) -> "InMemorySource":
        return self._copy(offset_value=n)

    def limit(self, n: int) -> "InMemorySource":
        return self._copy(limit_value=n)

    def search(self, term: str) -> "InMemorySource":
        return self._copy(search_term=term)

    def _selected(self) -> List[Any]:
        rows = [item for item in self.items if all(matches(item, p) for p in self.predicates)]
        if self.search_term:
            needle = self.search_term.lower()
            rows = [
                item for item in rows
                if any(needle in str(get_value(item, name) or "").lower() for name in self.search_fields)
            ]
        return rows

    async def count(self) -> int:
        return len(self._selected())

    async def materialize(self) -> List[Any]:
        rows = self._selected()
        if self.order_spec is not None:
            reverse = self.order_spec.direction == SortDirection.desc
            if self.order_spec.by != "id":
                rows = _sorted(rows, "id", False)
            rows = _sorted(rows, self.order_spec.by, reverse)
        end = None if self.limit_value is None else self.offset_value + self.limit_value
        return rows[self.offset_value:end]
