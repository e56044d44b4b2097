from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

from relay_resolver.schemas.connection import OrderSpec

class Operator(str, Enum):
    """Filter operators every data source has to support."""
    EQ = "eq"
    NE = "ne"
    IN = "in"
    NIN = "nin"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    REGEX = "regex"
    GLOB = "glob"
    ELEM_MATCH = "elemMatch"
    START_WITH = "start_with"

@dataclass(frozen=True)
class Predicate:
    """A single ``field <operator> value`` clause.

    For ``Operator.ELEM_MATCH`` the value is a tuple of nested predicates
    that must all hold for at least one element of the array field.
    """
    field: str
    operator: Operator
    value: Any

def ensure_handlers(handlers: dict, source_name: str) -> dict:
    """Fail at import time if a data source leaves an operator unhandled."""
    missing = [operator.value for operator in Operator if operator not in handlers]
    if missing:
        raise RuntimeError(f"{source_name} has no handler for operators: {', '.join(missing)}")
    return handlers


class DataSource(ABC):
    """Lazy, chainable view over an entity collection.

    Every refinement returns a new source and leaves the receiver untouched;
    nothing is fetched until ``count`` or ``materialize`` is awaited.
    """

    @abstractmethod
    def filter(self, predicates: Iterable[Predicate]) -> "DataSource":
        """Restrict the source to rows satisfying every predicate."""
        pass

    @abstractmethod
    def order(self, spec: OrderSpec) -> "DataSource":
        """Order the source by a single field."""
        pass

    @abstractmethod
    def offset(self, n: int) -> "DataSource":
        pass

    @abstractmethod
    def limit(self, n: int) -> "DataSource":
        pass

    @abstractmethod
    def search(self, term: str) -> "DataSource":
        """Apply a free-text search; the matching rules belong to the source."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count rows after filtering, ignoring offset and limit."""
        pass

    @abstractmethod
    async def materialize(self) -> Sequence[Any]:
        pass
