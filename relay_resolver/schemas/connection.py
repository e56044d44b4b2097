from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, NonNegativeInt, ValidationError

from relay_resolver.core.errors import InvalidArguments


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


class OrderSpec(BaseModel):
    by: str = "id"
    direction: SortDirection = SortDirection.desc

    model_config = {"frozen": True}


DEFAULT_ORDER = OrderSpec()


class ConnectionRequest(BaseModel):
    """Arguments accepted by every field that exposes a connection."""
    first: Optional[NonNegativeInt] = None
    after: Optional[str] = None
    last: Optional[NonNegativeInt] = None
    before: Optional[str] = None
    skip: NonNegativeInt = 0
    order: Optional[OrderSpec] = None
    filter: Optional[Any] = None
    search: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def from_arguments(cls, **arguments: Any) -> "ConnectionRequest":
        """Build a request from resolver keyword arguments.

        Arguments left as ``None`` fall back to their defaults. Validation
        failures are reported as ``InvalidArguments`` naming the argument.
        """
        values = {key: value for key, value in arguments.items() if value is not None}
        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            argument = ".".join(str(part) for part in error["loc"]) or "arguments"
            raise InvalidArguments(argument, error["msg"]) from e
