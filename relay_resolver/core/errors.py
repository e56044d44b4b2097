"""Errors raised while resolving a connection request.

All of them derive from ``ValueError`` so that resolvers which already
treat bad input as a ``ValueError`` keep working, and every one of them
names the argument or field the client has to correct.
"""
from typing import Any, Optional


class QueryResolutionError(ValueError):
    """Base class for request-rejection errors."""


class MalformedIdentifier(QueryResolutionError):
    def __init__(self, token: Any, reason: Optional[str] = None):
        self.token = token
        message = f"Malformed global id {token!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownType(QueryResolutionError):
    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown type {type_name!r} in global id")


class MalformedCursor(QueryResolutionError):
    def __init__(self, argument: str, token: Any):
        self.argument = argument
        self.token = token
        super().__init__(f"Argument '{argument}' is not a valid cursor: {token!r}")


class InvalidArguments(QueryResolutionError):
    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


class UnsupportedOperator(QueryResolutionError):
    def __init__(self, operator: str, field: str):
        self.operator = operator
        self.field = field
        super().__init__(f"Unsupported filter operator {operator!r} on field '{field}'")


class InvalidIdentifierFilter(QueryResolutionError):
    def __init__(self, field: str, value: Any, reason: Optional[str] = None):
        self.field = field
        self.value = value
        message = f"Filter field '{field}' expects a global id, got {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidFilter(QueryResolutionError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid filter on field '{field}': {reason}")
