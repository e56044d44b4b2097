"""Opaque global ids.

A global id is the base64 text of ``"<TypeName>:<local id>"``. It only
hides storage keys from API consumers; it is not signed and must never
be used to authorize anything.
"""
import base64
import binascii
from typing import Any, Optional, Protocol, Tuple

from relay_resolver.core.errors import MalformedIdentifier

SEPARATOR = ":"


class TypeResolver(Protocol):
    def resolve_type_descriptor(self, type_name: str) -> Any:
        ...


def to_global_id(type_name: str, local_id: Any) -> str:
    """Encode a (type name, local id) pair into a global id."""
    if not type_name or SEPARATOR in type_name:
        raise ValueError(f"Invalid type name for global id: {type_name!r}")
    combined = f"{type_name}{SEPARATOR}{local_id}"
    return base64.b64encode(combined.encode("utf-8")).decode("ascii")


def from_global_id(global_id: str, registry: Optional[TypeResolver] = None) -> Tuple[str, str]:
    """Decode a global id into its (type name, local id) pair.

    Raises ``MalformedIdentifier`` when the token is not a two-part id and,
    when a registry is given, ``UnknownType`` for unregistered type names.
    """
    if not isinstance(global_id, str) or not global_id:
        raise MalformedIdentifier(global_id, "expected a non-empty string")
    try:
        decoded = base64.b64decode(global_id.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError) as e:
        raise MalformedIdentifier(global_id, "not base64 encoded") from e

    type_name, separator, local_id = decoded.partition(SEPARATOR)
    if not separator or not type_name or not local_id:
        raise MalformedIdentifier(global_id, "expected '<type>:<id>'")

    if registry is not None:
        registry.resolve_type_descriptor(type_name)
    return type_name, local_id
