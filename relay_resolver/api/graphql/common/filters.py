"""Translate a client filter tree into data source predicates.

A filter is a mapping of field name to a mapping of operator name to
value, for example::

    {"approved": {"eq": True}, "store_id": {"in": ["U3RvcmU6MQ=="]}}

Every clause is AND-ed with the others; there is no way to express OR or
NOT across clauses. A list of such mappings is accepted as well and is
conjoined the same way.

Fields named ``id`` or ending with the identifier suffix hold global ids
on the API side, so their values are decoded to local ids before they
reach the data source.
"""
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, List, Optional

from relay_resolver.api.graphql.common.global_id import TypeResolver, from_global_id
from relay_resolver.core.errors import (
    InvalidFilter,
    InvalidIdentifierFilter,
    MalformedIdentifier,
    UnknownType,
    UnsupportedOperator,
)
from relay_resolver.services.datasource.base import Operator, Predicate

logger = logging.getLogger(__name__)

_LIST_OPERATORS = {Operator.IN, Operator.NIN}
_STRING_OPERATORS = {Operator.REGEX, Operator.GLOB, Operator.START_WITH}
_ORDINAL_OPERATORS = {Operator.GT, Operator.GTE, Operator.LT, Operator.LTE}


@dataclass(frozen=True)
class IdentifierPolicy:
    """Decides which filter fields carry global ids."""
    suffix: str = "_id"
    # Fields that match the suffix but hold raw external ids.
    exempt: FrozenSet[str] = frozenset()
    # Type name a field's ids must carry, for the fields where it is known.
    expected_types: Mapping[str, str] = field(default_factory=dict)

    def is_identifier(self, name: str) -> bool:
        if name in self.exempt:
            return False
        return name == "id" or name.endswith(self.suffix)

    def nested(self) -> "IdentifierPolicy":
        """Policy for an elemMatch filter, whose fields belong to another type."""
        return replace(self, expected_types={})


def translate_filter(
    node: Any,
    policy: Optional[IdentifierPolicy] = None,
    registry: Optional[TypeResolver] = None,
) -> List[Predicate]:
    """Return the predicates of ``node`` in the order they were written."""
    policy = policy or IdentifierPolicy()
    if node is None:
        return []
    if isinstance(node, (list, tuple)):
        predicates = []
        for child in node:
            predicates.extend(translate_filter(child, policy, registry))
        return predicates
    if not isinstance(node, Mapping):
        raise InvalidFilter("filter", "expected an object keyed by field name")

    predicates = []
    for field, clause in node.items():
        if not isinstance(clause, Mapping):
            raise InvalidFilter(field, "expected an object keyed by operator")
        for name, value in clause.items():
            predicates.append(_translate_clause(field, name, value, policy, registry))
    logger.debug(f"Translated filter into {len(predicates)} predicate(s)")
    return predicates


def _translate_clause(field, name, value, policy, registry) -> Predicate:
    try:
        operator = Operator(name)
    except ValueError:
        logger.warning(f"Rejected filter operator {name!r} on field '{field}'")
        raise UnsupportedOperator(name, field) from None

    if operator is Operator.ELEM_MATCH:
        if not isinstance(value, (Mapping, list, tuple)):
            raise InvalidFilter(field, "elemMatch expects a nested filter")
        nested = translate_filter(value, policy.nested(), registry)
        if not nested:
            raise InvalidFilter(field, "elemMatch needs at least one clause")
        return Predicate(field, operator, tuple(nested))

    value = _check_value(field, operator, value)
    if policy.is_identifier(field):
        value = _decode_identifiers(field, value, registry, policy.expected_types.get(field))
    return Predicate(field, operator, value)


def _check_value(field: str, operator: Operator, value: Any) -> Any:
    if operator in _LIST_OPERATORS:
        if not isinstance(value, (list, tuple)):
            raise InvalidFilter(field, f"'{operator.value}' expects a list")
        return tuple(value)
    if operator in _STRING_OPERATORS:
        if not isinstance(value, str):
            raise InvalidFilter(field, f"'{operator.value}' expects a string")
        if operator is Operator.REGEX:
            try:
                re.compile(value)
            except re.error as e:
                raise InvalidFilter(field, f"invalid regular expression: {e}") from e
        return value
    if operator in _ORDINAL_OPERATORS and value is None:
        raise InvalidFilter(field, f"'{operator.value}' cannot compare against null")
    return value


def _decode_identifiers(field: str, value: Any, registry: Optional[TypeResolver], expected: Optional[str]) -> Any:
    if isinstance(value, tuple):
        return tuple(_decode_identifiers(field, item, registry, expected) for item in value)
    if value is None:
        return None
    try:
        type_name, local_id = from_global_id(value, registry)
    except (MalformedIdentifier, UnknownType) as e:
        logger.warning(f"Rejected identifier filter on '{field}': {e}")
        raise InvalidIdentifierFilter(field, value, str(e)) from e
    if expected is not None and type_name != expected:
        logger.warning(f"Rejected {type_name} id in identifier filter on '{field}'")
        raise InvalidIdentifierFilter(field, value, f"expected a {expected} id, got a {type_name} id")
    return local_id
