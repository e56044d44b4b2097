import logging
import uuid
from typing import Any, Iterable, List, Optional, Sequence, Type

from sqlalchemy import and_, asc, desc, func, inspect, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from relay_resolver.core.errors import InvalidArguments, InvalidFilter
from relay_resolver.schemas.connection import OrderSpec, SortDirection
from relay_resolver.services.datasource.base import DataSource, Operator, Predicate, ensure_handlers

logger = logging.getLogger(__name__)

_COERCIBLE_TYPES = (uuid.UUID, int)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def glob_to_like(pattern: str) -> str:
    """Translate a wildcard pattern into a LIKE pattern escaped with ``\\``."""
    return _escape_like(pattern).replace("*", "_%")


def _coerce(attribute, field: str, value: Any) -> Any:
    """Convert string values (e.g. decoded local ids) to the column's type."""
    if isinstance(value, (list, tuple)):
        return [_coerce(attribute, field, item) for item in value]
    if not isinstance(value, str):
        return value
    try:
        python_type = attribute.type.python_type
    except (AttributeError, NotImplementedError):
        return value
    if python_type not in _COERCIBLE_TYPES:
        return value
    try:
        return python_type(value)
    except ValueError as e:
        raise InvalidFilter(field, f"{value!r} is not a valid {python_type.__name__}") from e


def _eq(attribute, value):
    return attribute.is_(None) if value is None else attribute == value


# NULL columns match "ne" and "nin" unless null itself is excluded, and
# match "in" when null is listed.
def _ne(attribute, value):
    if value is None:
        return attribute.is_not(None)
    return or_(attribute != value, attribute.is_(None))


def _in(attribute, value):
    present = [item for item in value if item is not None]
    clause = attribute.in_(present)
    if len(present) < len(value):
        return or_(clause, attribute.is_(None))
    return clause


def _nin(attribute, value):
    present = [item for item in value if item is not None]
    if len(present) < len(value):
        return and_(attribute.not_in(present), attribute.is_not(None))
    return or_(attribute.not_in(present), attribute.is_(None))


_HANDLERS = ensure_handlers({
    Operator.EQ: _eq,
    Operator.NE: _ne,
    Operator.IN: _in,
    Operator.NIN: _nin,
    Operator.GT: lambda attribute, value: attribute > value,
    Operator.GTE: lambda attribute, value: attribute >= value,
    Operator.LT: lambda attribute, value: attribute < value,
    Operator.LTE: lambda attribute, value: attribute <= value,
    Operator.REGEX: lambda attribute, value: attribute.regexp_match(value),
    Operator.GLOB: lambda attribute, value: attribute.like(glob_to_like(value), escape="\\"),
    Operator.START_WITH: lambda attribute, value: attribute.startswith(value, autoescape=True),
    # Needs the related model, see SqlAlchemySource._clause.
    Operator.ELEM_MATCH: None,
}, "SqlAlchemySource")


class SqlAlchemySource(DataSource):
    """Data source over a declarative model, executed on an AsyncSession."""

    def __init__(
        self,
        db: AsyncSession,
        model: Type[Any],
        search_columns: Sequence[str] = (),
        statement: Optional[Select] = None,
    ):
        self.db = db
        self.model = model
        self.search_columns = tuple(search_columns)
        self.statement = statement if statement is not None else select(model)

    def _with(self, statement: Select) -> "SqlAlchemySource":
        return SqlAlchemySource(self.db, self.model, self.search_columns, statement)

    @staticmethod
    def _attribute(model: Type[Any], field: str):
        if field not in inspect(model).attrs:
            raise InvalidFilter(field, f"{model.__name__} has no field '{field}'")
        return getattr(model, field)

    def _clause(self, model: Type[Any], predicate: Predicate):
        if predicate.operator is Operator.ELEM_MATCH:
            relationship = inspect(model).relationships.get(predicate.field)
            if relationship is None:
                raise InvalidFilter(predicate.field, "elemMatch requires a to-many relationship")
            related = relationship.mapper.class_
            nested = [self._clause(related, inner) for inner in predicate.value]
            return getattr(model, predicate.field).any(and_(*nested))
        attribute = self._attribute(model, predicate.field)
        value = _coerce(attribute, predicate.field, predicate.value)
        return _HANDLERS[predicate.operator](attribute, value)

    def filter(self, predicates: Iterable[Predicate]) -> "SqlAlchemySource":
        clauses = [self._clause(self.model, predicate) for predicate in predicates]
        if not clauses:
            return self
        return self._with(self.statement.where(*clauses))

    def order(self, spec: OrderSpec) -> "SqlAlchemySource":
        if spec.by not in inspect(self.model).columns:
            raise InvalidArguments("order.by", f"{self.model.__name__} cannot be ordered by '{spec.by}'")
        direction = desc if spec.direction == SortDirection.desc else asc
        column = getattr(self.model, spec.by)
        ordering = [direction(column)]
        for key in inspect(self.model).primary_key:
            if key.key != spec.by:
                ordering.append(asc(key))
        return self._with(self.statement.order_by(None).order_by(*ordering))

    def offset(self, n: int) -> "SqlAlchemySource":
        return self._with(self.statement.offset(n))

    def limit(self, n: int) -> "SqlAlchemySource":
        return self._with(self.statement.limit(n))

    def search(self, term: str) -> "SqlAlchemySource":
        if not self.search_columns:
            logger.debug(f"{self.model.__name__} has no search columns, ignoring search {term!r}")
            return self
        pattern = f"%{_escape_like(term)}%"
        return self._with(
            self.statement.where(
                or_(*[getattr(self.model, name).ilike(pattern, escape="\\") for name in self.search_columns])
            )
        )

    def count_statement(self) -> Select:
        base = self.statement.order_by(None).limit(None).offset(None)
        return select(func.count()).select_from(base.subquery())

    async def count(self) -> int:
        result = await self.db.execute(self.count_statement())
        return result.scalar_one()

    async def materialize(self) -> List[Any]:
        result = await self.db.execute(self.statement)
        return list(result.scalars().all())
