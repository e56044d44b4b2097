import logging
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.types import Info

from relay_resolver.api.graphql.common.connection import Connection
from relay_resolver.api.graphql.common.filters import IdentifierPolicy, translate_filter
from relay_resolver.api.graphql.common.global_id import TypeResolver, from_global_id
from relay_resolver.api.graphql.common.inputs import OrderInput
from relay_resolver.api.graphql.common.pagination import ConnectionBuilder, ResolutionScope, validate_window_arguments
from relay_resolver.core.config import Settings, get_settings
from relay_resolver.core.errors import MalformedIdentifier
from relay_resolver.schemas.connection import DEFAULT_ORDER, ConnectionRequest
from relay_resolver.services.datasource.base import DataSource
from relay_resolver.services.datasource.sql import SqlAlchemySource

logger = logging.getLogger(__name__)

T = TypeVar('T')  # Type for the database model
G = TypeVar('G')  # Type for the GraphQL type


async def resolve_connection(
    source: DataSource,
    request: ConnectionRequest,
    *,
    node_factory: Optional[Callable[[Any], Any]] = None,
    registry: Optional[TypeResolver] = None,
    policy: Optional[IdentifierPolicy] = None,
    settings: Optional[Settings] = None,
) -> Connection:
    """Resolve one connection request against a data source.

    Arguments and filters are fully validated before the first data source
    call, so a rejected request never reaches storage. Everything computed
    here lives in this call; nothing is shared between requests.
    """
    settings = settings or get_settings()
    order = request.order or DEFAULT_ORDER

    bounds = validate_window_arguments(request)
    policy = policy or IdentifierPolicy(settings.IDENTIFIER_SUFFIX)
    predicates = translate_filter(request.filter, policy, registry)

    if predicates:
        source = source.filter(predicates)
    if request.search:
        source = source.search(request.search)
    source = source.order(order)

    builder = ConnectionBuilder(settings.MAX_PAGE_SIZE)
    return await builder.build(source, request, node_factory, ResolutionScope(), bounds)


class BaseResolver(Generic[T, G]):
    """Base resolver class to standardize resolver patterns across all domain modules."""

    model_class: Type[T] = None
    graphql_type_class: Type[G] = None
    type_name: str = None
    search_columns: Sequence[str] = ()
    # Columns ending in the identifier suffix that hold external, non-global ids.
    raw_id_fields: Sequence[str] = ()
    # Identifier fields that reference another type, by type name.
    id_field_types: Mapping[str, str] = {}

    @classmethod
    def parse_local_id(cls, local_id: str) -> UUID:
        try:
            return UUID(str(local_id))
        except ValueError as e:
            raise MalformedIdentifier(local_id, f"not a valid {cls.type_name} id") from e

    @classmethod
    async def load(cls, info: Info, local_id: str) -> Optional[T]:
        """Load a model through the request's batching loader."""
        loaders = info.context["loaders"]
        return await loaders[cls.type_name].load(cls.parse_local_id(local_id))

    @classmethod
    async def get_by_global_id(cls, info: Info, global_id: str) -> Optional[G]:
        type_name, local_id = from_global_id(global_id, info.context.get("registry"))
        if type_name != cls.type_name:
            raise MalformedIdentifier(global_id, f"expected a {cls.type_name} id, got a {type_name} id")
        model = await cls.load(info, local_id)
        if model is None:
            return None
        return cls.to_graphql_type(model)

    @classmethod
    def to_graphql_type(cls, model: T) -> G:
        """Convert a database model to a GraphQL type."""
        raise NotImplementedError("Subclasses must implement to_graphql_type method")

    @classmethod
    def get_db_from_info(cls, info: Info) -> AsyncSession:
        """Extract database session from GraphQL info context."""
        context = info.context
        return context.get("db")

    @classmethod
    def data_source(cls, info: Info) -> DataSource:
        return SqlAlchemySource(cls.get_db_from_info(info), cls.model_class, cls.search_columns)

    @classmethod
    def identifier_policy(cls) -> IdentifierPolicy:
        return IdentifierPolicy(
            get_settings().IDENTIFIER_SUFFIX,
            frozenset(cls.raw_id_fields),
            {"id": cls.type_name, **cls.id_field_types},
        )

    @staticmethod
    def connection_request(
        first: Optional[int] = None,
        after: Optional[str] = None,
        last: Optional[int] = None,
        before: Optional[str] = None,
        skip: Optional[int] = None,
        order: Optional[OrderInput] = None,
        filter: Optional[Any] = None,
        search: Optional[str] = None,
    ) -> ConnectionRequest:
        return ConnectionRequest.from_arguments(
            first=first,
            after=after,
            last=last,
            before=before,
            skip=skip,
            order=order.to_spec() if order is not None else None,
            filter=filter,
            search=search,
        )

    @classmethod
    async def get_connection(
        cls,
        info: Info,
        request: ConnectionRequest,
        source: Optional[DataSource] = None,
    ) -> Connection[G]:
        """Get a paginated connection of this resolver's type."""
        if source is None:
            source = cls.data_source(info)
        logger.debug(f"Resolving {cls.type_name} connection")
        return await resolve_connection(
            source,
            request,
            node_factory=cls.to_graphql_type,
            registry=info.context.get("registry"),
            policy=cls.identifier_policy(),
        )
