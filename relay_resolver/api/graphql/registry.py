"""Static table of the types that can be addressed by global id.

Adding a type to the API means adding one ``TypeDescriptor`` here; the
table is read at startup to build the per-request loaders and is used
to validate the type half of every decoded global id.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Type

from relay_resolver.api.graphql.customers.resolvers import CustomerResolver
from relay_resolver.api.graphql.products.resolvers import ProductResolver, ProductVariantResolver
from relay_resolver.api.graphql.resolvers import BaseResolver
from relay_resolver.api.graphql.stores.resolvers import StoreResolver
from relay_resolver.core.errors import UnknownType


@dataclass(frozen=True)
class TypeDescriptor:
    name: str
    resolver: Type[BaseResolver]

    @property
    def model_class(self):
        return self.resolver.model_class


class TypeRegistry:
    def __init__(self, descriptors: Iterable[TypeDescriptor]):
        self._descriptors = MappingProxyType({descriptor.name: descriptor for descriptor in descriptors})

    def resolve_type_descriptor(self, type_name: str) -> TypeDescriptor:
        try:
            return self._descriptors[type_name]
        except KeyError:
            raise UnknownType(type_name) from None

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._descriptors.values())

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._descriptors


TYPE_REGISTRY = TypeRegistry([
    TypeDescriptor(StoreResolver.type_name, StoreResolver),
    TypeDescriptor(ProductResolver.type_name, ProductResolver),
    TypeDescriptor(ProductVariantResolver.type_name, ProductVariantResolver),
    TypeDescriptor(CustomerResolver.type_name, CustomerResolver),
])
