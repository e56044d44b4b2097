import pytest

from relay_resolver.core.errors import UnknownType
from relay_resolver.services.datasource.memory import InMemorySource


class FakeRegistry:
    """Registry double that knows a fixed set of type names."""

    def __init__(self, *type_names):
        self.type_names = set(type_names)

    def resolve_type_descriptor(self, type_name):
        if type_name not in self.type_names:
            raise UnknownType(type_name)
        return type_name


class RecordingSource(InMemorySource):
    """In-memory source that records every fetch made against it."""

    def __init__(self, items, calls):
        super().__init__(items)
        self.calls = calls

    async def count(self):
        self.calls.append("count")
        return await super().count()

    async def materialize(self):
        self.calls.append("materialize")
        return await super().materialize()


@pytest.fixture
def recording_source():
    """Factory for a source plus the list of fetches made against it."""
    def make(items):
        calls = []
        return RecordingSource(items, calls), calls
    return make


@pytest.fixture
def registry():
    return FakeRegistry("Product", "Store", "Customer")


@pytest.fixture
def catalog():
    """Ten products, three of them approved."""
    return [
        {"id": str(i), "title": f"Product {i}", "vendor": "acme" if i % 2 else "globex",
         "store_id": "s1" if i < 5 else "s2", "approved": i in (1, 4, 7), "price": i * 10,
         "variants": [{"sku": f"SKU-{i}-{n}", "stock": n * i} for n in range(3)]}
        for i in range(10)
    ]
