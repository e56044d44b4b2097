import uuid
from types import SimpleNamespace

import pytest

from relay_resolver.api.graphql.common.global_id import to_global_id
from relay_resolver.api.graphql.registry import TYPE_REGISTRY
from relay_resolver.api.graphql.schema import schema


@pytest.fixture
def context():
    """Context without a database; every query here fails before touching it."""
    return {"request": None, "db": None, "registry": TYPE_REGISTRY, "loaders": None}


def test_connection_fields_are_exposed():
    sdl = schema.as_str()
    for field in ("productsConnection(", "customersConnection(", "storesConnection(", "node(id: ID!): Node"):
        assert field in sdl
    for field in ("totalCount: Int!", "totalPages: Int", "currentPage: Int", "pageInfo: PageInfo!",
                  "hasNextPage: Boolean!", "hasPreviousPage: Boolean!", "startCursor: String", "endCursor: String"):
        assert field in sdl
    assert "enum OrderDirection" in sdl
    assert "input OrderInput" in sdl


async def _execute(context, query, variables=None):
    result = await schema.execute(query, variable_values=variables, context_value=context)
    assert result.errors
    return result.errors[0].message


@pytest.mark.asyncio
async def test_conflicting_pagination_arguments(context):
    message = await _execute(context, "{ productsConnection(first: 1, last: 1) { totalCount } }")
    assert "'first'" in message


@pytest.mark.asyncio
async def test_negative_first(context):
    message = await _execute(context, "{ customersConnection(first: -1) { totalCount } }")
    assert "'first'" in message


@pytest.mark.asyncio
async def test_malformed_cursor(context):
    message = await _execute(context, '{ storesConnection(after: "nope!") { totalCount } }')
    assert "'after'" in message


@pytest.mark.asyncio
async def test_unsupported_operator(context):
    query = "query ($filter: JSON) { productsConnection(filter: $filter) { totalCount } }"
    message = await _execute(context, query, {"filter": {"title": {"contains": "x"}}})
    assert "'contains'" in message
    assert "'title'" in message


@pytest.mark.asyncio
async def test_unknown_filter_field(context):
    query = "query ($filter: JSON) { productsConnection(filter: $filter) { totalCount } }"
    message = await _execute(context, query, {"filter": {"colour": {"eq": "red"}}})
    assert "'colour'" in message


@pytest.mark.asyncio
async def test_identifier_filter_requires_global_id(context):
    query = "query ($filter: JSON) { productsConnection(filter: $filter) { totalCount } }"
    message = await _execute(context, query, {"filter": {"store_id": {"eq": "raw-id"}}})
    assert "'store_id'" in message


@pytest.mark.asyncio
async def test_identifier_filter_with_id_of_another_type(context):
    query = "query ($filter: JSON) { customersConnection(filter: $filter) { totalCount } }"
    token = to_global_id("Product", "6f1c9c3e-4d0b-4a57-9c1f-3f4f0c3d2a11")
    message = await _execute(context, query, {"filter": {"store_id": {"eq": token}}})
    assert "'store_id'" in message
    assert "expected a Store id" in message


@pytest.mark.asyncio
async def test_node_with_malformed_id(context):
    message = await _execute(context, '{ node(id: "garbage") { id } }')
    assert "Malformed global id" in message


@pytest.mark.asyncio
async def test_node_with_unknown_type(context):
    message = await _execute(context, f'{{ node(id: "{to_global_id("Invoice", "1")}") {{ id }} }}')
    assert "Invoice" in message


@pytest.mark.asyncio
async def test_lookup_with_id_of_another_type(context):
    token = to_global_id("Store", "6f1c9c3e-4d0b-4a57-9c1f-3f4f0c3d2a11")
    message = await _execute(context, f'{{ product(id: "{token}") {{ id }} }}')
    assert "expected a Product id" in message


class StubLoader:
    def __init__(self, models):
        self.models = models

    async def load(self, key):
        return self.models.get(key)


@pytest.mark.asyncio
async def test_node_resolves_a_product_variant(context):
    variant_id = uuid.UUID("0b6c2f5e-8f3a-4c1d-9a7e-2d4b6c8e0f12")
    product_id = uuid.UUID("6f1c9c3e-4d0b-4a57-9c1f-3f4f0c3d2a11")
    variant = SimpleNamespace(
        id=variant_id, product_id=product_id, title="Large", sku="SKU-L", price=None, inventory_quantity=4
    )
    context["loaders"] = {"ProductVariant": StubLoader({variant_id: variant})}
    token = to_global_id("ProductVariant", variant_id)

    query = f'{{ node(id: "{token}") {{ id ... on ProductVariant {{ sku productId }} }} }}'
    result = await schema.execute(query, context_value=context)

    assert result.errors is None
    assert result.data["node"] == {"id": token, "sku": "SKU-L", "productId": to_global_id("Product", product_id)}
