from types import SimpleNamespace

import pytest

from relay_resolver.core.errors import InvalidArguments, InvalidFilter
from relay_resolver.schemas.connection import OrderSpec, SortDirection
from relay_resolver.services.datasource.base import Operator, Predicate
from relay_resolver.services.datasource.memory import InMemorySource, glob_to_regex


async def _ids(source):
    return [row["id"] for row in await source.materialize()]


@pytest.mark.asyncio
async def test_approved_filter_selects_exactly_three(catalog):
    """3 of 10 entities are approved and exactly those are selected"""
    source = InMemorySource(catalog).filter([Predicate("approved", Operator.EQ, True)])
    assert await source.count() == 3
    assert await _ids(source) == ["1", "4", "7"]


@pytest.mark.asyncio
async def test_two_clauses_select_the_intersection(catalog):
    """A conjunction selects what both clauses select on their own"""
    vendor = Predicate("vendor", Operator.EQ, "acme")
    cheap = Predicate("price", Operator.LT, 60)
    base = InMemorySource(catalog)
    left = set(await _ids(base.filter([vendor])))
    right = set(await _ids(base.filter([cheap])))
    both = set(await _ids(base.filter([vendor, cheap])))
    assert both == left & right
    assert both == {"1", "3", "5"}


@pytest.mark.asyncio
@pytest.mark.parametrize("predicate,expected", [
    (Predicate("id", Operator.NE, "0"), 9),
    (Predicate("id", Operator.IN, ("1", "2", "99")), 2),
    (Predicate("vendor", Operator.NIN, ("acme",)), 5),
    (Predicate("price", Operator.GT, 50), 4),
    (Predicate("price", Operator.GTE, 50), 5),
    (Predicate("price", Operator.LTE, 20), 3),
    (Predicate("title", Operator.REGEX, r"[13]$"), 2),
    (Predicate("title", Operator.START_WITH, "Product 1"), 1),
    (Predicate("title", Operator.GLOB, "Product *"), 10),
])
async def test_operators(catalog, predicate, expected):
    assert await InMemorySource(catalog).filter([predicate]).count() == expected


def test_glob_star_needs_at_least_one_character():
    pattern = glob_to_regex("ab*")
    assert pattern.fullmatch("abc")
    assert not pattern.fullmatch("ab")
    assert glob_to_regex("a.b*").fullmatch("a.bz")
    assert not glob_to_regex("a.b*").fullmatch("axbz")


@pytest.mark.asyncio
async def test_comparisons_skip_missing_values():
    source = InMemorySource([{"id": "1", "price": None}, {"id": "2", "price": 5}])
    assert await _ids(source.filter([Predicate("price", Operator.LT, 10)])) == ["2"]


@pytest.mark.asyncio
async def test_negations_keep_missing_values():
    source = InMemorySource([{"id": "1", "vendor": "acme"}, {"id": "2", "vendor": None}])
    assert await _ids(source.filter([Predicate("vendor", Operator.NE, "acme")])) == ["2"]
    assert await _ids(source.filter([Predicate("vendor", Operator.NIN, ("acme",))])) == ["2"]
    assert await _ids(source.filter([Predicate("vendor", Operator.NIN, ("acme", None))])) == []
    assert await _ids(source.filter([Predicate("vendor", Operator.IN, ("acme", None))])) == ["1", "2"]


@pytest.mark.asyncio
async def test_comparison_against_another_type_is_rejected():
    source = InMemorySource([{"id": 1, "price": 10}, {"id": 2, "price": 20}])
    with pytest.raises(InvalidFilter) as exc_info:
        await source.filter([Predicate("price", Operator.GT, "15")]).count()
    assert exc_info.value.field == "price"


@pytest.mark.asyncio
async def test_order_over_mixed_types_is_rejected():
    source = InMemorySource([{"id": 1, "rank": 3}, {"id": 2, "rank": "high"}])
    with pytest.raises(InvalidArguments) as exc_info:
        await source.order(OrderSpec(by="rank")).materialize()
    assert exc_info.value.argument == "order.by"


@pytest.mark.asyncio
async def test_elem_match(catalog):
    """At least one variant has to satisfy every nested clause"""
    nested = (Predicate("stock", Operator.GTE, 14), Predicate("sku", Operator.START_WITH, "SKU-"))
    source = InMemorySource(catalog).filter([Predicate("variants", Operator.ELEM_MATCH, nested)])
    assert await _ids(source) == ["7", "8", "9"]


@pytest.mark.asyncio
async def test_order_puts_missing_values_last():
    items = [{"id": "a", "rank": 2}, {"id": "b", "rank": None}, {"id": "c", "rank": 5}, {"id": "d", "rank": 2}]
    source = InMemorySource(items)
    assert await _ids(source.order(OrderSpec(by="rank", direction=SortDirection.asc))) == ["a", "d", "c", "b"]
    assert await _ids(source.order(OrderSpec(by="rank", direction=SortDirection.desc))) == ["c", "a", "d", "b"]


@pytest.mark.asyncio
async def test_offset_limit_and_count():
    source = InMemorySource([{"id": i} for i in range(10)]).order(OrderSpec())
    page = source.offset(2).limit(3)
    assert [row["id"] for row in await page.materialize()] == [7, 6, 5]
    assert await page.count() == 10


@pytest.mark.asyncio
async def test_search_is_case_insensitive(catalog):
    source = InMemorySource(catalog, search_fields=("title", "vendor"))
    assert await source.search("GLOBEX").count() == 5
    assert await source.search("product 3").count() == 1


@pytest.mark.asyncio
async def test_refinements_do_not_change_the_receiver(catalog):
    base = InMemorySource(catalog)
    base.filter([Predicate("approved", Operator.EQ, True)]).limit(1)
    assert await base.count() == 10


@pytest.mark.asyncio
async def test_attribute_style_items():
    items = [SimpleNamespace(id=1, name="x"), SimpleNamespace(id=2, name="y")]
    source = InMemorySource(items).filter([Predicate("name", Operator.EQ, "y")])
    assert [item.id for item in await source.materialize()] == [2]
