"""Request-scoped DataLoaders.

A fresh ``RequestLoaders`` is built for every GraphQL request, so each
key is fetched at most once per request and nothing is cached across
requests.
"""
import logging
from collections import defaultdict
from functools import partial
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.dataloader import DataLoader

from relay_resolver.api.graphql.registry import TypeRegistry
from relay_resolver.db.models.product_variant import ProductVariant

logger = logging.getLogger(__name__)


async def load_models(db: AsyncSession, model_class: Any, ids: List[UUID]) -> List[Optional[Any]]:
    """Load models by primary key with one query, in the order requested."""
    logger.debug(f"Batch loading {len(ids)} {model_class.__name__} row(s)")
    result = await db.execute(select(model_class).where(model_class.id.in_(ids)))
    found = {model.id: model for model in result.scalars().all()}
    return [found.get(id_) for id_ in ids]


async def load_variants_by_product(db: AsyncSession, product_ids: List[UUID]) -> List[List[ProductVariant]]:
    stmt = (
        select(ProductVariant)
        .where(ProductVariant.product_id.in_(product_ids))
        .order_by(ProductVariant.product_id, ProductVariant.id)
    )
    result = await db.execute(stmt)
    grouped: Dict[UUID, List[ProductVariant]] = defaultdict(list)
    for variant in result.scalars().all():
        grouped[variant.product_id].append(variant)
    return [grouped.get(product_id, []) for product_id in product_ids]


class RequestLoaders:
    """One DataLoader per registered type, plus relationship loaders."""

    def __init__(self, db: AsyncSession, registry: TypeRegistry):
        self._by_type = {
            descriptor.name: DataLoader(load_fn=partial(load_models, db, descriptor.model_class))
            for descriptor in registry
        }
        self.variants_by_product = DataLoader(load_fn=partial(load_variants_by_product, db))

    def __getitem__(self, type_name: str) -> DataLoader:
        return self._by_type[type_name]
