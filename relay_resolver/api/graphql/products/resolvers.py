from typing import List
from uuid import UUID

from strawberry.types import Info

from relay_resolver.db.models.product import Product as ProductModel
from relay_resolver.db.models.product_variant import ProductVariant as ProductVariantModel
from relay_resolver.api.graphql.products.types import Product, ProductVariant
from relay_resolver.api.graphql.resolvers import BaseResolver
from relay_resolver.api.graphql.common.global_id import to_global_id

class ProductResolver(BaseResolver[ProductModel, Product]):
    """Resolver for Product-related operations."""

    model_class = ProductModel
    graphql_type_class = Product
    type_name = "Product"
    search_columns = ("title", "vendor", "product_type")
    raw_id_fields = ("platform_product_id",)
    id_field_types = {"store_id": "Store"}

    @classmethod
    def to_graphql_type(cls, model: ProductModel) -> Product:
        """Convert a ProductModel to a GraphQL Product type."""
        return Product(
            id=to_global_id(cls.type_name, model.id),
            local_id=model.id,
            store_id=to_global_id("Store", model.store_id),
            platform_product_id=model.platform_product_id,
            title=model.title,
            vendor=model.vendor,
            product_type=model.product_type,
            approved=model.approved,
            platform_created_at=model.platform_created_at,
        )

class ProductVariantResolver(BaseResolver[ProductVariantModel, ProductVariant]):
    """Resolver for variants; they are only listed through their product."""

    model_class = ProductVariantModel
    graphql_type_class = ProductVariant
    type_name = "ProductVariant"
    search_columns = ("title", "sku")
    id_field_types = {"product_id": "Product"}

    @classmethod
    def to_graphql_type(cls, model: ProductVariantModel) -> ProductVariant:
        return ProductVariant(
            id=to_global_id(cls.type_name, model.id),
            product_id=to_global_id(ProductResolver.type_name, model.product_id),
            title=model.title,
            sku=model.sku,
            price=model.price,
            inventory_quantity=model.inventory_quantity,
        )

    @classmethod
    async def get_for_product(cls, info: Info, product_id: UUID) -> List[ProductVariant]:
        """Variants of one product, batched across all products in the request."""
        loaders = info.context["loaders"]
        variants = await loaders.variants_by_product.load(product_id)
        return [cls.to_graphql_type(variant) for variant in variants]
