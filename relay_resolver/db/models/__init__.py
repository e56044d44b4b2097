from .store import Store
from .product import Product
from .product_variant import ProductVariant
from .customer import Customer

__all__ = [
    'Store',
    'Product',
    'ProductVariant',
    'Customer',
]
