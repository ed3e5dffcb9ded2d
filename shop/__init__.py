"""
==============================================================================
Shop Catalog
==============================================================================

In-memory product catalog with insert, delete, name search and
producer search.

==============================================================================
"""

from shop.catalog import Product, ProductCatalog, Shop

__version__ = "1.0.0"

__all__ = [
    "Product",
    "ProductCatalog",
    "Shop",
]
