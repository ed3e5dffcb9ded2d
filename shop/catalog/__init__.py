"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog with name and producer search.

Classes:
--------
- Product: Pydantic model for products
- Shop: Abstract catalog interface
- ProductCatalog: In-memory catalog implementation

==============================================================================
"""

from .models import Product
from .base import Shop
from .catalog import DEFAULT_SEARCH_LIMIT, ProductCatalog

__all__ = [
    "Product",
    "Shop",
    "ProductCatalog",
    "DEFAULT_SEARCH_LIMIT",
]
