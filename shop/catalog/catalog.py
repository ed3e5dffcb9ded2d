"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog with name and producer search.

Features:
---------
- Insert-if-absent and delete by product id
- Substring search by name with producer disambiguation
- Substring search by producer with stable producer ordering

Search Rules:
-------------
Both searches are case-sensitive literal substring matches. Only the
first ``search_limit`` matches in insertion order are considered; any
grouping or sorting happens on that truncated selection.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set

from shop.core import exceptions

from .base import Shop
from .models import Product


# Module logger
logger = logging.getLogger(__name__)


# Maximum number of matches considered by each search
DEFAULT_SEARCH_LIMIT = 10


class ProductCatalog(Shop):
    """
    In-memory product catalog.

    Products are kept in insertion order, with at most one product
    per id.

    Attributes:
        products: Copy of all stored products
        search_limit: Number of matches considered by each search

    Example:
        >>> catalog = ProductCatalog()
        >>> catalog.add_new_product(Product(id="1", name="Tea", producer="Acme"))
        True
        >>> catalog.list_products_by_name("Te")
        {'Tea'}
    """

    def __init__(self, search_limit: int = DEFAULT_SEARCH_LIMIT) -> None:
        """
        Initialize an empty catalog.

        Args:
            search_limit: Number of matches considered by each search

        Raises:
            AppException: If search_limit is lower than 1
        """
        if search_limit < 1:
            raise exceptions.invalid_search_limit(search_limit)

        self._search_limit = search_limit
        self._products: List[Product] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products in insertion order."""
        return self._products.copy()

    @property
    def search_limit(self) -> int:
        """Get the search truncation limit."""
        return self._search_limit

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, id: object) -> bool:
        return self.get_product(id) is not None

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_new_product(self, product: Product) -> bool:
        """
        Add a product unless its id is already taken.

        Args:
            product: Product to add

        Returns:
            True if added, False if a product with the same id exists
        """
        if self.get_product(product.id) is not None:
            logger.debug(f"Rejected product {product.id!r}: id already exists")
            return False

        self._products.append(product)
        logger.debug(f"Added product {product.id!r} ({product.name!r} by {product.producer!r})")
        return True

    def delete_product(self, id: str) -> bool:
        """
        Delete the product with the given id.

        Args:
            id: Product id

        Returns:
            True if the product existed and was removed, False otherwise
        """
        for index, product in enumerate(self._products):
            if product.id == id:
                del self._products[index]
                logger.debug(f"Deleted product {id!r}")
                return True

        logger.debug(f"Delete ignored: no product {id!r}")
        return False

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def list_products_by_name(self, search_string: str) -> Set[str]:
        """
        Search products by name.

        Names that occur once among the matches are returned as is.
        Names shared by several matches are returned once per product
        as "<producer> - <name>".

        Args:
            search_string: Substring to look for in product names

        Returns:
            Set of product labels
        """
        matches = self._first_matches(search_string, lambda p: p.name)

        groups: Dict[str, List[Product]] = {}
        for product in matches:
            groups.setdefault(product.name, []).append(product)

        results: Set[str] = set()
        for name, products in groups.items():
            if len(products) == 1:
                results.add(name)
            else:
                results.update(p.display_name() for p in products)

        return results

    def list_products_by_producer(self, search_string: str) -> List[str]:
        """
        Search products by producer.

        The truncated matches are sorted by producer. The sort is
        stable, so products with the same producer keep their
        insertion order.

        Args:
            search_string: Substring to look for in producer names

        Returns:
            Product names ordered by producer
        """
        matches = self._first_matches(search_string, lambda p: p.producer)
        return [p.name for p in sorted(matches, key=lambda p: p.producer)]

    def _first_matches(self, search_string: str, field) -> List[Product]:
        """Collect the first search_limit products whose field contains the search string."""
        if not search_string:
            return []

        results = []
        for product in self._products:
            if search_string in field(product):
                results.append(product)
                if len(results) >= self._search_limit:
                    break

        return results

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_product(self, id: object) -> Optional[Product]:
        """Find product by id."""
        for product in self._products:
            if product.id == id:
                return product
        return None

    def get_stats(self) -> Dict[str, int]:
        """Get catalog statistics."""
        return {
            "total_products": len(self._products),
            "distinct_names": len({p.name for p in self._products}),
            "distinct_producers": len({p.producer for p in self._products}),
        }
