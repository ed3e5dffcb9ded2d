"""
==============================================================================
Catalog Self-Check Module
==============================================================================

Reference scenario run against a fresh catalog at application startup.

Scenario:
---------
1. Insert/delete bookkeeping on a single product id
2. Load an 11-product fixture ("Some ..." and "Other ..." products)
3. Verify name search truncation and producer disambiguation
4. Verify producer search truncation and ordering

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, List

from shop.catalog import Product, Shop
from shop.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


# (id, name, producer) in insertion order
REFERENCE_PRODUCTS = [
    ("3", "Some Product3", "Some Producer2"),
    ("4", "Some Product1", "Some Producer3"),
    ("2", "Some Product2", "Some Producer2"),
    ("1", "Some Product1", "Some Producer1"),
    ("5", "Other Product5", "Other Producer4"),
    ("6", "Other Product6", "Other Producer4"),
    ("7", "Other Product7", "Other Producer4"),
    ("8", "Other Product8", "Other Producer4"),
    ("9", "Other Product9", "Other Producer4"),
    ("10", "Other Product10", "Other Producer4"),
    ("11", "Other Product11", "Other Producer4"),
]


def reference_products() -> List[Product]:
    """Build the reference fixture products."""
    return [
        Product(id=id, name=name, producer=producer)
        for id, name, producer in REFERENCE_PRODUCTS
    ]


class CatalogSelfCheck:
    """
    Runs the reference scenario against an empty catalog.

    The scenario mutates the catalog, so pass a scratch instance.

    Example:
        >>> checks = CatalogSelfCheck(ProductCatalog()).run()
        >>> print(checks)
        20
    """

    def __init__(self, shop: Shop) -> None:
        self._shop = shop
        self._passed = 0

    def run(self) -> int:
        """
        Run every check in order.

        Returns:
            Number of checks passed

        Raises:
            AppException: On the first failing check (SELF_CHECK_FAILED)
        """
        self._passed = 0
        shop = self._shop

        self._expect("delete from empty catalog", False, shop.delete_product("1"))
        self._expect(
            "add new product",
            True,
            shop.add_new_product(Product(id="1", name="1", producer="Lex")),
        )
        self._expect(
            "add duplicate id",
            False,
            shop.add_new_product(
                Product(id="1", name="any name because we check id only", producer="any producer")
            ),
        )
        self._expect("delete existing product", True, shop.delete_product("1"))

        for product in reference_products():
            self._expect(f"add product {product.id}", True, shop.add_new_product(product))

        self._check_name_search()
        self._check_producer_search()

        logger.info(f"Catalog self-check passed ({self._passed} checks)")
        return self._passed

    def _check_name_search(self) -> None:
        by_name = self._shop.list_products_by_name("Product")
        self._expect("name search is truncated", 10, len(by_name))

        by_name = self._shop.list_products_by_name("Some Product")
        self._expect(
            "name search disambiguates shared names",
            {
                "Some Producer1 - Some Product1",
                "Some Producer3 - Some Product1",
                "Some Product2",
                "Some Product3",
            },
            by_name,
        )

    def _check_producer_search(self) -> None:
        by_producer = self._shop.list_products_by_producer("Producer")
        self._expect("producer search is truncated", 10, len(by_producer))

        by_producer = self._shop.list_products_by_producer("Some Producer")
        self._expect("producer search size", 4, len(by_producer))
        self._expect(
            "producer search order",
            ["Some Product1", {"Some Product2", "Some Product3"}, "Some Product1"],
            [by_producer[0], set(by_producer[1:3]), by_producer[3]],
        )

    def _expect(self, check: str, expected: Any, actual: Any) -> None:
        if expected != actual:
            logger.error(f"Self-check '{check}' failed: expected {expected!r}, got {actual!r}")
            raise exceptions.self_check_failed(check, expected, actual)
        self._passed += 1
