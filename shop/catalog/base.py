"""
==============================================================================
Shop Interface Module
==============================================================================

Abstract interface implemented by every product catalog.

==============================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Set

from .models import Product


class Shop(ABC):
    """Operations a product catalog exposes to its host."""

    @abstractmethod
    def add_new_product(self, product: Product) -> bool:
        """
        Add a new product to the shop.

        Args:
            product: Product to add

        Returns:
            False if a product with the same id already exists, True otherwise
        """

    @abstractmethod
    def delete_product(self, id: str) -> bool:
        """
        Delete the product with the given id.

        Returns:
            True if a product with that id existed, False otherwise
        """

    @abstractmethod
    def list_products_by_name(self, search_string: str) -> Set[str]:
        """
        List up to 10 product names containing the search string.

        Names shared by several matches are returned as
        "<producer> - <name>", unique names are returned as is.
        """

    @abstractmethod
    def list_products_by_producer(self, search_string: str) -> List[str]:
        """List up to 10 product names whose producer contains the search string, ordered by producer."""
