"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog, product and settings fixtures.

==============================================================================
"""

import pytest
from typing import Generator, List

from shop.catalog import Product, ProductCatalog
from shop.config import get_settings
from shop.utils import reference_products


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> ProductCatalog:
    """Create an empty catalog."""
    return ProductCatalog()


@pytest.fixture
def products() -> List[Product]:
    """Reference fixture products in insertion order."""
    return reference_products()


@pytest.fixture
def reference_catalog(catalog: ProductCatalog, products: List[Product]) -> ProductCatalog:
    """Create a catalog loaded with the reference fixture."""
    for product in products:
        assert catalog.add_new_product(product)
    return catalog


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reload settings from the environment for each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
