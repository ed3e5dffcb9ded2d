"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- self_check: Reference scenario run against a fresh catalog

==============================================================================
"""

from .self_check import CatalogSelfCheck, reference_products

__all__ = [
    "CatalogSelfCheck",
    "reference_products",
]
