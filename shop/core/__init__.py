"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: AppException class and error factory functions

Usage:
------
    from shop.core import AppException

    # Or use exception factory functions via module
    from shop.core import exceptions
    raise exceptions.self_check_failed("name search", expected, actual)

==============================================================================
"""

from .exceptions import AppException

__all__ = [
    "AppException",
]
