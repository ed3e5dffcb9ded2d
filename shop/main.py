"""
==============================================================================
Shop Catalog - Application Entry Point
==============================================================================

Host application owning a single in-memory product catalog:
- Settings and logging setup
- Catalog construction with the configured search limit
- Catalog self-check at startup

Usage:
------
    python -m shop.main

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from shop.catalog import ProductCatalog
from shop.config import Settings, get_settings
from shop.core import AppException
from shop.utils import CatalogSelfCheck


logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


# ============================================================================
# APPLICATION
# ============================================================================

class Application:
    """
    Catalog host application.

    Handles application lifecycle:
    - Catalog construction
    - Startup self-check

    Example:
        >>> application = Application()
        >>> application.start()
        >>> application.catalog.add_new_product(product)
        True
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the application.

        Args:
            settings: Settings to use (global settings if None)
        """
        self._settings = settings or get_settings()
        self._catalog = ProductCatalog(search_limit=self._settings.search_limit)
        self._started = False

    def start(self) -> None:
        """
        Application startup tasks.

        Raises:
            AppException: If the catalog self-check fails
        """
        logger.info(f"Starting {self._settings.app_name} ({self._settings.app_env})")

        if self._settings.self_check_on_startup:
            self._run_self_check()
        else:
            logger.debug("Catalog self-check disabled")

        self._started = True
        logger.info(
            f"{self._settings.app_name} ready "
            f"(search limit {self._catalog.search_limit})"
        )

    def _run_self_check(self) -> None:
        """Run the reference scenario against a scratch catalog."""
        try:
            CatalogSelfCheck(ProductCatalog()).run()
        except AppException as e:
            logger.error(f"Startup aborted: {e.to_dict()}")
            raise

    @property
    def catalog(self) -> ProductCatalog:
        """Get the application catalog."""
        return self._catalog

    @property
    def started(self) -> bool:
        """Check whether startup completed."""
        return self._started


# ============================================================================
# ENTRY POINT
# ============================================================================

def main() -> int:
    """Start the application and log catalog statistics."""
    settings = get_settings()
    configure_logging(settings)

    application = Application(settings)
    try:
        application.start()
    except AppException:
        return 1

    logger.info(f"Catalog stats: {application.catalog.get_stats()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
