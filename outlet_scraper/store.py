"""In-memory holder for the current session's product list."""

import logging
from datetime import datetime
from typing import Callable

from outlet_scraper.fetchers.oleole import sync_products
from outlet_scraper.models import Product, SyncResult

logger = logging.getLogger(__name__)


class ProductStore:
    """
    Current result list plus its sync status.

    Each sync replaces the whole state in a single assignment, so readers see
    either the previous cycle or the new one. Overlapping syncs are not
    coordinated; the last one to finish wins.
    """

    def __init__(self, fetch: Callable[[], SyncResult] = sync_products):
        self._fetch = fetch
        self._state: SyncResult | None = None

    @property
    def has_synced(self) -> bool:
        return self._state is not None

    @property
    def products(self) -> list[Product]:
        return list(self._state.products) if self._state else []

    @property
    def is_live(self) -> bool:
        return bool(self._state and self._state.is_live)

    @property
    def message(self) -> str:
        return self._state.message if self._state else ""

    @property
    def synced_at(self) -> datetime | None:
        return self._state.synced_at if self._state else None

    def replace(self, result: SyncResult) -> None:
        self._state = SyncResult(
            products=list(result.products),
            is_live=result.is_live,
            message=result.message,
            synced_at=result.synced_at,
        )

    def sync(self) -> SyncResult:
        """Run one fetch cycle and swap in its result."""
        result = self._fetch()
        self.replace(result)
        logger.info(
            "Sync finished: %d products (%s)",
            len(result.products), "live" if result.is_live else "fallback",
        )
        return result
