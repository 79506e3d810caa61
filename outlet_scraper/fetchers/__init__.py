"""Fetchers for OleOle outlet listings."""

from outlet_scraper.fetchers.oleole import (
    fetch_all_products,
    fetch_search_products,
    sync_products,
)
from outlet_scraper.fetchers.relay import AllRelaysFailedError, RelayError, fetch_via_relay

__all__ = [
    "fetch_all_products",
    "fetch_search_products",
    "sync_products",
    "fetch_via_relay",
    "RelayError",
    "AllRelaysFailedError",
]
