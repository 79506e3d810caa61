"""OleOle.pl outlet listing fetcher with pagination and fallback catalog."""

import logging
from dataclasses import replace
from urllib.parse import quote_plus

from outlet_scraper.config import MAX_PAGES, get_outlet_url, get_search_url_template
from outlet_scraper.extractor import (
    extract_products,
    find_next_page_url,
    parse_listing,
    products_from_document,
)
from outlet_scraper.fallback import get_fallback_products
from outlet_scraper.fetchers.relay import fetch_via_relay
from outlet_scraper.models import Product, RetrievalResult, SyncResult

logger = logging.getLogger(__name__)

FALLBACK_NO_PRODUCTS = "Could not parse products from the listing, showing sample data"
FALLBACK_FETCH_FAILED = "Could not fetch from website, showing sample data"


def _fetch_page(url: str) -> RetrievalResult:
    return RetrievalResult(html=fetch_via_relay(url), url=url)


def _renumber(products: list[Product]) -> list[Product]:
    """Give aggregated products ids unique across all pages."""
    return [replace(p, id=f"scraped-{i}") for i, p in enumerate(products, start=1)]


def _read_page(page: RetrievalResult) -> tuple[list[Product], str | None]:
    """Products on a fetched page and its next-page URL, from a single parse."""
    doc = parse_listing(page.html)
    if doc is None:
        return [], None
    return products_from_document(doc), find_next_page_url(doc, page.url)


def fetch_outlet_pages(start_url: str, max_pages: int = MAX_PAGES) -> list[Product]:
    """
    Fetch a listing and follow its 'next page' links, up to max_pages pages.

    Raises RelayError only if the first page cannot be fetched. A failure on a
    later page ends pagination; products already collected are kept.
    """
    products, next_url = _read_page(_fetch_page(start_url))
    logger.info("Parsed %d products from page 1", len(products))

    visited = {start_url}
    page_count = 1
    while page_count < max_pages:
        if not next_url:
            logger.info("No more pages found after page %d", page_count)
            break
        if next_url in visited:
            logger.warning("Pagination loops back to %s, stopping", next_url)
            break

        logger.info("Fetching page %d: %s", page_count + 1, next_url)
        try:
            page = _fetch_page(next_url)
        except Exception as e:
            logger.error("Error fetching page %d: %s", page_count + 1, e)
            break

        visited.add(next_url)
        page_count += 1
        page_products, next_url = _read_page(page)
        logger.info("Parsed %d products from page %d", len(page_products), page_count)
        products.extend(page_products)

    logger.info("Collected %d products from %d pages", len(products), page_count)
    return _renumber(products)


def _sync(load) -> SyncResult:
    try:
        products = load()
    except Exception as e:
        logger.error("Could not fetch from website: %s", e)
        return SyncResult(get_fallback_products(), is_live=False, message=FALLBACK_FETCH_FAILED)

    if not products:
        logger.warning("No products parsed from HTML, using fallback catalog")
        return SyncResult(get_fallback_products(), is_live=False, message=FALLBACK_NO_PRODUCTS)
    return SyncResult(products, is_live=True, message=f"Loaded {len(products)} live products")


def sync_products(url: str | None = None) -> SyncResult:
    """All-outlet sync: live products when any were found, else the fallback catalog."""
    return _sync(lambda: fetch_outlet_pages(url or get_outlet_url()))


def fetch_all_products() -> list[Product]:
    """All outlet products across listing pages. Never raises."""
    return sync_products().products


def fetch_search_products(query: str) -> list[Product]:
    """Products for one search query (first results page only). Never raises."""
    url = get_search_url_template().format(query=quote_plus(query))
    return _sync(lambda: extract_products(_fetch_page(url).html)).products
