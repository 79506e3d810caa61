"""
Product extraction from OleOle listing pages.

The site's markup drifts between several known variants, so every lookup goes
through a prioritized selector list and the first match wins. A field that
cannot be resolved gets its zero/placeholder value and the card is kept; only
an unexpected error while reading a card drops that card.
"""

import logging
from urllib.parse import urljoin

from outlet_scraper.config import PLACEHOLDER_IMAGE, SITE_ORIGIN
from outlet_scraper.document import Node, parse_document
from outlet_scraper.models import Product
from outlet_scraper.pricing import (
    calculate_savings,
    estimate_original_price,
    extract_price,
    strip_price_label,
)

logger = logging.getLogger(__name__)

CARD_SELECTORS = (
    ".product-medium-box",
    ".product-box",
    ".product-item",
)
NAME_SELECTORS = (
    ".product-medium-box-intro__title",
    ".product-name",
    "h3",
    "h4",
)
PRICE_SELECTORS = (
    ".parted-price-total",
    ".price",
    ".product-price",
    ".current-price",
)
ORIGINAL_PRICE_SELECTORS = (
    ".product-medium-box-purchase__new-product-text",
    ".old-price",
    ".regular-price",
    ".original-price",
)
IMAGE_SELECTORS = (
    "img",
    ".product-image img",
    ".product-img",
)
# Lazy-loaded images keep the real URL in data-* attributes
IMAGE_ATTRIBUTES = ("src", "data-src", "data-lazy-src")

PAGINATION_SELECTOR = ".pagination-item"
NEXT_PAGE_LABELS = ("Następna", "Next")

OUTLET_SUFFIX = " (Outlet)"


def _looks_like_html(html: str) -> bool:
    return bool(html and html.strip()) and "<html" in html.lower()


def find_product_cards(doc: Node) -> list[Node]:
    """Cards matched by the first selector that finds any."""
    for selector in CARD_SELECTORS:
        cards = doc.select(selector)
        if cards:
            logger.debug("Matched %d product cards with %s", len(cards), selector)
            return cards
    return []


def _extract_name(card: Node, index: int) -> str:
    node = card.first(NAME_SELECTORS)
    name = node.text if node else ""
    if not name:
        name = f"Unknown Product {index}"
    return name + OUTLET_SUFFIX


def _extract_discounted_price(card: Node) -> float:
    node = card.first(PRICE_SELECTORS)
    return extract_price(node.text) if node else 0.0


def _extract_original_price(card: Node) -> float:
    node = card.first(ORIGINAL_PRICE_SELECTORS)
    return extract_price(strip_price_label(node.text)) if node else 0.0


def _extract_image(card: Node) -> str:
    node = card.first(IMAGE_SELECTORS)
    if node is None:
        return PLACEHOLDER_IMAGE
    for name in IMAGE_ATTRIBUTES:
        value = node.attr(name)
        if value:
            return urljoin(SITE_ORIGIN, value.strip())
    return PLACEHOLDER_IMAGE


def parse_card(card: Node, index: int) -> Product:
    """Build a Product from one card; index is 1-based position on the page."""
    discounted = _extract_discounted_price(card)
    original = _extract_original_price(card)
    estimated = original <= discounted
    if estimated:
        original = estimate_original_price(discounted)

    return Product(
        id=f"scraped-{index}",
        name=_extract_name(card, index),
        original_price=original,
        discounted_price=discounted,
        savings_percentage=calculate_savings(original, discounted),
        image=_extract_image(card),
        original_price_estimated=estimated,
    )


def parse_listing(html: str) -> Node | None:
    """Parsed listing page, or None when the text is not usable HTML."""
    if not _looks_like_html(html):
        logger.warning("Received empty or invalid HTML")
        return None
    logger.debug("HTML preview: %s", html[:200])
    try:
        return parse_document(html)
    except Exception:
        logger.exception("Error parsing HTML content")
        return None


def extract_products(html: str) -> list[Product]:
    """Extract every product card from a listing page. Never raises."""
    doc = parse_listing(html)
    return products_from_document(doc) if doc is not None else []


def products_from_document(doc: Node) -> list[Product]:
    """Products for every card in an already parsed page. Never raises."""
    try:
        cards = find_product_cards(doc)
    except Exception:
        logger.exception("Error locating product elements")
        return []

    if not cards:
        logger.warning("No product elements found in HTML using any selector")
        return []
    logger.info("Found %d product elements in HTML", len(cards))

    products: list[Product] = []
    for index, card in enumerate(cards, start=1):
        try:
            products.append(parse_card(card, index))
        except Exception:
            logger.exception("Error parsing product element %d", index)
    return products


def find_next_page_url(doc: Node, base_url: str = SITE_ORIGIN) -> str | None:
    """
    Absolute URL of the pagination link labelled 'Następna', if any.

    Links are resolved against base_url, the page they were found on; paths
    starting with '/' land on the site origin.
    """
    for link in doc.select(PAGINATION_SELECTOR):
        if not any(label in link.text for label in NEXT_PAGE_LABELS):
            continue
        href = link.attr("href")
        if href:
            return urljoin(base_url, href)
    return None
