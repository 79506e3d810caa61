"""Search and sort over a product list, as the product table applies them."""

from outlet_scraper.models import Product, SortOption

_SORT_KEYS = {
    SortOption.PRICE_HIGH_LOW: (lambda p: p.discounted_price, True),
    SortOption.PRICE_LOW_HIGH: (lambda p: p.discounted_price, False),
    SortOption.DISCOUNT: (lambda p: p.savings_percentage, True),
}


def search_products(products: list[Product], query: str) -> list[Product]:
    """Case-insensitive substring match on name. Blank query returns input as-is."""
    if not query or not query.strip():
        return products
    needle = query.lower()
    return [p for p in products if needle in p.name.lower()]


def sort_products(products: list[Product], sort_by: SortOption | str) -> list[Product]:
    """
    Stable sort into a new list. Unknown sort keys return an unsorted copy.
    """
    try:
        key, reverse = _SORT_KEYS[SortOption(sort_by)]
    except ValueError:
        return list(products)
    # sorted() is stable for reverse=True as well
    return sorted(products, key=key, reverse=reverse)


def apply_view(
    products: list[Product],
    query: str = "",
    sort_by: SortOption | str = SortOption.DISCOUNT,
) -> list[Product]:
    return sort_products(search_products(products, query), sort_by)
