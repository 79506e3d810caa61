"""Static phone/GPS outlet catalog served when live retrieval yields nothing."""

from outlet_scraper.models import Product

# (id, name, original price, discounted price, savings %, image)
_CATALOG = (
    ("1", "Smartfon Apple iPhone 13 128GB (Outlet - Stan Dobry)",
     3999.99, 2899.99, 28, "https://images.unsplash.com/photo-1592750475338-74b7b21085ab?w=200&q=80"),
    ("2", "Smartfon Samsung Galaxy S21 5G 128GB (Outlet - Stan Doskonały)",
     3499.99, 2499.99, 29, "https://images.unsplash.com/photo-1610945415295-d9bbf067e59c?w=200&q=80"),
    ("3", "Smartfon Xiaomi Redmi Note 10 Pro 6/128GB (Outlet - Stan Dobry)",
     1299.99, 899.99, 31, "https://images.unsplash.com/photo-1598327105666-5b89351aff97?w=200&q=80"),
    ("4", "Smartfon OnePlus 9 Pro 5G 12/256GB (Outlet - Stan Doskonały)",
     4299.99, 2999.99, 30, "https://images.unsplash.com/photo-1565849904461-04a58ad377e0?w=200&q=80"),
    ("5", "Smartfon Google Pixel 6 128GB (Outlet - Stan Dobry)",
     2999.99, 2199.99, 27, "https://images.unsplash.com/photo-1598965402089-897c69523374?w=200&q=80"),
    ("6", "Nawigacja GPS Garmin DriveSmart 65 (Outlet - Stan Doskonały)",
     1299.99, 899.99, 31, "https://images.unsplash.com/photo-1581688669862-2a364f1bd6c1?w=200&q=80"),
    ("7", "Smartfon Motorola Edge 20 Pro 12/256GB (Outlet - Stan Dostateczny)",
     2699.99, 1699.99, 37, "https://images.unsplash.com/photo-1546054454-aa26e2b734c7?w=200&q=80"),
    ("8", "Smartfon Apple iPhone 12 Mini 64GB (Outlet - Stan Dobry)",
     3299.99, 2399.99, 27, "https://images.unsplash.com/photo-1605236453806-6ff36851218e?w=200&q=80"),
    ("9", 'Nawigacja GPS TomTom GO Premium 6" (Outlet - Stan Doskonały)',
     1499.99, 1099.99, 27, "https://images.unsplash.com/photo-1527853787696-f7be74f2e39a?w=200&q=80"),
    ("10", "Smartfon Samsung Galaxy Z Flip3 5G 128GB (Outlet - Stan Dobry)",
     4499.99, 3199.99, 29, "https://images.unsplash.com/photo-1633053699034-459674b01ed6?w=200&q=80"),
    ("11", "Smartfon Oppo Find X3 Pro 12/256GB (Outlet - Stan Dostateczny)",
     3999.99, 2499.99, 38, "https://images.unsplash.com/photo-1585060544812-6b45742d762f?w=200&q=80"),
    ("12", "Smartwatch Apple Watch Series 7 GPS 45mm (Outlet - Stan Doskonały)",
     1999.99, 1599.99, 20, "https://images.unsplash.com/photo-1579586337278-3befd40fd17a?w=200&q=80"),
)


def get_fallback_products() -> list[Product]:
    """Fresh list of the twelve sample phone/GPS outlet products."""
    return [
        Product(
            id=pid,
            name=name,
            original_price=original,
            discounted_price=discounted,
            savings_percentage=savings,
            image=image,
        )
        for pid, name, original, discounted, savings, image in _CATALOG
    ]
