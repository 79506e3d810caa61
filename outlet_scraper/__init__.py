"""OleOle outlet listing scraper."""
