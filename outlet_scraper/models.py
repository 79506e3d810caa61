"""Data models for outlet listings."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class SortOption(str, Enum):
    """Sort orders offered by the product table."""

    PRICE_HIGH_LOW = "price-high-low"
    PRICE_LOW_HIGH = "price-low-high"
    DISCOUNT = "discount"


@dataclass(frozen=True)
class Product:
    """Outlet product with current and original price info."""

    id: str
    name: str
    original_price: float
    discounted_price: float
    savings_percentage: int
    image: str
    original_price_estimated: bool = False

    def to_dict(self) -> dict:
        """JSON shape consumed by the product table."""
        return {
            "id": self.id,
            "name": self.name,
            "originalPrice": self.original_price,
            "discountedPrice": self.discounted_price,
            "savingsPercentage": self.savings_percentage,
            "image": self.image,
            "originalPriceEstimated": self.original_price_estimated,
        }


@dataclass
class RetrievalResult:
    """Raw page markup and the URL it was fetched from."""

    html: str
    url: str


@dataclass
class SyncResult:
    """Outcome of one sync cycle: live listing or fallback catalog."""

    products: list[Product]
    is_live: bool
    message: str = ""
    synced_at: datetime = field(default_factory=datetime.now)
