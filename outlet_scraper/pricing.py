"""Price parsing and savings calculation."""

import re

# Markup applied when the listing shows no usable original price
ESTIMATED_MARKUP = 1.3

ORIGINAL_PRICE_LABELS = re.compile(
    r"Nowy produkt:|Cena regularna:|Było:|New product:|Regular price:|Was:",
    re.IGNORECASE,
)
CURRENCY_PATTERN = re.compile(r"zł|PLN", re.IGNORECASE)
NUMBER_RUN = re.compile(r"\d[\d\s,.]*")


def parse_price(text: str) -> float | None:
    """Convert a price like '1 234,56zł' to 1234.56. None when not numeric."""
    if not text:
        return None
    cleaned = CURRENCY_PATTERN.sub("", text)
    cleaned = re.sub(r"\s", "", cleaned)
    if "," in cleaned and "." in cleaned:
        # Whichever separator comes last is the decimal mark
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        cleaned = cleaned.replace(",", ".", 1).replace(",", "")
    elif cleaned.count(".") > 1:
        cleaned = cleaned.replace(".", "")
    try:
        return float(cleaned)
    except ValueError:
        return None


def extract_price(text: str) -> float:
    """Parse the first number found in free price text. 0.0 if none."""
    if not text:
        return 0.0
    match = NUMBER_RUN.search(text)
    if not match:
        return 0.0
    return parse_price(match.group(0).strip(" .,")) or 0.0


def strip_price_label(text: str) -> str:
    """Remove 'Nowy produkt:' style labels in front of an original price."""
    return ORIGINAL_PRICE_LABELS.sub("", text or "").strip()


def calculate_savings(original_price: float, discounted_price: float) -> int:
    """Savings percentage rounded to the nearest integer; 0 if original <= 0."""
    if original_price <= 0:
        return 0
    return round((original_price - discounted_price) / original_price * 100)


def estimate_original_price(discounted_price: float) -> float:
    return round(discounted_price * ESTIMATED_MARKUP, 2)
