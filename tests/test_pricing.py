"""Tests for price parsing and savings."""

import pytest

from outlet_scraper.pricing import (
    calculate_savings,
    estimate_original_price,
    extract_price,
    parse_price,
    strip_price_label,
)


class TestParsePrice:

    @pytest.mark.parametrize("text, expected", [
        ("1 234,56zł", 1234.56),
        ("899,99zł", 899.99),
        ("2\xa0499,99 zł", 2499.99),
        ("12 345 zł", 12345.0),
        ("1.234,56 zł", 1234.56),
        ("99.50", 99.5),
        ("1,299.00", 1299.0),
        ("1,234,567.89", 1234567.89),
    ])
    def test_polish_formats(self, text, expected):
        assert parse_price(text) == pytest.approx(expected)

    def test_non_numeric_returns_none(self):
        assert parse_price("brak ceny") is None
        assert parse_price("") is None


class TestExtractPrice:

    def test_finds_number_in_label_text(self):
        assert extract_price("Cena: 3 999,99 zł") == pytest.approx(3999.99)

    def test_no_number_is_zero(self):
        assert extract_price("Zapytaj o cenę") == 0.0
        assert extract_price("") == 0.0

    def test_english_label_with_period_decimal(self):
        assert extract_price(strip_price_label("Was: 1,299.00")) == pytest.approx(1299.0)

    def test_strip_label(self):
        assert strip_price_label("Nowy produkt: 1 999,99 zł") == "1 999,99 zł"
        assert strip_price_label("było: 100 zł") == "100 zł"
        assert strip_price_label("Regular price: 5") == "5"


class TestSavings:

    def test_rounded_percentage(self):
        assert calculate_savings(3999.99, 2899.99) == 28
        assert calculate_savings(200, 150) == 25

    def test_zero_or_negative_original(self):
        assert calculate_savings(0, 100) == 0
        assert calculate_savings(-5, 1) == 0

    def test_estimated_original(self):
        assert estimate_original_price(100) == pytest.approx(130.0)
        assert calculate_savings(estimate_original_price(100), 100) == 23
