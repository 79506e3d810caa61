"""Shared fixtures: listing page builders and fake HTTP responses."""

import pytest
import requests


def product_card(name="Smartfon Test", price="1 234,56 zł", original="Nowy produkt: 1 999,99 zł",
                 img='<img src="https://cdn.example/p.jpg">'):
    parts = ['<div class="product-medium-box">']
    if name is not None:
        parts.append(f'<h2 class="product-medium-box-intro__title">{name}</h2>')
    if price is not None:
        parts.append(f'<div class="parted-price-total">{price}</div>')
    if original is not None:
        parts.append(f'<div class="product-medium-box-purchase__new-product-text">{original}</div>')
    if img is not None:
        parts.append(img)
    parts.append("</div>")
    return "".join(parts)


def listing_page(cards, next_href=None):
    pagination = ""
    if next_href:
        pagination = (
            '<nav><a class="pagination-item" href="/prev">Poprzednia</a>'
            f'<a class="pagination-item" href="{next_href}">Następna</a></nav>'
        )
    return f"<html><body>{''.join(cards)}{pagination}</body></html>"


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("OUTLET_ENV", "LOCAL_RELAY_URL", "RELAY_TIMEOUT_SECONDS", "OUTLET_URL",
                 "SEARCH_URL_TEMPLATE", "SYNC_INTERVAL_MINUTES"):
        monkeypatch.delenv(name, raising=False)
