"""Tests for the Flask relay endpoint, product API and product store."""

import pytest
import requests

from conftest import FakeResponse
from outlet_scraper import server
from outlet_scraper.fallback import get_fallback_products
from outlet_scraper.models import SyncResult
from outlet_scraper.server import create_app
from outlet_scraper.store import ProductStore


class CountingSync:

    def __init__(self, results):
        self.results = list(results)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.results[min(self.calls, len(self.results)) - 1]


@pytest.fixture
def fallback_sync():
    return CountingSync([SyncResult(get_fallback_products(), is_live=False, message="sample data")])


@pytest.fixture
def client(fallback_sync):
    app = create_app(ProductStore(fetch=fallback_sync))
    app.testing = True
    return app.test_client()


class TestRelayEndpoint:

    def test_preflight(self, client):
        resp = client.options("/relay")
        assert resp.status_code == 204
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
        assert "OPTIONS" in resp.headers["Access-Control-Allow-Methods"]
        assert resp.headers["Access-Control-Max-Age"] == "86400"

    def test_missing_url(self, client):
        resp = client.get("/relay")
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "URL parameter is required"}

    def test_body_returned_verbatim(self, client, monkeypatch):
        seen = {}

        def fake_get(url, headers=None, timeout=None):
            seen["url"] = url
            return FakeResponse("<html><body>listing</body></html>")

        monkeypatch.setattr(server.requests, "get", fake_get)
        resp = client.get("/relay", query_string={"url": "https://www.oleole.pl/a?b=1"})

        assert resp.status_code == 200
        assert resp.get_data(as_text=True) == "<html><body>listing</body></html>"
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
        assert resp.content_type.startswith("text/html")
        assert seen["url"] == "https://www.oleole.pl/a?b=1"

    def test_upstream_status_mirrored(self, client, monkeypatch):
        monkeypatch.setattr(server.requests, "get", lambda url, **kw: FakeResponse(status_code=403))
        resp = client.get("/relay?url=https://www.oleole.pl/")
        assert resp.status_code == 403
        assert resp.get_json() == {"error": "Failed to fetch from website: 403"}

    def test_transport_error_is_500(self, client, monkeypatch):
        def fail(url, **kw):
            raise requests.ConnectionError("unreachable")

        monkeypatch.setattr(server.requests, "get", fail)
        resp = client.get("/relay?url=https://www.oleole.pl/")
        assert resp.status_code == 500
        assert "error" in resp.get_json()


class TestProductApi:

    def test_lazy_sync_once(self, client, fallback_sync):
        first = client.get("/api/products").get_json()
        client.get("/api/products")

        assert fallback_sync.calls == 1
        assert first["live"] is False
        assert first["message"] == "sample data"
        assert len(first["products"]) == 12
        savings = [p["savingsPercentage"] for p in first["products"]]
        assert savings == sorted(savings, reverse=True)

    def test_search_and_sort(self, client):
        data = client.get("/api/products?q=garmin&sort=price-low-high").get_json()
        assert [p["id"] for p in data["products"]] == ["6"]
        assert data["products"][0]["originalPriceEstimated"] is False

    def test_unknown_sort(self, client):
        assert client.get("/api/products?sort=random").status_code == 400

    def test_sync_replaces_list(self, client, fallback_sync):
        client.get("/api/products")
        client.post("/api/sync")
        assert fallback_sync.calls == 2

    def test_health(self, client):
        assert client.get("/health").get_json() == {"status": "ok"}


class TestProductStore:

    def test_empty_before_sync(self):
        store = ProductStore(fetch=lambda: SyncResult([], is_live=False))
        assert store.products == []
        assert store.has_synced is False
        assert store.synced_at is None

    def test_replaced_not_patched(self):
        live = SyncResult(get_fallback_products()[:2], is_live=True, message="live")
        store = ProductStore(fetch=CountingSync([live, SyncResult(get_fallback_products(), is_live=False)]))

        store.sync()
        snapshot = store.products
        store.sync()

        assert len(snapshot) == 2
        assert len(store.products) == 12
        assert store.is_live is False

    def test_callers_cannot_mutate_state(self):
        store = ProductStore(fetch=lambda: SyncResult(get_fallback_products(), is_live=True))
        store.sync()
        store.products.clear()
        assert len(store.products) == 12
