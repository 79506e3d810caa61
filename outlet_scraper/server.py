"""Flask server: same-origin relay for OleOle pages plus the product JSON API."""

import logging
import os
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request

from outlet_scraper.catalog import apply_view
from outlet_scraper.config import BROWSER_HEADERS, get_relay_timeout, get_server_address
from outlet_scraper.models import SortOption
from outlet_scraper.store import ProductStore

logger = logging.getLogger(__name__)

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Max-Age": "86400",
}
SORT_VALUES = {option.value for option in SortOption}


def _json_error(message: str, status: int):
    return jsonify({"error": message}), status, CORS_HEADERS


def _envelope(store: ProductStore, query: str = "", sort_by: str = SortOption.DISCOUNT.value) -> dict:
    synced_at = store.synced_at
    return {
        "products": [p.to_dict() for p in apply_view(store.products, query, sort_by)],
        "live": store.is_live,
        "message": store.message,
        "syncedAt": synced_at.isoformat() if synced_at else None,
    }


def create_app(store: ProductStore | None = None) -> Flask:
    """Build the app; a fresh ProductStore is created unless one is given."""
    app = Flask(__name__)
    store = store or ProductStore()
    app.config["PRODUCT_STORE"] = store

    @app.route("/relay", methods=["GET", "OPTIONS"])
    def relay():
        if request.method == "OPTIONS":
            return Response("", status=204, headers=PREFLIGHT_HEADERS)

        url = request.args.get("url")
        if not url:
            return _json_error("URL parameter is required", 400)

        logger.info("Proxying request to: %s", url)
        try:
            resp = requests.get(url, headers=BROWSER_HEADERS, timeout=get_relay_timeout())
        except requests.RequestException as e:
            logger.error("Error in relay: %s", e)
            return _json_error("Failed to fetch data from OleOle.pl", 500)

        if not resp.ok:
            logger.warning("Upstream returned status %d for %s", resp.status_code, url)
            return _json_error(f"Failed to fetch from website: {resp.status_code}", resp.status_code)

        logger.info("Fetched HTML content, length: %d", len(resp.text))
        return Response(
            resp.text,
            status=200,
            content_type="text/html; charset=utf-8",
            headers={**CORS_HEADERS, "Access-Control-Allow-Headers": "Content-Type"},
        )

    @app.route("/api/products")
    def api_products():
        query = request.args.get("q") or ""
        sort_by = (request.args.get("sort") or SortOption.DISCOUNT.value).strip()
        if sort_by not in SORT_VALUES:
            return _json_error(f"Unknown sort option: {sort_by}", 400)
        if not store.has_synced:
            store.sync()
        return jsonify(_envelope(store, query, sort_by))

    @app.route("/api/sync", methods=["POST"])
    def api_sync():
        store.sync()
        return jsonify(_envelope(store))

    @app.route("/health")
    def health():
        return {"status": "ok"}

    return app


def main() -> None:
    load_dotenv(Path.cwd() / ".env")
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    host, port = get_server_address()
    create_app().run(host=host, port=port)


if __name__ == "__main__":
    main()
