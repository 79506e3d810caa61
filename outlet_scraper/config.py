"""Runtime settings read from the environment (.env is loaded by the entry points)."""

import os

SITE_ORIGIN = "https://www.oleole.pl"
DEFAULT_OUTLET_URL = f"{SITE_ORIGIN}/search.bhtml?keyword=outlet"
DEFAULT_SEARCH_URL_TEMPLATE = f"{SITE_ORIGIN}/search.bhtml?keyword={{query}}"
DEFAULT_LOCAL_RELAY_URL = "http://localhost:8000/relay"

# Hard cap on listing pages followed per sync
MAX_PAGES = 5

PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1585060544812-6b45742d762f?w=200&q=80"

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "pl,en-US;q=0.9,en;q=0.8",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


def _env_number(name: str, default: float, cast=float):
    """Read a positive number from env; fall back to default when unset or invalid."""
    val = os.environ.get(name)
    if val is None:
        return default
    try:
        number = cast(val)
    except ValueError:
        return default
    return number if number > 0 else default


def is_production() -> bool:
    """Production deployments have a server-side relay next to them."""
    return os.environ.get("OUTLET_ENV", "development").lower() == "production"


def get_local_relay_url() -> str:
    return os.environ.get("LOCAL_RELAY_URL", DEFAULT_LOCAL_RELAY_URL)


def get_relay_timeout() -> float:
    """Per-request timeout in seconds for relay and upstream fetches."""
    return _env_number("RELAY_TIMEOUT_SECONDS", 15.0)


def get_outlet_url() -> str:
    return os.environ.get("OUTLET_URL", DEFAULT_OUTLET_URL)


def get_search_url_template() -> str:
    return os.environ.get("SEARCH_URL_TEMPLATE", DEFAULT_SEARCH_URL_TEMPLATE)


def get_sync_interval_minutes() -> int:
    return _env_number("SYNC_INTERVAL_MINUTES", 30, cast=int)


def get_server_address() -> tuple[str, int]:
    """Host and port for the relay/API server."""
    host = os.environ.get("SERVER_HOST", "127.0.0.1")
    return host, _env_number("SERVER_PORT", 8000, cast=int)
