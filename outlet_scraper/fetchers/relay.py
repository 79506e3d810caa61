"""Relay chain client: fetch a page through a server-side relay or public CORS proxies."""

import logging
from typing import Callable
from urllib.parse import quote

import requests

from outlet_scraper.config import (
    BROWSER_HEADERS,
    get_local_relay_url,
    get_relay_timeout,
    is_production,
)

logger = logging.getLogger(__name__)

# Public relays, tried in this order. A template with {url} wraps the encoded
# target; any other template gets it appended.
PUBLIC_RELAYS = (
    "https://corsproxy.io/?url=",
    "https://api.allorigins.win/raw?url=",
    "https://api.codetabs.com/v1/proxy?quest=",
    "https://cors-anywhere.herokuapp.com/",
    "https://cors-proxy.htmldriven.com/?url=",
    "https://thingproxy.freeboard.io/fetch/",
)

Strategy = tuple[str, Callable[[], str]]


class RelayError(Exception):
    """Raised when a page cannot be retrieved through any relay."""


class AllRelaysFailedError(RelayError):
    """Every relay strategy was tried and none returned a 2xx response."""

    def __init__(self, attempts: int):
        super().__init__(f"All relays failed after {attempts} attempts")
        self.attempts = attempts


def build_relay_url(template: str, target_url: str) -> str:
    """Combine a relay template with the percent-encoded target URL."""
    encoded = quote(target_url, safe="")
    if "{url}" in template:
        return template.replace("{url}", encoded)
    return f"{template}{encoded}"


def _get_text(url: str, params: dict | None = None) -> str:
    """GET with browser headers; raise on transport error or non-2xx status."""
    resp = requests.get(
        url,
        params=params,
        headers=BROWSER_HEADERS,
        timeout=get_relay_timeout(),
    )
    resp.raise_for_status()
    return resp.text


def _local_relay(target_url: str) -> Callable[[], str]:
    return lambda: _get_text(get_local_relay_url(), params={"url": target_url})


def _public_relay(template: str, target_url: str) -> Callable[[], str]:
    return lambda: _get_text(build_relay_url(template, target_url))


def relay_strategies(target_url: str) -> list[Strategy]:
    """
    Ordered retrieval strategies for target_url.

    The local relay comes first, but only in production where one is deployed.
    """
    strategies: list[Strategy] = []
    if is_production():
        strategies.append(("local relay", _local_relay(target_url)))
    for template in PUBLIC_RELAYS:
        strategies.append((template, _public_relay(template, target_url)))
    return strategies


def first_success(strategies: list[Strategy]) -> str:
    """
    Run strategies in order and return the first body retrieved.

    A strategy fails by raising; the failure is logged and the next one runs.
    Raises AllRelaysFailedError when none succeeds.
    """
    attempts = 0
    for label, strategy in strategies:
        attempts += 1
        logger.info("Trying relay: %s", label)
        try:
            body = strategy()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            logger.warning("Relay %s failed with status: %s", label, status)
            continue
        except requests.RequestException as e:
            logger.warning("Error with relay %s: %s", label, e)
            continue
        except Exception as e:
            logger.warning("Unexpected error with relay %s: %s", label, e)
            continue
        logger.info("Fetched HTML via %s, length: %d", label, len(body))
        return body
    raise AllRelaysFailedError(attempts)


def fetch_via_relay(target_url: str) -> str:
    """Fetch target_url through the relay chain. Raises AllRelaysFailedError."""
    return first_success(relay_strategies(target_url))
