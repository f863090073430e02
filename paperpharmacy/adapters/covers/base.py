"""Shared building blocks for cover provider adapters."""

import asyncio
import logging
import re
from abc import abstractmethod
from typing import Any

import httpx

from paperpharmacy.ports.cover_provider import CoverProvider

logger = logging.getLogger(__name__)

_PLAIN_HTTP = re.compile(r"^http:", re.IGNORECASE)


def force_https(url: str) -> str:
    """Rewrite a leading ``http:`` scheme to ``https:``."""
    return _PLAIN_HTTP.sub("https:", url, count=1)


def is_fetchable(url: str) -> bool:
    """True when ``url`` parses as an absolute http(s) URL with a host."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, ValueError):
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.host)


def first_result(data: Any, list_key: str) -> dict[str, Any]:
    """Return ``data[list_key][0]`` as a dict, or ``{}`` for any other shape."""
    if not isinstance(data, dict):
        return {}
    items = data.get(list_key)
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        return {}
    return items[0]


class DirectUrlProvider(CoverProvider):
    """Provider whose candidates are well-known CDN URL shapes keyed by ISBN."""

    @abstractmethod
    def build_urls(self, isbn: str) -> list[str]:
        ...

    async def candidate_urls(self, isbn: str, client: httpx.AsyncClient) -> list[str]:
        return self.build_urls(isbn)


class SearchApiProvider(CoverProvider):
    """
    Provider that asks a JSON search endpoint for the book and probes the
    image URL found in its first result.

    Subclasses declare the endpoint and lookup timeout, and implement
    :meth:`params` and :meth:`extract_url`. Any lookup failure yields no
    candidates.
    """

    endpoint: str
    lookup_timeout: float = 4.0

    def headers(self) -> dict[str, str]:
        return {}

    @abstractmethod
    def params(self, isbn: str) -> dict[str, str | int]:
        ...

    @abstractmethod
    def extract_url(self, data: Any) -> str | None:
        """Pull the raw image URL out of the decoded search payload."""
        ...

    def clean_url(self, url: str) -> str:
        return force_https(url)

    async def _lookup(self, isbn: str, client: httpx.AsyncClient) -> Any:
        resp = await client.get(
            self.endpoint,
            params=self.params(isbn),
            headers=self.headers(),
            timeout=self.lookup_timeout,
        )
        resp.raise_for_status()
        return resp.json()

    async def candidate_urls(self, isbn: str, client: httpx.AsyncClient) -> list[str]:
        logger.info("%s lookup: isbn=%s", self.name, isbn)
        # httpx timeouts apply per phase; the budget covers the whole lookup.
        try:
            data = await asyncio.wait_for(
                self._lookup(isbn, client), timeout=self.lookup_timeout
            )
        except asyncio.TimeoutError:
            logger.info("%s lookup timed out after %.1fs", self.name, self.lookup_timeout)
            return []
        except httpx.HTTPError as exc:
            logger.info("%s lookup failed: %s", self.name, exc)
            return []
        except ValueError as exc:
            logger.info("%s returned invalid JSON: %s", self.name, exc)
            return []

        url = self.extract_url(data)
        if not url or not isinstance(url, str):
            logger.debug("%s: no image for isbn=%s", self.name, isbn)
            return []

        url = self.clean_url(url)
        if not is_fetchable(url):
            logger.info("%s returned an unusable image URL: %r", self.name, url)
            return []
        return [url]
