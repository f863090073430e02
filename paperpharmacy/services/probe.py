"""Bounded probe: confirm a candidate URL is a real image within a deadline."""

import asyncio
import logging

import httpx

from paperpharmacy.ports.image_loader import ImageLoaderPort

logger = logging.getLogger(__name__)


class BoundedProbe:
    """
    Validate candidate cover URLs.

    A probe passes only when the image decodes and its smaller side is
    larger than ``min_dimension`` (providers answer misses with 1x1 pixels).
    Every failure mode, including the deadline, resolves to ``None``.
    """

    def __init__(self, loader: ImageLoaderPort, min_dimension: int = 5) -> None:
        self._loader = loader
        self._min_dimension = min_dimension

    async def probe(
        self, client: httpx.AsyncClient, url: str, timeout_ms: int
    ) -> str | None:
        """Return ``url`` if it is a usable image, otherwise None."""
        try:
            dims = await asyncio.wait_for(
                self._loader.load_and_measure(client, url),
                timeout=timeout_ms / 1000,
            )
        except asyncio.TimeoutError:
            # wait_for cancels the pending load, so a late answer is dropped.
            logger.debug("Probe timed out after %dms: %s", timeout_ms, url)
            return None

        if dims is None:
            return None
        if dims.usable <= self._min_dimension:
            logger.debug(
                "Probe rejected tiny image %dx%d: %s", dims.width, dims.height, url
            )
            return None
        return url
