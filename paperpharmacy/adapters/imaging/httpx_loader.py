"""HTTP image loader that decodes the body with Pillow to read its size."""

import asyncio
import io
import logging
from functools import partial

import httpx
from PIL import Image

from paperpharmacy.domain.models import Dimensions
from paperpharmacy.ports.image_loader import ImageLoaderPort

logger = logging.getLogger(__name__)


def decode_dimensions(content: bytes) -> Dimensions:
    """Fully decode an image payload and return its pixel size."""
    with Image.open(io.BytesIO(content)) as img:
        img.load()
        width, height = img.size
    return Dimensions(width=width, height=height)


class HttpxImageLoader(ImageLoaderPort):
    """Fetch a candidate URL with a GET and decode it off the event loop."""

    async def load_and_measure(
        self, client: httpx.AsyncClient, url: str
    ) -> Dimensions | None:
        try:
            resp = await client.get(url, follow_redirects=True)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            # Malformed URLs surface as InvalidURL or ValueError, not HTTPError.
            logger.debug("Image fetch failed: %s (%s)", url, exc)
            return None

        loop = asyncio.get_running_loop()
        try:
            dims = await loop.run_in_executor(
                None, partial(decode_dimensions, resp.content)
            )
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            logger.debug("Image decode failed: %s (%s)", url, exc)
            return None

        logger.debug("Image loaded: %s (%dx%d)", url, dims.width, dims.height)
        return dims
