"""Image loader port: fetch a remote image and report its pixel size."""

from abc import ABC, abstractmethod

import httpx

from paperpharmacy.domain.models import Dimensions


class ImageLoaderPort(ABC):
    """Abstraction over whatever can confirm a URL is a decodable image."""

    @abstractmethod
    async def load_and_measure(
        self, client: httpx.AsyncClient, url: str
    ) -> Dimensions | None:
        """Return the image dimensions, or None if it cannot be loaded or decoded."""
        ...
