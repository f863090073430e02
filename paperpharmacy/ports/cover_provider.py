"""Cover provider port: one named strategy for turning an ISBN into image URLs."""

from abc import ABC, abstractmethod

import httpx


class CoverProvider(ABC):
    """
    A resolution strategy in the cover provider registry.

    Attributes:
        name:                     Identifier reported on a successful resolution.
        per_candidate_timeout_ms: Probe budget for each URL this provider yields.
    """

    name: str
    per_candidate_timeout_ms: int = 4000

    @property
    def enabled(self) -> bool:
        """Whether the provider may run; credentialed providers override this."""
        return True

    @abstractmethod
    async def candidate_urls(self, isbn: str, client: httpx.AsyncClient) -> list[str]:
        """
        Return candidate image URLs for a digits-only ISBN, in probe order.

        Implementations must return an empty list instead of raising when
        their own lookup fails.
        """
        ...
