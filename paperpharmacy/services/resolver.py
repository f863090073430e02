"""
Cover resolution orchestrator.

Walks the provider chain in registry order, probing each candidate URL in
turn, and stops at the first image that passes the probe:

    Idle -> Probing(0) -> Probing(1) -> ... -> Resolved | Unresolved

The session's ``active`` flag is checked before every provider, before every
candidate and after every probe; once it drops, the result is Unresolved and
anything still in flight is ignored.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence

import httpx

from paperpharmacy.domain.models import (
    UNRESOLVED,
    BookKey,
    ResolutionResult,
    ResolutionSession,
    Resolved,
)
from paperpharmacy.ports.cover_provider import CoverProvider
from paperpharmacy.services.probe import BoundedProbe

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], httpx.AsyncClient]

USER_AGENT = "PaperPharmacy/1.0 (+cover-resolver)"


def default_client_factory() -> httpx.AsyncClient:
    return httpx.AsyncClient(headers={"User-Agent": USER_AGENT})


class CoverResolver:
    """Drives one resolution session through the provider chain."""

    def __init__(
        self,
        providers: Sequence[CoverProvider],
        probe: BoundedProbe,
        client_factory: ClientFactory = default_client_factory,
        deadline_ms: int | None = None,
    ) -> None:
        self._providers = tuple(providers)
        self._probe = probe
        self._client_factory = client_factory
        self._deadline_ms = deadline_ms

    @property
    def providers(self) -> tuple[CoverProvider, ...]:
        return self._providers

    async def resolve(
        self, book: BookKey, session: ResolutionSession
    ) -> ResolutionResult:
        """Resolve a cover for ``book``; never raises for provider failures."""
        isbn = book.normalized_isbn
        if not isbn:
            logger.info("No usable ISBN for '%s'; keeping fallback cover", book.title)
            return UNRESOLVED
        if not session.active:
            return UNRESOLVED

        if self._deadline_ms is None:
            return await self._run(book, isbn, session)
        try:
            return await asyncio.wait_for(
                self._run(book, isbn, session), timeout=self._deadline_ms / 1000
            )
        except asyncio.TimeoutError:
            logger.info(
                "Cover resolution for '%s' exceeded %dms deadline",
                book.title,
                self._deadline_ms,
            )
            return UNRESOLVED

    async def _run(
        self, book: BookKey, isbn: str, session: ResolutionSession
    ) -> ResolutionResult:
        # Enabled flags are fixed for the whole resolution.
        chain = [(provider, provider.enabled) for provider in self._providers]

        async with self._client_factory() as client:
            for provider, enabled in chain:
                if not session.active:
                    return UNRESOLVED
                if not enabled:
                    logger.debug("Skipping disabled provider '%s'", provider.name)
                    continue

                session.attempted_providers.append(provider.name)
                logger.info("[%s] trying provider '%s'", book.title, provider.name)
                try:
                    candidates = await provider.candidate_urls(isbn, client)
                except Exception:
                    logger.exception(
                        "[%s] provider '%s' failed; moving on", book.title, provider.name
                    )
                    continue

                for url in candidates:
                    if not session.active:
                        return UNRESOLVED
                    try:
                        winner = await self._probe.probe(
                            client, url, provider.per_candidate_timeout_ms
                        )
                    except Exception:
                        logger.exception("[%s] candidate failed: %s", book.title, url)
                        winner = None
                    if not session.active:
                        return UNRESOLVED
                    if winner:
                        session.provider_name = provider.name
                        logger.info(
                            "[%s] cover found via '%s': %s",
                            book.title,
                            provider.name,
                            winner,
                        )
                        return Resolved(url=winner, provider_name=provider.name)

        logger.info("[%s] all cover providers exhausted; keeping fallback", book.title)
        return UNRESOLVED
