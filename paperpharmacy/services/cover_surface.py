"""Presentation state for a single cover slot."""

import asyncio
import logging
from enum import Enum

from paperpharmacy.domain.identity import identity_of, render_fallback_svg
from paperpharmacy.domain.models import (
    BookKey,
    ResolutionResult,
    ResolutionSession,
    Resolved,
    VisualIdentity,
)
from paperpharmacy.services.resolver import CoverResolver

logger = logging.getLogger(__name__)


class CoverState(str, Enum):
    FALLBACK = "fallback"
    CROSS_FADING = "cross_fading"
    REAL_IMAGE = "real_image"


class CoverSlot:
    """
    One displayed cover.

    ``mount`` shows the hash-derived fallback immediately and starts a
    background resolution; a resolved image replaces it after a short
    cross-fade. At most one session is active per slot.
    """

    def __init__(
        self,
        resolver: CoverResolver,
        cross_fade_ms: int = 100,
        size: str = "large",
    ) -> None:
        self._resolver = resolver
        self._cross_fade_ms = cross_fade_ms
        self._size = size
        self._session: ResolutionSession | None = None
        self._task: asyncio.Task[ResolutionResult] | None = None

        self.book: BookKey | None = None
        self.identity: VisualIdentity | None = None
        self.fallback_svg: str | None = None
        self.image_url: str | None = None
        self.state = CoverState.FALLBACK

    @property
    def session(self) -> ResolutionSession | None:
        return self._session

    @property
    def task(self) -> asyncio.Task[ResolutionResult] | None:
        return self._task

    def mount(self, book: BookKey) -> None:
        """Show ``book`` in this slot. Must be called from a running event loop."""
        self.unmount()

        self.book = book
        self.identity = identity_of(book.display_title, book.display_author)
        self.fallback_svg = render_fallback_svg(book, self._size)
        self.image_url = None
        self.state = CoverState.FALLBACK

        session = ResolutionSession()
        self._session = session
        self._task = asyncio.get_running_loop().create_task(self._run(book, session))

    def unmount(self) -> None:
        """Abandon the current session; its result will never be applied."""
        if self._session is not None:
            self._session.cancel()
        self._session = None

    async def wait(self) -> ResolutionResult | None:
        """Wait for the current resolution task to finish."""
        if self._task is None:
            return None
        return await self._task

    async def _run(self, book: BookKey, session: ResolutionSession) -> ResolutionResult:
        result = await self._resolver.resolve(book, session)
        if not session.active or session is not self._session:
            return result

        if isinstance(result, Resolved):
            self.image_url = result.url
            self.state = CoverState.CROSS_FADING
            await asyncio.sleep(self._cross_fade_ms / 1000)
            if session.active and session is self._session:
                self.state = CoverState.REAL_IMAGE
        else:
            logger.debug("Keeping fallback cover for '%s'", book.display_title)

        session.cancel()
        return result
