"""Domain types for cover resolution."""

import re
from dataclasses import dataclass, field

UNTITLED = "제목 미정"
UNKNOWN_AUTHOR = "작자 미상"

_NON_DIGITS = re.compile(r"[^0-9]")


@dataclass(frozen=True)
class BookKey:
    """Noisy identifier of a book as supplied by the caller."""

    title: str
    author: str
    isbn: str | None = None

    @property
    def normalized_isbn(self) -> str:
        """ISBN with every non-digit stripped; empty when unusable."""
        return _NON_DIGITS.sub("", self.isbn or "")

    @property
    def display_title(self) -> str:
        return (self.title or "").strip() or UNTITLED

    @property
    def display_author(self) -> str:
        return (self.author or "").strip() or UNKNOWN_AUTHOR


@dataclass(frozen=True)
class Palette:
    start: str
    end: str
    text: str


@dataclass(frozen=True)
class VisualIdentity:
    """Hash-derived palette and pattern selection for a fallback cover."""

    palette_index: int
    pattern_index: int


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int

    @property
    def usable(self) -> int:
        return min(self.width, self.height)


@dataclass(frozen=True)
class Resolved:
    url: str
    provider_name: str


@dataclass(frozen=True)
class Unresolved:
    pass


UNRESOLVED = Unresolved()

ResolutionResult = Resolved | Unresolved


@dataclass
class ResolutionSession:
    """
    Mutable state of one in-flight resolution.

    Owned by a single displayed cover. The orchestrator appends to
    ``attempted_providers`` and sets ``provider_name`` on success; the owner
    only ever flips ``active`` through :meth:`cancel`.
    """

    active: bool = True
    attempted_providers: list[str] = field(default_factory=list)
    provider_name: str | None = None

    def cancel(self) -> None:
        self.active = False
