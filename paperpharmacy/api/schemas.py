"""Pydantic request/response schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# ── Recommendations ──────────────────────────────


class RecommendationRequest(BaseModel):
    mood: str = Field(min_length=1)
    situation: str = ""
    genre: str = ""
    purpose: str = ""
    region: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    exclude_titles: list[str] = Field(default_factory=list)
    count: int | None = Field(default=None, ge=1, le=10)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class LibraryAvailability(BaseModel):
    name: str
    available: bool
    distance: str | None = None
    waitlist: int | None = None


class BookRecord(BaseModel):
    """A single book as produced by the recommendation LLM."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    author: str
    publisher: str
    isbn: str
    description: str
    ai_reason: str = Field(alias="aiReason")
    vibe: list[str]
    libraries: list[LibraryAvailability] = Field(default_factory=list)


class LibraryLink(LibraryAvailability):
    url: str


class PurchaseLinks(BaseModel):
    yes24: str
    kyobo: str
    aladin: str


class PaletteSchema(BaseModel):
    start: str
    end: str
    text: str


class IdentityResponse(BaseModel):
    palette_index: int
    pattern_index: int
    palette: PaletteSchema


class BookRecommendation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    author: str
    publisher: str
    isbn: str
    description: str
    ai_reason: str = Field(alias="aiReason")
    vibe: list[str]
    libraries: list[LibraryLink]
    purchase_links: PurchaseLinks
    cover: IdentityResponse


class RecommendationsResponse(BaseModel):
    recommendations: list[BookRecommendation]


# ── Covers ───────────────────────────────────────


class CoverResolutionResponse(BaseModel):
    status: Literal["resolved", "unresolved"]
    url: str | None = None
    provider: str | None = None
    attempted_providers: list[str]
    identity: IdentityResponse
