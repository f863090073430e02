"""Book recommendation service: LLM call, validation and link enrichment."""

import json
import logging
from urllib.parse import quote

import httpx
from fastapi import HTTPException, status
from openai import OpenAIError
from pydantic import TypeAdapter

from paperpharmacy.api.schemas import (
    BookRecommendation,
    BookRecord,
    IdentityResponse,
    LibraryLink,
    PaletteSchema,
    PurchaseLinks,
    RecommendationRequest,
)
from paperpharmacy.config import Settings
from paperpharmacy.domain.identity import identity_of, palette_for
from paperpharmacy.domain.models import BookKey
from paperpharmacy.ports.recommender import RecommenderPort

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "AI 추천을 받아오는 데 실패했어요. 잠시 후 다시 시도해주세요."

_BOOK_RECORDS = TypeAdapter(list[BookRecord])


def parse_book_records(raw: str) -> list[BookRecord]:
    """Parse ``{"books": [...]}`` or a bare JSON array into validated records."""
    data = json.loads(raw.strip())
    if isinstance(data, dict):
        if "books" not in data:
            raise ValueError(f"LLM answer has no 'books' key: {sorted(data)}")
        data = data["books"]
    records = _BOOK_RECORDS.validate_python(data)
    if not records:
        raise ValueError("LLM answer contains no books")
    return records


def identity_response(title: str, author: str) -> IdentityResponse:
    book = BookKey(title=title, author=author)
    identity = identity_of(book.display_title, book.display_author)
    palette = palette_for(identity)
    return IdentityResponse(
        palette_index=identity.palette_index,
        pattern_index=identity.pattern_index,
        palette=PaletteSchema(start=palette.start, end=palette.end, text=palette.text),
    )


def library_map_url(name: str, request: RecommendationRequest) -> str:
    """Naver map search URL, centred on the reader when GPS is known."""
    url = f"https://map.naver.com/v5/search/{quote(name)}"
    if request.has_location:
        url += f"?c={request.longitude},{request.latitude},15,0,0,0,dh"
    return url


def purchase_links(title: str) -> PurchaseLinks:
    encoded = quote(title)
    return PurchaseLinks(
        yes24=f"https://www.yes24.com/Product/Search?query={encoded}",
        kyobo=f"https://search.kyobobook.co.kr/search?keyword={encoded}",
        aladin=f"https://www.aladin.co.kr/search/wsearchresult.aspx?SearchWord={encoded}",
    )


class RecommendationService:
    """Turns a reader's mood into enriched book recommendations."""

    def __init__(self, recommender: RecommenderPort, config: Settings) -> None:
        self._recommender = recommender
        self._config = config

    async def recommend(self, request: RecommendationRequest) -> list[BookRecommendation]:
        """
        Fetch recommendations from the LLM and enrich them.

        Raises 502 if the LLM call fails or returns something unusable; the
        client can simply retry.
        """
        request = request.model_copy(
            update={
                "region": request.region or self._config.default_region,
                "count": request.count or self._config.recommendation_count,
            }
        )

        try:
            raw = await self._recommender.recommend_books(request)
            records = parse_book_records(raw)
        except (httpx.HTTPError, OpenAIError, KeyError) as exc:
            logger.error("Error fetching book recommendations: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=FAILURE_MESSAGE
            ) from exc
        except ValueError as exc:  # JSON decode and pydantic validation errors
            logger.error("Unusable recommendation payload: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=FAILURE_MESSAGE
            ) from exc

        logger.info("Received %d recommendations", len(records))
        return [self._enrich(record, request) for record in records]

    def _enrich(
        self, record: BookRecord, request: RecommendationRequest
    ) -> BookRecommendation:
        return BookRecommendation(
            title=record.title,
            author=record.author,
            publisher=record.publisher,
            isbn=BookKey(record.title, record.author, record.isbn).normalized_isbn,
            description=record.description,
            ai_reason=record.ai_reason,
            vibe=record.vibe,
            libraries=[
                LibraryLink(**lib.model_dump(), url=library_map_url(lib.name, request))
                for lib in record.libraries
            ],
            purchase_links=purchase_links(record.title),
            cover=identity_response(record.title, record.author),
        )
