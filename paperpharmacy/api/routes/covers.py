"""Cover identity, fallback rendering and resolution routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from paperpharmacy.api.dependencies import get_cover_resolver
from paperpharmacy.api.schemas import CoverResolutionResponse, IdentityResponse
from paperpharmacy.domain.identity import COVER_SIZES, render_fallback_svg
from paperpharmacy.domain.models import BookKey, ResolutionSession, Resolved
from paperpharmacy.services.recommendation import identity_response
from paperpharmacy.services.resolver import CoverResolver

router = APIRouter(prefix="/covers", tags=["Covers"])


@router.get("/identity", response_model=IdentityResponse)
async def get_identity(
    title: str = Query(""),
    author: str = Query(""),
) -> IdentityResponse:
    """Deterministic palette and pattern for a book's fallback cover."""
    return identity_response(title, author)


@router.get("/fallback.svg")
async def get_fallback_cover(
    title: str = Query(""),
    author: str = Query(""),
    size: str = Query("large"),
) -> Response:
    """Render the fallback cover as SVG. No network access involved."""
    if size not in COVER_SIZES:
        raise HTTPException(
            status_code=422,
            detail=f"size must be one of {sorted(COVER_SIZES)}",
        )
    svg = render_fallback_svg(BookKey(title=title, author=author), size)
    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"Cache-Control": "public, max-age=86400"},
    )


@router.get("/resolve", response_model=CoverResolutionResponse)
async def resolve_cover(
    title: str = Query(""),
    author: str = Query(""),
    isbn: str = Query(""),
    resolver: CoverResolver = Depends(get_cover_resolver),
) -> CoverResolutionResponse:
    """
    Try the cover providers for one book.

    Provider failures never surface here: the response is either a resolved
    image URL or ``unresolved``, meaning the fallback cover stays.
    """
    session = ResolutionSession()
    book = BookKey(title=title, author=author, isbn=isbn)
    result = await resolver.resolve(book, session)
    session.cancel()

    identity = identity_response(title, author)
    if isinstance(result, Resolved):
        return CoverResolutionResponse(
            status="resolved",
            url=result.url,
            provider=result.provider_name,
            attempted_providers=session.attempted_providers,
            identity=identity,
        )
    return CoverResolutionResponse(
        status="unresolved",
        attempted_providers=session.attempted_providers,
        identity=identity,
    )
