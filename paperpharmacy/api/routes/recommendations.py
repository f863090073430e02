"""Book recommendation routes."""

from fastapi import APIRouter, Depends

from paperpharmacy.api.dependencies import get_recommendation_service
from paperpharmacy.api.schemas import RecommendationRequest, RecommendationsResponse
from paperpharmacy.services.recommendation import RecommendationService

router = APIRouter(tags=["Recommendations"])


@router.post("/recommendations", response_model=RecommendationsResponse)
async def create_recommendations(
    data: RecommendationRequest,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationsResponse:
    """Prescribe books for the reader's mood, situation and location."""
    books = await service.recommend(data)
    return RecommendationsResponse(recommendations=books)
