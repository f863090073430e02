"""FastAPI dependency providers."""

from functools import lru_cache

from paperpharmacy.adapters.covers import build_cover_providers
from paperpharmacy.adapters.imaging import HttpxImageLoader
from paperpharmacy.adapters.llm import build_recommender
from paperpharmacy.config import settings
from paperpharmacy.ports.recommender import RecommenderPort
from paperpharmacy.services.probe import BoundedProbe
from paperpharmacy.services.recommendation import RecommendationService
from paperpharmacy.services.resolver import CoverResolver


@lru_cache
def get_cover_resolver() -> CoverResolver:
    """Build the provider registry once from settings and share the resolver."""
    return CoverResolver(
        providers=build_cover_providers(settings),
        probe=BoundedProbe(HttpxImageLoader(), settings.min_cover_dimension),
        deadline_ms=settings.resolution_deadline_ms,
    )


@lru_cache
def get_recommender() -> RecommenderPort:
    return build_recommender(settings)


def get_recommendation_service() -> RecommendationService:
    return RecommendationService(get_recommender(), settings)
