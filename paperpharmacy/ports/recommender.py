"""Recommender port: abstract interface for the LLM book curator."""

from abc import ABC, abstractmethod

from paperpharmacy.api.schemas import RecommendationRequest


class RecommenderPort(ABC):
    """Abstraction for the generative book recommendation backend."""

    @abstractmethod
    async def recommend_books(self, request: RecommendationRequest) -> str:
        """Return the raw JSON document of recommended book records."""
        ...
