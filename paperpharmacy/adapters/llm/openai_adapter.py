import logging

from openai import AsyncOpenAI

from paperpharmacy.api.schemas import RecommendationRequest
from paperpharmacy.ports.recommender import RecommenderPort
from paperpharmacy.prompts.templates import (
    RECOMMEND_BOOKS,
    render_recommendation_prompt,
)

logger = logging.getLogger(__name__)


class OpenAIRecommenderAdapter(RecommenderPort):
    """Book curator backed by the OpenAI API in JSON mode."""

    def __init__(self, api_key: str, model: str) -> None:
        self._client = AsyncOpenAI(api_key=api_key)
        self._model = model

    async def _generate(self, system: str, user: str, max_tokens: int) -> str:
        """Send a JSON-mode chat completion request to OpenAI."""
        logger.info(
            "OpenAI request: prompt=%s@%s, model=%s, max_tokens=%d",
            RECOMMEND_BOOKS.name,
            RECOMMEND_BOOKS.version,
            self._model,
            max_tokens,
        )
        resp = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            max_tokens=max_tokens,
            temperature=0.8,
            response_format={"type": "json_object"},
        )
        result = resp.choices[0].message.content or ""
        logger.info("OpenAI response: %d chars", len(result))
        return result

    async def recommend_books(self, request: RecommendationRequest) -> str:
        """Ask OpenAI for book recommendations."""
        prompt = render_recommendation_prompt(request)
        return await self._generate(
            prompt["system"], prompt["user"], RECOMMEND_BOOKS.max_tokens
        )
