import logging
from typing import Any

import httpx

from paperpharmacy.api.schemas import RecommendationRequest
from paperpharmacy.ports.recommender import RecommenderPort
from paperpharmacy.prompts.templates import (
    RECOMMEND_BOOKS,
    render_recommendation_prompt,
)

logger = logging.getLogger(__name__)

# Local models answer slowly on a cold start.
OLLAMA_TIMEOUT = httpx.Timeout(180.0, connect=10.0)


def chat_payload(model: str, prompt: dict[str, str], max_tokens: int) -> dict[str, Any]:
    """Non-streaming ``/api/chat`` body constrained to JSON output."""
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": prompt["system"]},
            {"role": "user", "content": prompt["user"]},
        ],
        "stream": False,
        "format": "json",
        "options": {"num_predict": max_tokens},
    }


class OllamaRecommenderAdapter(RecommenderPort):
    """Book curator backed by a local Ollama instance."""

    def __init__(
        self,
        base_url: str,
        model: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._chat_url = f"{base_url.rstrip('/')}/api/chat"
        self._model = model
        self._transport = transport

    async def recommend_books(self, request: RecommendationRequest) -> str:
        payload = chat_payload(
            self._model,
            render_recommendation_prompt(request),
            RECOMMEND_BOOKS.max_tokens,
        )
        logger.info(
            "Ollama request: prompt=%s@%s, model=%s, books=%s, mood=%s",
            RECOMMEND_BOOKS.name,
            RECOMMEND_BOOKS.version,
            self._model,
            request.count,
            request.mood,
        )
        async with httpx.AsyncClient(
            timeout=OLLAMA_TIMEOUT, transport=self._transport
        ) as client:
            resp = await client.post(self._chat_url, json=payload)
            resp.raise_for_status()
        content = resp.json()["message"]["content"]
        logger.info("Ollama answered with %d chars", len(content))
        return content
