from paperpharmacy.adapters.llm.mock import MockRecommenderAdapter
from paperpharmacy.adapters.llm.ollama import OllamaRecommenderAdapter
from paperpharmacy.adapters.llm.openai_adapter import OpenAIRecommenderAdapter
from paperpharmacy.config import LLMProvider, Settings
from paperpharmacy.ports.recommender import RecommenderPort


def build_recommender(config: Settings) -> RecommenderPort:
    """Instantiate the recommender adapter selected by configuration."""
    if config.llm_provider == LLMProvider.OPENAI:
        return OpenAIRecommenderAdapter(config.openai_api_key, config.openai_model)
    if config.llm_provider == LLMProvider.OLLAMA:
        return OllamaRecommenderAdapter(config.ollama_base_url, config.ollama_model)
    return MockRecommenderAdapter()


__all__ = [
    "MockRecommenderAdapter",
    "OllamaRecommenderAdapter",
    "OpenAIRecommenderAdapter",
    "build_recommender",
]
