"""Application settings loaded from environment variables and ``.env``."""

from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMProvider(str, Enum):
    MOCK = "mock"
    OPENAI = "openai"
    OLLAMA = "ollama"


class Settings(BaseSettings):
    """Runtime configuration for Paper Pharmacy."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Recommendation LLM ─────────────────────────
    llm_provider: LLMProvider = LLMProvider.MOCK
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1"
    recommendation_count: int = 3
    default_region: str = "서울"

    # ── Cover provider credentials (all optional) ──
    kakao_api_key: str | None = None
    naver_client_id: str | None = None
    naver_client_secret: str | None = None

    # ── Cover resolution ───────────────────────────
    min_cover_dimension: int = 5
    cover_cross_fade_ms: int = 100
    resolution_deadline_ms: int | None = None


settings = Settings()
