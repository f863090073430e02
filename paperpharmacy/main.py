"""FastAPI application factory: entry point for Paper Pharmacy."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paperpharmacy.api.dependencies import get_cover_resolver
from paperpharmacy.api.routes.covers import router as covers_router
from paperpharmacy.api.routes.recommendations import router as recommendations_router
from paperpharmacy.config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Report which recommender and cover chain this process will use."""
    resolver = get_cover_resolver()
    enabled = [p.name for p in resolver.providers if p.enabled]
    disabled = [p.name for p in resolver.providers if not p.enabled]
    logger.info(
        "Paper Pharmacy ready: recommender=%s, covers=%s",
        settings.llm_provider.value,
        " -> ".join(enabled),
    )
    if disabled:
        logger.warning("Cover providers without credentials: %s", ", ".join(disabled))
    if settings.resolution_deadline_ms:
        logger.info("Cover resolution deadline: %dms", settings.resolution_deadline_ms)
    yield
    logger.info("Paper Pharmacy stopped")


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title="Paper Pharmacy",
        description="Mood-based book recommendations with resilient cover resolution",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ─────────────────────────────────────
    application.include_router(covers_router)
    application.include_router(recommendations_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "service": "paperpharmacy"}

    return application


app = create_app()
