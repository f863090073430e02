"""Cover provider registry in fixed priority order."""

import logging

from paperpharmacy.adapters.covers.aladin import AladinCoverProvider
from paperpharmacy.adapters.covers.google_books import (
    GoogleBooksApiProvider,
    GoogleBooksDirectProvider,
)
from paperpharmacy.adapters.covers.kakao import KakaoCoverProvider
from paperpharmacy.adapters.covers.naver import NaverCoverProvider
from paperpharmacy.config import Settings
from paperpharmacy.ports.cover_provider import CoverProvider

logger = logging.getLogger(__name__)


def build_cover_providers(config: Settings) -> tuple[CoverProvider, ...]:
    """
    Build the provider chain, fastest and most available sources first.

    Credentials are read here once; a provider missing its credential stays
    in the chain but reports ``enabled = False`` and is skipped.
    """
    providers: tuple[CoverProvider, ...] = (
        GoogleBooksDirectProvider(),
        KakaoCoverProvider(config.kakao_api_key),
        NaverCoverProvider(config.naver_client_id, config.naver_client_secret),
        GoogleBooksApiProvider(),
        AladinCoverProvider(),
    )
    for provider in providers:
        if not provider.enabled:
            logger.info("Cover provider '%s' disabled (no credential)", provider.name)
    return providers
