"""Kakao book search cover provider."""

from typing import Any

from paperpharmacy.adapters.covers.base import SearchApiProvider, first_result


class KakaoCoverProvider(SearchApiProvider):
    """Kakao Daum book search; enabled only with a REST API key."""

    name = "kakao"
    endpoint = "https://dapi.kakao.com/v3/search/book"
    lookup_timeout = 4.0
    per_candidate_timeout_ms = 2000

    def __init__(self, api_key: str | None) -> None:
        self._api_key = api_key

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"KakaoAK {self._api_key}"}

    def params(self, isbn: str) -> dict[str, str | int]:
        return {"query": isbn, "size": 1}

    def extract_url(self, data: Any) -> str | None:
        return first_result(data, "documents").get("thumbnail")
