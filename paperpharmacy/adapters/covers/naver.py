"""Naver book search cover provider."""

from typing import Any

from paperpharmacy.adapters.covers.base import SearchApiProvider, first_result


class NaverCoverProvider(SearchApiProvider):
    """Naver open API book search; needs both client id and secret."""

    name = "naver"
    endpoint = "https://openapi.naver.com/v1/search/book.json"
    lookup_timeout = 4.0
    per_candidate_timeout_ms = 2000

    def __init__(self, client_id: str | None, client_secret: str | None) -> None:
        self._client_id = client_id
        self._client_secret = client_secret

    @property
    def enabled(self) -> bool:
        return bool(self._client_id and self._client_secret)

    def headers(self) -> dict[str, str]:
        return {
            "X-Naver-Client-Id": self._client_id or "",
            "X-Naver-Client-Secret": self._client_secret or "",
        }

    def params(self, isbn: str) -> dict[str, str | int]:
        return {"query": isbn, "display": 1}

    def extract_url(self, data: Any) -> str | None:
        return first_result(data, "items").get("image")
