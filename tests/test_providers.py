"""Tests for the cover provider adapters and registry."""

import asyncio

import httpx
import pytest

from fakes import RecordingTransport
from paperpharmacy.adapters.covers import build_cover_providers
from paperpharmacy.adapters.covers.aladin import AladinCoverProvider
from paperpharmacy.adapters.covers.base import force_https, is_fetchable
from paperpharmacy.adapters.covers.google_books import (
    GoogleBooksApiProvider,
    GoogleBooksDirectProvider,
)
from paperpharmacy.adapters.covers.kakao import KakaoCoverProvider
from paperpharmacy.adapters.covers.naver import NaverCoverProvider
from paperpharmacy.config import Settings

ISBN = "9788937460449"


def client_for(transport: httpx.MockTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=transport)


# ── Registry ───────────────────────────────────────


def test_registry_order_and_defaults(monkeypatch: pytest.MonkeyPatch):
    for var in ("KAKAO_API_KEY", "NAVER_CLIENT_ID", "NAVER_CLIENT_SECRET"):
        monkeypatch.delenv(var, raising=False)
    providers = build_cover_providers(Settings(_env_file=None))
    assert [p.name for p in providers] == [
        "google_books",
        "kakao",
        "naver",
        "google_books_api",
        "aladin",
    ]
    assert [p.enabled for p in providers] == [True, False, False, True, True]


def test_registry_enables_credentialed_providers():
    config = Settings(
        _env_file=None,
        kakao_api_key="kakao-key",
        naver_client_id="id",
        naver_client_secret="secret",
    )
    assert all(p.enabled for p in build_cover_providers(config))


def test_naver_needs_both_credentials():
    assert not NaverCoverProvider("id", None).enabled
    assert not NaverCoverProvider(None, "secret").enabled
    assert NaverCoverProvider("id", "secret").enabled


def test_force_https_only_touches_scheme():
    assert force_https("http://x/http://y") == "https://x/http://y"
    assert force_https("https://x") == "https://x"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://search1.kakaocdn.net/thumb/cover.jpg", True),
        ("https://", False),
        ("https://img.example/a\nb.jpg", False),
        ("/relative/cover.jpg", False),
        ("ftp://img.example/cover.jpg", False),
    ],
)
def test_is_fetchable(url: str, expected: bool):
    assert is_fetchable(url) is expected


# ── Direct URL providers ───────────────────────────


@pytest.mark.asyncio
async def test_google_direct_urls_need_no_network(offline_transport: RecordingTransport):
    async with client_for(offline_transport) as client:
        urls = await GoogleBooksDirectProvider().candidate_urls(ISBN, client)
    assert urls == [
        f"https://books.google.com/books/content?vid=ISBN{ISBN}&printsec=frontcover&img=1&zoom=1",
        f"https://books.google.com/books/publisher/content?id=ISBN{ISBN}&printsec=frontcover&img=1&zoom=1",
    ]
    assert offline_transport.requests == []


@pytest.mark.asyncio
async def test_aladin_urls_split_isbn(offline_transport: RecordingTransport):
    async with client_for(offline_transport) as client:
        urls = await AladinCoverProvider().candidate_urls(ISBN, client)
    assert urls == [
        "https://image.aladin.co.kr/product/97889/37460449_1.jpg",
        f"https://cover.aladin.co.kr/getbook.aspx?isbn={ISBN}&Cover=Big",
    ]
    assert offline_transport.requests == []


# ── Kakao ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_kakao_sends_key_and_rewrites_to_https():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.host == "dapi.kakao.com"
        assert request.headers["Authorization"] == "KakaoAK secret-key"
        assert request.url.params["query"] == ISBN
        assert request.url.params["size"] == "1"
        return httpx.Response(
            200,
            json={"documents": [{"thumbnail": "http://search1.kakaocdn.net/thumb/cover.jpg"}]},
        )

    transport = RecordingTransport(handler)
    async with client_for(transport) as client:
        urls = await KakaoCoverProvider("secret-key").candidate_urls(ISBN, client)

    assert urls == ["https://search1.kakaocdn.net/thumb/cover.jpg"]
    assert len(transport.requests) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"documents": []}),
        httpx.Response(200, json={"documents": [{"thumbnail": ""}]}),
        httpx.Response(200, json={"documents": [{"thumbnail": "http://"}]}),
        httpx.Response(200, json={"documents": [{"thumbnail": "http://img.example/a\nb.jpg"}]}),
        httpx.Response(200, json=["unexpected"]),
        httpx.Response(401, json={"message": "unauthorized"}),
        httpx.Response(200, content=b"<html>not json</html>"),
    ],
)
async def test_kakao_failures_yield_no_candidates(response: httpx.Response):
    transport = RecordingTransport(lambda request: response)
    async with client_for(transport) as client:
        assert await KakaoCoverProvider("key").candidate_urls(ISBN, client) == []


@pytest.mark.asyncio
async def test_lookup_transport_error_yields_no_candidates():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with client_for(RecordingTransport(handler)) as client:
        assert await KakaoCoverProvider("key").candidate_urls(ISBN, client) == []


# ── Naver ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_naver_sends_client_headers():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/search/book.json"
        assert request.headers["X-Naver-Client-Id"] == "id"
        assert request.headers["X-Naver-Client-Secret"] == "secret"
        assert request.url.params["display"] == "1"
        return httpx.Response(
            200, json={"items": [{"image": "http://shopping-phinf.pstatic.net/book.jpg"}]}
        )

    async with client_for(RecordingTransport(handler)) as client:
        urls = await NaverCoverProvider("id", "secret").candidate_urls(ISBN, client)
    assert urls == ["https://shopping-phinf.pstatic.net/book.jpg"]


# ── Google Books API ───────────────────────────────


@pytest.mark.asyncio
async def test_google_api_cleans_thumbnail_url():
    thumbnail = (
        "http://books.google.com/books/content?id=zyTCAlFPjgYC"
        "&printsec=frontcover&img=1&zoom=5&edge=curl&source=gbs_api"
    )

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["q"] == f"isbn:{ISBN}"
        return httpx.Response(
            200,
            json={"items": [{"volumeInfo": {"imageLinks": {"thumbnail": thumbnail}}}]},
        )

    async with client_for(RecordingTransport(handler)) as client:
        urls = await GoogleBooksApiProvider().candidate_urls(ISBN, client)

    assert urls == [
        "https://books.google.com/books/content?id=zyTCAlFPjgYC"
        "&printsec=frontcover&img=1&zoom=1&source=gbs_api"
    ]


@pytest.mark.asyncio
async def test_google_api_without_image_links():
    transport = RecordingTransport(
        lambda request: httpx.Response(200, json={"items": [{"volumeInfo": {"title": "x"}}]})
    )
    async with client_for(transport) as client:
        assert await GoogleBooksApiProvider().candidate_urls(ISBN, client) == []


@pytest.mark.asyncio
async def test_google_api_timeout_yields_no_candidates():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with client_for(RecordingTransport(handler)) as client:
        assert await GoogleBooksApiProvider().candidate_urls(ISBN, client) == []


class QuickKakao(KakaoCoverProvider):
    lookup_timeout = 0.05


@pytest.mark.asyncio
async def test_lookup_budget_covers_whole_request():
    async def trickle(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json={"documents": []})

    loop = asyncio.get_running_loop()
    async with client_for(httpx.MockTransport(trickle)) as client:
        started = loop.time()
        urls = await QuickKakao("key").candidate_urls(ISBN, client)
        elapsed = loop.time() - started

    assert urls == []
    assert elapsed < 1.0
