"""Google Books cover providers: direct content URLs and the volumes API."""

import re
from typing import Any

from paperpharmacy.adapters.covers.base import (
    DirectUrlProvider,
    SearchApiProvider,
    first_result,
    force_https,
)

_ZOOM = re.compile(r"zoom=\d")


class GoogleBooksDirectProvider(DirectUrlProvider):
    """Front-cover content URLs; no key and no lookup request needed."""

    name = "google_books"
    per_candidate_timeout_ms = 4000

    def build_urls(self, isbn: str) -> list[str]:
        return [
            f"https://books.google.com/books/content?vid=ISBN{isbn}"
            "&printsec=frontcover&img=1&zoom=1",
            f"https://books.google.com/books/publisher/content?id=ISBN{isbn}"
            "&printsec=frontcover&img=1&zoom=1",
        ]


class GoogleBooksApiProvider(SearchApiProvider):
    """Public volumes search keyed by ISBN; thumbnail from the first volume."""

    name = "google_books_api"
    endpoint = "https://www.googleapis.com/books/v1/volumes"
    lookup_timeout = 5.0
    per_candidate_timeout_ms = 3000

    def params(self, isbn: str) -> dict[str, str | int]:
        return {"q": f"isbn:{isbn}"}

    def extract_url(self, data: Any) -> str | None:
        volume_info = first_result(data, "items").get("volumeInfo")
        if not isinstance(volume_info, dict):
            return None
        image_links = volume_info.get("imageLinks")
        if not isinstance(image_links, dict):
            return None
        return image_links.get("thumbnail")

    def clean_url(self, url: str) -> str:
        url = force_https(url).replace("&edge=curl", "")
        return _ZOOM.sub("zoom=1", url, count=1)
