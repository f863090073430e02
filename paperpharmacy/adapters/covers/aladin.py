"""Aladin cover CDN provider, tried last."""

from paperpharmacy.adapters.covers.base import DirectUrlProvider


class AladinCoverProvider(DirectUrlProvider):
    name = "aladin"
    per_candidate_timeout_ms = 4000

    def build_urls(self, isbn: str) -> list[str]:
        return [
            f"https://image.aladin.co.kr/product/{isbn[:5]}/{isbn[5:]}_1.jpg",
            f"https://cover.aladin.co.kr/getbook.aspx?isbn={isbn}&Cover=Big",
        ]
