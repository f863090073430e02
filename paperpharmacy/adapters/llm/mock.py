import asyncio
import json
import logging

from paperpharmacy.api.schemas import RecommendationRequest
from paperpharmacy.ports.recommender import RecommenderPort
from paperpharmacy.prompts.templates import render_recommendation_prompt

logger = logging.getLogger(__name__)

CATALOG: tuple[dict, ...] = (
    {
        "title": "데미안",
        "author": "헤르만 헤세",
        "publisher": "민음사",
        "isbn": "9788937460449",
        "description": "자기 자신에게 이르는 길을 찾아가는 한 소년의 성장기.",
        "aiReason": "흔들리는 마음을 붙잡고 나만의 답을 찾고 싶을 때 곁에 두기 좋은 책이에요.",
        "vibe": ["성장", "자아", "고독"],
    },
    {
        "title": "아몬드",
        "author": "손원평",
        "publisher": "창비",
        "isbn": "9788936434267",
        "description": "감정을 느끼지 못하는 소년이 세상과 관계를 배워 가는 이야기.",
        "aiReason": "마음이 무거운 날, 조용히 공감받는 경험을 선물해 줄 거예요.",
        "vibe": ["공감", "관계", "위로"],
    },
    {
        "title": "불편한 편의점",
        "author": "김호연",
        "publisher": "나무옆의자",
        "isbn": "9791161571188",
        "description": "서울역 노숙인이 편의점 야간 알바가 되며 벌어지는 따뜻한 소동.",
        "aiReason": "피식 웃다가 마음 한켠이 데워지는, 가볍지만 다정한 처방이에요.",
        "vibe": ["온기", "이웃", "회복"],
    },
    {
        "title": "달러구트 꿈 백화점",
        "author": "이미예",
        "publisher": "팩토리나인",
        "isbn": "9791165341909",
        "description": "잠들어야만 입장할 수 있는 꿈 백화점에서 펼쳐지는 판타지.",
        "aiReason": "고요한 밤, 포근한 상상 속으로 잠시 도망치고 싶을 때 추천해요.",
        "vibe": ["꿈", "판타지", "힐링"],
    },
)

MOCK_LIBRARIES: tuple[dict, ...] = (
    {"name": "강남구립도서관", "available": True, "distance": "1.2km"},
    {"name": "서초구립반포도서관", "available": False, "waitlist": 4},
    {"name": "마포중앙도서관", "available": True, "distance": "3.5km"},
)


class MockRecommenderAdapter(RecommenderPort):
    """
    Mock curator for development and tests without API access.

    Returns deterministic picks from a small fixed catalog, honouring the
    requested count and exclusion list.
    """

    async def recommend_books(self, request: RecommendationRequest) -> str:
        """Return mock recommendations as the LLM would: a JSON document."""
        await asyncio.sleep(0.05)  # simulate LLM latency
        prompt = render_recommendation_prompt(request)
        logger.info("MockLLM: recommend_books called (%d prompt chars)", len(prompt["user"]))

        excluded = set(request.exclude_titles)
        books = [
            {**book, "libraries": [dict(lib) for lib in MOCK_LIBRARIES]}
            for book in CATALOG
            if book["title"] not in excluded
        ]
        return json.dumps({"books": books[: request.count]}, ensure_ascii=False)
