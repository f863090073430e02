"""
The book curator prompt.

OpenAI and Ollama both render ``RECOMMEND_BOOKS`` through
:func:`render_recommendation_prompt`, so a reader's mood reaches either
model as the same two messages.
"""

from dataclasses import dataclass

from paperpharmacy.api.schemas import RecommendationRequest

# ── Prompt Template ──────────────────────────────────────────────


@dataclass(frozen=True)
class PromptTemplate:
    """
    A curator prompt: a fixed system message plus a user message with
    ``{placeholders}`` for the reader's mood, situation and location.

    ``version`` is logged with each request so answers can be traced back
    to the wording that produced them. ``max_tokens`` bounds the answer,
    which must fit ``count`` books with three libraries each.
    """

    name: str
    version: str
    system: str
    user_template: str
    max_tokens: int = 2048

    def render(self, **kwargs: str) -> dict[str, str]:
        """Fill the user placeholders; the system message is sent verbatim."""
        return {
            "system": self.system,
            "user": self.user_template.format(**kwargs),
        }


# ── Book Recommendation Prompt ───────────────────────────────────

RECOMMEND_BOOKS = PromptTemplate(
    name="recommend_books",
    version="2.0.0",
    system=(
        'You are a book curator for "종이약국" (Paper Pharmacy), prescribing '
        "books for how a reader feels today.\n\n"
        "Respond with a JSON object of the form {\"books\": [...]} and nothing else.\n"
        "Each book object has exactly these fields:\n"
        "- title: the book title in Korean.\n"
        "- author: the author's name in Korean.\n"
        "- publisher: the publisher's name in Korean.\n"
        "- isbn: the book's 13-digit ISBN, numbers only.\n"
        "- description: a short, insightful one-sentence description.\n"
        "- aiReason: an empathetic recommendation reason.\n"
        "- vibe: an array of 3 relevant Korean keywords/themes.\n"
        "- libraries: 3 realistic public libraries near the reader, each "
        "{name, available (boolean, true about 60% of the time), distance "
        "(like '1.2km', if available), waitlist (1-15, if unavailable)}. "
        "Use specific names with real district names, such as '강남구립도서관'."
    ),
    user_template=(
        "Mood: {mood}\n"
        "Situation: {situation}\n"
        "{genre_line}\n"
        "Goal: {purpose}\n"
        "{location_line}\n\n"
        "Recommend {count} books with accurate ISBN and realistic library names."
        "{exclusion_line}"
    ),
    max_tokens=2048,
)


# ── Rendering Helpers ────────────────────────────────────────────


def render_recommendation_prompt(request: RecommendationRequest) -> dict[str, str]:
    """
    Render the recommendation prompt for a fully defaulted request.

    ``request.region`` and ``request.count`` are expected to be filled in by
    the caller.
    """
    if request.genre:
        genre_line = f"Genre preference: {request.genre}"
    else:
        genre_line = "No genre preference - diverse recommendations."

    if request.has_location:
        location_line = (
            f"GPS: Lat {request.latitude}, Lon {request.longitude}. "
            "Suggest realistic nearby library names with district info."
        )
    else:
        location_line = (
            f"Region: {request.region}. "
            f"Suggest realistic library names in {request.region}."
        )

    exclusion_line = ""
    if request.exclude_titles:
        exclusion_line = f"\n\nDo NOT include: {', '.join(request.exclude_titles)}."

    return RECOMMEND_BOOKS.render(
        mood=request.mood,
        situation=request.situation or "N/A",
        genre_line=genre_line,
        purpose=request.purpose or "N/A",
        location_line=location_line,
        count=str(request.count),
        exclusion_line=exclusion_line,
    )
