"""Tests for the deterministic fallback identity."""

import pytest

from paperpharmacy.domain.identity import (
    PALETTES,
    PATTERNS,
    identity_of,
    palette_for,
    render_fallback_svg,
    string_hash,
)
from paperpharmacy.domain.models import BookKey, VisualIdentity

SAMPLES = [
    ("", ""),
    ("데미안", "헤르만 헤세"),
    ("The Left Hand of Darkness", "Ursula K. Le Guin"),
    ("📚🌙✨", "🔥"),
    ("\ud800 lone surrogate", ""),
    ("a" * 5000, "b" * 5000),
]


# ── Hash ───────────────────────────────────────────


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("a", 97),
        ("ab", 3105),
        ("hello", 99162322),
        ("Hello World", 862545276),
        ("polygenelubricants", 2147483648),
        ("📚", 1772605),
    ],
)
def test_string_hash_known_values(text: str, expected: int):
    assert string_hash(text) == expected


def test_identity_is_deterministic():
    first = identity_of("데미안", "헤르만 헤세")
    second = identity_of("데미안", "헤르만 헤세")
    assert first == second


def test_identity_of_empty_strings_is_zero():
    assert identity_of("", "") == VisualIdentity(palette_index=0, pattern_index=0)


def test_identity_uses_concatenation():
    assert identity_of("polygene", "lubricants") == VisualIdentity(
        palette_index=2147483648 % len(PALETTES),
        pattern_index=2147483648 % len(PATTERNS),
    )


@pytest.mark.parametrize("title, author", SAMPLES)
def test_identity_within_bounds(title: str, author: str):
    identity = identity_of(title, author)
    assert 0 <= identity.palette_index < len(PALETTES)
    assert 0 <= identity.pattern_index < len(PATTERNS)


# ── Fallback rendering ─────────────────────────────


def test_fallback_svg_uses_identity_palette():
    book = BookKey(title="데미안", author="헤르만 헤세")
    svg = render_fallback_svg(book)
    palette = palette_for(identity_of("데미안", "헤르만 헤세"))

    assert svg.startswith("<svg")
    assert 'width="200" height="300"' in svg
    assert palette.start in svg
    assert palette.end in svg
    assert "데미안" in svg


def test_fallback_svg_escapes_text():
    svg = render_fallback_svg(BookKey(title="<Tom & Jerry>", author="A&B"))
    assert "&lt;Tom &amp; Jerry&gt;" in svg
    assert "<Tom" not in svg


def test_fallback_svg_blank_names_use_placeholders():
    svg = render_fallback_svg(BookKey(title="  ", author=""), size="small")
    assert "제목 미정" in svg
    assert "작자 미상" in svg
    assert 'width="56" height="80"' in svg


def test_fallback_svg_rejects_unknown_size():
    with pytest.raises(ValueError):
        render_fallback_svg(BookKey(title="t", author="a"), size="huge")
