"""
Deterministic visual identity for books without a resolved cover.

The identity is derived from a Java-style 31-multiplier string hash over the
UTF-16 code units of ``title + author``, so the same book always gets the
same palette and pattern, in any process, on any machine.
"""

from xml.sax.saxutils import escape

from paperpharmacy.domain.models import BookKey, Palette, VisualIdentity

PALETTES: tuple[Palette, ...] = (
    Palette("#ff9a9e", "#fecfef", "#5e3449"),
    Palette("#a1c4fd", "#c2e9fb", "#2c3e50"),
    Palette("#84fab0", "#8fd3f4", "#13547a"),
    Palette("#f6d365", "#fda085", "#8c520a"),
    Palette("#d4fc79", "#96e6a1", "#2c522c"),
    Palette("#c3a3f4", "#fbc2eb", "#4a2c52"),
    Palette("#fccb90", "#d57eeb", "#522c4a"),
    Palette("#48c6ef", "#6f86d6", "#073352"),
    Palette("#ff758c", "#ff7eb3", "#6d1839"),
    Palette("#56ab2f", "#a8e063", "#193a0d"),
)

# 20x20 tile contents, drawn white at 30% opacity.
PATTERNS: tuple[str, ...] = (
    '<path d="M2 9h6V3h2v6h6v2H10v6H8V11H2V9z"/>',
    '<circle cx="3" cy="3" r="3"/><circle cx="13" cy="13" r="3"/>',
    '<path d="M0 0h20L0 20zM20 20H0L20 0z"/>',
)

COVER_SIZES: dict[str, tuple[int, int]] = {
    "large": (200, 300),
    "small": (56, 80),
}

_MASK_32 = 0xFFFFFFFF


def string_hash(text: str) -> int:
    """Absolute value of the signed 32-bit ``h = h*31 + unit`` hash."""
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & _MASK_32
    if h & 0x80000000:
        h -= 1 << 32
    return abs(h)


def identity_of(title: str, author: str) -> VisualIdentity:
    """Map a (title, author) pair to its palette and pattern indices."""
    h = string_hash(f"{title or ''}{author or ''}")
    return VisualIdentity(
        palette_index=h % len(PALETTES),
        pattern_index=h % len(PATTERNS),
    )


def palette_for(identity: VisualIdentity) -> Palette:
    return PALETTES[identity.palette_index]


def render_fallback_svg(book: BookKey, size: str = "large") -> str:
    """
    Render the fallback cover as a standalone SVG document.

    Gradient background from the palette, tiled pattern overlay, a darker
    spine strip on the left edge, and the display title and author centred.
    """
    if size not in COVER_SIZES:
        raise ValueError(f"Unknown cover size '{size}'. Available: {list(COVER_SIZES)}")
    width, height = COVER_SIZES[size]
    identity = identity_of(book.display_title, book.display_author)
    palette = palette_for(identity)
    tile = 20 if size == "large" else 10
    title_size = 18 if size == "large" else 10
    author_size = 14 if size == "large" else 8
    spine = max(1, round(width * 0.04))
    centre_x = width / 2
    centre_y = height / 2

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
        "<defs>"
        '<linearGradient id="bg" x1="0" y1="0" x2="1" y2="1">'
        f'<stop offset="0%" stop-color="{palette.start}"/>'
        f'<stop offset="100%" stop-color="{palette.end}"/>'
        "</linearGradient>"
        f'<pattern id="tile" width="{tile}" height="{tile}" patternUnits="userSpaceOnUse">'
        f'<g fill="#FFFFFF" fill-opacity="0.3" transform="scale({tile / 20})">'
        f"{PATTERNS[identity.pattern_index]}</g>"
        "</pattern>"
        "</defs>"
        f'<rect width="{width}" height="{height}" fill="url(#bg)"/>'
        f'<rect width="{width}" height="{height}" fill="url(#tile)" opacity="0.3"/>'
        f'<rect width="{spine}" height="{height}" fill="#000000" fill-opacity="0.1"/>'
        f'<g fill="{palette.text}" text-anchor="middle" font-family="sans-serif">'
        f'<text x="{centre_x}" y="{centre_y - 4}" font-size="{title_size}" '
        f'font-weight="bold">{escape(book.display_title)}</text>'
        f'<text x="{centre_x}" y="{centre_y + author_size + 4}" font-size="{author_size}" '
        f'fill-opacity="0.9">{escape(book.display_author)}</text>'
        "</g>"
        "</svg>"
    )
