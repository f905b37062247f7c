from __future__ import annotations

from collections.abc import Callable

from .font import FontData
from .models import GlyphMatrix, GlyphSource, ResolvedGlyph, Token


SPACE = " "

Lookup = Callable[[Token, FontData], GlyphMatrix | None]


def _custom(token: Token, font: FontData) -> GlyphMatrix | None:
    return font.custom_symbols.get(token)


def _standard(token: Token, font: FontData) -> GlyphMatrix | None:
    return font.pixel_map.get(token)


def _fallback(token: Token, font: FontData) -> GlyphMatrix | None:
    return font.pixel_map[font.default_char]


# Tried in order; the fallback always hits, so resolution is total.
LOOKUP_CHAIN: tuple[tuple[GlyphSource, Lookup], ...] = (
    ("custom", _custom),
    ("standard", _standard),
    ("fallback", _fallback),
)


def resolve_token(token: Token, font: FontData) -> ResolvedGlyph:
    if token == SPACE:
        return ResolvedGlyph(is_space=True, data=None, source="space")
    for source, lookup in LOOKUP_CHAIN:
        m = lookup(token, font)
        if m is not None:
            return ResolvedGlyph(is_space=False, data=m, source=source)
    raise AssertionError("fallback lookup cannot miss")  # pragma: no cover


def resolve_tokens(tokens: list[Token], font: FontData) -> list[ResolvedGlyph]:
    return [resolve_token(t, font) for t in tokens]
