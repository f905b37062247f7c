from __future__ import annotations

from collections.abc import Iterator

from .models import LayoutParams, ResolvedGlyph


def glyph_width(g: ResolvedGlyph, space_width: int) -> int:
    return space_width if g.is_space else g.width


def canvas_size(glyphs: list[ResolvedGlyph], params: LayoutParams) -> tuple[int, int]:
    """
    Output surface size in pixels (already multiplied by pixel_scale).

    Horizontal: letter_spacing follows every glyph except spacers and the last
    token. Vertical: every token, spacers included, takes a full
    char_height + letter_spacing step. Both dimensions are at least 1.
    """
    scale = params.pixel_scale
    n = len(glyphs)

    if params.orientation == "horizontal":
        total = 0
        for i, g in enumerate(glyphs):
            total += glyph_width(g, params.space_width)
            if not g.is_space and i != n - 1:
                total += params.letter_spacing
        w = total * scale
        h = params.char_height * scale
    else:
        widest = max([1] + [glyph_width(g, params.space_width) for g in glyphs])
        w = widest * scale
        h = (n * params.char_height + (n - 1) * params.letter_spacing) * scale

    return (max(1, w), max(1, h))


def advance(g: ResolvedGlyph, params: LayoutParams) -> tuple[int, int]:
    """Logical cursor step taken after a glyph."""
    if params.orientation == "horizontal":
        if g.is_space:
            return (params.space_width, 0)
        return (g.width + params.letter_spacing, 0)
    return (0, params.char_height + params.letter_spacing)


def glyph_origins(glyphs: list[ResolvedGlyph], params: LayoutParams) -> Iterator[tuple[int, ResolvedGlyph, int, int]]:
    """Yields (index, glyph, x, y) with the glyph's top-left corner in logical pixels."""
    x = y = 0
    for i, g in enumerate(glyphs):
        yield (i, g, x, y)
        dx, dy = advance(g, params)
        x += dx
        y += dy
