from __future__ import annotations

from .layout import glyph_width
from .models import Bitmap, GlyphMatrix, LayoutParams, ResolvedGlyph


_NEIGHBORS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def _bit(m: GlyphMatrix | None, x: int, y: int) -> int:
    # Anything outside the matrix reads as empty.
    if m is None or y < 0 or y >= len(m):
        return 0
    row = m[y]
    if x < 0 or x >= len(row):
        return 0
    return 1 if row[x] else 0


def compose_bitmap(glyphs: list[ResolvedGlyph], params: LayoutParams) -> Bitmap:
    """
    Merges all glyphs into one logical (unscaled) ink grid for outline
    detection. Only horizontal text is composed; vertical text yields an empty
    bitmap, so it gets no outline.
    """
    if params.orientation != "horizontal":
        return []

    ls = params.letter_spacing
    w = sum(glyph_width(g, params.space_width) + (0 if g.is_space else ls) for g in glyphs)
    h = params.char_height
    out = [[0 for _ in range(w)] for _ in range(h)]

    x0 = 0
    for g in glyphs:
        gw = glyph_width(g, params.space_width)
        for y in range(h):
            row = out[y]
            for x in range(gw):
                row[x0 + x] = 0 if g.is_space else _bit(g.data, x, y)
            if not g.is_space:
                for s in range(ls):
                    row[x0 + gw + s] = 0
        x0 += gw + (0 if g.is_space else ls)

    return out


def outline_cells(bitmap: Bitmap) -> list[tuple[int, int]]:
    """
    Single-pixel 4-neighbor dilation ring: every empty cell with at least one
    in-bounds orthogonal neighbor that is ink. Row-major order.
    """
    h = len(bitmap)
    cells: list[tuple[int, int]] = []
    for y in range(h):
        w = len(bitmap[y])
        for x in range(w):
            if bitmap[y][x] == 1:
                continue
            for dx, dy in _NEIGHBORS:
                nx, ny = x + dx, y + dy
                if 0 <= ny < h and 0 <= nx < len(bitmap[ny]) and bitmap[ny][nx] == 1:
                    cells.append((x, y))
                    break
    return cells


def mask_to_ascii(bitmap: Bitmap, *, outline: list[tuple[int, int]] | None = None) -> str:
    ring = set(outline or ())
    lines = []
    for y, row in enumerate(bitmap):
        lines.append("".join("#" if c == 1 else ("+" if (x, y) in ring else ".") for x, c in enumerate(row)))
    return "\n".join(lines)
