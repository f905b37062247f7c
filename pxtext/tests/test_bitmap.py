from pxtext.bitmap import compose_bitmap, mask_to_ascii, outline_cells
from pxtext.font import builtin_font
from pxtext.models import LayoutParams
from pxtext.resolve import resolve_tokens
from pxtext.tokens import tokenize


def _glyphs(text: str):
    font = builtin_font()
    return resolve_tokens(tokenize(text, font.custom_symbols), font)


def test_outline_single_pixel_gets_four_neighbors() -> None:
    bitmap = [[0] * 5 for _ in range(5)]
    bitmap[2][2] = 1
    assert outline_cells(bitmap) == [(2, 1), (1, 2), (3, 2), (2, 3)]


def test_outline_out_of_bounds_neighbors_are_absent() -> None:
    bitmap = [[0] * 3 for _ in range(3)]
    bitmap[0][0] = 1
    assert outline_cells(bitmap) == [(1, 0), (0, 1)]


def test_outline_skips_ink_cells() -> None:
    bitmap = [[1, 1], [1, 1]]
    assert outline_cells(bitmap) == []


def test_compose_places_glyphs_with_spacing_columns() -> None:
    font = builtin_font()
    p = LayoutParams(orientation="horizontal", pixel_scale=3, space_width=2, letter_spacing=1)
    bitmap = compose_bitmap(_glyphs("I I"), p)
    assert len(bitmap) == 7
    # I(5) + spacing(1) + space(2) + I(5) + spacing(1)
    assert all(len(row) == 14 for row in bitmap)
    glyph = font.pixel_map["I"]
    for y in range(7):
        assert bitmap[y][0:5] == list(glyph[y])
        assert bitmap[y][5:8] == [0, 0, 0]
        assert bitmap[y][8:13] == list(glyph[y])
        assert bitmap[y][13] == 0


def test_compose_vertical_is_not_supported() -> None:
    p = LayoutParams(orientation="vertical", pixel_scale=1, space_width=2, letter_spacing=1)
    assert compose_bitmap(_glyphs("AB"), p) == []
    assert outline_cells([]) == []


def test_mask_to_ascii_marks_outline() -> None:
    bitmap = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    txt = mask_to_ascii(bitmap, outline=outline_cells(bitmap))
    assert txt == ".+.\n+#+\n.+."
