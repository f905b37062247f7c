from __future__ import annotations

import base64
import io
import re
from dataclasses import replace

from PIL import Image, ImageDraw

from .bitmap import compose_bitmap, outline_cells
from .coloring import ColorMixer, RandomSource
from .font import FontData, builtin_font
from .layout import canvas_size, glyph_origins
from .models import DEFAULT_TEXT_COLOR, Color, RenderOptions, RenderResult, ResolvedGlyph, Token
from .palette_map import to_rgba
from .resolve import resolve_tokens
from .tokens import tokenize


class _Pen:
    """
    Paints scale x scale blocks. While a shadow is configured every block is
    first duplicated at (+scale, +scale) in the shadow color, then drawn.
    """

    def __init__(self, img: Image.Image, scale: int) -> None:
        self.img = img
        self.draw = ImageDraw.Draw(img)
        self.scale = scale
        self.shadow: tuple[int, int, int, int] | None = None
        self._rgba: dict[Color, tuple[int, int, int, int]] = {}

    def rgba(self, color: Color) -> tuple[int, int, int, int]:
        if color not in self._rgba:
            self._rgba[color] = to_rgba(color)
        return self._rgba[color]

    def set_shadow(self, color: Color | None) -> None:
        self.shadow = None if color is None else self.rgba(color)

    def _fill(self, x: int, y: int, rgba: tuple[int, int, int, int]) -> None:
        s = self.scale
        if rgba[3] == 255:
            self.draw.rectangle([x, y, x + s - 1, y + s - 1], fill=rgba)
        elif rgba[3] > 0:
            # Translucent blocks go over what is already there.
            self.img.alpha_composite(Image.new("RGBA", (s, s), rgba), dest=(x, y))

    def block(self, x: int, y: int, color: Color) -> None:
        s = self.scale
        if self.shadow is not None:
            self._fill(x + s, y + s, self.shadow)
        self._fill(x, y, self.rgba(color))


def paint(
    glyphs: list[ResolvedGlyph],
    tokens: list[Token],
    options: RenderOptions,
    *,
    rng: RandomSource | None = None,
) -> Image.Image:
    """
    Paints resolved glyphs onto a fresh RGBA surface. Pass order:
    background, shadow setup, outline, glyph fill, shadow reset.
    """
    params = options.layout
    scale = params.pixel_scale
    colors = options.colors or (DEFAULT_TEXT_COLOR,)
    w, h = canvas_size(glyphs, params)

    img = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    pen = _Pen(img, scale)

    if options.background == "solid":
        pen.draw.rectangle([0, 0, w - 1, h - 1], fill=pen.rgba(options.background_color))

    pen.set_shadow(options.shadow_color if options.shadow else None)

    if options.outline:
        bitmap = compose_bitmap(glyphs, params)
        for x, y in outline_cells(bitmap):
            pen.block(x * scale, y * scale, options.outline_color)

    mixer = ColorMixer(colors, mode=options.mixing_mode, tokens=tokens, rng=rng)
    for i, g, gx, gy in glyph_origins(glyphs, params):
        if g.is_space or g.data is None:
            continue
        base = mixer.glyph_color(i)
        for y, row in enumerate(g.data):
            for x, bit in enumerate(row):
                if bit != 1:
                    continue
                color = mixer.pixel_color(base, gx + x, gy + y)
                pen.block((gx + x) * scale, (gy + y) * scale, color)

    pen.set_shadow(None)
    return img


def render_text(
    text: str,
    options: RenderOptions | None = None,
    *,
    font: FontData | None = None,
    rng: RandomSource | None = None,
) -> RenderResult:
    options = options or RenderOptions()
    font = font or builtin_font()
    if options.layout.char_height != font.char_height:
        options = replace(options, layout=replace(options.layout, char_height=font.char_height))
    tokens = tokenize(text, font.custom_symbols)
    glyphs = resolve_tokens(tokens, font)
    img = paint(glyphs, tokens, options, rng=rng)
    return RenderResult(
        image=img,
        width=img.width,
        height=img.height,
        tokens=tokens,
        filename=suggest_filename(text),
    )


def suggest_filename(text: str) -> str:
    stem = re.sub(r"[^A-Za-z0-9]", "_", text) or "pixel-art"
    return f"{stem}.png"


def encode_png(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def to_data_url(img: Image.Image) -> str:
    return "data:image/png;base64," + base64.b64encode(encode_png(img)).decode("ascii")


def save_png(img: Image.Image, out_path: str) -> None:
    img.save(out_path, format="PNG")
