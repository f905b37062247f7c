from __future__ import annotations

from dataclasses import dataclass

from .models import CHAR_HEIGHT, Color, LayoutParams, RenderOptions
from .palette_map import normalize_colors, to_rgba


@dataclass(frozen=True, slots=True)
class Range:
    lo: int
    hi: int

    def clamp(self, value: int) -> int:
        return clamp(value, self.lo, self.hi)


PIXEL_SCALE_RANGE = Range(1, 50)
SPACE_WIDTH_RANGE = Range(0, 20)
LETTER_SPACING_RANGE = Range(0, 10)

DEFAULT_TEXT = "PIXELS"
DEFAULT_COLORS: tuple[Color, ...] = ("rgb(224,159,249)", "rgb(243,141,169)")
DEFAULT_OUTLINE_COLOR: Color = "rgb(255,255,255)"
DEFAULT_SHADOW_COLOR: Color = "rgb(0,0,0)"
DEFAULT_BACKGROUND_COLOR: Color = "rgb(68,68,68)"


def clamp(value: int, lo: int, hi: int) -> int:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def build_options(
    *,
    pixel_scale: int = 5,
    space_width: int = 2,
    letter_spacing: int = 1,
    orientation: str = "horizontal",
    colors: list[Color] | tuple[Color, ...] = DEFAULT_COLORS,
    mixing_mode: str = "per-letter",
    background: str = "transparent",
    background_color: Color = DEFAULT_BACKGROUND_COLOR,
    outline: bool = False,
    outline_color: Color = DEFAULT_OUTLINE_COLOR,
    shadow: bool = False,
    shadow_color: Color = DEFAULT_SHADOW_COLOR,
    char_height: int = CHAR_HEIGHT,
) -> RenderOptions:
    """
    Turns raw user input into validated RenderOptions: numbers are clamped to
    their ranges, colors are validated and de-duplicated (first-seen order),
    and unknown option values raise ValueError.
    """
    layout = LayoutParams(
        orientation=orientation,
        pixel_scale=PIXEL_SCALE_RANGE.clamp(int(pixel_scale)),
        space_width=SPACE_WIDTH_RANGE.clamp(int(space_width)),
        letter_spacing=LETTER_SPACING_RANGE.clamp(int(letter_spacing)),
        char_height=char_height,
    )
    for c in (background_color, outline_color, shadow_color):
        to_rgba(c)
    return RenderOptions(
        layout=layout,
        colors=normalize_colors(colors),
        mixing_mode=mixing_mode,
        background=background,
        background_color=background_color.strip(),
        outline=bool(outline),
        outline_color=outline_color.strip(),
        shadow=bool(shadow),
        shadow_color=shadow_color.strip(),
    )
