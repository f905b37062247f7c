from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


Color = str  # anything Pillow's ImageColor understands: "#RRGGBB", "rgb(r,g,b)", names
Token = str
GlyphRow = tuple[int, ...]
GlyphMatrix = tuple[GlyphRow, ...]  # rows, y-major; 1 = ink, 0 = empty
Bitmap = list[list[int]]

Orientation = Literal["horizontal", "vertical"]
MixingMode = Literal["per-letter", "per-word", "random-letter", "checkerboard"]
BackgroundMode = Literal["transparent", "solid"]
GlyphSource = Literal["space", "custom", "standard", "fallback"]

ORIENTATIONS: tuple[str, ...] = ("horizontal", "vertical")
BACKGROUND_MODES: tuple[str, ...] = ("transparent", "solid")
MIXING_MODES: tuple[str, ...] = ("per-letter", "per-word", "random-letter", "checkerboard")

CHAR_HEIGHT = 7
DEFAULT_TEXT_COLOR: Color = "#FFFFFF"


def matrix_width(m: GlyphMatrix | None) -> int:
    if not m:
        return 0
    return len(m[0])


@dataclass(frozen=True, slots=True)
class ResolvedGlyph:
    is_space: bool
    data: GlyphMatrix | None
    source: GlyphSource

    def __post_init__(self) -> None:
        if self.is_space and self.data is not None:
            raise ValueError("space glyphs carry no matrix")
        if not self.is_space and self.data is None:
            raise ValueError("non-space glyphs need a matrix")

    @property
    def width(self) -> int:
        return matrix_width(self.data)


@dataclass(frozen=True, slots=True)
class LayoutParams:
    orientation: Orientation = "horizontal"
    pixel_scale: int = 5
    space_width: int = 2
    letter_spacing: int = 1
    char_height: int = CHAR_HEIGHT

    def __post_init__(self) -> None:
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"Unknown orientation: {self.orientation!r}")
        if self.pixel_scale < 1:
            raise ValueError("pixel_scale must be >= 1")
        if self.space_width < 0 or self.letter_spacing < 0:
            raise ValueError("space_width and letter_spacing must be non-negative")
        if self.char_height < 1:
            raise ValueError("char_height must be >= 1")


@dataclass(frozen=True, slots=True)
class RenderOptions:
    layout: LayoutParams = field(default_factory=LayoutParams)
    colors: tuple[Color, ...] = ()
    mixing_mode: MixingMode = "per-letter"
    background: BackgroundMode = "transparent"
    background_color: Color = "rgb(68,68,68)"
    outline: bool = False
    outline_color: Color = "rgb(255,255,255)"
    shadow: bool = False
    shadow_color: Color = "rgb(0,0,0)"

    def __post_init__(self) -> None:
        if self.mixing_mode not in MIXING_MODES:
            raise ValueError(f"Unknown mixing mode: {self.mixing_mode!r}")
        if self.background not in BACKGROUND_MODES:
            raise ValueError(f"Unknown background mode: {self.background!r}")


@dataclass(frozen=True, slots=True)
class RenderResult:
    image: Any  # PIL.Image.Image (RGBA)
    width: int
    height: int
    tokens: list[Token]
    filename: str
