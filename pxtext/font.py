from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .models import CHAR_HEIGHT, GlyphMatrix


# Built-in 5x7 font (uppercase A-Z, 0-9, a little punctuation).
# Each glyph is 7 rows of 5 bits, MSB on the left.
_GLYPHS: dict[str, list[int]] = {
    "-": [0b00000, 0b00000, 0b00000, 0b11111, 0b00000, 0b00000, 0b00000],
    "?": [0b01110, 0b10001, 0b00001, 0b00010, 0b00100, 0b00000, 0b00100],
    "!": [0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00000, 0b00100],
    ".": [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00100],
    ",": [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00100, 0b01000],
    ":": [0b00000, 0b00100, 0b00000, 0b00000, 0b00000, 0b00100, 0b00000],
    "'": [0b00100, 0b00100, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000],
    "+": [0b00000, 0b00100, 0b00100, 0b11111, 0b00100, 0b00100, 0b00000],
    "=": [0b00000, 0b00000, 0b11111, 0b00000, 0b11111, 0b00000, 0b00000],
    "/": [0b00001, 0b00001, 0b00010, 0b00100, 0b01000, 0b10000, 0b10000],
    "A": [0b01110, 0b10001, 0b10001, 0b11111, 0b10001, 0b10001, 0b10001],
    "B": [0b11110, 0b10001, 0b10001, 0b11110, 0b10001, 0b10001, 0b11110],
    "C": [0b01110, 0b10001, 0b10000, 0b10000, 0b10000, 0b10001, 0b01110],
    "D": [0b11110, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b11110],
    "E": [0b11111, 0b10000, 0b10000, 0b11110, 0b10000, 0b10000, 0b11111],
    "F": [0b11111, 0b10000, 0b10000, 0b11110, 0b10000, 0b10000, 0b10000],
    "G": [0b01110, 0b10001, 0b10000, 0b10111, 0b10001, 0b10001, 0b01110],
    "H": [0b10001, 0b10001, 0b10001, 0b11111, 0b10001, 0b10001, 0b10001],
    "I": [0b11111, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b11111],
    "J": [0b11111, 0b00010, 0b00010, 0b00010, 0b00010, 0b10010, 0b01100],
    "K": [0b10001, 0b10010, 0b10100, 0b11000, 0b10100, 0b10010, 0b10001],
    "L": [0b10000, 0b10000, 0b10000, 0b10000, 0b10000, 0b10000, 0b11111],
    "M": [0b10001, 0b11011, 0b10101, 0b10101, 0b10001, 0b10001, 0b10001],
    "N": [0b10001, 0b11001, 0b10101, 0b10011, 0b10001, 0b10001, 0b10001],
    "O": [0b01110, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01110],
    "P": [0b11110, 0b10001, 0b10001, 0b11110, 0b10000, 0b10000, 0b10000],
    "Q": [0b01110, 0b10001, 0b10001, 0b10001, 0b10101, 0b10010, 0b01101],
    "R": [0b11110, 0b10001, 0b10001, 0b11110, 0b10100, 0b10010, 0b10001],
    "S": [0b01111, 0b10000, 0b10000, 0b01110, 0b00001, 0b00001, 0b11110],
    "T": [0b11111, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100],
    "U": [0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01110],
    "V": [0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01010, 0b00100],
    "W": [0b10001, 0b10001, 0b10001, 0b10101, 0b10101, 0b10101, 0b01010],
    "X": [0b10001, 0b10001, 0b01010, 0b00100, 0b01010, 0b10001, 0b10001],
    "Y": [0b10001, 0b10001, 0b01010, 0b00100, 0b00100, 0b00100, 0b00100],
    "Z": [0b11111, 0b00001, 0b00010, 0b00100, 0b01000, 0b10000, 0b11111],
    "0": [0b01110, 0b10001, 0b10011, 0b10101, 0b11001, 0b10001, 0b01110],
    "1": [0b00100, 0b01100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110],
    "2": [0b01110, 0b10001, 0b00001, 0b00010, 0b00100, 0b01000, 0b11111],
    "3": [0b11110, 0b00001, 0b00001, 0b01110, 0b00001, 0b00001, 0b11110],
    "4": [0b00010, 0b00110, 0b01010, 0b10010, 0b11111, 0b00010, 0b00010],
    "5": [0b11111, 0b10000, 0b10000, 0b11110, 0b00001, 0b00001, 0b11110],
    "6": [0b01110, 0b10000, 0b10000, 0b11110, 0b10001, 0b10001, 0b01110],
    "7": [0b11111, 0b00001, 0b00010, 0b00100, 0b01000, 0b01000, 0b01000],
    "8": [0b01110, 0b10001, 0b10001, 0b01110, 0b10001, 0b10001, 0b01110],
    "9": [0b01110, 0b10001, 0b10001, 0b01111, 0b00001, 0b00001, 0b01110],
}

# Multi-character symbols. '#' is ink, '.' is empty.
_SYMBOLS: dict[str, list[str]] = {
    "<3": [
        ".##.##.",
        "#######",
        "#######",
        "#######",
        ".#####.",
        "..###..",
        "...#...",
    ],
    ":)": [
        ".....",
        ".#.#.",
        ".#.#.",
        ".....",
        "#...#",
        ".###.",
        ".....",
    ],
}


def _bits_to_matrix(rows: list[int], *, width: int = 5) -> GlyphMatrix:
    return tuple(tuple((bits >> (width - 1 - x)) & 1 for x in range(width)) for bits in rows)


def parse_ascii_glyph(rows: list[str]) -> GlyphMatrix:
    if not rows:
        raise ValueError("glyph needs at least one row")
    w = len(rows[0])
    if any(len(r) != w for r in rows):
        raise ValueError("Glyph rows must be the same width")
    return tuple(tuple(1 if ch == "#" else 0 for ch in row) for row in rows)


def _check_matrix(key: str, m: GlyphMatrix, char_height: int) -> None:
    if len(m) != char_height:
        raise ValueError(f"glyph {key!r}: expected {char_height} rows, got {len(m)}")
    w = len(m[0])
    for row in m:
        if len(row) != w:
            raise ValueError(f"glyph {key!r}: rows must be the same width")
        if any(v not in (0, 1) for v in row):
            raise ValueError(f"glyph {key!r}: pixels must be 0 or 1")


@dataclass(frozen=True, slots=True)
class FontData:
    pixel_map: dict[str, GlyphMatrix]
    custom_symbols: dict[str, GlyphMatrix] = field(default_factory=dict)
    default_char: str = "?"
    char_height: int = CHAR_HEIGHT

    def __post_init__(self) -> None:
        if self.char_height < 1:
            raise ValueError("char_height must be >= 1")
        for key, m in self.pixel_map.items():
            if len(key) != 1:
                raise ValueError(f"pixelMap keys must be single characters, got {key!r}")
            _check_matrix(key, m, self.char_height)
        for key, m in self.custom_symbols.items():
            if not key:
                raise ValueError("customSymbols keys must be non-empty")
            _check_matrix(key, m, self.char_height)
        if self.default_char not in self.pixel_map:
            raise ValueError(f"default_char {self.default_char!r} missing from pixelMap")


def builtin_font() -> FontData:
    pixel_map: dict[str, GlyphMatrix] = {}
    for ch, rows in _GLYPHS.items():
        m = _bits_to_matrix(rows)
        pixel_map[ch] = m
        if ch.isalpha():
            pixel_map[ch.lower()] = m
    symbols = {key: parse_ascii_glyph(rows) for key, rows in _SYMBOLS.items()}
    return FontData(pixel_map=pixel_map, custom_symbols=symbols)


def _matrix_from_json(key: str, raw: Any) -> GlyphMatrix:
    if not isinstance(raw, list) or not raw or not all(isinstance(r, list) for r in raw):
        raise ValueError(f"glyph {key!r}: expected a non-empty list of rows")
    try:
        return tuple(tuple(int(v) for v in row) for row in raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"glyph {key!r}: pixels must be integers") from e


def font_from_json_dict(d: dict[str, Any]) -> FontData:
    """
    Builds a FontData from the JSON layout used by font-data.json:

      {"pixelMap": {"A": [[0,1,1,0], ...]}, "customSymbols": {":heart:": [...]},
       "defaultChar": "?", "charHeight": 7}

    defaultChar and charHeight are optional.
    """
    if not isinstance(d, dict) or not isinstance(d.get("pixelMap"), dict):
        raise ValueError("font data must contain a 'pixelMap' object")
    symbols_raw = d.get("customSymbols")
    if symbols_raw is None:
        symbols_raw = {}
    if not isinstance(symbols_raw, dict):
        raise ValueError("'customSymbols' must be an object")

    pixel_map = {k: _matrix_from_json(k, v) for k, v in d["pixelMap"].items()}
    symbols = {k: _matrix_from_json(k, v) for k, v in symbols_raw.items()}
    return FontData(
        pixel_map=pixel_map,
        custom_symbols=symbols,
        default_char=str(d.get("defaultChar", "?")),
        char_height=int(d.get("charHeight", CHAR_HEIGHT)),
    )


def load_font_json(path: str) -> FontData:
    with open(path, "r", encoding="utf-8") as f:
        d = json.load(f)
    return font_from_json_dict(d)
