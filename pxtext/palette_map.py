from __future__ import annotations

import json
from dataclasses import dataclass

from PIL import ImageColor

from .models import Color


@dataclass(frozen=True, slots=True)
class PaletteColor:
    name: str
    rgb: Color


def to_rgba(color: Color) -> tuple[int, int, int, int]:
    try:
        r, g, b, a = ImageColor.getcolor(color.strip(), "RGBA")
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Invalid color: {color!r}") from e
    return (r, g, b, a)


def normalize_colors(colors: list[Color] | tuple[Color, ...]) -> tuple[Color, ...]:
    """
    Strips blanks, validates every entry and drops repeats.
    First-seen order is kept: it drives per-letter / per-word indexing.
    """
    out: list[Color] = []
    seen: set[tuple[int, int, int, int]] = set()
    for c in colors:
        s = c.strip()
        if not s:
            continue
        # "#ff0000" and "rgb(255,0,0)" are the same color.
        rgba = to_rgba(s)
        if rgba in seen:
            continue
        seen.add(rgba)
        out.append(s)
    return tuple(out)


def load_palettes_json(path: str) -> dict[str, list[PaletteColor]]:
    """
    Reads palettes.json:

      {"free-palette": [{"name": "Pink", "rgb": "rgb(224,159,249)"}, ...], ...}
    """
    with open(path, "r", encoding="utf-8") as f:
        d = json.load(f)
    if not isinstance(d, dict):
        raise ValueError("palettes file must contain an object of palettes")

    out: dict[str, list[PaletteColor]] = {}
    for palette_id, entries in d.items():
        if not isinstance(entries, list):
            raise ValueError(f"palette {palette_id!r}: expected a list of colors")
        colors: list[PaletteColor] = []
        for e in entries:
            if not isinstance(e, dict) or "rgb" not in e:
                raise ValueError(f"palette {palette_id!r}: every entry needs an 'rgb' value")
            rgb = str(e["rgb"])
            to_rgba(rgb)
            colors.append(PaletteColor(name=str(e.get("name", rgb)), rgb=rgb))
        out[str(palette_id)] = colors
    return out


def palette_colors(palettes: dict[str, list[PaletteColor]], palette_id: str) -> list[Color]:
    if palette_id not in palettes:
        raise ValueError(f"Unknown palette: {palette_id!r}. Known: {sorted(palettes)}")
    return [c.rgb for c in palettes[palette_id]]


def is_paid_palette(palette_id: str) -> bool:
    return "paid" in palette_id


def uses_paid_colors(colors: list[Color] | tuple[Color, ...], palettes: dict[str, list[PaletteColor]]) -> bool:
    selected = set(colors)
    for palette_id, entries in palettes.items():
        if is_paid_palette(palette_id) and any(c.rgb in selected for c in entries):
            return True
    return False
