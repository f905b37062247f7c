from __future__ import annotations

import argparse
import random
import sys

from .bitmap import compose_bitmap, mask_to_ascii, outline_cells
from .font import FontData, builtin_font, load_font_json
from .models import BACKGROUND_MODES, MIXING_MODES, ORIENTATIONS, LayoutParams
from .palette_map import is_paid_palette, load_palettes_json, palette_colors, uses_paid_colors
from .render_png import render_text, save_png, to_data_url
from .resolve import resolve_tokens
from .settings import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_COLORS,
    DEFAULT_OUTLINE_COLOR,
    DEFAULT_SHADOW_COLOR,
    DEFAULT_TEXT,
    build_options,
)
from .tokens import tokenize


def _load_font(path: str | None) -> FontData:
    return load_font_json(path) if path else builtin_font()


def _add_layout_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--scale", type=int, default=5, help="Output pixels per logical pixel")
    ap.add_argument("--space-width", type=int, default=2)
    ap.add_argument("--letter-spacing", type=int, default=1)
    ap.add_argument("--orientation", type=str, default="horizontal", choices=list(ORIENTATIONS))
    ap.add_argument("--font", type=str, default=None, help="Path to a font-data.json (default: built-in 5x7 font)")


def _cmd_render(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="pxtext render")
    ap.add_argument("text", type=str, nargs="?", default=DEFAULT_TEXT)
    _add_layout_args(ap)
    ap.add_argument("--mixing", type=str, default="per-letter", choices=list(MIXING_MODES))
    ap.add_argument("--color", action="append", default=None, help="Fill color; repeat for several")
    ap.add_argument("--palettes", type=str, default=None, help="Path to palettes.json")
    ap.add_argument("--select-palette", action="append", default=[], help="Add every color of a palette (needs --palettes)")
    ap.add_argument("--background", type=str, default="transparent", choices=list(BACKGROUND_MODES))
    ap.add_argument("--bg-color", type=str, default=DEFAULT_BACKGROUND_COLOR)
    ap.add_argument("--outline", action="store_true")
    ap.add_argument("--outline-color", type=str, default=DEFAULT_OUTLINE_COLOR)
    ap.add_argument("--shadow", action="store_true")
    ap.add_argument("--shadow-color", type=str, default=DEFAULT_SHADOW_COLOR)
    ap.add_argument("--seed", type=int, default=None, help="Seed for --mixing random-letter")
    ap.add_argument("--data-url", action="store_true", help="Print a PNG data URL instead of writing a file")
    ap.add_argument("--out", type=str, default=None, help="Output .png path (default: derived from the text)")
    ns = ap.parse_args(argv)

    colors: list[str] = list(ns.color or [])
    palettes = load_palettes_json(ns.palettes) if ns.palettes else {}
    if ns.select_palette and not ns.palettes:
        raise SystemExit("--select-palette requires --palettes")
    for palette_id in ns.select_palette:
        colors.extend(palette_colors(palettes, palette_id))
    if not colors:
        colors = list(DEFAULT_COLORS)

    font = _load_font(ns.font)
    options = build_options(
        pixel_scale=ns.scale,
        space_width=ns.space_width,
        letter_spacing=ns.letter_spacing,
        orientation=ns.orientation,
        colors=colors,
        mixing_mode=ns.mixing,
        background=ns.background,
        background_color=ns.bg_color,
        outline=ns.outline,
        outline_color=ns.outline_color,
        shadow=ns.shadow,
        shadow_color=ns.shadow_color,
        char_height=font.char_height,
    )
    rng = random.Random(ns.seed) if ns.seed is not None else None
    res = render_text(ns.text, options, font=font, rng=rng)

    if palettes and uses_paid_colors(options.colors, palettes):
        print("note: selection includes colors from a paid palette", file=sys.stderr)

    if ns.data_url:
        sys.stdout.write(to_data_url(res.image) + "\n")
        return 0

    out = ns.out or res.filename
    save_png(res.image, out)
    print(f"{out} ({res.width}x{res.height})")
    return 0


def _cmd_preview(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="pxtext preview")
    ap.add_argument("text", type=str)
    ap.add_argument("--space-width", type=int, default=2)
    ap.add_argument("--letter-spacing", type=int, default=1)
    ap.add_argument("--font", type=str, default=None)
    ap.add_argument("--outline", action="store_true", help="Mark outline cells with '+'")
    ns = ap.parse_args(argv)

    font = _load_font(ns.font)
    params = LayoutParams(
        orientation="horizontal",
        pixel_scale=1,
        space_width=max(0, ns.space_width),
        letter_spacing=max(0, ns.letter_spacing),
        char_height=font.char_height,
    )
    glyphs = resolve_tokens(tokenize(ns.text, font.custom_symbols), font)
    bitmap = compose_bitmap(glyphs, params)
    ring = outline_cells(bitmap) if ns.outline else None
    sys.stdout.write(mask_to_ascii(bitmap, outline=ring) + "\n")
    return 0


def _cmd_tokens(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="pxtext tokens")
    ap.add_argument("text", type=str)
    ap.add_argument("--font", type=str, default=None)
    ns = ap.parse_args(argv)

    font = _load_font(ns.font)
    tokens = tokenize(ns.text, font.custom_symbols)
    for tok, g in zip(tokens, resolve_tokens(tokens, font)):
        print(f"{tok!r}\t{g.source}")
    return 0


def _cmd_palettes(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="pxtext palettes")
    ap.add_argument("path", type=str, help="Path to palettes.json")
    ns = ap.parse_args(argv)

    palettes = load_palettes_json(ns.path)
    for palette_id, entries in palettes.items():
        tag = " (paid)" if is_paid_palette(palette_id) else ""
        print(f"{palette_id}{tag}: {len(entries)} colors")
        for c in entries:
            print(f"  {c.rgb}  {c.name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in ("-h", "--help"):
        print("pxtext commands: render, preview, tokens, palettes")
        print("Example: pxtext render 'HELLO <3' --scale 8 --color '#E63946' --color '#457B9D' --out hello.png")
        print("Example: pxtext render HI --outline --shadow --background solid")
        print("Example: pxtext preview 'A B' --outline")
        print("Example: pxtext palettes palettes.json")
        return 0

    cmd = argv[0]
    sub_argv = argv[1:]
    commands = {
        "render": _cmd_render,
        "preview": _cmd_preview,
        "tokens": _cmd_tokens,
        "palettes": _cmd_palettes,
    }
    if cmd not in commands:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        return 2
    try:
        return commands[cmd](sub_argv)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
