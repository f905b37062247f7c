from __future__ import annotations

import random
from typing import Protocol

from .models import MIXING_MODES, Color, MixingMode, Token


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class ColorMixer:
    """
    Decides which palette color paints a glyph (or, in checkerboard mode, a
    single ink pixel).

    glyph_color() must be called once per non-space glyph, in order: the
    per-word counter and the random stream both advance with it.
    """

    def __init__(
        self,
        colors: tuple[Color, ...] | list[Color],
        *,
        mode: MixingMode = "per-letter",
        tokens: list[Token] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        if not colors:
            raise ValueError("ColorMixer needs at least one color")
        if mode not in MIXING_MODES:
            raise ValueError(f"Unknown mixing mode: {mode}")
        self.colors = tuple(colors)
        self.mode = mode
        self.tokens = list(tokens or [])
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self._word_index = 0

    def glyph_color(self, index: int) -> Color:
        k = len(self.colors)
        if self.mode == "per-letter":
            # index counts spacers too.
            return self.colors[index % k]
        if self.mode == "per-word":
            if index > 0 and index - 1 < len(self.tokens) and self.tokens[index - 1] == " ":
                self._word_index += 1
            return self.colors[self._word_index % k]
        if self.mode == "random-letter":
            return self.colors[self.rng.randrange(k)]
        return self.colors[0]

    def pixel_color(self, glyph_color: Color, gx: int, gy: int) -> Color:
        if self.mode != "checkerboard":
            return glyph_color
        if (gx + gy) % 2 == 0:
            return self.colors[0]
        return self.colors[1 % len(self.colors)]

