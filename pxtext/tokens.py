from __future__ import annotations

from collections.abc import Iterable

from .models import Token


def symbol_match_order(keys: Iterable[str]) -> list[str]:
    """
    Custom-symbol keys in the order they are tried: longest first.
    Equal-length keys are tried in lexicographic order so the result does not
    depend on the mapping's insertion order. Empty keys never match.
    """
    return sorted((k for k in keys if k), key=lambda k: (-len(k), k))


def tokenize(text: str, custom_symbols: Iterable[str]) -> list[Token]:
    """
    Splits text into tokens, greedily preferring the longest custom-symbol key
    at each position and falling back to single characters.

    custom_symbols may be a mapping (its keys are used) or any iterable of keys.
    """
    keys = symbol_match_order(custom_symbols)
    tokens: list[Token] = []
    i = 0
    n = len(text)
    while i < n:
        for key in keys:
            if text.startswith(key, i):
                tokens.append(key)
                i += len(key)
                break
        else:
            tokens.append(text[i])
            i += 1
    return tokens
