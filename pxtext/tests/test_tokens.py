from pxtext.font import builtin_font
from pxtext.tokens import symbol_match_order, tokenize


M = ((1,),) * 7


def test_tokenize_prefers_longest_symbol() -> None:
    symbols = {"a": M, "ab": M}
    assert tokenize("ab", symbols) == ["ab"]
    assert tokenize("aab", symbols) == ["a", "ab"]
    assert tokenize("ba", symbols) == ["b", "a"]


def test_tokenize_plain_characters_and_empty() -> None:
    assert tokenize("", {"ab": M}) == []
    assert tokenize("A B", {}) == ["A", " ", "B"]


def test_tokenize_is_deterministic_across_key_order() -> None:
    a = {"xy": M, "x": M, "xyz": M, "yz": M}
    b = {"yz": M, "xyz": M, "x": M, "xy": M}
    text = "xyzxyxyzzx"
    assert tokenize(text, a) == tokenize(text, a)
    assert tokenize(text, a) == tokenize(text, b)
    assert tokenize(text, a) == ["xyz", "xy", "xyz", "z", "x"]


def test_symbol_match_order_length_then_lexicographic() -> None:
    assert symbol_match_order(["b", "cc", "a", "aa", ""]) == ["aa", "cc", "a", "b"]


def test_tokenize_ignores_empty_key() -> None:
    assert tokenize("ab", {"": M}) == ["a", "b"]


def test_tokenize_builtin_symbols() -> None:
    font = builtin_font()
    assert tokenize("I<3U", font.custom_symbols) == ["I", "<3", "U"]
    assert tokenize("<", font.custom_symbols) == ["<"]
