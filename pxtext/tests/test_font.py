import json

from pxtext.font import builtin_font, font_from_json_dict, load_font_json, parse_ascii_glyph


def test_builtin_font_shape() -> None:
    font = builtin_font()
    assert font.char_height == 7
    assert font.default_char == "?"
    assert font.pixel_map["a"] == font.pixel_map["A"]
    assert font.pixel_map["A"][0] == (0, 1, 1, 1, 0)
    assert all(len(m) == 7 for m in font.pixel_map.values())
    assert "<3" in font.custom_symbols
    assert " " not in font.pixel_map


def test_parse_ascii_glyph_rejects_ragged_rows() -> None:
    assert parse_ascii_glyph(["#.", ".#"]) == ((1, 0), (0, 1))
    try:
        parse_ascii_glyph(["##", "#"])
        assert False, "expected ValueError"
    except ValueError as e:
        assert "same width" in str(e)


def test_load_font_json(tmp_path) -> None:
    data = {
        "pixelMap": {"?": [[1], [1], [1]], "X": [[1, 0, 1], [0, 1, 0], [1, 0, 1]]},
        "customSymbols": {":x:": [[1, 1], [1, 1], [1, 1]]},
        "charHeight": 3,
    }
    path = tmp_path / "font-data.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    font = load_font_json(str(path))
    assert font.char_height == 3
    assert font.pixel_map["X"][1] == (0, 1, 0)
    assert font.custom_symbols[":x:"] == ((1, 1),) * 3


def test_font_json_validation_errors() -> None:
    bad = [
        {},
        {"pixelMap": {"A": [[1]] * 7}},  # no default '?'
        {"pixelMap": {"?": [[1]] * 6}},  # wrong row count
        {"pixelMap": {"?": [[1, 0]] * 6 + [[1]]}},  # ragged
        {"pixelMap": {"?": [[1]] * 7}, "customSymbols": []},
        {"pixelMap": {"?": [[1]] * 7}, "customSymbols": ""},
        {"pixelMap": {"?": [[1]] * 7}, "customSymbols": 0},
        {"pixelMap": {"?": [["x"]] * 7}},
    ]
    for d in bad:
        try:
            font_from_json_dict(d)
            assert False, f"expected ValueError for {d!r}"
        except ValueError:
            pass


def test_font_json_null_custom_symbols_means_none() -> None:
    font = font_from_json_dict({"pixelMap": {"?": [[1]] * 7}, "customSymbols": None})
    assert font.custom_symbols == {}
