import pytest

from tomchase.colors import lookup_color
from tomchase.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    parse_xpm,
    split_words,
    str_str,
    str_str_quoted,
    strip_comments,
    text_to_rgb,
    xpm_data_to_image,
    xpm_file_to_image,
)

SAMPLE = ["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."]


def test_str_str_finds_position():
    assert str_str("hello", "ll", 5) == 2


def test_str_str_too_long_or_missing():
    assert str_str("hello", "hello!", 5) == -1
    assert str_str("hello", "xy", 5) == -1


def test_str_str_quoted_skips_quoted_match():
    assert str_str_quoted('"/*"/*', "/*", 6) == 4
    assert str_str_quoted('"/*"', "/*", 4) == -1


def test_split_words():
    assert split_words(" a\tb  c ") == ["a", "b", "c"]


def test_strip_block_comment_keeps_length():
    text = "a/*x*/b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result == "a" + " " * 5 + "b"


def test_strip_line_comment_removes_newline():
    text = "x // hi\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert result.startswith("x ") and result.endswith("y")


def test_strip_comments_leaves_quoted_text():
    text = '"a/*b*/"'
    assert strip_comments(text) == text


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("red", None) == lookup_color("red")
    assert text_to_rgb("light", "blue") == lookup_color("light blue")
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_sample():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == [0xFF0000, TRANSPARENT, TRANSPARENT, 0xFF0000]


def test_pixel_count_matches_size():
    image = parse_xpm(["3 2 1 1", "a c #00FF00", "aaa", "aaa"])
    assert len(image.pixels) == image.width * image.height
    assert set(image.pixels) == {0x00FF00}


def test_short_codes_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == [0x000002]


def test_long_codes_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == [0x000001]


def test_unknown_pixel_code_is_zero():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.pixels == [0]


@pytest.mark.parametrize(
    "data",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s foo", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_malformed_data_raises(data):
    with pytest.raises(XpmError):
        parse_xpm(data)


def test_data_to_image_matches_parse():
    assert xpm_data_to_image(SAMPLE) == parse_xpm(SAMPLE)


def test_file_round_trip(tmp_path):
    body = ",\n".join(f'"{line}"' for line in SAMPLE)
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        f"{body}\n"
        "};\n"
        "// trailing note\n"
    )
    image = xpm_file_to_image(path)
    assert image == xpm_data_to_image(SAMPLE)
    assert isinstance(image, XpmImage) and image.width == 2


def test_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")