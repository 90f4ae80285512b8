import pytest

from ftkit.colors import lookup_color
from ftkit.xpm import (
    Image,
    XpmError,
    load_xpm_file,
    parse_color_spec,
    parse_xpm,
    strip_comments,
    xpm_to_image,
)

SAMPLE = ["2 2 3 1", "a c #FF0000", "b c None", "g c green", "ab", "ga"]


def test_sample_image_dimensions():
    image = xpm_to_image(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert len(image.pixels) == image.width * image.height


def test_sample_pixels():
    image = xpm_to_image(SAMPLE)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(0, 1) == lookup_color("green")
    assert image.pixel(1, 1) == image.pixel(0, 0)


def test_pixel_out_of_range():
    image = xpm_to_image(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_parse_color_spec_hex():
    assert parse_color_spec("#00ff00", None) == 0x00FF00


def test_parse_color_spec_two_words():
    assert parse_color_spec("light", "blue") == lookup_color("light blue")


def test_parse_color_spec_none_and_unknown():
    assert parse_color_spec("None", None) == -1
    assert parse_color_spec("nosuchcolour", None) == 0


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == lookup_color("blue")


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == lookup_color("red")


def test_multi_char_keys():
    image = parse_xpm(["2 1 2 2", "aa c red", "bb c blue", "bbaa"])
    assert image.pixels == (lookup_color("blue"), lookup_color("red"))


def test_unknown_key_gives_zero():
    image = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert image.pixel(0, 0) == 0


@pytest.mark.parametrize(
    "data",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a m red", "a"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_data_raises(data):
    with pytest.raises(XpmError):
        parse_xpm(data)


def test_strip_comments_keeps_length_and_quoted_text():
    text = 'x /* gone */ "/* kept */" // tail\ny'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "gone" not in stripped
    assert "tail" not in stripped
    assert '"/* kept */"' in stripped
    assert stripped.endswith("y")


def test_load_xpm_file(tmp_path):
    source = (
        "/* XPM */\n"
        "static char *pic[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 2 3 1",\n'
        '"a c #FF0000",\n'
        '"b c None",\n'
        '"g c green",\n'
        "// pixels\n"
        '"ab",\n'
        '"ga"\n'
        "};\n"
    )
    path = tmp_path / "pic.xpm"
    path.write_text(source, encoding="latin-1")
    assert load_xpm_file(path) == xpm_to_image(SAMPLE)


def test_load_xpm_file_truncated(tmp_path):
    path = tmp_path / "bad.xpm"
    path.write_text('"2 2 1 1", "a c red", "aa"', encoding="latin-1")
    with pytest.raises(XpmError):
        load_xpm_file(path)


def test_image_equality_is_by_value():
    assert Image(1, 1, (5,)) == parse_xpm(["1 1 1 1", "a c #5", "a"])