import string

import pytest

from ftkit.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    memchr,
    strchr,
    strrchr,
    tolower,
    toupper,
)

ASCII_CODES = range(0, 128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_classification_matches_ascii_sets(code):
    char = chr(code)
    assert isalpha(code) == (char in string.ascii_letters)
    assert isdigit(code) == (char in string.digits)
    assert isalnum(code) == (char in string.ascii_letters + string.digits)
    assert isprint(code) == (char.isprintable() and code < 127)


def test_classification_accepts_strings():
    assert isalpha("q") is True
    assert isdigit("7") is True
    assert isalnum("_") is False
    assert isprint("\n") is False


def test_non_ascii_codes_are_not_letters():
    assert isalpha(0xE9) is False
    assert isalnum(200) is False
    assert isdigit(-1) is False


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


@pytest.mark.parametrize("code", ASCII_CODES)
def test_case_mapping_matches_ascii(code):
    char = chr(code)
    assert tolower(char) == char.lower()
    assert toupper(char) == char.upper()


def test_case_mapping_keeps_int_type():
    assert tolower(ord("G")) == ord("g")
    assert toupper(ord("g")) == ord("G")
    assert tolower(ord("5")) == ord("5")


def test_case_mapping_leaves_non_ascii():
    assert tolower("É") == "É"
    assert toupper(0xE9) == 0xE9


def test_case_round_trip():
    for char in string.ascii_lowercase:
        assert tolower(toupper(char)) == char


def test_bad_argument_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(TypeError):
        isdigit(1.5)


def test_strchr_finds_first():
    text = "hello world"
    assert strchr(text, "o") == text.index("o")
    assert strchr(text, ord("l")) == text.index("l")
    assert strchr(text, "z") == -1


def test_strrchr_finds_last():
    text = "hello world"
    assert strrchr(text, "o") == text.rindex("o")
    assert strrchr(text, ord("l")) == text.rindex("l")
    assert strrchr(text, "z") == -1


def test_nul_finds_end_of_string():
    text = "abc"
    assert strchr(text, 0) == len(text)
    assert strrchr(text, "\0") == len(text)


def test_search_wraps_code_to_byte():
    text = "xay"
    assert strchr(text, ord("a") + 256) == text.index("a")


def test_memchr_limits_search():
    data = b"abcabc"
    assert memchr(data, ord("c"), len(data)) == data.index(b"c")
    assert memchr(data, ord("c"), 2) == -1
    assert memchr(data, ord("a"), 0) == -1


def test_memchr_errors():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 3)
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), -1)