import io

import pytest

from ftkit.printf import (
    format_string,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_escape():
    assert format_string("100%%") == "100%"


def test_char_from_string_and_code():
    assert format_string("%c%c", "a", ord("b")) == "ab"


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_signed_matches_python_in_range():
    for n in (0, 7, -7, 123456, -2147483648, 2147483647):
        assert format_string("%d", n) == str(n)
        assert format_string("%i", n) == str(n)


def test_signed_wraps_to_32_bits():
    assert format_string("%d", 2147483648) == "-2147483648"


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == str(2**32 - 1)
    assert format_string("%u", 42) == "42"


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 0xDEADBEEF, 2**32 - 1])
def test_hex_round_trip(n):
    low = format_string("%x", n)
    upp = format_string("%X", n)
    assert int(low, 16) == n
    assert int(upp, 16) == n
    assert low == low.lower()
    assert upp == upp.upper()
    assert low.upper() == upp


def test_pointer_prefix_and_value():
    assert format_string("%p", 0) == "0x0"
    assert format_string("%p", None) == "0x0"
    text = format_string("%p", 0x1234ABCD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234ABCD


def test_unknown_conversion_dropped_without_consuming_argument():
    assert format_string("a%qb%d", 5) == "ab5"


def test_trailing_percent_produces_nothing():
    assert format_string("abc%") == "abc"


def test_too_few_arguments():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_non_integer_for_d_raises():
    with pytest.raises(TypeError):
        format_string("%d", "12")


def test_extra_arguments_ignored():
    assert format_string("%s", "x", "y") == "x"


def test_printf_writes_and_returns_length(capsys):
    count = printf("n=%d s=%s%%", -42, "ok")
    out = capsys.readouterr().out
    assert out == "n=-42 s=ok%"
    assert count == len(out)


def test_put_char_and_str():
    stream = io.StringIO()
    put_char("x", stream)
    put_char(ord("y"), stream)
    put_str("zz", stream)
    assert stream.getvalue() == "xyzz"


def test_put_endl_appends_newline():
    stream = io.StringIO()
    put_endl("line", stream)
    assert stream.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 5, -5, -2147483648, 2147483647])
def test_put_nbr(n):
    stream = io.StringIO()
    put_nbr(n, stream)
    assert stream.getvalue() == str(n)


def test_put_defaults_to_stdout(capsys):
    put_str("abc")
    put_nbr(-3)
    assert capsys.readouterr().out == "abc-3"