"""Character classification, case mapping and character search."""

from __future__ import annotations

_ASCII_MAX = 127


def _code(c: int | str) -> int:
    """Return the character code of *c*, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError("expected an int or a single character")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: int | str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return _is_digit(_code(c))


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    code = _code(c)
    return _is_digit(code) or _is_upper(code) or _is_lower(code)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= _ASCII_MAX


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space to tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; return others unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper(code):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; return others unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower(code):
        code -= ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def _search_char(c: int | str) -> str:
    if isinstance(c, str):
        _code(c)
        return c
    return chr(_code(c) & 0xFF)


def strchr(text: str, c: int | str) -> int:
    """Return the index of the first *c* in *text*, or -1.

    Searching for the NUL character finds the end of the string.
    """
    char = _search_char(c)
    if char == "\0":
        found = text.find(char)
        return len(text) if found == -1 else found
    return text.find(char)


def strrchr(text: str, c: int | str) -> int:
    """Return the index of the last *c* in *text*, or -1.

    Searching for the NUL character finds the end of the string.
    """
    char = _search_char(c)
    if char == "\0":
        return len(text)
    return text.rfind(char)


def memchr(data: bytes, c: int, n: int) -> int:
    """Return the index of the first byte equal to *c* in the first *n* bytes, or -1."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(data):
        raise ValueError("buffer is shorter than n")
    return bytes(data[:n]).find(_code(c) & 0xFF)