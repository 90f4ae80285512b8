"""String helpers: number conversion, splitting, trimming, searching and copying."""

from __future__ import annotations

import re
from collections.abc import Callable
from itertools import zip_longest

_INT_BITS = 32
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _to_int32(value: int) -> int:
    """Wrap *value* into the range of a signed 32-bit integer."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping blanks and one sign.

    Parsing stops at the first non-digit; no digits give 0. The result
    wraps to a signed 32-bit integer.
    """
    sign, digits = _ATOI.match(text).groups()
    value = int(digits) if digits else 0
    return _to_int32(-value if sign == "-" else value)


def itoa(n: int) -> str:
    """Return the decimal text of *n*."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters of *charset* from both ends of *text*.

    With no charset the text is returned unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from *start* on.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Return where *needle* first lies wholly within the first *length*
    characters of *haystack*, or -1. An empty needle is found at 0."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    return haystack.find(needle, 0, length)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first differing character codes, the
    end of a string counting as code 0; 0 when they match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for ca, cb in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if ca == "\0" and cb == "\0":
            break
        if ca != cb:
            return ord(ca) - ord(cb)
    return 0


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if len(a) < n or len(b) < n:
        raise ValueError("buffers are shorter than n")
    for ba, bb in zip(a[:n], b[:n]):
        if ba != bb:
            return ba - bb
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied text and the full length of *src*.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* in a buffer of *size* characters.

    Returns the resulting text and the length it tried to create. When
    *dst* already fills the buffer it is left as is and the length
    reported is len(src) + size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size < len(dst) + 1:
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from func(index, char) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], str | None]) -> str:
    """Call func(index, char) for every character.

    A returned character replaces the original; None keeps it.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def strjoin(a: str | None, b: str | None) -> str:
    """Concatenate two strings.

    A missing first string gives an empty string; a missing second one
    is an error.
    """
    if a is None:
        return ""
    if b is None:
        raise TypeError("second string is missing")
    return a + b