"""Formatted output with a small printf-style conversion set, and stream writers."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable
from typing import Any, TextIO

_INT_BITS = 32
_POINTER_BITS = 64
NULL_TEXT = "(null)"


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _as_int(arg: Any) -> int:
    try:
        return operator.index(arg)
    except TypeError:
        raise TypeError(f"an integer is required, not {type(arg).__name__}") from None


def _convert_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c needs a single character")
        return arg
    return chr(_as_int(arg) & 0xFF)


def _convert_str(arg: Any) -> str:
    return NULL_TEXT if arg is None else str(arg)


def _convert_pointer(arg: Any) -> str:
    if arg is None:
        address = 0
    elif isinstance(arg, int):
        address = _wrap_unsigned(arg, _POINTER_BITS)
    else:
        address = id(arg)
    return f"0x{address:x}"


def _convert_signed(arg: Any) -> str:
    return str(_wrap_signed(_as_int(arg), _INT_BITS))


def _convert_unsigned(arg: Any) -> str:
    return str(_wrap_unsigned(_as_int(arg), _INT_BITS))


def _convert_hex_lower(arg: Any) -> str:
    return format(_wrap_unsigned(_as_int(arg), _INT_BITS), "x")


def _convert_hex_upper(arg: Any) -> str:
    return format(_wrap_unsigned(_as_int(arg), _INT_BITS), "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _convert_char,
    "s": _convert_str,
    "p": _convert_pointer,
    "d": _convert_signed,
    "i": _convert_signed,
    "u": _convert_unsigned,
    "x": _convert_hex_lower,
    "X": _convert_hex_upper,
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %p %d %i %u %x %X and %% in *fmt*.

    An unknown conversion character is dropped without using an argument;
    a lone '%' at the end produces nothing. Integers for %d and %i wrap to
    signed 32 bits, for %u %x %X to unsigned 32 bits. Too few arguments
    raise TypeError; extra ones are ignored.
    """
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        out.append(convert(arg))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of *fmt* to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character, given as a string or a character code."""
    _target(stream).write(_convert_char(c))


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write *text* as is."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write *text* followed by a newline."""
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of the integer *n*."""
    _target(stream).write(str(_as_int(n)))