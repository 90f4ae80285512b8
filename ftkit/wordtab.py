"""Substring search helpers and splitting on blanks (spaces and tabs)."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of the first *needle* in *text*, or -1.

    A needle longer than *limit* is never found.
    """
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches that start inside double quotes.

    A double quote toggles the quoted state before the match at its own
    position is tested, so a match may begin on a closing quote.
    """
    if len(needle) > limit:
        return -1
    quoted = False
    last_start = len(text) - len(needle)
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split *text* into words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]