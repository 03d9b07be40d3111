"""Substring search and word splitting used when reading XPM text."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def find(text: str, needle: str, limit: int) -> int:
    """Return the index of the first occurrence of ``needle`` in ``text``.

    Gives -1 when the needle is not found or is longer than ``limit``.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    quoted = False
    last_start = len(text) - len(needle) + 1
    for pos, char in enumerate(text[:last_start]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]