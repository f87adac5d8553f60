"""Identifier derivation for generated components.

Turns icon file stems into PascalCase component names:

    arrow-up-right  -> ArrowUpRight
    bar_chart_2     -> BarChart2
    XMLHttpRequest  -> XmlHttpRequest
"""

from __future__ import annotations

import re

# Runs of letters/digits; everything else separates words
_SEGMENT = re.compile(r"[A-Za-z0-9]+")

# Word boundaries inside a segment: "fooBar" -> foo|Bar, "XMLHttp" -> XML|Http
_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+[a-z]*")


def split_words(stem: str) -> list[str]:
    """Split a stem into words on separators and case boundaries."""
    words: list[str] = []
    for segment in _SEGMENT.findall(stem):
        words.extend(_WORD.findall(segment))
    return words


def to_pascal_case(stem: str) -> str:
    """Convert a file stem to a PascalCase identifier.

    Args:
        stem: Asset file name without extension.

    Returns:
        Identifier with each word capitalized and the rest lower-cased.
        Empty if the stem contains no letters or digits.

    Example:
        >>> to_pascal_case("arrow-up-right")
        'ArrowUpRight'
    """
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(stem))
