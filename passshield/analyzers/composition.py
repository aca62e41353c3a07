"""
Composition Scanner
====================

Counts the character classes of a password: ASCII lowercase, ASCII
uppercase, ASCII digits, whitespace, and symbols (everything else,
including non-ASCII letters).

A character is one UTF-16 code unit, so characters outside the Basic
Multilingual Plane (most emoji) count as two symbols.
"""

from __future__ import annotations

import re

from passshield.core.models import Composition

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPACE_RE = re.compile(r"\s")
_SYMBOL_RE = re.compile(r"[^a-zA-Z0-9\s]")

_BMP_LIMIT = 0xFFFF


def code_units(password: str) -> str:
    """*password* with astral characters split into UTF-16 surrogate pairs.

    Every later stage indexes and counts the returned string, so lengths,
    spans and runs are measured in code units.
    """
    if all(ord(ch) <= _BMP_LIMIT for ch in password):
        return password
    units: list[str] = []
    for ch in password:
        point = ord(ch)
        if point > _BMP_LIMIT:
            point -= 0x10000
            units.append(chr(0xD800 + (point >> 10)))
            units.append(chr(0xDC00 + (point & 0x3FF)))
        else:
            units.append(ch)
    return "".join(units)


class CompositionScanner:
    """Character-class counter.

    Usage::

        comp = CompositionScanner().scan("Hello World1!")
        assert comp.spaces == 1 and comp.symbols == 1
    """

    @staticmethod
    def scan(password: str) -> Composition:
        """Count each character class in *password*."""
        password = code_units(password)
        return Composition(
            length=len(password),
            lowercase=len(_LOWER_RE.findall(password)),
            uppercase=len(_UPPER_RE.findall(password)),
            digits=len(_DIGIT_RE.findall(password)),
            symbols=len(_SYMBOL_RE.findall(password)),
            spaces=len(_SPACE_RE.findall(password)),
        )

    @staticmethod
    def charset_size(composition: Composition) -> int:
        """Size of the brute-force alphabet implied by the present classes.

        Lowercase and uppercase add 26 each, digits 10, symbols 32, and
        whitespace 1. An empty password has a charset of 0.
        """
        size = 0
        if composition.lowercase > 0:
            size += 26
        if composition.uppercase > 0:
            size += 26
        if composition.digits > 0:
            size += 10
        if composition.symbols > 0:
            size += 32
        if composition.spaces > 0:
            size += 1
        return size
