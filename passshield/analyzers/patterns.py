"""
Pattern Detector
=================

Scans a password for weak substrings and reports each as a
:class:`PatternMatch`. Five checks run in a fixed order, and their
matches are appended in that order:

1. Dictionary -- the whole password is a very common password.
2. Spatial    -- keyboard walks such as ``qwerty`` or ``asdf``.
3. Sequence   -- three-character runs of the alphabet or digits.
4. Repeat     -- three or more identical consecutive characters.
5. Date       -- years, day/month/year and ISO-style dates.

Matches from different checks may overlap; nothing is de-duplicated.
Substring checks run against the lower-cased password while tokens are
cut from the input so case is preserved.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

from __future__ import annotations

import math
import re

from passshield.core.models import PatternCategory, PatternMatch

# Whole-password matches only. Mixed-case entries never match the
# lower-cased input but still count towards the set cardinality.
_VERY_COMMON_PASSWORDS: frozenset[str] = frozenset({
    "password", "123456", "123456789", "qwerty", "abc123", "password123",
    "admin", "letmein", "welcome", "monkey", "1234567890", "dragon",
    "sunshine", "master", "123123", "football", "iloveyou", "admin123",
    "welcome123", "123qwe", "1q2w3e4r", "1q2w3e", "Qwerty123", "Password1",
})

_KEYBOARD_WALKS: tuple[str, ...] = (
    "qwerty", "asdf", "zxcv", "1234", "qwertyuiop", "asdfghjkl", "zxcvbnm",
    "1234567890", "qwertyui", "asdfghjk", "zxcvbnm", "abcdef", "fedcba",
)

_SEQUENCES: tuple[str, ...] = (
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "0123456789",
    "9876543210",
)

_SEQUENCE_WINDOW = 3
_KEYBOARD_CARDINALITY = 95
_ALPHABET_CARDINALITY = 26
_DAYS_PER_YEAR = 365

_REPEAT_RE = re.compile(r"(.)\1{2,}")

_DATE_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(19|20)\d{2}\b", re.ASCII),
    re.compile(r"\b\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}\b", re.ASCII),
    re.compile(r"\b\d{4}[/\-]\d{1,2}[/\-]\d{1,2}\b", re.ASCII),
)


class PatternDetector:
    """Finds dictionary, keyboard, sequence, repeat and date patterns.

    Usage::

        matches = PatternDetector().detect("qwerty-2019")
        [m.pattern.value for m in matches]
        # ['spatial', 'date']
    """

    def detect(self, password: str) -> list[PatternMatch]:
        """Run every check and return the matches in check order."""
        lower = password.lower()
        matches: list[PatternMatch] = []
        matches.extend(self._dictionary(password, lower))
        matches.extend(self._spatial(password, lower))
        matches.extend(self._sequences(password, lower))
        matches.extend(self._repeats(password))
        matches.extend(self._dates(password))
        return matches

    @staticmethod
    def _dictionary(password: str, lower: str) -> list[PatternMatch]:
        if lower not in _VERY_COMMON_PASSWORDS:
            return []
        return [PatternMatch(
            pattern=PatternCategory.DICTIONARY,
            token=password,
            i=0,
            j=len(password) - 1,
            entropy=0.0,
            cardinality=len(_VERY_COMMON_PASSWORDS),
        )]

    @staticmethod
    def _spatial(password: str, lower: str) -> list[PatternMatch]:
        matches: list[PatternMatch] = []
        for walk in _KEYBOARD_WALKS:
            idx = lower.find(walk)
            if idx == -1:
                continue
            matches.append(PatternMatch(
                pattern=PatternCategory.SPATIAL,
                token=password[idx:idx + len(walk)],
                i=idx,
                j=idx + len(walk) - 1,
                entropy=math.log2(len(walk)),
                cardinality=_KEYBOARD_CARDINALITY,
            ))
        return matches

    @staticmethod
    def _sequences(password: str, lower: str) -> list[PatternMatch]:
        # The upper-case alphabet lower-cases to the same trigrams as the
        # lower-case one, so alphabetic runs are reported twice.
        matches: list[PatternMatch] = []
        for sequence in _SEQUENCES:
            for start in range(len(sequence) - _SEQUENCE_WINDOW + 1):
                trigram = sequence[start:start + _SEQUENCE_WINDOW].lower()
                idx = lower.find(trigram)
                if idx == -1:
                    continue
                matches.append(PatternMatch(
                    pattern=PatternCategory.SEQUENCE,
                    token=password[idx:idx + _SEQUENCE_WINDOW],
                    i=idx,
                    j=idx + _SEQUENCE_WINDOW - 1,
                    entropy=math.log2(_SEQUENCE_WINDOW),
                    cardinality=_ALPHABET_CARDINALITY,
                ))
        return matches

    @staticmethod
    def _repeats(password: str) -> list[PatternMatch]:
        return [
            PatternMatch(
                pattern=PatternCategory.REPEAT,
                token=match.group(),
                i=match.start(),
                j=match.end() - 1,
                entropy=math.log2(len(match.group())),
                cardinality=1,
            )
            for match in _REPEAT_RE.finditer(password)
        ]

    @staticmethod
    def _dates(password: str) -> list[PatternMatch]:
        matches: list[PatternMatch] = []
        for regex in _DATE_RES:
            match = regex.search(password)
            if match is None:
                continue
            matches.append(PatternMatch(
                pattern=PatternCategory.DATE,
                token=match.group(),
                i=match.start(),
                j=match.end() - 1,
                entropy=math.log2(_DAYS_PER_YEAR),
                cardinality=_DAYS_PER_YEAR,
            ))
        return matches
