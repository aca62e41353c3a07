"""
Dictionary Engine
==================

Checks a password, and simple transformations of it, against five bundled
word lists: common breached passwords, common English words, first names,
keyboard patterns, and years.

Checks, in order:

1. Exact (case-insensitive) matches; each list caps the dictionary score.
2. L33t-speak normalisation matched against passwords and words.
3. Digits stripped, matched against words and names.
4. Reversed, matched against words.
5. Containment of words/names of four or more letters, and of any
   ``19xx``/``20xx`` year.

More than one distinct matched token lowers the score by a further 10.

References:
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
    - Weir, M., Aggarwal, S., de Medeiros, B., & Glodek, B. (2009).
      Password Cracking Using Probabilistic Context-Free Grammars.
      IEEE S&P.
"""

from __future__ import annotations

import re
from typing import Literal

from passshield.core.models import (
    DictionaryAnalysis,
    DictionaryStatistics,
    DictionaryStrength,
)


# ===================================================================== #
#  Word Lists
# ===================================================================== #

# Top breached passwords. Duplicates are kept as published; statistics
# report the raw entry count.
_COMMON_PASSWORDS: tuple[str, ...] = (
    "123456", "password", "123456789", "12345678", "12345", "1234567", "1234567890",
    "qwerty", "abc123", "111111", "dragon", "master", "monkey", "letmein", "login",
    "princess", "qwertyuiop", "solo", "passw0rd", "starwars", "password1", "123123",
    "freedom", "whatever", "iceman", "trustno1", "batman", "zaq1zaq1", "qazwsx",
    "password123", "Iloveyou", "loveme", "welcome", "admin", "football", "secret",
    "ninja", "pass", "12341234", "shadow", "michael", "mustang", "superman", "jennifer",
    "jordan", "sunshine", "jesus", "qwerty123", "hello", "charlie", "hunter", "andrew",
    "tigger", "iloveyou", "654321", "andrea", "golfer", "michelle", "buster", "daniel",
    "000000", "michelle", "chelsea", "apple", "cocacola", "biteme", "lakers",
    "brandon", "access", "mercedes", "yankees", "696969", "justin", "orange",
    "computer", "arsenal", "mothers", "pepper", "johnny", "peaches", "miller",
    "scorpion", "tigers", "football1", "soccer", "badboy", "ranger", "thx1138",
    "enter", "hockey", "thunder", "cowboys", "silver", "richard", "fucker",
    "orange", "merlin", "michelle", "corvette", "bigdog", "cheese", "matthew",
    "patrick", "martin", "freedom", "ginger", "blondie", "cookies", "golf",
)

# Common five-letter English words.
_COMMON_WORDS: tuple[str, ...] = (
    "about", "above", "abuse", "actor", "acute", "admit", "adopt", "adult", "after",
    "again", "agent", "agree", "ahead", "alarm", "album", "alert", "alien", "align",
    "alike", "alive", "allow", "alone", "along", "alter", "among", "anger", "angle",
    "angry", "apart", "apple", "apply", "arena", "argue", "arise", "array", "arrow",
    "aside", "asset", "avoid", "awake", "award", "aware", "badly", "baker", "bases",
    "basic", "beach", "began", "begin", "bench", "billy", "birth", "black", "blame",
    "blind", "block", "blood", "board", "boost", "booth", "bound", "brain", "brand",
    "brass", "brave", "bread", "break", "breed", "brief", "bring", "broad", "broke",
    "brown", "build", "burst", "buyer", "cable", "calif", "carry", "catch", "cause",
    "chain", "chair", "chaos", "charm", "chart", "chase", "cheap", "check", "chest",
    "chief", "child", "china", "chose", "civil", "claim", "class", "clean", "clear",
    "click", "climb", "clock", "close", "cloud", "coach", "coast", "could", "count",
    "court", "cover", "craft", "crash", "crazy", "cream", "crime", "cross", "crowd",
    "crown", "crude", "curve", "cycle", "daily", "dance", "dated", "dealt", "death",
    "debut", "delay", "depth", "doing", "doubt", "dozen", "draft", "drama", "drank",
    "drawn", "dream", "dress", "drill", "drink", "drive", "drove", "dying", "eager",
    "early", "earth", "eight", "elite", "empty", "enemy", "enjoy", "enter", "entry",
    "equal", "error", "event", "every", "exact", "exist", "extra", "faith", "false",
    "fault", "fiber", "field", "fifth", "fifty", "fight", "final", "first", "fixed",
    "flash", "fleet", "floor", "fluid", "focus", "force", "forth", "forty", "forum",
    "found", "frame", "frank", "fraud", "fresh", "front", "fruit", "fully", "funny",
)

_COMMON_NAMES: tuple[str, ...] = (
    "james", "john", "robert", "michael", "william", "david", "richard", "charles",
    "joseph", "thomas", "christopher", "daniel", "paul", "mark", "donald", "steven",
    "kenneth", "andrew", "joshua", "kevin", "brian", "george", "edward", "ronald",
    "timothy", "jason", "jeffrey", "ryan", "jacob", "gary", "nicholas", "eric",
    "jonathan", "stephen", "larry", "justin", "scott", "brandon", "benjamin", "samuel",
    "frank", "mary", "patricia", "jennifer", "linda", "elizabeth", "barbara", "susan",
    "jessica", "sarah", "karen", "nancy", "lisa", "betty", "helen", "sandra", "donna",
    "carol", "ruth", "sharon", "michelle", "laura", "sarah", "kimberly", "deborah",
    "dorothy", "lisa", "nancy", "karen", "betty", "helen", "sandra", "donna", "carol",
    "ruth", "sharon", "michelle", "laura", "emily", "kimberly", "deborah", "dorothy",
    "amy", "angela", "ashley", "brenda", "emma", "olivia", "cynthia", "marie",
)

_KEYBOARD_PATTERNS: tuple[str, ...] = (
    "qwerty", "qwertyui", "qwertyuiop", "asdf", "asdfgh", "asdfghjk", "asdfghjkl",
    "zxcv", "zxcvbn", "zxcvbnm", "1234", "12345", "123456", "1234567", "12345678",
    "123456789", "1234567890", "abcd", "abcde", "abcdef", "abcdefg", "abcdefgh",
    "abcdefghi", "abcdefghij", "poiuy", "lkjhg", "mnbvc", "qazwsx", "wsxedc",
    "edcrfv", "rfvtgb", "tgbyhn", "yhnujm", "ujmik", "plokij", "okijuh", "ijuhyg",
)

_COMMON_YEARS: tuple[str, ...] = tuple(str(year) for year in range(1970, 2020))

# Membership sets; the tuples above keep the published order and counts.
_PASSWORD_SET = frozenset(_COMMON_PASSWORDS)
_WORD_SET = frozenset(_COMMON_WORDS)
_NAME_SET = frozenset(_COMMON_NAMES)
_KEYBOARD_SET = frozenset(_KEYBOARD_PATTERNS)
_YEAR_SET = frozenset(_COMMON_YEARS)

_LONG_WORDS: tuple[str, ...] = tuple(w for w in _COMMON_WORDS if len(w) >= 4)
_LONG_NAMES: tuple[str, ...] = tuple(n for n in _COMMON_NAMES if len(n) >= 4)

_LEET_TABLE: dict[str, str] = {
    "@": "a", "4": "a",
    "3": "e",
    "1": "i", "!": "i",
    "0": "o",
    "5": "s",
    "7": "t",
}

_DIGITS_RE = re.compile(r"[0-9]")
_YEAR_RE = re.compile(r"(?:19|20)[0-9]{2}")

# Exact-match categories in precedence order with the score cap each sets.
_EXACT_CHECKS: tuple[tuple[str, frozenset[str], int], ...] = (
    ("common-passwords", _PASSWORD_SET, 5),
    ("dictionary-words", _WORD_SET, 15),
    ("names", _NAME_SET, 20),
    ("keyboard-patterns", _KEYBOARD_SET, 10),
    ("years", _YEAR_SET, 25),
)

_MULTI_MATCH_PENALTY = 10
_SCORE_FLOOR = 5

DictionaryKind = Literal["passwords", "words", "names", "patterns", "years"]

_KIND_SETS: dict[str, frozenset[str]] = {
    "passwords": _PASSWORD_SET,
    "words": _WORD_SET,
    "names": _NAME_SET,
    "patterns": _KEYBOARD_SET,
    "years": _YEAR_SET,
}


class _OrderedSet:
    """Insertion-ordered collection that ignores repeated inserts."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def add(self, item: str) -> None:
        if item not in self._items:
            self._items.append(item)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[str]:
        return list(self._items)


def deleet(text: str) -> str:
    """Undo common l33t substitutions character by character."""
    return "".join(_LEET_TABLE.get(ch, ch) for ch in text)


class DictionaryEngine:
    """Word-list attack simulation.

    Usage::

        result = DictionaryEngine().check("P@ssword")
        result.dictionary_type  # ['password-variations']
    """

    def check(self, password: str) -> DictionaryAnalysis:
        """Run every dictionary check against *password*."""
        lower = password.lower()
        matched = _OrderedSet()
        types = _OrderedSet()
        score = 100

        for category, wordlist, cap in _EXACT_CHECKS:
            candidate = password if category == "years" else lower
            if candidate in wordlist:
                matched.add(password)
                types.add(category)
                score = min(score, cap)

        self._check_variations(password, lower, matched, types)
        self._check_containment(password, lower, matched, types)

        if len(matched) > 1:
            score = max(_SCORE_FLOOR, score - _MULTI_MATCH_PENALTY)

        return DictionaryAnalysis(
            is_in_dictionary=len(matched) > 0,
            dictionary_type=types.to_list(),
            strength=self.strength_for(score),
            matched_words=matched.to_list(),
            score=score,
        )

    @staticmethod
    def strength_for(score: int) -> DictionaryStrength:
        """Map a dictionary score onto its strength label."""
        if score <= 15:
            return DictionaryStrength.VERY_WEAK
        if score <= 35:
            return DictionaryStrength.WEAK
        return DictionaryStrength.MODERATE

    @staticmethod
    def _check_variations(
        password: str,
        lower: str,
        matched: _OrderedSet,
        types: _OrderedSet,
    ) -> None:
        transformed = deleet(lower)
        if transformed in _PASSWORD_SET and transformed not in matched:
            matched.add(password)
            types.add("password-variations")
        if transformed in _WORD_SET and transformed not in matched:
            matched.add(password)
            types.add("word-variations")

        no_digits = _DIGITS_RE.sub("", lower)
        if len(no_digits) > 2:
            if no_digits in _WORD_SET:
                matched.add(password)
                types.add("word-with-numbers")
            if no_digits in _NAME_SET:
                matched.add(password)
                types.add("name-with-numbers")

        if lower[::-1] in _WORD_SET:
            matched.add(password)
            types.add("reversed-words")

    @staticmethod
    def _check_containment(
        password: str,
        lower: str,
        matched: _OrderedSet,
        types: _OrderedSet,
    ) -> None:
        for word in _LONG_WORDS:
            if word in lower:
                matched.add(word)
                types.add("contains-dictionary-word")

        for name in _LONG_NAMES:
            if name in lower:
                matched.add(name)
                types.add("contains-name")

        years = _YEAR_RE.findall(password)
        for year in years:
            matched.add(year)
        if years:
            types.add("contains-year")

    # ------------------------------------------------------------------ #
    #  Reference helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def statistics() -> DictionaryStatistics:
        """Entry counts of the bundled lists."""
        return DictionaryStatistics(
            total_passwords=len(_COMMON_PASSWORDS),
            total_words=len(_COMMON_WORDS),
            total_names=len(_COMMON_NAMES),
            total_patterns=len(_KEYBOARD_PATTERNS),
            total_years=len(_COMMON_YEARS),
        )

    @staticmethod
    def check_specific(password: str, kind: DictionaryKind) -> bool:
        """Exact-match *password* against a single list.

        Years are matched as given; every other list case-insensitively.
        Unknown kinds return ``False``.
        """
        wordlist = _KIND_SETS.get(kind)
        if wordlist is None:
            return False
        candidate = password if kind == "years" else password.lower()
        return candidate in wordlist
