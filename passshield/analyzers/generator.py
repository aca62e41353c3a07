"""
Password Generator
===================

Random passwords and passphrases drawn from the OS CSPRNG (:mod:`secrets`).

Each selected character class contributes at least one character, the
rest is filled from the combined pool, and the result is shuffled with
Fisher-Yates so the guaranteed characters do not sit at fixed positions.
"""

from __future__ import annotations

import math
import secrets
import string
from typing import Optional

from passshield.core.models import GeneratorOptions

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
SIMILAR_CHARS = "il1Lo0O"
AMBIGUOUS_CHARS = "{}[]()/\\'\"`~,;.<>"

_PASSPHRASE_WORDS: tuple[str, ...] = (
    "correct", "horse", "battery", "staple", "cloud", "mountain", "river", "ocean",
    "forest", "bridge", "castle", "garden", "wizard", "dragon", "knight", "magic",
    "crystal", "flame", "storm", "thunder", "lightning", "rainbow", "sunset", "sunrise",
    "silver", "golden", "diamond", "ruby", "emerald", "sapphire", "violet", "crimson",
    "azure", "amber", "ivory", "pearl", "marble", "steel", "copper", "bronze",
    "warrior", "guardian", "sentinel", "champion", "hero", "legend", "myth", "story",
    "journey", "adventure", "quest", "voyage", "expedition", "discovery", "treasure",
    "secret", "mystery", "enigma", "puzzle", "riddle", "cipher", "code", "key",
    "freedom", "liberty", "justice", "peace", "harmony", "balance", "wisdom", "truth",
    "courage", "strength", "power", "energy", "force", "spirit", "soul", "heart",
)

_STRENGTH_REFERENCE_BITS = 128


def _shuffle(chars: list[str]) -> None:
    """In-place Fisher-Yates shuffle using :func:`secrets.randbelow`."""
    for i in range(len(chars) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]


class PasswordGenerator:
    """CSPRNG-backed password and passphrase generator.

    Usage::

        gen = PasswordGenerator()
        gen.generate(GeneratorOptions(length=20, include_symbols=False))
        gen.generate_passphrase(5, separator=".")
    """

    @staticmethod
    def _filter(chars: str, options: GeneratorOptions) -> str:
        if options.exclude_similar:
            chars = "".join(c for c in chars if c not in SIMILAR_CHARS)
        if options.exclude_ambiguous:
            chars = "".join(c for c in chars if c not in AMBIGUOUS_CHARS)
        return chars

    def generate(self, options: Optional[GeneratorOptions] = None) -> str:
        """Generate a random password of exactly ``options.length`` characters.

        Raises:
            ValueError: If no character class is selected and no custom
                characters are given.
        """
        options = options or GeneratorOptions()
        selected = (
            (options.include_lowercase, LOWERCASE),
            (options.include_uppercase, UPPERCASE),
            (options.include_numbers, NUMBERS),
            (options.include_symbols, SYMBOLS),
        )

        pool = ""
        required: list[str] = []
        for enabled, chars in selected:
            if not enabled:
                continue
            chars = self._filter(chars, options)
            if chars:
                pool += chars
                required.append(secrets.choice(chars))
        pool += options.custom_characters

        if not pool:
            raise ValueError("At least one character type must be selected")

        # With fewer slots than classes, a random subset is guaranteed.
        _shuffle(required)
        chars = required[:options.length]
        chars.extend(secrets.choice(pool) for _ in range(options.length - len(chars)))
        _shuffle(chars)
        return "".join(chars)

    @staticmethod
    def generate_passphrase(word_count: int = 4, separator: str = "-") -> str:
        """Join *word_count* randomly chosen words with *separator*."""
        if word_count < 1:
            raise ValueError("word_count must be at least 1")
        return separator.join(secrets.choice(_PASSPHRASE_WORDS) for _ in range(word_count))

    @staticmethod
    def estimate_strength(options: GeneratorOptions) -> float:
        """Rough 0-100 strength of the password *options* would produce.

        ``log2(charset) * length`` normalised against 128 bits.
        """
        charset = 0
        if options.include_lowercase:
            charset += len(LOWERCASE)
        if options.include_uppercase:
            charset += len(UPPERCASE)
        if options.include_numbers:
            charset += len(NUMBERS)
        if options.include_symbols:
            charset += len(SYMBOLS)
        if options.exclude_similar:
            charset -= len(SIMILAR_CHARS)
        if options.exclude_ambiguous:
            charset -= len(AMBIGUOUS_CHARS)

        if charset <= 0:
            return 0.0
        bits = math.log2(charset) * options.length
        return min(100.0, max(0.0, bits / _STRENGTH_REFERENCE_BITS * 100))

    @staticmethod
    def passphrase_wordlist() -> tuple[str, ...]:
        return _PASSPHRASE_WORDS
