"""
Entropy Calculator
===================

Four entropy estimates for a password, all in bits:

1. Charset entropy: ``log2(charset_size) * length``.
2. Shannon entropy: per-symbol frequency entropy ``H`` times the length,
   i.e. the total for an i.i.d. source with the observed frequencies.
3. Minimum entropy: ``log2(unique_chars) * length``.
4. Pattern-reduced entropy: charset entropy over an *effective* length
   shortened by every detected pattern, minus a fixed per-category
   penalty, never below ``log2(unique_chars)``.

Values are rounded to two decimal places. The rounded pattern-reduced
figure is the one passed on to scoring.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-63-2 (2013), Appendix A: Estimating Password Entropy.
"""

from __future__ import annotations

from typing import Sequence

from passshield.analyzers.composition import CompositionScanner
from passshield.core.models import (
    Composition,
    EntropyDetails,
    PatternCategory,
    PatternMatch,
)
from shared.math_utils import safe_log2, shannon_entropy

# Per category: (share of the token removed from the effective length,
# flat bit penalty).
_PATTERN_REDUCTIONS: dict[PatternCategory, tuple[float, float]] = {
    PatternCategory.DICTIONARY: (0.8, 20.0),
    PatternCategory.SPATIAL: (0.6, 10.0),
    PatternCategory.SEQUENCE: (0.5, 8.0),
    PatternCategory.REPEAT: (0.7, 15.0),
    PatternCategory.DATE: (0.6, 12.0),
}

_MIN_EFFECTIVE_SHARE = 0.2


class EntropyCalculator:
    """Computes :class:`EntropyDetails` from composition and patterns."""

    def calculate(
        self,
        password: str,
        composition: Composition,
        patterns: Sequence[PatternMatch],
    ) -> EntropyDetails:
        if not password:
            return EntropyDetails()

        length = len(password)
        bits_per_char = safe_log2(CompositionScanner.charset_size(composition))
        unique = len(set(password))

        charset_entropy = bits_per_char * length
        total_shannon = shannon_entropy(password) * length
        min_entropy = safe_log2(unique) * length

        effective_length = float(length)
        reduction = 0.0
        for match in patterns:
            share, penalty = _PATTERN_REDUCTIONS[match.pattern]
            effective_length -= len(match.token) * share
            reduction += penalty
        effective_length = max(effective_length, length * _MIN_EFFECTIVE_SHARE)

        pattern_reduced = max(
            bits_per_char * effective_length - reduction,
            safe_log2(unique),
        )

        return EntropyDetails(
            shannon_entropy=round(total_shannon, 2),
            min_entropy=round(min_entropy, 2),
            charset_entropy=round(charset_entropy, 2),
            pattern_reduced_entropy=round(pattern_reduced, 2),
            effective_length=round(effective_length, 2),
            unique_char_count=unique,
        )
