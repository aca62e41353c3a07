"""
Scorer
=======

Weighted 0-100 score combining length, character variety, adjusted
entropy, pattern and dictionary penalties, and dataset adjustments.

The final step raises the score to ``floor(better_than / 10)``. This can
lift a password past every earlier penalty; it is kept so scores match
the established engine.
"""

from __future__ import annotations

import math
from typing import Sequence

from passshield.core.models import (
    Composition,
    DatasetInsights,
    DictionaryAnalysis,
    PasswordStrength,
    PatternCategory,
    PatternMatch,
)

_PATTERN_PENALTIES: dict[PatternCategory, int] = {
    PatternCategory.DICTIONARY: 30,
    PatternCategory.SPATIAL: 15,
    PatternCategory.SEQUENCE: 10,
    PatternCategory.REPEAT: 10,
    PatternCategory.DATE: 20,
}

# First category present wins.
_DICTIONARY_PENALTIES: tuple[tuple[str, int], ...] = (
    ("common-passwords", 60),
    ("dictionary-words", 40),
    ("names", 35),
    ("keyboard-patterns", 50),
    ("years", 30),
)

_MULTI_WORD_PENALTY = 15

_STRENGTH_BANDS: tuple[tuple[float, PasswordStrength], ...] = (
    (20, PasswordStrength.VERY_WEAK),
    (40, PasswordStrength.WEAK),
    (60, PasswordStrength.FAIR),
    (80, PasswordStrength.GOOD),
)


class Scorer:
    """Composite password score.

    Usage::

        score = Scorer.score(password, composition, patterns, entropy,
                             dictionary, dataset)
        Scorer.strength(score)  # PasswordStrength.GOOD
    """

    @staticmethod
    def score(
        password: str,
        composition: Composition,
        patterns: Sequence[PatternMatch],
        entropy: float,
        dictionary: DictionaryAnalysis,
        dataset: DatasetInsights,
    ) -> float:
        """Score *password* on a 0-100 scale, rounded to two decimals."""
        return round(
            Scorer.raw_score(password, composition, patterns, entropy, dictionary, dataset), 2
        )

    @staticmethod
    def raw_score(
        password: str,
        composition: Composition,
        patterns: Sequence[PatternMatch],
        entropy: float,
        dictionary: DictionaryAnalysis,
        dataset: DatasetInsights,
    ) -> float:
        """Unrounded score clamped to 0-100; strength labels are taken from this."""
        length = len(password)
        score = float(min(length * 4, 40))

        if composition.lowercase > 0:
            score += 5
        if composition.uppercase > 0:
            score += 5
        if composition.digits > 0:
            score += 5
        if composition.symbols > 0:
            score += 10

        for threshold in (8, 12, 16):
            if length >= threshold:
                score += 10

        score += min(entropy / 2, 30)

        for match in patterns:
            score -= _PATTERN_PENALTIES[match.pattern]

        if dictionary.is_in_dictionary:
            for category, penalty in _DICTIONARY_PENALTIES:
                if category in dictionary.dictionary_type:
                    score -= penalty
                    break
            if len(dictionary.matched_words) > 1:
                score -= _MULTI_WORD_PENALTY
            score = min(score, dictionary.score)

        if dataset.predictability_index > 60:
            score -= 25
        elif dataset.predictability_index > 40:
            score -= 15

        if dataset.similarity_score < 30:
            score -= 20
        elif dataset.similarity_score < 50:
            score -= 10

        if dataset.uniqueness_score > 70:
            score += 10

        score = max(score, math.floor(dataset.dataset_comparison.better_than / 10))
        return min(100.0, max(0.0, score))

    @staticmethod
    def strength(score: float) -> PasswordStrength:
        """Five-level label: <20, <40, <60, <80, then strong."""
        for upper, label in _STRENGTH_BANDS:
            if score < upper:
                return label
        return PasswordStrength.STRONG
