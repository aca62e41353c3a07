"""
Feedback Generator
===================

Builds the warning line and the ordered, de-duplicated suggestion list
shown to the user.

Warning priority (first applicable wins):
    1. Shorter than 8 characters.
    2. Dictionary category: common passwords, dictionary words, names,
       keyboard patterns, years.
    3. Dataset predictability above 50.
"""

from __future__ import annotations

from typing import Sequence

from passshield.core.models import (
    Composition,
    DatasetInsights,
    DictionaryAnalysis,
    Feedback,
    PatternCategory,
    PatternMatch,
)

_MIN_LENGTH = 8

# (category, warning, suggestion), in priority order.
_DICTIONARY_FEEDBACK: tuple[tuple[str, str, str], ...] = (
    (
        "common-passwords",
        "This is a very common password that appears in data breaches",
        'Avoid common passwords like "password" or "123456"',
    ),
    (
        "dictionary-words",
        "This password contains dictionary words",
        "Avoid using dictionary words as passwords",
    ),
    (
        "names",
        "This password contains common names",
        "Avoid using names in passwords",
    ),
    (
        "keyboard-patterns",
        "This password follows a keyboard pattern",
        'Avoid keyboard patterns like "qwerty" or "asdf"',
    ),
    (
        "years",
        "This password contains predictable years",
        "Avoid using years or dates in passwords",
    ),
)

_PATTERN_SUGGESTIONS: dict[PatternCategory, str] = {
    PatternCategory.SPATIAL: 'Avoid keyboard patterns like "qwerty"',
    PatternCategory.SEQUENCE: 'Avoid sequences like "abc" or "123"',
    PatternCategory.REPEAT: "Avoid repeated characters",
    PatternCategory.DATE: "Avoid dates and years",
}

SHORT_WARNING = "Password is too short"
PREDICTABLE_WARNING = (
    "This password follows predictable patterns commonly found in data breaches"
)
EXCELLENT = "Excellent password!"
MAKE_LONGER = "Consider making it longer"


class FeedbackGenerator:
    """Turns analysis results into a warning and suggestions."""

    @staticmethod
    def generate(
        password: str,
        composition: Composition,
        patterns: Sequence[PatternMatch],
        score: float,
        dictionary: DictionaryAnalysis,
        dataset: DatasetInsights,
    ) -> Feedback:
        warning = ""
        suggestions: list[str] = []

        if len(password) < _MIN_LENGTH:
            warning = SHORT_WARNING
            suggestions.append("Use at least 8 characters")

        if dictionary.is_in_dictionary:
            for category, category_warning, suggestion in _DICTIONARY_FEEDBACK:
                if category in dictionary.dictionary_type:
                    warning = warning or category_warning
                    suggestions.append(suggestion)
                    break
            if "word-variations" in dictionary.dictionary_type:
                suggestions.append(
                    "Simple character substitutions (@ for a, 3 for e) are easily cracked"
                )
            if "word-with-numbers" in dictionary.dictionary_type:
                suggestions.append(
                    "Adding numbers to dictionary words provides little security"
                )
            if len(dictionary.matched_words) > 1:
                suggestions.append(
                    "Multiple dictionary matches make this password very predictable"
                )

        if composition.lowercase == 0:
            suggestions.append("Add lowercase letters")
        if composition.uppercase == 0:
            suggestions.append("Add uppercase letters")
        if composition.digits == 0:
            suggestions.append("Add numbers")
        if composition.symbols == 0:
            suggestions.append("Add symbols like !@#$%")

        for match in patterns:
            suggestion = _PATTERN_SUGGESTIONS.get(match.pattern)
            if suggestion:
                suggestions.append(suggestion)

        if dataset.predictability_index > 50:
            warning = warning or PREDICTABLE_WARNING
            suggestions.append("Avoid predictable patterns that attackers commonly exploit")
        if dataset.similarity_score < 40:
            suggestions.append("Your password is too similar to commonly used patterns")
        if dataset.uniqueness_score < 30:
            suggestions.append("Consider using more unique character combinations")

        suggestions.extend(dataset.pattern_analysis.variations)
        recommendation = dataset.dataset_comparison.recommendation
        if recommendation:
            suggestions.append(recommendation)

        if score >= 80:
            suggestions = [EXCELLENT, recommendation]
        elif score >= 60:
            suggestions.insert(0, MAKE_LONGER)

        return Feedback(warning=warning, suggestions=list(dict.fromkeys(suggestions)))
