"""
Dataset Insight Engine
=======================

Compares a password with summary statistics of a large (simulated) breach
corpus of ten million passwords. Nothing is looked up remotely; every
score is derived from the static reference table below and eight ordered
transformation regexes.

Scores produced:

- similarity     -- 100 minus how much the password resembles the corpus
                    (top-10 membership, length share,
                    lowercase-only share).
- uniqueness     -- length, character-class variety and rare punctuation.
- predictability -- fixed penalties for common words, sequences, repeats,
                    years and trailing digits or symbols.

A decision ladder then places the password in a percentile bucket and the
first matching transformation family yields pattern-specific advice.

References:
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
    - Ur, B. et al. (2015). Measuring Real-World Accuracies and Biases
      in Modeling Password Guessability. USENIX Security.
"""

from __future__ import annotations

import re

from passshield.core.models import (
    CharacterSetUsage,
    ComplexityDistribution,
    DatasetComparison,
    DatasetInsights,
    DatasetRank,
    DatasetStats,
    LengthFrequency,
    PasswordFrequency,
    PatternAnalysis,
    PatternFrequency,
)


# ===================================================================== #
#  Reference Corpus Statistics
# ===================================================================== #

_DATASET_STATS = DatasetStats(
    total_passwords=10_000_000,
    unique_passwords=6_847_293,
    average_length=8.2,
    common_patterns=[
        PatternFrequency(pattern="word+digits", count=2_847_352, percentage=28.47),
        PatternFrequency(pattern="digits_only", count=1_632_847, percentage=16.33),
        PatternFrequency(pattern="word_only", count=1_284_736, percentage=12.85),
        PatternFrequency(pattern="keyboard_pattern", count=847_362, percentage=8.47),
        PatternFrequency(pattern="name+digits", count=726_384, percentage=7.26),
        PatternFrequency(pattern="repeated_chars", count=584_736, percentage=5.85),
        PatternFrequency(pattern="alternating_case", count=438_592, percentage=4.39),
        PatternFrequency(pattern="substitution_cipher", count=375_849, percentage=3.76),
    ],
    length_distribution=[
        LengthFrequency(length=4, count=125_847, percentage=1.26),
        LengthFrequency(length=5, count=263_847, percentage=2.64),
        LengthFrequency(length=6, count=1_847_352, percentage=18.47),
        LengthFrequency(length=7, count=1_584_736, percentage=15.85),
        LengthFrequency(length=8, count=2_847_361, percentage=28.47),
        LengthFrequency(length=9, count=1_274_859, percentage=12.75),
        LengthFrequency(length=10, count=947_382, percentage=9.47),
        LengthFrequency(length=11, count=584_736, percentage=5.85),
        LengthFrequency(length=12, count=347_291, percentage=3.47),
        LengthFrequency(length=13, count=147_382, percentage=1.47),
        LengthFrequency(length=14, count=28_495, percentage=0.28),
        LengthFrequency(length=15, count=12_847, percentage=0.13),
    ],
    character_set_usage=CharacterSetUsage(
        lowercase=4_500_000,
        uppercase=800_000,
        digits=2_800_000,
        symbols=900_000,
        mixed=1_000_000,
    ),
    complexity_analysis=ComplexityDistribution(
        very_weak=3_200_000,
        weak=2_800_000,
        fair=2_400_000,
        good=1_200_000,
        strong=400_000,
    ),
    top_passwords=[
        PasswordFrequency(password="123456", count=234_875, percentage=2.35),
        PasswordFrequency(password="password", count=187_394, percentage=1.87),
        PasswordFrequency(password="123456789", count=156_847, percentage=1.57),
        PasswordFrequency(password="qwerty", count=134_758, percentage=1.35),
        PasswordFrequency(password="abc123", count=98_456, percentage=0.98),
        PasswordFrequency(password="12345678", count=89_374, percentage=0.89),
        PasswordFrequency(password="password123", count=76_384, percentage=0.76),
        PasswordFrequency(password="admin", count=65_847, percentage=0.66),
        PasswordFrequency(password="letmein", count=54_738, percentage=0.55),
        PasswordFrequency(password="welcome", count=47_582, percentage=0.48),
    ],
)

_TOP_PASSWORDS: dict[str, float] = {
    entry.password: entry.percentage for entry in _DATASET_STATS.top_passwords
}
_LENGTH_PERCENTAGES: dict[int, float] = {
    entry.length: entry.percentage for entry in _DATASET_STATS.length_distribution
}
_LOWERCASE_ONLY_SHARE = (
    _DATASET_STATS.character_set_usage.lowercase / _DATASET_STATS.total_passwords * 100
)


# ===================================================================== #
#  Transformation Families
# ===================================================================== #

# Ordered; the first match names the pattern family.
_TRANSFORMATIONS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("leet_speak", re.compile(r"[4@]|[3e]|[1!i]|[0o]|[5s]|[7t]", re.IGNORECASE | re.ASCII)),
    ("word_number", re.compile(r"\A[a-zA-Z]+[0-9]+\Z")),
    ("number_word", re.compile(r"\A[0-9]+[a-zA-Z]+\Z")),
    ("word_symbol", re.compile(r"\A[a-zA-Z]+[!@#$%^&*]+\Z")),
    ("keyboard_walk", re.compile(r"qwe|asd|zxc|123|456|789|qaz|wsx|edc", re.IGNORECASE)),
    ("repeated_pattern", re.compile(r"(.{2,})\1+")),
    ("year_pattern", re.compile(r"19[0-9]{2}|20[0-9]{2}")),
    ("common_substitution", re.compile(
        r"[@4][a-z]|[3][a-z]|[0][a-z]|[1!][a-z]|[5][a-z]|[7][a-z]",
        re.IGNORECASE | re.ASCII,
    )),
)

_FAMILY_VARIATIONS: dict[str, tuple[str, ...]] = {
    "word_number": (
        "Try using random words instead of dictionary words",
        "Consider using symbols between words and numbers",
    ),
    "leet_speak": (
        "Simple substitutions are easily cracked",
        "Use completely random characters instead of substitutions",
    ),
    "keyboard_walk": (
        "Keyboard patterns are highly predictable",
        "Use random character combinations",
    ),
    "year_pattern": (
        "Avoid personal dates and years",
        "Use random numbers instead of meaningful dates",
    ),
}

_NO_PATTERN_MESSAGE = "Great! Your password doesn't follow common predictable patterns"


# ===================================================================== #
#  Predictability and Character Classes
# ===================================================================== #

_PREDICTABLE_WORDS: tuple[str, ...] = (
    "password", "admin", "user", "login", "welcome", "secret",
)

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_RARE_PUNCT_RE = re.compile(r"[{}\[\]\\|;:'\"<>,.?/~`]")

_SEQUENTIAL_RE = re.compile(r"123|abc|qwe|asd|zxc", re.IGNORECASE)
_REPEATED_CHAR_RE = re.compile(r"(.)\1{2,}")
_YEAR_RE = re.compile(r"19[0-9]{2}|20[0-9]{2}")
_COMMON_ENDING_RE = re.compile(r"(?:[0-9]{1,4}|[!@#$%])\Z")

_WORD_PENALTY = 30
_SEQUENTIAL_PENALTY = 25
_REPEAT_PENALTY = 20
_YEAR_PENALTY = 15
_ENDING_PENALTY = 10


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def _class_flags(password: str) -> tuple[bool, bool, bool, bool]:
    return (
        bool(_LOWER_RE.search(password)),
        bool(_UPPER_RE.search(password)),
        bool(_DIGIT_RE.search(password)),
        bool(_NON_ALNUM_RE.search(password)),
    )


class DatasetInsightEngine:
    """Corpus-statistics comparison.

    Usage::

        insights = DatasetInsightEngine().analyze("Summer2019!")
        insights.dataset_comparison.rank  # DatasetRank.TOP_10
    """

    def analyze(self, password: str) -> DatasetInsights:
        """Produce every dataset insight for *password*."""
        similarity = self.similarity_score(password)
        return DatasetInsights(
            similarity_score=similarity,
            uniqueness_score=self.uniqueness_score(password),
            predictability_index=self.predictability_index(password),
            dataset_comparison=self.compare(password, similarity),
            pattern_analysis=self.pattern_analysis(password),
        )

    # ------------------------------------------------------------------ #
    #  Scores
    # ------------------------------------------------------------------ #

    @staticmethod
    def similarity_score(password: str) -> float:
        """0-100; high means unlike the common passwords in the corpus."""
        top_share = _TOP_PASSWORDS.get(password.lower())
        if top_share is not None:
            return round(max(5.0, 100 - top_share * 10), 2)

        # Transformation families name no corpus pattern and add nothing here.
        commonality = _LENGTH_PERCENTAGES.get(len(password), 0.0)

        has_lower, has_upper, has_digit, has_symbol = _class_flags(password)
        if has_lower and not (has_upper or has_digit or has_symbol):
            commonality += _LOWERCASE_ONLY_SHARE

        return round(_clamp(100 - commonality), 2)

    @staticmethod
    def uniqueness_score(password: str) -> float:
        """0-100; rewards length, class variety and rare punctuation."""
        score = 50.0
        length = len(password)
        if length >= 12:
            score += 20
        elif length >= 10:
            score += 10
        elif length <= 6:
            score -= 20

        score += 8 * sum(_class_flags(password))
        score -= 5 * sum(1 for _, regex in _TRANSFORMATIONS if regex.search(password))

        if _RARE_PUNCT_RE.search(password):
            score += 15
        return _clamp(score)

    @staticmethod
    def predictability_index(password: str) -> float:
        """0-100; accumulated penalties for guessable constructions."""
        lower = password.lower()
        points = 0.0
        if any(word in lower for word in _PREDICTABLE_WORDS):
            points += _WORD_PENALTY
        if _SEQUENTIAL_RE.search(password):
            points += _SEQUENTIAL_PENALTY
        if _REPEATED_CHAR_RE.search(password):
            points += _REPEAT_PENALTY
        if _YEAR_RE.search(password):
            points += _YEAR_PENALTY
        if _COMMON_ENDING_RE.search(password):
            points += _ENDING_PENALTY
        return _clamp(points)

    # ------------------------------------------------------------------ #
    #  Comparison ladder
    # ------------------------------------------------------------------ #

    @staticmethod
    def compare(password: str, similarity: float) -> DatasetComparison:
        """Place *password* in a percentile bucket of the corpus."""
        length = len(password)
        has_variety = all(_class_flags(password))

        if password.lower() in _TOP_PASSWORDS:
            return DatasetComparison(
                better_than=5,
                rank=DatasetRank.BOTTOM_50,
                recommendation=(
                    "This password is extremely common. "
                    "Consider using a completely different approach."
                ),
            )
        if length >= 14 and has_variety and similarity > 70:
            return DatasetComparison(
                better_than=95,
                rank=DatasetRank.TOP_1,
                recommendation=(
                    "Excellent! This password is stronger than 95% of "
                    "passwords in our dataset."
                ),
            )
        if length >= 12 and has_variety and similarity > 60:
            return DatasetComparison(
                better_than=85,
                rank=DatasetRank.TOP_5,
                recommendation=(
                    "Very good! This password outperforms most passwords "
                    "in our dataset."
                ),
            )
        if length >= 10 and similarity > 50:
            return DatasetComparison(
                better_than=70,
                rank=DatasetRank.TOP_10,
                recommendation=(
                    "Good password strength. Consider adding more character "
                    "variety for even better security."
                ),
            )
        if length >= 8 and similarity > 30:
            return DatasetComparison(
                better_than=50,
                rank=DatasetRank.TOP_25,
                recommendation=(
                    "Average password strength. Increasing length and "
                    "complexity would improve security significantly."
                ),
            )
        return DatasetComparison(
            better_than=25,
            rank=DatasetRank.BOTTOM_50,
            recommendation=(
                "Below average password strength. Consider using longer "
                "passwords with mixed character types."
            ),
        )

    @staticmethod
    def pattern_analysis(password: str) -> PatternAnalysis:
        """Name the first transformation family *password* follows."""
        for name, regex in _TRANSFORMATIONS:
            if regex.search(password):
                return PatternAnalysis(
                    follows_common_pattern=True,
                    pattern_type=name.replace("_", " ", 1),
                    variations=list(_FAMILY_VARIATIONS.get(name, ())),
                )
        return PatternAnalysis(variations=[_NO_PATTERN_MESSAGE])

    # ------------------------------------------------------------------ #
    #  Reference helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def statistics() -> DatasetStats:
        """A copy of the reference corpus statistics."""
        return _DATASET_STATS.model_copy(deep=True)

    @staticmethod
    def recommendations(insights: DatasetInsights) -> list[str]:
        """Plain-language advice derived from *insights*, without repeats."""
        advice: list[str] = []
        if insights.predictability_index > 50:
            advice.append(
                "Your password follows predictable patterns that attackers commonly exploit"
            )
        if insights.uniqueness_score < 30:
            advice.append("Consider using more unique character combinations")
        if insights.similarity_score < 40:
            advice.append("Your password is too similar to commonly used passwords")
        if insights.dataset_comparison.rank is DatasetRank.BOTTOM_50:
            advice.append("This password would be cracked quickly in a real attack scenario")
        advice.append(insights.dataset_comparison.recommendation)
        return list(dict.fromkeys(advice))
