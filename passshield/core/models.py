"""
PassShield Core Data Models
============================

Pydantic models for every stage of the password-analysis pipeline:
composition counts, pattern matches, dictionary and dataset findings,
entropy variants, crack-time projections, feedback, and the aggregate
:class:`PasswordAnalysis`.

Analysis results are frozen values. Attributes are snake_case in Python
and serialise with camelCase keys via ``model_dump(by_alias=True)`` so
presentation layers receive the established wire shape.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ResultModel(BaseModel):
    """Base for immutable analysis results with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class PatternCategory(str, enum.Enum):
    """Category of a weak substring found by the pattern detector."""

    DICTIONARY = "dictionary"
    SPATIAL = "spatial"
    SEQUENCE = "sequence"
    REPEAT = "repeat"
    DATE = "date"


class PasswordStrength(str, enum.Enum):
    """Five-level strength label derived from the 0-100 score."""

    VERY_WEAK = "very-weak"
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"


class DictionaryStrength(str, enum.Enum):
    """Strength label derived from the dictionary score."""

    VERY_WEAK = "very-weak"
    WEAK = "weak"
    MODERATE = "moderate"


class DatasetRank(str, enum.Enum):
    """Percentile bucket against the reference password corpus."""

    TOP_1 = "top-1%"
    TOP_5 = "top-5%"
    TOP_10 = "top-10%"
    TOP_25 = "top-25%"
    BOTTOM_50 = "bottom-50%"


# ===================================================================== #
#  Pipeline Stage Models
# ===================================================================== #


class Composition(_ResultModel):
    """Character-class counts over the password.

    The classes are mutually exclusive, so the five counts sum to
    ``length``.
    """

    length: int = 0
    lowercase: int = 0
    uppercase: int = 0
    digits: int = 0
    symbols: int = 0
    spaces: int = 0


class PatternMatch(_ResultModel):
    """A weak substring found in the password.

    Attributes:
        pattern: Category of the match.
        token: Matched text, taken from the input with case preserved.
        i: Inclusive start index.
        j: Inclusive end index.
        entropy: Diagnostic entropy of the token in bits.
        cardinality: Size of the space the token was drawn from.
    """

    pattern: PatternCategory
    token: str
    i: int
    j: int
    entropy: float = 0.0
    cardinality: int = 0


class DictionaryAnalysis(_ResultModel):
    """Outcome of the word-list checks.

    ``dictionary_type`` and ``matched_words`` hold no duplicates and keep
    first-insertion order. ``score`` runs 0-100, lower is weaker.
    """

    is_in_dictionary: bool = False
    dictionary_type: list[str] = Field(default_factory=list)
    strength: DictionaryStrength = DictionaryStrength.MODERATE
    matched_words: list[str] = Field(default_factory=list)
    score: int = 100


class DatasetComparison(_ResultModel):
    """Percentile placement against the reference corpus."""

    better_than: int = 0
    rank: DatasetRank = DatasetRank.BOTTOM_50
    recommendation: str = ""


class PatternAnalysis(_ResultModel):
    """First transformation family the password follows, if any."""

    follows_common_pattern: bool = False
    pattern_type: Optional[str] = None
    variations: list[str] = Field(default_factory=list)


class DatasetInsights(_ResultModel):
    """Similarity, uniqueness and predictability against corpus statistics.

    All three scores are clamped to 0-100. ``similarity_score`` is high
    when the password is *unlike* common passwords.
    """

    similarity_score: float = 100.0
    uniqueness_score: float = 50.0
    predictability_index: float = 0.0
    dataset_comparison: DatasetComparison = Field(default_factory=DatasetComparison)
    pattern_analysis: PatternAnalysis = Field(default_factory=PatternAnalysis)


class EntropyDetails(_ResultModel):
    """Four entropy estimates plus the values they were derived from.

    ``shannon_entropy`` is the per-symbol Shannon entropy multiplied by the
    password length (total bits under an i.i.d. frequency model).
    """

    shannon_entropy: float = 0.0
    min_entropy: float = 0.0
    charset_entropy: float = 0.0
    pattern_reduced_entropy: float = 0.0
    effective_length: float = 0.0
    unique_char_count: int = 0


class CrackTime(BaseModel):
    """Formatted average-case crack times under four attacker models."""

    model_config = ConfigDict(frozen=True)

    offline_slow_hashing_1e4_per_second: str = "instant"
    offline_fast_hashing_1e10_per_second: str = "instant"
    online_throttling_100_per_hour: str = "instant"
    online_no_throttling_10_per_second: str = "instant"


class Feedback(_ResultModel):
    """Warning line and ordered improvement suggestions."""

    warning: str = ""
    suggestions: list[str] = Field(default_factory=list)


class PasswordAnalysis(_ResultModel):
    """Complete output of one ``analyze(password)`` call.

    Attributes:
        score: Composite score, 0-100.
        entropy: Adjusted entropy in bits (pattern-reduced, then capped by
            dictionary findings and scaled by dataset predictability).
        entropy_details: The four raw entropy estimates.
        dictionary_analysis: Word-list findings.
        dataset_insights: Corpus-statistics findings.
        crack_time: Formatted crack-time projections.
        feedback: Warning and suggestions.
        composition: Character-class counts.
        patterns: Detected weak substrings, in detection order.
        strength: Five-level label for ``score``.
    """

    score: float = 0.0
    entropy: float = 0.0
    entropy_details: EntropyDetails = Field(default_factory=EntropyDetails)
    dictionary_analysis: DictionaryAnalysis = Field(default_factory=DictionaryAnalysis)
    dataset_insights: DatasetInsights = Field(default_factory=DatasetInsights)
    crack_time: CrackTime = Field(default_factory=CrackTime)
    feedback: Feedback = Field(default_factory=Feedback)
    composition: Composition = Field(default_factory=Composition)
    patterns: list[PatternMatch] = Field(default_factory=list)
    strength: PasswordStrength = PasswordStrength.VERY_WEAK


# ===================================================================== #
#  Reference Statistics Models
# ===================================================================== #


class PatternFrequency(_ResultModel):
    pattern: str
    count: int
    percentage: float


class LengthFrequency(_ResultModel):
    length: int
    count: int
    percentage: float


class PasswordFrequency(_ResultModel):
    password: str
    count: int
    percentage: float


class CharacterSetUsage(_ResultModel):
    lowercase: int
    uppercase: int
    digits: int
    symbols: int
    mixed: int


class ComplexityDistribution(_ResultModel):
    very_weak: int
    weak: int
    fair: int
    good: int
    strong: int


class DatasetStats(_ResultModel):
    """Summary statistics of the simulated reference corpus."""

    total_passwords: int
    unique_passwords: int
    average_length: float
    common_patterns: list[PatternFrequency]
    length_distribution: list[LengthFrequency]
    character_set_usage: CharacterSetUsage
    complexity_analysis: ComplexityDistribution
    top_passwords: list[PasswordFrequency]


class DictionaryStatistics(_ResultModel):
    """Entry counts of the bundled word lists."""

    total_passwords: int
    total_words: int
    total_names: int
    total_patterns: int
    total_years: int


# ===================================================================== #
#  Generator, Privacy and Advice Models
# ===================================================================== #


class GeneratorOptions(_ResultModel):
    """Options for random password generation."""

    length: int = Field(default=16, ge=1, le=1024)
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    custom_characters: str = ""


class PasswordMetadata(_ResultModel):
    """Content-free description of a password."""

    length: int
    has_uppercase: bool
    has_lowercase: bool
    has_numbers: bool
    has_symbols: bool
    has_spaces: bool
    starts_with_letter: bool
    ends_with_number: bool
    has_repeating_chars: bool
    has_keyboard_patterns: bool
    character_variety: int


class PasswordFingerprint(_ResultModel):
    """Truncated hash plus metadata; identifies without revealing."""

    hash: str
    metadata: PasswordMetadata
    timestamp: int


class AnonymousAnalytics(_ResultModel):
    """Coarse, non-identifying summary of an analysis."""

    strength_score: float
    entropy_level: int
    length_range: str
    has_symbols: bool
    has_numbers: bool
    has_uppercase: bool
    has_lowercase: bool
    dictionary_found: bool
    timestamp: int


class SecurityAdvice(_ResultModel):
    """Report-style guidance built from an analysis."""

    vulnerabilities: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    threat_analysis: str = ""
    industry_tips: list[str] = Field(default_factory=list)
