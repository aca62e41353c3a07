import pytest

from passshield.analyzers.scorer import Scorer
from passshield.core.models import (
    Composition,
    DatasetComparison,
    DatasetInsights,
    DictionaryAnalysis,
    PasswordStrength,
    PatternCategory,
    PatternMatch,
)

LONG_LOWER = "x" * 20
LONG_LOWER_COMP = Composition(length=20, lowercase=20)


def score(password=LONG_LOWER, composition=LONG_LOWER_COMP, patterns=(),
          entropy=0.0, dictionary=None, dataset=None):
    return Scorer.score(
        password,
        composition,
        list(patterns),
        entropy,
        dictionary or DictionaryAnalysis(),
        dataset or DatasetInsights(),
    )


def test_length_variety_and_entropy_terms():
    # 40 (length) + 5 (lowercase) + 30 (length bonuses) + 10 (entropy / 2)
    assert score(entropy=20.0) == 85.0


def test_entropy_contribution_is_capped():
    assert score(entropy=1000.0) == score(entropy=60.0)


def test_empty_password_floor():
    dataset = DatasetInsights(dataset_comparison=DatasetComparison(better_than=25))
    assert score("", Composition(), dataset=dataset) == 2


def test_pattern_penalties():
    repeat = PatternMatch(pattern=PatternCategory.REPEAT, token="xxx", i=0, j=2)
    date = PatternMatch(pattern=PatternCategory.DATE, token="1990", i=0, j=3)
    assert score(patterns=[repeat, date]) == 75 - 10 - 20


def test_dictionary_penalty_precedence():
    dictionary = DictionaryAnalysis(
        is_in_dictionary=True,
        dictionary_type=["keyboard-patterns", "common-passwords"],
        matched_words=["x"],
        score=100,
    )
    assert score(dictionary=dictionary) == 75 - 60

    keyboard_only = dictionary.model_copy(update={"dictionary_type": ["keyboard-patterns"]})
    assert score(dictionary=keyboard_only) == 75 - 50


def test_dictionary_score_caps_total():
    dictionary = DictionaryAnalysis(
        is_in_dictionary=True,
        dictionary_type=["contains-year"],
        matched_words=["1990", "2001"],
        score=12,
    )
    assert score(dictionary=dictionary) == 12


def test_dictionary_types_ignored_when_not_found():
    dictionary = DictionaryAnalysis(dictionary_type=["common-passwords"], score=5)
    assert score(dictionary=dictionary) == 75


def test_dataset_adjustments():
    predictable = DatasetInsights(predictability_index=61, similarity_score=45)
    assert score(dataset=predictable) == 75 - 25 - 10

    unique = DatasetInsights(uniqueness_score=71, predictability_index=41)
    assert score(dataset=unique) == 75 + 10 - 15


def test_score_is_clamped():
    assert score(entropy=60.0, dataset=DatasetInsights(uniqueness_score=90)) == 100
    assert score(patterns=[
        PatternMatch(pattern=PatternCategory.DICTIONARY, token="x", i=0, j=0),
    ] * 5) == 0


def test_strength_bands():
    assert Scorer.strength(0) is PasswordStrength.VERY_WEAK
    assert Scorer.strength(19.99) is PasswordStrength.VERY_WEAK
    assert Scorer.strength(20) is PasswordStrength.WEAK
    assert Scorer.strength(39) is PasswordStrength.WEAK
    assert Scorer.strength(39.99) is PasswordStrength.WEAK
    assert Scorer.strength(40) is PasswordStrength.FAIR
    assert Scorer.strength(59) is PasswordStrength.FAIR
    assert Scorer.strength(59.99) is PasswordStrength.FAIR
    assert Scorer.strength(60) is PasswordStrength.GOOD
    assert Scorer.strength(79) is PasswordStrength.GOOD
    assert Scorer.strength(79.99) is PasswordStrength.GOOD
    assert Scorer.strength(80) is PasswordStrength.STRONG
    assert Scorer.strength(100) is PasswordStrength.STRONG


def test_raw_score_keeps_precision():
    raw = Scorer.raw_score(
        LONG_LOWER, LONG_LOWER_COMP, [], 9.998, DictionaryAnalysis(), DatasetInsights(),
    )
    assert raw == pytest.approx(79.999)
    assert score(entropy=9.998) == 80.0
    assert Scorer.strength(raw) is PasswordStrength.GOOD
