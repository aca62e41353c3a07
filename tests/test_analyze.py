import pytest
from pydantic import ValidationError

from passshield import analyze
from passshield.analyzers.composition import code_units
from passshield.analyzers.scorer import Scorer
from passshield.core.models import (
    Composition,
    DatasetRank,
    PasswordAnalysis,
    PasswordStrength,
)

STRONG_PASSWORD = "Tr0ub4dor&3xyz9Q!"

SAMPLES = (
    "",
    "a",
    "123456",
    "password",
    "P@ssw0rd!",
    "aaaa1111",
    "Summer2019!",
    "john1985",
    "correct horse battery staple",
    "🔥🔥🔥",
    "\x00\t\n",
    STRONG_PASSWORD,
    "x" * 300,
)


def test_common_numeric_password():
    result = analyze("123456")
    assert result.strength is PasswordStrength.VERY_WEAK
    assert result.score <= 20
    assert "common-passwords" in result.dictionary_analysis.dictionary_type
    assert result.dataset_insights.dataset_comparison.better_than == 5
    assert result.dataset_insights.similarity_score == 76.5
    assert result.entropy <= 0.5


def test_common_word_password():
    result = analyze("password")
    assert result.score <= 40
    assert result.feedback.warning == (
        "This is a very common password that appears in data breaches"
    )


def test_strong_password():
    result = analyze(STRONG_PASSWORD)
    assert result.strength is PasswordStrength.STRONG
    assert result.score >= 80
    assert not result.dictionary_analysis.is_in_dictionary
    assert result.dataset_insights.dataset_comparison.rank is DatasetRank.TOP_1
    assert result.feedback.warning == ""
    assert result.feedback.suggestions[0] == "Excellent password!"


def test_seasonal_password_is_top_ten():
    result = analyze("Summer2019!")
    assert result.dataset_insights.dataset_comparison.rank is DatasetRank.TOP_10
    # No word boundary between "r" and "2", so the year is not a date token.
    assert not any(m.pattern.value == "date" for m in result.patterns)
    assert "contains-year" in result.dictionary_analysis.dictionary_type


def test_empty_password():
    result = analyze("")
    assert result.composition == Composition()
    assert result.entropy == 0
    assert result.patterns == []
    assert result.score == 2
    assert result.strength is PasswordStrength.VERY_WEAK
    assert result.feedback.warning == "Password is too short"


def test_emoji_is_measured_in_code_units():
    result = analyze("emoji\U0001F525\U0001F525\U0001F525x")
    assert result.composition.length == 12
    assert result.composition.symbols == 6
    # Surrogate pairs alternate, so three equal emoji are not a repeat run.
    assert not any(m.pattern.value == "repeat" for m in result.patterns)
    assert result.entropy_details.unique_char_count == 8


@pytest.mark.parametrize("password", SAMPLES)
def test_invariants(password):
    result = analyze(password)
    units = code_units(password)

    assert 0 <= result.score <= 100
    assert result.strength is Scorer.strength(result.score)

    comp = result.composition
    assert comp.length == len(units)
    assert comp.lowercase + comp.uppercase + comp.digits + comp.symbols + comp.spaces == comp.length

    insights = result.dataset_insights
    for value in (
        insights.similarity_score,
        insights.uniqueness_score,
        insights.predictability_index,
    ):
        assert 0 <= value <= 100

    dictionary = result.dictionary_analysis
    assert dictionary.is_in_dictionary == bool(dictionary.matched_words)
    assert len(set(dictionary.dictionary_type)) == len(dictionary.dictionary_type)
    assert len(set(dictionary.matched_words)) == len(dictionary.matched_words)
    assert 0 <= dictionary.score <= 100
    if dictionary.is_in_dictionary:
        assert result.entropy <= dictionary.score / 10

    assert result.entropy <= result.entropy_details.pattern_reduced_entropy
    assert len(set(result.feedback.suggestions)) == len(result.feedback.suggestions)

    for match in result.patterns:
        assert units[match.i:match.j + 1] == match.token


@pytest.mark.parametrize("password", SAMPLES)
def test_deterministic(password):
    assert analyze(password) == analyze(password)


def test_serialised_shape_round_trips():
    result = analyze("Summer2019!")
    dumped = result.model_dump(by_alias=True, mode="json")

    assert {"entropyDetails", "dictionaryAnalysis", "datasetInsights", "crackTime"} <= set(dumped)
    assert "isInDictionary" in dumped["dictionaryAnalysis"]
    assert "betterThan" in dumped["datasetInsights"]["datasetComparison"]
    assert "offline_fast_hashing_1e10_per_second" in dumped["crackTime"]
    assert dumped["strength"] == result.strength.value

    assert PasswordAnalysis.model_validate(dumped) == result


def test_results_are_frozen():
    result = analyze("abc")
    with pytest.raises(ValidationError):
        result.score = 100


@pytest.mark.parametrize(
    "base, extra",
    [
        ("Tq8#mZ", "Kv3&Wp7;Hx2]"),
        ("Gn4%rY", "Bw6=Dk2+Fh9'"),
    ],
)
def test_appending_same_class_characters_is_monotonic(base, extra):
    previous = analyze(base)
    for n in range(1, len(extra) + 1):
        current = analyze(base + extra[:n])
        assert current.entropy_details.charset_entropy > previous.entropy_details.charset_entropy
        assert current.score >= previous.score
        previous = current


def test_strength_is_labelled_before_rounding(monkeypatch):
    monkeypatch.setattr(Scorer, "raw_score", staticmethod(lambda *args: 79.999))
    result = analyze("anything")
    assert result.score == 80.0
    assert result.strength is PasswordStrength.GOOD
