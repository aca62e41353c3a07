import pytest

from passshield.analyzers.dataset import DatasetInsightEngine
from passshield.core.models import DatasetRank


@pytest.fixture()
def engine():
    return DatasetInsightEngine()


def test_top_password(engine):
    insights = engine.analyze("123456")
    assert insights.similarity_score == 76.5
    assert insights.uniqueness_score == 28
    assert insights.predictability_index == 35
    assert insights.dataset_comparison.better_than == 5
    assert insights.dataset_comparison.rank is DatasetRank.BOTTOM_50
    assert insights.dataset_comparison.recommendation.startswith(
        "This password is extremely common."
    )


def test_top_password_lookup_ignores_case(engine):
    assert engine.similarity_score("PASSWORD") == engine.similarity_score("password")
    assert engine.similarity_score("password") == pytest.approx(81.3)


def test_strong_password(engine):
    insights = engine.analyze("Tr0ub4dor&3xyz9Q!")
    assert insights.similarity_score == 100
    assert insights.uniqueness_score == 92
    assert insights.predictability_index == 10
    assert insights.dataset_comparison.rank is DatasetRank.TOP_1
    assert insights.dataset_comparison.better_than == 95


def test_seasonal_password(engine):
    insights = engine.analyze("Summer2019!")
    assert insights.similarity_score == 94.15
    assert insights.dataset_comparison.rank is DatasetRank.TOP_10
    assert insights.pattern_analysis.follows_common_pattern
    assert insights.pattern_analysis.pattern_type == "leet speak"


def test_no_transformation_family(engine):
    analysis = engine.pattern_analysis("Qwxy")
    assert not analysis.follows_common_pattern
    assert analysis.pattern_type is None
    assert analysis.variations == [
        "Great! Your password doesn't follow common predictable patterns"
    ]
    assert engine.similarity_score("Qwxy") == 98.74


def test_word_number_family(engine):
    analysis = engine.pattern_analysis("Bb9")
    assert analysis.pattern_type == "word number"
    assert "Try using random words instead of dictionary words" in analysis.variations


def test_predictability(engine):
    assert engine.predictability_index("password1") == 40
    assert engine.predictability_index("aaa123") == 55
    assert engine.predictability_index("Qwxy") == 0


def test_comparison_ladder(engine):
    assert engine.compare("abcdefgh", 60).rank is DatasetRank.TOP_25
    assert engine.compare("abcdefgh", 30).rank is DatasetRank.BOTTOM_50
    assert engine.compare("abcdefghij", 51).rank is DatasetRank.TOP_10
    assert engine.compare("Abcdefghij1!", 61).rank is DatasetRank.TOP_5


def test_scores_are_clamped(engine):
    for password in ("", "a", "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", "password2019!!!", "~`{}[]"):
        insights = engine.analyze(password)
        for value in (
            insights.similarity_score,
            insights.uniqueness_score,
            insights.predictability_index,
        ):
            assert 0 <= value <= 100


def test_statistics_is_a_copy():
    first = DatasetInsightEngine.statistics()
    second = DatasetInsightEngine.statistics()
    assert first == second
    assert first is not second
    assert first.total_passwords == 10_000_000
    assert first.top_passwords[0].password == "123456"
    assert len(first.length_distribution) == 12


def test_recommendations_are_unique(engine):
    advice = DatasetInsightEngine.recommendations(engine.analyze("123456"))
    assert advice == [
        "Consider using more unique character combinations",
        "This password would be cracked quickly in a real attack scenario",
        "This password is extremely common. Consider using a completely different approach.",
    ]


@pytest.mark.parametrize(
    "password, expected",
    [
        ("john1985", 71.53),
        ("monkey123", 87.25),
        ("correcthorse", 51.53),
        ("P@ssw0rd!", 87.25),
        ("Qwerty12345678901", 100),
    ],
)
def test_similarity_uses_length_and_lowercase_shares_only(engine, password, expected):
    # Transformation families never add to commonality.
    assert engine.similarity_score(password) == expected


def test_lowercase_twelve_characters_rank_top_ten(engine):
    insights = engine.analyze("correcthorse")
    assert insights.dataset_comparison.rank is DatasetRank.TOP_10
    assert insights.dataset_comparison.better_than == 70


def test_families_outside_advice_table_have_no_variations(engine):
    analysis = engine.pattern_analysis("99Bb")
    assert analysis.follows_common_pattern
    assert analysis.pattern_type == "number word"
    assert analysis.variations == []


def test_repeat_regexes_do_not_span_newlines(engine):
    assert engine.predictability_index("\n\n\n") == 0
    assert engine.predictability_index("aaa") == 20
    assert engine.pattern_analysis("\n\n\n\n").pattern_type is None
