import math

from passshield.analyzers.patterns import PatternDetector
from passshield.core.models import PatternCategory


def categories(password):
    return [m.pattern for m in PatternDetector().detect(password)]


def test_spatial_then_date():
    matches = PatternDetector().detect("qwerty-2019")
    assert [m.pattern for m in matches] == [PatternCategory.SPATIAL, PatternCategory.DATE]
    spatial, date = matches
    assert (spatial.token, spatial.i, spatial.j) == ("qwerty", 0, 5)
    assert (date.token, date.i, date.j) == ("2019", 7, 10)
    assert date.cardinality == 365


def test_whole_password_dictionary_match_keeps_case():
    matches = PatternDetector().detect("Password")
    assert matches[0].pattern is PatternCategory.DICTIONARY
    assert matches[0].token == "Password"
    assert (matches[0].i, matches[0].j) == (0, 7)
    assert matches[0].entropy == 0.0


def test_alphabetic_runs_reported_for_both_alphabets():
    matches = PatternDetector().detect("ABC")
    assert [m.pattern for m in matches] == [PatternCategory.SEQUENCE] * 2
    assert all(m.token == "ABC" for m in matches)
    assert all(m.entropy == math.log2(3) for m in matches)


def test_repeats():
    matches = PatternDetector().detect("aaaa1111")
    assert [(m.token, m.i, m.j) for m in matches] == [("aaaa", 0, 3), ("1111", 4, 7)]
    assert all(m.pattern is PatternCategory.REPEAT for m in matches)
    assert all(m.cardinality == 1 for m in matches)


def test_calendar_dates():
    matches = PatternDetector().detect("12/05/1990")
    assert [m.token for m in matches] == ["1990", "12/05/1990"]
    assert all(m.pattern is PatternCategory.DATE for m in matches)


def test_no_patterns():
    assert PatternDetector().detect("") == []
    assert categories("Tq8#mZ") == []


def test_tokens_match_their_spans():
    for password in ("123456", "xXabc111Qwerty", "Zxcv2001!", "🔥🔥🔥"):
        for match in PatternDetector().detect(password):
            assert 0 <= match.i <= match.j < len(password)
            assert password[match.i:match.j + 1] == match.token
