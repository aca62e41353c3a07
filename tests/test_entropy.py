import math

import pytest

from passshield.analyzers.composition import CompositionScanner
from passshield.analyzers.entropy import EntropyCalculator
from passshield.analyzers.patterns import PatternDetector
from passshield.core.models import EntropyDetails


def details_for(password, with_patterns=True):
    composition = CompositionScanner.scan(password)
    patterns = PatternDetector().detect(password) if with_patterns else []
    return EntropyCalculator().calculate(password, composition, patterns)


def test_empty_password_is_all_zero():
    assert details_for("") == EntropyDetails()


def test_estimates_without_patterns():
    details = details_for("xkq", with_patterns=False)
    assert details.charset_entropy == round(math.log2(26) * 3, 2)
    assert details.shannon_entropy == round(math.log2(3) * 3, 2)
    assert details.min_entropy == details.shannon_entropy
    assert details.pattern_reduced_entropy == details.charset_entropy
    assert details.effective_length == 3
    assert details.unique_char_count == 3


def test_constant_password_has_no_shannon_entropy():
    details = details_for("zzzz", with_patterns=False)
    assert details.shannon_entropy == 0.0
    assert details.min_entropy == 0.0
    assert details.charset_entropy == pytest.approx(18.8, abs=0.01)


def test_patterns_reduce_to_floor():
    # Two alphabetic runs consume the whole password.
    details = details_for("abc")
    assert details.effective_length == 0.6
    assert details.pattern_reduced_entropy == round(math.log2(3), 2)


def test_pattern_reduction_never_exceeds_charset():
    for password in ("qwerty2019", "aaaa1111", "Password123", "Tr0ub4dor&3xyz9Q!"):
        details = details_for(password)
        assert details.pattern_reduced_entropy <= details.charset_entropy
        assert details.effective_length >= len(password) * 0.2 - 1e-9
