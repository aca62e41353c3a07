from passshield.analyzers.dictionary import DictionaryEngine, deleet
from passshield.core.models import DictionaryStrength


def test_common_password_and_keyboard_pattern():
    result = DictionaryEngine().check("123456")
    assert result.is_in_dictionary
    assert result.dictionary_type == ["common-passwords", "keyboard-patterns"]
    assert result.matched_words == ["123456"]
    assert result.score == 5
    assert result.strength is DictionaryStrength.VERY_WEAK


def test_leet_variation():
    result = DictionaryEngine().check("P@ssword")
    assert result.dictionary_type == ["password-variations"]
    assert result.matched_words == ["P@ssword"]
    assert result.score == 100
    assert result.strength is DictionaryStrength.MODERATE


def test_capitalised_common_password_is_also_a_variation():
    # The variation check compares against the stored token, which keeps its case.
    result = DictionaryEngine().check("Hello")
    assert result.dictionary_type == ["common-passwords", "password-variations"]
    assert result.matched_words == ["Hello"]
    assert result.score == 5


def test_lowercase_common_password_is_not_a_variation():
    result = DictionaryEngine().check("hello")
    assert result.dictionary_type == ["common-passwords"]
    assert result.matched_words == ["hello"]


def test_exact_word_without_digits_still_counts_as_word_with_numbers():
    result = DictionaryEngine().check("apple")
    assert result.dictionary_type == [
        "common-passwords",
        "dictionary-words",
        "word-with-numbers",
        "contains-dictionary-word",
    ]
    assert result.matched_words == ["apple"]
    assert result.score == 5


def test_name_with_year():
    result = DictionaryEngine().check("john1985")
    assert result.dictionary_type == ["name-with-numbers", "contains-name", "contains-year"]
    assert result.matched_words == ["john1985", "john", "1985"]
    # More than one distinct token lowers the score.
    assert result.score == 90


def test_year_only():
    result = DictionaryEngine().check("1990")
    assert result.dictionary_type == ["years", "contains-year"]
    assert result.matched_words == ["1990"]
    assert result.score == 25
    assert result.strength is DictionaryStrength.WEAK


def test_clean_password():
    result = DictionaryEngine().check("Tr0ub4dor&3xyz9Q!")
    assert not result.is_in_dictionary
    assert result.dictionary_type == []
    assert result.score == 100


def test_strength_for_boundaries():
    assert DictionaryEngine.strength_for(15) is DictionaryStrength.VERY_WEAK
    assert DictionaryEngine.strength_for(16) is DictionaryStrength.WEAK
    assert DictionaryEngine.strength_for(35) is DictionaryStrength.WEAK
    assert DictionaryEngine.strength_for(36) is DictionaryStrength.MODERATE


def test_check_specific():
    assert DictionaryEngine.check_specific("QWERTY", "patterns")
    assert DictionaryEngine.check_specific("1990", "years")
    assert DictionaryEngine.check_specific("James", "names")
    assert not DictionaryEngine.check_specific("monkey", "names")
    assert not DictionaryEngine.check_specific("monkey", "unknown")


def test_statistics():
    stats = DictionaryEngine.statistics()
    assert stats.total_years == 50
    assert stats.total_passwords > 0
    assert stats.total_words > stats.total_patterns > 0
    assert "totalYears" in stats.model_dump(by_alias=True)


def test_deleet():
    assert deleet("p@55w0rd") == "password"
    assert deleet("h3ll0!") == "helloi"
