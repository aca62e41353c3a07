import pytest
from pydantic import ValidationError

from passshield.analyzers.generator import (
    LOWERCASE,
    NUMBERS,
    SIMILAR_CHARS,
    SYMBOLS,
    UPPERCASE,
    PasswordGenerator,
)
from passshield.core.models import GeneratorOptions


@pytest.fixture()
def generator():
    return PasswordGenerator()


def test_default_password_has_every_class(generator):
    for _ in range(20):
        password = generator.generate()
        assert len(password) == 16
        assert any(c in LOWERCASE for c in password)
        assert any(c in UPPERCASE for c in password)
        assert any(c in NUMBERS for c in password)
        assert any(c in SYMBOLS for c in password)


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 64, 1024])
def test_requested_length_is_honoured(generator, length):
    assert len(generator.generate(GeneratorOptions(length=length))) == length


def test_digits_only(generator):
    options = GeneratorOptions(
        length=30,
        include_lowercase=False,
        include_uppercase=False,
        include_symbols=False,
    )
    assert generator.generate(options).isdigit()


def test_exclude_similar(generator):
    options = GeneratorOptions(length=200, exclude_similar=True)
    password = generator.generate(options)
    assert not set(password) & set(SIMILAR_CHARS)


def test_custom_characters_only(generator):
    options = GeneratorOptions(
        length=25,
        include_lowercase=False,
        include_uppercase=False,
        include_numbers=False,
        include_symbols=False,
        custom_characters="xyz",
    )
    assert set(generator.generate(options)) <= {"x", "y", "z"}


def test_no_character_types(generator):
    options = GeneratorOptions(
        include_lowercase=False,
        include_uppercase=False,
        include_numbers=False,
        include_symbols=False,
    )
    with pytest.raises(ValueError, match="At least one character type must be selected"):
        generator.generate(options)


def test_length_is_validated():
    with pytest.raises(ValidationError):
        GeneratorOptions(length=0)


def test_passphrase(generator):
    words = PasswordGenerator.passphrase_wordlist()
    phrase = generator.generate_passphrase(5, separator=".")
    parts = phrase.split(".")
    assert len(parts) == 5
    assert all(part in words for part in parts)
    assert len(generator.generate_passphrase().split("-")) == 4


def test_passphrase_needs_a_word(generator):
    with pytest.raises(ValueError):
        generator.generate_passphrase(0)


def test_estimate_strength():
    assert 80 < PasswordGenerator.estimate_strength(GeneratorOptions()) < 81
    assert PasswordGenerator.estimate_strength(GeneratorOptions(length=128)) == 100
    none_selected = GeneratorOptions(
        include_lowercase=False,
        include_uppercase=False,
        include_numbers=False,
        include_symbols=False,
    )
    assert PasswordGenerator.estimate_strength(none_selected) == 0
