from passshield.analyzers.composition import CompositionScanner, code_units
from passshield.core.models import Composition


def test_counts_each_class():
    comp = CompositionScanner.scan("Hello World1!")
    assert comp == Composition(
        length=13, lowercase=8, uppercase=2, digits=1, symbols=1, spaces=1,
    )


def test_empty_password():
    assert CompositionScanner.scan("") == Composition()


def test_non_ascii_letters_are_symbols():
    comp = CompositionScanner.scan("café")
    assert comp.lowercase == 3
    assert comp.symbols == 1


def test_astral_characters_count_as_two_code_units():
    comp = CompositionScanner.scan("emoji\U0001F525\U0001F525\U0001F525x")
    assert comp == Composition(length=12, lowercase=6, symbols=6)


def test_code_units():
    assert code_units("abc") == "abc"
    assert code_units("\U0001F525") == "\ud83d\udd25"
    assert code_units("a\U0001F525b") == "a\ud83d\udd25b"
    assert code_units("\u00e9\uffff") == "\u00e9\uffff"


def test_classes_sum_to_length():
    for password in ("P@ss w0rd\t", "🔥🔥x", "ÀÉÎ123", "    "):
        comp = CompositionScanner.scan(password)
        total = comp.lowercase + comp.uppercase + comp.digits + comp.symbols + comp.spaces
        assert total == comp.length == len(code_units(password))


def test_charset_size():
    scanner = CompositionScanner()
    assert scanner.charset_size(scanner.scan("aA1!")) == 94
    assert scanner.charset_size(scanner.scan("a b")) == 27
    assert scanner.charset_size(scanner.scan("123")) == 10
    assert scanner.charset_size(scanner.scan("")) == 0
