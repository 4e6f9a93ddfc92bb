"""Tests for scanning lines into tokens."""

import pytest

import scanparse
import scantest


@scantest.params(
    "text labels",
    plus=("+", ["PLUS", "EOF"]),
    star=("*", ["STAR", "EOF"]),
    brackets=("()", ["BOPEN", "BCLOSE", "EOF"]),
    ident=("abc", ["IDENTIFIER(abc)", "EOF"]),
    number=("0042", ["NUMBER(0042)", "EOF"]),
    mixed=("a+b*c", ["IDENTIFIER(a)", "PLUS", "IDENTIFIER(b)", "STAR", "IDENTIFIER(c)", "EOF"]),
    spaced=("  x \t+\f 1 ", ["IDENTIFIER(x)", "PLUS", "NUMBER(1)", "EOF"]),
    ident_then_num=("abc123", ["IDENTIFIER(abc)", "NUMBER(123)", "EOF"]),
    num_then_ident=("123abc", ["NUMBER(123)", "IDENTIFIER(abc)", "EOF"]),
    huge=("98765432109876543210", ["NUMBER(98765432109876543210)", "EOF"]),
)
def test_scan_labels(key, text, labels):
    """Test tokens and maximal munch for each token class."""
    assert scantest.token_labels(text) == labels


@scantest.params(
    "text",
    empty=("",),
    blank=("   \t ",),
    expr=("(a + 12) * b",),
    trailing=("x+",),
)
def test_single_trailing_eof(key, text):
    """Every successful scan ends with exactly one EOF."""
    tokens = scanparse.scan_all(text)
    kinds = [token.kind for token in tokens]
    assert kinds[-1] == scanparse.EOF
    assert kinds.count(scanparse.EOF) == 1


def test_lexemes_kept_as_text():
    tokens = scanparse.scan_all("007 Bond")
    assert tokens[0] == scanparse.Token(scanparse.NUMBER, "007")
    assert tokens[0].text == "007"
    assert tokens[1] == scanparse.Token(scanparse.IDENTIFIER, "Bond")
    assert tokens[2].text is None


def test_token_positions():
    tokens = scanparse.scan_all(" ab + 12")
    assert [token.position for token in tokens] == [1, 4, 6, 8]


@scantest.params(
    "text char position",
    hash=("a#b", "#", 1),
    minus=("a - b", "-", 2),
    underscore=("foo_bar", "_", 3),
    decimal=("1.5", ".", 1),
    unicode_letter=("é", "é", 0),
    vertical_tab=("a\vb", "\v", 1),
)
def test_unexpected_character(key, text, char, position):
    """An unknown character aborts the whole line."""
    with pytest.raises(scanparse.LexicalError) as info:
        scanparse.scan_all(text)
    assert info.value.char == char
    assert info.value.position == position
    assert char in str(info.value)


def test_scanner_cursor():
    scanner = scanparse.Scanner("x +")
    assert scanner.scan_token() == scanparse.Token(scanparse.IDENTIFIER, "x")
    assert scanner.current == 1
    assert scanner.scan_token().kind == scanparse.PLUS
    assert scanner.scan_token().kind == scanparse.EOF
    assert scanner.scan_token().kind == scanparse.EOF


def test_token_immutable():
    token = scanparse.Token(scanparse.IDENTIFIER, "x")
    with pytest.raises(AttributeError):
        token.text = "y"


@scantest.params(
    "kind text",
    unknown=("MINUS", None),
    ident_without_text=("IDENTIFIER", None),
    plus_with_text=("PLUS", "+"),
)
def test_token_invalid(key, kind, text):
    with pytest.raises(ValueError):
        scanparse.Token(kind, text)
