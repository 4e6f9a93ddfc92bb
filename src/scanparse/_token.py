"""Lexical tokens for expression lines.

A token is one of a closed set of kinds. Only identifiers and numbers carry
text, which is always the exact lexeme from the source line. Numbers are kept
as digit strings and are never converted.
"""

__all__ = [
    "Token",
    "TOKEN_KINDS",
    "IDENTIFIER",
    "NUMBER",
    "PLUS",
    "STAR",
    "BOPEN",
    "BCLOSE",
    "EOF",
]


IDENTIFIER = "IDENTIFIER"
NUMBER = "NUMBER"
PLUS = "PLUS"
STAR = "STAR"
BOPEN = "BOPEN"
BCLOSE = "BCLOSE"
EOF = "EOF"

TOKEN_KINDS = (IDENTIFIER, NUMBER, PLUS, STAR, BOPEN, BCLOSE, EOF)

# Kinds that keep their lexeme
_LEXEME_KINDS = (IDENTIFIER, NUMBER)


class Token:
    """An immutable token produced by the scanner.

    Attributes:
        kind: (str) One of TOKEN_KINDS
        text: (str | None) Matched lexeme for IDENTIFIER and NUMBER
        position: (int | None) Character offset in the line where it starts
    """

    __slots__ = ("_kind", "_text", "_position")

    def __init__(self, kind, text=None, position=None):
        if kind not in TOKEN_KINDS:
            raise ValueError(f"Unknown token kind: {kind}")
        if (kind in _LEXEME_KINDS) != (text is not None):
            raise ValueError(f"Token {kind} given unexpected text {text!r}")
        self._kind = kind
        self._text = text
        self._position = position

    @property
    def kind(self):
        return self._kind

    @property
    def text(self):
        return self._text

    @property
    def position(self):
        return self._position

    @property
    def label(self):
        """(str) Parse tree label, like IDENTIFIER(x) or PLUS."""
        match self._kind:
            case "IDENTIFIER" | "NUMBER":
                return f"{self._kind}({self._text})"
            case "PLUS" | "STAR" | "BOPEN" | "BCLOSE" | "EOF":
                return self._kind
            case _:
                raise ValueError(f"Unhandled token kind: {self._kind}")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._kind == other._kind and self._text == other._text

    def __hash__(self):
        return hash((self._kind, self._text))

    def __repr__(self):
        if self._text is None:
            return f"Token({self._kind})"
        return f"Token({self._kind} {self._text!r})"

    def __str__(self):
        return self.label
