"""Error classes and helpers"""

__all__ = ["ScanParseError", "LexicalError", "ParseError"]


class ScanParseError(Exception):
    """Base for errors that abandon a single input line.

    Args:
        message: (str) Error description
        position: (int | None) Optional character position where error occurred

    Attributes:
        message: (str) Error description
        position: (int | None) Character position where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)


class LexicalError(ScanParseError):
    """Unrecognized character found while scanning a line.

    Attributes:
        char: (str) The offending character
    """

    def __init__(self, char, position=None):
        self.char = char
        super().__init__(f"Unexpected character '{char}'.", position)


class ParseError(ScanParseError):
    """Token sequence does not match the expression grammar.

    Attributes:
        rule: (str | None) Nonterminal being parsed, None for trailing input
        expected: (tuple) Token kinds that would have been accepted
        found: (Token | None) Token actually found
    """

    def __init__(self, message, rule=None, expected=(), found=None, position=None):
        self.rule = rule
        self.expected = tuple(expected)
        self.found = found
        if position is None and found is not None:
            position = found.position
        super().__init__(message, position)
