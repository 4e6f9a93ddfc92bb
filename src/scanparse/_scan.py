"""Scanner turning one line of text into tokens.

The scanner works on a single line at a time and materializes every token
before the parser sees any of them. The first character it does not
recognize aborts the whole line with a LexicalError.
"""

__all__ = ["Scanner", "scan_all"]

import string

import scanparse


WHITESPACE_CHARS = " \t\n\r\f"
DIGIT_CHARS = string.digits
LETTER_CHARS = string.ascii_letters

SINGLE_CHAR_TOKENS = {
    "+": scanparse.PLUS,
    "*": scanparse.STAR,
    "(": scanparse.BOPEN,
    ")": scanparse.BCLOSE,
}


class Scanner:
    """Cursor over the characters of one line.

    Args:
        line: (str) Source text, usually a single line
    """

    def __init__(self, line):
        self.line = line
        self.current = 0

    def peek(self):
        """(str) Next character without consuming it, empty at end of line."""
        if self.current < len(self.line):
            return self.line[self.current]
        return ""

    def advance(self):
        """(str) Consume and return the next character, empty at end of line."""
        char = self.peek()
        if char:
            self.current += 1
        return char

    def skip_whitespace(self):
        while self.peek() and self.peek() in WHITESPACE_CHARS:
            self.current += 1

    def scan_token(self):
        """Scan the next token.

        Returns:
            (Token) Next token, EOF once the line is exhausted

        Raises:
            LexicalError: The next character starts no token
        """
        self.skip_whitespace()
        start = self.current
        char = self.advance()
        if not char:
            return scanparse.Token(scanparse.EOF, position=start)

        kind = SINGLE_CHAR_TOKENS.get(char)
        if kind is not None:
            return scanparse.Token(kind, position=start)
        if char in DIGIT_CHARS:
            return self._munch(scanparse.NUMBER, DIGIT_CHARS, start)
        if char in LETTER_CHARS:
            return self._munch(scanparse.IDENTIFIER, LETTER_CHARS, start)
        raise scanparse.LexicalError(char, start)

    def scan_all(self):
        """Scan the remaining line into a list ending with a single EOF."""
        tokens = []
        while True:
            token = self.scan_token()
            tokens.append(token)
            if token.kind == scanparse.EOF:
                return tokens

    def _munch(self, kind, chars, start):
        """Extend the token started at `start` while characters are in `chars`."""
        while self.peek() and self.peek() in chars:
            self.current += 1
        return scanparse.Token(kind, self.line[start:self.current], position=start)


def scan_all(line):
    """Scan one line of text into tokens.

    Args:
        line: (str) Source line

    Returns:
        (list[Token]) Tokens, the last one always EOF

    Raises:
        LexicalError: Line contains a character outside the token set
    """
    return Scanner(line).scan_all()
