"""Line driver connecting the scanner, parser and renderer.

Each non-blank line is handled on its own. Scan and parse failures are
recorded against the line and never stop the lines after it.
"""

__all__ = ["LineResult", "process_lines", "split_lines", "output_path"]

import pathlib

import scanparse


class LineResult:
    """Outcome of processing one input line.

    Attributes:
        line_number: (int) 1-based line number in the input
        text: (str) Line text as read
        output: (str | None) Rendered tree when the line parsed
        error: (ScanParseError | None) LexicalError or ParseError otherwise
    """

    __slots__ = ("line_number", "text", "output", "error")

    def __init__(self, line_number, text, output=None, error=None):
        self.line_number = line_number
        self.text = text
        self.output = output
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def diagnostic(self):
        """(str | None) One line description of the failure, if any."""
        if self.error is None:
            return None
        if isinstance(self.error, scanparse.LexicalError):
            heading = "Scanning Error"
        else:
            heading = "Parse Error"
        return f"{heading} on line {self.line_number}: '{self.text}': {self.error.message}"

    def __repr__(self):
        state = "ok" if self.ok else type(self.error).__name__
        return f"LineResult({self.line_number} {state})"


def split_lines(source):
    """Split text into lines on newlines, dropping a trailing carriage return.

    A final newline does not start an extra empty line.
    """
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def process_lines(lines):
    """Scan, parse and render each non-blank line.

    Args:
        lines: (Iterable[str]) Input lines in order

    Yields:
        (LineResult) One result per non-blank line
    """
    for index, text in enumerate(lines):
        if not text.strip():
            continue
        try:
            tree = scanparse.parse_text(text)
        except (scanparse.LexicalError, scanparse.ParseError) as e:
            yield LineResult(index + 1, text, error=e)
            continue
        yield LineResult(index + 1, text, output=scanparse.to_bfs_string(tree))


def output_path(input_path):
    """Derive the sibling `.output` path for an input file.

    The last suffix is dropped to get the stem, then the stem's own suffix
    (if any) is replaced, so `exprs.txt` gives `exprs.output` and `a.b.txt`
    gives `a.output`.
    """
    path = pathlib.Path(input_path)
    return path.with_name(path.stem).with_suffix(".output")
