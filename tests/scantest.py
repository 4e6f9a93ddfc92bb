"""Shared helpers for the scanner, parser and renderer tests."""

import pytest

import scanparse


def params(names, **cases):
    """Parametrize a test over named expression cases.

    Each keyword becomes a test id. Its value is a tuple of the columns
    listed in `names`, or a bare value when there is only one column. The
    case name is passed first as `key` so failures show which expression
    broke.

    Example:
        @params("text rule", dangling=("a+", "FACTOR"))
        def test_rejects(key, text, rule):
            ...
    """
    columns = ["key", *names.replace(",", " ").split()]
    rows = []
    for key, case in cases.items():
        values = case if isinstance(case, tuple) else (case,)
        rows.append((key, *values))
    return pytest.mark.parametrize(columns, rows, ids=list(cases))


def token_labels(text):
    """Scan text and return the token labels."""
    return [token.label for token in scanparse.scan_all(text)]


def levels(text):
    """Parse text and return the rendered tree split into level lines."""
    tree = scanparse.parse_text(text)
    return scanparse.to_bfs_string(tree).splitlines()
