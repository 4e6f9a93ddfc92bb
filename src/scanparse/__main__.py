#!/usr/bin/env python3
"""scanparse CLI - Parse tree rendering for arithmetic expression files.

Usage:
    scanparse <file>                    # Render trees, write <stem>.output
    scanparse <file> -o trees.txt       # Write rendered trees elsewhere
    scanparse <file> --no-write         # Only print rendered trees
    scanparse "a + b" --text            # Parse expression text directly
    scanparse <file> --tokens           # Show scanned tokens per line
    scanparse <file> --lark             # Show lark reference grammar tree
"""

import argparse
import sys
from pathlib import Path

import scanparse
from lark import Token, Tree


def prettylark(node, indent=0, show_positions=False):
    """Pretty-print a lark parse tree.

    Shows tree structure with clear indentation and token values. Empty
    dash rules are shown as `exprdash()`.
    """
    prefix = "  " * indent

    if isinstance(node, Token):
        pos = f" @{node.start_pos}" if show_positions else ""
        print(f"{prefix}{node.type}: {node.value!r}{pos}")

    elif isinstance(node, Tree):
        if len(node.children) == 0:
            print(f"{prefix}{node.data}()")
        elif len(node.children) == 1 and isinstance(node.children[0], Token):
            # Compact single-token nodes
            child = node.children[0]
            pos = f" @{child.start_pos}" if show_positions else ""
            print(f"{prefix}{node.data}: {child.type} {child.value!r}{pos}")
        else:
            print(f"{prefix}{node.data}:")
            for child in node.children:
                prettylark(child, indent + 1, show_positions)

    else:
        print(f"{prefix}??? {type(node).__name__}: {node!r}")


def render_tokens(line):
    """Scan a line and format its tokens on one line."""
    tokens = scanparse.scan_all(line)
    return " ".join(token.label for token in tokens) + "\n"


def show_lark(lines, show_positions=False):
    """Display the lark reference tree for each non-blank line."""
    for index, text in enumerate(lines):
        if not text.strip():
            continue
        try:
            tree = scanparse.parse_lark(text)
        except scanparse.ScanParseError as e:
            result = scanparse.LineResult(index + 1, text, error=e)
            print(result.diagnostic(), file=sys.stderr)
            continue
        print(f"line {index + 1}: {text}")
        prettylark(tree, indent=1, show_positions=show_positions)


def run_lines(lines):
    """Process lines, printing results and diagnostics as they happen.

    Returns:
        (str) All rendered blocks of the lines that succeeded
    """
    collected = []
    for result in scanparse.process_lines(lines):
        if result.ok:
            sys.stdout.write(result.output)
            collected.append(result.output)
        else:
            print(result.diagnostic(), file=sys.stderr)
    return "".join(collected)


def write_output(path, content):
    """Write accumulated output, returning 0 on success and 1 on failure."""
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        print(f"ERROR: Failed to write output to file {path}: {e}", file=sys.stderr)
        return 1
    print(f"Successfully wrote parse trees to file: {path}", file=sys.stderr)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="scanparse",
        description="Render level order parse trees for arithmetic expressions")
    parser.add_argument("source",
        help="File of expressions, one per line")
    parser.add_argument("--text", action="store_true",
        help="Treat source as expression text instead of a file path")
    parser.add_argument("--tokens", action="store_true",
        help="Show scanned tokens instead of parse trees")
    parser.add_argument("--lark", action="store_true",
        help="Show the lark reference grammar tree instead of parse trees")
    parser.add_argument("--pos", action="store_true",
        help="Show token positions (use with --lark)")
    parser.add_argument("-o", "--output", metavar="PATH",
        help="Write rendered trees to PATH instead of <stem>.output")
    parser.add_argument("--no-write", action="store_true",
        help="Do not write an output file")

    args = parser.parse_args(argv)

    if args.tokens and args.lark:
        parser.error("--tokens cannot be combined with --lark")
    if args.pos and not args.lark:
        parser.error("--pos requires --lark")

    if args.text:
        if args.output:
            parser.error("--output requires a file path, not --text")
        lines = scanparse.split_lines(args.source)
        filepath = None
    else:
        filepath = Path(args.source)
        if not filepath.is_absolute():
            filepath = Path.cwd() / filepath
        if not filepath.is_file():
            print(f"Error: File not found: {filepath}", file=sys.stderr)
            return 1
        filepath = filepath.resolve()
        print(f"Attempting to read from: {filepath}", file=sys.stderr)
        try:
            source = filepath.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading file {filepath}: {e}", file=sys.stderr)
            return 1
        lines = scanparse.split_lines(source)

    if args.lark:
        show_lark(lines, show_positions=args.pos)
        return 0

    if args.tokens:
        # Token display scans without parsing
        for index, text in enumerate(lines):
            if not text.strip():
                continue
            try:
                sys.stdout.write(render_tokens(text))
            except scanparse.LexicalError as e:
                result = scanparse.LineResult(index + 1, text, error=e)
                print(result.diagnostic(), file=sys.stderr)
        return 0

    content = run_lines(lines)

    if filepath is None or args.no_write:
        return 0
    target = Path(args.output) if args.output else scanparse.output_path(filepath)
    return write_output(target, content)


if __name__ == "__main__":
    sys.exit(main())
