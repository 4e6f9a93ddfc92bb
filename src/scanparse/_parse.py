"""Parse token sequences into concrete parse trees.

The parser is a hand written recursive descent over this LL(1) grammar, one
method per nonterminal, building the tree as it goes:

    EXPR      -> TERM EXPRDASH
    EXPRDASH  -> '+' TERM EXPRDASH | epsilon
    TERM      -> FACTOR TERMDASH
    TERMDASH  -> '*' FACTOR TERMDASH | epsilon
    FACTOR    -> '(' EXPR ')' | IDENTIFIER | NUMBER

The right recursive dash rules are read as loops and folded back into the
same right nested nodes, so only parentheses add to the Python stack.

The same grammar is also kept as a lark grammar (lark/expr.lark). That parser
is never used for normal processing; it backs the `--lark` display mode and
gives an independent reading of the grammar to check the hand written one
against.
"""

__all__ = [
    "Parser",
    "parse",
    "parse_text",
    "parse_lark",
    "from_lark",
]

import lark
import scanparse


# Readable names for token kinds in error messages
_EXPECT_NAMES = {
    scanparse.IDENTIFIER: "Identifier",
    scanparse.NUMBER: "Number",
    scanparse.PLUS: "'+'",
    scanparse.STAR: "'*'",
    scanparse.BOPEN: "'('",
    scanparse.BCLOSE: "')'",
    scanparse.EOF: "EOF",
}


class Parser:
    """Recursive descent parser over a materialized token list.

    Args:
        tokens: (list[Token]) Tokens for one line, ending with EOF
    """

    def __init__(self, tokens):
        tokens = list(tokens)
        if not tokens or tokens[-1].kind != scanparse.EOF:
            raise ValueError("Token sequence must end with EOF")
        self.tokens = tokens
        self.current = 0

    def peek(self):
        """(Token) Lookahead token."""
        return self.tokens[self.current]

    def consume(self):
        """(Token) Return the lookahead token and advance past it."""
        token = self.tokens[self.current]
        # EOF is never consumed past
        if token.kind != scanparse.EOF:
            self.current += 1
        return token

    def parse(self):
        """Parse a full expression followed by EOF.

        Returns:
            (NonTerminal) EXPR root node

        Raises:
            ParseError: Tokens do not form exactly one expression, or
                parentheses nest deeper than the interpreter stack allows
        """
        try:
            root = self.parse_expr()
        except RecursionError:
            raise scanparse.ParseError(
                "Parse Error in FACTOR: Expression nested too deeply",
                rule="FACTOR",
                found=self.peek(),
            ) from None
        token = self.peek()
        if token.kind != scanparse.EOF:
            raise scanparse.ParseError(
                f"Parse Error: Extra token found starting at {token}",
                found=token,
            )
        return root

    def parse_expr(self):
        term = self.parse_term()
        exprdash = self.parse_exprdash()
        return scanparse.NonTerminal("EXPR", [term, exprdash])

    def parse_exprdash(self):
        links = []
        while self.peek().kind == scanparse.PLUS:
            plus = scanparse.Terminal(self.consume())
            links.append((plus, self.parse_term()))
        match self.peek().kind:
            case "BCLOSE" | "EOF":
                return _fold("EXPRDASH", links)
            case _:
                self._fail("EXPRDASH", scanparse.PLUS, scanparse.BCLOSE, scanparse.EOF)

    def parse_term(self):
        factor = self.parse_factor()
        termdash = self.parse_termdash()
        return scanparse.NonTerminal("TERM", [factor, termdash])

    def parse_termdash(self):
        links = []
        while self.peek().kind == scanparse.STAR:
            star = scanparse.Terminal(self.consume())
            links.append((star, self.parse_factor()))
        match self.peek().kind:
            case "PLUS" | "BCLOSE" | "EOF":
                return _fold("TERMDASH", links)
            case _:
                self._fail(
                    "TERMDASH",
                    scanparse.STAR,
                    scanparse.PLUS,
                    scanparse.BCLOSE,
                    scanparse.EOF,
                )

    def parse_factor(self):
        match self.peek().kind:
            case "BOPEN":
                bopen = scanparse.Terminal(self.consume())
                expr = self.parse_expr()
                if self.peek().kind != scanparse.BCLOSE:
                    self._fail("FACTOR", scanparse.BCLOSE)
                bclose = scanparse.Terminal(self.consume())
                return scanparse.NonTerminal("FACTOR", [bopen, expr, bclose])
            case "IDENTIFIER" | "NUMBER":
                leaf = scanparse.Terminal(self.consume())
                return scanparse.NonTerminal("FACTOR", [leaf])
            case _:
                self._fail(
                    "FACTOR",
                    scanparse.BOPEN,
                    scanparse.IDENTIFIER,
                    scanparse.NUMBER,
                )

    def _fail(self, rule, *expected):
        """Raise a ParseError for the current lookahead."""
        found = self.peek()
        names = [_EXPECT_NAMES[kind] for kind in expected]
        if len(names) == 1:
            wanted = names[0]
        else:
            wanted = ", ".join(names[:-1]) + ", or " + names[-1]
        raise scanparse.ParseError(
            f"Parse Error in {rule}: Expected {wanted}, found {found}",
            rule=rule,
            expected=expected,
            found=found,
        )


def _fold(name, links):
    """Nest (operator, operand) pairs from the right into dash rule nodes.

    An empty chain gives a single node holding Epsilon, and each pair wraps
    the node built so far, so `+ b + c` becomes
    EXPRDASH(PLUS b EXPRDASH(PLUS c EXPRDASH(EPSILON))).
    """
    node = scanparse.NonTerminal(name, [scanparse.Epsilon()])
    for op, operand in reversed(links):
        node = scanparse.NonTerminal(name, [op, operand, node])
    return node


def parse(tokens):
    """Parse a token sequence into an EXPR tree.

    Args:
        tokens: (list[Token]) Tokens for one line, ending with EOF

    Returns:
        (NonTerminal) Root EXPR node
    """
    return Parser(tokens).parse()


def parse_text(line):
    """Scan and parse one line of text.

    Raises:
        LexicalError: Line cannot be scanned
        ParseError: Tokens do not match the grammar
    """
    return parse(scanparse.scan_all(line))


def parse_lark(line):
    """Parse one line with the lark reference grammar.

    Args:
        line: (str) Source line

    Returns:
        (lark.Tree) Lark tree rooted at `expr`

    Raises:
        LexicalError: Line cannot be scanned
        ParseError: Tokens do not match the grammar
    """
    parser = _lark_parser("expr")
    try:
        return parser.parse(line)
    except lark.UnexpectedCharacters as e:
        raise scanparse.LexicalError(line[e.pos_in_stream], e.pos_in_stream) from e
    except lark.UnexpectedInput as e:
        message = str(e).splitlines()[0]
        raise scanparse.ParseError(f"Parse Error: {message}", position=e.pos_in_stream) from e


def from_lark(tree):
    """Convert a lark reference tree into parse nodes.

    Empty `exprdash`/`termdash` rules become a nonterminal holding a single
    Epsilon, matching the hand written parser.
    Conversion recurses once per tree level, so it is meant for the short
    lines used in display and cross-checks.

    Args:
        tree: (lark.Tree | lark.Token) Lark Tree or Token to convert

    Returns:
        (ParseNode) Converted node
    """
    if isinstance(tree, lark.Token):
        match tree.type:
            case "IDENTIFIER" | "NUMBER":
                token = scanparse.Token(tree.type, str(tree), tree.start_pos)
            case "PLUS" | "STAR" | "BOPEN" | "BCLOSE":
                token = scanparse.Token(tree.type, position=tree.start_pos)
            case _:
                raise ValueError(f"Unhandled grammar token: {tree}")
        return scanparse.Terminal(token)

    name = tree.data.upper()
    if name not in scanparse.NONTERMINALS:
        raise ValueError(f"Unhandled grammar rule: {tree.data}")
    kids = [from_lark(kid) for kid in tree.children]
    if not kids:
        kids = [scanparse.Epsilon()]
    return scanparse.NonTerminal(name, kids)


_parsers = {}


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(path, rel_to=__file__, parser="lalr", start="expr")
    _parsers[name] = parser
    return parser
