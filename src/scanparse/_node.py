"""Concrete parse tree nodes"""

__all__ = [
    "ParseNode",
    "NonTerminal",
    "Terminal",
    "Epsilon",
    "NONTERMINALS",
    "EPSILON_LABEL",
]


NONTERMINALS = ("EXPR", "EXPRDASH", "TERM", "TERMDASH", "FACTOR")
EPSILON_LABEL = "EPSILON"


class ParseNode:
    """Base class for all parse tree nodes.

    Each node owns its kids outright. Trees are built once by the parser and
    only read afterwards.
    """

    __slots__ = ("kids",)

    def __init__(self, kids=()):
        self.kids = tuple(kids)

    @property
    def label(self):
        """(str) Text used for this node when rendering."""
        raise NotImplementedError(type(self).__name__)

    def __repr__(self):
        """Compact representation showing label and kid count."""
        if self.kids:
            return f"{self.__class__.__name__}({self.label} *{len(self.kids)})"
        return f"{self.__class__.__name__}({self.label})"

    def walk(self):
        """Yield this node and all descendants, depth first, left to right.

        Iterative, so tree depth is not bounded by the interpreter stack.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.kids))

    def find(self, label):
        """Find first descendant with given label, including self, depth first."""
        for node in self.walk():
            if node.label == label:
                return node
        return None

    def find_all(self, label):
        """Find all descendants with given label, including self."""
        return [node for node in self.walk() if node.label == label]

    def matches(self, other) -> bool:
        """Hierarchical comparison of tree structure.

        Compares node types and labels, then all kids pairwise. Token
        positions are ignored.
        """
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if type(right) is not type(left):
                return False
            if left.label != right.label or len(left.kids) != len(right.kids):
                return False
            pending.extend(zip(left.kids, right.kids))
        return True


class NonTerminal(ParseNode):
    """Grammar symbol expanded by one production.

    Args:
        name: (str) One of NONTERMINALS
        kids: (list[ParseNode]) Children in left to right derivation order
    """

    __slots__ = ("name",)

    def __init__(self, name, kids):
        if name not in NONTERMINALS:
            raise ValueError(f"Unknown nonterminal: {name}")
        if not kids:
            raise ValueError(f"Nonterminal {name} requires at least one kid")
        super().__init__(kids)
        self.name = name

    @property
    def label(self):
        return self.name


class Terminal(ParseNode):
    """Leaf matched directly from a token."""

    __slots__ = ("token",)

    def __init__(self, token):
        super().__init__()
        self.token = token

    @property
    def label(self):
        return self.token.label


class Epsilon(ParseNode):
    """Leaf for a rule that derived the empty string."""

    __slots__ = ()

    @property
    def label(self):
        return EPSILON_LABEL
