"""Arithmetic expression scanner and parser.

Reads expressions over identifiers, integer literals, `+`, `*` and
parentheses, builds their concrete parse trees with a recursive descent
parser, and renders each tree level by level.
"""

__version__ = "0.1.0"


from ._error import *
from ._token import *
from ._node import *
from ._scan import *
from ._parse import *
from ._render import *
from ._process import *
