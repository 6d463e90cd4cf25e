"""tally — a tiny interpreter for `+`/`-` arithmetic over single-letter variables.

Expressions are integer literals and one-letter variables joined by `+` and
`-`, evaluated left to right. Unbound variables read as 0; anything malformed
evaluates to 0.

Usage:
    python -m tally eval "10-2-x" --var x=3   # prints 5
    python -m tally terms "1+2+xy"            # term breakdown
    python -m tally demo                      # hand-built expression tree
    python -m tally examples                  # worked examples
"""

from tally.errors import ExpressionError
from tally.evaluator import ExpressionProcessor, evaluate, interpret
from tally.models import Add, Context, Literal, Subtract, Variable
from tally.parser import parse

__all__ = [
    "Add",
    "Context",
    "ExpressionError",
    "ExpressionProcessor",
    "Literal",
    "Subtract",
    "Variable",
    "evaluate",
    "interpret",
    "parse",
]
