"""Split an expression into signed terms and classify each one.

An expression is a sequence of terms separated by `+` or `-`. Each term is a
run of ASCII digits (a literal) or exactly one ASCII letter (a variable).
Anything else, including an empty term left by a leading, trailing or
doubled operator, is an ExpressionError.
"""

from __future__ import annotations

import re

from tally.errors import ExpressionError
from tally.models import Literal, Sign, Term, Variable

# Capturing group keeps the operators in re.split() output:
# "10-2-x" -> ["10", "-", "2", "-", "x"]
_OPERATOR_RE = re.compile(r"([+-])")
_LITERAL_RE = re.compile(r"[0-9]+")
_VARIABLE_RE = re.compile(r"[A-Za-z]")
_IDENTIFIER_RE = re.compile(r"[A-Za-z]+")


def split_terms(expression: str) -> list[Term]:
    """Split an expression on `+`/`-`, keeping the sign of each term.

    Args:
        expression: Source text, e.g. "10-2-x".

    Returns:
        Terms in source order; the first one is always Sign.PLUS.

    Raises:
        ExpressionError: The expression is empty or an operand is missing.
    """
    if not expression:
        raise ExpressionError(expression, 0, "empty expression")

    terms: list[Term] = []
    sign = Sign.PLUS
    position = 0

    for i, part in enumerate(_OPERATOR_RE.split(expression)):
        if i % 2:
            sign = Sign(part)
            position += 1
            continue
        if not part:
            raise ExpressionError(expression, position, "missing operand")
        terms.append(Term(sign=sign, text=part, position=position))
        position += len(part)

    return terms


def classify(term: Term, expression: str = "") -> Literal | Variable:
    """Turn a term into a leaf node.

    Raises:
        ExpressionError: The term is neither digits nor a single letter.
    """
    text = term.text
    if _LITERAL_RE.fullmatch(text):
        try:
            return Literal(int(text))
        except ValueError:
            # past sys.get_int_max_str_digits()
            raise ExpressionError(expression or text, term.position, "literal too large") from None
    if _VARIABLE_RE.fullmatch(text):
        return Variable(text)
    if _IDENTIFIER_RE.fullmatch(text):
        reason = f"variable name {text!r} is longer than one letter"
    else:
        reason = f"invalid term {text!r}"
    raise ExpressionError(expression or text, term.position, reason)
