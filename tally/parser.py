"""Fold signed terms into a left-associative expression tree."""

from __future__ import annotations

from tally.models import Add, Node, Sign, Subtract
from tally.tokenizer import classify, split_terms


def parse(expression: str) -> Node:
    """Parse an expression into a tree.

    `+` and `-` share one precedence level, so terms fold strictly left to
    right: "a-b+c" becomes Add(Subtract(a, b), c).

    Raises:
        ExpressionError: The expression is empty or contains an invalid term.
    """
    terms = split_terms(expression)
    node: Node = classify(terms[0], expression)

    for term in terms[1:]:
        operand = classify(term, expression)
        if term.sign is Sign.PLUS:
            node = Add(node, operand)
        else:
            node = Subtract(node, operand)

    return node
