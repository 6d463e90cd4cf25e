"""Evaluate expression trees against variable bindings.

`evaluate()` is the public entry point: parse + interpret, with every
ExpressionError collapsed into the sentinel result 0. It keeps no state
between calls, so one instance of bindings can be shared freely.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from tally.errors import ExpressionError
from tally.models import Add, Literal, Node, Subtract, Variable
from tally.parser import parse

logger = logging.getLogger(__name__)


def interpret(node: Node, bindings: Mapping[str, int]) -> int:
    """Compute the value of an expression tree.

    Variables missing from `bindings` read as 0. The left spine is walked
    iteratively, since parse() builds trees as deep as the term count.
    """
    pending: list[tuple[int, Node]] = []
    while True:
        match node:
            case Add(left, right):
                pending.append((1, right))
                node = left
            case Subtract(left, right):
                pending.append((-1, right))
                node = left
            case Literal(value):
                total = value
                break
            case Variable(name):
                total = bindings.get(name, 0)
                break
            case _:
                raise TypeError(f"Not an expression node: {node!r}")

    for sign, right in reversed(pending):
        total += sign * interpret(right, bindings)
    return total


def evaluate(expression: str, bindings: Optional[Mapping[str, int]] = None) -> int:
    """Evaluate an expression, returning 0 if it cannot be parsed.

    Args:
        expression: Integer literals and single-letter variables joined by
            `+`/`-`, e.g. "10-2-x".
        bindings: Variable values keyed by single-letter name.

    Returns:
        The left-to-right result, or 0 on any malformed input.
    """
    try:
        tree = parse(expression)
    except ExpressionError as e:
        logger.debug("Rejected expression: %s", e)
        return 0
    return interpret(tree, bindings or {})


@dataclass
class ExpressionProcessor:
    """Holds a set of variables and calculates expressions against them."""

    variables: dict[str, int] = field(default_factory=dict)

    def calculate(self, expression: str) -> int:
        return evaluate(expression, self.variables)
