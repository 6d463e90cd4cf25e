"""The one failure kind the interpreter knows about."""

from __future__ import annotations


class ExpressionError(ValueError):
    """An expression could not be split or parsed.

    Raised by the tokenizer and parser. `evaluate()` absorbs it into the
    sentinel result 0; diagnostic callers can catch it to show the reason.
    """

    def __init__(self, expression: str, position: int, reason: str) -> None:
        self.expression = expression
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position} in {expression!r}")
