"""Data models for the tally interpreter.

Sign, Term, the expression tree nodes and Context — the typed structures
that flow through tokenizer → parser → evaluator → CLI.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Sign(str, Enum):
    """Operator preceding a term."""

    PLUS = "+"
    MINUS = "-"


@dataclass(frozen=True)
class Term:
    """One operand of an expression and the sign in front of it.

    The first term of an expression is always PLUS; `position` is the offset
    of `text` in the source string.
    """

    sign: Sign
    text: str
    position: int


# --- Expression tree ---


@dataclass(frozen=True)
class Literal:
    value: int


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class Add:
    left: Node
    right: Node


@dataclass(frozen=True)
class Subtract:
    left: Node
    right: Node


Node = Union[Literal, Variable, Add, Subtract]


@dataclass
class Context(Mapping[str, int]):
    """Mutable variable store for building up bindings by hand.

    Reading an unknown name through `get_variable` yields 0. Being a
    Mapping, a Context can be passed straight to `interpret`/`evaluate`.
    """

    variables: dict[str, int] = field(default_factory=dict)

    def set_variable(self, name: str, value: int) -> None:
        self.variables[name] = value

    def get_variable(self, name: str) -> int:
        return self.variables.get(name, 0)

    def __getitem__(self, name: str) -> int:
        return self.variables[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.variables)

    def __len__(self) -> int:
        return len(self.variables)
