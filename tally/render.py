"""Rich tables for the CLI: per-term breakdowns and the worked examples."""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tally.evaluator import evaluate, interpret
from tally.models import Literal, Sign
from tally.tokenizer import classify, split_terms

# (expression, bindings, expected result)
WORKED_EXAMPLES: list[tuple[str, dict[str, int], int]] = [
    ("1+2+3", {}, 6),
    ("1+2+xy", {}, 0),
    ("10-2-x", {"x": 3}, 5),
    ("10-2-x", {}, 8),
    ("", {}, 0),
]


def _fmt_bindings(bindings: Mapping[str, int]) -> str:
    """Format bindings as "x=3, y=4", or a dim placeholder when empty."""
    if not bindings:
        return "[dim]--[/dim]"
    return ", ".join(f"{name}={bindings[name]}" for name in sorted(bindings))


def render_terms(expression: str, bindings: Mapping[str, int], console: Console) -> int:
    """Render one row per signed term and return the total.

    Raises:
        ExpressionError: The expression is malformed; nothing is printed.
    """
    terms = split_terms(expression)
    leaves = [classify(term, expression) for term in terms]

    table = Table(title=f"Terms: {escape(expression)}", show_header=True, header_style="bold")
    table.add_column("Sign", justify="center")
    table.add_column("Term", style="green")
    table.add_column("Kind")
    table.add_column("Value", justify="right")

    total = 0
    for term, leaf in zip(terms, leaves):
        operand = interpret(leaf, bindings)
        total += operand if term.sign is Sign.PLUS else -operand
        if isinstance(leaf, Literal):
            kind, value = "literal", str(leaf.value)
        elif leaf.name in bindings:
            kind, value = "variable", str(bindings[leaf.name])
        else:
            kind, value = "variable", "[yellow]0 (unbound)[/yellow]"
        sign_style = "cyan" if term.sign is Sign.PLUS else "magenta"
        table.add_row(f"[{sign_style}]{term.sign.value}[/{sign_style}]", term.text, kind, value)

    table.add_section()
    table.add_row("", "[bold]Total[/bold]", "", f"[bold]{total}[/bold]")

    console.print()
    console.print(table)
    console.print()
    return total


def render_examples(console: Console) -> bool:
    """Evaluate the worked examples side by side; True if all match."""
    table = Table(title="Worked examples", show_header=True, header_style="bold")
    table.add_column("Expression", style="green", min_width=10)
    table.add_column("Bindings", min_width=8)
    table.add_column("Expected", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("", justify="center")

    all_ok = True
    for expression, bindings, expected in WORKED_EXAMPLES:
        actual = evaluate(expression, bindings)
        ok = actual == expected
        all_ok = all_ok and ok
        table.add_row(
            repr(expression),
            _fmt_bindings(bindings),
            str(expected),
            str(actual),
            "[green]ok[/green]" if ok else "[red]FAIL[/red]",
        )

    console.print()
    console.print(table)
    console.print()
    return all_ok
