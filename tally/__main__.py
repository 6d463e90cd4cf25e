"""CLI for the tally interpreter.

Usage:
    python -m tally eval "10-2-x" --var x=3   # Print the result
    python -m tally terms "10-2-x" -v x=3     # Term-by-term breakdown
    python -m tally demo                      # Evaluate a hand-built tree
    python -m tally examples                  # Worked examples table
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from tally.environment import load_bindings, parse_binding
from tally.errors import ExpressionError
from tally.evaluator import evaluate, interpret
from tally.log import setup_logging
from tally.models import Add, Context, Subtract, Variable
from tally.render import render_examples, render_terms

app = typer.Typer(
    name="tally",
    help="Evaluate +/- arithmetic over single-letter variables",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console(highlight=False)

_VAR_HELP = "Variable binding NAME=VALUE (repeatable); overrides TALLY_VARIABLES"


def _collect_bindings(var: Optional[list[str]]) -> dict[str, int]:
    """Merge TALLY_VARIABLES with --var options, exiting on a bad binding."""
    try:
        bindings = load_bindings()
        for item in var or []:
            name, value = parse_binding(item)
            bindings[name] = value
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    return bindings


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Log at DEBUG level"),
) -> None:
    """Evaluate +/- arithmetic over single-letter variables."""
    setup_logging(verbose=verbose, console=console)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '10-2-x'"),
    var: Optional[list[str]] = typer.Option(None, "--var", "-v", help=_VAR_HELP),
) -> None:
    """Print the value of an expression (0 if it is malformed)."""
    bindings = _collect_bindings(var)
    out.print(evaluate(expression, bindings))


@app.command("terms")
def cmd_terms(
    expression: str = typer.Argument(help="Expression, e.g. '10-2-x'"),
    var: Optional[list[str]] = typer.Option(None, "--var", "-v", help=_VAR_HELP),
) -> None:
    """Show how an expression splits into terms and what each resolves to."""
    bindings = _collect_bindings(var)
    try:
        render_terms(expression, bindings, console)
    except ExpressionError as e:
        console.print(f"[red]Malformed expression:[/red] {escape(str(e))}")
        console.print("[dim]eval would return 0[/dim]")
        raise typer.Exit(1)


@app.command("demo")
def cmd_demo() -> None:
    """Interpret (y + z) - x with x=2, y=4, z=8."""
    out.print("\nInterpreter")

    ctx = Context()
    ctx.set_variable("x", 2)
    ctx.set_variable("y", 4)
    ctx.set_variable("z", 8)

    # 4 + 8 = 12, then 12 - 2 = 10
    expression = Subtract(
        Add(Variable("y"), Variable("z")),
        Variable("x"),
    )

    result = interpret(expression, ctx)
    out.print(f"Expression result: {result}")


@app.command("examples")
def cmd_examples() -> None:
    """Evaluate the worked examples and compare against expected results."""
    if not render_examples(console):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
