"""CLI for cdeps.

Usage:
    python -m cdeps                     # Print the two demo calculations
    python -m cdeps plus 1/2 1/3        # 1/2 + 1/3 is 5/6
    python -m cdeps divide 1 3          # 1 / 3 is 1/3
    python -m cdeps divide 1 3 --json   # Machine-readable result
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape

from cdeps.calculator import DivisionByZero, parse_operand
from cdeps.models import DEMO, Calculation, Operation

app = typer.Typer(
    name="cdeps",
    help="Add and divide numbers, exactly",
    add_completion=False,
)
# Results go to stdout unstyled so the printed lines stay byte-exact.
out = Console(highlight=False, soft_wrap=True)
console = Console(stderr=True)
# Lets negative operands such as -1 through as arguments.
_OPERAND_SETTINGS = {"ignore_unknown_options": True}


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Print '2 + 2 is 4' and '4 / 2 is 2'."""
    if ctx.invoked_subcommand is not None:
        return
    for operation, a, b in DEMO:
        out.print(Calculation.evaluate(operation, a, b).line)


def _run(operation: Operation, a: str, b: str, as_json: bool) -> None:
    """Parse operands, evaluate, print. Exits 2 on bad input, 1 on zero divisor."""
    try:
        lhs = parse_operand(a)
        rhs = parse_operand(b)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)
    except DivisionByZero as e:
        console.print(f"[red]Invalid operand: {escape(str(e))}[/red]")
        raise typer.Exit(2)

    try:
        calc = Calculation.evaluate(operation, lhs, rhs)
    except DivisionByZero as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    # str(int) refuses results past the interpreter's digit limit
    try:
        text = json.dumps(calc.to_dict()) if as_json else calc.line
    except ValueError as e:
        console.print(f"[red]Cannot render result: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    out.print(text, markup=False)


@app.command("plus", context_settings=_OPERAND_SETTINGS)
def cmd_plus(
    a: str = typer.Argument(help="First operand (e.g., '2', '1/3', '2.5')"),
    b: str = typer.Argument(help="Second operand"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Add two numbers."""
    _run(Operation.PLUS, a, b, as_json)


@app.command("divide", context_settings=_OPERAND_SETTINGS)
def cmd_divide(
    a: str = typer.Argument(help="Dividend (e.g., '4', '1/3', '2.5')"),
    b: str = typer.Argument(help="Divisor, must be non-zero"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Divide two numbers."""
    _run(Operation.DIVIDE, a, b, as_json)


if __name__ == "__main__":
    app()
