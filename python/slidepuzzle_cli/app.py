"""Command-line tools: puzzle generator, solver and solution validator.

Usage::

    slidepuzzle generate 3 3 40 > problem.txt
    slidepuzzle solve < problem.txt > moves.txt
    slidepuzzle validate moves.txt accepted.txt problem.txt
"""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from slidepuzzle.engine.generator import Generator
from slidepuzzle.engine.solver import Solver
from slidepuzzle.engine.validator import Validator
from slidepuzzle.models.state import State
from slidepuzzle_cli.logs import configure_logging
from slidepuzzle_cli.render import board_panel

# Exit codes expected by the judge that runs the validator.
ACCEPTED_EXIT = 4
REJECTED_EXIT = 6
NO_SOLUTION_EXIT = 1
BAD_INPUT_EXIT = 2

err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search and generator details to stderr.",
    ),
) -> None:
    """Generalized sliding puzzle tools."""
    configure_logging(verbose)


# -- generator ----------------------------------------------------------------


@app.command()
def generate(
    rows: int = typer.Argument(..., min=1, help="Board rows."),
    cols: int = typer.Argument(..., min=1, help="Board columns."),
    amount: int = typer.Argument(..., min=0, help="Random slides applied to the goal."),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
) -> None:
    """Print a random solvable puzzle."""
    problem = Generator.generate(rows, cols, amount, rng=random.Random(seed))
    typer.echo(problem.to_text())


# -- solver -------------------------------------------------------------------


@app.command()
def solve(
    show: bool = typer.Option(
        False, "--show",
        help="Draw the start and solved boards on stderr.",
    ),
    check_parity: bool = typer.Option(
        False, "--check-parity",
        help="Reject unsolvable boards before searching.",
    ),
) -> None:
    """Read a puzzle from stdin and print the moves that solve it."""
    text = sys.stdin.read()
    try:
        start = State.from_text(text)
    except ValueError as exc:
        err_console.print(f"[red]Invalid puzzle:[/red] {exc}")
        raise typer.Exit(code=BAD_INPUT_EXIT)

    if show:
        err_console.print(board_panel(start, "Start"))

    result = Solver.search(start, check_parity=check_parity)
    if result.solution is None:
        err_console.print("[red]No solution found.[/red]")
        raise typer.Exit(code=NO_SOLUTION_EXIT)

    if show:
        err_console.print(board_panel(result.solution, "Solved"))
        err_console.print(
            f"[bold green]{len(result.solution.moves)} moves[/bold green] "
            f"[dim]({result.expanded} expanded, {result.seen} seen)[/dim]"
        )
    typer.echo(" ".join(result.solution.moves))


# -- validator ----------------------------------------------------------------


@app.command()
def validate(
    output: Path = typer.Argument(..., dir_okay=False, help="Solver output to check."),
    accepted: Path = typer.Argument(..., exists=True, dir_okay=False, help="Accepted solution file."),
    problem: Path = typer.Argument(..., exists=True, dir_okay=False, help="Puzzle the output claims to solve."),
) -> None:
    """Print ``aceito`` (exit 4) if the moves solve the puzzle, else ``errado`` (exit 6)."""
    moves = _read_moves(output)
    # Accepted solutions are read for the judge's contract but any valid
    # solution is accepted, not only that one.
    accepted.read_text()
    try:
        start = State.from_text(problem.read_text())
    except ValueError as exc:
        err_console.print(f"[red]Invalid puzzle:[/red] {exc}")
        raise typer.Exit(code=BAD_INPUT_EXIT)

    if moves is not None and Validator.check_solution(start, moves):
        typer.echo("aceito")
        raise typer.Exit(code=ACCEPTED_EXIT)
    typer.echo("errado")
    raise typer.Exit(code=REJECTED_EXIT)


def _read_moves(path: Path) -> list[str] | None:
    """Split the solver output into move tokens, or ``None`` if it can't be read.

    Undecodable bytes become replacement characters, which never parse as
    a direction code.
    """
    try:
        return path.read_text(errors="replace").split()
    except OSError as exc:
        err_console.print(f"[yellow]Unreadable solver output:[/yellow] {exc}")
        return None
