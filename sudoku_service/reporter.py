"""Formats solve results for the command line."""

from typing import Dict, List

import typer

from .grid import pretty_board


def print_summary(results: List[Dict[str, object]]) -> None:
    """Print each puzzle with its status and, when computed, the solution."""
    for item in results:
        typer.echo()
        typer.echo(f"Puzzle: {item.get('puzzle')}")
        if item.get("error"):
            typer.echo(f"  Error: {item['error']}")
            continue
        typer.echo(f"  Solved: {'yes' if item.get('solved') else 'no'}")
        typer.echo(f"  Status: {item.get('status')}")
        solution = item.get("solution")
        if solution:
            typer.echo("  Solution:")
            for line in pretty_board(solution).splitlines():
                typer.echo(f"    {line}")
