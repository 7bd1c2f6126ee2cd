#!/usr/bin/env python3
"""Command line entry point: solve puzzles locally or serve them over HTTP."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import typer
from aiohttp import web

from .config import ServiceConfig
from .grid import parse_puzzle
from .handler import STATUS_UNSOLVABLE, evaluate_grid
from .input_manager import prepare_puzzles, read_puzzle_file
from .reporter import print_summary
from .server import create_app

app = typer.Typer(help="Validate and solve 9x9 Sudoku puzzles.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def solve_entries(puzzles: List[str]) -> List[Dict[str, object]]:
    results: List[Dict[str, object]] = []
    for puzzle in puzzles:
        try:
            board = parse_puzzle(puzzle)
        except ValueError as exc:
            results.append({"puzzle": puzzle, "error": str(exc)})
            continue
        entry: Dict[str, object] = {"puzzle": puzzle}
        entry.update(evaluate_grid(board).to_dict())
        results.append(entry)
    return results


@app.command()
def solve(
    puzzle: List[str] = typer.Option([], "--puzzle", "-p", help="81-cell puzzle string (repeatable)."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="File with one puzzle per line."),
) -> None:
    entries = list(puzzle)
    if file is not None:
        entries.extend(read_puzzle_file(file))
    prepared = prepare_puzzles(entries)
    if not prepared:
        typer.echo("Provide at least one puzzle with --puzzle or --file.", err=True)
        raise typer.Exit(code=1)

    results = solve_entries(prepared)
    print_summary(results)
    if any(item.get("error") or item.get("status") == STATUS_UNSOLVABLE for item in results):
        raise typer.Exit(code=2)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", envvar="SUDOKU_HOST", help="Interface to bind."),
    port: int = typer.Option(8080, "--port", "-p", envvar="SUDOKU_PORT", help="Port to listen on."),
    solve_timeout: Optional[float] = typer.Option(
        None, "--solve-timeout", envvar="SUDOKU_SOLVE_TIMEOUT", help="Seconds to wait for a solve."
    ),
    max_solves: int = typer.Option(
        4, "--max-solves", envvar="SUDOKU_MAX_SOLVES", help="Concurrent solves allowed."
    ),
) -> None:
    config = ServiceConfig(
        host=host,
        port=port,
        solve_timeout=solve_timeout,
        max_concurrent_solves=max_solves,
    )
    try:
        web_app = create_app(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    typer.echo(f"Listening on http://{host}:{port}")
    web.run_app(web_app, host=host, port=port, print=None)


if __name__ == "__main__":
    app()
