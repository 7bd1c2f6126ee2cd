"""aiohttp application exposing the validator and solver over HTTP."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from aiohttp import web
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import ServiceConfig
from .grid import Board, GridShapeError, parse_puzzle, pretty_board
from .handler import InvalidGridError, SolveReport, coerce_grid, evaluate_grid

log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_ENV = Environment(
    loader=FileSystemLoader(str(BASE_DIR)),
    autoescape=select_autoescape(),
)

CONFIG_KEY = web.AppKey("config", ServiceConfig)
SEMAPHORE_KEY = web.AppKey("solve_semaphore", asyncio.Semaphore)

TIMEOUT_TEXT = "Solving timed out"


async def run_evaluation(app: web.Application, board: Board) -> SolveReport:
    """Evaluate board in a worker thread, bounded by the configured limits.

    The semaphore slot is held until the worker thread finishes, including
    after the wait has timed out, so at most ``max_concurrent_solves`` searches
    run at once. Waiting for a free slot is not part of the timeout.
    """
    config = app[CONFIG_KEY]
    semaphore = app[SEMAPHORE_KEY]
    await semaphore.acquire()
    work = asyncio.ensure_future(asyncio.to_thread(evaluate_grid, board))
    work.add_done_callback(lambda _: semaphore.release())
    if config.solve_timeout is None:
        return await asyncio.shield(work)
    return await asyncio.wait_for(asyncio.shield(work), timeout=config.solve_timeout)


async def handle_hello(_: web.Request) -> web.Response:
    """Liveness check answering plain text."""
    return web.Response(text="Hello World")


async def handle_sudoku(request: web.Request) -> web.Response:
    try:
        payload = await request.json()
    except ValueError:
        log.warning("rejected request from %s: body is not JSON", request.remote)
        raise web.HTTPBadRequest(text="Error processing the JSON body")

    try:
        board = coerce_grid(payload)
    except InvalidGridError as exc:
        log.warning("rejected request from %s: %s", request.remote, exc)
        raise web.HTTPBadRequest(text=str(exc))

    try:
        report = await run_evaluation(request.app, board)
    except asyncio.TimeoutError:
        log.warning("solve exceeded %ss", request.app[CONFIG_KEY].solve_timeout)
        raise web.HTTPServiceUnavailable(text=TIMEOUT_TEXT)
    return web.json_response(report.to_dict())


def render_page(
    puzzle_text: str = "",
    message: Optional[str] = None,
    report: Optional[SolveReport] = None,
    board: Optional[Board] = None,
) -> web.Response:
    template = TEMPLATE_ENV.get_template("ui_template.html")
    return web.Response(
        text=template.render(
            puzzle_text=puzzle_text,
            message=message,
            report=report,
            board_text=pretty_board(board) if board else None,
            solution_text=pretty_board(report.solution) if report and report.solution else None,
        ),
        content_type="text/html",
    )


async def handle_index(_: web.Request) -> web.Response:
    return render_page()


async def handle_solve_form(request: web.Request) -> web.Response:
    reader = await request.post()
    puzzle_text = str(reader.get("puzzle", ""))
    try:
        board = parse_puzzle(puzzle_text)
    except GridShapeError as exc:
        return render_page(puzzle_text, message=str(exc))

    try:
        report = await run_evaluation(request.app, board)
    except asyncio.TimeoutError:
        return render_page(puzzle_text, message=TIMEOUT_TEXT, board=board)
    return render_page(puzzle_text, report=report, board=board)


async def _on_startup(app: web.Application) -> None:
    config = app[CONFIG_KEY]
    log.info(
        "sudoku service ready (max %d concurrent solves, timeout %s)",
        config.max_concurrent_solves,
        config.solve_timeout,
    )


def create_app(config: Optional[ServiceConfig] = None) -> web.Application:
    web_app = web.Application()
    config = (config or ServiceConfig()).validate()
    web_app[CONFIG_KEY] = config
    web_app[SEMAPHORE_KEY] = asyncio.Semaphore(config.max_concurrent_solves)
    web_app.on_startup.append(_on_startup)
    web_app.router.add_get("/", handle_index)
    web_app.router.add_post("/solve", handle_solve_form)
    web_app.router.add_get("/hello", handle_hello)
    web_app.router.add_post("/sudoku", handle_sudoku)
    return web_app
