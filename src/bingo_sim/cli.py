from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from .config import resolve_parameters
from .core import Game, Win
from .errors import ParseError
from .logging_setup import setup_logging
from .parser import load_input
from .serialize import build_report, build_run_meta, emit_report_json, ensure_parent
from .verify import verify_input
from .version import __version__

app = typer.Typer(help="Bingo elimination simulator: first and last winning board scores")

logger = logging.getLogger(__name__)


def _format_answer(win: Optional[Win]) -> str:
    return "none" if win is None else str(win.score)


@app.callback(invoke_without_command=True)
def common_options(
    version: bool = typer.Option(
        False, "--version", help="Show application version and exit", is_eager=True
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)


@app.command()
def run(
    input_path: str = typer.Option(None, "--input", help="Puzzle input file (default input.txt)"),
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    out_report: str = typer.Option(None, "--out-report", help="report.json output path"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    colors: str = typer.Option(None, "--colors", help="auto|always|never"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARN|ERROR"),
    force: bool = typer.Option(False, "--force", help="Overwrite report if it exists"),
    no_mkdirs: bool = typer.Option(False, "--no-mkdirs", help="Do not create parent directories"),
) -> None:
    """Replay the draws and print the first and last winning scores."""

    cli_overrides: Dict[str, Any] = {
        "input": input_path,
        "out_report": out_report,
        "log_file": log_file,
        "colors": colors,
        "log_level": log_level,
    }

    try:
        resolved, params_hash, _cfg_path = resolve_parameters(
            config_path_str=config, cli_overrides=cli_overrides
        )
    except (OSError, ValueError) as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(code=1)

    log_file_path = resolved.get("log_file")
    try:
        if log_file_path:
            ensure_parent(Path(log_file_path), mkdirs=(not no_mkdirs))
        setup_logging(
            level=str(resolved.get("log_level", "INFO")),
            log_file=log_file_path,
            json_format=(str(resolved.get("log_format", "text")) == "json"),
            colors=str(resolved.get("colors", "auto")),
        )
    except (OSError, ValueError) as exc:
        typer.echo(f"Logging error: {exc}", err=True)
        raise typer.Exit(code=1)

    input_file = Path(resolved.get("input") or "input.txt")
    try:
        draws, boards = load_input(input_file)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1)
    except ParseError as exc:
        logger.error("Failed to parse %s: %s", input_file, exc)
        raise typer.Exit(code=1)

    logger.info("Loaded %d boards and %d draws from %s", len(boards), len(draws), input_file)
    checks = verify_input(draws, boards)
    if not checks["ok_no_duplicates_within_boards"]:
        logger.warning(
            "Boards with duplicate values: %s", checks["duplicate_values_within_boards"]
        )
    if not checks["ok_draws_distinct"]:
        logger.warning("Repeated draws: %s", checks["repeated_draws"])

    start_time = time.time()
    game = Game(boards, draws)
    first = game.find_first_winner()
    last = game.find_last_winner()
    elapsed = time.time() - start_time

    if first is None:
        logger.warning("No board completed before the draws ran out")
    elif last is None:
        logger.warning("Draws ran out before every board completed")
    logger.info("Simulation finished in %.3fs", elapsed)

    typer.echo(f"Part 1: {_format_answer(first)}")
    typer.echo(f"Part 2: {_format_answer(last)}")

    if resolved.get("out_report"):
        out_report_path = Path(resolved["out_report"])
        report = build_report(
            run_meta=build_run_meta(
                app_version=__version__,
                input_path=str(input_file),
                params_hash=params_hash,
            ),
            draws=draws,
            boards=boards,
            first=first,
            last=last,
            winners=game.winners(),
        )
        try:
            emit_report_json(out_report_path, report=report, mkdirs=(not no_mkdirs), overwrite=force)
        except OSError as exc:
            logger.error("%s", exc)
            raise typer.Exit(code=1)
        logger.info("Report written to %s", out_report_path)

    raise typer.Exit(code=0)


@app.command()
def check(
    input_path: str = typer.Option("input.txt", "--input", help="Puzzle input file"),
) -> None:
    """Parse the input and print a sanity report as JSON."""
    try:
        draws, boards = load_input(Path(input_path))
    except (FileNotFoundError, ParseError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    report = verify_input(draws, boards)
    typer.echo(json.dumps(report, ensure_ascii=True, sort_keys=True, indent=2))
    raise typer.Exit(code=0)


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
