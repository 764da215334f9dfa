"""Command-line interface for the text file reader."""
from __future__ import annotations

import json
from pathlib import Path
import sys
from typing import Dict, List, Optional, Tuple

import typer

from .config import ConfigError, load_config
from .constants import DEFAULT_PLAN_MANIFEST_NAME
from .errors import ExitCode, ReaderError
from .job import ReaderJob
from .logging_utils import get_logger, setup_logging
from .manifest import build_plan_records, write_plan_manifest
from .params import ReaderParams, load_config_params, merge_params, params_from_config
from .resolver import PathResolver

app = typer.Typer(help="Text file reader: resolve path specifications and split them for parallel reading")
logger = get_logger(__name__)


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", help="Log debug details"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Configure logging for every command."""

    setup_logging(verbose=verbose, log_file=Path(log_file) if log_file else None)


def _fail(exc: ReaderError) -> typer.Exit:
    hint = f" (hint: {exc.hint})" if exc.hint else ""
    typer.echo(f"ERROR: {exc.message}{hint}", err=True)
    return typer.Exit(code=exc.exit_code)


def _load_params(paths: Optional[List[str]], config: Optional[str]) -> Tuple[ReaderParams, Dict[str, str]]:
    try:
        user_config = load_config_params(config)
        return merge_params(user_config, {"path": list(paths) if paths else None})
    except ConfigError as exc:
        typer.echo(f"Failed to load config: {exc}", err=True)
        raise typer.Exit(code=ExitCode.INVALID_CONFIG)
    except ReaderError as exc:
        raise _fail(exc)


@app.command()
def resolve(
    paths: Optional[List[str]] = typer.Argument(None, help="Files, directories or wildcard patterns"),
    config: Optional[str] = typer.Option(None, help="Path to job config file"),
    json_output: bool = typer.Option(False, "--json", help="Print the file list as JSON"),
) -> None:
    """Resolve path specifications into the list of files to read."""

    params, sources = _load_params(paths, config)
    logger.debug("Path specifications from %s: %s", sources["path"], params.path)
    try:
        files = PathResolver().resolve(params.path)
    except ReaderError as exc:
        raise _fail(exc)

    if json_output:
        typer.echo(json.dumps(files, ensure_ascii=False, indent=2))
    else:
        for file_name in files:
            typer.echo(file_name)
    raise typer.Exit(code=ExitCode.SUCCESS)


@app.command()
def split(
    paths: Optional[List[str]] = typer.Argument(None, help="Files, directories or wildcard patterns"),
    advice: int = typer.Option(..., "--advice", help="Requested number of reader tasks"),
    config: Optional[str] = typer.Option(None, help="Path to job config file"),
    out: Optional[str] = typer.Option(
        None, "--out", help=f"Write the split plan manifest (e.g. {DEFAULT_PLAN_MANIFEST_NAME})"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the split plan as JSON lines"),
) -> None:
    """Resolve path specifications and split the files into reader tasks."""

    params, _ = _load_params(paths, config)
    job = ReaderJob(params)
    try:
        job.prepare()
        tasks = job.split(advice)
    except ReaderError as exc:
        raise _fail(exc)

    records = build_plan_records(tasks, params)
    if out:
        manifest_path = write_plan_manifest(records, Path(out))
        logger.info("Split plan written to %s", manifest_path)

    if json_output:
        for record in records:
            typer.echo(json.dumps(record, ensure_ascii=False, sort_keys=True))
    else:
        typer.echo(f"split: {len(job.source_files)} file(s) into {len(tasks)} task(s)")
        for task in tasks:
            typer.echo(f"  - task {task.index}: {len(task.files)} file(s)")
    raise typer.Exit(code=ExitCode.SUCCESS)


@app.command("check-config")
def check_config(
    config: str = typer.Argument(..., help="Path to job config file"),
    json_output: bool = typer.Option(False, "--json", help="Print the validated config as JSON"),
) -> None:
    """Validate a job config file against the defaults and rules."""

    try:
        params = params_from_config(load_config(Path(config)))
    except ConfigError as exc:
        typer.echo(f"Failed to load config: {exc}", err=True)
        raise typer.Exit(code=ExitCode.INVALID_CONFIG)
    except ReaderError as exc:
        raise _fail(exc)

    if json_output:
        typer.echo(json.dumps(params.to_dict(), ensure_ascii=False, sort_keys=True, indent=2))
    else:
        typer.echo("check-config: OK")
    raise typer.Exit(code=ExitCode.SUCCESS)


def main(argv: Optional[list[str]] = None) -> int:
    """Entrypoint for console script."""

    argv = argv if argv is not None else sys.argv[1:]
    app(prog_name="txtfile-reader", args=list(argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
