"""Typer app: search commands (find, files, browse, recent) and config group."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from nfind import __version__
from nfind.cli._shared import FORMAT_OPTION, ROOT_ARGUMENT
from nfind.cli.render import print_results
from nfind.core.engine import Engine
from nfind.utils.config import add_recent_file, recent_files
from nfind.utils.output import console, error, info, output, resolve_format

app = typer.Typer(
    name="nfind",
    help="NASTRAN Find: search an input deck and every file it INCLUDEs.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"nfind {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_find(root: Path, text: str) -> Engine:
    engine = Engine()
    engine.find(root, text)
    if engine.link_count():
        add_recent_file(engine.root)
    return engine


@app.command()
def find(
    root: Path = ROOT_ARGUMENT,
    text: str = typer.Argument("", help="Text to search for (case insensitive)"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Search ROOT and its included files for TEXT."""
    engine = _run_find(root, text)
    if resolve_format(fmt) == "json":
        output(engine.snapshot, fmt="json")
    else:
        print_results(console, engine)
    if not engine.link_count():
        raise typer.Exit(1)


@app.command()
def files(
    root: Path = ROOT_ARGUMENT,
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """List ROOT and every file it includes, in discovery order."""
    engine = _run_find(root, "")
    errors = [engine.error_at(i) for i in range(engine.error_count())]
    if resolve_format(fmt) == "json":
        output({"files": engine.files(), "errors": errors}, fmt="json")
    else:
        console.print(f"{engine.link_count()} file(s) from {engine.root}")
        for path in engine.files():
            console.print(f"  {path}", markup=False, highlight=False, soft_wrap=True)
        for msg in errors:
            error(msg)
    if not engine.link_count():
        raise typer.Exit(1)


@app.command()
def browse(root: Path = ROOT_ARGUMENT) -> None:
    """Browse ROOT interactively: [f] search, [a/z] [s/x] scroll, [q] quit."""
    from nfind.cli.browse import browse as browse_loop

    engine = browse_loop(root)
    if engine.link_count():
        add_recent_file(engine.root)


@app.command()
def recent(fmt: Optional[str] = FORMAT_OPTION) -> None:
    """Show recently searched root files."""
    paths = recent_files()
    if resolve_format(fmt) == "json":
        output(paths, fmt="json")
    elif paths:
        for path in paths:
            console.print(path, markup=False, highlight=False, soft_wrap=True)
    else:
        info("No recent files")


# Register subcommand groups
from nfind.cli.config_cmd import config_app

app.add_typer(config_app, name="config", help="Manage global configuration")
