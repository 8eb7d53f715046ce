"""Interactive browse loop: search a deck and scroll through the results."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.prompt import Prompt

from nfind.cli.render import render_errors, render_header, render_rows, render_summary
from nfind.core.engine import Engine
from nfind.core.layout import PAGE_ROWS, maximum_scroll
from nfind.utils.output import console as default_console
from nfind.utils.output import is_piped

KEYS_HELP = r"\[f] search  \[a/z] line up/down  \[s/x] page up/down  \[q] quit"
_CHOICES = ["f", "a", "z", "s", "x", "q"]

# Rows taken by everything except the scrollable results area.
_CHROME_ROWS = 8


def browse(
    root: str | Path,
    engine: Engine | None = None,
    console: Console | None = None,
    prompt_fn: Callable[..., str] | None = None,
) -> Engine:
    """Show the include tree of ``root`` and loop on search/scroll commands.

    Args:
        root: Root deck to search.
        engine: Engine to drive (injectable for tests).
        console: Rich console for output (injectable for tests).
        prompt_fn: Callable matching Prompt.ask signature (injectable for tests).

    Returns:
        The engine, holding the last search.
    """
    engine = engine or Engine()
    console = console or default_console
    prompt_fn = prompt_fn or Prompt.ask

    if is_piped():
        console.print("[dim]Non-interactive mode detected, use `nfind find` instead[/dim]")
        return engine

    engine.find(root, "")
    scroll = 0
    limit = maximum_scroll(engine)

    while True:
        _draw(console, engine, scroll)
        key = prompt_fn(KEYS_HELP, choices=_CHOICES, default="q").lower()

        if key == "q":
            break
        if key == "f":
            text = prompt_fn("Search", default="")
            engine.find(root, text)
            scroll = 0
            limit = maximum_scroll(engine)
        elif key == "z":
            scroll = min(scroll + 1, limit)
        elif key == "x":
            scroll = min(scroll + PAGE_ROWS, limit)
        elif key == "a":
            scroll = max(scroll - 1, 0)
        elif key == "s":
            scroll = max(scroll - PAGE_ROWS, 0)

    return engine


def _draw(console: Console, engine: Engine, scroll: int) -> None:
    errors = render_errors(engine)
    height = max(console.size.height - _CHROME_ROWS - len(errors), 1)

    console.clear()
    for row in render_header(engine):
        console.print(row, no_wrap=True, overflow="crop")
    console.print(render_summary(engine, scroll))
    console.rule()
    for row in render_rows(engine)[scroll : scroll + height]:
        console.print(row, no_wrap=True, overflow="crop")
    for row in errors:
        console.print(row, no_wrap=True, overflow="crop")
    console.rule()
