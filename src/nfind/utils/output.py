"""Console output: json for scripts, rich text for terminals."""

from __future__ import annotations

import json
import sys
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from nfind.utils.config import load_settings

console = Console()
error_console = Console(stderr=True)


def is_piped() -> bool:
    return not sys.stdout.isatty()


def resolve_format(fmt: str | None) -> str:
    """Pick the output format: explicit value, configured default, else json when piped."""
    if fmt is not None:
        return fmt
    configured = load_settings().default_format
    if configured is not None:
        return configured
    return "json" if is_piped() else "text"


def to_json(data: Any) -> str:
    """Serialize models, containers and scalars; scalars are wrapped as ``{"value": ...}``."""
    if isinstance(data, BaseModel):
        return data.model_dump_json(indent=2)
    if isinstance(data, (dict, list)):
        return json.dumps(data, indent=2, default=str)
    return json.dumps({"value": data if isinstance(data, str) else str(data)})


def output(data: Any, fmt: str | None = None) -> None:
    """Write ``data`` as plain json (piped/``--format json``) or highlighted on the console."""
    if resolve_format(fmt) == "json":
        print(to_json(data))
    elif isinstance(data, (BaseModel, dict, list)):
        console.print_json(to_json(data))
    else:
        console.print(str(data), markup=False, soft_wrap=True)


# Messages may carry deck paths, which can contain rich markup brackets.
def error(msg: str) -> None:
    error_console.print(f"[red]Error:[/red] {escape(msg)}", soft_wrap=True)


def success(msg: str) -> None:
    console.print(f"[green]{escape(msg)}[/green]", soft_wrap=True)


def info(msg: str) -> None:
    console.print(f"[dim]{escape(msg)}[/dim]", soft_wrap=True)
