"""Shared CLI utilities to avoid circular imports."""

from __future__ import annotations

import typer

FORMAT_OPTION = typer.Option(None, "--format", "-F", help="Output format: json or text")
ROOT_ARGUMENT = typer.Argument(..., help="Root input deck (e.g. model.bdf)")
