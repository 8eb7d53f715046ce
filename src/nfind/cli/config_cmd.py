"""Config subcommands: get, set, list, reset-recent for global nfind settings."""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from nfind.cli._shared import FORMAT_OPTION
from nfind.utils.config import SETTING_KEYS, load_settings, reset_recent_files, update_setting
from nfind.utils.output import error, info, output, success

config_app = typer.Typer(no_args_is_help=True)


def _check_key(key: str) -> None:
    if key not in SETTING_KEYS:
        error(f"Unknown key: {key}. Valid keys: {', '.join(SETTING_KEYS)}")
        raise typer.Exit(1)


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Get a configuration value."""
    _check_key(key)
    value = getattr(load_settings(), key)
    if fmt == "json":
        output({"key": key, "value": value}, fmt="json")
    elif value is None:
        info(f"{key}: (not set)")
    else:
        info(f"{key}: {value}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Value to set"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Set a configuration value."""
    _check_key(key)
    try:
        settings = update_setting(key, value)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        error(f"Invalid value for {key}: {value} ({reason})")
        raise typer.Exit(1)

    stored = getattr(settings, key)
    if fmt == "json":
        output({"key": key, "value": stored}, fmt="json")
    else:
        success(f"{key} = {stored}")


@config_app.command("list")
def config_list(
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """List configuration values that differ from the defaults."""
    config = load_settings().model_dump(exclude_defaults=True)
    if fmt == "json":
        output(config, fmt="json")
    elif config:
        for k, v in sorted(config.items()):
            info(f"{k}: {v}")
    else:
        info("No configuration set")


@config_app.command("reset-recent")
def config_reset_recent() -> None:
    """Forget the recently searched files."""
    reset_recent_files()
    success("Recent files cleared")
