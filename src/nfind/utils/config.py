"""User settings stored as JSON under ``~/.config/nfind``.

The file only records values that differ from the defaults, so a settings
file written by an older release keeps working when defaults change.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, PositiveInt

DEFAULT_MAX_RECENT = 10

# Keys the ``config`` commands may read and write; recent files have their own commands.
SETTING_KEYS = ("default_format", "max_recent")


class Settings(BaseModel):
    """Everything nfind remembers between runs."""

    max_recent: PositiveInt = DEFAULT_MAX_RECENT
    default_format: Optional[Literal["json", "text"]] = None
    recent_files: list[str] = Field(default_factory=list)


def global_config_dir() -> Path:
    config = Path.home() / ".config" / "nfind"
    config.mkdir(parents=True, exist_ok=True)
    return config


def settings_path() -> Path:
    return global_config_dir() / "settings.json"


def load_settings() -> Settings:
    path = settings_path()
    if path.exists():
        return Settings.model_validate_json(path.read_text())
    return Settings()


def save_settings(settings: Settings) -> None:
    settings_path().write_text(settings.model_dump_json(indent=2, exclude_defaults=True))


def update_setting(key: str, value: object) -> Settings:
    """Validate ``value`` for ``key`` and persist it.

    Raises:
        KeyError: ``key`` is not one of SETTING_KEYS.
        pydantic.ValidationError: ``value`` is not acceptable for ``key``.
    """
    if key not in SETTING_KEYS:
        raise KeyError(key)
    settings = Settings.model_validate({**load_settings().model_dump(), key: value})
    save_settings(settings)
    return settings


def recent_files() -> list[str]:
    return load_settings().recent_files


def add_recent_file(path: str) -> list[str]:
    """Move ``path`` to the front of the recent-files list, capped at ``max_recent``."""
    settings = load_settings()
    recent = [path] + [p for p in settings.recent_files if p != path]
    settings.recent_files = recent[: settings.max_recent]
    save_settings(settings)
    return settings.recent_files


def reset_recent_files() -> None:
    settings = load_settings()
    settings.recent_files = []
    save_settings(settings)
