"""Tests for nfind config subcommands."""

import json

import pytest
from typer.testing import CliRunner

from nfind.cli.main import app
from nfind.utils.config import (
    Settings,
    add_recent_file,
    load_settings,
    recent_files,
    settings_path,
    update_setting,
)

runner = CliRunner()


class TestConfigSetGet:
    def test_set_and_get(self):
        result = runner.invoke(app, ["config", "set", "max_recent", "3"])
        assert result.exit_code == 0
        assert "max_recent = 3" in result.output

        result = runner.invoke(app, ["config", "get", "max_recent", "--format", "json"])
        assert json.loads(result.output) == {"key": "max_recent", "value": 3}

    def test_get_unset(self):
        result = runner.invoke(app, ["config", "get", "default_format"])
        assert result.exit_code == 0
        assert "(not set)" in result.output

    def test_unknown_key(self):
        result = runner.invoke(app, ["config", "set", "colour", "red"])
        assert result.exit_code == 1
        assert "Unknown key" in result.output

    def test_invalid_value(self):
        result = runner.invoke(app, ["config", "set", "max_recent", "zero"])
        assert result.exit_code == 1
        result = runner.invoke(app, ["config", "set", "max_recent", "0"])
        assert result.exit_code == 1
        result = runner.invoke(app, ["config", "set", "default_format", "xml"])
        assert result.exit_code == 1

    def test_list(self):
        runner.invoke(app, ["config", "set", "default_format", "text"])
        result = runner.invoke(app, ["config", "list", "--format", "json"])
        assert json.loads(result.output) == {"default_format": "text"}

    def test_list_empty(self):
        result = runner.invoke(app, ["config", "list"])
        assert "No configuration set" in result.output


class TestRecentFiles:
    def test_cap(self):
        runner.invoke(app, ["config", "set", "max_recent", "2"])
        for name in ("a", "b", "c"):
            add_recent_file(f"/decks/{name}.bdf")
        assert recent_files() == ["/decks/c.bdf", "/decks/b.bdf"]

    def test_reset(self):
        add_recent_file("/decks/a.bdf")
        runner.invoke(app, ["config", "set", "max_recent", "4"])
        result = runner.invoke(app, ["config", "reset-recent"])
        assert result.exit_code == 0
        assert recent_files() == []
        assert load_settings().model_dump(exclude_defaults=True) == {"max_recent": 4}

    def test_default_format_applies(self, simple_deck):
        runner.invoke(app, ["config", "set", "default_format", "text"])
        result = runner.invoke(app, ["find", str(simple_deck["root.bdf"]), "card1"])
        assert "Results: 1 occurrences in 2 files." in result.output


class TestSettings:
    def test_defaults_without_file(self):
        assert not settings_path().exists()
        assert load_settings() == Settings()
        assert load_settings().max_recent == 10

    def test_file_holds_only_changed_values(self):
        update_setting("default_format", "json")
        assert json.loads(settings_path().read_text()) == {"default_format": "json"}

    def test_set_reports_reason(self):
        result = runner.invoke(app, ["config", "set", "max_recent", "many"])
        assert result.exit_code == 1
        assert "Invalid value for max_recent" in result.output
        assert not settings_path().exists()

    def test_get_default(self):
        result = runner.invoke(app, ["config", "get", "max_recent", "--format", "json"])
        assert json.loads(result.output) == {"key": "max_recent", "value": 10}

    def test_update_rejects_unknown_key(self):
        with pytest.raises(KeyError):
            update_setting("recent_files", ["/decks/a.bdf"])

    def test_path_with_brackets_printed_verbatim(self):
        add_recent_file("/decks/[red]wing.bdf")
        result = runner.invoke(app, ["recent", "--format", "text"])
        assert "/decks/[red]wing.bdf" in result.output
