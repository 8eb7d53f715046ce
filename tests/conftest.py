"""Shared fixtures: include-deck trees under tmp_path, isolated global config."""

from __future__ import annotations

from pathlib import Path

import pytest


def write_deck(root: Path, files: dict[str, str]) -> dict[str, Path]:
    """Write ``{relative_name: content}`` under root and return name -> path."""
    paths = {}
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        paths[name] = path
    return paths


@pytest.fixture(autouse=True)
def clean_config(monkeypatch, tmp_path: Path) -> Path:
    """Redirect the global config dir to a temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr("nfind.utils.config.global_config_dir", lambda: config_dir)
    return config_dir


@pytest.fixture
def simple_deck(tmp_path: Path) -> dict[str, Path]:
    """Root deck including sub.dat on line 2; sub.dat holds CARD1 on line 1."""
    return write_deck(
        tmp_path / "model",
        {
            "root.bdf": "$ root deck\nINCLUDE 'sub.dat'\nGRID    1       0.0     0.0     0.0\n",
            "sub.dat": "CARD1 DATA\nCARD2 MORE\n",
        },
    )


@pytest.fixture
def nested_deck(tmp_path: Path) -> dict[str, Path]:
    """Three levels with relative includes, a shared file and a cycle back to the root."""
    return write_deck(
        tmp_path / "model",
        {
            "main.bdf": (
                "SOL 101\n"
                "INCLUDE 'bulk/mesh.bdf'\n"
                "INCLUDE \"loads.dat\"\n"
                "ENDDATA\n"
            ),
            "bulk/mesh.bdf": (
                "GRID    1       0.0     0.0     0.0\n"
                "INCLUDE '../loads.dat'\n"
                "INCLUDE 'props/pshell.bdf'\n"
            ),
            "bulk/props/pshell.bdf": "PSHELL  1       1       0.1\nINCLUDE '../../main.bdf'\n",
            "loads.dat": "FORCE   10      1       0       1.0\nSPC1    100     123456  1\n",
        },
    )
