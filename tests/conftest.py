"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Point the config file at a temporary location for every test."""
    cfg_dir = tmp_path / "_config"
    monkeypatch.setattr("henv.config.CONFIG_PATH", cfg_dir / "config.json")
    monkeypatch.setattr("henv.config._README_PATH", cfg_dir / "README.md")
    return cfg_dir / "config.json"


@pytest.fixture
def no_git(monkeypatch) -> None:
    """Make repository-root resolution fail so the given path is used as-is."""
    monkeypatch.setattr("henv.git.GitCli.resolve", lambda self, path: None)


def write_env(directory: Path, name: str, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content)
    return path


def make_project(base: Path, name: str) -> Path:
    project = base / name
    (project / ".git").mkdir(parents=True)
    return project
