"""Shared fixtures for the versiongate test suite."""

import subprocess
from pathlib import Path
from typing import Callable

import pytest

CARGO_TEMPLATE = """\
[package]
name = "morfo"
version = "{version}"
edition = "2021"

[dependencies]
clap = {{ version = "4.4", features = ["derive"] }}
"""


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True, text=True)


@pytest.fixture
def cargo_manifest() -> Callable[[str], str]:
    """Render a Cargo.toml with the given package version."""
    return lambda version: CARGO_TEMPLATE.format(version=version)


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, cargo_manifest) -> Callable[[str], Path]:
    """
    Build a git repository whose ``main`` branch commits Cargo.toml.

    Returns a factory taking the main-branch version; the working directory
    is switched into the repository, on a ``feature`` branch.
    """
    def make(main_version: str) -> Path:
        repo = tmp_path / "repo"
        repo.mkdir()
        _git(repo, "init", "-q")
        _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
        _git(repo, "config", "user.email", "ci@example.com")
        _git(repo, "config", "user.name", "CI")
        _git(repo, "config", "commit.gpgsign", "false")
        (repo / "Cargo.toml").write_text(cargo_manifest(main_version), encoding="utf-8")
        _git(repo, "add", "Cargo.toml")
        _git(repo, "commit", "-q", "-m", "initial")
        _git(repo, "checkout", "-q", "-b", "feature")
        monkeypatch.chdir(repo)
        return repo

    return make
