"""Shared fixtures for speckit-feature tests."""

import subprocess
from pathlib import Path

import pytest

from speckit_feature.logging_config import setup_logging
from speckit_feature.vcs import is_git_available

requires_git = pytest.mark.skipif(not is_git_available(), reason="git executable not available")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's SPECIFY_* settings out of the tests."""
    for key in (
        "SPECIFY_REPO_ROOT",
        "SPECIFY_SPECS_DIR",
        "SPECIFY_TEMPLATE",
        "SPECIFY_BRANCH_WORDS",
        "SPECIFY_DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)
    setup_logging()


@pytest.fixture
def repo_dir(tmp_path):
    """A plain directory standing in for a repository without git."""
    root = tmp_path / "repo"
    root.mkdir()
    return root


def _git(cwd: Path, *args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )


@pytest.fixture
def git_repo(repo_dir):
    """An initialised git repository with one empty commit."""
    if not is_git_available():
        pytest.skip("git executable not available")
    _git(repo_dir, "init", "-q")
    _git(repo_dir, "commit", "-q", "--allow-empty", "-m", "init")
    return repo_dir


def current_branch(cwd: Path) -> str:
    return _git(cwd, "rev-parse", "--abbrev-ref", "HEAD").stdout.strip()
