"""Shared test fixtures: captured git output, fake runners, temp git repos."""

from __future__ import annotations

import logging
import subprocess
import textwrap
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from imgreview.git.models import GitOutput


def git(repo: Path, *args: str) -> str:
    """Run git in *repo* for test setup and return stdout."""
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True,
    )
    return result.stdout


def commit_file(repo: Path, name: str, content: bytes, message: str) -> str:
    """Write *name*, commit it, and return the new commit hash."""
    target = repo / name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content)
    git(repo, "add", name)
    git(repo, "commit", "-m", message)
    return git(repo, "rev-parse", "HEAD").strip()


class FakeRunner:
    """Stands in for SubprocessRunner; replays canned output and records calls."""

    def __init__(
        self,
        stdout: bytes = b"",
        stderr: bytes = b"",
        success: bool = True,
        responses: Optional[Dict[Tuple[str, ...], GitOutput]] = None,
    ) -> None:
        self.default = GitOutput(stdout=stdout, stderr=stderr, success=success)
        self.responses = responses or {}
        self.calls: List[Tuple[List[str], Path]] = []

    def __call__(self, args: Sequence[str], cwd: Path) -> GitOutput:
        self.calls.append((list(args), cwd))
        return self.responses.get(tuple(args), self.default)


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("imgreview")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_status() -> str:
    """Porcelain status covering every mapped code plus noise."""
    return textwrap.dedent("""\
         M assets/logo.png
        M  staged.jpg
        MM both.gif
        A  new/added.svg
        AM added_then_modified.webp
         D removed.bmp
        D  staged_removed.ico
        ?? untracked.jpeg
        R  old.png -> renamed.png
        UU conflict.png
         M src/main.py
        ?? notes.txt
        !! ignored.png
        x
    """)


@pytest.fixture
def sample_log() -> str:
    """Two commits in the pipe-delimited history format, newest first."""
    return (
        "9f2c1e0d4b6a8c3e5f7a9b1d2c4e6f8a0b2c4d6e|9f2c1e0|Second commit|Test User|2024-03-02 10:15:00 +0100\n"
        "1a3b5c7d9e1f3a5b7c9d1e3f5a7b9c1d3e5f7a9b|1a3b5c7|First commit|Test User|2024-03-01 09:00:00 +0100\n"
    )


@pytest.fixture
def empty_git_repo(tmp_path: Path) -> Path:
    """A freshly initialised repository with no commits."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    git(tmp_path, "config", "user.email", "test@test.com")
    git(tmp_path, "config", "user.name", "Test User")
    git(tmp_path, "config", "commit.gpgsign", "false")
    return tmp_path


@pytest.fixture
def tmp_git_repo(empty_git_repo: Path) -> Path:
    """A repository with a single initial commit containing README.md."""
    commit_file(empty_git_repo, "README.md", b"# Test\n", "Initial")
    return empty_git_repo
