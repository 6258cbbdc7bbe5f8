"""The five operations offered to the presentation layer.

Each call is stateless: it validates the repository path, runs at most one
git command and parses its output. Every function accepts an optional
``runner`` so a captured-output fake can stand in for the real git binary.
"""

from __future__ import annotations

from typing import List, Optional

from imgreview.git.adapter import GitRunner, ensure_success, run_git
from imgreview.git.content import HEAD, get_file_at_revision
from imgreview.git.log_parser import log_args, parse_log
from imgreview.git.models import ChangedFile, CommitInfo
from imgreview.git.repository import PathLike, require_path
from imgreview.git.repository import validate_repository as _validate_repository
from imgreview.git.status_parser import STATUS_ARGS, parse_status


def validate_repository(path: PathLike) -> bool:
    """Return whether *path* is the root of a git working copy."""
    return _validate_repository(path)


def list_changed_images(
    repository_path: PathLike,
    *,
    runner: Optional[GitRunner] = None,
) -> List[ChangedFile]:
    """Return image files with pending changes (modified, added, deleted)."""
    repo = require_path(repository_path)
    output = run_git(STATUS_ARGS, cwd=repo, runner=runner)
    ensure_success(output, "git status")
    return parse_status(output.stdout_text)


def get_file_at_head(
    repository_path: PathLike,
    file_path: str,
    *,
    runner: Optional[GitRunner] = None,
) -> str:
    """Return base64 content of *file_path* at HEAD."""
    return get_file_at_revision(repository_path, file_path, HEAD, runner=runner)


def list_commits(
    repository_path: PathLike,
    limit: int,
    *,
    runner: Optional[GitRunner] = None,
) -> List[CommitInfo]:
    """Return up to *limit* commits, most recent first."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValueError(f"limit must be a non-negative integer, got {limit!r}")
    repo = require_path(repository_path)
    output = run_git(log_args(limit), cwd=repo, runner=runner)
    ensure_success(output, "git log")
    return parse_log(output.stdout_text)


def get_file_at_commit(
    repository_path: PathLike,
    file_path: str,
    commit_id: str,
    *,
    runner: Optional[GitRunner] = None,
) -> str:
    """Return base64 content of *file_path* as of *commit_id*."""
    return get_file_at_revision(repository_path, file_path, commit_id, runner=runner)
