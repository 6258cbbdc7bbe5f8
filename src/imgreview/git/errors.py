"""Error taxonomy for git interaction.

Every error carries a descriptive message; ``str(exc)`` is what crosses the
request/response boundary.
"""

from __future__ import annotations


class GitError(Exception):
    """Base class for failures surfaced to the presentation layer."""


class PathNotFound(GitError):
    """The supplied repository path does not exist on disk."""


class SpawnFailure(GitError):
    """git could not be launched (not installed, permission denied)."""


class CommandFailure(GitError):
    """git launched but exited non-zero."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class FileNotAtRevision(GitError):
    """The requested path is absent from the requested revision's tree."""

    def __init__(self, message: str, revision: str = "", file_path: str = "") -> None:
        super().__init__(message)
        self.revision = revision
        self.file_path = file_path
