"""Data models for status, log, and process output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class FileStatus(str, Enum):
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class ChangedFile:
    """An image asset with a pending change in the working copy."""

    path: str
    filename: str
    status: FileStatus

    def to_dict(self) -> Dict[str, str]:
        return {
            "path": self.path,
            "filename": self.filename,
            "status": self.status.value,
        }


@dataclass(frozen=True, slots=True)
class CommitInfo:
    """One entry of ``git log`` output."""

    hash: str
    short_hash: str
    message: str
    author: str
    date: str  # author-local ISO-like timestamp, verbatim from git

    def to_dict(self) -> Dict[str, str]:
        return {
            "hash": self.hash,
            "short_hash": self.short_hash,
            "message": self.message,
            "author": self.author,
            "date": self.date,
        }


@dataclass(frozen=True)
class GitOutput:
    """Captured result of a single git invocation."""

    stdout: bytes
    stderr: bytes
    success: bool

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace").strip()
