"""JSON rendering of listings for scripts and GUI hosts."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from imgreview.git.models import ChangedFile, CommitInfo


def files_to_list(files: Sequence[ChangedFile]) -> List[Dict[str, Any]]:
    return [f.to_dict() for f in files]


def commits_to_list(commits: Sequence[CommitInfo]) -> List[Dict[str, Any]]:
    return [c.to_dict() for c in commits]


def render_files(files: Sequence[ChangedFile]) -> str:
    """Return changed files as a formatted JSON array."""
    return json.dumps(files_to_list(files), indent=2)


def render_commits(commits: Sequence[CommitInfo]) -> str:
    """Return commits as a formatted JSON array."""
    return json.dumps(commits_to_list(commits), indent=2)
