"""Fetch file content at a revision and encode it for string transport."""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Dict, Optional

from imgreview.config.logging import get_logger
from imgreview.git.adapter import GitRunner, run_git
from imgreview.git.errors import FileNotAtRevision
from imgreview.git.repository import PathLike, require_path

logger = get_logger(__name__)

HEAD = "HEAD"
WORKING_TREE = "working tree"

_MIME_TYPES: Dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "ico": "image/x-icon",
}


def encode(data: bytes) -> str:
    """Standard-alphabet base64 of *data* as an ASCII string."""
    return base64.b64encode(data).decode("ascii")


def get_file_at_revision(
    repository_path: PathLike,
    file_path: str,
    revision: str,
    runner: Optional[GitRunner] = None,
) -> str:
    """Return base64 of *file_path* as stored in *revision*.

    The whole blob is read into memory; no size limit is applied.
    """
    repo = require_path(repository_path)
    output = run_git(["show", f"{revision}:{file_path}"], cwd=repo, runner=runner)
    if not output.success:
        where = "HEAD" if revision == HEAD else f"commit {revision}"
        logger.debug("content.missing", file=file_path, revision=revision)
        raise FileNotAtRevision(
            f"File does not exist at {where}: {output.stderr_text}",
            revision=revision,
            file_path=file_path,
        )
    return encode(output.stdout)


def read_working_copy(repository_path: PathLike, file_path: str) -> str:
    """Return base64 of *file_path* as it currently exists on disk."""
    repo = require_path(repository_path)
    target = repo / Path(file_path)
    try:
        data = target.read_bytes()
    except OSError as exc:
        raise FileNotAtRevision(
            f"File does not exist in the {WORKING_TREE}: {file_path} ({exc.strerror})",
            revision=WORKING_TREE,
            file_path=file_path,
        ) from exc
    return encode(data)


def mime_type_for(path: str) -> str:
    ext = path.rsplit(".", 1)[-1].lower() if "." in path else ""
    return _MIME_TYPES.get(ext, "application/octet-stream")


def data_uri(path: str, encoded: str) -> str:
    """Build a ``data:`` URI for base64 *encoded* content of *path*."""
    return f"data:{mime_type_for(path)};base64,{encoded}"
