"""Before/after image loading for the reviewer's comparison view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from imgreview.config.logging import get_logger
from imgreview.git.adapter import GitRunner
from imgreview.git.content import (
    HEAD,
    data_uri,
    get_file_at_revision,
    mime_type_for,
    read_working_copy,
)
from imgreview.git.errors import FileNotAtRevision
from imgreview.git.models import ChangedFile, FileStatus
from imgreview.git.repository import PathLike, require_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class ImagePair:
    """Base64 content of two versions of one image; either side may be absent."""

    file_path: str
    mime_type: str
    previous: Optional[str] = None
    current: Optional[str] = None

    @property
    def previous_src(self) -> Optional[str]:
        return data_uri(self.file_path, self.previous) if self.previous is not None else None

    @property
    def current_src(self) -> Optional[str]:
        return data_uri(self.file_path, self.current) if self.current is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "mime_type": self.mime_type,
            "previous": self.previous,
            "current": self.current,
        }


def _load(
    repository_path: PathLike,
    file_path: str,
    revision: Optional[str],
    runner: Optional[GitRunner],
) -> Optional[str]:
    """Load one side; ``revision=None`` means the working directory."""
    try:
        if revision is None:
            return read_working_copy(repository_path, file_path)
        return get_file_at_revision(repository_path, file_path, revision, runner=runner)
    except FileNotAtRevision as exc:
        logger.debug("review.side_unavailable", file=file_path, reason=str(exc))
        return None


def load_image_pair(
    repository_path: PathLike,
    changed_file: ChangedFile,
    *,
    runner: Optional[GitRunner] = None,
) -> ImagePair:
    """Load HEAD and on-disk versions of a changed image.

    Deleted files have no current side and added files have no previous
    side. A side that cannot be read is left as None.
    """
    require_path(repository_path)
    path = changed_file.path

    current = None
    if changed_file.status is not FileStatus.DELETED:
        current = _load(repository_path, path, None, runner)

    previous = None
    if changed_file.status is not FileStatus.ADDED:
        previous = _load(repository_path, path, HEAD, runner)

    return ImagePair(
        file_path=path,
        mime_type=mime_type_for(path),
        previous=previous,
        current=current,
    )


def compare_revisions(
    repository_path: PathLike,
    file_path: str,
    base: Optional[str] = None,
    compare: Optional[str] = None,
    *,
    runner: Optional[GitRunner] = None,
) -> ImagePair:
    """Load *file_path* at two revisions; None selects the working directory."""
    require_path(repository_path)
    return ImagePair(
        file_path=file_path,
        mime_type=mime_type_for(file_path),
        previous=_load(repository_path, file_path, base, runner),
        current=_load(repository_path, file_path, compare, runner),
    )
