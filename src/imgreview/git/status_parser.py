"""Parser for ``git status --porcelain`` output, filtered to image assets.

Each line is ``XY <path>``: a two-character status code, one separator
character, then the path. Malformed lines, non-image paths and unmapped
status codes are skipped rather than reported.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from imgreview.config.logging import get_logger
from imgreview.git.adapter import output_lines
from imgreview.git.models import ChangedFile, FileStatus

logger = get_logger(__name__)

STATUS_ARGS = ("status", "--porcelain")

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "svg", "webp", "bmp", "ico")

# Keyed on the trimmed two-character code. Renames collapse to "modified".
_STATUS_CODES: Dict[str, FileStatus] = {
    "M": FileStatus.MODIFIED,
    "MM": FileStatus.MODIFIED,
    "A": FileStatus.ADDED,
    "AM": FileStatus.ADDED,
    "D": FileStatus.DELETED,
    "??": FileStatus.ADDED,
    "R": FileStatus.MODIFIED,
}


def is_image_file(path: str) -> bool:
    """Return True if *path* ends in an allow-listed image extension."""
    lowered = path.lower()
    return any(lowered.endswith(f".{ext}") for ext in IMAGE_EXTENSIONS)


def classify_status(code: str) -> Optional[FileStatus]:
    """Map a porcelain status code to a FileStatus, or None if unmapped."""
    return _STATUS_CODES.get(code.strip())


def filename_of(path: str) -> str:
    """Final ``/``-separated segment of *path*, or *path* itself."""
    name = path.rsplit("/", 1)[-1]
    return name or path


def parse_status(text: str) -> List[ChangedFile]:
    """Convert porcelain status text into ChangedFile records."""
    files: List[ChangedFile] = []
    skipped = 0

    for line in output_lines(text):
        if len(line) < 3:
            skipped += 1
            continue

        code = line[:2]
        path = line[3:].strip()

        if not is_image_file(path):
            continue

        status = classify_status(code)
        if status is None:
            skipped += 1
            continue

        files.append(ChangedFile(path=path, filename=filename_of(path), status=status))

    if skipped:
        logger.debug("status.skipped_lines", count=skipped)
    return files
