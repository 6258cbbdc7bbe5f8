"""Parser for the pipe-delimited ``git log`` format used for history.

Records are ``hash|short_hash|subject|author|date``. A line is split on at
most four delimiters; author and date are assumed never to contain ``|``.
Lines that do not yield exactly five fields are dropped.
"""

from __future__ import annotations

from typing import List

from imgreview.config.logging import get_logger
from imgreview.git.adapter import output_lines
from imgreview.git.models import CommitInfo

logger = get_logger(__name__)

FIELD_DELIMITER = "|"
LOG_FORMAT = FIELD_DELIMITER.join(("%H", "%h", "%s", "%an", "%ai"))
_FIELD_COUNT = 5


def log_args(limit: int) -> List[str]:
    """Arguments for a reverse-chronological log of at most *limit* commits."""
    return ["log", f"-{limit}", f"--format={LOG_FORMAT}"]


def parse_log(text: str) -> List[CommitInfo]:
    """Convert log output into CommitInfo records, preserving input order."""
    commits: List[CommitInfo] = []
    for line in output_lines(text):
        parts = line.split(FIELD_DELIMITER, _FIELD_COUNT - 1)
        if len(parts) != _FIELD_COUNT:
            if line:
                logger.debug("log.skipped_line", line=line)
            continue
        commits.append(
            CommitInfo(
                hash=parts[0],
                short_hash=parts[1],
                message=parts[2],
                author=parts[3],
                date=parts[4],
            )
        )
    return commits
