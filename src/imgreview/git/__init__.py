"""Git interface layer: process invoker, output parsers, models, errors."""

from imgreview.git.adapter import GitRunner, SubprocessRunner, ensure_success, run_git
from imgreview.git.content import (
    HEAD,
    data_uri,
    get_file_at_revision,
    mime_type_for,
    read_working_copy,
)
from imgreview.git.errors import (
    CommandFailure,
    FileNotAtRevision,
    GitError,
    PathNotFound,
    SpawnFailure,
)
from imgreview.git.log_parser import LOG_FORMAT, log_args, parse_log
from imgreview.git.models import ChangedFile, CommitInfo, FileStatus, GitOutput
from imgreview.git.repository import require_path, validate_repository
from imgreview.git.status_parser import (
    IMAGE_EXTENSIONS,
    STATUS_ARGS,
    classify_status,
    is_image_file,
    parse_status,
)

__all__ = [
    "HEAD",
    "IMAGE_EXTENSIONS",
    "LOG_FORMAT",
    "STATUS_ARGS",
    "ChangedFile",
    "CommandFailure",
    "CommitInfo",
    "FileNotAtRevision",
    "FileStatus",
    "GitError",
    "GitOutput",
    "GitRunner",
    "PathNotFound",
    "SpawnFailure",
    "SubprocessRunner",
    "classify_status",
    "data_uri",
    "ensure_success",
    "get_file_at_revision",
    "is_image_file",
    "log_args",
    "mime_type_for",
    "parse_log",
    "parse_status",
    "read_working_copy",
    "require_path",
    "run_git",
    "validate_repository",
]
