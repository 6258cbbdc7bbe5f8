"""Request/response boundary for a GUI host.

Requests are JSON objects ``{"id": ..., "command": ..., "args": {...}}``.
Responses echo the id and carry either ``{"ok": true, "result": ...}`` or
``{"ok": false, "error": "<message>"}``. Errors never escape as exceptions.
"""

from __future__ import annotations

import json
from typing import IO, Any, Callable, Dict, Optional

from imgreview import api, review
from imgreview.config.logging import get_logger
from imgreview.git.adapter import GitRunner
from imgreview.git.errors import GitError
from imgreview.git.models import ChangedFile, FileStatus
from imgreview.git.status_parser import filename_of

logger = get_logger(__name__)

Handler = Callable[..., Any]


def _changed_file_from(data: Dict[str, Any]) -> ChangedFile:
    return ChangedFile(
        path=data["path"],
        filename=data.get("filename") or filename_of(data["path"]),
        status=FileStatus(data["status"]),
    )


def _load_image_pair(
    repository_path: str,
    changed_file: Dict[str, Any],
    runner: Optional[GitRunner] = None,
) -> review.ImagePair:
    return review.load_image_pair(
        repository_path, _changed_file_from(changed_file), runner=runner
    )


def _validate_repository(path: str, runner: Optional[GitRunner] = None) -> bool:
    return api.validate_repository(path)


COMMANDS: Dict[str, Handler] = {
    "validate_repository": _validate_repository,
    "list_changed_images": api.list_changed_images,
    "get_file_at_head": api.get_file_at_head,
    "list_commits": api.list_commits,
    "get_file_at_commit": api.get_file_at_commit,
    "load_image_pair": _load_image_pair,
    "compare_revisions": review.compare_revisions,
}


def _serialise(value: Any) -> Any:
    if isinstance(value, list):
        return [_serialise(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def _error(request_id: Any, message: str) -> Dict[str, Any]:
    return {"id": request_id, "ok": False, "error": message}


def handle(request: Dict[str, Any], runner: Optional[GitRunner] = None) -> Dict[str, Any]:
    """Dispatch one request and build its response."""
    if not isinstance(request, dict):
        return _error(None, "Request must be a JSON object")

    request_id = request.get("id")
    command = request.get("command")
    args = request.get("args") or {}

    handler = COMMANDS.get(command) if isinstance(command, str) else None
    if handler is None:
        return _error(request_id, f"Unknown command: {command}")
    if not isinstance(args, dict):
        return _error(request_id, "args must be a JSON object")

    try:
        result = handler(**args, runner=runner)
    except GitError as exc:
        return _error(request_id, str(exc))
    except (TypeError, ValueError, KeyError) as exc:
        logger.warning("bridge.bad_request", command=command, error=str(exc))
        return _error(request_id, f"Invalid arguments for {command}: {exc}")

    return {"id": request_id, "ok": True, "result": _serialise(result)}


def serve(
    stdin: IO[str],
    stdout: IO[str],
    runner: Optional[GitRunner] = None,
) -> int:
    """Answer JSON-lines requests until *stdin* closes. Returns requests handled."""
    handled = 0
    for line in stdin:
        if not line.strip():
            continue
        try:
            request = json.loads(line)
        except json.JSONDecodeError as exc:
            response = _error(None, f"Malformed request: {exc.msg}")
        else:
            response = handle(request, runner=runner)
        stdout.write(json.dumps(response) + "\n")
        stdout.flush()
        handled += 1
    return handled
