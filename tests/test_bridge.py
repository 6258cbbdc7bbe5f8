"""Tests for the JSON request/response boundary."""

import base64
import io
import json
from pathlib import Path

from conftest import commit_file
from imgreview.bridge import COMMANDS, handle, serve


class TestHandle:
    def test_exposes_operations(self):
        assert {
            "validate_repository",
            "list_changed_images",
            "get_file_at_head",
            "list_commits",
            "get_file_at_commit",
        } <= set(COMMANDS)

    def test_validate(self, tmp_git_repo: Path):
        resp = handle({"id": 1, "command": "validate_repository", "args": {"path": str(tmp_git_repo)}})
        assert resp == {"id": 1, "ok": True, "result": True}

    def test_path_not_found_is_error_string(self):
        resp = handle({"id": 2, "command": "validate_repository", "args": {"path": "/no/such/dir"}})
        assert resp["ok"] is False
        assert "does not exist" in resp["error"]

    def test_changed_files_serialised(self, tmp_git_repo: Path):
        (tmp_git_repo / "new.jpg").write_bytes(b"jpg")
        resp = handle({
            "id": "x",
            "command": "list_changed_images",
            "args": {"repository_path": str(tmp_git_repo)},
        })
        assert resp["ok"] is True
        assert resp["result"] == [{"path": "new.jpg", "filename": "new.jpg", "status": "added"}]

    def test_commits_serialised(self, tmp_git_repo: Path):
        resp = handle({
            "command": "list_commits",
            "args": {"repository_path": str(tmp_git_repo), "limit": 5},
        })
        assert resp["ok"] is True
        assert resp["id"] is None
        assert resp["result"][0]["message"] == "Initial"
        assert set(resp["result"][0]) == {"hash", "short_hash", "message", "author", "date"}

    def test_file_at_head(self, tmp_git_repo: Path):
        commit_file(tmp_git_repo, "a.png", b"\x89PNG", "Add a")
        resp = handle({
            "command": "get_file_at_head",
            "args": {"repository_path": str(tmp_git_repo), "file_path": "a.png"},
        })
        assert base64.b64decode(resp["result"]) == b"\x89PNG"

    def test_file_not_at_revision_is_error(self, tmp_git_repo: Path):
        resp = handle({
            "command": "get_file_at_commit",
            "args": {"repository_path": str(tmp_git_repo), "file_path": "none.png", "commit_id": "HEAD"},
        })
        assert resp["ok"] is False
        assert resp["error"].startswith("File does not exist at")

    def test_load_image_pair(self, tmp_git_repo: Path):
        (tmp_git_repo / "n.png").write_bytes(b"n")
        resp = handle({
            "command": "load_image_pair",
            "args": {
                "repository_path": str(tmp_git_repo),
                "changed_file": {"path": "n.png", "status": "added"},
            },
        })
        assert resp["ok"] is True
        assert resp["result"]["previous"] is None
        assert base64.b64decode(resp["result"]["current"]) == b"n"

    def test_unknown_command(self):
        resp = handle({"id": 7, "command": "rm_rf"})
        assert resp == {"id": 7, "ok": False, "error": "Unknown command: rm_rf"}

    def test_bad_arguments(self, tmp_path: Path):
        resp = handle({"command": "list_commits", "args": {"repository_path": str(tmp_path)}})
        assert resp["ok"] is False
        assert resp["error"].startswith("Invalid arguments for list_commits")

    def test_negative_limit(self, tmp_path: Path):
        resp = handle({"command": "list_commits", "args": {"repository_path": str(tmp_path), "limit": -1}})
        assert resp["ok"] is False

    def test_non_object_request(self):
        assert handle(["not", "a", "dict"])["ok"] is False  # type: ignore[arg-type]

    def test_uses_runner(self, fake_runner, tmp_path: Path):
        runner = fake_runner(stdout=b" M x.png\n")
        resp = handle(
            {"command": "list_changed_images", "args": {"repository_path": str(tmp_path)}},
            runner=runner,
        )
        assert resp["result"][0]["status"] == "modified"
        assert len(runner.calls) == 1


class TestServe:
    def test_json_lines_loop(self, tmp_git_repo: Path):
        requests = "\n".join([
            json.dumps({"id": 1, "command": "validate_repository", "args": {"path": str(tmp_git_repo)}}),
            "",
            "{not json",
            json.dumps({"id": 3, "command": "list_changed_images", "args": {"repository_path": str(tmp_git_repo)}}),
        ]) + "\n"
        stdout = io.StringIO()

        handled = serve(io.StringIO(requests), stdout)

        assert handled == 3
        responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert responses[0] == {"id": 1, "ok": True, "result": True}
        assert responses[1]["ok"] is False
        assert responses[1]["error"].startswith("Malformed request")
        assert responses[2] == {"id": 3, "ok": True, "result": []}
