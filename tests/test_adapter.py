"""Tests for the git process invoker."""

from pathlib import Path

import pytest

from imgreview.git.adapter import SubprocessRunner, ensure_success, output_lines, run_git
from imgreview.git.errors import CommandFailure, SpawnFailure
from imgreview.git.models import GitOutput


class TestSubprocessRunner:
    def test_captures_stdout_bytes(self, tmp_git_repo: Path):
        output = SubprocessRunner()(["rev-parse", "--is-inside-work-tree"], tmp_git_repo)
        assert output.success is True
        assert output.stdout == b"true\n"

    def test_failure_flag_and_stderr(self, tmp_git_repo: Path):
        output = SubprocessRunner()(["show", "HEAD:missing.png"], tmp_git_repo)
        assert output.success is False
        assert output.stderr_text

    def test_missing_executable_is_spawn_failure(self, tmp_path: Path):
        runner = SubprocessRunner(executable="definitely-not-git-xyz")
        with pytest.raises(SpawnFailure):
            runner(["status"], tmp_path)

    def test_binary_stdout_untouched(self, tmp_git_repo: Path):
        from conftest import commit_file

        payload = bytes(range(256))
        commit_file(tmp_git_repo, "bin.png", payload, "binary")
        output = SubprocessRunner()(["show", "HEAD:bin.png"], tmp_git_repo)
        assert output.stdout == payload


class TestRunGit:
    def test_uses_given_runner(self, fake_runner, tmp_path: Path):
        runner = fake_runner(stdout=b"hello")
        output = run_git(["status"], cwd=tmp_path, runner=runner)
        assert output.stdout_text == "hello"
        assert runner.calls == [(["status"], tmp_path)]


class TestEnsureSuccess:
    def test_passes_success_through(self):
        out = GitOutput(stdout=b"x", stderr=b"", success=True)
        assert ensure_success(out, "git status") is out

    def test_failure_carries_stderr(self):
        out = GitOutput(stdout=b"", stderr=b"fatal: not a git repository\n", success=False)
        with pytest.raises(CommandFailure) as excinfo:
            ensure_success(out, "git status")
        assert str(excinfo.value) == "git status failed: fatal: not a git repository"
        assert excinfo.value.stderr == "fatal: not a git repository"


class TestOutputLines:
    def test_splits_on_line_feed_only(self):
        assert output_lines("a\x0cb\nc\u2028d\ne\x1df") == ["a\x0cb", "c\u2028d", "e\x1df"]

    def test_drops_one_carriage_return(self):
        assert output_lines("one\r\ntwo\r\r\n") == ["one", "two\r", ""]


class TestGitOutput:
    def test_lossy_decoding(self):
        out = GitOutput(stdout=b"caf\xe9", stderr=b"", success=True)
        assert out.stdout_text == "caf�"
