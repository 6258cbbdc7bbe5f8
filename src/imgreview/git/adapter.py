"""Git subprocess wrapper: the single place where git is spawned."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from imgreview.config.logging import get_logger
from imgreview.git.errors import CommandFailure, SpawnFailure
from imgreview.git.models import GitOutput

logger = get_logger(__name__)


class GitRunner(Protocol):
    """Anything that can run ``git <args>`` in *cwd* and capture its output."""

    def __call__(self, args: Sequence[str], cwd: Path) -> GitOutput: ...


class SubprocessRunner:
    """Run the real git executable and wait for it to exit.

    No timeout is applied unless one is configured; a hung git process
    blocks the caller.
    """

    def __init__(self, executable: str = "git", timeout: Optional[float] = None) -> None:
        self.executable = executable
        self.timeout = timeout

    def __call__(self, args: Sequence[str], cwd: Path) -> GitOutput:
        command = [self.executable, *args]
        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise SpawnFailure(
                f"Failed to run git {args[0] if args else ''}: "
                f"{self.executable} is not installed or not on PATH"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise CommandFailure(
                f"git command timed out after {self.timeout}s: git {' '.join(args)}"
            ) from exc
        except OSError as exc:
            raise SpawnFailure(f"Failed to run git {args[0] if args else ''}: {exc}") from exc

        return GitOutput(
            stdout=result.stdout,
            stderr=result.stderr,
            success=result.returncode == 0,
        )

    def __repr__(self) -> str:
        return f"SubprocessRunner(executable={self.executable!r}, timeout={self.timeout!r})"


_default_runner: GitRunner = SubprocessRunner()


def run_git(
    args: Sequence[str],
    cwd: Path,
    runner: Optional[GitRunner] = None,
) -> GitOutput:
    """Run git through *runner* (the real executable by default)."""
    runner = runner or _default_runner
    output = runner(list(args), cwd)
    logger.info(
        "git.invoke",
        args=list(args),
        cwd=str(cwd),
        success=output.success,
        stdout_bytes=len(output.stdout),
    )
    return output


def output_lines(text: str) -> List[str]:
    """Split git output on line feeds only, dropping one trailing carriage return.

    Form feeds, U+2028 and the other separators ``str.splitlines`` honours
    can appear inside subjects and paths.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def ensure_success(output: GitOutput, description: str) -> GitOutput:
    """Raise CommandFailure carrying git's stderr if *output* is a failure."""
    if not output.success:
        stderr = output.stderr_text
        logger.warning("git.failed", command=description, stderr=stderr)
        raise CommandFailure(f"{description} failed: {stderr}", stderr=stderr)
    return output
