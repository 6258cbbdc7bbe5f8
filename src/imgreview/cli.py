"""imgreview CLI: Typer application over the git inspection operations."""

from __future__ import annotations

import base64
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from imgreview import __version__

app = typer.Typer(
    name="imgreview",
    help="Inspect changed images and their history in a git working copy.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _log_level(ctx: typer.Context) -> Optional[str]:
    return (ctx.obj or {}).get("log_level")


def _load_settings(ctx: typer.Context, repo: Path, config: Optional[str] = None):
    """Load config for *repo* and set up logging, exit 2 on failure."""
    from imgreview.config.loader import ConfigError, load_config
    from imgreview.config.logging import configure_logging

    try:
        cfg = load_config(repo, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    configure_logging(_log_level(ctx) or cfg.logging.level, cfg.logging.format)
    return cfg


def _runner(cfg):
    from imgreview.git.adapter import SubprocessRunner

    return SubprocessRunner(executable=cfg.git.executable, timeout=cfg.git.timeout)


def _fail(exc: Exception, label: str = "Error") -> typer.Exit:
    console.print(f"[bold red]{label}:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=2)


def _check_format(format: Optional[str], default: str) -> str:
    fmt = format or default
    if fmt not in ("terminal", "json"):
        console.print(f"[bold red]Invalid format:[/bold red] {escape(fmt)}")
        raise typer.Exit(code=2)
    return fmt


# ── validate ──────────────────────────────────────────────────────────────────


@app.command()
def validate(
    path: Path = typer.Argument(Path("."), help="Directory to check"),
) -> None:
    """Check whether PATH is the root of a git working copy."""
    from imgreview.api import validate_repository
    from imgreview.git.errors import PathNotFound

    try:
        is_repo = validate_repository(path)
    except PathNotFound as exc:
        raise _fail(exc) from exc

    if is_repo:
        console.print(f"[green]✓[/green] {escape(str(path))} is a git repository")
        raise typer.Exit(code=0)
    console.print(f"[red]✗[/red] {escape(str(path))} is not a git repository")
    raise typer.Exit(code=1)


# ── changed ───────────────────────────────────────────────────────────────────


@app.command()
def changed(
    ctx: typer.Context,
    repo: Path = typer.Argument(Path("."), help="Repository root"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .imgreview.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """List image files with pending changes."""
    from imgreview.api import list_changed_images
    from imgreview.git.errors import GitError
    from imgreview.output import json_report, terminal

    cfg = _load_settings(ctx, repo, config)
    fmt = _check_format(format, cfg.output.format)

    try:
        files = list_changed_images(repo, runner=_runner(cfg))
    except GitError as exc:
        raise _fail(exc, "Git error") from exc

    if fmt == "json":
        print(json_report.render_files(files))
    else:
        terminal.render_files(files)


# ── commits ───────────────────────────────────────────────────────────────────


@app.command()
def commits(
    ctx: typer.Context,
    repo: Path = typer.Argument(Path("."), help="Repository root"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=0, help="Maximum commits to list"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .imgreview.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """List recent commits, most recent first."""
    from imgreview.api import list_commits
    from imgreview.git.errors import GitError
    from imgreview.output import json_report, terminal

    cfg = _load_settings(ctx, repo, config)
    fmt = _check_format(format, cfg.output.format)

    try:
        history = list_commits(
            repo,
            limit if limit is not None else cfg.history.limit,
            runner=_runner(cfg),
        )
    except GitError as exc:
        raise _fail(exc, "Git error") from exc

    if fmt == "json":
        print(json_report.render_commits(history))
    else:
        terminal.render_commits(history)


# ── show ──────────────────────────────────────────────────────────────────────


@app.command()
def show(
    ctx: typer.Context,
    file: str = typer.Argument(..., help="Repository-relative file path"),
    repo: Path = typer.Option(Path("."), "--repo", "-r", help="Repository root"),
    commit: Optional[str] = typer.Option(None, "--commit", help="Commit to read from (default: HEAD)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the raw file bytes here"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .imgreview.toml"),
) -> None:
    """Print FILE as stored at HEAD (or --commit) as base64, or save it with --output."""
    from imgreview.api import get_file_at_commit, get_file_at_head
    from imgreview.git.errors import GitError

    cfg = _load_settings(ctx, repo, config)
    runner = _runner(cfg)

    try:
        if commit:
            encoded = get_file_at_commit(repo, file, commit, runner=runner)
        else:
            encoded = get_file_at_head(repo, file, runner=runner)
    except GitError as exc:
        raise _fail(exc, "Git error") from exc

    if output is None:
        print(encoded)
        return

    output.write_bytes(base64.b64decode(encoded))
    console.print(f"[green]✓[/green] Wrote {escape(file)} ({escape(commit or 'HEAD')}) to {escape(str(output))}")


# ── serve ─────────────────────────────────────────────────────────────────────


@app.command()
def serve(
    ctx: typer.Context,
    repo: Path = typer.Option(Path("."), "--repo", "-r", help="Directory to read .imgreview.toml from"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .imgreview.toml"),
) -> None:
    """Answer JSON-lines requests from a GUI host on stdin/stdout."""
    from imgreview.bridge import serve as run_bridge

    cfg = _load_settings(ctx, repo, config)
    run_bridge(sys.stdin, sys.stdout, runner=_runner(cfg))


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    repo: Path = typer.Argument(Path("."), help="Repository root"),
) -> None:
    """Generate a starter .imgreview.toml in the repository root."""
    from imgreview.api import validate_repository
    from imgreview.config.defaults import DEFAULT_TOML
    from imgreview.config.loader import CONFIG_FILENAME
    from imgreview.git.errors import PathNotFound

    try:
        is_repo = validate_repository(repo)
    except PathNotFound as exc:
        raise _fail(exc) from exc
    if not is_repo:
        console.print(f"[bold red]Error:[/bold red] {escape(str(repo))} is not a git repository")
        raise typer.Exit(code=2)

    config_path = repo / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {escape(str(config_path))}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"imgreview {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log git invocations"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """imgreview: inspect changed images in a git working copy."""
    level = "DEBUG" if debug else "INFO" if verbose else None
    ctx.obj = {"log_level": level}
