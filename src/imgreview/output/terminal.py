"""Rich terminal rendering: changed-image and commit tables."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from imgreview.git.models import ChangedFile, CommitInfo, FileStatus

_STATUS_STYLE = {
    FileStatus.MODIFIED: "bold black on yellow",
    FileStatus.ADDED: "bold white on green",
    FileStatus.DELETED: "bold white on red",
}

_STATUS_ICON = {
    FileStatus.MODIFIED: "M",
    FileStatus.ADDED: "A",
    FileStatus.DELETED: "D",
}


def _status_pill(status: FileStatus) -> Text:
    return Text(f" {_STATUS_ICON[status]} {status.value} ", style=_STATUS_STYLE[status])


def render_files(files: Sequence[ChangedFile], console: Optional[Console] = None) -> None:
    """Print changed image files as a table."""
    console = console or Console()

    if not files:
        console.print("[bold green]No changed images.[/bold green]")
        return

    table = Table(title="Changed images", title_style="bold", border_style="dim")
    table.add_column("Status", justify="center", width=12)
    table.add_column("File", style="cyan")
    table.add_column("Path", style="magenta")

    for f in files:
        table.add_row(_status_pill(f.status), Text(f.filename), Text(f.path))

    console.print(table)
    console.print(f"[dim]{len(files)} image(s) changed[/dim]")


def render_commits(commits: Sequence[CommitInfo], console: Optional[Console] = None) -> None:
    """Print commit history as a table, most recent first."""
    console = console or Console()

    if not commits:
        console.print("[dim]No commits.[/dim]")
        return

    table = Table(title="Commits", title_style="bold", border_style="dim")
    table.add_column("Commit", style="yellow", no_wrap=True)
    table.add_column("Message")
    table.add_column("Author", style="cyan")
    table.add_column("Date", style="green", no_wrap=True)

    for c in commits:
        table.add_row(Text(c.short_hash), Text(c.message), Text(c.author), Text(c.date))

    console.print(table)
