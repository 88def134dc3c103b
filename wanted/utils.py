"""Shared helpers for the Wanted scaffold generator.

Provides the Rich console used for all progress reporting, small output
helpers, and the filesystem primitives used by the file materializer.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object for the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_file(path: str | Path, content: str) -> Path:
    """Create parent directories and write *content* to *path*."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_created(path: str | Path, action: str = "creating") -> None:
    """Announce a generator action, e.g. ``* creating README.md``."""
    color = "green" if action == "creating" else "yellow"
    console.print(f"[{color}]* {action}[/{color}] {escape(str(path))}")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def confirm_overwrite(path: str) -> bool:
    """Ask whether the existing file at *path* may be overwritten."""
    return Confirm.ask(
        f"[yellow]{escape(path)} already exists, overwrite?[/yellow]",
        console=console,
        default=False,
    )
