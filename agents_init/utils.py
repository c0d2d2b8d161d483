"""Shared utility functions for agents-init.

Provides the shared Rich consoles, slug helpers, and small Rich-based
output helpers used by the wizard, the scaffolder and the reporter.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

_WHITESPACE_RUN = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(value: str, max_length: int | None = None) -> str:
    """Lower-case *value* and replace whitespace runs with hyphens.

    Punctuation is kept as typed. When *max_length* is given the slug is cut
    to that many characters.

    Examples::

        slugify("User can log in")         -> "user-can-log-in"
        slugify("My  App", max_length=4)   -> "my-a"
    """
    slug = _WHITESPACE_RUN.sub("-", value.lower())
    if max_length is not None:
        slug = slug[:max_length]
    return slug


def relative_display(path: Path, base: Path) -> str:
    """Return *path* relative to *base* when possible, else the full path."""
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_section(title: str, out: Console | None = None) -> None:
    """Print a section heading as a cyan rule."""
    out = out or console
    out.print()
    out.print(Rule(f"[bold cyan]{title}[/bold cyan]", style="cyan", align="left"))
    out.print()


def print_summary_table(
    data: dict[str, str], title: str = "Summary", out: Console | None = None
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print on. Defaults to the shared console.
    """
    out = out or console
    table = Table(title=title, show_header=False, title_style="bold cyan")
    table.add_column("Item", style="bold", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    out.print(table)
    out.print()


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message on stderr."""
    (out or err_console).print(f"[bold red]{message}[/bold red]")


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{message}[/bold yellow]")


def print_note(message: str, out: Console | None = None) -> None:
    """Print a dim informational note."""
    (out or console).print(f"[dim]{message}[/dim]")


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------

# newline="" keeps line endings exactly as found on disk.


def read_text(path: Path) -> str:
    """Read *path* as UTF-8 without translating line endings."""
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read()


def write_text(path: Path, content: str) -> None:
    """Write *content* to *path* as UTF-8 without translating line endings."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
