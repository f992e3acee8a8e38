"""Shared utility functions for the Staco CLI.

Provides Rich-based status output, name helpers used to derive file and
class identifiers, and the small file-system helpers every command relies
on.  Nothing in here catches ``OSError``; permission and disk failures are
left to the caller.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def capitalize(value: str) -> str:
    """Upper-case the first character of *value* and leave the rest alone.

    Unlike :meth:`str.capitalize` the remainder of the string is not
    lower-cased, so ``capitalize("userProfile")`` gives ``"UserProfile"``.

    Examples::

        capitalize("user")  -> "User"
        capitalize("")      -> ""
    """
    if not value:
        return value
    return value[0].upper() + value[1:]


def slugify_name(name: str) -> str:
    """Return the file slug for *name*: the name lower-cased verbatim.

    No whitespace stripping or character filtering is done; the caller is
    trusted to pass something usable as a file name.
    """
    return name.lower()


def controller_class_name(name: str) -> str:
    """Return the controller identifier for *name* (``user`` -> ``UserController``)."""
    return f"{capitalize(name)}Controller"


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_parent_dir(path: str | Path) -> Path:
    """Create every missing ancestor directory of the file at *path*.

    A no-op when the parent already exists.

    Returns:
        The parent directory.
    """
    parent = Path(path).parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def file_exists(path: str | Path) -> bool:
    """Return ``True`` if anything exists at *path*."""
    return Path(path).exists()


def read_source(path: Path) -> str:
    """Read a text file exactly as stored.

    Line endings are not translated and bytes that are not valid UTF-8 are
    kept as surrogates, so writing the result back with :func:`write_source`
    reproduces every byte that was not edited.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()


def write_source(path: Path, content: str) -> None:
    """Write *content* read with :func:`read_source` back without translation."""
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        fh.write(content)


def relative_display(path: Path, root: Path) -> str:
    """Render *path* relative to *root* with forward slashes for status lines."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print a cyan informational message."""
    console.print(f"[cyan]{escape(message)}[/cyan]")


def print_plain(message: str = "") -> None:
    """Print an uncoloured line."""
    console.print(escape(message))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]✓ {escape(message)}[/bold green]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]! {escape(message)}[/bold yellow]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error: {escape(message)}[/bold red]")
