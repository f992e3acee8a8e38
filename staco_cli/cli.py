"""Command line interface for the Staco development tools.

Usage::

    staco rename <new-name>
    staco generate controller|c <name>
    staco generate view|v <name>
    staco generate component|comp <name>
    staco g <kind> <name>
    staco help

Only positional tokens are read.  An absent or unrecognised command shows
the help screen.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Sequence

from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from .config import Config
from .generator import ArtifactGenerator, StacoError
from .renamer import ProjectRenamer
from .utils import (
    console,
    print_error,
    print_info,
    print_plain,
    print_success,
    print_warning,
)

HELP_COMMANDS: tuple[tuple[str, str], ...] = (
    ("rename <new-name>", "Rename the project"),
    ("generate controller <name>", "Create a new controller"),
    ("generate view <name>", "Create a new view"),
    ("generate component <name>", "Create a new component"),
    ("help", "Show this help message"),
)

EXIT_STATUS_NOTE = (
    "Exit status: 0 on success, 1 on a usage error or when a file already exists."
)


def _arg(args: Sequence[str], index: int) -> str | None:
    return args[index] if len(args) > index else None


def _report(exc: StacoError) -> int:
    print_error(str(exc))
    hint = getattr(exc, "hint", None)
    if hint:
        print_plain(hint)
    return 1


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def show_help() -> int:
    """Print the command overview."""
    console.print()
    console.print(Rule("[bold cyan]Staco CLI - Development Tools[/bold cyan]", style="cyan"))
    print_plain("Usage: staco <command> [options]")
    console.print()

    table = Table(title="Commands", show_header=False, box=None, padding=(0, 2))
    table.add_column("Command", style="bold", no_wrap=True)
    table.add_column("Description")
    for command, description in HELP_COMMANDS:
        table.add_row(command, description)
    console.print(table)
    console.print()
    print_plain(EXIT_STATUS_NOTE)
    console.print()
    return 0


def handle_rename(args: Sequence[str], config: Config) -> int:
    """``rename <new-name>``: rewrite the project name in the skeleton files."""
    new_name = _arg(args, 0)
    renamer = ProjectRenamer(config)
    if new_name:
        print_info(f"Renaming project to '{new_name}'...")
    try:
        results = renamer.rename(new_name)
    except StacoError as exc:
        return _report(exc)

    for result in results:
        if result.ok:
            print_success(result.message)
        else:
            print_warning(result.message)

    console.print()
    console.print(
        f"[bold green]Success! Project renamed to '{escape(new_name)}'.[/bold green]"
    )
    return 0


def handle_generate(args: Sequence[str], config: Config) -> int:
    """``generate <kind> <name>``: write one boilerplate file."""
    generator = ArtifactGenerator(config)
    try:
        artifact = generator.generate(_arg(args, 0), _arg(args, 1))
    except StacoError as exc:
        return _report(exc)

    print_success(f"Created {artifact.kind.name}: {artifact.relative_path}")
    return 0


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

Handler = Callable[[Sequence[str], Config], int]

COMMANDS: dict[str, Handler] = {
    "rename": handle_rename,
    "generate": handle_generate,
    "g": handle_generate,
}


def main(argv: Sequence[str] | None = None, root: str | Path | None = None) -> int:
    """Run one command and return the process exit status.

    Args:
        argv: Command tokens, without the program name.  Defaults to
            ``sys.argv[1:]``.
        root: Project root to operate on.  Defaults to the current working
            directory.

    Returns:
        ``0`` on success or help, ``1`` for a usage or conflict error.
        ``OSError`` is not caught.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    config = Config(project_root=Path(root)) if root is not None else Config()

    command = _arg(args, 0)
    handler = COMMANDS.get(command) if command else None
    if handler is None:
        return show_help()
    return handler(args[1:], config)


def run() -> None:
    """Console-script entry point for ``staco``."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
