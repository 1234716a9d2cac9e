"""Shared helpers for kvconf CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from kvconf.exceptions import KvconfError
from kvconf.parser import DEFAULT_SECTION, load

if TYPE_CHECKING:
    from kvconf.config import Config

console = Console()

FILE_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Configuration file to read.", show_default=False),
]

SECTION_OPTION = Annotated[
    str,
    typer.Option(
        "--section",
        "-s",
        help="Section name (empty for the default section).",
    ),
]


def exit_error(message: str, code: int = 1) -> NoReturn:
    """Print an error message and exit.

    Args:
        message: Text shown after the ``Error:`` prefix.
        code: Process exit code.
    """
    console.print(f"[red]Error:[/] {escape(message)}")
    raise typer.Exit(code=code)


def section_label(name: str) -> str:
    """Return a display label, ``(default)`` for the unnamed section."""
    return "(default)" if name == DEFAULT_SECTION else name


def load_sections(path: Path) -> dict[str, Config]:
    """Load a file or exit with a readable error."""
    try:
        return load(path)
    except KvconfError as e:
        exit_error(str(e))


def select_section(sections: dict[str, Config], name: str) -> Config:
    """Return one section or exit listing the available names."""
    if name not in sections:
        available = ", ".join(section_label(n) for n in sections)
        exit_error(f"Section '{name}' not found. Available sections: {available}")
    return sections[name]


__all__ = [
    "FILE_ARGUMENT",
    "SECTION_OPTION",
    "console",
    "exit_error",
    "load_sections",
    "section_label",
    "select_section",
]
