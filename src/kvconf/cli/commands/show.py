"""Display key/value pairs of a configuration file."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from kvconf.cli.common import FILE_ARGUMENT, console, load_sections, section_label, select_section


def show_section(
    path: FILE_ARGUMENT,
    section: Annotated[
        str | None,
        typer.Option(
            "--section",
            "-s",
            help="Only show this section (empty string for the default section).",
        ),
    ] = None,
) -> None:
    """Show stored key/value pairs as raw strings.

    Examples:
        # Every section
        kvconf show app.conf

        # Only the database section
        kvconf show app.conf --section database
    """
    sections = load_sections(path)
    if section is not None:
        sections = {section: select_section(sections, section)}

    table = Table(title=path.name)
    table.add_column("Section", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Value")
    for name, cfg in sections.items():
        for key in sorted(cfg):
            table.add_row(escape(section_label(name)), escape(key), escape(cfg[key]))

    if not table.row_count:
        console.print("[yellow]No key/value pairs found.[/]")
        raise typer.Exit(code=0)

    console.print(table)


__all__ = ["show_section"]
