"""List the sections of a configuration file."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from kvconf.cli.common import FILE_ARGUMENT, console, load_sections, section_label


def list_sections(path: FILE_ARGUMENT) -> None:
    """List section names with their key counts.

    Examples:
        kvconf sections app.conf
    """
    sections = load_sections(path)

    table = Table(title=f"Sections in {path.name}")
    table.add_column("Section", style="cyan")
    table.add_column("Keys", justify="right")
    for name, cfg in sections.items():
        table.add_row(escape(section_label(name)), str(len(cfg)))

    console.print(table)


__all__ = ["list_sections"]
