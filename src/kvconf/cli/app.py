"""Typer application for the ``kvconf`` command."""

from __future__ import annotations

from typing import Annotated

import typer

from kvconf.cli.commands import get_value, list_sections, show_section
from kvconf.cli.common import console
from kvconf.logging import setup_logging
from kvconf.meta import __app_name__, __version__

app = typer.Typer(
    name=__app_name__,
    help="Inspect key/value configuration files.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{__app_name__} {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase log output (-v for DEBUG, -vv for TRACE).",
        ),
    ] = 0,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Inspect key/value configuration files."""
    if verbose:
        setup_logging(verbose)


app.command("sections")(list_sections)
app.command("show")(show_section)
app.command("get")(get_value)


__all__ = ["app"]
