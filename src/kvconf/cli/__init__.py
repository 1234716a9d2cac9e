"""Command line interface for kvconf."""

from kvconf.cli.app import app

__all__ = ["app"]
