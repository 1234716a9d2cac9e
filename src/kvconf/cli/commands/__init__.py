"""kvconf CLI commands."""

from kvconf.cli.commands.get import get_value
from kvconf.cli.commands.sections import list_sections
from kvconf.cli.commands.show import show_section

__all__ = ["get_value", "list_sections", "show_section"]
