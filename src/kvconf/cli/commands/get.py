"""Read one value with a typed accessor."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any

import typer

from kvconf.cli.common import FILE_ARGUMENT, SECTION_OPTION, console, exit_error, load_sections, select_section
from kvconf.exceptions import KeyNotFoundError, ValueParseError

if TYPE_CHECKING:
    from kvconf.config import Config


class ValueType(str, Enum):
    """Types selectable with ``kvconf get --type``."""

    STRING = "string"
    BOOL = "bool"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT = "int"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT32 = "uint32"
    UINT64 = "uint64"
    DURATION = "duration"
    URL = "url"
    PATH = "path"
    IP = "ip"
    TIME = "time"


_ACCESSORS = {
    ValueType.STRING: "get_string",
    ValueType.BOOL: "get_bool",
    ValueType.FLOAT32: "get_float32",
    ValueType.FLOAT64: "get_float64",
    ValueType.INT: "get_int",
    ValueType.INT32: "get_int32",
    ValueType.INT64: "get_int64",
    ValueType.UINT: "get_uint",
    ValueType.UINT32: "get_uint32",
    ValueType.UINT64: "get_uint64",
    ValueType.DURATION: "get_duration",
    ValueType.URL: "get_url",
    ValueType.PATH: "get_file_path",
    ValueType.IP: "get_ip",
    ValueType.TIME: "get_time_of_day",
}


def _format_value(value_type: ValueType, value: Any) -> str:
    if value_type is ValueType.TIME:
        hour, minute = value
        return f"{hour:02d}:{minute:02d}"
    if value_type is ValueType.BOOL:
        return "true" if value else "false"
    return str(value)


def read_typed(cfg: Config, key: str, value_type: ValueType) -> str:
    """Convert ``key`` with the accessor for ``value_type`` and format it.

    Raises:
        KeyNotFoundError: If the key is absent.
        ValueParseError: If the value does not convert.
    """
    accessor = getattr(cfg, _ACCESSORS[value_type])
    return _format_value(value_type, accessor(key))


def get_value(
    path: FILE_ARGUMENT,
    key: Annotated[str, typer.Argument(help="Key to read.", show_default=False)],
    section: SECTION_OPTION = "",
    value_type: Annotated[
        ValueType,
        typer.Option("--type", "-t", help="Convert the value to this type."),
    ] = ValueType.STRING,
    default: Annotated[
        str | None,
        typer.Option("--default", "-d", help="Printed when the key is missing or malformed."),
    ] = None,
) -> None:
    """Print a single value converted to the requested type.

    Examples:
        # Raw string from the default section
        kvconf get app.conf number

        # Typed value from a named section
        kvconf get app.conf port --section database --type uint32

        # Fall back when missing or malformed
        kvconf get app.conf timeout --type duration --default 30s
    """
    cfg = select_section(load_sections(path), section)

    try:
        text = read_typed(cfg, key, value_type)
    except (KeyNotFoundError, ValueParseError) as e:
        if default is None:
            exit_error(str(e))
        text = default

    console.print(text, markup=False, highlight=False, soft_wrap=True)


__all__ = ["ValueType", "get_value", "read_typed"]
