"""kvconf: read ``key = value`` files split into ``name:`` sections.

Examples:
    >>> from kvconf import loads
    >>> sections = loads("number = 1234\\ndatabase:\\n  port=5432\\n")
    >>> sections[""].get_int_or_default("number", 42)
    (1234, False)
    >>> sections["database"].get_int_or_default("number", 8086)
    (8086, True)
"""

from kvconf.config import Config
from kvconf.exceptions import (
    KeyNotFoundError,
    KvconfError,
    ParseError,
    ReadError,
    ValueParseError,
)
from kvconf.meta import __version__
from kvconf.parser import DEFAULT_SECTION, load, loads, read

__all__ = [
    "DEFAULT_SECTION",
    "Config",
    "KeyNotFoundError",
    "KvconfError",
    "ParseError",
    "ReadError",
    "ValueParseError",
    "__version__",
    "load",
    "loads",
    "read",
]
