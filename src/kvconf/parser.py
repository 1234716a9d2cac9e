"""Reader for the kvconf text format.

A document is a sequence of lines. Pairs before the first section marker
go into the default section ``""``, which is always present in the result::

    number = 1234
    every = 3m20s

    database:
        username = admin
        port=5432

Mentioning a section a second time resumes writing into the same Config.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING

from kvconf.config import Config
from kvconf.exceptions import ParseError, ReadError
from kvconf.lines import LineKind, classify, parse_key_value, parse_name, trim
from kvconf.logging import TRACE_LEVEL

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable, Iterator

log = logging.getLogger(__name__)

#: Name of the section holding pairs that precede any section marker.
DEFAULT_SECTION = ""


def _iter_lines(stream: Iterable[str | bytes], encoding: str, source: str) -> Iterator[str]:
    """Yield decoded lines, turning stream failures into ``ReadError``."""
    lines = iter(stream)
    while True:
        try:
            raw = next(lines)
            if isinstance(raw, bytes):
                raw = raw.decode(encoding)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(source, str(exc)) from exc
        yield raw


def read(
    stream: Iterable[str | bytes],
    *,
    encoding: str = "utf-8",
    source: str = "<stream>",
) -> dict[str, Config]:
    """Parse every section out of ``stream``.

    Args:
        stream: Text or binary file object, or any iterable of lines.
        encoding: Codec used when the stream yields bytes.
        source: Name used in error messages and logs.

    Returns:
        Mapping of section name to Config. The default section ``""`` is
        always included, possibly empty.

    Raises:
        ParseError: On the first line that is not a comment, blank line,
            ``key=value`` pair or ``name:`` marker.
        ReadError: If the stream cannot be read or decoded.
        TypeError: If ``stream`` is a ``str`` or ``bytes`` object rather than
            a stream of lines. Use ``loads`` for in-memory text.

    Examples:
        >>> sections = read(["a = 1\\n", "db:\\n", "port=5432\\n"])
        >>> sorted(sections)
        ['', 'db']
        >>> sections["db"].get_int("port")
        5432
    """
    if isinstance(stream, (str, bytes)):
        raise TypeError("read() expects a stream of lines, not a string; use loads() to parse text")

    sections: dict[str, Config] = {DEFAULT_SECTION: Config()}
    current = sections[DEFAULT_SECTION]

    line_number = 0
    for line_number, raw in enumerate(_iter_lines(stream, encoding, source), start=1):
        line = trim(raw)
        kind = classify(line)
        log.log(TRACE_LEVEL, "%s:%d %s %r", source, line_number, kind.value, line)

        if kind is LineKind.KEY_VALUE:
            key, value = parse_key_value(line)
            current.set(key, value)
        elif kind is LineKind.NAME:
            name = parse_name(line)
            if name not in sections:
                log.debug("%s:%d new section %r", source, line_number, name)
                sections[name] = Config()
            else:
                log.debug("%s:%d re-entering section %r", source, line_number, name)
            current = sections[name]
        elif kind is LineKind.UNRECOGNIZED:
            log.debug("%s:%d unrecognized input %r", source, line_number, line)
            raise ParseError(line_number, line)

    log.debug("Parsed %d line(s) from %s into %d section(s)", line_number, source, len(sections))
    return sections


def loads(text: str) -> dict[str, Config]:
    """Parse sections from an in-memory string.

    Examples:
        >>> loads("name = kvconf")[""].get_string("name")
        'kvconf'
    """
    return read(StringIO(text), source="<string>")


def load(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> dict[str, Config]:
    """Open ``path`` and parse its sections.

    Raises:
        ReadError: If the file cannot be opened, read or decoded.
        ParseError: If the content contains an unrecognized line.
    """
    file_path = Path(path)
    log.debug("Loading config file: %s", file_path)
    try:
        handle = file_path.open(encoding=encoding, newline="\n")
    except OSError as exc:
        raise ReadError(str(file_path), str(exc)) from exc
    with handle:
        return read(handle, source=str(file_path))


__all__ = [
    "DEFAULT_SECTION",
    "load",
    "loads",
    "read",
]
