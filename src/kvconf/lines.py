"""Line classification for the kvconf text format.

Every function here expects a line that has already been stripped of
leading and trailing whitespace. They never raise.

Line shapes::

    # a comment
    key = value
    section:
"""

from __future__ import annotations

from enum import Enum

#: Characters trimmed from lines, keys, values and section names. Unlike
#: ``str.isspace`` this excludes the separators U+001C to U+001F.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class LineKind(str, Enum):
    """Kind of a trimmed input line.

    Attributes:
        COMMENT: Line starting with ``#``.
        EMPTY: Zero-length line.
        KEY_VALUE: ``key=value`` assignment.
        NAME: ``name:`` section marker.
        UNRECOGNIZED: Anything else.
    """

    COMMENT = "comment"
    EMPTY = "empty"
    KEY_VALUE = "key_value"
    NAME = "name"
    UNRECOGNIZED = "unrecognized"


def trim(line: str) -> str:
    """Remove leading and trailing whitespace as listed in ``WHITESPACE``.

    Examples:
        >>> trim(" key = value \u3000")
        'key = value'
    """
    return line.strip(WHITESPACE)


def is_comment(line: str) -> bool:
    """Return True if the line starts with ``#``.

    Examples:
        >>> is_comment("# note")
        True
        >>> is_comment("")
        False
    """
    return line.startswith("#")


def is_empty(line: str) -> bool:
    """Return True if the line has zero length."""
    return line == ""


def is_key_value(line: str) -> bool:
    """Return True if the line looks like a ``key=value`` assignment.

    Only the presence of ``=`` and a UTF-8 encoded length of at least
    three bytes are checked, so ``"ab="`` and ``"é="`` are accepted
    with an empty value.

    Examples:
        >>> is_key_value("a=b")
        True
        >>> is_key_value("a=")
        False
    """
    return "=" in line and len(line.encode("utf-8", "surrogatepass")) >= 3


def parse_key_value(line: str) -> tuple[str, str]:
    """Split an assignment on its first ``=``.

    Whitespace is removed from the right of the key and from the left of
    the value.

    Examples:
        >>> parse_key_value("x = y=z")
        ('x', 'y=z')
    """
    key, value = line.split("=", 1)
    return key.rstrip(WHITESPACE), value.lstrip(WHITESPACE)


def is_name(line: str) -> bool:
    """Return True if the line is a ``name:`` section marker.

    Examples:
        >>> is_name("database:")
        True
        >>> is_name(":")
        False
    """
    return line.endswith(":") and len(line) >= 2


def parse_name(line: str) -> str:
    """Strip trailing colons and whitespace from a section marker.

    Examples:
        >>> parse_name("bar   :")
        'bar'
        >>> parse_name("a:b::")
        'a:b'
    """
    return line.rstrip(":" + WHITESPACE)


def classify(line: str) -> LineKind:
    """Classify a trimmed line, first match wins.

    Order: comment, empty, key-value, name.

    Examples:
        >>> classify("url = http://example.com:")
        <LineKind.KEY_VALUE: 'key_value'>
        >>> classify("???")
        <LineKind.UNRECOGNIZED: 'unrecognized'>
    """
    if is_comment(line):
        return LineKind.COMMENT
    if is_empty(line):
        return LineKind.EMPTY
    if is_key_value(line):
        return LineKind.KEY_VALUE
    if is_name(line):
        return LineKind.NAME
    return LineKind.UNRECOGNIZED


__all__ = [
    "WHITESPACE",
    "LineKind",
    "classify",
    "is_comment",
    "is_empty",
    "is_key_value",
    "is_name",
    "parse_key_value",
    "parse_name",
    "trim",
]
