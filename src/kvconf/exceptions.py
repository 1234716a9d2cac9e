"""Specialized exceptions raised by kvconf.

Exception hierarchy::

    KvconfError (base for all kvconf errors)
        KeyNotFoundError (queried key absent, also LookupError)
        ValueParseError (value cannot be converted, also ValueError)
        ParseError (unrecognized line in the input, also ValueError)
        ReadError (underlying stream failure)
"""

from __future__ import annotations

from typing import Any


class KvconfError(Exception):
    """Base exception for all kvconf errors.

    Attributes:
        message: Human-readable error message.
        details: Additional error context as key-value pairs.

    Examples:
        >>> raise KvconfError("Something went wrong", details={"source": "app.conf"})
        Traceback (most recent call last):
        ...
        kvconf.exceptions.KvconfError: Something went wrong
    """

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize KvconfError.

        Args:
            message: Human-readable error message.
            details: Additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class KeyNotFoundError(KvconfError, LookupError):
    """Raised when the queried key does not exist in a Config.

    Attributes:
        key: The key that was looked up.

    Examples:
        >>> raise KeyNotFoundError("port")
        Traceback (most recent call last):
        ...
        kvconf.exceptions.KeyNotFoundError: key not found: 'port'
    """

    def __init__(self, key: str) -> None:
        """Initialize KeyNotFoundError.

        Args:
            key: The key that was looked up.
        """
        super().__init__(f"key not found: {key!r}", details={"key": key})
        self.key = key


class ValueParseError(KvconfError, ValueError):
    """Raised when a stored value cannot be converted to the requested type.

    The converter's own exception is chained as ``__cause__``.

    Attributes:
        key: The key whose value failed to convert.
        value: The raw stored string.
        type_name: Name of the requested type (e.g. ``"uint32"``).
        reason: Description of the conversion failure.

    Examples:
        >>> raise ValueParseError("port", "abc", "int", "invalid syntax")
        Traceback (most recent call last):
        ...
        kvconf.exceptions.ValueParseError: failed to parse value of 'port' as int: 'abc' (invalid syntax)
    """

    def __init__(self, key: str, value: str, type_name: str, reason: str) -> None:
        """Initialize ValueParseError.

        Args:
            key: The key whose value failed to convert.
            value: The raw stored string.
            type_name: Name of the requested type.
            reason: Description of the conversion failure.
        """
        super().__init__(
            f"failed to parse value of {key!r} as {type_name}: {value!r} ({reason})",
            details={"key": key, "value": value, "type_name": type_name, "reason": reason},
        )
        self.key = key
        self.value = value
        self.type_name = type_name
        self.reason = reason


class ParseError(KvconfError, ValueError):
    """Raised when an input line matches none of the known line shapes.

    Attributes:
        line_number: 1-based number of the offending line.
        line: The offending line, whitespace-trimmed.

    Examples:
        >>> raise ParseError(3, "???")
        Traceback (most recent call last):
        ...
        kvconf.exceptions.ParseError: unrecognized input at line 3: ???
    """

    def __init__(self, line_number: int, line: str) -> None:
        """Initialize ParseError.

        Args:
            line_number: 1-based number of the offending line.
            line: The offending line, whitespace-trimmed.
        """
        super().__init__(
            f"unrecognized input at line {line_number}: {line}",
            details={"line_number": line_number, "line": line},
        )
        self.line_number = line_number
        self.line = line


class ReadError(KvconfError):
    """Raised when the underlying input cannot be read or decoded.

    The original ``OSError`` or ``UnicodeDecodeError`` is chained as ``__cause__``.

    Attributes:
        source: Name of the input (file path or ``"<stream>"``).
        reason: Description of the failure.
    """

    def __init__(self, source: str, reason: str) -> None:
        """Initialize ReadError.

        Args:
            source: Name of the input.
            reason: Description of the failure.
        """
        super().__init__(
            f"failed to read {source}: {reason}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


__all__ = [
    "KeyNotFoundError",
    "KvconfError",
    "ParseError",
    "ReadError",
    "ValueParseError",
]
