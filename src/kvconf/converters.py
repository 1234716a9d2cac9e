"""String-to-value converters used by the typed Config accessors.

Each converter takes the raw stored string and either returns the
converted value or raises a plain ``ValueError`` describing the problem.
``kvconf.config.Config`` turns those into ``ValueParseError``.
"""

from __future__ import annotations

import ipaddress
import math
import os
import re
import struct
import sys
from datetime import timedelta

import httpx

#: Bit width used when an integer converter is asked for the native size (``bits=0``).
NATIVE_INT_BITS = sys.maxsize.bit_length() + 1

_TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_SIGNED_PATTERN = re.compile(r"\A[+-]?[0-9]+\Z")
_UNSIGNED_PATTERN = re.compile(r"\A[0-9]+\Z")

# One "<number><unit>" component of a duration, e.g. "1.5h" or ".5s".
_DURATION_COMPONENT = re.compile(r"([0-9]*(?:\.[0-9]*)?)(ns|us|µs|μs|ms|s|m|h)")

_NANOS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_MAX_DURATION_NANOS = 2**63 - 1


def parse_bool(text: str) -> bool:
    """Parse one of the accepted boolean tokens.

    Examples:
        >>> parse_bool("T")
        True
        >>> parse_bool("false")
        False
    """
    if text in _TRUE_TOKENS:
        return True
    if text in _FALSE_TOKENS:
        return False
    raise ValueError("invalid syntax")


def parse_float64(text: str) -> float:
    """Parse a double precision float.

    ``inf`` and ``nan`` spellings are accepted, but finite text whose
    magnitude overflows to infinity is rejected. Digits must be ASCII.
    """
    if not text.isascii() or "_" in text or text != text.strip():
        raise ValueError("invalid syntax")
    try:
        value = float(text)
    except ValueError:
        raise ValueError("invalid syntax") from None
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError("value out of range")
    return value


def parse_float32(text: str) -> float:
    """Parse a float and round it to single precision.

    Examples:
        >>> parse_float32("0.5")
        0.5
    """
    value = parse_float64(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        raise ValueError("value out of range") from None


def parse_int(text: str, bits: int = 0) -> int:
    """Parse a signed base-10 integer and check it fits ``bits`` bits.

    Args:
        text: Raw string, an optional sign followed by ASCII digits.
        bits: Target width; 0 means the native width.

    Examples:
        >>> parse_int("-1234", 32)
        -1234
    """
    if not _SIGNED_PATTERN.match(text):
        raise ValueError("invalid syntax")
    width = bits or NATIVE_INT_BITS
    value = int(text, 10)
    if not -(2 ** (width - 1)) <= value < 2 ** (width - 1):
        raise ValueError(f"value out of range for int{width}")
    return value


def parse_uint(text: str, bits: int = 0) -> int:
    """Parse an unsigned base-10 integer; signs are rejected.

    Examples:
        >>> parse_uint("1234", 32)
        1234
        >>> parse_uint("-1")
        Traceback (most recent call last):
        ...
        ValueError: invalid syntax
    """
    if not _UNSIGNED_PATTERN.match(text):
        raise ValueError("invalid syntax")
    width = bits or NATIVE_INT_BITS
    value = int(text, 10)
    if value >= 2**width:
        raise ValueError(f"value out of range for uint{width}")
    return value


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"3h15m22s"`` or ``"-1.5h"``.

    A duration is an optional sign and a sequence of decimal numbers,
    each with a unit suffix: ``ns``, ``us`` (or ``µs``), ``ms``, ``s``,
    ``m``, ``h``. A bare ``"0"`` is also accepted.

    Examples:
        >>> parse_duration("16h12m")
        datetime.timedelta(seconds=58320)
        >>> parse_duration("1m30.5s").total_seconds()
        90.5
    """
    body = text
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError("invalid duration")

    total = 0
    pos = 0
    while pos < len(body):
        match = _DURATION_COMPONENT.match(body, pos)
        if match is None:
            raise ValueError("invalid duration")
        number, unit = match.groups()
        if number in ("", "."):
            raise ValueError("invalid duration")
        whole, _, frac = number.partition(".")
        scale = _NANOS_PER_UNIT[unit]
        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        if total > _MAX_DURATION_NANOS:
            raise ValueError("duration out of range")
        pos = match.end()

    micros = total // 1_000
    return timedelta(microseconds=-micros if negative else micros)


def parse_url(text: str) -> httpx.URL:
    """Parse a URL without resolving or contacting it.

    Raises:
        ValueError: If the text is not a syntactically valid URL.
    """
    try:
        return httpx.URL(text)
    except httpx.InvalidURL as exc:
        raise ValueError(str(exc)) from exc


def clean_path(text: str) -> str:
    """Lexically normalise a filesystem path.

    Redundant separators and ``.``/``..`` segments are resolved. The
    filesystem is never consulted.

    Examples:
        >>> clean_path("/usr//local/./bin/../lib/") == os.path.normpath("/usr/local/lib")
        True
    """
    if not text:
        return "."
    cleaned = os.path.normpath(text)
    # POSIX keeps a leading "//" as implementation-defined; collapse it.
    if os.sep == "/" and cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def parse_ip(text: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    """Parse an IPv4 or IPv6 address in textual form.

    Examples:
        >>> parse_ip("192.168.1.1")
        IPv4Address('192.168.1.1')
    """
    if "%" in text:
        raise ValueError("zoned IPv6 addresses are not supported")
    return ipaddress.ip_address(text)


def parse_time_of_day(text: str) -> tuple[int, int]:
    """Parse ``HH:MM`` into an ``(hour, minute)`` pair.

    Examples:
        >>> parse_time_of_day("11:26")
        (11, 26)
        >>> parse_time_of_day("25:01")
        Traceback (most recent call last):
        ...
        ValueError: hour out of range: 25
    """
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError("expected HH:MM")
    hour = parse_int(parts[0])
    minute = parse_int(parts[1])
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute out of range: {minute}")
    return hour, minute


__all__ = [
    "NATIVE_INT_BITS",
    "clean_path",
    "parse_bool",
    "parse_duration",
    "parse_float32",
    "parse_float64",
    "parse_int",
    "parse_ip",
    "parse_time_of_day",
    "parse_uint",
    "parse_url",
]
