"""Typed access to the key/value pairs of one section.

A ``Config`` stores strings only. Conversion happens on every call to a
``get_*`` accessor and nothing is cached.

Each type has two accessors:

- ``get_<type>(key)`` raises ``KeyNotFoundError`` when the key is absent
  and ``ValueParseError`` when the stored string does not convert.
- ``get_<type>_or_default(key, default)`` never raises for either case and
  returns ``(value, used_default)``.

Examples:
    >>> cfg = Config({"port": "5432", "debug": "t"})
    >>> cfg.get_int("port")
    5432
    >>> cfg.get_bool_or_default("verbose", False)
    (False, True)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from functools import partial
from typing import TYPE_CHECKING, TypeVar

from kvconf import converters
from kvconf.exceptions import KeyNotFoundError, ValueParseError

if TYPE_CHECKING:
    import ipaddress
    from datetime import timedelta

    import httpx

T = TypeVar("T")


class Config(Mapping[str, str]):
    """A set of key/value string pairs with typed accessors.

    The mapping interface is read-only; ``set`` is the only mutator.

    Args:
        values: Initial pairs, copied into the store.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values) if values else {}

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Config({self._values!r})"

    def set(self, key: str, value: str) -> None:
        """Add a key/value pair, replacing any existing value."""
        self._values[key] = value

    def as_dict(self) -> dict[str, str]:
        """Return a shallow copy of the stored pairs."""
        return dict(self._values)

    # ------------------------------------------------------------------
    # Shared conversion routine
    # ------------------------------------------------------------------

    def _convert(self, key: str, type_name: str, parse: Callable[[str], T]) -> T:
        """Look up ``key`` and convert its value with ``parse``.

        Raises:
            KeyNotFoundError: If the key is absent.
            ValueParseError: If ``parse`` rejects the stored value.
        """
        raw = self.get_string(key)
        try:
            return parse(raw)
        except ValueError as exc:
            raise ValueParseError(key, raw, type_name, str(exc)) from exc

    def _convert_or_default(
        self,
        key: str,
        type_name: str,
        parse: Callable[[str], T],
        default: T,
    ) -> tuple[T, bool]:
        try:
            return self._convert(key, type_name, parse), False
        except (KeyNotFoundError, ValueParseError):
            return default, True

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def get_string(self, key: str) -> str:
        """Return the raw value for ``key``.

        Raises:
            KeyNotFoundError: If the key is absent.
        """
        try:
            return self._values[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def get_string_or_default(self, key: str, default: str) -> tuple[str, bool]:
        """Return ``(value, False)`` or ``(default, True)`` when the key is absent."""
        return self._convert_or_default(key, "string", str, default)

    # ------------------------------------------------------------------
    # Booleans and floats
    # ------------------------------------------------------------------

    def get_bool(self, key: str) -> bool:
        """Return the value as a bool (``1 t T TRUE true True`` and the false counterparts)."""
        return self._convert(key, "bool", converters.parse_bool)

    def get_bool_or_default(self, key: str, default: bool) -> tuple[bool, bool]:
        return self._convert_or_default(key, "bool", converters.parse_bool, default)

    def get_float32(self, key: str) -> float:
        """Return the value rounded to single precision."""
        return self._convert(key, "float32", converters.parse_float32)

    def get_float32_or_default(self, key: str, default: float) -> tuple[float, bool]:
        return self._convert_or_default(key, "float32", converters.parse_float32, default)

    def get_float64(self, key: str) -> float:
        return self._convert(key, "float64", converters.parse_float64)

    def get_float64_or_default(self, key: str, default: float) -> tuple[float, bool]:
        return self._convert_or_default(key, "float64", converters.parse_float64, default)

    # ------------------------------------------------------------------
    # Integers
    # ------------------------------------------------------------------

    def get_int(self, key: str) -> int:
        """Return the value as a native-width signed integer."""
        return self._convert(key, "int", converters.parse_int)

    def get_int_or_default(self, key: str, default: int) -> tuple[int, bool]:
        return self._convert_or_default(key, "int", converters.parse_int, default)

    def get_int32(self, key: str) -> int:
        return self._convert(key, "int32", partial(converters.parse_int, bits=32))

    def get_int32_or_default(self, key: str, default: int) -> tuple[int, bool]:
        return self._convert_or_default(key, "int32", partial(converters.parse_int, bits=32), default)

    def get_int64(self, key: str) -> int:
        return self._convert(key, "int64", partial(converters.parse_int, bits=64))

    def get_int64_or_default(self, key: str, default: int) -> tuple[int, bool]:
        return self._convert_or_default(key, "int64", partial(converters.parse_int, bits=64), default)

    def get_uint(self, key: str) -> int:
        """Return the value as a native-width unsigned integer.

        A leading sign, including ``-``, is a ``ValueParseError``.
        """
        return self._convert(key, "uint", converters.parse_uint)

    def get_uint_or_default(self, key: str, default: int) -> tuple[int, bool]:
        return self._convert_or_default(key, "uint", converters.parse_uint, default)

    def get_uint32(self, key: str) -> int:
        return self._convert(key, "uint32", partial(converters.parse_uint, bits=32))

    def get_uint32_or_default(self, key: str, default: int) -> tuple[int, bool]:
        return self._convert_or_default(key, "uint32", partial(converters.parse_uint, bits=32), default)

    def get_uint64(self, key: str) -> int:
        return self._convert(key, "uint64", partial(converters.parse_uint, bits=64))

    def get_uint64_or_default(self, key: str, default: int) -> tuple[int, bool]:
        return self._convert_or_default(key, "uint64", partial(converters.parse_uint, bits=64), default)

    # ------------------------------------------------------------------
    # Domain types
    # ------------------------------------------------------------------

    def get_duration(self, key: str) -> timedelta:
        """Return the value parsed as a duration such as ``3h15m22s``."""
        return self._convert(key, "duration", converters.parse_duration)

    def get_duration_or_default(self, key: str, default: timedelta) -> tuple[timedelta, bool]:
        return self._convert_or_default(key, "duration", converters.parse_duration, default)

    def get_url(self, key: str) -> httpx.URL:
        """Return the value parsed as a URL. Nothing is fetched."""
        return self._convert(key, "url", converters.parse_url)

    def get_url_or_default(self, key: str, default: httpx.URL) -> tuple[httpx.URL, bool]:
        return self._convert_or_default(key, "url", converters.parse_url, default)

    def get_file_path(self, key: str) -> str:
        """Return the value as a cleaned filesystem path.

        Only a missing key can fail; the path is not checked for existence.
        """
        return self._convert(key, "file_path", converters.clean_path)

    def get_file_path_or_default(self, key: str, default: str) -> tuple[str, bool]:
        return self._convert_or_default(key, "file_path", converters.clean_path, default)

    def get_ip(self, key: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
        """Return the value parsed as an IPv4 or IPv6 address."""
        return self._convert(key, "ip", converters.parse_ip)

    def get_ip_or_default(
        self,
        key: str,
        default: ipaddress.IPv4Address | ipaddress.IPv6Address,
    ) -> tuple[ipaddress.IPv4Address | ipaddress.IPv6Address, bool]:
        return self._convert_or_default(key, "ip", converters.parse_ip, default)

    def get_time_of_day(self, key: str) -> tuple[int, int]:
        """Return ``(hour, minute)`` parsed from an ``HH:MM`` value.

        Hours must be 0-23 and minutes 0-59.
        """
        return self._convert(key, "time_of_day", converters.parse_time_of_day)

    def get_time_of_day_or_default(self, key: str, hour: int, minute: int) -> tuple[int, int, bool]:
        """Return ``(hour, minute, used_default)``.

        Both defaults are used together if either half is invalid or the
        key is absent.
        """
        (hour, minute), used = self._convert_or_default(
            key, "time_of_day", converters.parse_time_of_day, (hour, minute)
        )
        return hour, minute, used


__all__ = ["Config"]
