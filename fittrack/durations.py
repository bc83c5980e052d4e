"""Parsing of step counts and duration strings such as ``1h30m``."""

import re
from datetime import timedelta
from fractions import Fraction

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)

_UNIT_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_duration(text: str) -> timedelta:
    """Parse a signed sequence of decimal numbers with units, e.g. ``-1.5h`` or ``2h45m``.

    Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``.
    The result is truncated to microseconds.  Raises ValueError on bad input.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    limit = -_INT64_MIN if negative else _INT64_MAX
    total_ns = 0
    position = 0
    while position < len(rest):
        match = _COMPONENT.match(rest, position)
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            raise ValueError(f"invalid duration {text!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {text!r}")
        scale = _UNIT_NANOSECONDS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {unit!r} in duration {text!r}")

        value = Fraction(int(whole or "0"))
        if fraction:
            value += Fraction(int(fraction), 10 ** len(fraction))
        total_ns += int(value * scale)
        if total_ns > limit:
            raise ValueError(f"invalid duration {text!r}")
        position = match.end()

    microseconds = total_ns // 1000
    return timedelta(microseconds=-microseconds if negative else microseconds)


def parse_steps(text: str) -> int:
    """Parse a signed decimal 64-bit integer with no surrounding whitespace."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer {text!r} out of range")
    return value