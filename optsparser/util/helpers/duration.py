# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Duration strings in the ``72h3m0.5s`` notation.

A duration is an optionally signed sequence of decimal numbers, each with an optional fraction and a unit suffix.
Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. Durations are represented as
:class:`datetime.timedelta`, so anything below one microsecond is truncated.

>>> parse_duration("1h30m")
datetime.timedelta(seconds=5400)
>>> format_duration(parse_duration("250560m"))
'4176h0m0s'
>>> format_duration(timedelta(milliseconds=1500))
'1.5s'
>>> format_duration(timedelta(0))
'0s'
"""

import re

from datetime import timedelta
from decimal import Decimal


NANOSECOND  = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND      = 1000 * MILLISECOND
MINUTE      = 60 * SECOND
HOUR        = 60 * MINUTE  # fmt: skip

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# Durations are bounded by a signed 64-bit nanosecond count
MAX_NANOSECONDS = (1 << 63) - 1

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)([^\d.]*)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as ``"300ms"``, ``"-1.5h"`` or ``"2h45m"``.

    Raises:
        ValueError: if the text is not a valid duration.

    """
    body = text
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]

    # A bare zero is the only value allowed without a unit
    if body == "0":
        return timedelta(0)
    if not body:
        msg = f"invalid duration {text!r}"
        raise ValueError(msg)

    total = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _COMPONENT.match(body, pos)
        if match is None:
            msg = f"invalid duration {text!r}"
            raise ValueError(msg)

        number, unit = match.groups()
        if not unit:
            msg = f"missing unit in duration {text!r}"
            raise ValueError(msg)
        if (scale := UNITS.get(unit)) is None:
            msg = f"unknown unit {unit!r} in duration {text!r}"
            raise ValueError(msg)

        total += Decimal(number) * scale
        pos = match.end()

    nanoseconds = int(total)
    if nanoseconds > MAX_NANOSECONDS + (1 if negative else 0):
        msg = f"invalid duration {text!r}"
        raise ValueError(msg)

    result = timedelta(microseconds=nanoseconds // MICROSECOND)
    return -result if negative else result


def to_nanoseconds(value: timedelta) -> int:
    return ((value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds) * MICROSECOND


def _fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Format a duration the way :func:`parse_duration` reads it, e.g. ``"1h0m0s"`` or ``"1.5ms"``."""
    nanoseconds = to_nanoseconds(value)
    sign = "-" if nanoseconds < 0 else ""
    nanoseconds = abs(nanoseconds)

    # Sub-second durations use the smallest unit that keeps a non-zero integer part
    if nanoseconds < SECOND:
        if nanoseconds == 0:
            return "0s"
        if nanoseconds < MICROSECOND:
            return f"{sign}{nanoseconds}ns"
        if nanoseconds < MILLISECOND:
            return f"{sign}{_fraction(nanoseconds, MICROSECOND)}µs"
        return f"{sign}{_fraction(nanoseconds, MILLISECOND)}ms"

    hours, rest = divmod(nanoseconds, HOUR)
    minutes, rest = divmod(rest, MINUTE)

    text = f"{_fraction(rest, SECOND)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text
