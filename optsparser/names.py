# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Option specifiers.

An option is declared with a single specifier string:

* ``"long-name|l"`` - long name ``long-name`` with the short alias ``l``
* ``"long-name"`` - long name only
* ``"l"`` - a short-only option; its key is ``l`` and it is written ``-l``

>>> resolve_option_name("config-path|c")
ResolvedName(long='config-path', short='c', has_short=True)
>>> resolve_option_name("v")
ResolvedName(long='v', short='', has_short=False)
"""

from __future__ import annotations

import re

from typing import NamedTuple

from .errors import OptionNameError
from .values import OptionType


SEPARATOR = "|"

# Names the flag facility cannot carry; a leading digit would read as a negative number
_INVALID_NAME = re.compile(r"^[-\d]|[=\s]")


class ResolvedName(NamedTuple):
    long: str
    short: str
    has_short: bool

    @property
    def flags(self) -> tuple[str, ...]:
        """Command-line spellings of the option, long form first."""
        long = f"{'-' if len(self.long) == 1 else '--'}{self.long}"
        return (long, f"-{self.short}") if self.has_short else (long,)


def split_option_name(spec: str) -> ResolvedName:
    long, sep, short = spec.partition(SEPARATOR)
    return ResolvedName(long, short, bool(sep))


def resolve_option_name(spec: str, option_type: OptionType = OptionType.VALUE, usage: str = "") -> ResolvedName:
    """Split ``spec`` into its long and short names and validate them.

    Raises:
        OptionNameError: if the specifier is malformed.

    """
    resolved = split_option_name(spec)
    long, short, has_short = resolved

    if option_type == OptionType.SEPARATOR:
        return resolved

    if long == short:
        msg = f"Option of type {option_type} with the usage message {usage!r} has inappropriate option name {spec!r}"
        raise OptionNameError(msg, spec)

    if not long and has_short:
        msg = f"Invalid specification: {spec!r} - if you want to use a short option without long one (e.g. \"-{short}\") just use {short!r} as the option name"
        raise OptionNameError(msg, spec)

    if has_short and len(short) != 1:
        msg = f"Invalid option description {spec!r} - length of short option must be == 1"
        raise OptionNameError(msg, spec)

    for name in (long, short) if has_short else (long,):
        if _INVALID_NAME.search(name) is not None:
            msg = f"Option of type {option_type} has inappropriate option name {name!r} in {spec!r}"
            raise OptionNameError(msg, spec)

    return resolved
