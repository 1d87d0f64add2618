# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Exceptions raised by optsparser.

Two families exist and must not be confused:

* :class:`ConfigurationError` - the program declared its options incorrectly (malformed or duplicate names, a
  required option that was never added). These are raised immediately and are never rendered as usage text.
* :class:`ParseError` - the user supplied a bad command line. These are returned to the caller from
  :meth:`optsparser.OptsParser.parse`, usually after the usage text has been printed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import override


def dashes(name: str) -> str:
    """Return the dashes that precede ``name`` on the command line.

    >>> dashes("v")
    '-'
    >>> dashes("verbose")
    '--'
    """
    return "-" if len(name) == 1 else "--"


class OptsParserError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    @override
    def __str__(self) -> str:
        return self.msg


# MARK: Configuration errors
class ConfigurationError(OptsParserError):
    """The option set was declared incorrectly by the program, not by its user."""


class OptionNameError(ConfigurationError):
    """Raised for a malformed option specifier such as ``"|s"`` or ``"name|long"``."""

    def __init__(self, msg: str, spec: str) -> None:
        super().__init__(msg)
        self.spec = spec


class OptionConflictError(ConfigurationError):
    """Raised when an option reuses a long name or short alias that is already registered."""

    def __init__(self, msg: str, name: str) -> None:
        super().__init__(msg)
        self.name = name


class RequiredOptionNotRegisteredError(ConfigurationError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        listed = ", ".join(repr(name) for name in self.names)
        super().__init__(f"Option(s) {listed} declared as required but never added to the parser")


# MARK: Parse errors
class ParseError(OptsParserError):
    """The command line could not be parsed."""


class HelpRequestedError(ParseError):
    def __init__(self, msg: str = "help requested") -> None:
        super().__init__(msg)


class UnknownOptionError(ParseError):
    def __init__(self, option: str) -> None:
        super().__init__(f"flag provided but not defined: {option}")
        self.option = option


class OptionValueError(ParseError):
    def __init__(self, msg: str, option: str | None = None) -> None:
        super().__init__(msg)
        self.option = option


class RequiredOptionsMissingError(ParseError):
    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(sorted(missing))
        listed = ", ".join(f"{dashes(name)}{name}" for name in self.missing)
        super().__init__(f"required option(s) is missing: {listed}")
