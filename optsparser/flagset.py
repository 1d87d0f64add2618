# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""The flag facility: binding options to :mod:`argparse`.

:class:`FlagSet` owns an :class:`argparse.ArgumentParser` and only uses it to tokenize the command line and dispatch
option values to the bound value objects. Help output, usage output and error exits of :mod:`argparse` are never used;
errors are raised as :class:`~optsparser.errors.ParseError` instead.
"""

from __future__ import annotations

import argparse
import re

from collections.abc import Callable, Iterator, Sequence
from typing import Any, NoReturn, override

from .errors import HelpRequestedError, OptionValueError, ParseError, UnknownOptionError
from .util.mixins import LoggableMixin
from .values import SettableValue, is_bool_flag


HELP_FLAGS: tuple[str, ...] = ("-h", "--help", "--h", "-help")
END_OF_OPTIONS = "--"

_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")


class _ArgumentParser(argparse.ArgumentParser):
    @override
    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


class _BoundAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str, *, target: SettableValue, on_set: Callable[[str], None], **kwargs) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self.target = target
        self.on_set = on_set

    @override
    def __call__(self, parser: argparse.ArgumentParser, namespace: argparse.Namespace, values: Any, option_string: str | None = None) -> None:
        flag = option_string or self.option_strings[0]
        try:
            self.target.set(values)
        except ValueError as err:
            msg = f"invalid value {values!r} for flag {flag}: {err}"
            raise OptionValueError(msg, flag) from err
        self.on_set(flag)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str = argparse.SUPPRESS, **kwargs) -> None:
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    @override
    def __call__(self, parser: argparse.ArgumentParser, namespace: argparse.Namespace, values: Any, option_string: str | None = None) -> None:
        raise HelpRequestedError


def looks_like_flag(token: str) -> bool:
    return len(token) > 1 and token.startswith("-") and _NEGATIVE_NUMBER.match(token) is None and " " not in token


class FlagSet(LoggableMixin):
    def __init__(self, name: str = "") -> None:
        super().__init__()
        self.name = name
        # Options may claim a help spelling after help was bound; "resolve" lets them take the spelling over
        self._parser = _ArgumentParser(prog=name or None, add_help=False, allow_abbrev=False, conflict_handler="resolve")
        self._values: dict[str, SettableValue] = {}
        self._flag_to_name: dict[str, str] = {}
        self._bool_flags: set[str] = set()
        self._help_flags: tuple[str, ...] | None = None
        self._visited: dict[str, None] = {}
        self.args: list[str] = []

    def bind(self, name: str, flags: Sequence[str], value: SettableValue, usage: str = "") -> None:
        """Bind ``value`` to every spelling in ``flags``. ``name`` is the option's key."""
        self._parser.add_argument(*flags, dest=name, action=_BoundAction, target=value, on_set=self._visit, default=argparse.SUPPRESS)

        self._values[name] = value
        for flag in flags:
            self._flag_to_name[flag] = name
        if is_bool_flag(value):
            self._bool_flags.update(flags)

        self.log.debug("Bound %s to %r: %s", "/".join(flags), value, usage)

    def lookup(self, name: str) -> SettableValue | None:
        return self._values.get(name)

    @property
    def help_flags(self) -> tuple[str, ...]:
        """The help spellings whose name (with either dash count) no registered option uses."""
        taken = {flag.lstrip("-") for flag in self._flag_to_name}
        return tuple(flag for flag in HELP_FLAGS if flag.lstrip("-") not in taken)

    def _bind_help(self) -> None:
        if self._help_flags is not None:
            return
        self._help_flags = self.help_flags
        if self._help_flags:
            self._parser.add_argument(*self._help_flags, action=_HelpAction)

    def _visit(self, flag: str) -> None:
        self._visited[flag.lstrip("-")] = None

    def visit(self) -> Iterator[str]:
        """Names (as written, without dashes) of the options set on the last command line, in first-seen order."""
        return iter(tuple(self._visited))

    def _attach_values(self, argv: Sequence[str]) -> tuple[list[str], list[str]]:
        """Rewrite every option occurrence into ``flag=value`` form and split off the tokens after ``--``.

        A non-boolean option takes the following token as its value, even one starting with a dash. ``--`` always ends
        the options.
        """
        head: list[str] = []
        index = 0
        while index < len(argv):
            token = argv[index]
            index += 1
            if token == END_OF_OPTIONS:
                return head, list(argv[index:])
            if token in self._bool_flags:
                # A bare boolean flag means "true"; explicit values must be attached with '='
                token = f"{token}=true"
            elif token in self._flag_to_name and index < len(argv) and argv[index] != END_OF_OPTIONS:
                token = f"{token}={argv[index]}"
                index += 1
            head.append(token)
        return head, []

    def parse(self, argv: Sequence[str]) -> list[str]:
        """Parse ``argv`` (without the program name) and return the positional arguments.

        Raises:
            HelpRequestedError: if a help flag was given.
            ParseError: for unknown options, missing option arguments or malformed values.

        """
        self._bind_help()
        self._visited.clear()
        self.args = []

        head, tail = self._attach_values(argv)
        _, extras = self._parser.parse_known_args(head)

        for token in extras:
            if looks_like_flag(token):
                raise UnknownOptionError(token)

        self.args = [*extras, *tail]
        return self.args
