# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

import enum

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from .errors import RequiredOptionNotRegisteredError, RequiredOptionsMissingError


if TYPE_CHECKING:
    from .registry import OptionRegistry


class RequiredState(enum.Enum):
    DECLARED = enum.auto()  # named when the parser was created
    REGISTERED = enum.auto()  # added to the parser
    SATISFIED = enum.auto()  # given on the command line


class RequiredTracker:
    """Track required options from declaration through registration to being supplied.

    Required options are always tracked by long name. Parsing may only start once every declared name has been
    registered; it only succeeds if every one of them ends up satisfied.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._states: dict[str, RequiredState] = {}
        self.declare(*names)

    def declare(self, *names: str) -> None:
        for name in names:
            self._states.setdefault(name, RequiredState.DECLARED)

    def register(self, long: str) -> bool:
        """Mark ``long`` as added to the parser. Returns whether it is a required option."""
        if long not in self._states:
            return False
        if self._states[long] is RequiredState.DECLARED:
            self._states[long] = RequiredState.REGISTERED
        return True

    def satisfy(self, name: str, registry: OptionRegistry) -> bool:
        """Mark the option seen on the command line as ``name`` (a long name or short alias) as supplied."""
        long = registry.resolve(name)
        if long is None or long not in self._states:
            return False
        self._states[long] = RequiredState.SATISFIED
        return True

    def reset(self) -> None:
        for name, state in self._states.items():
            if state is RequiredState.SATISFIED:
                self._states[name] = RequiredState.REGISTERED

    def state(self, long: str) -> RequiredState | None:
        return self._states.get(long)

    def is_required(self, long: str) -> bool:
        return long in self._states

    def unregistered(self) -> list[str]:
        return sorted(name for name, state in self._states.items() if state is RequiredState.DECLARED)

    def missing(self) -> list[str]:
        return sorted(name for name, state in self._states.items() if state is not RequiredState.SATISFIED)

    def check_registered(self) -> None:
        if names := self.unregistered():
            raise RequiredOptionNotRegisteredError(names)

    def check_satisfied(self) -> None:
        if names := self.missing():
            raise RequiredOptionsMissingError(names)

    def __contains__(self, long: object) -> bool:
        return long in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._states))
