# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Registered options, kept in the order they were declared.

The registry owns the per-option metadata keyed by long name, the short-to-long alias index, and the ordered list of
entries (options and separators) that drives the usage text. Entries are never removed.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import OptionConflictError, dashes
from .names import ResolvedName
from .values import OptionType, SettableValue


@dataclass(frozen=True, slots=True)
class OptionSpec:
    long: str
    short: str
    option_type: OptionType
    usage: str
    default_text: str
    value: SettableValue = field(compare=False, repr=False)

    @property
    def has_short(self) -> bool:
        return bool(self.short)

    @property
    def flags(self) -> tuple[str, ...]:
        """Command-line spellings, long form first."""
        long = f"{dashes(self.long)}{self.long}"
        return (long, f"-{self.short}") if self.short else (long,)

    @property
    def is_bool(self) -> bool:
        return self.option_type == OptionType.BOOL


@dataclass(frozen=True, slots=True)
class SeparatorEntry:
    text: str


type Entry = OptionSpec | SeparatorEntry


class OptionRegistry:
    def __init__(self) -> None:
        self._options: dict[str, OptionSpec] = {}
        self._short_to_long: dict[str, str] = {}
        self._flags: dict[str, str] = {}
        self._entries: list[Entry] = []

    def check_available(self, name: ResolvedName) -> None:
        """Raise :class:`OptionConflictError` if any spelling of ``name`` is already taken.

        Called before anything is bound, so a conflicting declaration leaves no partial state behind.
        """
        if name.long in self._options:
            msg = f"Option {name.long!r} is already defined"
            raise OptionConflictError(msg, name.long)

        for flag in name.flags:
            if (owner := self._flags.get(flag)) is not None:
                msg = f"Option {flag} of {name.long!r} is already defined by option {owner!r}"
                raise OptionConflictError(msg, flag)

    def add(self, spec: OptionSpec) -> OptionSpec:
        self.check_available(ResolvedName(spec.long, spec.short, spec.has_short))

        self._options[spec.long] = spec
        if spec.short:
            self._short_to_long[spec.short] = spec.long
        for flag in spec.flags:
            self._flags[flag] = spec.long
        self._entries.append(spec)
        return spec

    def add_separator(self, text: str) -> SeparatorEntry:
        entry = SeparatorEntry(text)
        self._entries.append(entry)
        return entry

    def get(self, long: str) -> OptionSpec | None:
        return self._options.get(long)

    def resolve(self, name: str) -> str | None:
        """Return the long name for ``name``, which may be a long name or a short alias."""
        if name in self._options:
            return name
        return self._short_to_long.get(name)

    def lookup(self, name: str) -> OptionSpec | None:
        long = self.resolve(name)
        return None if long is None else self._options[long]

    def is_flag_taken(self, flag: str) -> bool:
        return flag in self._flags

    def taken_flags(self) -> frozenset[str]:
        return frozenset(self._flags)

    @property
    def short_to_long(self) -> Mapping[str, str]:
        return MappingProxyType(self._short_to_long)

    def options(self) -> tuple[OptionSpec, ...]:
        return tuple(entry for entry in self._entries if isinstance(entry, OptionSpec))

    def __contains__(self, long: object) -> bool:
        return long in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)
