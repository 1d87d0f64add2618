# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Option parser with long/short names, required options and grouped usage output.

Basic usage::

    parser = OptsParser("my-app", "config-path")  # config-path is a required option
    config_path = parser.add_string("config-path|c", "path to configuration")
    parser.parse()
    print("Configuration is:", config_path.value)

If the command line is wrong - an unknown option, an invalid value, or a missing required option - :meth:`OptsParser.parse`
prints the usage text with the error and terminates the program. Call :meth:`OptsParser.set_usage_on_fail` with ``False``
to receive the :class:`~optsparser.errors.ParseError` instead, or :meth:`OptsParser.set_exit_on_usage` with ``False``
to print the usage text but still get the exception.

Mistakes in the option declarations themselves (malformed or duplicate names, required options that were never
added) raise :class:`~optsparser.errors.ConfigurationError` immediately.
"""

from __future__ import annotations

import contextlib
import io
import sys

from collections.abc import Mapping, Sequence
from datetime import timedelta
from typing import Any, NoReturn, Self, TextIO, TypeVar

from .config import ParserConfig
from .errors import HelpRequestedError, ParseError
from .flagset import FlagSet
from .names import resolve_option_name
from .registry import OptionRegistry, OptionSpec
from .required import RequiredTracker
from .usage import render_usage
from .util.mixins import LoggableMixin
from .values import (
    BoolValue,
    DurationValue,
    Float64Value,
    Int64Value,
    IntValue,
    SettableValue,
    StringValue,
    Uint64Value,
    UintValue,
    option_type_of,
)


V = TypeVar("V", bound=SettableValue)


class OptsParser(LoggableMixin):
    """Command-line option parser.

    Args:
        name: Printed in the usage header; usually the executable name. May be empty.
        *required: Long names of options that must be given on the command line. Each must later be added with one
            of the ``add_*`` methods, otherwise :meth:`parse` raises
            :class:`~optsparser.errors.RequiredOptionNotRegisteredError`.
        config: Initial configuration, as a :class:`ParserConfig` or a mapping of its fields. ``name`` overrides
            ``config.name`` when given.
        output: Stream usage text is written to. Defaults to ``sys.stderr`` at the time of writing.

    """

    def __init__(self, name: str = "", *required: str, config: ParserConfig | Mapping[str, Any] | None = None, output: TextIO | None = None) -> None:
        super().__init__()

        if config is None:
            config = ParserConfig()
        elif not isinstance(config, ParserConfig):
            config = ParserConfig.model_validate(config)
        if name:
            config = config.updated(name=name)
        self.config: ParserConfig = config

        self._output = output
        self._registry = OptionRegistry()
        self._required = RequiredTracker(required)
        self._flags = FlagSet(self.config.name)
        self._flags.log_parent = self

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def output(self) -> TextIO:
        return sys.stderr if self._output is None else self._output

    @property
    def args(self) -> list[str]:
        """Positional arguments left over by the last :meth:`parse`."""
        return list(self._flags.args)

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    @property
    def required(self) -> RequiredTracker:
        return self._required

    # MARK: Configuration
    def _configure(self, **changes: Any) -> Self:
        self.config = self.config.updated(**changes)
        return self

    def set_general_descr(self, descr: str) -> Self:
        """Set the general description, e.g. ``"$ my-app --required-keys ... [--optional-keys ...]"``.

        It is printed after the usage header and before the option list.
        """
        return self._configure(general_descr=descr)

    def set_long_short_join_str(self, join: str) -> Self:
        return self._configure(long_short_join=join)

    def set_short_first(self, short_first: bool) -> Self:  # noqa: FBT001
        return self._configure(short_first=short_first)

    def set_usage_on_fail(self, usage_on_fail: bool) -> Self:  # noqa: FBT001
        return self._configure(usage_on_fail=usage_on_fail)

    def set_exit_on_usage(self, exit_on_usage: bool) -> Self:  # noqa: FBT001
        return self._configure(exit_on_usage=exit_on_usage)

    def set_output(self, output: TextIO | None) -> Self:
        self._output = output
        return self

    # MARK: Registration
    def add(self, opt_name: str, usage: str, value: V) -> V:
        """Add an option bound to ``value`` and return ``value``.

        ``opt_name`` is ``"long|s"``, ``"long"`` or ``"s"``. The default shown in the usage text is ``str(value)`` at the
        time of this call.

        Raises:
            OptionNameError: if ``opt_name`` is malformed.
            OptionConflictError: if the long name or short alias is already in use.

        """
        option_type = option_type_of(value)
        name = resolve_option_name(opt_name, option_type, usage)

        # Must fail before anything is bound
        self._registry.check_available(name)

        spec = OptionSpec(
            long=name.long,
            short=name.short,
            option_type=option_type,
            usage=usage,
            default_text=str(value),
            value=value,
        )
        self._flags.bind(spec.long, spec.flags, value, usage)
        self._registry.add(spec)

        if self._required.register(spec.long):
            self.log.debug("Added required option %s (%s)", "/".join(spec.flags), option_type)
        else:
            self.log.debug("Added option %s (%s), default %r", "/".join(spec.flags), option_type, spec.default_text)

        return value

    def add_bool(self, opt_name: str, usage: str, default: bool = False) -> BoolValue:  # noqa: FBT001, FBT002
        return self.add(opt_name, usage, BoolValue(default))

    def add_string(self, opt_name: str, usage: str, default: str = "") -> StringValue:
        return self.add(opt_name, usage, StringValue(default))

    def add_int(self, opt_name: str, usage: str, default: int = 0) -> IntValue:
        return self.add(opt_name, usage, IntValue(default))

    def add_int64(self, opt_name: str, usage: str, default: int = 0) -> Int64Value:
        return self.add(opt_name, usage, Int64Value(default))

    def add_uint(self, opt_name: str, usage: str, default: int = 0) -> UintValue:
        return self.add(opt_name, usage, UintValue(default))

    def add_uint64(self, opt_name: str, usage: str, default: int = 0) -> Uint64Value:
        return self.add(opt_name, usage, Uint64Value(default))

    def add_float64(self, opt_name: str, usage: str, default: float = 0.0) -> Float64Value:
        return self.add(opt_name, usage, Float64Value(default))

    def add_duration(self, opt_name: str, usage: str, default: timedelta | None = None) -> DurationValue:
        return self.add(opt_name, usage, DurationValue(default))

    def add_var(self, opt_name: str, usage: str, target: V) -> V:
        """Add an option backed by a caller-defined :class:`~optsparser.values.SettableValue`."""
        return self.add(opt_name, usage, target)

    def add_separator(self, *texts: str) -> None:
        """Add lines to the usage text at this point, e.g. a title for the options that follow.

        An empty string adds a line holding only the indent.
        """
        for text in texts:
            self._registry.add_separator(text)
            self.log.debug("Added separator %r", text)

    def lookup(self, name: str) -> OptionSpec | None:
        """Find an option by long name or short alias."""
        return self._registry.lookup(name)

    # MARK: Parsing
    def parse(self, argv: Sequence[str] | None = None) -> list[str]:
        """Parse the command line and return the positional arguments.

        Args:
            argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.

        Raises:
            RequiredOptionNotRegisteredError: if a required option was declared but never added.
            HelpRequestedError: if help was requested and the usage text did not terminate the process.
            ParseError: if the command line is invalid and the usage text did not terminate the process.

        """
        self._required.check_registered()
        self._required.reset()

        if argv is None:
            argv = sys.argv[1:]
        self.log.debug("Parsing %r", list(argv))

        try:
            # Whatever argparse prints must not show up next to our own usage text
            with contextlib.redirect_stderr(io.StringIO()) as discarded:
                args = self._flags.parse(argv)
        except HelpRequestedError as err:
            self.log.debug("Help requested")
            self.usage(err)
            raise
        except ParseError as err:
            self.log.debug("Parsing failed: %s", err)
            self._fail(err)
        finally:
            if diagnostics := discarded.getvalue():
                self.log.debug("Discarded flag facility output: %r", diagnostics)

        for name in self._flags.visit():
            self._required.satisfy(name, self._registry)

        try:
            self._required.check_satisfied()
        except ParseError as err:
            self.log.debug("Required options missing: %s", err)
            self._fail(err)

        self.log.debug("Parsed successfully, positional arguments %r", args)
        return args

    def _fail(self, error: ParseError) -> NoReturn:
        if self.config.usage_on_fail:
            self.usage(error)
        raise error

    # MARK: Usage
    def format_usage(self, error: BaseException | None = None) -> str:
        return render_usage(self._registry, self._required, self.config, error)

    def usage(self, error: BaseException | None = None) -> None:
        """Write the usage text to :attr:`output`, with ``error`` as the first line if given.

        Unless exit-on-usage is disabled, the process then terminates with status 1, help requests included.
        """
        self.output.write(self.format_usage(error))
        self.output.flush()

        if self.config.exit_on_usage:
            sys.exit(1)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} options={len(self._registry)} required={len(self._required)}>"
