# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Usage text.

The usage text lists options in the order they were added, interleaved with separator lines::

    Usage of my-app:
      >> Integer-based parameters
      --intval int, -i int
          some integer value (required option)
      --uintval uint
          some unsigned integer value (default: 10)

The output depends only on the registered entries and the parser configuration, so rendering twice yields identical
text.
"""

from __future__ import annotations

import io

from collections.abc import Container
from typing import TYPE_CHECKING

from .errors import HelpRequestedError, dashes
from .registry import SeparatorEntry


if TYPE_CHECKING:
    from .config import ParserConfig
    from .registry import OptionRegistry, OptionSpec


OPT_INDENT = "  "
HELP_INDENT = "      "
BOOL_HINT = "[=true|false]"
REQUIRED_NOTE = " (required option)"
EMPTY_DEFAULT = '""'


def value_hint(spec: OptionSpec) -> str:
    return BOOL_HINT if spec.is_bool else f" {spec.option_type}"


def option_forms(spec: OptionSpec, config: ParserConfig) -> str:
    hint = value_hint(spec)
    long = f"{dashes(spec.long)}{spec.long}{hint}"
    if not spec.short:
        return long

    short = f"-{spec.short}{hint}"
    first, second = (short, long) if config.short_first else (long, short)
    return f"{first}{config.long_short_join}{second}"


def annotation(spec: OptionSpec, required: Container[str]) -> str:
    if spec.long in required:
        return REQUIRED_NOTE
    # Keep empty defaults visible
    return f" (default: {spec.default_text or EMPTY_DEFAULT})"


def render_option(spec: OptionSpec, config: ParserConfig, required: Container[str]) -> str:
    return f"{OPT_INDENT}{option_forms(spec, config)}\n{HELP_INDENT}{spec.usage}{annotation(spec, required)}\n"


def render_usage(registry: OptionRegistry, required: Container[str], config: ParserConfig, error: BaseException | None = None) -> str:
    """Render the usage text, preceded by an error line unless ``error`` is absent or a help request."""
    out = io.StringIO()

    if error is not None and not isinstance(error, HelpRequestedError):
        out.write(f"\nUsage ERROR: {error}\n")

    out.write(f"\nUsage of {config.name}:\n" if config.name else "\nUsage:\n")

    if config.general_descr:
        out.write(f"{config.general_descr}\n")

    for entry in registry:
        if isinstance(entry, SeparatorEntry):
            out.write(f"{OPT_INDENT}{entry.text}\n")
        else:
            out.write(render_option(entry, config, required))

    return out.getvalue()
