# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Command-line option parsing with long/short names, required options and grouped usage output."""

from .config import ParserConfig
from .errors import (
    ConfigurationError,
    HelpRequestedError,
    OptionConflictError,
    OptionNameError,
    OptionValueError,
    OptsParserError,
    ParseError,
    RequiredOptionNotRegisteredError,
    RequiredOptionsMissingError,
    UnknownOptionError,
)
from .parser import OptsParser
from .registry import OptionSpec
from .values import (
    BoolValue,
    DurationValue,
    Float64Value,
    Int64Value,
    IntValue,
    OptionType,
    OptionValue,
    SettableValue,
    StringValue,
    Uint64Value,
    UintValue,
)


__all__ = [
    "BoolValue",
    "ConfigurationError",
    "DurationValue",
    "Float64Value",
    "HelpRequestedError",
    "Int64Value",
    "IntValue",
    "OptionConflictError",
    "OptionNameError",
    "OptionSpec",
    "OptionType",
    "OptionValue",
    "OptionValueError",
    "OptsParser",
    "OptsParserError",
    "ParseError",
    "ParserConfig",
    "RequiredOptionNotRegisteredError",
    "RequiredOptionsMissingError",
    "SettableValue",
    "StringValue",
    "Uint64Value",
    "UintValue",
    "UnknownOptionError",
]
