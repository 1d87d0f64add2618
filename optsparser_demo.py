# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Example command-line program built on optsparser.

Declares grouped options, three of them required, parses the command line, configures logging from ``--verbosity`` and
prints the result. Try ``optsparser_demo.py --help``.
"""

from optsparser import OptsParser, UintValue
from optsparser.util.helpers import script_info
from optsparser.util.logging import LoggingLevel, getLogger
from optsparser.util.logging.manager import LoggingManager


def build_parser(name: str) -> tuple[OptsParser, UintValue]:
    parser = OptsParser(name, "strval-required", "duration-value", "intval")
    parser.set_general_descr(f"\n$ {name} --REQUIRED-KEYS ... [--optional-keys ...] [ARGUMENTS ...]\n")

    # Add separator as a title of an option group
    parser.add_separator(">> Boolean parameters")
    parser.add_bool("yesno|y", "some boolean value", default=True)

    parser.add_separator(
        "",
        ">> String-based parameters",
        ">> One required and two parameters with defaults are supported",
    )
    parser.add_string("strval-required|S", "some required string value")
    parser.add_string("strval-default|s", "some string value with defaults", "default string")
    parser.add_duration("duration-value|D", "some duration data")

    parser.add_separator("", ">> Integer-based parameters")
    parser.add_int("intval|i", "some integer value", -10)
    parser.add_int64("int64val", "some integer64 value", -100)
    parser.add_uint("uintval", "some unsigned integer value", 10)
    parser.add_uint64("uint64val", "some unsigned integer64 value", 100)

    parser.add_separator("", ">> Float64-based parameters")
    parser.add_float64("floatval", "some float value")

    parser.add_separator("", ">> Logging")
    verbosity = parser.add_uint("verbosity|v", "0 shows warnings, 1 adds information, 2 or more adds debug output")

    return parser, verbosity


def main() -> None:
    parser, verbosity = build_parser(script_info.get_exe_name())

    # Exits the program with the usage text if anything is wrong
    args = parser.parse()

    level = LoggingLevel.from_verbosity(verbosity.value)
    LoggingManager().initialize({"levels": {"tty": level, "default": level}})

    log = getLogger(__name__)
    log.info("Logging at %s", level)

    for spec in parser.registry.options():
        print(f"{spec.long:>16} = {spec.value}")  # noqa: T201
    print(f"Arguments are: {args!r}")  # noqa: T201


if __name__ == "__main__":
    main()
