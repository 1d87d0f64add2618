# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Facts about the running program: its name and whether it runs under a test harness."""

from __future__ import annotations

import functools
import os
import pathlib
import sys


DEFAULT_EXE_NAME = "optsparser"

_FALSY = frozenset(("", "0", "false", "no", "off"))


def env_flag(name: str) -> bool:
    """Whether environment variable ``name`` is set to something other than a false-like value."""
    return os.environ.get(name, "").strip().lower() not in _FALSY


@functools.cache
def is_unit_test() -> bool:
    """Test whether running in a unit test environment.

    True under pytest, or when ``UNIT_TEST`` is set to a true-like value. The answer is computed once per process.
    """
    return "PYTEST_VERSION" in os.environ or env_flag("UNIT_TEST")


def get_exe_name() -> str:
    """Name of the running executable, used as the program name in usage text.

    Falls back to ``DEFAULT_EXE_NAME`` under unit tests, so output does not depend on the test runner.
    """
    if is_unit_test() or not sys.argv or not sys.argv[0]:
        return DEFAULT_EXE_NAME
    return pathlib.Path(sys.argv[0]).name


def get_script_name() -> str:
    """Executable name without a ``.py`` suffix, e.g. for naming the log file."""
    name = get_exe_name()
    return name[:-3] if name.lower().endswith(".py") else name
