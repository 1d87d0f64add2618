# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

import logging
import sys

from types import TracebackType


def handle_exception(
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_traceback: TracebackType | None,
) -> None:
    """Route uncaught exceptions through logging so they also reach the log file.

    Option configuration mistakes surface here when a program does not catch them.
    """
    if issubclass(exc_type, (KeyboardInterrupt, SystemExit)):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    from ...errors import ConfigurationError

    if issubclass(exc_type, ConfigurationError):
        logging.critical("Invalid command-line option configuration: %s", exc_value, exc_info=(exc_type, exc_value, exc_traceback))  # noqa: LOG015
    else:
        logging.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))  # noqa: LOG015


def install() -> None:
    sys.excepthook = handle_exception
