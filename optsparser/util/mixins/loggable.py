# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

from typing import override

from ..logging import LoggableProtocol, Logger, getLogger


class LoggableMixin:
    """Mixin that adds a logger to a class.

    Provides a ``.log`` property named after the class, optionally nested under ``self.log_parent`` when that is
    itself loggable.
    """

    log_parent: object | None = None

    @property
    def log(self) -> Logger:
        """Return a logger for the current object, created on first use.

        Returns:
            Logger: The logger instance for the object.

        """
        log: Logger | None = self.__dict__.get("_log")
        if log is None:
            parent = self.log_parent if isinstance(self.log_parent, LoggableProtocol) else None
            log = getLogger(self.__log_name__, parent=parent)
            self.__dict__["_log"] = log
        return log

    @property
    def __log_name__(self) -> str:
        return type(self).__name__

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
