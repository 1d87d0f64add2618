# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

import logging

from typing import Any, override

from .loggable_protocol import LoggableProtocol


class Logger(logging.Logger):
    """Logger that can answer whether a given handler (``tty`` or ``file``) would emit a record."""

    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        if handler == "tty":
            return self.isEnabledForTty(level)
        if handler == "file":
            return self.isEnabledForFile(level)
        msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
        raise ValueError(msg)

    def _handler_allows(self, handler: logging.Handler | None, level: int) -> bool:
        if handler is None or handler.level > level:
            return False
        return super().isEnabledFor(level)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        return self._handler_allows(LoggingManager().ch, level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        return self._handler_allows(LoggingManager().fh, level)


def _logger_name(obj: object, name: str | None) -> str:
    if name is not None:
        return name
    if isinstance(obj, str):
        return obj
    if isinstance(obj, type):
        return obj.__name__
    return type(obj).__name__


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802
    """Return the :class:`Logger` for ``obj``.

    ``obj`` may be a logger name, a class or an instance (which uses its class name). When ``parent`` is a logger or a
    :class:`LoggableProtocol`, the new logger becomes its child.
    """
    name = _logger_name(obj, name)

    # Loggers created before this module was imported keep their original class, so swap the class temporarily
    previous = logging.getLoggerClass()
    logging.setLoggerClass(Logger)
    try:
        if isinstance(parent, logging.Logger):
            logger = parent.getChild(name)
        elif isinstance(parent, LoggableProtocol):
            logger = parent.log.getChild(name)
        else:
            logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)

    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)

    # Apply custom level overrides once logging has been configured
    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger
