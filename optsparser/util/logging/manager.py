# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Logging setup for programs built on optsparser.

The library itself only logs. A program configures handlers once, typically right after its options were parsed::

    LoggingManager().initialize({"levels": {"tty": "INFO"}})

This installs an optional log file handler, a TTY handler (rich or plain), an exception hook, and applies the per-logger
levels from :class:`~optsparser.util.logging.config.LoggingLevels` to every logger, including ones created later.
"""

from __future__ import annotations

import logging
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self

from ..helpers import script_info
from . import exception_handler
from .config import LoggingConfig
from .filters import HandlerFilter
from .formatters import ConditionalFormatter


if TYPE_CHECKING:
    from pathlib import Path

    from .levels import LoggingLevel


FILE_FORMAT = "%(asctime)s [%(levelname)s:%(name)s] %(message)s"
TTY_FORMAT = "[%(levelname).1s:%(name)s] %(message)s"


class LoggingManager:
    """Process-wide logging configuration. Every instantiation returns the same object."""

    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    config: LoggingConfig
    fh: logging.Handler | None = None
    ch: logging.Handler | None = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.initialized = False
        return cls._instance

    @property
    def log_file_path(self) -> Path:
        return self.config.dir / f"{script_info.get_script_name()}.log"

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)

        self.config = config if isinstance(config, LoggingConfig) else LoggingConfig.model_validate(config)
        self.initialized = True

        logging.captureWarnings(capture=True)
        logging.root.setLevel(max(self.config.levels.root.value, logging.NOTSET))

        self.fh = self._file_handler()
        if self.fh is not None:
            logging.root.addHandler(self.fh)

        self.ch = self._tty_handler()
        # pytest captures log records itself
        if self.ch is not None and not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

        if not script_info.is_unit_test():
            self._install_exception_hook()

        for name in list(logging.root.manager.loggerDict):
            self.apply_logging_level(logging.getLogger(name))

    # MARK: Handlers
    def _file_handler(self) -> logging.Handler | None:
        level = self.config.levels.file
        if not level.enabled:
            return None

        path = self.log_file_path
        path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(path, mode="w")
        handler.setFormatter(ConditionalFormatter(FILE_FORMAT))
        return self._finish(handler, level, "file")

    def _tty_handler(self) -> logging.Handler | None:
        level = self.config.levels.tty
        if not level.enabled:
            return None

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            handler: logging.Handler = CustomRichHandler()
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(ConditionalFormatter(TTY_FORMAT))
        return self._finish(handler, level, "tty")

    @staticmethod
    def _finish(handler: logging.Handler, level: LoggingLevel, name: str) -> logging.Handler:
        handler.setLevel(level.value)
        handler.addFilter(HandlerFilter(name))
        return handler

    def _install_exception_hook(self) -> None:
        if self.config.rich:
            from rich.traceback import install

            install(extra_lines=1, width=160, word_wrap=False)
        else:
            exception_handler.install()

    # MARK: Levels
    def level_for(self, name: str) -> LoggingLevel:
        """Level configured for logger ``name``: the custom pattern with the longest match wins, else the default."""
        best: LoggingLevel = self.config.levels.default
        best_len = 0
        for pattern, level in self.config.levels.custom.items():
            match = pattern.match(name)
            if match is not None and len(match.group(0)) > best_len:
                best, best_len = level, len(match.group(0))
        return best

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Explicit levels win
        if logger.level != logging.NOTSET:
            return

        level = self.level_for(logger.name)
        if level.enabled and level != logging.NOTSET:
            logger.setLevel(level.value)
