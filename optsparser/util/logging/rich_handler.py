# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


if TYPE_CHECKING:
    import logging

    from rich.console import ConsoleRenderable


class CustomRichHandler(RichHandler):
    """Console handler printing ``[L:logger.name] message``, coloured by level.

    Records logged with ``extra={"simple": True}`` are printed as they are, without prefix or colour.
    """

    def __init__(self, *args, show_logger_name: bool = True, **kwargs) -> None:
        kwargs.setdefault("console", Console(stderr=True))
        kwargs.setdefault("rich_tracebacks", True)
        super().__init__(*args, show_time=False, show_level=False, show_path=False, **kwargs)
        self.show_logger_name = show_logger_name

    @staticmethod
    def level_style(record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    def prefix(self, record: logging.LogRecord) -> Text:
        text = Text("[", style="dim")
        text.append(record.levelname[:1], style=self.level_style(record))
        if self.show_logger_name:
            text.append(f":{record.name}", style="dim")
        text.append("] ", style="dim")
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        if getattr(record, "simple", False):
            return Text(message)
        return Text.assemble(self.prefix(record), Text(message, style=self.level_style(record)))
