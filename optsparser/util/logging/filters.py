# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

import logging

from typing import override


class HandlerFilter(logging.Filter):
    """Only let through records addressed to this handler, or to no handler in particular.

    Records are addressed with ``extra={"handler": "tty"}`` or ``extra={"handler": "file"}``.
    """

    def __init__(self, handler_name: str) -> None:
        super().__init__()
        self.handler_name = handler_name

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "handler", None)
        return target is None or target == self.handler_name
