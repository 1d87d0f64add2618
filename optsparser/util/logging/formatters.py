# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

import logging

from typing import override


class ConditionalFormatter(logging.Formatter):
    # Records logged with extra={"simple": True} are emitted bare, e.g. rendered usage text
    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "simple", False):
            return record.getMessage()
        return super().format(record)
