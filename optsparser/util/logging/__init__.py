# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from .levels import LoggingLevel
from .loggable_protocol import LoggableProtocol
from .logger import Logger, getLogger


__all__ = [
    "LoggableProtocol",
    "Logger",
    "LoggingLevel",
    "getLogger",
]
