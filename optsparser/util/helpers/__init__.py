# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from . import duration, script_info
from .duration import format_duration, parse_duration
from .frozendict import FrozenDict


__all__ = [
    "FrozenDict",
    "duration",
    "format_duration",
    "parse_duration",
    "script_info",
]
