# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

from pydantic import Field

from .util.config import BaseConfigModel


LONG_SHORT_JOIN_DEFAULT = ", "


class ParserConfig(BaseConfigModel):
    name: str = Field(default="", description="Name printed in the usage header, normally the executable name")
    general_descr: str = Field(default="", description="Free text printed verbatim between the usage header and the option list")
    long_short_join: str = Field(default=LONG_SHORT_JOIN_DEFAULT, description="String joining the long and short spellings of an option in usage output")
    short_first: bool = Field(default=False, description="Print the short spelling before the long one in usage output")
    usage_on_fail: bool = Field(default=True, description="Print usage when parsing fails")
    exit_on_usage: bool = Field(default=True, description="Terminate the process after printing usage")
