# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

import io

from typing import Any

import pytest

from optsparser import OptsParser


class ParserFixture:
    """Creates parsers that write usage text to a buffer and never terminate the process."""

    def __init__(self):
        self.parser: OptsParser | None = None
        self.buffer = io.StringIO()

    def create(self, name: str = "test-optsparser-app", *required: str, **config: Any) -> OptsParser:
        config.setdefault("exit_on_usage", False)
        self.buffer = io.StringIO()
        self.parser = OptsParser(name, *required, config=config, output=self.buffer)
        return self.parser

    def get(self) -> OptsParser:
        if self.parser is None:
            msg = "Parser not initialized. Call 'create()' first."
            raise RuntimeError(msg)
        return self.parser

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def parser() -> ParserFixture:
    return ParserFixture()
