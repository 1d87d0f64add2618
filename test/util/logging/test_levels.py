# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

import logging

import pytest

from pydantic import ValidationError

from optsparser.util.logging import LoggingLevel
from optsparser.util.logging.config import LoggingLevels


@pytest.mark.logging
@pytest.mark.logging_levels
class TestLoggingLevel:
    @pytest.mark.parametrize(
        ("input", "expected"),
        [
            (10, 10),
            (logging.INFO, logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("critical", logging.CRITICAL),
            ("20", 20),
            ("-1", -1),
            ("off", -1),
            ("no", -1),
            (True, logging.INFO),
            (False, -1),
        ],
    )
    def test_conversion(self, input, expected):  # noqa: A002
        assert LoggingLevel(input).value == expected

    @pytest.mark.parametrize("input", ["notalevel", 3.14, None, [], "-2"])
    def test_rejects_invalid(self, input):  # noqa: A002
        with pytest.raises((ValueError, TypeError)):
            LoggingLevel(input)

    @pytest.mark.parametrize(
        ("input", "expected_name", "expected_repr"),
        [
            ("DEBUG", "DEBUG", "LoggingLevel.DEBUG"),
            (logging.INFO, "INFO", "LoggingLevel.INFO"),
            (42, "42", "LoggingLevel(42)"),
            ("-1", "OFF", "LoggingLevel.OFF"),
        ],
    )
    def test_str_output(self, input, expected_name, expected_repr):  # noqa: A002
        level = LoggingLevel(input)
        assert level.name == expected_name
        assert str(level) == expected_name
        assert repr(level) == expected_repr

    def test_equality(self):
        assert LoggingLevel.INFO == LoggingLevel("info")
        assert LoggingLevel.INFO == logging.INFO
        assert LoggingLevel.INFO == "info"
        assert LoggingLevel.INFO != LoggingLevel.DEBUG
        assert int(LoggingLevel.WARNING) == logging.WARNING
        assert not LoggingLevel.OFF.enabled

    @pytest.mark.parametrize(("count", "expected"), [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (7, logging.DEBUG)])
    def test_from_verbosity(self, count, expected):
        assert LoggingLevel.from_verbosity(count) == expected

    def test_from_verbosity_rejects_negative(self):
        with pytest.raises(ValueError, match="must not be negative"):
            LoggingLevel.from_verbosity(-1)


@pytest.mark.logging
@pytest.mark.logging_levels
class TestLoggingLevels:
    def test_defaults(self):
        levels = LoggingLevels()
        assert levels.file == LoggingLevel.OFF
        assert levels.tty == LoggingLevel.WARNING
        assert levels.default == LoggingLevel.INFO

    def test_none_uses_default(self):
        assert LoggingLevels.model_validate({"tty": None}).tty == LoggingLevel.WARNING

    def test_custom_levels_include_flag_facility(self):
        levels = LoggingLevels.model_validate({"custom": {"^OptsParser$": "DEBUG"}})
        patterns = {pattern.pattern: level for pattern, level in levels.custom.items()}

        assert patterns["^OptsParser$"] == LoggingLevel.DEBUG
        assert patterns[r"^(?:.*\.)?FlagSet$"] == LoggingLevel.INFO

    def test_rejects_invalid(self):
        with pytest.raises(ValidationError):
            LoggingLevels.model_validate({"tty": "loud"})
