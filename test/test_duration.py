# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from datetime import timedelta

import pytest

from optsparser.util.helpers.duration import format_duration, parse_duration, to_nanoseconds


@pytest.mark.duration
class TestParseDuration:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", timedelta(0)),
            ("-0", timedelta(0)),
            ("250560m", timedelta(hours=4176)),
            ("1h30m", timedelta(minutes=90)),
            ("1.5h", timedelta(minutes=90)),
            ("300ms", timedelta(milliseconds=300)),
            ("-1.5s", timedelta(seconds=-1.5)),
            ("+2m", timedelta(minutes=2)),
            ("10us", timedelta(microseconds=10)),
            ("10µs", timedelta(microseconds=10)),
            ("1500ns", timedelta(microseconds=1)),
            (".5s", timedelta(milliseconds=500)),
            ("2h45m10s", timedelta(hours=2, minutes=45, seconds=10)),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_duration(text) == expected

    @pytest.mark.parametrize(
        ("text", "fragment"),
        [
            ("", "invalid duration"),
            ("-", "invalid duration"),
            ("1", "missing unit"),
            ("10", "missing unit"),
            ("1Y", "unknown unit"),
            ("1h1", "missing unit"),
            ("h", "invalid duration"),
            ("1.2.3s", "missing unit"),
            ("3000000h", "invalid duration"),
        ],
    )
    def test_rejects(self, text, fragment):
        with pytest.raises(ValueError, match=fragment):
            parse_duration(text)


@pytest.mark.duration
class TestFormatDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (timedelta(0), "0s"),
            (timedelta(hours=1), "1h0m0s"),
            (timedelta(hours=4176), "4176h0m0s"),
            (timedelta(minutes=1, seconds=30), "1m30s"),
            (timedelta(seconds=1.5), "1.5s"),
            (timedelta(milliseconds=1500), "1.5s"),
            (timedelta(milliseconds=300), "300ms"),
            (timedelta(microseconds=1500), "1.5ms"),
            (timedelta(microseconds=10), "10µs"),
            (timedelta(seconds=-90), "-1m30s"),
        ],
    )
    def test_format(self, value, expected):
        assert format_duration(value) == expected

    def test_to_nanoseconds(self):
        assert to_nanoseconds(timedelta(seconds=1, microseconds=2)) == 1_000_002_000
        assert to_nanoseconds(timedelta(microseconds=-1)) == -1000
