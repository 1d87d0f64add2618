# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from datetime import timedelta

import pytest

from optsparser.values import (
    BoolValue,
    DurationValue,
    Float64Value,
    Int64Value,
    IntValue,
    OptionType,
    SettableValue,
    StringValue,
    Uint64Value,
    UintValue,
    format_float,
    is_bool_flag,
    option_type_of,
    parse_integer,
)


class YearMonthDay:
    def __init__(self):
        self.ymd = 0

    def set(self, text: str) -> None:
        parts = [int(part) for part in text.split(".")]
        if len(parts) != 3:
            msg = f"invalid YMD date length, want - 3, got - {len(parts)}"
            raise ValueError(msg)
        self.ymd = parts[0] * 10000 + parts[1] * 100 + parts[2]

    def __str__(self) -> str:
        return f"Year {self.ymd // 10000} month {self.ymd % 10000 // 100} day {self.ymd % 100}"


@pytest.mark.values
class TestBoolValue:
    @pytest.mark.parametrize(("text", "expected"), [("1", True), ("t", True), ("TRUE", True), ("True", True), ("0", False), ("F", False), ("false", False)])
    def test_parse(self, text, expected):
        value = BoolValue(default=not expected)
        value.set(text)
        assert value.value is expected

    @pytest.mark.parametrize("text", ["invalid", "yes", "", "tRUE"])
    def test_rejects(self, text):
        with pytest.raises(ValueError, match="invalid syntax"):
            BoolValue().set(text)

    def test_format(self):
        assert str(BoolValue(default=True)) == "true"
        assert str(BoolValue()) == "false"
        assert is_bool_flag(BoolValue())


@pytest.mark.values
class TestIntegerValues:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-430", -430),
            ("+7", 7),
            ("0", 0),
            ("0x1f", 31),
            ("0X1F", 31),
            ("017", 15),
            ("0o17", 15),
            ("0b101", 5),
            ("0x_1F", 31),
            ("-0x10", -16),
        ],
    )
    def test_parse_integer(self, text, expected):
        assert parse_integer(text) == expected

    @pytest.mark.parametrize("text", ["", "f430", "1_000", "08", "0x", "1.5", "1e3", "- 1", "--1"])
    def test_parse_integer_rejects(self, text):
        with pytest.raises(ValueError, match="invalid syntax"):
            parse_integer(text)

    def test_int64_range(self):
        value = Int64Value()
        value.set("-59604644783353249")
        assert value.value == -59604644783353249

        value.set("9223372036854775807")
        with pytest.raises(ValueError, match="out of range"):
            value.set("9223372036854775808")
        assert value.value == 9223372036854775807

    def test_int_rejects_fraction(self):
        with pytest.raises(ValueError):
            IntValue().set("59604644783353249.1")

    @pytest.mark.parametrize("cls", [UintValue, Uint64Value])
    def test_unsigned_rejects_sign(self, cls):
        with pytest.raises(ValueError, match="invalid syntax"):
            cls().set("-220414")
        with pytest.raises(ValueError, match="invalid syntax"):
            cls().set("+1")

    def test_uint64_range(self):
        value = Uint64Value()
        value.set("18446744073709551615")
        assert value.value == (1 << 64) - 1
        with pytest.raises(ValueError, match="out of range"):
            value.set("18446744073709551616")

    def test_default_and_reset(self):
        value = IntValue(-10)
        assert str(value) == "-10"
        value.set("3")
        assert value.value == 3
        value.reset()
        assert value.value == -10
        assert repr(value) == "IntValue(-10)"


@pytest.mark.values
class TestFloatValue:
    def test_parse(self):
        value = Float64Value()
        value.set("3.141592")
        assert value.value == 3.141592
        value.set("-1e3")
        assert value.value == -1000.0

    @pytest.mark.parametrize("text", ["3.G+e0", "", " 1.0", "pi"])
    def test_rejects(self, text):
        with pytest.raises(ValueError, match="invalid syntax"):
            Float64Value().set(text)

    def test_format(self):
        assert str(Float64Value()) == "0"
        assert str(Float64Value(3.141592)) == "3.141592"
        assert Float64Value(1).value == 1.0

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, "0"),
            (-0.0, "-0"),
            (1.0, "1"),
            (1.5, "1.5"),
            (100.0, "100"),
            (-1500.0, "-1500"),
            (123456.0, "123456"),
            (1e6, "1e+06"),
            (-1.5e3, "-1500"),
            (2.5e21, "2.5e+21"),
            (0.0001, "0.0001"),
            (0.00001234, "1.234e-05"),
            (1e-300, "1e-300"),
            (0.1, "0.1"),
            (float("inf"), "+Inf"),
            (float("-inf"), "-Inf"),
            (float("nan"), "NaN"),
        ],
    )
    def test_format_shortest(self, value, expected):
        assert format_float(value) == expected


@pytest.mark.values
class TestStringAndDurationValues:
    def test_string(self):
        value = StringValue("default string")
        assert str(value) == "default string"
        value.set("I think, therefore I am")
        assert value.value == "I think, therefore I am"
        assert str(StringValue()) == ""

    def test_duration(self):
        value = DurationValue()
        assert str(value) == "0s"
        value.set("250560m")
        assert value.value == timedelta(hours=4176)
        assert str(value) == "4176h0m0s"

    def test_duration_rejects(self):
        with pytest.raises(ValueError, match="unknown unit"):
            DurationValue().set("1Y")


@pytest.mark.values
class TestOptionTypes:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (BoolValue(), OptionType.BOOL),
            (StringValue(), OptionType.STRING),
            (IntValue(), OptionType.INT),
            (Int64Value(), OptionType.INT64),
            (UintValue(), OptionType.UINT),
            (Uint64Value(), OptionType.UINT64),
            (Float64Value(), OptionType.FLOAT64),
            (DurationValue(), OptionType.DURATION),
            (YearMonthDay(), OptionType.VALUE),
        ],
    )
    def test_option_type_of(self, value, expected):
        assert option_type_of(value) == expected

    def test_custom_value_is_settable(self):
        value = YearMonthDay()
        assert isinstance(value, SettableValue)
        assert not is_bool_flag(value)
        value.set("2022.10.14")
        assert value.ymd == 20221014
        assert str(value) == "Year 2022 month 10 day 14"
