# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Bindable option values.

Every option is bound to a value object. The parser only relies on the :class:`SettableValue` capabilities: ``set``
parses the command-line text into the object, and ``str()`` renders the current value, which is also how defaults are
shown in the usage text. The built-in value types derive from :class:`OptionValue` and expose the bound Python value as
``.value``::

    >>> from optsparser.values import IntValue
    >>> v = IntValue(-10)
    >>> v.set("0x1F")
    >>> v.value
    31
    >>> str(v)
    '31'
"""

from __future__ import annotations

import enum
import math
import re

from abc import ABCMeta, abstractmethod
from datetime import timedelta
from decimal import Decimal
from typing import ClassVar, Generic, Protocol, TypeVar, override, runtime_checkable

from .util.helpers.duration import format_duration, parse_duration


T = TypeVar("T")


class OptionType(enum.StrEnum):
    BOOL = "bool"
    STRING = "string"
    INT = "int"
    INT64 = "int64"
    UINT = "uint"
    UINT64 = "uint64"
    FLOAT64 = "float64"
    DURATION = "duration"
    VALUE = "value"
    SEPARATOR = "separator"


@runtime_checkable
class SettableValue(Protocol):
    """Capability contract for caller-defined option values.

    ``set`` must raise :class:`ValueError` when the text cannot be parsed. A value whose class sets
    ``is_bool_flag = True`` may be given on the command line without an argument, meaning ``"true"``.
    """

    def set(self, text: str) -> None: ...

    def __str__(self) -> str: ...


def option_type_of(value: SettableValue) -> OptionType:
    return getattr(type(value), "option_type", OptionType.VALUE)


def is_bool_flag(value: SettableValue) -> bool:
    return bool(getattr(value, "is_bool_flag", False))


# MARK: Built-in value types
class OptionValue(Generic[T], metaclass=ABCMeta):
    option_type: ClassVar[OptionType]
    is_bool_flag: ClassVar[bool] = False

    def __init__(self, default: T) -> None:
        self.default = default
        self.value = default

    @classmethod
    @abstractmethod
    def parse(cls, text: str) -> T:
        raise NotImplementedError

    @classmethod
    def format(cls, value: T) -> str:
        return str(value)

    def set(self, text: str) -> None:
        self.value = type(self).parse(text)

    def reset(self) -> None:
        self.value = self.default

    @override
    def __str__(self) -> str:
        return type(self).format(self.value)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


_BOOL_TRUE = frozenset(("1", "t", "T", "TRUE", "true", "True"))
_BOOL_FALSE = frozenset(("0", "f", "F", "FALSE", "false", "False"))


class BoolValue(OptionValue[bool]):
    option_type = OptionType.BOOL
    is_bool_flag = True

    def __init__(self, default: bool = False) -> None:
        super().__init__(default)

    @classmethod
    @override
    def parse(cls, text: str) -> bool:
        if text in _BOOL_TRUE:
            return True
        if text in _BOOL_FALSE:
            return False
        msg = "invalid syntax"
        raise ValueError(msg)

    @classmethod
    @override
    def format(cls, value: bool) -> str:
        return "true" if value else "false"


class StringValue(OptionValue[str]):
    option_type = OptionType.STRING

    def __init__(self, default: str = "") -> None:
        super().__init__(default)

    @classmethod
    @override
    def parse(cls, text: str) -> str:
        return text


_INT_PREFIXES: dict[str, int] = {"0x": 16, "0o": 8, "0b": 2}
_INT_DIGITS = re.compile(r"[0-9A-Za-z]+(?:_[0-9A-Za-z]+)*")


def parse_integer(text: str) -> int:
    """Parse an integer literal, inferring the base from its prefix.

    ``0x`` is hexadecimal, ``0o`` or a bare leading ``0`` octal, ``0b`` binary and anything else decimal. Underscores
    may separate digits only after a base prefix.

    >>> parse_integer("-430")
    -430
    >>> parse_integer("017")
    15
    >>> parse_integer("0b101")
    5
    """
    sign = text[:1] if text[:1] in ("+", "-") else ""
    body = text[len(sign) :]

    radix = _INT_PREFIXES.get(body[:2].lower())
    if radix is not None:
        digits = body[2:].removeprefix("_")
    elif body[:1] == "0" and len(body) > 1:
        radix, digits = 8, body[1:]
    else:
        radix, digits = 10, body
        if "_" in digits:
            digits = ""

    if _INT_DIGITS.fullmatch(digits) is None:
        msg = "invalid syntax"
        raise ValueError(msg)

    try:
        value = int(digits, radix)
    except ValueError as err:
        msg = "invalid syntax"
        raise ValueError(msg) from err

    return -value if sign == "-" else value


class IntValue(OptionValue[int]):
    option_type = OptionType.INT
    bits: ClassVar[int] = 64
    signed: ClassVar[bool] = True

    def __init__(self, default: int = 0) -> None:
        super().__init__(default)

    @classmethod
    def bounds(cls) -> tuple[int, int]:
        if cls.signed:
            return -(1 << (cls.bits - 1)), (1 << (cls.bits - 1)) - 1
        return 0, (1 << cls.bits) - 1

    @classmethod
    @override
    def parse(cls, text: str) -> int:
        if not cls.signed and text[:1] in ("+", "-"):
            msg = "invalid syntax"
            raise ValueError(msg)

        value = parse_integer(text)

        low, high = cls.bounds()
        if not low <= value <= high:
            msg = "value out of range"
            raise ValueError(msg)
        return value


class Int64Value(IntValue):
    option_type = OptionType.INT64


class UintValue(IntValue):
    option_type = OptionType.UINT
    signed = False


class Uint64Value(UintValue):
    option_type = OptionType.UINT64


def format_float(value: float) -> str:
    """Shortest text that reads back as ``value``, in exponent form when the decimal exponent is below -4 or above 5.

    >>> format_float(0.0)
    '0'
    >>> format_float(3.141592)
    '3.141592'
    >>> format_float(1e6)
    '1e+06'
    >>> format_float(-0.00001)
    '-1e-05'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    prefix = "-" if sign else ""
    digits = "".join(map(str, digit_tuple))
    if digits == "0":
        return f"{prefix}0"

    # Digits before the decimal point
    point = len(digits) + int(exponent)
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = f"{digits[0]}.{digits[1:]}" if len(digits) > 1 else digits
        return f"{prefix}{mantissa}e{'-' if exp10 < 0 else '+'}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


class Float64Value(OptionValue[float]):
    option_type = OptionType.FLOAT64

    def __init__(self, default: float = 0.0) -> None:
        super().__init__(float(default))

    @classmethod
    @override
    def parse(cls, text: str) -> float:
        if not text or text != text.strip():
            msg = "invalid syntax"
            raise ValueError(msg)
        try:
            return float(text)
        except ValueError as err:
            msg = "invalid syntax"
            raise ValueError(msg) from err

    @classmethod
    @override
    def format(cls, value: float) -> str:
        return format_float(value)


class DurationValue(OptionValue[timedelta]):
    option_type = OptionType.DURATION

    def __init__(self, default: timedelta | None = None) -> None:
        super().__init__(timedelta(0) if default is None else default)

    @classmethod
    @override
    def parse(cls, text: str) -> timedelta:
        return parse_duration(text)

    @classmethod
    @override
    def format(cls, value: timedelta) -> str:
        return format_duration(value)
