# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Logging levels as configuration values.

A :class:`LoggingLevel` can be written in configuration as a level name (``"debug"``), a number, a boolean (``True``
for INFO, ``False`` for off) or ``"OFF"``. ``OFF`` disables a handler entirely.

>>> LoggingLevel("warning")
LoggingLevel.WARNING
>>> LoggingLevel(False).enabled
False
>>> LoggingLevel.from_verbosity(5)
LoggingLevel.DEBUG
"""

from __future__ import annotations

import functools
import logging

from typing import Any, ClassVar, override

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, PydanticUseDefault, core_schema


OFF = -1

LEVELS : dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR"   : logging.ERROR   ,
    "WARNING" : logging.WARNING ,
    "INFO"    : logging.INFO    ,
    "DEBUG"   : logging.DEBUG   ,
    "NOTSET"  : logging.NOTSET  ,
    "OFF"     : OFF             ,
}  # fmt: skip

NAMES: dict[int, str] = {number: name for name, number in LEVELS.items()}

# Levels selected by a repeated verbosity count, from quiet to chatty
VERBOSITY: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG)


def _from_text(text: str) -> int:
    key = text.strip().upper()
    if key in LEVELS:
        return LEVELS[key]
    if key in ("FALSE", "NO"):
        return OFF
    try:
        return int(key)
    except ValueError as err:
        msg = f"Unknown logging level string: {text}"
        raise ValueError(msg) from err


def to_level_number(value: Any) -> int:
    """Convert any accepted level spelling to its number.

    Raises:
        TypeError: for values that cannot denote a level.
        ValueError: for unknown names and numbers below ``OFF``.

    """
    match value:
        case LoggingLevel():
            return value.value
        case bool():
            number = logging.INFO if value else OFF
        case int():
            number = value
        case str():
            number = _from_text(value)
        case _:
            msg = f"Invalid type for logging level: {type(value)}"
            raise TypeError(msg)

    if number < OFF:
        msg = f"Invalid value for logging level: {number}"
        raise ValueError(msg)
    return number


@functools.total_ordering
class LoggingLevel:
    __slots__ = ("value",)

    # fmt: off
    CRITICAL : ClassVar[LoggingLevel]
    ERROR    : ClassVar[LoggingLevel]
    WARNING  : ClassVar[LoggingLevel]
    INFO     : ClassVar[LoggingLevel]
    DEBUG    : ClassVar[LoggingLevel]
    NOTSET   : ClassVar[LoggingLevel]
    OFF      : ClassVar[LoggingLevel]
    # fmt: on

    def __init__(self, value: Any) -> None:
        self.value: int = to_level_number(value)

    @classmethod
    def from_verbosity(cls, count: int) -> LoggingLevel:
        """Level for a ``-v`` style repetition count; anything beyond the last step stays at DEBUG."""
        if count < 0:
            msg = f"Verbosity must not be negative, got {count}"
            raise ValueError(msg)
        return cls(VERBOSITY[min(count, len(VERBOSITY) - 1)])

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        accepted = [
            core_schema.is_instance_schema(LoggingLevel),
            core_schema.bool_schema(strict=True),
            core_schema.int_schema(),
            core_schema.str_schema(),
            core_schema.none_schema(),
        ]
        return core_schema.no_info_after_validator_function(
            function=cls.validate,
            schema=core_schema.union_schema(accepted),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def validate(cls, value: Any) -> LoggingLevel:
        # None keeps the field default
        if value is None:
            raise PydanticUseDefault
        return value if isinstance(value, LoggingLevel) else cls(value)

    # MARK: Properties
    @property
    def name(self) -> str:
        return NAMES.get(self.value, str(self.value))

    @property
    def enabled(self) -> bool:
        return self.value != OFF

    # MARK: Comparison
    def _number(self, other: object) -> int | None:
        match other:
            case LoggingLevel():
                return other.value
            case int():
                return other
            case str():
                return LEVELS.get(other.strip().upper())
        return None

    @override
    def __eq__(self, other: object) -> bool:
        number = self._number(other)
        return number is not None and self.value == number

    def __lt__(self, other: object) -> bool:
        number = self._number(other)
        if number is None:
            return NotImplemented
        return self.value < number

    @override
    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    @override
    def __repr__(self) -> str:
        name = NAMES.get(self.value)
        return f"{type(self).__name__}.{name}" if name else f"{type(self).__name__}({self.value})"

    @override
    def __str__(self) -> str:
        return self.name


for _name, _number in LEVELS.items():
    setattr(LoggingLevel, _name, LoggingLevel(_number))
