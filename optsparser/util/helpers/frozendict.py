# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

"""Pydantic support for :class:`frozendict.frozendict` fields.

``FrozenDict[K, V]`` validates any mapping like ``dict[K, V]`` would, then freezes the result so frozen configuration
models stay hashable and immutable all the way down.
"""

from __future__ import annotations

import typing

from frozendict import frozendict
from pydantic_core import core_schema


if typing.TYPE_CHECKING:
    import pydantic


class FrozenDictSchema:
    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: typing.Any, handler: pydantic.GetCoreSchemaHandler) -> core_schema.CoreSchema:
        key_type, value_type = typing.get_args(source_type) or (typing.Any, typing.Any)
        return core_schema.no_info_after_validator_function(
            frozendict,
            handler.generate_schema(dict[key_type, value_type]),
            serialization=core_schema.plain_serializer_function_ser_schema(dict),
        )


_K = typing.TypeVar("_K")
_V = typing.TypeVar("_V")
FrozenDict = typing.Annotated[frozendict[_K, _V], FrozenDictSchema]
