# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, ConfigDict


if TYPE_CHECKING:
    import rich.repr


class BaseConfigModel(BaseModel):
    """Base class for all configuration models.

    Configuration is immutable once validated; use :meth:`updated` to derive a modified copy.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def updated(self, **changes: Any) -> Self:
        """Return a validated copy of this model with ``changes`` applied."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def __rich_repr__(self) -> rich.repr.Result:
        for attr, info in type(self).model_fields.items():
            if info.repr is False:
                continue
            yield attr, getattr(self, attr, None)
