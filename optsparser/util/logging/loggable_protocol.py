# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    import logging


@runtime_checkable
class LoggableProtocol(Protocol):
    """Objects with a ``log`` logger; passing one as ``parent`` to ``getLogger`` nests the new logger under it."""

    @property
    def log(self) -> logging.Logger: ...
