# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 optsparser Rui Pinheiro

from .base_model import BaseConfigModel


__all__ = [
    "BaseConfigModel",
]
