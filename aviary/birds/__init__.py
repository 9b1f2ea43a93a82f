# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .flapping import Dove, Parrot
from .flightless import Ostrich, Penguin
from .swallow import Swallow
from .swift_bird import SwiftBird

__all__ = (
    "Dove",
    "Ostrich",
    "Parrot",
    "Penguin",
    "Swallow",
    "SwiftBird",
)
