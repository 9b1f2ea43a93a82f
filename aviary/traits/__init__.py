# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .flight import BirdDefaults, default_can_fly, describe, wingbeat_speed

__all__ = (
    "BirdDefaults",
    "default_can_fly",
    "describe",
    "wingbeat_speed",
)
