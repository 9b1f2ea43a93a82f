# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass

__all__ = ("Motorcycle",)


@dataclass(slots=True, eq=False)
class Motorcycle:
    """Has nothing to do with birds. Compared by identity."""

    name: str
    speed: float = 200.0
