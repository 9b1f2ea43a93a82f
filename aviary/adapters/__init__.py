# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .adapter import AdapterRegistry, RacerAdapter
from .racing import (
    MotorcycleRacer,
    ParrotRacer,
    PenguinRacer,
    SwallowRacer,
    racer_for,
    racers,
)

__all__ = (
    "AdapterRegistry",
    "MotorcycleRacer",
    "ParrotRacer",
    "PenguinRacer",
    "RacerAdapter",
    "SwallowRacer",
    "racer_for",
    "racers",
)
