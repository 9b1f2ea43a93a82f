# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Retroactive Racer conformance for the existing entity types.

None of the wrapped classes knows about racing; each gets ``speed``
from a single registration below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..birds.flapping import Parrot
from ..birds.flightless import Penguin
from ..birds.swallow import Swallow
from ..vehicles import Motorcycle
from .adapter import AdapterRegistry, RacerAdapter

__all__ = (
    "racers",
    "racer_for",
    "MotorcycleRacer",
    "ParrotRacer",
    "PenguinRacer",
    "SwallowRacer",
    "PENGUIN_SPEED",
)

racers = AdapterRegistry()

PENGUIN_SPEED = 42.0  # full speed


@racers.register(Motorcycle)
@dataclass(frozen=True, slots=True)
class MotorcycleRacer:
    subject: Motorcycle

    @property
    def speed(self) -> float:
        return self.subject.speed


@racers.register(Parrot)
@dataclass(frozen=True, slots=True)
class ParrotRacer:
    subject: Parrot

    @property
    def speed(self) -> float:
        return self.subject.maximum_speed


@racers.register(Penguin)
@dataclass(frozen=True, slots=True)
class PenguinRacer:
    subject: Penguin

    @property
    def speed(self) -> float:
        return PENGUIN_SPEED


@racers.register(Swallow)
@dataclass(frozen=True, slots=True)
class SwallowRacer:
    """Grounded swallows race at 0.0; their speed is never read."""

    subject: Swallow

    @property
    def speed(self) -> float:
        return self.subject.maximum_speed if self.subject.can_fly else 0.0


def racer_for(entity: Any, /) -> RacerAdapter:
    """Return ``entity`` as a Racer using the registered adapter.

    Raises:
        MissingAdapterError: If no adapter is registered for the type.
    """
    return racers.adapt(entity)
