# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""BirdDefaults - default flight behaviour for anything shaped like a Bird.

Public API
~~~~~~~~~~
class Kiwi(BirdDefaults, BaseModel):
    name: str

Kiwi(name="kiwi").can_fly       # False, Kiwi is not Flyable
str(Kiwi(name="kiwi"))          # "cannot fly"

A class overrides a default by defining the property itself; the mixin
only supplies what the class leaves out.
"""

from __future__ import annotations

from typing import Any

from ..protocols.contracts import Flyable

__all__ = (
    "CAN_FLY",
    "CANNOT_FLY",
    "BirdDefaults",
    "default_can_fly",
    "describe",
    "wingbeat_speed",
)

CAN_FLY = "can fly"
CANNOT_FLY = "cannot fly"


def default_can_fly(bird: Any) -> bool:
    """A bird can fly when it is also Flyable."""
    return isinstance(bird, Flyable)


def describe(bird: Any) -> str:
    """Describe a bird from its effective ``can_fly``."""
    return CAN_FLY if bird.can_fly else CANNOT_FLY


def wingbeat_speed(amplitude: float, frequency: float) -> float:
    """Top speed of a flapping flyer, in km/h."""
    return 3 * amplitude * frequency


class BirdDefaults:
    """Mixin supplying ``can_fly``, ``description`` and ``__str__``.

    Holds no state, so it composes with pydantic models, dataclasses and
    enums alike.
    """

    __slots__ = ()

    @property
    def can_fly(self) -> bool:
        return default_can_fly(self)

    @property
    def description(self) -> str:
        return describe(self)

    def __str__(self) -> str:
        return self.description
