# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Runtime-checkable capability protocols.

Protocols define structural contracts (duck typing) with isinstance() support.
Membership is decided with ``inspect.getattr_static``, so checking an object
against a protocol never evaluates its properties.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = (
    "Flyable",
    "Describable",
    "Bird",
    "Racer",
    "Boostable",
)


@runtime_checkable
class Flyable(Protocol):
    """Anything with a top flight speed."""

    @property
    def maximum_speed(self) -> float: ...


@runtime_checkable
class Describable(Protocol):
    """Can render itself as a short human-readable description."""

    @property
    def description(self) -> str: ...


@runtime_checkable
class Bird(Describable, Protocol):
    """A named bird that may or may not fly."""

    @property
    def name(self) -> str: ...

    @property
    def can_fly(self) -> bool: ...


@runtime_checkable
class Racer(Protocol):
    """Anything that can race. Speed is the only thing racers care about."""

    @property
    def speed(self) -> float: ...


@runtime_checkable
class Boostable(Protocol):
    """Can be boosted in place; later speed reads reflect the boost."""

    def boost(self, power: float) -> None: ...
