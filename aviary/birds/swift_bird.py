# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from pydantic import BaseModel, Field, PrivateAttr

from ..traits.flight import BirdDefaults

__all__ = ("SwiftBird",)

logger = logging.getLogger(__name__)

BASELINE_SPEED_FACTOR = 1000.0


class SwiftBird(BirdDefaults, BaseModel):
    """A versioned toy bird whose speed can be boosted in place.

    ``maximum_speed`` is ``version * speed_factor``; the factor starts at
    :data:`BASELINE_SPEED_FACTOR` and only :meth:`boost` changes it.

    Example:
        >>> bird = SwiftBird(version=5.0)
        >>> bird.boost(3.0)
        >>> bird.maximum_speed
        5015.0
    """

    version: float = Field(ge=0)

    _speed_factor: float = PrivateAttr(default=BASELINE_SPEED_FACTOR)

    @property
    def name(self) -> str:
        return f"Swift {self.version}"

    @property
    def can_fly(self) -> bool:
        return True

    @property
    def maximum_speed(self) -> float:
        return self.version * self._speed_factor

    def boost(self, power: float) -> None:
        """Add ``power`` to the speed factor."""
        self._speed_factor += power
        logger.debug(
            "Boosted %s by %s, speed factor now %s",
            self.name,
            power,
            self._speed_factor,
        )
