# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import assert_never

from .._errors import FatalError
from ..traits.flight import BirdDefaults

__all__ = ("Swallow",)


class Swallow(BirdDefaults, Enum):
    """Swallows by origin.

    Every variant exposes ``maximum_speed`` and so is structurally Flyable,
    which would make the default ``can_fly`` True across the board. The
    unknown swallow has no known speed, so this class overrides ``can_fly``
    to exclude it. Reading ``maximum_speed`` on it is a programming error
    and raises :class:`FatalError`.
    """

    AFRICAN = "african"
    EUROPEAN = "european"
    UNKNOWN = "unknown"

    @property
    def name(self) -> str:
        match self:
            case Swallow.AFRICAN:
                return "African Swallow"
            case Swallow.EUROPEAN:
                return "European Swallow"
            case Swallow.UNKNOWN:
                return "Swallow"
            case _:
                assert_never(self)

    @property
    def maximum_speed(self) -> float:
        match self:
            case Swallow.AFRICAN:
                return 10.0
            case Swallow.EUROPEAN:
                return 9.9
            case Swallow.UNKNOWN:
                raise FatalError(
                    "Unknown swallow has no maximum speed",
                    details={"variant": self.value},
                )
            case _:
                assert_never(self)

    @property
    def can_fly(self) -> bool:
        return self is not Swallow.UNKNOWN
