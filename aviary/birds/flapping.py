# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict, Field

from ..traits.flight import BirdDefaults, wingbeat_speed

__all__ = ("Parrot", "Dove")


class Parrot(BirdDefaults, BaseModel):
    """A flying bird; ``can_fly`` comes from the Flyable default."""

    model_config = ConfigDict(frozen=True)

    name: str
    amplitude: float = Field(ge=0, description="Wing stroke amplitude")
    frequency: float = Field(ge=0, description="Wing beats per second")

    @property
    def maximum_speed(self) -> float:
        return wingbeat_speed(self.amplitude, self.frequency)


class Dove(BirdDefaults, BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    amplitude: float = Field(ge=0)
    frequency: float = Field(ge=0)

    @property
    def maximum_speed(self) -> float:
        return wingbeat_speed(self.amplitude, self.frequency)
