# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict

from ..traits.flight import BirdDefaults

__all__ = ("Penguin", "Ostrich")


class Penguin(BirdDefaults, BaseModel):
    """Not Flyable, so the default reports that it cannot fly."""

    model_config = ConfigDict(frozen=True)

    name: str


class Ostrich(BirdDefaults, BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
