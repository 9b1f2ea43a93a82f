# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import AviaryError, FatalError, MissingAdapterError
from .adapters import AdapterRegistry, racer_for, racers
from .birds import Dove, Ostrich, Parrot, Penguin, Swallow, SwiftBird
from .protocols import Bird, Boostable, Describable, Flyable, Racer
from .racing import Lineup, top_speed
from .traits import BirdDefaults
from .vehicles import Motorcycle
from .version import __version__

logger = logging.getLogger(__name__)

__all__ = (
    "__version__",
    "AdapterRegistry",
    "AviaryError",
    "Bird",
    "BirdDefaults",
    "Boostable",
    "Describable",
    "Dove",
    "FatalError",
    "Flyable",
    "Lineup",
    "MissingAdapterError",
    "Motorcycle",
    "Ostrich",
    "Parrot",
    "Penguin",
    "Racer",
    "Swallow",
    "SwiftBird",
    "logger",
    "racer_for",
    "racers",
    "top_speed",
)
