# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Walk-through of capability composition, as a list of trace lines.

Each section function builds its own entities and returns the lines it
would print, so sections can run alone or in any order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ._errors import ValidationError
from .birds import Dove, Ostrich, Parrot, Penguin, Swallow, SwiftBird
from .config import AviarySettings
from .config import settings as default_settings
from .protocols.contracts import Bird, Flyable, Racer
from .racing import Lineup, top_speed
from .vehicles import Motorcycle

__all__ = (
    "SECTIONS",
    "boosting",
    "conformance",
    "defaults",
    "descriptions",
    "overrides",
    "racing",
    "run",
)

logger = logging.getLogger(__name__)


def _yes_no(flag: bool) -> str:
    return "Yes!" if flag else "No!"


def conformance(settings: AviarySettings) -> list[str]:
    """Types that state their capabilities explicitly."""
    unit = settings.AVIARY_SPEED_UNIT
    parrot = Parrot(name="Parrot", amplitude=12.0, frequency=5.0)
    penguin = Penguin(name="Penguin")
    return [
        f"The {parrot.name} flies at a top speed of "
        f"{parrot.maximum_speed} {unit}.",
        f"Is the {penguin.name} a bird that flies? {_yes_no(penguin.can_fly)}",
    ]


def defaults(settings: AviarySettings) -> list[str]:
    """``can_fly`` inferred from whether the bird is Flyable."""
    unit = settings.AVIARY_SPEED_UNIT
    dove = Dove(name="Dove", amplitude=14.0, frequency=3.0)
    ostrich = Ostrich(name="Ostrich")
    return [
        f"Does the {dove.name} fly? {_yes_no(dove.can_fly)} "
        f"At what top speed: {dove.maximum_speed} {unit}.",
        f"Is the {ostrich.name} a bird that flies? "
        f"{_yes_no(ostrich.can_fly)}",
    ]


def overrides(settings: AviarySettings) -> list[str]:
    """Swallow replaces the default for its unknown variant."""
    lines = []
    for swallow in Swallow:
        flyable = isinstance(swallow, Flyable)
        lines.append(
            f"{swallow.name}: flyable={flyable}, can fly={swallow.can_fly}"
        )
    return lines


def descriptions(settings: AviarySettings) -> list[str]:
    """Every Bird describes itself from its effective ``can_fly``."""
    birds: list[Bird] = [
        Parrot(name="Parrot", amplitude=12.0, frequency=5.0),
        Penguin(name="Penguin"),
        *Swallow,
        SwiftBird(version=5.0),
    ]
    return [f"{bird.name}: {bird}" for bird in birds]


def racing(settings: AviarySettings) -> list[str]:
    """Birds and a motorcycle racing through the Racer contract only."""
    unit = settings.AVIARY_SPEED_UNIT
    lineup = Lineup.of(
        Swallow.AFRICAN,
        Swallow.EUROPEAN,
        Swallow.UNKNOWN,
        Penguin(name="Penguin"),
        Parrot(name="Parrot", amplitude=12.0, frequency=5.0),
        Motorcycle(name=settings.AVIARY_RACER_NAME),
    )
    racers: list[Racer] = list(lineup)
    return [
        f"Top speed of the racers: {top_speed(racers)} {unit}",
        f"Top speed of the lineup: {lineup.top_speed()} {unit}",
        f"Top speed among racers 2 to 4: {lineup[1:4].top_speed()} {unit}",
    ]


def boosting(settings: AviarySettings) -> list[str]:
    """A mutating capability observed through later reads."""
    unit = settings.AVIARY_SPEED_UNIT
    bird = SwiftBird(version=5.0)
    lines = [f"{bird.name} speed = {bird.maximum_speed} {unit}"]
    for _ in range(settings.AVIARY_BOOST_ROUNDS):
        bird.boost(settings.AVIARY_BOOST_POWER)
        lines.append(f"{bird.name} speed = {bird.maximum_speed} {unit}")
    return lines


SECTIONS: dict[str, Callable[[AviarySettings], list[str]]] = {
    "conformance": conformance,
    "defaults": defaults,
    "overrides": overrides,
    "descriptions": descriptions,
    "racing": racing,
    "boosting": boosting,
}


def run(
    sections: Iterable[str] | None = None,
    settings: AviarySettings | None = None,
) -> list[str]:
    """Run the named sections in order (all of them by default).

    Raises:
        ValidationError: If a section name is not in :data:`SECTIONS`.
    """
    settings = settings or default_settings
    names = list(sections) if sections is not None else list(SECTIONS)
    for name in names:
        if name not in SECTIONS:
            raise ValidationError.from_value(
                name,
                expected=f"one of {sorted(SECTIONS)}",
                message=f"Unknown section {name!r}",
            )
    lines: list[str] = []
    for name in names:
        logger.info("Running section %s", name)
        lines.extend(SECTIONS[name](settings))
    return lines
