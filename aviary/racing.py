# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload

from typing_extensions import Self

from ._errors import ValidationError
from .adapters.racing import racer_for
from .protocols.contracts import Racer

__all__ = (
    "Lineup",
    "top_speed",
)


def top_speed(racers: Iterable[Racer]) -> float:
    """Return the highest ``speed`` among ``racers``, or 0.0 if there are none."""
    return max((racer.speed for racer in racers), default=0.0)


class Lineup(Sequence[Racer]):
    """An ordered, immutable collection of Racers.

    Slicing returns another ``Lineup`` over the same racer objects, so
    operations on a sub-range see exactly the racers of the parent.

    Example:
        >>> lineup = Lineup.of(Swallow.AFRICAN, Penguin(name="Pingu"))
        >>> lineup.top_speed()
        42.0
    """

    __slots__ = ("_racers",)

    def __init__(self, racers: Iterable[Racer] = ()) -> None:
        items = tuple(racers)
        for idx, item in enumerate(items):
            if not isinstance(item, Racer):
                raise ValidationError.from_value(
                    item,
                    expected="Racer",
                    message=f"Lineup item at position {idx} is not a Racer",
                    position=idx,
                )
        self._racers = items

    @classmethod
    def of(cls, *entities: Any) -> Self:
        """Build a lineup, adapting each entity that is not already a Racer."""
        return cls(
            e if isinstance(e, Racer) else racer_for(e) for e in entities
        )

    def top_speed(self) -> float:
        return top_speed(self)

    @overload
    def __getitem__(self, index: int) -> Racer: ...

    @overload
    def __getitem__(self, index: slice) -> Lineup: ...

    def __getitem__(self, index: int | slice) -> Racer | Lineup:
        if isinstance(index, slice):
            return type(self)(self._racers[index])
        return self._racers[index]

    def __len__(self) -> int:
        return len(self._racers)

    def __iter__(self) -> Iterator[Racer]:
        return iter(self._racers)

    def __repr__(self) -> str:
        return f"Lineup({list(self._racers)!r})"
