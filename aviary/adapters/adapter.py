# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""*Adapter* abstraction and *AdapterRegistry*.

An *adapter* gives an existing type a capability it was not written with,
by wrapping an instance and answering the capability's members from the
wrapped object's own fields. The wrapped type is never modified.

Design goals
------------
* **Retroactive** - one declaration site per adapted type.
* **Pluggable** - register new adapters at runtime.
* **Inheritance-aware** - lookup walks the subject's MRO, so subclasses
  reuse their parent's adapter unless they register their own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from .._errors import MissingAdapterError

__all__ = ("RacerAdapter", "AdapterRegistry")

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A", bound=type)


# --------------------------------------------------------------------------- #
# Adapter protocol                                                            #
# --------------------------------------------------------------------------- #
@runtime_checkable
class RacerAdapter(Protocol[T]):
    """Wraps a *subject* and exposes it as a Racer."""

    subject: T

    @property
    def speed(self) -> float: ...


# --------------------------------------------------------------------------- #
# Adapter registry                                                            #
# --------------------------------------------------------------------------- #
class AdapterRegistry:
    """Keeps a mapping ``subject type -> adapter class``."""

    def __init__(self) -> None:
        self._reg: dict[type, type[RacerAdapter]] = {}

    # --------------------------------------------------------------------- #
    # public API                                                            #
    # --------------------------------------------------------------------- #
    def register(self, subject_type: type) -> Callable[[A], A]:
        """Class decorator attaching an adapter to ``subject_type``."""

        def decorator(adapter_cls: A) -> A:
            if subject_type in self._reg:
                logger.warning(
                    "Adapter for '%s' replaced: %s -> %s",
                    subject_type.__qualname__,
                    self._reg[subject_type],
                    adapter_cls,
                )
            self._reg[subject_type] = adapter_cls
            return adapter_cls

        return decorator

    def get(self, subject_type: type) -> type[RacerAdapter]:
        for cls in subject_type.__mro__:
            if cls in self._reg:
                return self._reg[cls]
        raise MissingAdapterError(
            f"No adapter registered for '{subject_type.__qualname__}'",
            details={"subject_type": subject_type.__qualname__},
        )

    def adapt(self, subject: Any, /) -> RacerAdapter:
        """Wrap ``subject`` in the adapter registered for its type."""
        adapter_cls = self.get(type(subject))
        logger.debug(
            "Adapting %s with %s",
            type(subject).__qualname__,
            adapter_cls.__qualname__,
        )
