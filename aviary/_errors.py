# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "AviaryError",
    "ValidationError",
    "MissingAdapterError",
    "FatalError",
)


class AviaryError(Exception):
    default_message: ClassVar[str] = "Aviary error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details or {}


class ValidationError(AviaryError):
    """Exception raised when a value is outside an operation's domain."""

    default_message = "Validation failed"

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        **extra: Any,
    ):
        """Create a ValidationError from a value with optional expected type and message."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details)


class MissingAdapterError(AviaryError):
    """Raised when no adapter is registered for a given type."""

    default_message = "No adapter registered"


class FatalError(BaseException):
    """Unrecoverable programming error.

    Derives from ``BaseException`` so ``except Exception`` handlers let it
    through, the same way they let ``SystemExit`` through.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
