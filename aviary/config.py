# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("AviarySettings", "settings")


class AviarySettings(BaseSettings, frozen=True):
    """Settings for the demonstration driver, with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    AVIARY_LOG_LEVEL: str = Field(
        default="WARNING", description="Log level used by the CLI"
    )
    AVIARY_SPEED_UNIT: str = Field(
        default="km/h", description="Unit printed next to speeds"
    )
    AVIARY_BOOST_POWER: float = Field(
        default=3.0, description="Power passed to each boost in the demo"
    )
    AVIARY_BOOST_ROUNDS: int = Field(
        default=2, ge=0, description="Number of boosts applied in the demo"
    )
    AVIARY_RACER_NAME: str = Field(
        default="Augusto", description="Rider of the demo motorcycle"
    )

    @property
    def log_level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.AVIARY_LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.WARNING


settings = AviarySettings()
