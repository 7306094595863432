# -*- coding: utf-8 -*-
"""Configuration for the training number service."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tis_ntn.core.clock import DEFAULT_TIMEZONE, validate_timezone
from tis_ntn.domain.training_number.policy import GeneratorPolicy

_LEVEL_NAMES = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class GeneratorSettings(BaseSettings):
    """Environment driven settings (``NTN_*``) for training number generation."""

    model_config = SettingsConfigDict(env_prefix="NTN_", env_file=".env", extra="ignore", frozen=True)

    variant: Literal["stored_profile", "profile_view"] = "stored_profile"
    timezone: str = Field(DEFAULT_TIMEZONE)
    pii_hash_salt: str = Field("development-salt", min_length=1)
    skip_level: str = "INFO"
    pathway_missing_level: str = "ERROR"
    log_level: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        validate_timezone(value)
        return value.strip()

    @field_validator("skip_level", "pathway_missing_level", "log_level")
    @classmethod
    def _validate_level(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log level must be one of {sorted(_LEVEL_NAMES)}")
        return level

    def to_policy(self) -> GeneratorPolicy:
        if self.variant == "stored_profile":
            return GeneratorPolicy.stored_profile()
        return GeneratorPolicy.profile_view()

    @property
    def skip_log_level(self) -> int:
        return logging.getLevelNamesMapping()[self.skip_level]

    @property
    def pathway_missing_log_level(self) -> int:
        return logging.getLevelNamesMapping()[self.pathway_missing_level]

    @property
    def root_log_level(self) -> Optional[int]:
        """Root logger level to install, or ``None`` when the host owns logging."""

        if self.log_level is None:
            return None
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache(maxsize=1)
def _cached_settings() -> GeneratorSettings:
    return GeneratorSettings()


def get_settings(**overrides: object) -> GeneratorSettings:
    """Return the cached settings object; overrides build a fresh one for tests."""

    if overrides:
        return GeneratorSettings(**overrides)
    return _cached_settings()


__all__ = ["GeneratorSettings", "get_settings"]
