"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class GeneratorConfig(BaseSettings):
    """Random source and rejection-sampling configuration."""

    model_config = {"env_prefix": "TESTNUMBERS_GENERATOR_"}

    seed: int | None = None  # None -> nondeterministic
    max_attempts: int = 10_000
    bsn_first_digit_max: int = 9


class HistoryConfig(BaseSettings):
    """Generation history kept by the HTTP front end."""

    model_config = {"env_prefix": "TESTNUMBERS_HISTORY_"}

    max_items: int = 50


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "TESTNUMBERS_"}

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"
    loonheffingennummer_suffix: str = "L01"

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
