"""
settings.py

Runtime settings read from the environment (and a `.env` file when one is
present). Only the session controller and the profile store consume these;
the calculators take everything as arguments.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.errors import ConfigurationError

ENV_PREFIX = "MATH_DRILL_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EngineSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    transition_delay: float = Field(
        0.0, ge=0, description="Seconds to wait before serving the next question."
    )
    log_level: str = "INFO"
    seed: Optional[int] = Field(None, description="Seeds the session RNG when set.")
    profile_path: Optional[Path] = Field(None, description="JSON profile store location.")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """
    Builds settings from `environ` (defaults to `os.environ` after loading
    `.env`). Empty variables count as unset. Raises ConfigurationError on a
    malformed value.
    """

    if environ is None:
        load_dotenv()
        environ = os.environ

    raw = {}
    for field_name in EngineSettings.model_fields:
        value = environ.get(ENV_PREFIX + field_name.upper(), "").strip()
        if value:
            raw[field_name] = value

    try:
        return EngineSettings(**raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid {ENV_PREFIX}* settings: {exc}") from exc


def configure_logging(settings: EngineSettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
