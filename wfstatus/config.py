from __future__ import annotations

import os
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .formatting import DEFAULT_TIME_FORMAT, DEFAULT_TIMEZONE
from .status_codes import StatusCodeTable


class DisplayConfig(BaseModel):
    """How status timestamps are rendered for display."""

    model_config = ConfigDict(validate_assignment=True)

    timezone: str = DEFAULT_TIMEZONE
    time_format: str = DEFAULT_TIME_FORMAT

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v!r}") from e
        return v


class SourceConfig(BaseModel):
    """Workflow source settings."""

    backend: Literal["inmemory"] = "inmemory"


class WfStatusConfig(BaseModel):
    """Top-level configuration model."""

    status_codes: StatusCodeTable = Field(default_factory=StatusCodeTable)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)


def load_config(path: Optional[str] = None) -> WfStatusConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to WFSTATUS_CONFIG env
            variable or 'wfstatus.yaml' in the current directory.
    """

    config_path = path or os.getenv("WFSTATUS_CONFIG", "wfstatus.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = WfStatusConfig(**data)
    else:
        config = WfStatusConfig()

    env_timezone = os.getenv("WFSTATUS_TIMEZONE")
    if env_timezone:
        config.display.timezone = env_timezone
    return config
