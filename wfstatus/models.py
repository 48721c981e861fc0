"""Record types handed to the workflow status core."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .formatting import coerce_version, normalize_timestamp


class ProcessStatus(str, Enum):
    """Status of a single workflow process."""

    WAITING = "waiting"
    COMPLETED = "completed"
    ERROR = "error"
    QUEUED = "queued"
    SKIPPED = "skipped"
    STARTED = "started"
    RETRYING = "retrying"
    HOLD = "hold"


DONE_STATUSES = frozenset({ProcessStatus.SKIPPED, ProcessStatus.COMPLETED})


class Process(BaseModel):
    """One step instance within a named workflow.

    Wire attribute names (``datetime``, ``errorMessage``, ``laneId``) are
    accepted as aliases for the Python field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    status: ProcessStatus
    timestamp: Optional[datetime] = Field(default=None, alias="datetime")
    elapsed: Optional[float] = None
    attempts: Optional[int] = None
    lifecycle: Optional[str] = None
    note: Optional[str] = None
    error_message: Optional[str] = Field(default=None, alias="errorMessage")
    lane_id: Optional[str] = Field(default=None, alias="laneId")
    context: Optional[Dict[str, Any]] = None
    version: Optional[int] = None

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, v: Any) -> Optional[int]:
        return coerce_version(v)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, v: Any) -> Optional[datetime]:
        return None if v is None else normalize_timestamp(v)

    @property
    def is_done(self) -> bool:
        """``True`` when the process is completed or skipped."""
        return self.status in DONE_STATUSES

    def matches_version(self, version: int) -> bool:
        return self.version is not None and self.version == version


class Milestone(BaseModel):
    """A named, timestamped lifecycle event for an object."""

    model_config = ConfigDict(frozen=True)

    name: str
    timestamp: datetime
    version: Optional[int] = None

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, v: Any) -> Optional[int]:
        return coerce_version(v)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, v: Any) -> datetime:
        return normalize_timestamp(v)
