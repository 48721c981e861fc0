"""Resolve a single display status for an object version from its milestones.

Only milestones that are known steps and that belong to the target version
are considered. A milestone without a version tag belongs to whichever version
is currently open. The initial step is only meaningful for version 1.

If any considered milestone is the terminal step, it decides the status no
matter what else was recorded. Otherwise the latest milestone wins, with the
earliest-listed milestone taking ties.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import cached_property
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ._select import first_max
from .config import DisplayConfig
from .errors import MalformedInputError
from .formatting import (
    VersionLike,
    coerce_version,
    format_timestamp,
    simplify_display_text,
    xmlschema,
)
from .models import Milestone
from .status_codes import DEFAULT_STATUS_CODES, UNKNOWN_STATUS_CODE, StatusCodeTable
from .timeline import MilestoneTimeline

logger = logging.getLogger(__name__)


class StatusInfo(BaseModel):
    """Resolved status code and the time it was reached."""

    model_config = ConfigDict(frozen=True)

    status_code: int = UNKNOWN_STATUS_CODE
    status_time: Optional[datetime] = None


class StatusResolver:
    """Computes the status of ``version`` from a milestone timeline."""

    def __init__(
        self,
        timeline: MilestoneTimeline,
        version: VersionLike,
        table: Optional[StatusCodeTable] = None,
        display: Optional[DisplayConfig] = None,
    ) -> None:
        target = coerce_version(version)
        if target is None:
            raise MalformedInputError("A target version is required")
        self.timeline = timeline
        self.version = target
        self.table = table or DEFAULT_STATUS_CODES
        self.display_config = display or DisplayConfig()

    @cached_property
    def current_milestones(self) -> List[Milestone]:
        """Known-step milestones that apply to the target version."""
        initial = self.table.first_step
        current = []
        for m in self.timeline.milestones:
            if not self.table.is_known(m.name):
                logger.debug(f"Ignoring unknown milestone {m.name}")
                continue
            if m.name == initial and self.version > 1:
                continue
            if m.version is None or m.version == self.version:
                current.append(m)
        return current

    @cached_property
    def info(self) -> StatusInfo:
        current = self.current_milestones
        terminal = [m for m in current if m.name == self.table.terminal_step]
        if terminal:
            # the terminal step is the status regardless of later milestones
            latest = self._latest(terminal)
            return StatusInfo(
                status_code=self.table.code_for(latest.name),
                status_time=latest.timestamp,
            )

        latest = self._latest(current)
        if latest is None:
            logger.debug(
                f"No current milestones for {self.timeline.object_id} v{self.version}"
            )
            return StatusInfo()
        return StatusInfo(
            status_code=self.table.code_for(latest.name),
            status_time=latest.timestamp,
        )

    def _latest(self, milestones: List[Milestone]) -> Optional[Milestone]:
        latest = first_max(milestones, key=lambda m: m.timestamp)
        if latest is not None:
            tied = [m.name for m in milestones if m.timestamp == latest.timestamp]
            if len(tied) > 1:
                logger.debug(
                    f"Timestamp tie between {tied} at {xmlschema(latest.timestamp)}, "
                    f"using first listed ({latest.name})"
                )
        return latest

    @property
    def status_code(self) -> int:
        return self.info.status_code

    @property
    def status_time(self) -> Optional[datetime]:
        return self.info.status_time

    @property
    def status_time_text(self) -> Optional[str]:
        """The status time as UTC ISO-8601 text."""
        return xmlschema(self.status_time) if self.status_time else None

    def display_text(self) -> str:
        return self.table.display_text_for(self.status_code)

    def display(self, include_time: bool = False) -> str:
        """Single composed status, e.g. ``'v2 In accessioning (described)'``."""
        result = f"v{self.version} {self.display_text()}"
        if include_time and self.status_time is not None:
            stamp = format_timestamp(
                self.status_time,
                tz=self.display_config.timezone,
                time_format=self.display_config.time_format,
            )
            result += f" {stamp}"
        return result

    def display_simplified(self) -> str:
        """Display text without any trailing parenthetical explanation."""
        return simplify_display_text(self.display_text())
