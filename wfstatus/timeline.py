"""Ordered milestone events for one object."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import MalformedInputError
from .formatting import VersionLike, coerce_version
from .models import Milestone


class MilestoneTimeline(BaseModel):
    """Milestones for one object.

    Order carries no meaning beyond breaking ties between equal timestamps.
    """

    model_config = ConfigDict(frozen=True)

    object_id: Optional[str] = None
    milestones: List[Milestone] = Field(default_factory=list)

    @classmethod
    def from_records(
        cls, object_id: Optional[str], records: Iterable[Mapping[str, Any]]
    ) -> "MilestoneTimeline":
        """Build a timeline from parsed ``{name, timestamp, version}`` mappings.

        Raises:
            MalformedInputError: If any record cannot be validated.
        """
        try:
            return cls(
                object_id=object_id,
                milestones=[Milestone.model_validate(dict(r)) for r in records],
            )
        except (ValidationError, TypeError) as e:
            raise MalformedInputError(
                f"Invalid milestone records for {object_id}: {e}"
            ) from e

    @property
    def names(self) -> List[str]:
        return [m.name for m in self.milestones]

    @property
    def is_empty(self) -> bool:
        return not self.milestones

    def for_version(self, version: VersionLike) -> "MilestoneTimeline":
        """Milestones tagged with ``version`` or not tagged at all."""
        target = coerce_version(version)
        return self._filtered(
            m for m in self.milestones if m.version is None or m.version == target
        )

    def active(self) -> "MilestoneTimeline":
        """Milestones with no version tag, i.e. those of the open version."""
        return self._filtered(m for m in self.milestones if m.version is None)

    def milestone_time(
        self, name: str, version: Optional[VersionLike] = None
    ) -> Optional[datetime]:
        """When ``name`` was first reached, optionally within ``version``."""
        target = coerce_version(version)
        for m in self.milestones:
            if m.name == name and (target is None or m.version == target):
                return m.timestamp
        return None

    def _filtered(self, milestones: Iterable[Milestone]) -> "MilestoneTimeline":
        return MilestoneTimeline(object_id=self.object_id, milestones=list(milestones))
