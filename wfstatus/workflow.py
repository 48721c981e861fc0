"""Workflow documents and collections for a single object."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._select import first_max
from .errors import MalformedInputError
from .formatting import VersionLike, coerce_version
from .models import Process, ProcessStatus

logger = logging.getLogger(__name__)


class WorkflowDocument(BaseModel):
    """The processes of one named workflow belonging to one object."""

    model_config = ConfigDict(frozen=True)

    object_id: str
    workflow_name: str
    processes: List[Process] = Field(default_factory=list)

    @classmethod
    def from_records(
        cls,
        object_id: str,
        workflow_name: str,
        records: Iterable[Mapping[str, Any]],
    ) -> "WorkflowDocument":
        """Build a document from parsed process attribute mappings.

        Raises:
            MalformedInputError: If any record cannot be validated.
        """
        try:
            return cls(
                object_id=object_id,
                workflow_name=workflow_name,
                processes=[Process.model_validate(dict(r)) for r in records],
            )
        except (ValidationError, TypeError) as e:
            raise MalformedInputError(
                f"Invalid process records for {object_id}/{workflow_name}: {e}"
            ) from e

    @property
    def is_empty(self) -> bool:
        return not self.processes

    @property
    def process_names(self) -> List[str]:
        """Distinct process names in document order."""
        return list(dict.fromkeys(p.name for p in self.processes))

    @property
    def latest_version(self) -> Optional[int]:
        """Greatest process version, or ``None`` if no process is versioned."""
        versions = [p.version for p in self.processes if p.version is not None]
        return max(versions) if versions else None

    @property
    def is_complete(self) -> bool:
        """Whether every process of the latest version is done."""
        latest = self.latest_version
        return True if latest is None else self.complete_for(latest)

    def processes_for(self, version: VersionLike) -> List[Process]:
        target = coerce_version(version)
        return [p for p in self.processes if p.matches_version(target)]

    def processes_named(self, name: str) -> List[Process]:
        return [p for p in self.processes if p.name == name]

    def active_for(self, version: VersionLike) -> bool:
        """Return ``True`` if the workflow has been instantiated for ``version``."""
        return bool(self.processes_for(version))

    def complete_for(self, version: VersionLike) -> bool:
        """Return ``True`` if every process of ``version`` is completed or skipped.

        A version with no processes is complete.
        """
        return all(p.is_done for p in self.processes_for(version))

    def incomplete_processes_for(self, version: VersionLike) -> List[Process]:
        return [p for p in self.processes_for(version) if not p.is_done]

    def process_for_recent_version(self, name: str) -> Optional[Process]:
        """Return the ``name`` process with the greatest version.

        Unversioned processes count as version ``0``. Ties go to the process
        appearing first in the document. Returns ``None`` when nothing matches.
        """
        process = first_max(
            self.processes_named(name), key=lambda p: p.version or 0
        )
        if process is None:
            logger.debug(
                f"No process named {name} in {self.object_id}/{self.workflow_name}"
            )
        return process


class WorkflowCollection(BaseModel):
    """All workflow documents for one object, in the order received."""

    model_config = ConfigDict(frozen=True)

    object_id: str
    workflows: List[WorkflowDocument] = Field(default_factory=list)

    @classmethod
    def from_records(
        cls,
        object_id: str,
        workflows: Iterable[tuple[str, Iterable[Mapping[str, Any]]]],
    ) -> "WorkflowCollection":
        """Build a collection from ``(workflow_name, process_records)`` pairs."""
        return cls(
            object_id=object_id,
            workflows=[
                WorkflowDocument.from_records(object_id, name, records)
                for name, records in workflows
            ],
        )

    @property
    def workflow_names(self) -> List[str]:
        return [w.workflow_name for w in self.workflows]

    def workflow(self, name: str) -> Optional[WorkflowDocument]:
        """First workflow document called ``name``, if any."""
        return next((w for w in self.workflows if w.workflow_name == name), None)

    def errors_for(self, version: VersionLike) -> List[str]:
        """Error messages of errored processes for ``version``.

        Ordered by workflow, then by process within each workflow. Errored
        processes without a message are skipped.
        """
        return [
            p.error_message
            for w in self.workflows
            for p in w.processes_for(version)
            if p.status == ProcessStatus.ERROR and p.error_message is not None
        ]
