"""In-memory workflow source for testing."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Mapping

from ..errors import NotFoundError
from ..models import Milestone
from ..timeline import MilestoneTimeline
from ..workflow import WorkflowCollection, WorkflowDocument
from .base import BaseWorkflowSource


class InMemoryWorkflowSource(BaseWorkflowSource):
    """Holds already-parsed records in local memory."""

    def __init__(self) -> None:
        self._workflows: Dict[str, List[WorkflowDocument]] = defaultdict(list)
        self._milestones: Dict[str, List[Milestone]] = {}

    def add_workflow(self, document: WorkflowDocument) -> None:
        """Store ``document``, replacing any workflow with the same name."""
        docs = self._workflows[document.object_id]
        docs[:] = [d for d in docs if d.workflow_name != document.workflow_name]
        docs.append(document)

    def add_process_records(
        self,
        object_id: str,
        workflow_name: str,
        records: Iterable[Mapping[str, Any]],
    ) -> WorkflowDocument:
        document = WorkflowDocument.from_records(object_id, workflow_name, records)
        self.add_workflow(document)
        return document

    def add_milestones(
        self, object_id: str, records: Iterable[Mapping[str, Any] | Milestone]
    ) -> None:
        """Append milestones for ``object_id``."""
        timeline = MilestoneTimeline.from_records(
            object_id,
            [r.model_dump() if isinstance(r, Milestone) else r for r in records],
        )
        self._milestones.setdefault(object_id, []).extend(timeline.milestones)

    async def fetch_workflow(
        self, object_id: str, workflow_name: str
    ) -> WorkflowDocument:
        for doc in self._workflows.get(object_id, []):
            if doc.workflow_name == workflow_name:
                return doc
        raise NotFoundError(object_id, workflow_name)

    async def fetch_workflows(self, object_id: str) -> WorkflowCollection:
        if object_id not in self._workflows:
            raise NotFoundError(object_id)
        return WorkflowCollection(
            object_id=object_id, workflows=list(self._workflows[object_id])
        )

    async def fetch_milestones(
        self, object_id: str, active_only: bool = False
    ) -> MilestoneTimeline:
        if object_id not in self._milestones:
            raise NotFoundError(object_id)
        timeline = MilestoneTimeline(
            object_id=object_id, milestones=list(self._milestones[object_id])
        )
        return timeline.active() if active_only else timeline
