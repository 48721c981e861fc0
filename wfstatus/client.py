"""High-level client answering workflow and lifecycle questions."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from .config import WfStatusConfig, load_config
from .errors import WorkflowStatusError
from .formatting import VersionLike
from .models import Process, ProcessStatus
from .sources import BaseWorkflowSource, get_source
from .status import StatusResolver
from .timeline import MilestoneTimeline
from .workflow import WorkflowCollection, WorkflowDocument

logger = logging.getLogger(__name__)


class WorkflowStatusClient:
    """Fetches records from a source and hands them to the status core."""

    def __init__(
        self,
        source: BaseWorkflowSource | None = None,
        config: Optional[WfStatusConfig] = None,
    ) -> None:
        self._config = config or load_config()
        self._source = source or get_source(config=self._config)

    @property
    def source(self) -> BaseWorkflowSource:
        return self._source

    async def workflow(self, object_id: str, workflow_name: str) -> WorkflowDocument:
        if not workflow_name:
            raise ValueError("missing workflow")
        logger.info(f"Fetching workflow {workflow_name} for {object_id}")
        return await self._source.fetch_workflow(object_id, workflow_name)

    async def all_workflows(self, object_id: str) -> WorkflowCollection:
        logger.info(f"Fetching all workflows for {object_id}")
        return await self._source.fetch_workflows(object_id)

    async def process(
        self, object_id: str, workflow_name: str, process: str
    ) -> Optional[Process]:
        """Most recent version of ``process`` within the workflow."""
        document = await self.workflow(object_id, workflow_name)
        return document.process_for_recent_version(process)

    async def workflow_status(
        self, object_id: str, workflow_name: str, process: str
    ) -> Optional[ProcessStatus]:
        """Status of the most recent version of ``process``, if it exists."""
        found = await self.process(object_id, workflow_name, process)
        return found.status if found else None

    async def errors_for(self, object_id: str, version: VersionLike) -> List[str]:
        workflows = await self.all_workflows(object_id)
        return workflows.errors_for(version)

    async def milestones(
        self, object_id: str, active_only: bool = False
    ) -> MilestoneTimeline:
        try:
            return await self._source.fetch_milestones(object_id, active_only=active_only)
        except WorkflowStatusError as e:
            logger.error(f"Failed to fetch milestones for {object_id}: {e}")
            raise

    async def lifecycle(
        self,
        object_id: str,
        milestone_name: str,
        version: Optional[VersionLike] = None,
        active_only: bool = False,
    ) -> Optional[datetime]:
        """When ``milestone_name`` was reached, or ``None`` if it never was."""
        timeline = await self.milestones(object_id, active_only=active_only)
        return timeline.milestone_time(milestone_name, version=version)

    async def status(self, object_id: str, version: VersionLike) -> StatusResolver:
        """Resolve the lifecycle status of ``version`` of an object."""
        timeline = await self.milestones(object_id)
        return StatusResolver(
            timeline,
            version,
            table=self._config.status_codes,
            display=self._config.display,
        )
