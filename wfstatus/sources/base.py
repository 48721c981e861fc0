"""Base interface for fetching parsed workflow and lifecycle records."""

from __future__ import annotations

import abc

from ..timeline import MilestoneTimeline
from ..workflow import WorkflowCollection, WorkflowDocument


class BaseWorkflowSource(metaclass=abc.ABCMeta):
    """Abstract source of workflow documents and milestones.

    Implementations own transport concerns such as retries. They raise
    ``NotFoundError`` when an object or workflow does not exist and
    ``MalformedInputError`` when a payload cannot be parsed.
    """

    @abc.abstractmethod
    async def fetch_workflow(
        self, object_id: str, workflow_name: str
    ) -> WorkflowDocument:
        """Return a single workflow for an object."""
        raise NotImplementedError

    @abc.abstractmethod
    async def fetch_workflows(self, object_id: str) -> WorkflowCollection:
        """Return every workflow for an object."""
        raise NotImplementedError

    @abc.abstractmethod
    async def fetch_milestones(
        self, object_id: str, active_only: bool = False
    ) -> MilestoneTimeline:
        """Return the lifecycle milestones for an object.

        Args:
            object_id: The object identifier
            active_only: Only return milestones of the currently open version.
        """
        raise NotImplementedError
