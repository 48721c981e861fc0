"""Exception types raised by wfstatus."""

from __future__ import annotations


class WorkflowStatusError(Exception):
    """Base class for all wfstatus errors."""


class MalformedInputError(WorkflowStatusError, ValueError):
    """Input could not be reduced to the expected record shape."""


class NotFoundError(WorkflowStatusError, LookupError):
    """The requested object or workflow does not exist in the source."""

    def __init__(self, object_id: str, workflow_name: str | None = None) -> None:
        self.object_id = object_id
        self.workflow_name = workflow_name
        target = f"{object_id}/{workflow_name}" if workflow_name else object_id
        super().__init__(f"Not found: {target}")
