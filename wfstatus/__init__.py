"""wfstatus: workflow and lifecycle status for versioned digital objects."""

from .client import WorkflowStatusClient
from .config import WfStatusConfig, load_config
from .errors import MalformedInputError, NotFoundError, WorkflowStatusError
from .models import Milestone, Process, ProcessStatus
from .sources import get_source
from .status import StatusInfo, StatusResolver
from .status_codes import DEFAULT_STATUS_CODES, StatusCodeTable
from .timeline import MilestoneTimeline
from .workflow import WorkflowCollection, WorkflowDocument

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_STATUS_CODES",
    "MalformedInputError",
    "Milestone",
    "MilestoneTimeline",
    "NotFoundError",
    "Process",
    "ProcessStatus",
    "StatusCodeTable",
    "StatusInfo",
    "StatusResolver",
    "WfStatusConfig",
    "WorkflowCollection",
    "WorkflowDocument",
    "WorkflowStatusClient",
    "WorkflowStatusError",
    "get_source",
    "load_config",
]
