"""Workflow source factory and initialization."""

from __future__ import annotations

import os
from typing import Optional

from ..config import WfStatusConfig, load_config
from .base import BaseWorkflowSource
from .inmemory import InMemoryWorkflowSource


def get_source(
    backend: Optional[str] = None, config: Optional[WfStatusConfig] = None
) -> BaseWorkflowSource:
    """Factory function to get the configured workflow source."""

    config = config or load_config()
    backend = (
        backend
        or os.getenv("WFSTATUS_SOURCE")
        or config.source.backend
    ).lower()

    if backend == "inmemory":
        return InMemoryWorkflowSource()
    else:
        raise ValueError(f"Unsupported source backend: {backend}")


__all__ = ["BaseWorkflowSource", "InMemoryWorkflowSource", "get_source"]
