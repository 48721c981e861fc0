"""Milestone step ordering and status display text."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

UNKNOWN_STATUS_CODE = 0

# milestones from accessioning and the order they happen in
DEFAULT_STEPS: Dict[str, int] = {
    "registered": 1,
    "submitted": 2,
    "described": 3,
    "published": 4,
    "deposited": 5,
    "accessioned": 6,
    "indexed": 7,
    "shelved": 8,
    "opened": 9,
}

DEFAULT_DISPLAY_TEXT: Dict[int, str] = {
    UNKNOWN_STATUS_CODE: "Unknown Status",
    1: "Registered",
    2: "In accessioning",
    3: "In accessioning (described)",
    4: "In accessioning (described, published)",
    5: "In accessioning (described, published, deposited)",
    6: "Accessioned",
    7: "Accessioned (indexed)",
    8: "Accessioned (indexed, ingested)",
    9: "Opened",
}


class StatusCodeTable(BaseModel):
    """Lookup from milestone name to status code, and code to display text.

    The table is validated on construction: codes are unique per step, code
    ``0`` is reserved for "no matching milestone", and every code has display
    text. The step and display mappings are read-only once built.
    """

    model_config = ConfigDict(frozen=True)

    steps: Mapping[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_STEPS), validate_default=True
    )
    display_text: Mapping[int, str] = Field(
        default_factory=lambda: dict(DEFAULT_DISPLAY_TEXT), validate_default=True
    )
    initial_step: Optional[str] = None
    terminal_step: str = "accessioned"

    @field_validator("steps", "display_text", mode="after")
    @classmethod
    def _freeze_mapping(cls, v: Mapping[Any, Any]) -> Mapping[Any, Any]:
        return MappingProxyType(dict(v))

    @model_validator(mode="after")
    def _check_table(self) -> "StatusCodeTable":
        codes = list(self.steps.values())
        if len(set(codes)) != len(codes):
            raise ValueError("step codes must be unique")
        if UNKNOWN_STATUS_CODE in codes:
            raise ValueError(f"code {UNKNOWN_STATUS_CODE} is reserved for unknown status")
        missing = ({UNKNOWN_STATUS_CODE} | set(codes)) - set(self.display_text)
        if missing:
            raise ValueError(f"display text missing for codes: {sorted(missing)}")
        if self.terminal_step not in self.steps:
            raise ValueError(f"terminal step {self.terminal_step!r} is not a known step")
        if self.initial_step is not None and self.initial_step not in self.steps:
            raise ValueError(f"initial step {self.initial_step!r} is not a known step")
        return self

    @property
    def first_step(self) -> Optional[str]:
        """The initial step, defaulting to the step with the lowest code."""
        if self.initial_step is not None:
            return self.initial_step
        if not self.steps:
            return None
        return min(self.steps, key=self.steps.__getitem__)

    def is_known(self, name: str) -> bool:
        return name in self.steps

    def code_for(self, name: str) -> int:
        """Return the code for ``name``, or the unknown code if not a step."""
        return self.steps.get(name, UNKNOWN_STATUS_CODE)

    def display_text_for(self, code: int) -> str:
        try:
            return self.display_text[code]
        except KeyError:
            raise ValueError(f"Unknown status code: {code}") from None


DEFAULT_STATUS_CODES = StatusCodeTable()
