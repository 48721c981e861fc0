"""Tests for the status code table."""

import pytest
from pydantic import ValidationError

from wfstatus.status_codes import DEFAULT_STATUS_CODES, StatusCodeTable


def test_default_table_is_canonical() -> None:
    table = DEFAULT_STATUS_CODES
    assert table.code_for("registered") == 1
    assert table.code_for("accessioned") == 6
    assert table.code_for("opened") == 9
    assert table.display_text_for(0) == "Unknown Status"
    assert table.display_text_for(8) == "Accessioned (indexed, ingested)"
    assert table.first_step == "registered"
    assert table.terminal_step == "accessioned"


def test_unknown_step_maps_to_zero() -> None:
    assert DEFAULT_STATUS_CODES.code_for("digitized") == 0
    assert not DEFAULT_STATUS_CODES.is_known("digitized")


def test_display_text_for_unknown_code_raises() -> None:
    with pytest.raises(ValueError):
        DEFAULT_STATUS_CODES.display_text_for(42)


def test_duplicate_codes_rejected() -> None:
    with pytest.raises(ValidationError):
        StatusCodeTable(
            steps={"a": 1, "b": 1},
            display_text={0: "Unknown", 1: "A"},
            terminal_step="b",
        )


def test_reserved_code_rejected() -> None:
    with pytest.raises(ValidationError):
        StatusCodeTable(
            steps={"a": 0, "b": 1},
            display_text={0: "Unknown", 1: "B"},
            terminal_step="b",
        )


def test_missing_display_text_rejected() -> None:
    with pytest.raises(ValidationError):
        StatusCodeTable(
            steps={"a": 1, "b": 2},
            display_text={0: "Unknown", 1: "A"},
            terminal_step="b",
        )


def test_terminal_step_must_be_known() -> None:
    with pytest.raises(ValidationError):
        StatusCodeTable(
            steps={"a": 1},
            display_text={0: "Unknown", 1: "A"},
            terminal_step="done",
        )


def test_first_step_defaults_to_lowest_code() -> None:
    table = StatusCodeTable(
        steps={"done": 3, "start": 1, "middle": 2},
        display_text={0: "Unknown", 1: "Started", 2: "Middle", 3: "Done"},
        terminal_step="done",
    )
    assert table.first_step == "start"


def test_table_is_immutable() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_STATUS_CODES.terminal_step = "opened"


def test_table_mappings_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_STATUS_CODES.steps["bogus"] = 43
    with pytest.raises(TypeError):
        DEFAULT_STATUS_CODES.display_text[43] = "Bogus"
    assert "bogus" not in DEFAULT_STATUS_CODES.steps


def test_custom_table_mappings_are_read_only() -> None:
    steps = {"start": 1}
    table = StatusCodeTable(
        steps=steps, display_text={0: "Unknown", 1: "Started"}, terminal_step="start"
    )
    steps["later"] = 2
    assert "later" not in table.steps
    with pytest.raises(TypeError):
        table.steps["later"] = 2
