"""Tests for cross-workflow queries."""

from wfstatus.workflow import WorkflowCollection


def make_collection() -> WorkflowCollection:
    return WorkflowCollection.from_records(
        "druid:mw971zk1113",
        [
            (
                "assemblyWF",
                [
                    {"version": 1, "status": "error", "errorMessage": "err1", "name": "a"},
                    {"version": 2, "status": "error", "errorMessage": "err2", "name": "b"},
                    {"version": 2, "status": "completed", "errorMessage": "err3", "name": "c"},
                ],
            ),
            (
                "sdrPreservationWF",
                [
                    {"version": 1, "status": "error", "errorMessage": "err4", "name": "a"},
                    {"version": 2, "status": "error", "errorMessage": "err5", "name": "b"},
                    {"version": 2, "status": "completed", "errorMessage": "err6", "name": "c"},
                ],
            ),
        ],
    )


def test_errors_for_version() -> None:
    workflows = make_collection()
    assert workflows.errors_for(2) == ["err2", "err5"]
    assert workflows.errors_for("1") == ["err1", "err4"]
    assert workflows.errors_for(3) == []


def test_workflow_names_in_order() -> None:
    workflows = make_collection()
    assert workflows.workflow_names == ["assemblyWF", "sdrPreservationWF"]


def test_workflow_lookup() -> None:
    workflows = make_collection()
    assert workflows.workflow("sdrPreservationWF").workflow_name == "sdrPreservationWF"
    assert workflows.workflow("missingWF") is None


def test_duplicate_workflow_names_kept() -> None:
    workflows = WorkflowCollection.from_records(
        "druid:ab123cd4567", [("accessionWF", []), ("accessionWF", [])]
    )
    assert workflows.workflow_names == ["accessionWF", "accessionWF"]


def test_errors_for_skips_processes_without_message() -> None:
    workflows = WorkflowCollection.from_records(
        "druid:mw971zk1113",
        [
            (
                "accessionWF",
                [
                    {"version": 2, "status": "error", "name": "shelve"},
                    {"version": 2, "status": "error", "errorMessage": "boom", "name": "publish"},
                ],
            )
        ],
    )
    assert workflows.errors_for(2) == ["boom"]
