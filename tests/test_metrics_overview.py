from __future__ import annotations

from core.filters import FilterCriteria
from core.metrics_overview import compute_overview


def test_overview_payload(records):
    payload = compute_overview(FilterCriteria(status="Completed"), records)

    assert payload["filters"]["status"] == "Completed"
    assert payload["active_status"] == "Completed"
    # Summary ignores the active filter.
    assert payload["summary"]["total"] == 5
    assert payload["visible_count"] == 1
    assert payload["rows"][0]["goals"] == "Platform Launch"
    assert payload["rows"][0]["completionDate"] == "2025-11-28"
    assert payload["options"]["teams"] == ["Marketing", "Partnerships", "Engineering"]


def test_overview_chart_spec(records):
    spec = compute_overview(FilterCriteria(), records)["charts"]["status_breakdown"]
    assert spec["mark"]["type"] == "bar"
    values = next(iter(spec["datasets"].values()))
    assert {v["status"]: v["count"] for v in values} == {
        "To be picked": 1,
        "In Progress": 1,
        "Ongoing": 1,
        "Completed": 1,
    }


def test_overview_empty():
    payload = compute_overview(FilterCriteria(), [])
    assert payload["rows"] == []
    assert payload["summary"]["total"] == 0
