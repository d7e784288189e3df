from __future__ import annotations

from core.filters import ALL, FilterCriteria, normalize_criteria


def test_defaults_are_inactive():
    c = FilterCriteria()
    assert c.query == ""
    assert (c.status, c.priority, c.team, c.owner) == (ALL, ALL, ALL, ALL)
    assert not c.is_active


def test_normalize_keeps_query_and_maps_blanks_to_all():
    c = normalize_criteria({"query": "  brand  ", "status": "", "priority": None, "owner": "Ana"})
    assert c.query == "  brand  "
    assert c.status == ALL
    assert c.priority == ALL
    assert c.team == ALL
    assert c.owner == "Ana"
    assert c.is_active


def test_normalize_handles_missing_input():
    assert normalize_criteria(None) == FilterCriteria()
    assert normalize_criteria({}) == FilterCriteria()


def test_constraint_values_are_kept_verbatim():
    c = normalize_criteria({"status": "In Progress"})
    assert c.status == "In Progress"


def test_cleared_resets_everything():
    c = FilterCriteria(query="x", status="Completed", priority="P0", team="Eng", owner="Ben")
    assert c.is_active
    assert c.cleared() == FilterCriteria()


def test_with_status_returns_new_value():
    c = FilterCriteria(query="x")
    picked = c.with_status("Ongoing")
    assert picked.status == "Ongoing"
    assert picked.query == "x"
    assert c.status == ALL
    assert picked.with_status(None).status == ALL
