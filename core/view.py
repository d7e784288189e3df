"""Filtering and summary derivation over an in-memory record list.

Every function here is pure: inputs are only read and each call returns a
freshly built result, so they are safe to call on every filter change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from core.data import Record
from core.filters import ALL, CONSTRAINT_FIELDS, FilterCriteria


STATUS_IN_PROGRESS = "In Progress"
STATUS_ONGOING = "Ongoing"
STATUS_TO_BE_PICKED = "To be picked"
STATUS_COMPLETED = "Completed"

KNOWN_STATUSES = (STATUS_TO_BE_PICKED, STATUS_IN_PROGRESS, STATUS_ONGOING, STATUS_COMPLETED)
# Order of the summary buttons on the page.
SUMMARY_ORDER = (STATUS_IN_PROGRESS, STATUS_ONGOING, STATUS_TO_BE_PICKED, STATUS_COMPLETED)

SEARCH_FIELDS = ("goals", "owner", "team")
OPTION_FIELDS = ("team", "owner", "priority", "status")


@dataclass(frozen=True)
class SummaryCounts:
    total: int = 0
    in_progress: int = 0
    ongoing: int = 0
    to_be_picked: int = 0
    completed: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "inProgress": self.in_progress,
            "ongoing": self.ongoing,
            "toBePicked": self.to_be_picked,
            "completed": self.completed,
        }

    def for_status(self, status: str) -> int:
        if status == ALL:
            return self.total
        return {
            STATUS_IN_PROGRESS: self.in_progress,
            STATUS_ONGOING: self.ongoing,
            STATUS_TO_BE_PICKED: self.to_be_picked,
            STATUS_COMPLETED: self.completed,
        }.get(status, 0)


def matches(record: Record, criteria: FilterCriteria) -> bool:
    if criteria.query:
        q = criteria.query.lower()
        if not any(q in getattr(record, f).lower() for f in SEARCH_FIELDS):
            return False
    for f in CONSTRAINT_FIELDS:
        wanted = getattr(criteria, f)
        if wanted != ALL and getattr(record, f) != wanted:
            return False
    return True


def visible_records(records: Sequence[Record], criteria: FilterCriteria) -> List[Record]:
    return [r for r in records if matches(r, criteria)]


def summary_counts(records: Sequence[Record]) -> SummaryCounts:
    """Status buckets over the full set; unknown statuses only count toward ``total``."""
    statuses = [r.status for r in records]
    return SummaryCounts(
        total=len(statuses),
        in_progress=statuses.count(STATUS_IN_PROGRESS),
        ongoing=statuses.count(STATUS_ONGOING),
        to_be_picked=statuses.count(STATUS_TO_BE_PICKED),
        completed=statuses.count(STATUS_COMPLETED),
    )


def distinct_values(records: Iterable[Record], field: str) -> List[str]:
    if field not in OPTION_FIELDS:
        raise ValueError(f"Cannot derive options for field {field!r}; expected one of {OPTION_FIELDS}")
    seen: Dict[str, None] = {}
    for r in records:
        value = getattr(r, field)
        if value:
            seen.setdefault(value, None)
    return list(seen)


def filter_options(records: Sequence[Record]) -> Dict[str, List[str]]:
    return {
        "teams": distinct_values(records, "team"),
        "owners": distinct_values(records, "owner"),
        "priorities": distinct_values(records, "priority"),
        "statuses": distinct_values(records, "status"),
    }
