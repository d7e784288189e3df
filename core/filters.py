from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


ALL = "all"

CONSTRAINT_FIELDS = ("status", "priority", "team", "owner")


@dataclass(frozen=True)
class FilterCriteria:
    query: str = ""
    status: str = ALL
    priority: str = ALL
    team: str = ALL
    owner: str = ALL

    @property
    def is_active(self) -> bool:
        return bool(self.query) or any(getattr(self, f) != ALL for f in CONSTRAINT_FIELDS)

    def cleared(self) -> "FilterCriteria":
        return FilterCriteria()

    def with_status(self, status: Optional[str]) -> "FilterCriteria":
        return replace(self, status=_as_constraint(status))


def _as_constraint(value: object) -> str:
    if value is None:
        return ALL
    text = str(value)
    if not text.strip():
        return ALL
    return text


def normalize_criteria(raw: Optional[dict]) -> FilterCriteria:
    raw = raw or {}
    return FilterCriteria(
        query=str(raw.get("query") or ""),
        status=_as_constraint(raw.get("status")),
        priority=_as_constraint(raw.get("priority")),
        team=_as_constraint(raw.get("team")),
        owner=_as_constraint(raw.get("owner")),
    )
