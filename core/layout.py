"""Presentation state for the partnerships table.

Column widths live in the caller's session state; the helpers here only
derive new values from old ones.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

import pandas as pd


MIN_COLUMN_WIDTH = 80

DEFAULT_COLUMN_WIDTHS: Dict[str, int] = {
    "goals": 200,
    "tasks": 180,
    "team": 140,
    "priority": 100,
    "owner": 140,
    "status": 120,
    "eta": 110,
    "completionDate": 140,
    "links": 100,
    "notes": 250,
}

COLUMN_LABELS: Dict[str, str] = {
    "goals": "Goals",
    "tasks": "Tasks",
    "team": "Team",
    "priority": "Priority",
    "owner": "Owner",
    "status": "Status",
    "eta": "ETA",
    "completionDate": "Completion Date",
    "links": "Links",
    "notes": "Notes",
}

STATUS_HEX: Dict[str, str] = {
    "In Progress": "#3b82f6",
    "To be picked": "#f97316",
    "Ongoing": "#8b5cf6",
    "Completed": "#22c55e",
}

PRIORITY_HEX: Dict[str, str] = {
    "P0": "#ef4444",
    "Critical": "#ef4444",
    "High": "#f97316",
    "Medium": "#eab308",
    "Low": "#9ca3af",
}

# (background, text)
TEAM_COLORS: Dict[str, tuple] = {
    "Marketing": ("#dbeafe", "#1e40af"),
    "Engineering": ("#dcfce7", "#166534"),
    "Product": ("#f3e8ff", "#6b21a8"),
    "Sales": ("#ffedd5", "#9a3412"),
    "Partnerships": ("#fce7f3", "#9d174d"),
    "HR": ("#fef9c3", "#854d0e"),
    "DevOps": ("#f3f4f6", "#1f2937"),
    "Security": ("#fee2e2", "#991b1b"),
    "Design": ("#e0e7ff", "#3730a3"),
    "Data Science": ("#ccfbf1", "#115e59"),
    "Customer Success": ("#d1fae5", "#065f46"),
}

DEFAULT_BADGE_COLORS = ("#f3f4f6", "#1f2937")


def resize_column(widths: Mapping[str, int], column: str, delta: int) -> Dict[str, int]:
    if column not in widths:
        raise KeyError(column)
    out = dict(widths)
    out[column] = max(MIN_COLUMN_WIDTH, int(widths[column]) + int(delta))
    return out


def format_date(value: Optional[str]) -> str:
    """Render a sheet date as ``Nov 30, 2025``; blanks become ``-``."""
    if value is None or not str(value).strip():
        return "-"
    ts = pd.to_datetime(str(value).strip(), errors="coerce")
    if pd.isna(ts):
        return str(value)
    return f"{ts:%b} {ts.day}, {ts.year}"


def badge_css(kind: str, value: str) -> str:
    if kind == "status" and value in STATUS_HEX:
        return f"background-color: {STATUS_HEX[value]}; color: white"
    if kind == "priority" and value in PRIORITY_HEX:
        return f"background-color: {PRIORITY_HEX[value]}; color: white"
    if kind in {"team", "owner"}:
        bg, fg = TEAM_COLORS.get(value, DEFAULT_BADGE_COLORS) if kind == "team" else DEFAULT_BADGE_COLORS
        return f"background-color: {bg}; color: {fg}"
    return ""
