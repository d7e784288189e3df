from __future__ import annotations

import csv
import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional

import pandas as pd
import requests

from core.config import CSV_MODES, ID_POLICIES, SheetSource, load_sheet_source


logger = logging.getLogger(__name__)

# Positional layout of the sheet; the header row is not consulted.
RECORD_COLUMNS = (
    "goals",
    "tasks",
    "team",
    "priority",
    "owner",
    "status",
    "eta",
    "completion_date",
    "links",
    "notes",
)

JSON_KEYS = {"completion_date": "completionDate"}


class FetchError(RuntimeError):
    """The sheet export could not be retrieved (transport error or non-2xx status)."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        code = self.status_code if self.status_code is not None else "unknown"
        return f"HTTP {code} for {self.url}: {self.message}"


@dataclass(frozen=True)
class Record:
    id: str
    goals: str = ""
    tasks: str = ""
    team: str = ""
    priority: str = ""
    owner: str = ""
    status: str = ""
    eta: str = ""
    completion_date: str = ""
    links: str = ""
    notes: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {JSON_KEYS.get(k, k): v for k, v in asdict(self).items()}


def frame_columns() -> List[str]:
    return ["id"] + [JSON_KEYS.get(c, c) for c in RECORD_COLUMNS]


def records_to_frame(records: Iterable[Record]) -> pd.DataFrame:
    rows = [r.to_dict() for r in records]
    return pd.DataFrame(rows, columns=frame_columns())


def _split_simple(line: str) -> List[str]:
    # Not quote-aware: an embedded comma inside quotes splits the field.
    return [value.strip().replace('"', "") for value in line.split(",")]


def _split_quoted(line: str) -> List[str]:
    row = next(csv.reader([line]), [])
    return [value.strip() for value in row]


def parse_records(text: str, *, csv_mode: str = "simple", id_policy: str = "line") -> List[Record]:
    """Parse the sheet's CSV export into records.

    The first non-blank line is treated as the header and skipped. ``id_policy``
    decides whether identifiers count every retained data line (``"line"``) or
    only the rows that survive the empty-goals drop (``"sequence"``).
    """
    if csv_mode not in CSV_MODES:
        raise ValueError(f"Unknown csv_mode {csv_mode!r}; expected one of {CSV_MODES}")
    if id_policy not in ID_POLICIES:
        raise ValueError(f"Unknown id_policy {id_policy!r}; expected one of {ID_POLICIES}")

    split = _split_quoted if csv_mode == "quoted" else _split_simple
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return []
    header = split(lines[0])
    logger.debug("Sheet header columns: %s", header)

    records: List[Record] = []
    for line_no, line in enumerate(lines[1:], start=1):
        values = split(line)
        fields = {col: (values[i] if i < len(values) else "") for i, col in enumerate(RECORD_COLUMNS)}
        if not fields["goals"]:
            continue
        rec_id = line_no if id_policy == "line" else len(records) + 1
        records.append(Record(id=str(rec_id), **fields))
    return records


def fetch_csv_text(source: SheetSource) -> str:
    url = source.export_url
    logger.debug("Fetching partnerships sheet from %s", url)
    try:
        resp = requests.get(url, timeout=float(source.timeout_s))
    except requests.RequestException as exc:
        logger.warning("Partnerships sheet request failed: %s", exc)
        raise FetchError(url=url, message=f"Request failed: {exc}") from exc
    if resp.status_code // 100 != 2:
        logger.warning("Partnerships sheet returned HTTP %s", resp.status_code)
        raise FetchError(url=url, message="Failed to fetch data from Google Sheets", status_code=int(resp.status_code))
    return resp.content.decode("utf-8", errors="replace")


def fetch_records(source: Optional[SheetSource] = None) -> List[Record]:
    source = source or load_sheet_source()
    text = fetch_csv_text(source)
    records = parse_records(text, csv_mode=source.csv_mode, id_policy=source.id_policy)
    logger.info("Loaded %d partnership records (gid=%s)", len(records), source.gid)
    return records
