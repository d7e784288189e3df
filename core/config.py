from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional


# Partnerships tab of the shared program-tracking sheet.
DEFAULT_SHEET_ID = "1u5QU1aI2pDJgc5koh8cLoHpYPDwLSuwe0uun9uhPcRM"
DEFAULT_SHEET_GID = "466045236"
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_CSV_MODE = "simple"
DEFAULT_ID_POLICY = "line"

CSV_MODES = ("simple", "quoted")
ID_POLICIES = ("line", "sequence")

EXPORT_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={gid}"

ALL_PROGRAMS_URL = os.environ.get("PARTNERSHIPS_ALL_PROGRAMS_URL", "https://spyne-programs.vercel.app/")

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


@dataclass(frozen=True)
class SheetSource:
    sheet_id: str = DEFAULT_SHEET_ID
    gid: str = DEFAULT_SHEET_GID
    timeout_s: float = DEFAULT_TIMEOUT_S
    csv_mode: str = DEFAULT_CSV_MODE
    id_policy: str = DEFAULT_ID_POLICY

    @property
    def export_url(self) -> str:
        return EXPORT_URL_TEMPLATE.format(sheet_id=self.sheet_id, gid=self.gid)


def _as_float(value: Optional[str], default: float) -> float:
    if value is None or not str(value).strip():
        return default
    try:
        return float(value)
    except Exception:
        return default


def _as_choice(value: str, choices: tuple, default: str) -> str:
    return value if value in choices else default


def load_sheet_source(env: Optional[Mapping[str, str]] = None) -> SheetSource:
    """Build the sheet location from ``PARTNERSHIPS_*`` environment variables.

    Unset or blank variables keep the defaults above, as do unknown parse
    modes and id policies.
    """
    env = os.environ if env is None else env

    def _get(name: str, default: str) -> str:
        raw = (env.get(name) or "").strip()
        return raw or default

    return SheetSource(
        sheet_id=_get("PARTNERSHIPS_SHEET_ID", DEFAULT_SHEET_ID),
        gid=_get("PARTNERSHIPS_SHEET_GID", DEFAULT_SHEET_GID),
        timeout_s=_as_float(env.get("PARTNERSHIPS_TIMEOUT_S"), DEFAULT_TIMEOUT_S),
        csv_mode=_as_choice(_get("PARTNERSHIPS_CSV_MODE", DEFAULT_CSV_MODE).lower(), CSV_MODES, DEFAULT_CSV_MODE),
        id_policy=_as_choice(_get("PARTNERSHIPS_ID_POLICY", DEFAULT_ID_POLICY).lower(), ID_POLICIES, DEFAULT_ID_POLICY),
    )


def cors_origins(env: Optional[Mapping[str, str]] = None) -> List[str]:
    env = os.environ if env is None else env
    raw = env.get("PARTNERSHIPS_CORS_ORIGINS") or ""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)
