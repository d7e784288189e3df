from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Sequence

from core.charts import status_breakdown_chart, to_vega_spec
from core.data import Record
from core.filters import FilterCriteria
from core.view import filter_options, summary_counts, visible_records


def compute_overview(criteria: FilterCriteria, records: Sequence[Record]) -> Dict[str, Any]:
    counts = summary_counts(records)
    visible = visible_records(records, criteria)
    return {
        "filters": asdict(criteria),
        "summary": counts.to_dict(),
        "active_status": criteria.status,
        "options": filter_options(records),
        "rows": [r.to_dict() for r in visible],
        "visible_count": len(visible),
        "charts": {"status_breakdown": to_vega_spec(status_breakdown_chart(counts))},
    }
