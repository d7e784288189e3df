from __future__ import annotations

from typing import Any, Dict

import altair as alt
import pandas as pd

from core.layout import STATUS_HEX
from core.view import KNOWN_STATUSES, SummaryCounts

alt.data_transformers.disable_max_rows()


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def status_breakdown_chart(counts: SummaryCounts) -> alt.Chart:
    df = pd.DataFrame({"status": list(KNOWN_STATUSES), "count": [counts.for_status(s) for s in KNOWN_STATUSES]})
    return (
        alt.Chart(df)
        .mark_bar(cornerRadiusEnd=3)
        .encode(
            x=alt.X("count:Q", title="Programs", axis=alt.Axis(format="d", tickMinStep=1, grid=False)),
            y=alt.Y("status:N", title=None, sort=list(KNOWN_STATUSES)),
            color=alt.Color(
                "status:N",
                scale=alt.Scale(domain=list(KNOWN_STATUSES), range=[STATUS_HEX[s] for s in KNOWN_STATUSES]),
                legend=None,
            ),
            tooltip=[alt.Tooltip("status:N", title="Status"), alt.Tooltip("count:Q", title="Programs")],
        )
        .properties(height=140)
    )
