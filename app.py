import pandas as pd
import streamlit as st
from typing import Dict, List

from core.charts import status_breakdown_chart
from core.config import ALL_PROGRAMS_URL
from core.data import FetchError, Record, fetch_records, records_to_frame
from core.filters import ALL, FilterCriteria, normalize_criteria
from core.layout import COLUMN_LABELS, DEFAULT_COLUMN_WIDTHS, badge_css, format_date, resize_column
from core.view import (
    KNOWN_STATUSES,
    SUMMARY_ORDER,
    SummaryCounts,
    filter_options,
    summary_counts,
    visible_records,
)


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .block-container {padding-top: 1.2rem; max-width: 1600px;}
        div[data-testid="stDataFrame"] {border: 1px solid #e5e7eb;border-radius: 8px;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


def load_records(force: bool = False) -> List[Record]:
    if not force and "records" in st.session_state:
        return st.session_state["records"]
    st.session_state["load_error"] = None
    with st.spinner("Loading partnerships..."):
        try:
            records = fetch_records()
        except FetchError as exc:
            st.session_state["load_error"] = str(exc)
            records = []
    st.session_state["records"] = records
    return records


def get_criteria() -> FilterCriteria:
    return st.session_state.setdefault("criteria", FilterCriteria())


def set_criteria(criteria: FilterCriteria):
    st.session_state["criteria"] = criteria
    # Widgets read their own keys; keep them in step with the criteria value.
    st.session_state["w_query"] = criteria.query
    st.session_state["w_status"] = criteria.status
    st.session_state["w_priority"] = criteria.priority
    st.session_state["w_team"] = criteria.team
    st.session_state["w_owner"] = criteria.owner


def criteria_from_widgets():
    set_criteria(
        normalize_criteria(
            {
                "query": st.session_state.get("w_query", ""),
                "status": st.session_state.get("w_status", ALL),
                "priority": st.session_state.get("w_priority", ALL),
                "team": st.session_state.get("w_team", ALL),
                "owner": st.session_state.get("w_owner", ALL),
            }
        )
    )


def select_status(status: str):
    set_criteria(get_criteria().with_status(status))


def clear_criteria():
    set_criteria(get_criteria().cleared())


def render_summary_buttons(counts: SummaryCounts, criteria: FilterCriteria):
    # Counts always come from the full record set; only the highlight follows the filter.
    buckets = [("Total", ALL)] + [(s, s) for s in SUMMARY_ORDER]
    cols = st.columns(len(buckets))
    for col, (label, status) in zip(cols, buckets):
        col.button(
            f"{label}: {counts.for_status(status)}",
            key=f"summary_{status}",
            type="primary" if criteria.status == status else "secondary",
            on_click=select_status,
            args=(status,),
            width="stretch",
        )


def _select(label: str, key: str, values: List[str], all_label: str):
    options = [ALL] + values
    current = st.session_state.get(key, ALL)
    if current not in options:
        options.append(current)
    st.selectbox(
        label,
        options=options,
        key=key,
        format_func=lambda v: all_label if v == ALL else v,
        on_change=criteria_from_widgets,
        label_visibility="collapsed",
    )


def render_filters(options: Dict[str, List[str]], criteria: FilterCriteria):
    c_search, c_status, c_priority, c_team, c_owner, c_links, c_clear = st.columns([3, 2, 2, 2, 2, 2, 1])
    with c_search:
        st.text_input(
            "Search",
            key="w_query",
            placeholder="Search programs...",
            on_change=criteria_from_widgets,
            label_visibility="collapsed",
        )
    with c_status:
        statuses = list(KNOWN_STATUSES) + [s for s in options["statuses"] if s not in KNOWN_STATUSES]
        _select("Status", "w_status", statuses, "All Status")
    with c_priority:
        _select("Priority", "w_priority", options["priorities"], "All Priority")
    with c_team:
        _select("Team", "w_team", options["teams"], "All Teams")
    with c_owner:
        _select("Owner", "w_owner", options["owners"], "All Owners")
    with c_links:
        st.link_button("All Programs", ALL_PROGRAMS_URL, width="stretch")
    with c_clear:
        if criteria.is_active:
            st.button("Clear", key="clear_filters", on_click=clear_criteria, width="stretch")


def render_column_widths():
    widths: Dict[str, int] = st.session_state.setdefault("column_widths", dict(DEFAULT_COLUMN_WIDTHS))
    with st.expander("Column widths", expanded=False):
        cols = st.columns([3, 1, 1, 2])
        column = cols[0].selectbox(
            "Column",
            options=list(widths),
            format_func=lambda c: COLUMN_LABELS.get(c, c),
            label_visibility="collapsed",
        )
        if cols[1].button("Narrower", width="stretch"):
            st.session_state["column_widths"] = resize_column(widths, column, -20)
            st.rerun()
        if cols[2].button("Wider", width="stretch"):
            st.session_state["column_widths"] = resize_column(widths, column, 20)
            st.rerun()
        if cols[3].button("Reset widths", width="stretch"):
            st.session_state["column_widths"] = dict(DEFAULT_COLUMN_WIDTHS)
            st.rerun()
    return st.session_state["column_widths"]


def render_table(rows: List[Record], widths: Dict[str, int]):
    df = records_to_frame(rows)
    if df.empty:
        st.info("No programs match the current filters.")
        return
    df = df.drop(columns=["id"])
    df["eta"] = df["eta"].map(format_date)
    df["completionDate"] = df["completionDate"].map(format_date)
    df["links"] = df["links"].where(df["links"] != "", None)

    styled = df.style
    for kind in ("status", "priority", "team", "owner"):
        styled = styled.map(lambda v, kind=kind: badge_css(kind, v), subset=[kind])

    column_config = {}
    for col, label in COLUMN_LABELS.items():
        if col == "links":
            column_config[col] = st.column_config.LinkColumn(label, width=widths.get(col), display_text="Open")
        else:
            column_config[col] = st.column_config.TextColumn(label, width=widths.get(col))
    st.dataframe(styled, hide_index=True, width="stretch", column_config=column_config, height=640)


# ---------- UI setup ----------
st.set_page_config(page_title="Partnerships Dashboard", layout="wide")
inject_base_styles()

top_left, top_right = st.columns([8, 1])
with top_left:
    st.title("Partnerships")
with top_right:
    if st.button("Refresh", width="stretch"):
        load_records(force=True)

records = load_records()
if st.session_state.get("load_error"):
    st.error("Failed to load partnerships data. Use Refresh to try again.")

criteria = get_criteria()
counts = summary_counts(records)
options = filter_options(records)

render_summary_buttons(counts, criteria)
render_filters(options, criteria)

visible = visible_records(records, criteria)
st.caption(f"Showing {len(visible)} of {counts.total} programs")
widths = render_column_widths()
render_table(visible, widths)

with st.expander("Status breakdown", expanded=False):
    st.altair_chart(status_breakdown_chart(counts), width="stretch")

export_df: pd.DataFrame = records_to_frame(visible)
if not export_df.empty:
    st.download_button(
        "Export CSV",
        data=export_df.to_csv(index=False).encode("utf-8"),
        file_name="partnerships.csv",
        mime="text/csv",
    )
