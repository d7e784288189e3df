from __future__ import annotations

from dataclasses import asdict
import logging
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.responses import Response

from api.schemas import ErrorModel, FilterCriteriaModel, RecordModel, SummaryCountsModel
from core.config import cors_origins
from core.data import fetch_records, records_to_frame
from core.filters import FilterCriteria, normalize_criteria
from core.metrics_overview import compute_overview
from core.view import filter_options, summary_counts, visible_records


app = FastAPI(title="Partnerships Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch partnerships data"

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _criteria_from_model(model: FilterCriteriaModel) -> FilterCriteria:
    return normalize_criteria(model.model_dump())


def _error(message: str = FETCH_FAILED) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorModel(error=message).model_dump())


@app.get(
    "/api/partnerships",
    response_model=List[RecordModel],
    responses={500: {"model": ErrorModel}},
)
def partnerships():
    try:
        records = fetch_records()
        return [r.to_dict() for r in records]
    except Exception:
        logger.exception("partnerships failed")
        return _error()


@app.get("/meta/options")
def meta_options():
    try:
        return filter_options(fetch_records())
    except Exception:
        logger.exception("meta_options failed")
        return _error()


@app.get("/meta/summary", response_model=SummaryCountsModel, responses={500: {"model": ErrorModel}})
def meta_summary():
    try:
        return summary_counts(fetch_records()).to_dict()
    except Exception:
        logger.exception("meta_summary failed")
        return _error()


@app.post("/overview")
def overview(filters: FilterCriteriaModel):
    try:
        criteria = _criteria_from_model(filters)
        return compute_overview(criteria, fetch_records())
    except Exception:
        logger.exception("overview failed")
        return _error()


@app.post("/export/partnerships")
def export_partnerships(filters: FilterCriteriaModel):
    try:
        criteria = _criteria_from_model(filters)
        visible = visible_records(fetch_records(), criteria)
    except Exception:
        logger.exception("export_partnerships failed")
        return _error()
    logger.info("Exporting %d partnership rows (filters=%s)", len(visible), asdict(criteria))
    csv_bytes = records_to_frame(visible).to_csv(index=False).encode("utf-8")
    return Response(
        content=csv_bytes,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=partnerships.csv"},
    )
