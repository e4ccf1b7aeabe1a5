"""
Deal flow report endpoints — JSON + Excel download.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from dealflow import config
from dealflow.data.store import DealStore
from dealflow.data.schemas import DealQuery
from dealflow.api.dependencies import get_store, parse_as_of, parse_deal_query
from dealflow.analytics.common import sanitize_for_json
from dealflow.reports import deal_flow_report

router = APIRouter(prefix="/api/reports", tags=["reports"])


def _output_path(name: str) -> Path:
    config.REPORTS_FOLDER.mkdir(parents=True, exist_ok=True)
    return config.REPORTS_FOLDER / name


@router.get("/deal-flow")
def deal_flow_json(
    store: DealStore = Depends(get_store),
    query: DealQuery = Depends(parse_deal_query),
    as_of: dt.date | None = Depends(parse_as_of),
):
    return JSONResponse(content=sanitize_for_json(deal_flow_report.generate_json(store, query, as_of)))


@router.get("/deal-flow/excel")
def deal_flow_excel(
    store: DealStore = Depends(get_store),
    query: DealQuery = Depends(parse_deal_query),
    as_of: dt.date | None = Depends(parse_as_of),
):
    path = deal_flow_report.generate_excel(store, _output_path("Deal_Flow_Report.xlsx"), query, as_of)
    return FileResponse(path=str(path), filename=path.name,
                        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")
