"""
Deal endpoints — filtered list, statistics, recent deals, participant deals, deal detail.
"""
from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from dealflow.config import RECENT_DAYS_DEFAULT
from dealflow.data.store import DealStore
from dealflow.data.schemas import DealQuery, resolve_now
from dealflow.api.dependencies import get_store, parse_as_of, parse_deal_query
from dealflow.api.response_models import DealResponse
from dealflow.analytics.common import sanitize_for_json
from dealflow.analytics.stats import compute_stats

router = APIRouter(prefix="/api", tags=["deals"])


def _safe_json(data: dict) -> JSONResponse:
    return JSONResponse(content=sanitize_for_json(data))


@router.get("/deals")
def list_deals(
    store: DealStore = Depends(get_store),
    query: DealQuery = Depends(parse_deal_query),
    include_stats: bool = Query(False, description="Attach the statistics snapshot"),
    as_of: dt.date | None = Depends(parse_as_of),
):
    """Filtered, date-sorted, paginated deals."""
    data = store.filter(query).to_dict()
    if include_stats:
        data["stats"] = compute_stats(store, as_of).to_dict()
    return _safe_json(data)


@router.get("/deals/stats")
def deal_stats(
    store: DealStore = Depends(get_store),
    as_of: dt.date | None = Depends(parse_as_of),
):
    """Totals, by-type breakdown, trailing quarters, by-year series, month and YTD windows."""
    return _safe_json(compute_stats(store, as_of).to_dict())


@router.get("/deals/recent")
def recent_deals(
    days: int = Query(RECENT_DAYS_DEFAULT, ge=0, description="Look-back window in days"),
    store: DealStore = Depends(get_store),
    as_of: dt.date | None = Depends(parse_as_of),
):
    today = resolve_now(as_of)
    deals = store.get_recent(days, today)
    return _safe_json({
        "as_of": today,
        "days": days,
        "count": len(deals),
        "deals": [d.to_dict() for d in deals],
    })


@router.get("/participants/{identifier}/deals")
def participant_deals(identifier: str, store: DealStore = Depends(get_store)):
    """Every deal a company took part in, by slug or company name."""
    deals = store.get_by_participant(identifier)
    return _safe_json({
        "participant": identifier,
        "participant_id": store.resolve_participant(identifier),
        "count": len(deals),
        "deals": [d.to_dict() for d in deals],
    })


# Registered last so the static /deals/* paths above take precedence
@router.get("/deals/{deal_id}", response_model=DealResponse)
def deal_detail(deal_id: str, store: DealStore = Depends(get_store)):
    deal = store.get_by_id(deal_id)
    if deal is None:
        raise HTTPException(404, f"Deal not found: {deal_id}")
    return deal.to_dict()
