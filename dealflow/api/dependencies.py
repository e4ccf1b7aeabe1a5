"""
FastAPI dependencies — DealStore singleton, deal query and period parsing.
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from fastapi import Depends, HTTPException, Query

from dealflow.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from dealflow.data.store import DealStore
from dealflow.data.schemas import DealQuery, DealType, PeriodFilter, PeriodType

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DealStore | None = None


def set_store(store: DealStore) -> None:
    global _store
    _store = store


def get_store() -> DealStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Deal data not loaded yet")
    return _store


def get_store_or_empty() -> DealStore:
    """Return the store even if nothing has been loaded into it (health checks)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Query param parsing
# ---------------------------------------------------------------------------

def _parse_date(value: Optional[str], name: str) -> dt.date | None:
    if not value:
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise HTTPException(400, f"Invalid {name}: {value} (expected YYYY-MM-DD)")


def parse_period(
    period_type: Optional[str] = Query(None, description="month|quarter|year|all"),
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    quarter: Optional[int] = Query(None, ge=1, le=4),
) -> PeriodFilter | None:
    """Parse calendar period query parameters into a PeriodFilter."""
    if period_type is None:
        return None

    try:
        pt = PeriodType(period_type)
    except ValueError:
        raise HTTPException(400, f"Invalid period_type: {period_type}")

    period = PeriodFilter(period_type=pt, year=year, month=month, quarter=quarter)
    missing = period.missing_fields()
    if missing:
        raise HTTPException(400, f"period_type={period_type} requires: {', '.join(missing)}")
    return period


def parse_as_of(
    as_of: Optional[str] = Query(None, description="Reference date YYYY-MM-DD (default today)"),
) -> dt.date | None:
    return _parse_date(as_of, "as_of")


def parse_deal_query(
    deal_type: Optional[str] = Query(None, alias="type",
                                     description="funding_round|acquisition|ipo|spac|contract_win"),
    search: Optional[str] = Query(None, description="Text in title, description or party names"),
    participant: Optional[str] = Query(None, description="Company name or slug"),
    min_amount: Optional[float] = Query(None, ge=0),
    max_amount: Optional[float] = Query(None, ge=0),
    date_from: Optional[str] = Query(None, description="YYYY-MM-DD"),
    date_to: Optional[str] = Query(None, description="YYYY-MM-DD"),
    period: PeriodFilter | None = Depends(parse_period),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> DealQuery:
    """Parse deal filter query parameters into a DealQuery.

    A calendar period narrows the date range; explicit date_from/date_to
    are intersected with it.
    """
    if deal_type:
        try:
            deal_type = DealType(deal_type)
        except ValueError:
            valid = ", ".join(t.value for t in DealType)
            raise HTTPException(400, f"Invalid type: {deal_type}. Valid: {valid}")

    query = DealQuery(
        type=deal_type or None,
        search=search,
        participant=participant,
        min_amount=min_amount,
        max_amount=max_amount,
        date_from=_parse_date(date_from, "date_from"),
        date_to=_parse_date(date_to, "date_to"),
        page=page,
        limit=limit,
    )
    return query.within(period)
