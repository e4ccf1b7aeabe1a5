"""
Meta endpoints: health, deal types, amount range presets.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from dealflow.config import AMOUNT_RANGES, DEAL_TYPE_DESCRIPTIONS, DEAL_TYPE_LABELS, DEAL_TYPE_ORDER
from dealflow.data.store import DealStore
from dealflow.api.dependencies import get_store_or_empty
from dealflow.api.response_models import (
    AmountRange, AmountRangesResponse, DealTypeInfo, DealTypesResponse, HealthResponse,
)

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DealStore = Depends(get_store_or_empty)):
    return HealthResponse(
        status="ok" if store.is_loaded else "loading",
        deals=store.deal_count(),
        participants=len(store.participants()),
        years=store.years_available(),
        date_range=store.date_range(),
    )


@router.get("/deals/types", response_model=DealTypesResponse)
def list_deal_types():
    descriptions = dict(DEAL_TYPE_DESCRIPTIONS)
    return DealTypesResponse(types=[
        DealTypeInfo(value=t, label=DEAL_TYPE_LABELS[t], description=descriptions[DEAL_TYPE_LABELS[t]])
        for t in DEAL_TYPE_ORDER
    ])


@router.get("/deals/amount-ranges", response_model=AmountRangesResponse)
def list_amount_ranges():
    return AmountRangesResponse(ranges=[AmountRange(**r) for r in AMOUNT_RANGES])
