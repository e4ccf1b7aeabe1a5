"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    deals: int
    participants: int
    years: list[int]
    date_range: str


class DealTypeInfo(BaseModel):
    value: str
    label: str
    description: str


class DealTypesResponse(BaseModel):
    types: list[DealTypeInfo]


class AmountRange(BaseModel):
    label: str
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None


class AmountRangesResponse(BaseModel):
    ranges: list[AmountRange]


class PartyResponse(BaseModel):
    company: str
    company_slug: Optional[str] = None
    role: str


class DealResponse(BaseModel):
    id: str
    type: str
    title: str
    amount: Optional[float] = None   # null = undisclosed
    date: str
    parties: list[PartyResponse]
    stage: Optional[str] = None
    source: str = ""
    source_url: Optional[str] = None
    verified: bool = False
    description: str = ""
