"""
Deal statistics — totals, per-type breakdown, trailing quarters, per-year series,
month-to-date and year-to-date windows.

Unknown amounts count toward every count but add nothing to any volume, and the
average deal size divides by the number of deals with a known amount.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Optional

import pandas as pd

from dealflow.analytics.common import quarter_label, safe_divide, sanitize_for_json, trailing_quarters
from dealflow.config import DEAL_TYPE_ORDER, TRAILING_QUARTERS
from dealflow.data import predicates
from dealflow.data.schemas import DateLike, DealType, PeriodFilter, resolve_now
from dealflow.data.store import DealStore


@dataclass(frozen=True)
class TypeBucket:
    type: DealType
    count: int
    volume: float


@dataclass(frozen=True)
class QuarterBucket:
    quarter: str                         # "Q3 2024"
    count: int
    volume: float


@dataclass(frozen=True)
class YearBucket:
    year: int
    count: int
    volume: float


@dataclass(frozen=True)
class DealStats:
    total_deals: int
    total_volume: float
    avg_deal_size: float
    deals_this_month: int
    volume_this_month: float
    ytd_deal_count: int
    ytd_volume: float
    by_type: list[TypeBucket] = field(default_factory=list)
    by_quarter: list[QuarterBucket] = field(default_factory=list)
    by_year: list[YearBucket] = field(default_factory=list)
    as_of: Optional[str] = None

    def type_bucket(self, deal_type: DealType | str) -> TypeBucket:
        deal_type = DealType(deal_type)
        return next(b for b in self.by_type if b.type == deal_type)

    def to_dict(self) -> dict:
        data = asdict(self)
        for bucket in data["by_type"]:
            bucket["type"] = DealType(bucket["type"]).value
        return sanitize_for_json(data)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _count_volume(df: pd.DataFrame) -> tuple[int, float]:
    """Row count and sum of known amounts."""
    return int(len(df)), float(df["amount"].sum())


def _window(df: pd.DataFrame, period: PeriodFilter) -> tuple[int, float]:
    start, end = period.resolve()
    return _count_volume(df[predicates.date_between(df, start, end)])


def _grouped(df: pd.DataFrame, keys: list[str]) -> pd.DataFrame:
    return df.groupby(keys).agg(
        count=("id", "size"),
        volume=("amount", "sum"),
    )


def _by_type(df: pd.DataFrame) -> list[TypeBucket]:
    """One bucket per deal type in display order, zero-filled."""
    grouped = _grouped(df, ["type"]).reindex(DEAL_TYPE_ORDER, fill_value=0)
    return [
        TypeBucket(type=DealType(t), count=int(r["count"]), volume=float(r["volume"]))
        for t, r in grouped.iterrows()
    ]


def _by_quarter(df: pd.DataFrame, now) -> list[QuarterBucket]:
    """Trailing quarters ending at the quarter containing `now`, oldest first, zero-filled."""
    grouped = _grouped(df, ["year", "quarter"])
    rows = []
    for year, quarter in trailing_quarters(now, TRAILING_QUARTERS):
        if (year, quarter) in grouped.index:
            r = grouped.loc[(year, quarter)]
            count, volume = int(r["count"]), float(r["volume"])
        else:
            count, volume = 0, 0.0
        rows.append(QuarterBucket(quarter=quarter_label(year, quarter), count=count, volume=volume))
    return rows


def _by_year(df: pd.DataFrame) -> list[YearBucket]:
    """One bucket per calendar year present in the data, ascending."""
    grouped = _grouped(df, ["year"]).sort_index()
    return [
        YearBucket(year=int(y), count=int(r["count"]), volume=float(r["volume"]))
        for y, r in grouped.iterrows()
    ]


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------

def compute_stats(store: DealStore, now: Optional[DateLike] = None) -> DealStats:
    """Statistics snapshot over the full, unfiltered deal set as of `now` (default today)."""
    today = resolve_now(now)
    df = store.df

    total_deals, total_volume = _count_volume(df)
    known_amounts = int(df["amount"].notna().sum())

    deals_this_month, volume_this_month = _window(df, PeriodFilter.month_to_date(today))
    ytd_deal_count, ytd_volume = _window(df, PeriodFilter.year_to_date(today))

    return DealStats(
        total_deals=total_deals,
        total_volume=total_volume,
        avg_deal_size=safe_divide(total_volume, known_amounts),
        deals_this_month=deals_this_month,
        volume_this_month=volume_this_month,
        ytd_deal_count=ytd_deal_count,
        ytd_volume=ytd_volume,
        by_type=_by_type(df),
        by_quarter=_by_quarter(df, today),
        by_year=_by_year(df),
        as_of=today.isoformat(),
    )
