"""
Deal records, query criteria, and period filter schemas.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from dealflow.config import DEFAULT_PAGE_SIZE

DateLike = Union[dt.date, dt.datetime, str]


class DealType(str, Enum):
    FUNDING_ROUND = "funding_round"
    ACQUISITION = "acquisition"
    IPO = "ipo"
    SPAC = "spac"
    CONTRACT_WIN = "contract_win"


class PartyRole(str, Enum):
    TARGET = "target"
    ACQUIRER = "acquirer"
    RECIPIENT = "recipient"
    INVESTOR = "investor"
    AWARDER = "awarder"


def as_date(value: DateLike) -> dt.date:
    """Coerce a date, datetime or ISO string (YYYY-MM-DD) to a date."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value).strip()[:10])


def resolve_now(now: Optional[DateLike] = None) -> dt.date:
    """Reference date for windowed queries; defaults to today."""
    if now is None:
        return dt.date.today()
    return as_date(now)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DealParty:
    company: str
    role: PartyRole
    company_slug: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "company": self.company,
            "company_slug": self.company_slug,
            "role": self.role.value,
        }


@dataclass(frozen=True)
class Deal:
    """One discrete business event: a funding round, acquisition, listing or contract award."""
    id: str
    type: DealType
    title: str
    amount: Optional[float]              # None = not publicly disclosed
    date: dt.date
    parties: tuple[DealParty, ...]
    source: str = ""
    description: str = ""
    verified: bool = False
    stage: Optional[str] = None          # Seed, Series A, SPAC Merger, ...
    source_url: Optional[str] = None

    @property
    def has_amount(self) -> bool:
        return self.amount is not None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "amount": self.amount,
            "date": self.date.isoformat(),
            "parties": [p.to_dict() for p in self.parties],
            "stage": self.stage,
            "source": self.source,
            "source_url": self.source_url,
            "verified": self.verified,
            "description": self.description,
        }


# ---------------------------------------------------------------------------
# Query criteria + paged result
# ---------------------------------------------------------------------------

@dataclass
class DealQuery:
    """Filter criteria for the deal pipeline. Every criterion is optional; all are ANDed."""
    type: Optional[DealType] = None
    search: Optional[str] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
    participant: Optional[str] = None
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.type == "":
            self.type = None
        elif self.type is not None and not isinstance(self.type, DealType):
            self.type = DealType(self.type)
        if self.date_from is not None:
            self.date_from = as_date(self.date_from)
        if self.date_to is not None:
            self.date_to = as_date(self.date_to)
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def within(self, period: PeriodFilter | None) -> DealQuery:
        """Copy narrowed to a calendar period; explicit dates are intersected with it."""
        if period is None:
            return self
        start, end = period.resolve()
        date_from, date_to = self.date_from, self.date_to
        if start is not None:
            date_from = start if date_from is None else max(date_from, start)
        if end is not None:
            date_to = end if date_to is None else min(date_to, end)
        return replace(self, date_from=date_from, date_to=date_to)


@dataclass
class DealPage:
    records: list[Deal] = field(default_factory=list)
    total: int = 0
    page: int = 1
    total_pages: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def to_dict(self) -> dict:
        return {
            "deals": [d.to_dict() for d in self.records],
            "total": self.total,
            "page": self.page,
            "total_pages": self.total_pages,
            "limit": self.limit,
        }


# ---------------------------------------------------------------------------
# Periods
# ---------------------------------------------------------------------------

class PeriodType(str, Enum):
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    CUSTOM = "custom"
    ALL = "all"


@dataclass(frozen=True)
class PeriodFilter:
    """A calendar month, quarter or year, or explicit custom bounds."""
    period_type: PeriodType = PeriodType.ALL
    year: Optional[int] = None
    month: Optional[int] = None          # 1-12
    quarter: Optional[int] = None        # 1-4
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    def missing_fields(self) -> list[str]:
        """Fields a calendar period still needs before it can resolve."""
        needed = {
            PeriodType.YEAR: ["year"],
            PeriodType.QUARTER: ["year", "quarter"],
            PeriodType.MONTH: ["year", "month"],
        }.get(self.period_type, [])
        return [name for name in needed if getattr(self, name) is None]

    def _months(self) -> tuple[int, int] | None:
        """(first month, last month) of a calendar period, None when underspecified."""
        if self.year is None:
            return None
        if self.period_type == PeriodType.YEAR:
            return 1, 12
        if self.period_type == PeriodType.QUARTER and self.quarter is not None:
            first = (self.quarter - 1) * 3 + 1
            return first, first + 2
        if self.period_type == PeriodType.MONTH and self.month is not None:
            return self.month, self.month
        return None

    def resolve(self) -> tuple[Optional[dt.date], Optional[dt.date]]:
        """Inclusive (start, end); open bounds are None."""
        if self.period_type == PeriodType.CUSTOM:
            return self.start_date, self.end_date
        months = self._months()
        if months is None:
            return None, None
        first, last = months
        return dt.date(self.year, first, 1), _month_end(self.year, last)

    @property
    def label(self) -> str:
        if self.period_type == PeriodType.ALL:
            return "All Time"
        start, end = self.resolve()
        if self.period_type == PeriodType.CUSTOM:
            return f"{start or '?'} to {end or '?'}"
        if start is None:
            return "Unknown"
        if self.period_type == PeriodType.MONTH:
            return f"{start:%B %Y}"
        if self.period_type == PeriodType.QUARTER:
            return f"Q{self.quarter} {self.year}"
        return str(self.year)

    @classmethod
    def month_to_date(cls, now: dt.date) -> "PeriodFilter":
        return cls(PeriodType.CUSTOM, start_date=now.replace(day=1), end_date=now)

    @classmethod
    def year_to_date(cls, now: dt.date) -> "PeriodFilter":
        return cls(PeriodType.CUSTOM, start_date=dt.date(now.year, 1, 1), end_date=now)


def _month_end(year: int, month: int) -> dt.date:
    if month == 12:
        return dt.date(year, 12, 31)
    return dt.date(year, month + 1, 1) - dt.timedelta(days=1)
