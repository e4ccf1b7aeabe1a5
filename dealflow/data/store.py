"""
DealStore — In-memory deal query engine backed by pandas.

Loaded once at startup, queried on every request, never mutated afterwards.
Designed so swapping the seed table for a database later only changes load().
"""
from __future__ import annotations

import datetime as dt
import math
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from dealflow.data import predicates
from dealflow.data.loader import load_deals, validate_deals
from dealflow.data.normalize import (
    canonical_participant_id,
    slugify_company,
)
from dealflow.data.schemas import (
    DateLike,
    Deal,
    DealPage,
    DealQuery,
    DealType,
    resolve_now,
)

FRAME_COLUMNS = [
    "pos", "id", "type", "amount", "date", "year", "month", "quarter",
    "title_lc", "description_lc", "party_names", "participant_ids",
]


def _build_frame(deals: tuple[Deal, ...]) -> pd.DataFrame:
    """Flatten deals into one row each; row index == position in the deal tuple."""
    rows = [{
        "pos": i,
        "id": d.id,
        "type": d.type.value,
        "amount": d.amount,
        "date": d.date,
        "title_lc": d.title.lower(),
        "description_lc": d.description.lower(),
        "party_names": [p.company.lower() for p in d.parties],
        "participant_ids": [canonical_participant_id(p) for p in d.parties],
    } for i, d in enumerate(deals)]

    df = pd.DataFrame(rows, columns=[c for c in FRAME_COLUMNS if c not in ("year", "month", "quarter")])
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").astype("float64")
    df["date"] = pd.to_datetime(df["date"])
    df["year"] = df["date"].dt.year.astype("int64")
    df["month"] = df["date"].dt.month.astype("int64")
    df["quarter"] = (df["month"] + 2) // 3
    return df[FRAME_COLUMNS]


class DealStore:
    """Immutable deal snapshot with sorted, filtered accessors."""

    def __init__(self, deals: Optional[Iterable[Deal]] = None) -> None:
        self._deals: tuple[Deal, ...] = ()
        self._by_id: dict[str, Deal] = {}
        self._known_ids: set[str] = set()
        self._aliases: dict[str, str] = {}
        self.df: pd.DataFrame = _build_frame(())
        self._loaded = False
        if deals is not None:
            self._index(tuple(deals))

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, source: str | Path | None = None) -> "DealStore":
        """Load the seed table (or a JSON dataset) into the store."""
        print("Loading deal data...")
        self._index(tuple(load_deals(source)))
        print(f"  {self.deal_count():,} deals, {len(self.participants()):,} participants, "
              f"{self.date_range()}")
        return self

    def _index(self, deals: tuple[Deal, ...]) -> None:
        if self._loaded:
            raise RuntimeError("DealStore is a read-only snapshot; it can only be loaded once")
        validate_deals(deals)

        self._deals = deals
        self._by_id = {d.id: d for d in deals}
        self.df = _build_frame(deals)

        # Participant ids: explicit slugs win; name slugs of slugged parties alias to them
        for d in deals:
            for p in d.parties:
                self._known_ids.add(canonical_participant_id(p))
        for d in deals:
            for p in d.parties:
                name_slug = slugify_company(p.company)
                if p.company_slug and name_slug not in self._known_ids:
                    self._aliases.setdefault(name_slug, p.company_slug)

        self._loaded = True

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _sorted(self, mask: pd.Series | None = None) -> list[Deal]:
        """Rows under mask, date descending, ties in original order."""
        df = self.df if mask is None else self.df[mask]
        df = df.sort_values(["date", "pos"], ascending=[False, True], kind="mergesort")
        return [self._deals[i] for i in df["pos"]]

    # ------------------------------------------------------------------
    # Record accessors
    # ------------------------------------------------------------------

    def get_all(self) -> list[Deal]:
        """All deals, most recent first."""
        return self._sorted()

    def get_by_type(self, deal_type: DealType | str) -> list[Deal]:
        return self._sorted(predicates.type_is(self.df, deal_type))

    def get_by_id(self, deal_id: str) -> Deal | None:
        return self._by_id.get(deal_id)

    def resolve_participant(self, name: str) -> str:
        """Map a slug or company name to the canonical participant id.

        Known ids resolve to themselves; otherwise the naive slug of the name is
        used, redirected to the explicit slug of a party with that name.
        """
        if name in self._known_ids:
            return name
        slug = slugify_company(name)
        if slug in self._known_ids:
            return slug
        return self._aliases.get(slug, slug)

    def get_by_participant(self, identifier: str) -> list[Deal]:
        """Deals where any party resolves to the identifier's canonical id."""
        canonical = self.resolve_participant(identifier)
        return self._sorted(predicates.participant_is(self.df, canonical))

    def get_recent(self, days: int, now: Optional[DateLike] = None) -> list[Deal]:
        """Deals dated within the last `days` days up to and including `now`."""
        today = resolve_now(now)
        start = today - dt.timedelta(days=days)
        return self._sorted(predicates.date_between(self.df, start, today))

    def search(self, query: str | None) -> list[Deal]:
        """Substring search across title, description and party names."""
        return self._sorted(predicates.text_matches(self.df, query))

    # ------------------------------------------------------------------
    # Filter pipeline
    # ------------------------------------------------------------------

    def filter(self, query: DealQuery | None = None, **criteria) -> DealPage:
        """AND all supplied criteria, sort date descending, then paginate.

        Pass either a DealQuery or its fields as keywords, not both.
        """
        if query is None:
            query = DealQuery(**criteria)
        elif criteria:
            raise TypeError(f"filter() takes a DealQuery or keyword criteria, not both: {sorted(criteria)}")

        mask = predicates.combine(self.df, predicates.query_masks(self.df, query))
        matched = self._sorted(mask)

        total = len(matched)
        total_pages = max(1, math.ceil(total / query.limit))
        if query.page < 1:
            page_records: list[Deal] = []
        else:
            page_records = matched[query.offset:query.offset + query.limit]

        return DealPage(
            records=page_records,
            total=total,
            page=query.page,
            total_pages=total_pages,
            limit=query.limit,
        )

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    @property
    def deals(self) -> tuple[Deal, ...]:
        """The raw snapshot in insertion order."""
        return self._deals

    def deal_count(self) -> int:
        return len(self._deals)

    def participants(self) -> list[str]:
        """Sorted canonical participant ids."""
        return sorted(self._known_ids)

    def years_available(self) -> list[int]:
        if self.df.empty:
            return []
        return sorted(int(y) for y in self.df["year"].unique())

    def date_range(self) -> str:
        """Human-readable date range string."""
        if self.df.empty:
            return "N/A"
        return f"{self.df['date'].min():%Y-%m-%d} to {self.df['date'].max():%Y-%m-%d}"
