"""
Composable boolean predicates over the deal frame.

Each predicate takes the store's flat frame and returns a boolean Series aligned
to it. ``combine`` ANDs any number of masks; no mask means "everything".
"""
from __future__ import annotations

import datetime as dt
from typing import Iterable, Optional

import pandas as pd

from dealflow.data.normalize import normalize_query, slugify_company
from dealflow.data.schemas import DealQuery, DealType


def match_all(df: pd.DataFrame) -> pd.Series:
    return pd.Series(True, index=df.index, dtype=bool)


def _row_mask(df: pd.DataFrame, hits: list[bool]) -> pd.Series:
    return pd.Series(hits, index=df.index, dtype=bool)


def type_is(df: pd.DataFrame, deal_type: DealType) -> pd.Series:
    return df["type"] == DealType(deal_type).value


def text_matches(df: pd.DataFrame, query: str | None) -> pd.Series:
    """Case-insensitive substring match on title, description or any party name."""
    q = normalize_query(query)
    if not q:
        return match_all(df)
    hits = [
        q in title or q in desc or any(q in n for n in names)
        for title, desc, names in zip(df["title_lc"], df["description_lc"], df["party_names"])
    ]
    return _row_mask(df, hits)


def amount_between(
    df: pd.DataFrame,
    min_amount: Optional[float] = None,
    max_amount: Optional[float] = None,
) -> pd.Series:
    """Known amounts within [min_amount, max_amount]; unknown amounts never match."""
    mask = df["amount"].notna()
    if min_amount is not None:
        mask &= df["amount"] >= min_amount
    if max_amount is not None:
        mask &= df["amount"] <= max_amount
    return mask


def date_between(
    df: pd.DataFrame,
    date_from: Optional[dt.date] = None,
    date_to: Optional[dt.date] = None,
) -> pd.Series:
    """Inclusive calendar-date range; either bound may be open."""
    mask = match_all(df)
    if date_from is not None:
        mask &= df["date"] >= pd.Timestamp(date_from)
    if date_to is not None:
        mask &= df["date"] <= pd.Timestamp(date_to)
    return mask


def participant_matches(df: pd.DataFrame, query: str | None) -> pd.Series:
    """Substring-tolerant participant match on company name or canonical id."""
    q = normalize_query(query)
    if not q:
        return match_all(df)
    slug_q = slugify_company(q)
    hits = [
        any(q in name or slug_q in pid for name, pid in zip(names, pids))
        for names, pids in zip(df["party_names"], df["participant_ids"])
    ]
    return _row_mask(df, hits)


def participant_is(df: pd.DataFrame, canonical_id: str) -> pd.Series:
    """Exact canonical-id match on any party."""
    return _row_mask(df, [canonical_id in pids for pids in df["participant_ids"]])


def combine(df: pd.DataFrame, masks: Iterable[pd.Series]) -> pd.Series:
    """Logical AND of all masks."""
    result = match_all(df)
    for mask in masks:
        result &= mask
    return result


def query_masks(df: pd.DataFrame, query: DealQuery) -> list[pd.Series]:
    """Build one mask per supplied criterion."""
    masks: list[pd.Series] = []
    if query.type:
        masks.append(type_is(df, query.type))
    if query.search:
        masks.append(text_matches(df, query.search))
    if query.min_amount is not None or query.max_amount is not None:
        masks.append(amount_between(df, query.min_amount, query.max_amount))
    if query.date_from is not None or query.date_to is not None:
        masks.append(date_between(df, query.date_from, query.date_to))
    if query.participant:
        masks.append(participant_matches(df, query.participant))
    return masks
