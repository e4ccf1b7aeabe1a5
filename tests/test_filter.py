from __future__ import annotations

import datetime as dt

import pytest

from dealflow.data import predicates
from dealflow.data.schemas import DealQuery, DealType, PeriodFilter, PeriodType


def _ids(deals) -> list[str]:
    return [d.id for d in deals]


def _mask_ids(store, mask) -> list[str]:
    return sorted(store.df.loc[mask, "id"])


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def test_type_is(store):
    assert _mask_ids(store, predicates.type_is(store.df, DealType.ACQUISITION)) == ["d2"]


def test_amount_between_excludes_unknown(store):
    df = store.df
    assert _mask_ids(store, predicates.amount_between(df)) == ["d1", "d3", "d4"]
    assert _mask_ids(store, predicates.amount_between(df, 60, None)) == ["d1", "d4"]
    assert _mask_ids(store, predicates.amount_between(df, None, 100)) == ["d1", "d3"]
    assert _mask_ids(store, predicates.amount_between(df, 50, 100)) == ["d1", "d3"]


def test_date_between_is_inclusive(store):
    mask = predicates.date_between(store.df, dt.date(2021, 4, 5), dt.date(2022, 1, 20))
    assert _mask_ids(store, mask) == ["d2", "d3"]


def test_participant_matches_substring(store):
    df = store.df
    assert _mask_ids(store, predicates.participant_matches(df, "rocket")) == ["d1", "d3", "d4"]
    assert _mask_ids(store, predicates.participant_matches(df, "big-aero")) == ["d2"]
    assert _mask_ids(store, predicates.participant_matches(df, "Orbital Ven")) == ["d1", "d4"]
    assert _mask_ids(store, predicates.participant_matches(df, "")) == ["d1", "d2", "d3", "d4"]


def test_combine_ands_masks(store):
    df = store.df
    mask = predicates.combine(df, [
        predicates.type_is(df, "funding_round"),
        predicates.amount_between(df, 150, None),
    ])
    assert _mask_ids(store, mask) == ["d4"]
    assert predicates.combine(df, []).all()


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def test_filter_by_type(store):
    result = store.filter(DealQuery(type="funding_round"))
    assert _ids(result.records) == ["d4", "d1"]
    assert result.total == 2


def test_filter_min_amount(store):
    result = store.filter(DealQuery(min_amount=60))
    assert _ids(result.records) == ["d4", "d1"]
    assert result.total == 2
    # d2 has no disclosed amount
    assert "d2" not in _ids(store.filter(DealQuery(min_amount=0)).records)


def test_filter_zero_is_a_real_bound(store):
    result = store.filter(min_amount=0)
    assert _ids(result.records) == ["d4", "d3", "d1"]


def test_filter_kwargs_and_string_dates(store):
    result = store.filter(date_from="2021-04-05", date_to="2022-01-20")
    assert _ids(result.records) == ["d3", "d2"]


def test_filter_combines_criteria(store):
    result = store.filter(DealQuery(search="acme", participant="orbital", max_amount=150))
    assert _ids(result.records) == ["d1"]


def test_filter_empty_criteria_returns_everything(store):
    result = store.filter(DealQuery(type="", search="", participant=""))
    assert _ids(result.records) == ["d4", "d3", "d2", "d1"]
    assert result.total_pages == 1


def test_filter_no_matches(store):
    result = store.filter(DealQuery(type="ipo"))
    assert result.records == []
    assert result.total == 0
    assert result.total_pages == 1


def test_pages_concatenate_to_full_result(store):
    full = _ids(store.filter(DealQuery(limit=100)).records)
    first = store.filter(DealQuery(page=1, limit=3))
    assert first.total == 4
    assert first.total_pages == 2

    collected = []
    for page in range(1, first.total_pages + 1):
        collected.extend(_ids(store.filter(DealQuery(page=page, limit=3)).records))
    assert collected == full
    assert len(set(collected)) == len(collected)


@pytest.mark.parametrize("page", [0, -1, 3, 99])
def test_out_of_range_page_is_empty(store, page):
    result = store.filter(DealQuery(page=page, limit=2))
    assert result.records == []
    assert result.total == 4
    assert result.total_pages == 2


def test_every_record_satisfies_every_criterion(store):
    query = DealQuery(min_amount=10, date_from=dt.date(2021, 6, 1))
    result = store.filter(query)
    assert _ids(result.records) == ["d4", "d3"]
    for d in result.records:
        assert d.amount is not None and d.amount >= 10
        assert d.date >= dt.date(2021, 6, 1)


def test_page_to_dict(store):
    data = store.filter(DealQuery(type="acquisition")).to_dict()
    assert data["total"] == 1
    assert data["page"] == 1
    assert data["total_pages"] == 1
    assert data["deals"][0]["amount"] is None
    assert data["deals"][0]["date"] == "2021-04-05"


# ---------------------------------------------------------------------------
# Query validation
# ---------------------------------------------------------------------------

def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        DealQuery(limit=0)


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        DealQuery(type="merger")


def test_malformed_date_rejected():
    with pytest.raises(ValueError):
        DealQuery(date_from="2022-13-01")


def test_filter_rejects_query_and_keywords_together(store):
    with pytest.raises(TypeError):
        store.filter(DealQuery(type="ipo"), min_amount=60)


def test_query_within_period_intersects_dates(store):
    year_2022 = PeriodFilter(PeriodType.YEAR, 2022)
    query = DealQuery(date_from="2022-03-01").within(year_2022)
    assert query.date_from == dt.date(2022, 3, 1)
    assert query.date_to == dt.date(2022, 12, 31)
    assert [d.id for d in store.filter(query).records] == ["d4"]
    assert DealQuery().within(None) == DealQuery()
