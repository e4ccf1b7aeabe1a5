from __future__ import annotations

import datetime as dt

import pytest

from dealflow.analytics.common import format_amount, quarter_of, trailing_quarters
from dealflow.analytics.stats import compute_stats
from dealflow.data.schemas import DealType, PeriodFilter, PeriodType
from dealflow.data.store import DealStore


def test_totals_and_average(store, now):
    stats = compute_stats(store, now)
    assert stats.total_deals == 4
    assert stats.total_volume == 350
    # Undisclosed amounts are left out of the denominator
    assert stats.avg_deal_size == pytest.approx(350 / 3)


def test_by_type_breakdown(store, now):
    stats = compute_stats(store, now)
    assert [b.type for b in stats.by_type] == [
        DealType.FUNDING_ROUND, DealType.ACQUISITION, DealType.CONTRACT_WIN, DealType.IPO, DealType.SPAC,
    ]
    funding = stats.type_bucket("funding_round")
    assert (funding.count, funding.volume) == (2, 300)
    acquisition = stats.type_bucket(DealType.ACQUISITION)
    assert (acquisition.count, acquisition.volume) == (1, 0)
    ipo = stats.type_bucket(DealType.IPO)
    assert (ipo.count, ipo.volume) == (0, 0)


def test_by_type_sums_match_totals(store, now):
    stats = compute_stats(store, now)
    assert sum(b.count for b in stats.by_type) == stats.total_deals
    assert sum(b.volume for b in stats.by_type) == stats.total_volume


def test_trailing_quarters_window(store, now):
    stats = compute_stats(store, now)
    labels = [q.quarter for q in stats.by_quarter]
    assert len(labels) == 12
    assert labels[0] == "Q3 2019"
    assert labels[-1] == "Q2 2022"
    assert len(set(labels)) == 12

    by_label = {q.quarter: (q.count, q.volume) for q in stats.by_quarter}
    assert by_label["Q1 2021"] == (1, 100)
    assert by_label["Q2 2021"] == (1, 0)
    assert by_label["Q1 2022"] == (1, 50)
    assert by_label["Q2 2022"] == (1, 200)
    assert by_label["Q4 2021"] == (0, 0)


def test_trailing_quarters_zero_filled_far_from_data(store):
    stats = compute_stats(store, dt.date(2030, 2, 1))
    assert len(stats.by_quarter) == 12
    assert stats.by_quarter[-1].quarter == "Q1 2030"
    assert all(q.count == 0 and q.volume == 0 for q in stats.by_quarter)


def test_by_year_uses_full_dataset(store, now):
    stats = compute_stats(store, now)
    assert [(y.year, y.count, y.volume) for y in stats.by_year] == [(2021, 2, 100), (2022, 2, 250)]


def test_month_and_ytd_windows(store, now):
    stats = compute_stats(store, now)
    assert (stats.deals_this_month, stats.volume_this_month) == (1, 200)
    assert (stats.ytd_deal_count, stats.ytd_volume) == (2, 250)


def test_windows_stop_at_now(store):
    # d4 (2022-06-15) is after the reference date
    stats = compute_stats(store, dt.date(2022, 6, 10))
    assert (stats.deals_this_month, stats.volume_this_month) == (0, 0)
    assert (stats.ytd_deal_count, stats.ytd_volume) == (1, 50)
    assert stats.total_deals == 4


def test_now_accepts_datetime(store):
    stats = compute_stats(store, dt.datetime(2022, 6, 30, 23, 59))
    assert stats.as_of == "2022-06-30"


def test_empty_store():
    stats = compute_stats(DealStore([]), dt.date(2024, 3, 1))
    assert stats.total_deals == 0
    assert stats.total_volume == 0
    assert stats.avg_deal_size == 0
    assert len(stats.by_type) == 5
    assert len(stats.by_quarter) == 12
    assert stats.by_year == []


def test_to_dict_is_json_safe(store, now):
    data = compute_stats(store, now).to_dict()
    assert data["by_type"][0] == {"type": "funding_round", "count": 2, "volume": 300.0}
    assert data["by_quarter"][-1] == {"quarter": "Q2 2022", "count": 1, "volume": 200.0}
    assert data["as_of"] == "2022-06-30"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("month, quarter", [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (10, 4), (12, 4)])
def test_quarter_of(month, quarter):
    assert quarter_of(month) == quarter


def test_trailing_quarters_crosses_years():
    assert trailing_quarters(dt.date(2024, 2, 15), 3) == [(2023, 3), (2023, 4), (2024, 1)]


@pytest.mark.parametrize("value, text", [
    (None, "Undisclosed"),
    (500, "$500"),
    (12_000, "$12K"),
    (750_000_000, "$750M"),
    (1_300_000_000, "$1.3B"),
    (2_000_000_000_000, "$2.0T"),
])
def test_format_amount(value, text):
    assert format_amount(value) == text


def test_period_filter_resolve_and_label():
    q1 = PeriodFilter(PeriodType.QUARTER, 2024, quarter=1)
    assert q1.resolve() == (dt.date(2024, 1, 1), dt.date(2024, 3, 31))
    assert q1.label == "Q1 2024"

    feb = PeriodFilter(PeriodType.MONTH, 2024, 2)
    assert feb.resolve() == (dt.date(2024, 2, 1), dt.date(2024, 2, 29))
    assert feb.label == "February 2024"

    dec = PeriodFilter(PeriodType.MONTH, 2023, 12)
    assert dec.resolve() == (dt.date(2023, 12, 1), dt.date(2023, 12, 31))

    assert PeriodFilter(PeriodType.YEAR, 2021).label == "2021"
    assert PeriodFilter(PeriodType.QUARTER, 2021).resolve() == (None, None)
    assert PeriodFilter(PeriodType.QUARTER, 2021).missing_fields() == ["quarter"]
    assert PeriodFilter(PeriodType.MONTH).missing_fields() == ["year", "month"]
    assert PeriodFilter().missing_fields() == []

    ytd = PeriodFilter.year_to_date(dt.date(2024, 5, 9))
    assert ytd.resolve() == (dt.date(2024, 1, 1), dt.date(2024, 5, 9))
    assert PeriodFilter().resolve() == (None, None)
