from __future__ import annotations

import datetime as dt

import pytest

from dealflow.data.loader import parse_deal
from dealflow.data.schemas import DealType
from dealflow.data.store import DealStore


def _ids(deals) -> list[str]:
    return [d.id for d in deals]


def test_get_all_sorted_date_descending(store):
    assert _ids(store.get_all()) == ["d4", "d3", "d2", "d1"]


def test_get_all_returns_new_list(store):
    first = store.get_all()
    first.clear()
    assert len(store.get_all()) == 4


def test_tied_dates_keep_insertion_order():
    raw = [
        {"id": f"t{i}", "type": "ipo", "title": f"Listing {i}", "amount": 10, "date": "2023-05-01",
         "parties": [{"company": f"Co {i}", "role": "recipient"}]}
        for i in range(5)
    ]
    raw.append({"id": "later", "type": "spac", "title": "Later", "amount": None, "date": "2023-06-01",
                "parties": [{"company": "Later Co", "role": "recipient"}]})
    s = DealStore([parse_deal(r) for r in raw])
    assert _ids(s.get_all()) == ["later", "t0", "t1", "t2", "t3", "t4"]


def test_get_by_type(store):
    assert _ids(store.get_by_type(DealType.FUNDING_ROUND)) == ["d4", "d1"]
    assert _ids(store.get_by_type("contract_win")) == ["d3"]
    assert store.get_by_type("ipo") == []


def test_get_by_id(store):
    assert store.get_by_id("d2").title == "Big Aero acquires Tiny Sat"
    assert store.get_by_id("missing") is None


# ---------------------------------------------------------------------------
# Participants
# ---------------------------------------------------------------------------

def test_participants_are_canonical_ids(store):
    assert store.participants() == ["acme", "big-aero-corp", "nasa", "orbital-ventures", "tiny-sat-co"]


@pytest.mark.parametrize("identifier, expected", [
    ("acme", "acme"),
    ("Acme Rockets", "acme"),
    ("acme rockets", "acme"),
    ("Orbital Ventures", "orbital-ventures"),
    ("orbital-ventures", "orbital-ventures"),
    ("Big Aero", "big-aero-corp"),
    ("NASA", "nasa"),
    ("Unknown Space Inc", "unknown-space-inc"),
])
def test_resolve_participant(store, identifier, expected):
    assert store.resolve_participant(identifier) == expected


def test_get_by_participant_by_slug_and_name(store):
    assert _ids(store.get_by_participant("acme")) == ["d4", "d3", "d1"]
    assert _ids(store.get_by_participant("Acme Rockets")) == ["d4", "d3", "d1"]
    assert _ids(store.get_by_participant("Orbital Ventures")) == ["d4", "d1"]
    assert _ids(store.get_by_participant("Tiny Sat Co")) == ["d2"]
    assert _ids(store.get_by_participant("Big Aero")) == ["d2"]


def test_get_by_participant_unknown_is_empty(store):
    assert store.get_by_participant("nobody") == []


def test_naive_slug_keeps_punctuation():
    raw = {"id": "k", "type": "acquisition", "title": "Kuiper", "amount": None, "date": "2020-01-01",
           "parties": [{"company": "Amazon (Project Kuiper)", "role": "acquirer"}]}
    s = DealStore([parse_deal(raw)])
    assert s.participants() == ["amazon-(project-kuiper)"]
    assert _ids(s.get_by_participant("Amazon (Project Kuiper)")) == ["k"]
    assert s.get_by_participant("amazon-project-kuiper") == []


# ---------------------------------------------------------------------------
# Recency + search
# ---------------------------------------------------------------------------

def test_get_recent(store, now):
    assert _ids(store.get_recent(90, now)) == ["d4"]
    assert _ids(store.get_recent(200, now)) == ["d4", "d3"]
    assert store.get_recent(5, now) == []


def test_get_recent_excludes_future_dates(store):
    assert _ids(store.get_recent(30, dt.date(2022, 1, 31))) == ["d3"]


def test_get_recent_accepts_datetime_and_string(store):
    assert _ids(store.get_recent(90, dt.datetime(2022, 6, 30, 18, 45))) == ["d4"]
    assert _ids(store.get_recent(90, "2022-06-30")) == ["d4"]


def test_search_fields(store):
    assert _ids(store.search("series")) == ["d4", "d1"]
    assert _ids(store.search("DISCLOSED")) == ["d2"]
    assert _ids(store.search("nasa")) == ["d3"]
    assert _ids(store.search("acme")) == ["d4", "d3", "d1"]


@pytest.mark.parametrize("query", [None, "", "   "])
def test_blank_search_matches_everything(store, query):
    assert _ids(store.search(query)) == ["d4", "d3", "d2", "d1"]


def test_search_no_match(store):
    assert store.search("zeppelin") == []


# ---------------------------------------------------------------------------
# Loading + metadata
# ---------------------------------------------------------------------------

def test_store_is_loaded_once(store):
    assert store.is_loaded
    with pytest.raises(RuntimeError):
        store.load()


def test_unloaded_store():
    s = DealStore()
    assert not s.is_loaded
    assert s.get_all() == []
    assert s.deal_count() == 0
    assert s.date_range() == "N/A"
    assert s.years_available() == []


def test_store_rejects_duplicate_ids(deals):
    with pytest.raises(ValueError, match="Duplicate"):
        DealStore(deals + [deals[0]])


def test_metadata(store):
    assert store.deal_count() == 4
    assert store.years_available() == [2021, 2022]
    assert store.date_range() == "2021-01-10 to 2022-06-15"
    assert [d.id for d in store.deals] == ["d1", "d2", "d3", "d4"]
