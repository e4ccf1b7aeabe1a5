from __future__ import annotations

import datetime as dt
import json

import pytest

from dealflow.data.loader import load_deals, parse_deal, read_json_deals, validate_deals
from dealflow.data.normalize import canonical_participant_id, slugify_company
from dealflow.data.schemas import DealType, PartyRole
from dealflow.data.seed import SEED_DEALS
from dealflow.data.store import DealStore

from conftest import FIXTURE_DEALS


def _raw(**overrides) -> dict:
    raw = {
        "id": "x1",
        "type": "contract_win",
        "title": "Launch services award",
        "amount": 1_000_000,
        "date": "2023-09-01",
        "parties": [{"company": "Launch Co", "role": "recipient"}],
    }
    raw.update(overrides)
    return raw


def test_parse_deal_camel_case_keys():
    deal = parse_deal(FIXTURE_DEALS[2])
    assert deal.type is DealType.CONTRACT_WIN
    assert deal.date == dt.date(2022, 1, 20)
    assert deal.source_url == "https://example.com/lander"
    assert deal.parties[0].company_slug == "acme"
    assert deal.parties[1].role is PartyRole.AWARDER
    assert deal.verified is True


def test_parse_deal_snake_case_keys():
    deal = parse_deal(_raw(parties=[{"company": "Launch Co", "company_slug": "launchco", "role": "recipient"}],
                           source_url="https://example.com/a"))
    assert deal.parties[0].company_slug == "launchco"
    assert deal.source_url == "https://example.com/a"


def test_parse_deal_unknown_amount():
    deal = parse_deal(_raw(amount=None))
    assert deal.amount is None
    assert not deal.has_amount


@pytest.mark.parametrize("overrides", [
    {"type": "merger"},
    {"date": "2023-02-30"},
    {"parties": [{"company": "Launch Co", "role": "sponsor"}]},
    {"amount": "a lot"},
])
def test_parse_deal_malformed_names_record(overrides):
    with pytest.raises(ValueError, match="x1"):
        parse_deal(_raw(**overrides))


def test_parse_deal_missing_field():
    raw = _raw()
    del raw["title"]
    with pytest.raises(ValueError, match="Malformed"):
        parse_deal(raw)


def test_validate_rejects_negative_amount():
    with pytest.raises(ValueError, match="negative"):
        validate_deals([parse_deal(_raw(amount=-5))])


def test_validate_rejects_empty_parties():
    with pytest.raises(ValueError, match="no parties"):
        validate_deals([parse_deal(_raw(parties=[]))])


def test_validate_rejects_duplicate_ids():
    with pytest.raises(ValueError, match="Duplicate"):
        validate_deals([parse_deal(_raw()), parse_deal(_raw())])


def test_read_json_deals_accepts_list_or_wrapper(tmp_path):
    as_list = tmp_path / "list.json"
    as_list.write_text(json.dumps(FIXTURE_DEALS))
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"deals": FIXTURE_DEALS}))

    assert len(read_json_deals(as_list)) == 4
    assert len(read_json_deals(wrapped)) == 4


def test_load_deals_from_file(tmp_path):
    path = tmp_path / "deals.json"
    path.write_text(json.dumps(FIXTURE_DEALS))
    store = DealStore().load(path)
    assert store.deal_count() == 4
    assert [d.id for d in store.get_all()] == ["d4", "d3", "d2", "d1"]


# ---------------------------------------------------------------------------
# Seed table
# ---------------------------------------------------------------------------

def test_seed_table_loads_and_is_valid():
    deals = load_deals()
    assert len(deals) == len(SEED_DEALS) == 113
    assert len({d.id for d in deals}) == len(deals)
    assert all(d.parties for d in deals)
    assert all(d.amount is None or d.amount >= 0 for d in deals)


def test_seed_store_queries():
    store = DealStore().load()
    assert store.get_by_type("ipo") == []
    assert len(store.get_by_type("funding_round")) == 61
    spacex = store.get_by_participant("SpaceX")
    assert spacex
    assert all(any(canonical_participant_id(p) == "spacex" for p in d.parties) for d in spacex)
    dates = [d.date for d in store.get_all()]
    assert dates == sorted(dates, reverse=True)


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name, slug", [
    ("Rocket Lab", "rocket-lab"),
    ("  Blue   Origin ", "blue-origin"),
    ("Amazon (Project Kuiper)", "amazon-(project-kuiper)"),
    ("ULA", "ula"),
])
def test_slugify_company(name, slug):
    assert slugify_company(name) == slug
