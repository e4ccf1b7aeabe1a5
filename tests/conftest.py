from __future__ import annotations

import datetime as dt
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from dealflow.api.dependencies import get_store, get_store_or_empty
from dealflow.data.loader import parse_deal
from dealflow.data.store import DealStore
from dealflow.main import create_app


FIXTURE_DEALS = [
    {
        "id": "d1",
        "type": "funding_round",
        "title": "Acme Series A",
        "amount": 100,
        "date": "2021-01-10",
        "parties": [
            {"company": "Acme Rockets", "companySlug": "acme", "role": "recipient"},
            {"company": "Orbital Ventures", "role": "investor"},
        ],
        "stage": "Series A",
        "source": "Press release",
        "verified": True,
        "description": "Seed-stage launch startup raises its first institutional round.",
    },
    {
        "id": "d2",
        "type": "acquisition",
        "title": "Big Aero acquires Tiny Sat",
        "amount": None,
        "date": "2021-04-05",
        "parties": [
            {"company": "Big Aero", "companySlug": "big-aero-corp", "role": "acquirer"},
            {"company": "Tiny Sat Co", "role": "target"},
        ],
        "source": "Trade press",
        "description": "Terms were not disclosed.",
    },
    {
        "id": "d3",
        "type": "contract_win",
        "title": "Lunar lander contract",
        "amount": 50,
        "date": "2022-01-20",
        "parties": [
            {"company": "Acme Rockets", "companySlug": "acme", "role": "recipient"},
            {"company": "NASA", "role": "awarder"},
        ],
        "source": "NASA",
        "sourceUrl": "https://example.com/lander",
        "verified": True,
        "description": "Lander delivery task order.",
    },
    {
        "id": "d4",
        "type": "funding_round",
        "title": "Acme Series B",
        "amount": 200,
        "date": "2022-06-15",
        "parties": [
            {"company": "Acme Rockets", "companySlug": "acme", "role": "recipient"},
            {"company": "Orbital Ventures", "role": "investor"},
        ],
        "stage": "Series B",
        "source": "Press release",
        "description": "Growth round led by returning investors.",
    },
]

NOW = dt.date(2022, 6, 30)


@pytest.fixture()
def deals():
    return [parse_deal(r) for r in FIXTURE_DEALS]


@pytest.fixture()
def store(deals) -> DealStore:
    return DealStore(deals)


@pytest.fixture()
def now() -> dt.date:
    return NOW


@pytest.fixture()
def client(store) -> Generator[TestClient, None, None]:
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_store_or_empty] = lambda: store
    # No context manager: the startup hook (seed table load) is not run
    yield TestClient(app)
    app.dependency_overrides.clear()
