"""
Deal Flow — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealflow import __version__
from dealflow.config import CORS_ORIGINS
from dealflow.data.store import DealStore
from dealflow.api.dependencies import set_store
from dealflow.api.router_meta import router as meta_router
from dealflow.api.router_deals import router as deals_router
from dealflow.api.router_reports import router as reports_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the deal snapshot once at startup."""
    from dealflow.config import DEALS_FILE, REPORTS_FOLDER
    REPORTS_FOLDER.mkdir(parents=True, exist_ok=True)

    # Diagnostic: show exactly where data lives
    print(f"  DEALFLOW_DATA_DIR = {os.environ.get('DEALFLOW_DATA_DIR', '(not set)')}")
    print(f"  DEALS_FILE = {DEALS_FILE or '(built-in seed table)'}")
    print(f"  REPORTS_FOLDER = {REPORTS_FOLDER}")

    store = DealStore().load()
    set_store(store)

    print(f"\nDeal Flow ready — {store.deal_count():,} deals, "
          f"{len(store.participants()):,} participants\n")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Deal Flow API",
        description="Funding rounds, acquisitions, contract wins and listings — filtered, paged and aggregated",
        version=__version__,
        lifespan=lifespan,
    )

    # Read-only API: GET from the configured origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # meta first: /api/deals/types and /api/deals/amount-ranges must win over /api/deals/{deal_id}
    app.include_router(meta_router)
    app.include_router(deals_router)
    app.include_router(reports_router)

    return app


app = create_app()
