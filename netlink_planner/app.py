from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .catalog.models import (
    ApplicationScenario,
    CatalogStatistics,
    MediaQuery,
    MediaType,
    MediumRecord,
)
from .catalog.store import CatalogStore, DataFrameCatalogStore, MediumNotFoundError, get_catalog_store
from .config import DEFAULT_APP_CONFIG
from .recommendations.engine import InvalidProfileError, recommend
from .recommendations.models import RecommendationRequest, RecommendationResponse
from .recommendations.weights import get_weight_strategy

logger = logging.getLogger(__name__)

_config = DEFAULT_APP_CONFIG
_weighting = get_weight_strategy(_config.weighting)

app = FastAPI(
    title=_config.service_name,
    version=_config.version,
    description="Transmission medium selection for network link design",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_config.cors_origins),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


def catalog_store() -> DataFrameCatalogStore:
    return get_catalog_store(_config)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "service": _config.service_name, "version": _config.version}


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(
    body: RecommendationRequest,
    store: CatalogStore = Depends(catalog_store),
) -> RecommendationResponse:
    try:
        return recommend(body, store, weighting=_weighting, limit=_config.result_limit)
    except InvalidProfileError as exc:
        logger.warning("Rejected requirement profile: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


# ── Catalog endpoints (read-only) ────────────────────────────────────────


@app.get("/media", response_model=list[MediumRecord])
def list_media(
    type: MediaType | None = None,
    scenario: ApplicationScenario | None = None,
    min_bandwidth: float | None = Query(default=None, ge=0, alias="minBandwidth"),
    max_distance: float | None = Query(default=None, ge=0, alias="maxDistance"),
    max_cost: float | None = Query(default=None, ge=0, alias="maxCost"),
    is_active: bool | None = Query(default=None, alias="isActive"),
    store: DataFrameCatalogStore = Depends(catalog_store),
) -> list[MediumRecord]:
    query = MediaQuery(
        type=type,
        scenario=scenario,
        min_bandwidth=min_bandwidth,
        max_distance=max_distance,
        max_cost=max_cost,
        is_active=is_active,
    )
    return store.find_all(query)


@app.get("/media/statistics", response_model=CatalogStatistics)
def media_statistics(
    store: DataFrameCatalogStore = Depends(catalog_store),
) -> CatalogStatistics:
    return store.get_statistics()


@app.get("/media/{medium_id}", response_model=MediumRecord)
def get_medium(
    medium_id: int,
    store: DataFrameCatalogStore = Depends(catalog_store),
) -> MediumRecord:
    try:
        return store.find_one(medium_id)
    except MediumNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
