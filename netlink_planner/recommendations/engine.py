from __future__ import annotations

import logging
import math
import time

from ..catalog.store import CatalogStore
from .explanation import (
    generate_advantages,
    generate_considerations,
    generate_reason,
    generate_summary,
)
from .filters import apply_constraints, filter_catalog
from .models import RecommendationRequest, RecommendationResponse, RecommendationResult
from .ranking import DEFAULT_RESULT_LIMIT, rank_candidates
from .scoring import ScoredCandidate, score_candidate
from .weights import WeightStrategy, priority_weights

logger = logging.getLogger(__name__)


class InvalidProfileError(ValueError):
    """Raised when a requirement profile cannot be scored."""


def _validate(request: RecommendationRequest) -> None:
    for name, value in (
        ("distance", request.distance),
        ("requiredBandwidth", request.required_bandwidth),
        ("budgetLimit", request.budget_limit),
    ):
        if not math.isfinite(value):
            raise InvalidProfileError(f"{name} must be a finite number")
    if request.distance <= 0:
        raise InvalidProfileError("distance must be greater than 0")
    if request.budget_limit <= 0:
        raise InvalidProfileError("budgetLimit must be greater than 0")


def _to_result(candidate: ScoredCandidate, request: RecommendationRequest) -> RecommendationResult:
    media = candidate.media
    return RecommendationResult(
        media=media,
        match_score=candidate.match_score,
        total_cost=candidate.total_cost,
        annual_maintenance_cost=candidate.annual_maintenance_cost,
        reason=generate_reason(media, request, candidate.raw_score),
        advantages=generate_advantages(media, request),
        considerations=generate_considerations(media, request),
    )


def recommend(
    request: RecommendationRequest,
    store: CatalogStore,
    weighting: WeightStrategy = priority_weights,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> RecommendationResponse:
    """
    Recommend transmission media for one requirement profile.

    Steps:
    - Fetch active media with enough bandwidth, reach and budget fit.
    - Filter by scenario, then by the optional constraints.
    - Score, rank, and keep the top ``limit`` candidates.
    - Attach reason, advantages and considerations, plus an overall summary.
    """
    _validate(request)
    start_time = time.time()

    # --- Catalog fetch (superset) ---
    fetched = store.find_by_capabilities(
        request.required_bandwidth,
        request.distance,
        request.budget_limit,
    )

    # --- Hard filters ---
    candidates = filter_catalog(fetched, request)
    candidates = apply_constraints(candidates, request)

    # --- Scoring ---
    weights = weighting(request.priorities)
    scored = [score_candidate(m, request, weights) for m in candidates]
    top = rank_candidates(scored, limit)

    response = RecommendationResponse(
        recommendations=[_to_result(c, request) for c in top],
        summary=generate_summary(request, top),
        request_params=request,
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.debug(
        "Recommendation for %s: fetched=%d candidates=%d returned=%d in %.1f ms",
        request.scenario.value,
        len(fetched),
        len(candidates),
        len(top),
        elapsed_ms,
    )
    return response
