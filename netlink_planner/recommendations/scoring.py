from __future__ import annotations

import math
from dataclasses import dataclass

from ..catalog.models import MediumRecord
from .models import RecommendationRequest
from .weights import Criterion, CriterionWeights

BANDWIDTH_POINTS = 50.0
DISTANCE_POINTS = 30.0
LATENCY_POINTS = 20.0
MAINTENANCE_BUDGET_SHARE = 0.1


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (92.5 -> 93, -0.5 -> -1)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact in binary floating point
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def cost_score(cost_per_km: float, budget_limit: float) -> float:
    if cost_per_km > budget_limit:
        return 0.0
    return (budget_limit - cost_per_km) / budget_limit * 100


def performance_score(media: MediumRecord, request: RecommendationRequest) -> float:
    """Bandwidth (<= 50) + distance (<= 30) + latency (<= 20) headroom points."""
    if request.required_bandwidth > 0:
        bandwidth = min(media.max_bandwidth / request.required_bandwidth * BANDWIDTH_POINTS, BANDWIDTH_POINTS)
    else:
        bandwidth = BANDWIDTH_POINTS
    distance = min(media.max_distance / request.distance * DISTANCE_POINTS, DISTANCE_POINTS)
    latency = max(LATENCY_POINTS - media.latency_per_km * request.distance, 0.0)
    return bandwidth + distance + latency


def reliability_score(reliability: float) -> float:
    return reliability * 10


def installation_score(installation_difficulty: float) -> float:
    return (11 - installation_difficulty) * 10


def maintenance_score(maintenance_cost: float, budget_limit: float) -> float:
    max_acceptable = budget_limit * MAINTENANCE_BUDGET_SHARE
    if maintenance_cost > max_acceptable:
        return 0.0
    return (max_acceptable - maintenance_cost) / max_acceptable * 100


@dataclass(frozen=True)
class SubScores:
    cost: float
    performance: float
    reliability: float
    installation: float
    maintenance: float

    def __getitem__(self, criterion: Criterion) -> float:
        return getattr(self, criterion.value)

    def weighted_sum(self, weights: CriterionWeights) -> float:
        return sum(self[c] * weights[c] for c in Criterion)


def compute_sub_scores(media: MediumRecord, request: RecommendationRequest) -> SubScores:
    return SubScores(
        cost=cost_score(media.cost_per_km, request.budget_limit),
        performance=performance_score(media, request),
        reliability=reliability_score(media.reliability),
        installation=installation_score(media.installation_difficulty),
        maintenance=maintenance_score(media.maintenance_cost_per_km_year, request.budget_limit),
    )


@dataclass(frozen=True)
class ScoredCandidate:
    media: MediumRecord
    sub_scores: SubScores
    raw_score: float
    match_score: int
    total_cost: float
    annual_maintenance_cost: float


def score_candidate(
    media: MediumRecord,
    request: RecommendationRequest,
    weights: CriterionWeights,
) -> ScoredCandidate:
    sub_scores = compute_sub_scores(media, request)
    raw_score = sub_scores.weighted_sum(weights)
    return ScoredCandidate(
        media=media,
        sub_scores=sub_scores,
        raw_score=raw_score,
        match_score=round_half_away_from_zero(raw_score),
        total_cost=media.cost_per_km * request.distance,
        annual_maintenance_cost=media.maintenance_cost_per_km_year * request.distance,
    )
