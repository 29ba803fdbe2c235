"""
Deterministic recommendation text.

Every sentence here is chosen by fixed thresholds on the medium record, the
request and the weighted score; nothing is random or model-generated, so the
same request always yields the same wording.  A record's own free-text
``advantages`` / ``disadvantages`` always lead their list.
"""
from __future__ import annotations

from typing import Sequence

from ..catalog.models import MediumRecord
from .models import RecommendationRequest
from .scoring import ScoredCandidate, round_half_away_from_zero

REASON_SEPARATOR = ", "

EXCELLENT_SCORE = 80
ACCEPTABLE_SCORE = 60

NO_MATCH_SUMMARY = (
    "No transmission medium fully matches the requested parameters. "
    "Consider relaxing the budget or performance requirements and try again."
)


def generate_reason(media: MediumRecord, request: RecommendationRequest, score: float) -> str:
    if score >= EXCELLENT_SCORE:
        clauses = [f"{media.name} performs excellently for this scenario"]
    elif score >= ACCEPTABLE_SCORE:
        clauses = [f"{media.name} basically meets requirements"]
    else:
        clauses = [f"{media.name} may require trade-offs"]

    if media.cost_per_km <= request.budget_limit * 0.7:
        clauses.append("cost-efficient")
    if media.max_bandwidth >= request.required_bandwidth * 2:
        clauses.append("ample bandwidth headroom")
    if media.reliability >= 8:
        clauses.append("excellent reliability")

    return REASON_SEPARATOR.join(clauses)


def generate_advantages(media: MediumRecord, request: RecommendationRequest) -> list[str]:
    advantages: list[str] = []
    if media.advantages:
        advantages.append(media.advantages)

    if media.max_bandwidth >= request.required_bandwidth * 1.5:
        advantages.append("superior bandwidth, future-proof")
    if media.reliability >= 9:
        advantages.append("very high reliability, suited to critical workloads")
    if media.installation_difficulty <= 5:
        advantages.append("simple installation, short deployment")
    if media.environmental_adaptability >= 8:
        advantages.append("strong environmental adaptability")

    return advantages


def generate_considerations(media: MediumRecord, request: RecommendationRequest) -> list[str]:
    considerations: list[str] = []
    if media.disadvantages:
        considerations.append(media.disadvantages)

    if media.installation_difficulty >= 8:
        considerations.append("requires skilled installers")
    if media.maintenance_cost_per_km_year > request.budget_limit * 0.05:
        considerations.append("relatively high maintenance cost")
    # End-to-end latency in ms
    if media.latency_per_km * request.distance > 5:
        considerations.append("latency may matter over long distances")
    if media.attenuation > 1:
        considerations.append("significant attenuation, may need repeaters")

    return considerations


def generate_summary(
    request: RecommendationRequest,
    ranked: Sequence[ScoredCandidate],
) -> str:
    if not ranked:
        return NO_MATCH_SUMMARY

    best = ranked[0]
    distance = round_half_away_from_zero(request.distance)
    bandwidth = round_half_away_from_zero(request.required_bandwidth)
    budget = round_half_away_from_zero(request.budget_limit)
    count = len(ranked)
    option_word = "option" if count == 1 else "options"

    return (
        f"For a {distance} km link needing {bandwidth} Mbps within a budget of "
        f"{budget} per km, we recommend {count} {option_word}. "
        f"The best match is {best.media.name} with a match score of {best.match_score}%, "
        f"an estimated total cost of {round_half_away_from_zero(best.total_cost)} "
        f"and annual maintenance of about {round_half_away_from_zero(best.annual_maintenance_cost)}."
    )
