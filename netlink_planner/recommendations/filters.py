from __future__ import annotations

from typing import Iterable

from ..catalog.models import MediumRecord
from .models import RecommendationRequest


def matches_capabilities(media: MediumRecord, request: RecommendationRequest) -> bool:
    return (
        media.is_active
        and media.max_bandwidth >= request.required_bandwidth
        and media.max_distance >= request.distance
        and media.cost_per_km <= request.budget_limit
        and request.scenario in media.applicable_scenarios
    )


def filter_catalog(
    catalog: Iterable[MediumRecord],
    request: RecommendationRequest,
) -> list[MediumRecord]:
    """Keep media meeting the hard capability and scenario requirements, in catalog order."""
    return [m for m in catalog if matches_capabilities(m, request)]


def satisfies_constraints(media: MediumRecord, request: RecommendationRequest) -> bool:
    if (
        request.reliability_minimum is not None
        and media.reliability < request.reliability_minimum
    ):
        return False

    if request.latency_maximum is not None:
        total_latency = media.latency_per_km * request.distance
        if total_latency > request.latency_maximum:
            return False

    if (
        request.environmental_minimum is not None
        and media.environmental_adaptability < request.environmental_minimum
    ):
        return False

    if (
        request.installation_difficulty_maximum is not None
        and media.installation_difficulty > request.installation_difficulty_maximum
    ):
        return False

    return True


def apply_constraints(
    candidates: Iterable[MediumRecord],
    request: RecommendationRequest,
) -> list[MediumRecord]:
    """Drop candidates failing any optional constraint present on the request."""
    return [m for m in candidates if satisfies_constraints(m, request)]
