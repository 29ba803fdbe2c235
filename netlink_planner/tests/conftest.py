"""Shared fixtures: medium records and requirement profiles."""
from __future__ import annotations

from typing import Any, Callable

import pytest

from netlink_planner.catalog.models import MediumRecord
from netlink_planner.recommendations.models import RecommendationRequest

# Reference fiber link and request used across the suite.
FIBER_A: dict[str, Any] = {
    "id": 1,
    "name": "Single-mode fiber",
    "type": "fiber_optic",
    "max_distance": 100,
    "max_bandwidth": 10000,
    "cost_per_km": 5000,
    "attenuation": 0.2,
    "latency_per_km": 0.005,
    "reliability": 9,
    "installation_difficulty": 7,
    "maintenance_cost_per_km_year": 500,
    "environmental_adaptability": 8,
    "applicable_scenarios": ["wan"],
}

WAN_REQUEST: dict[str, Any] = {
    "distance": 50,
    "required_bandwidth": 1000,
    "budget_limit": 10000,
    "scenario": "wan",
    "priorities": ["cost", "performance"],
}


def _medium(**overrides: Any) -> MediumRecord:
    return MediumRecord(**{**FIBER_A, **overrides})


def _request(**overrides: Any) -> RecommendationRequest:
    return RecommendationRequest(**{**WAN_REQUEST, **overrides})


@pytest.fixture
def make_medium() -> Callable[..., MediumRecord]:
    return _medium


@pytest.fixture
def make_request() -> Callable[..., RecommendationRequest]:
    return _request


@pytest.fixture
def fiber_a() -> MediumRecord:
    return _medium()


@pytest.fixture
def wan_request() -> RecommendationRequest:
    return _request()
