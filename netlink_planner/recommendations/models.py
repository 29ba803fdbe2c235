from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..catalog.models import ApplicationScenario, MediumRecord


class Priority(str, Enum):
    cost = "cost"
    performance = "performance"
    reliability = "reliability"
    ease_of_installation = "ease_of_installation"
    maintenance = "maintenance"


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    distance: float = Field(..., ge=0, description="Transmission distance (km)")
    required_bandwidth: float = Field(
        ..., ge=0, alias="requiredBandwidth", description="Required bandwidth (Mbps)"
    )
    budget_limit: float = Field(
        ..., ge=0, alias="budgetLimit", description="Budget ceiling per km"
    )
    scenario: ApplicationScenario
    priorities: list[Priority] = Field(..., min_length=1)
    reliability_minimum: float | None = Field(
        default=None, ge=1, le=10, alias="reliabilityRequirement"
    )
    latency_maximum: float | None = Field(
        default=None, ge=0, alias="latencyRequirement", description="End-to-end latency ceiling (ms)"
    )
    environmental_minimum: float | None = Field(
        default=None, ge=1, le=10, alias="environmentalConditions"
    )
    installation_difficulty_maximum: float | None = Field(
        default=None, ge=1, le=10, alias="installationDifficultyLimit"
    )


class RecommendationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    media: MediumRecord
    match_score: int = Field(..., alias="matchScore")
    total_cost: float = Field(..., alias="totalCost")
    annual_maintenance_cost: float = Field(..., alias="annualMaintenanceCost")
    reason: str
    advantages: list[str] = Field(default_factory=list)
    considerations: list[str] = Field(default_factory=list)


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recommendations: list[RecommendationResult]
    summary: str
    request_params: RecommendationRequest = Field(..., alias="requestParams")
