from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MediaType(str, Enum):
    fiber_optic = "fiber_optic"
    copper = "copper"
    wireless = "wireless"
    satellite = "satellite"
    coaxial = "coaxial"


class ApplicationScenario(str, Enum):
    lan = "lan"
    wan = "wan"
    datacenter = "datacenter"
    campus = "campus"
    metro = "metro"
    long_haul = "long_haul"


class MediumRecord(BaseModel):
    """One transmission technology as described by the catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str = Field(..., min_length=1, max_length=100)
    type: MediaType
    max_distance: float = Field(..., ge=0, alias="maxDistance", description="km")
    max_bandwidth: float = Field(..., ge=0, alias="maxBandwidth", description="Mbps")
    cost_per_km: float = Field(..., ge=0, alias="costPerKm")
    attenuation: float = Field(..., ge=0, description="dB/km")
    latency_per_km: float = Field(..., ge=0, alias="latency", description="ms/km")
    reliability: float = Field(..., ge=1, le=10)
    installation_difficulty: float = Field(..., ge=1, le=10, alias="installationDifficulty")
    maintenance_cost_per_km_year: float = Field(..., ge=0, alias="maintenanceCost")
    environmental_adaptability: float = Field(
        ..., ge=1, le=10, alias="environmentalAdaptability"
    )
    applicable_scenarios: tuple[ApplicationScenario, ...] = Field(
        ..., min_length=1, alias="applicationScenarios"
    )
    specifications: str | None = None
    advantages: str | None = None
    disadvantages: str | None = None
    is_active: bool = Field(default=True, alias="isActive")


class MediaQuery(BaseModel):
    """Optional predicates for browsing the catalog."""

    model_config = ConfigDict(populate_by_name=True)

    type: MediaType | None = None
    scenario: ApplicationScenario | None = None
    min_bandwidth: float | None = Field(default=None, ge=0, alias="minBandwidth")
    max_distance: float | None = Field(default=None, ge=0, alias="maxDistance")
    max_cost: float | None = Field(default=None, ge=0, alias="maxCost")
    is_active: bool | None = Field(default=None, alias="isActive")


class TypeCount(BaseModel):
    type: MediaType
    count: int


class CatalogStatistics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    active: int
    type_distribution: list[TypeCount] = Field(default_factory=list, alias="typeDistribution")
    average_cost: float = Field(default=0.0, alias="averageCost")
