"""
Priority weighting.

Each of the five scoring criteria gets ``1 / n`` when it is among the ``n``
declared priorities and ``DEFAULT_WEIGHT`` otherwise, so the vector sums to
``1 + 0.1 * (5 - n)``.  ``normalized_priority_weights`` rescales the same
vector to sum to 1; the engine accepts either through the ``WeightStrategy``
callable type.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from .models import Priority

DEFAULT_WEIGHT = 0.1


class Criterion(str, Enum):
    cost = "cost"
    performance = "performance"
    reliability = "reliability"
    installation = "installation"
    maintenance = "maintenance"


PRIORITY_CRITERION: dict[Priority, Criterion] = {
    Priority.cost: Criterion.cost,
    Priority.performance: Criterion.performance,
    Priority.reliability: Criterion.reliability,
    Priority.ease_of_installation: Criterion.installation,
    Priority.maintenance: Criterion.maintenance,
}


@dataclass(frozen=True)
class CriterionWeights:
    cost: float
    performance: float
    reliability: float
    installation: float
    maintenance: float

    def __getitem__(self, criterion: Criterion) -> float:
        return getattr(self, criterion.value)

    def total(self) -> float:
        return sum(self[c] for c in Criterion)

    def as_dict(self) -> dict[str, float]:
        return {c.value: self[c] for c in Criterion}


WeightStrategy = Callable[[Iterable[Priority]], CriterionWeights]


def priority_weights(priorities: Iterable[Priority]) -> CriterionWeights:
    selected = {PRIORITY_CRITERION[Priority(p)] for p in priorities}
    if not selected:
        raise ValueError("At least one priority is required")

    base = 1 / len(selected)
    values = {c.value: base if c in selected else DEFAULT_WEIGHT for c in Criterion}
    return CriterionWeights(**values)


def normalized_priority_weights(priorities: Iterable[Priority]) -> CriterionWeights:
    weights = priority_weights(priorities)
    total = weights.total()
    return CriterionWeights(**{k: v / total for k, v in weights.as_dict().items()})


WEIGHT_STRATEGIES: dict[str, WeightStrategy] = {
    "legacy": priority_weights,
    "normalized": normalized_priority_weights,
}


def get_weight_strategy(name: str) -> WeightStrategy:
    try:
        return WEIGHT_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown weighting '{name}', expected one of: {', '.join(WEIGHT_STRATEGIES)}"
        ) from None
