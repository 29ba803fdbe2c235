from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Protocol

import pandas as pd

from ..config import DEFAULT_APP_CONFIG, AppConfig
from .models import (
    ApplicationScenario,
    CatalogStatistics,
    MediaQuery,
    MediumRecord,
    TypeCount,
)

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: list[str] = [
    "id",
    "name",
    "type",
    "max_distance",
    "max_bandwidth",
    "cost_per_km",
    "attenuation",
    "latency_per_km",
    "reliability",
    "installation_difficulty",
    "maintenance_cost_per_km_year",
    "environmental_adaptability",
    "applicable_scenarios",
    "specifications",
    "advantages",
    "disadvantages",
    "is_active",
]

_TEXT_COLUMNS = ("specifications", "advantages", "disadvantages")
_OPTIONAL_COLUMNS = {*_TEXT_COLUMNS, "is_active"}

SCENARIO_SEPARATOR = "|"


class MediumNotFoundError(LookupError):
    def __init__(self, medium_id: int) -> None:
        super().__init__(f"Medium with ID {medium_id} not found")
        self.medium_id = medium_id


class CatalogStore(Protocol):
    """Read-only catalog access consumed by the recommendation engine."""

    def find_by_capabilities(
        self,
        min_bandwidth: float,
        max_distance: float,
        max_cost: float | None = None,
    ) -> list[MediumRecord]: ...


def _parse_scenarios(raw: object) -> tuple[str, ...]:
    if isinstance(raw, (list, tuple)):
        return tuple(str(s).strip().lower() for s in raw)
    if pd.isna(raw):
        return ()
    return tuple(
        s.strip().lower() for s in str(raw).split(SCENARIO_SEPARATOR) if s.strip()
    )


def _parse_active(raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    if pd.isna(raw):
        return True
    return str(raw).strip().lower() in {"true", "1", "yes", "y"}


def _text_or_none(raw: object) -> str | None:
    if raw is None or pd.isna(raw):
        return None
    text = str(raw).strip()
    return text or None


class DataFrameCatalogStore:
    """Catalog held in memory as a pandas DataFrame, one row per medium."""

    def __init__(self, df: pd.DataFrame) -> None:
        missing = [c for c in CATALOG_COLUMNS if c not in df.columns and c not in _OPTIONAL_COLUMNS]
        if missing:
            raise ValueError(f"Catalog is missing columns: {', '.join(missing)}")

        df = df.copy()
        for col in _OPTIONAL_COLUMNS - set(df.columns):
            df[col] = None

        df["applicable_scenarios"] = df["applicable_scenarios"].map(_parse_scenarios)
        df["is_active"] = df["is_active"].map(_parse_active).astype(bool)

        if df["id"].duplicated().any():
            raise ValueError("Catalog contains duplicate medium ids")

        self._df = df[CATALOG_COLUMNS].reset_index(drop=True)
        self._records: dict[int, MediumRecord] = {}
        for row in self._df.to_dict(orient="records"):
            # NaN from empty CSV cells becomes None
            for col in _TEXT_COLUMNS:
                row[col] = _text_or_none(row[col])
            self._records[int(row["id"])] = MediumRecord.model_validate(row)

    @classmethod
    def from_csv(cls, path: Path) -> DataFrameCatalogStore:
        df = pd.read_csv(path)
        store = cls(df)
        logger.info("Loaded %d media from %s", len(store), path)
        return store

    @classmethod
    def from_records(cls, records: Iterable[MediumRecord]) -> DataFrameCatalogStore:
        rows = [r.model_dump(mode="json") for r in records]
        return cls(pd.DataFrame(rows, columns=CATALOG_COLUMNS))

    def __len__(self) -> int:
        return len(self._df)

    @property
    def dataframe(self) -> pd.DataFrame:
        return self._df

    def _select(self, mask: pd.Series) -> list[MediumRecord]:
        return [self._records[int(i)] for i in self._df.loc[mask, "id"]]

    def _scenario_mask(self, scenario: ApplicationScenario) -> pd.Series:
        return self._df["applicable_scenarios"].map(lambda s: scenario.value in s).astype(bool)

    # ── Engine query ─────────────────────────────────────────────────────

    def find_by_capabilities(
        self,
        min_bandwidth: float,
        max_distance: float,
        max_cost: float | None = None,
    ) -> list[MediumRecord]:
        """Active media able to carry ``min_bandwidth`` over ``max_distance``.

        This is a superset filter: scenario and optional constraints are
        applied by the engine.
        """
        if self._df.empty:
            return []
        df = self._df
        mask = (
            (df["max_bandwidth"] >= min_bandwidth)
            & (df["max_distance"] >= max_distance)
            & df["is_active"]
        )
        if max_cost is not None:
            mask = mask & (df["cost_per_km"] <= max_cost)
        return self._select(mask)

    # ── Browsing ─────────────────────────────────────────────────────────

    def find_all(self, query: MediaQuery | None = None) -> list[MediumRecord]:
        if self._df.empty:
            return []
        query = query or MediaQuery()
        df = self._df
        mask = pd.Series(True, index=df.index)

        if query.type is not None:
            mask = mask & (df["type"] == query.type.value)
        if query.scenario is not None:
            mask = mask & self._scenario_mask(query.scenario)
        if query.min_bandwidth is not None:
            mask = mask & (df["max_bandwidth"] >= query.min_bandwidth)
        if query.max_distance is not None:
            mask = mask & (df["max_distance"] >= query.max_distance)
        if query.max_cost is not None:
            mask = mask & (df["cost_per_km"] <= query.max_cost)
        if query.is_active is not None:
            mask = mask & (df["is_active"] == query.is_active)

        return self._select(mask)

    def find_one(self, medium_id: int) -> MediumRecord:
        try:
            return self._records[medium_id]
        except KeyError:
            raise MediumNotFoundError(medium_id) from None

    def find_by_scenario(self, scenario: ApplicationScenario) -> list[MediumRecord]:
        if self._df.empty:
            return []
        return self._select(self._scenario_mask(scenario) & self._df["is_active"])

    def get_statistics(self) -> CatalogStatistics:
        df = self._df
        active = df[df["is_active"]]

        type_counts = active.groupby("type", sort=True).size()
        distribution = [
            TypeCount(type=t, count=int(n)) for t, n in type_counts.items()
        ]
        average_cost = float(active["cost_per_km"].mean()) if not active.empty else 0.0

        return CatalogStatistics(
            total=len(df),
            active=len(active),
            type_distribution=distribution,
            average_cost=round(average_cost, 2),
        )


_store: DataFrameCatalogStore | None = None


def get_catalog_store(config: AppConfig = DEFAULT_APP_CONFIG) -> DataFrameCatalogStore:
    """Return the process-wide catalog, loading it on first call."""
    global _store
    if _store is None:
        _store = DataFrameCatalogStore.from_csv(config.catalog_path)
    return _store
