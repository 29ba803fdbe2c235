from pathlib import Path

import pandas as pd
import pytest

from netlink_planner.catalog.models import ApplicationScenario, MediaQuery, MediaType
from netlink_planner.catalog.store import (
    CATALOG_COLUMNS,
    DataFrameCatalogStore,
    MediumNotFoundError,
)
from netlink_planner.config import DEFAULT_APP_CONFIG


@pytest.fixture(scope="module")
def bundled_store() -> DataFrameCatalogStore:
    return DataFrameCatalogStore.from_csv(DEFAULT_APP_CONFIG.catalog_path)


def test_bundled_catalog_loads(bundled_store):
    assert len(bundled_store) == 10
    assert list(bundled_store.dataframe.columns) == CATALOG_COLUMNS

    fiber = bundled_store.find_one(1)
    assert fiber.type is MediaType.fiber_optic
    assert ApplicationScenario.long_haul in fiber.applicable_scenarios


def test_empty_csv_cells_become_none(bundled_store):
    thinnet = bundled_store.find_one(9)
    assert thinnet.advantages is None
    assert thinnet.is_active is False


def test_find_one_missing(bundled_store):
    with pytest.raises(MediumNotFoundError):
        bundled_store.find_one(999)


def test_find_by_capabilities(bundled_store):
    media = bundled_store.find_by_capabilities(1000, 50, 10000)
    assert [m.id for m in media] == [1, 5]


def test_find_by_capabilities_without_cost_cap(bundled_store):
    media = bundled_store.find_by_capabilities(100, 1000)
    assert [m.id for m in media] == [7, 10]


def test_find_all_filters(bundled_store):
    assert len(bundled_store.find_all()) == 10
    assert [m.id for m in bundled_store.find_all(MediaQuery(type=MediaType.satellite))] == [7, 10]
    assert [m.id for m in bundled_store.find_all(MediaQuery(is_active=False))] == [9]
    assert [m.id for m in bundled_store.find_all(MediaQuery(scenario=ApplicationScenario.long_haul))] == [1, 7, 10]
    assert [m.id for m in bundled_store.find_all(MediaQuery(max_cost=500))] == [4, 6, 9]


def test_find_by_scenario_skips_inactive(bundled_store):
    media = bundled_store.find_by_scenario(ApplicationScenario.lan)
    assert [m.id for m in media] == [2, 3, 4, 6, 8]


def test_statistics(bundled_store):
    stats = bundled_store.get_statistics()

    assert stats.total == 10
    assert stats.active == 9
    assert {t.type.value: t.count for t in stats.type_distribution} == {
        "coaxial": 1,
        "copper": 2,
        "fiber_optic": 2,
        "satellite": 2,
        "wireless": 2,
    }
    assert stats.average_cost == pytest.approx(3877.78)


def test_statistics_empty_catalog():
    stats = DataFrameCatalogStore.from_records([]).get_statistics()
    assert stats.total == 0
    assert stats.active == 0
    assert stats.type_distribution == []
    assert stats.average_cost == 0.0


def test_from_csv_parses_scenarios_and_defaults(tmp_path: Path, fiber_a):
    row = fiber_a.model_dump(mode="json")
    row["applicable_scenarios"] = "WAN | metro"
    path = tmp_path / "media.csv"
    pd.DataFrame([row]).drop(columns=["is_active", "specifications"]).to_csv(path, index=False)

    store = DataFrameCatalogStore.from_csv(path)
    media = store.find_one(1)

    assert media.applicable_scenarios == (ApplicationScenario.wan, ApplicationScenario.metro)
    assert media.is_active is True
    assert media.specifications is None


def test_from_csv_missing_columns(tmp_path: Path):
    path = tmp_path / "media.csv"
    pd.DataFrame([{"id": 1, "name": "Broken"}]).to_csv(path, index=False)
    with pytest.raises(ValueError, match="missing columns"):
        DataFrameCatalogStore.from_csv(path)


def test_duplicate_ids_rejected(fiber_a):
    with pytest.raises(ValueError, match="duplicate"):
        DataFrameCatalogStore.from_records([fiber_a, fiber_a])
