from __future__ import annotations

from invplan.apps.material_planning.router import planning_statistics, resolve_thresholds, router as planning_router
from invplan.apps.material_planning import services as planning_services
from invplan.apps.material_planning.schemas import (
    InventoryStatus,
    MaterialPlanningItem,
    StatisticsRequest,
    StockManagementType,
    StockThresholdConfig,
    ThresholdRequest,
)


def _monthly_config(**overrides) -> StockThresholdConfig:
    data = {
        "stock_management_type": "monthly",
        "overall_min_stock": 5,
        "overall_max_stock": 20,
        "monthly_stock_levels": {
            "M": [
                {"month": 1, "year": 2025, "minStock": 0, "maxStock": 0},
                {"month": 6, "year": 2025, "minStock": 40, "maxStock": 100},
            ]
        },
    }
    data.update(overrides)
    return StockThresholdConfig.model_validate(data)


def test_monthly_thresholds_win_when_configured():
    thresholds = planning_services.calculate_thresholds(_monthly_config(), bucket="M", month=6)
    assert thresholds.source == StockManagementType.MONTHLY
    assert thresholds.min_threshold == 40
    assert thresholds.optimal_threshold == 100
    assert thresholds.current_month == 6
    assert thresholds.is_configured is True


def test_zero_monthly_record_falls_back_to_overall():
    thresholds = planning_services.calculate_thresholds(_monthly_config(), bucket="M", month=1)
    assert thresholds.source == StockManagementType.OVERALL
    assert thresholds.min_threshold == 5
    assert thresholds.optimal_threshold == 20
    assert thresholds.current_month is None
    assert thresholds.is_configured is True


def test_unknown_bucket_falls_back_to_overall():
    thresholds = planning_services.calculate_thresholds(_monthly_config(), bucket="XL", month=6)
    assert thresholds.source == StockManagementType.OVERALL


def test_overall_type_ignores_monthly_levels():
    config = _monthly_config(stock_management_type="overall")
    thresholds = planning_services.calculate_thresholds(config, bucket="M", month=6)
    assert thresholds.source == StockManagementType.OVERALL
    assert thresholds.min_threshold == 5


def test_unconfigured_thresholds():
    thresholds = planning_services.calculate_thresholds(StockThresholdConfig(), bucket="M", month=3)
    assert thresholds.is_configured is False
    assert thresholds.min_threshold == 0


def test_status_without_thresholds_is_normal():
    assert planning_services.calculate_status(0, 0, 0) == (InventoryStatus.NORMAL, 100)


def test_status_empty_stock_is_critical():
    assert planning_services.calculate_status(0, 10, 50) == (InventoryStatus.CRITICAL, 0)


def test_status_below_minimum():
    assert planning_services.calculate_status(2, 10, 50) == (InventoryStatus.CRITICAL, 20)
    assert planning_services.calculate_status(5, 20, 50) == (InventoryStatus.CRITICAL, 25)
    assert planning_services.calculate_status(6, 10, 50) == (InventoryStatus.LOW, 60)


def test_status_overstocked_above_one_and_a_half_optimal():
    assert planning_services.calculate_status(76, 10, 50) == (InventoryStatus.OVERSTOCKED, 150)
    assert planning_services.calculate_status(75, 10, 50) == (InventoryStatus.NORMAL, 100)


def test_status_at_minimum_is_normal():
    assert planning_services.calculate_status(10, 10, 0) == (InventoryStatus.NORMAL, 100)


def test_summarize_statuses_counts_sources_and_statuses():
    items = [
        MaterialPlanningItem(sku_code="TS-M", bucket="M", current_inventory=10, thresholds=_monthly_config()),
        MaterialPlanningItem(
            sku_code="TS-S",
            bucket="S",
            current_inventory=100,
            thresholds=StockThresholdConfig(overall_min_stock=5, overall_max_stock=20),
        ),
        MaterialPlanningItem(sku_code="TS-L", bucket="L", current_inventory=3),
    ]
    stats = planning_services.summarize_statuses(items, month=6)
    assert stats.total_skus == 3
    assert stats.monthly_threshold_count == 1
    assert stats.overall_threshold_count == 1
    assert stats.no_threshold_count == 1
    assert stats.critical_count == 1
    assert stats.overstocked_count == 1
    assert stats.normal_count == 1
    assert stats.low_count == 0


def test_summarize_statuses_empty():
    stats = planning_services.summarize_statuses([], month=1)
    assert stats.total_skus == 0


def test_threshold_endpoint_combines_thresholds_and_status():
    payload = ThresholdRequest(
        sku_code="TS-M",
        bucket="M",
        current_inventory=30,
        month=6,
        thresholds=_monthly_config(),
    )
    read = resolve_thresholds(payload)
    assert read.source == StockManagementType.MONTHLY
    assert read.status == InventoryStatus.LOW
    assert read.status_percentage == 75


def test_statistics_endpoint():
    payload = StatisticsRequest(items=[MaterialPlanningItem(sku_code="A", bucket="S")], month=2)
    stats = planning_statistics(payload)
    assert stats.total_skus == 1
    assert stats.no_threshold_count == 1
    assert stats.normal_count == 1


def test_router_has_expected_routes():
    paths = {route.path for route in planning_router.routes}
    assert paths == {"/material-planning/thresholds", "/material-planning/statistics"}
