from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Tuple

from invplan.utils.ratios import round_half_up

from .schemas import (
    STATUS_COUNT_FIELDS,
    InventoryStatus,
    MaterialPlanningItem,
    MaterialPlanningStatistics,
    StockManagementType,
    StockThresholdConfig,
)

logger = logging.getLogger(__name__)

OVERSTOCK_FACTOR = 1.5
OVERSTOCK_PERCENTAGE = 150
CRITICAL_PERCENTAGE = 25


@dataclass
class ThresholdCalculation:
    min_threshold: float
    optimal_threshold: float
    source: StockManagementType
    current_month: Optional[int] = None
    is_configured: bool = False


def _current_month() -> int:
    return date.today().month


def calculate_thresholds(
    config: StockThresholdConfig,
    *,
    bucket: str,
    month: Optional[int] = None,
) -> ThresholdCalculation:
    """
    Resolve the min/optimal stock thresholds for one bucket.

    Monthly configuration wins when the bucket has a non-zero record for the
    month; otherwise the overall values apply.
    """
    if month is None:
        month = _current_month()

    if config.stock_management_type == StockManagementType.MONTHLY:
        for level in config.monthly_stock_levels.get(bucket, []):
            if level.month != month:
                continue
            if level.min_stock > 0 or level.max_stock > 0:
                return ThresholdCalculation(
                    min_threshold=level.min_stock,
                    optimal_threshold=level.max_stock,
                    source=StockManagementType.MONTHLY,
                    current_month=month,
                    is_configured=True,
                )
            break

    return ThresholdCalculation(
        min_threshold=config.overall_min_stock,
        optimal_threshold=config.overall_max_stock,
        source=StockManagementType.OVERALL,
        is_configured=config.overall_min_stock > 0 or config.overall_max_stock > 0,
    )


def calculate_status(
    current_inventory: float,
    min_threshold: float,
    optimal_threshold: float,
) -> Tuple[InventoryStatus, int]:
    """Classify on-hand inventory and return (status, percentage of minimum)."""
    if min_threshold == 0 and optimal_threshold == 0:
        return InventoryStatus.NORMAL, 100

    if current_inventory == 0:
        return InventoryStatus.CRITICAL, 0

    if min_threshold > 0 and current_inventory < min_threshold:
        percentage = round_half_up((current_inventory / min_threshold) * 100)
        if percentage <= CRITICAL_PERCENTAGE:
            return InventoryStatus.CRITICAL, percentage
        return InventoryStatus.LOW, percentage

    if optimal_threshold > 0 and current_inventory > optimal_threshold * OVERSTOCK_FACTOR:
        return InventoryStatus.OVERSTOCKED, OVERSTOCK_PERCENTAGE

    return InventoryStatus.NORMAL, 100


def summarize_statuses(
    items: Iterable[MaterialPlanningItem],
    *,
    month: Optional[int] = None,
) -> MaterialPlanningStatistics:
    if month is None:
        month = _current_month()

    stats = MaterialPlanningStatistics()
    for item in items:
        thresholds = calculate_thresholds(item.thresholds, bucket=item.bucket, month=month)

        if thresholds.source == StockManagementType.MONTHLY:
            stats.monthly_threshold_count += 1
        elif thresholds.is_configured:
            stats.overall_threshold_count += 1
        else:
            stats.no_threshold_count += 1

        status, _ = calculate_status(
            item.current_inventory,
            thresholds.min_threshold,
            thresholds.optimal_threshold,
        )
        field_name = STATUS_COUNT_FIELDS[status]
        setattr(stats, field_name, getattr(stats, field_name) + 1)
        stats.total_skus += 1

    logger.info(
        "Material planning statistics computed",
        extra={"total_skus": stats.total_skus, "critical_count": stats.critical_count},
    )
    return stats
