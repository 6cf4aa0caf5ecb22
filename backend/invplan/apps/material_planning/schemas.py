from __future__ import annotations

import enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from invplan.apps.stock_levels.schemas import MONTHS_PER_YEAR, StockLevelsByBucket


class StockManagementType(str, enum.Enum):
    OVERALL = "overall"
    MONTHLY = "monthly"


class InventoryStatus(str, enum.Enum):
    NORMAL = "Normal"
    LOW = "Low"
    CRITICAL = "Critical"
    OVERSTOCKED = "Overstocked"


class StockThresholdConfig(BaseModel):
    """Stock targets configured on a class."""

    stock_management_type: StockManagementType = StockManagementType.OVERALL
    overall_min_stock: float = Field(0, ge=0)
    overall_max_stock: float = Field(0, ge=0)
    monthly_stock_levels: StockLevelsByBucket = Field(default_factory=dict)


class MaterialPlanningItem(BaseModel):
    sku_code: str
    bucket: str
    current_inventory: float = 0
    thresholds: StockThresholdConfig = Field(default_factory=StockThresholdConfig)


class ThresholdRequest(MaterialPlanningItem):
    month: Optional[int] = Field(None, ge=1, le=MONTHS_PER_YEAR)


class ThresholdRead(BaseModel):
    sku_code: str
    min_threshold: float
    optimal_threshold: float
    source: StockManagementType
    current_month: Optional[int] = None
    is_configured: bool
    status: InventoryStatus
    status_percentage: int


class StatisticsRequest(BaseModel):
    items: List[MaterialPlanningItem] = Field(default_factory=list)
    month: Optional[int] = Field(None, ge=1, le=MONTHS_PER_YEAR)


class MaterialPlanningStatistics(BaseModel):
    total_skus: int = 0
    normal_count: int = 0
    low_count: int = 0
    critical_count: int = 0
    overstocked_count: int = 0
    overall_threshold_count: int = 0
    monthly_threshold_count: int = 0
    no_threshold_count: int = 0

    model_config = ConfigDict(from_attributes=True)


STATUS_COUNT_FIELDS: Dict[InventoryStatus, str] = {
    InventoryStatus.NORMAL: "normal_count",
    InventoryStatus.LOW: "low_count",
    InventoryStatus.CRITICAL: "critical_count",
    InventoryStatus.OVERSTOCKED: "overstocked_count",
}
