from __future__ import annotations

import enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class AllocationStatus(str, enum.Enum):
    ALLOCATED = "ALLOCATED"
    # Ratios sum to zero, so there is nothing to be proportional to.
    UNDEFINED = "UNDEFINED"


class CapacityAllocationRequest(BaseModel):
    total_capacity: int = Field(..., ge=0)
    size_ratios: Dict[str, float] = Field(default_factory=dict)
    correct_drift: bool = False


class CapacityAllocationRead(BaseModel):
    status: AllocationStatus
    total_capacity: int
    total_ratio: float
    allocation: Dict[str, int] = Field(default_factory=dict)
    drift: int = 0

    model_config = ConfigDict(from_attributes=True)


class SizeRatioCheckRequest(BaseModel):
    size_ratios: Dict[str, float] = Field(default_factory=dict)


class SizeRatioCheckRead(BaseModel):
    total_ratio_percentage: float
    within_bounds: bool
    sums_to_one_hundred: bool
    display: str
