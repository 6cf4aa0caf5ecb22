from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Mapping

from invplan.utils.ratios import (
    ratios_within_bounds,
    round_half_up,
    total_ratio_percentage,
)

from .schemas import AllocationStatus

logger = logging.getLogger(__name__)

__all__ = [
    "AllocationStatus",
    "CapacityAllocationResult",
    "allocate_capacity",
    "calculate_capacity_allocation",
    "ratios_within_bounds",
    "total_ratio_percentage",
]


@dataclass
class CapacityAllocationResult:
    """
    Outcome of a proportional capacity split.

    ``drift`` is ``sum(allocation) - total_capacity``. It is non-zero when
    rounding each share independently does not add back up to the total.
    """
    status: AllocationStatus
    total_capacity: int
    total_ratio: float
    allocation: Dict[str, int] = field(default_factory=dict)
    drift: int = 0

    @property
    def is_allocated(self) -> bool:
        return self.status == AllocationStatus.ALLOCATED


def calculate_capacity_allocation(
    total_capacity: int,
    size_ratios: Mapping[str, float],
) -> Dict[str, int]:
    """
    Split ``total_capacity`` across buckets in proportion to ``size_ratios``.

    Each share is rounded half-up on its own; the shares are not corrected
    to sum to the total. A zero ratio total returns an empty dict.
    """
    total_ratio = total_ratio_percentage(size_ratios)
    if total_ratio == 0:
        return {}

    return {
        bucket: round_half_up((ratio / total_ratio) * total_capacity)
        for bucket, ratio in size_ratios.items()
    }


def _largest_remainder(
    total_capacity: int,
    size_ratios: Mapping[str, float],
    total_ratio: float,
) -> Dict[str, int]:
    exact = {bucket: (ratio / total_ratio) * total_capacity for bucket, ratio in size_ratios.items()}
    floors = {bucket: math.floor(value) for bucket, value in exact.items()}
    remaining = total_capacity - sum(floors.values())

    # Ties go to the bucket listed first.
    order = sorted(exact, key=lambda bucket: exact[bucket] - floors[bucket], reverse=True)
    for bucket in order[:remaining]:
        floors[bucket] += 1
    return floors


def allocate_capacity(
    total_capacity: int,
    size_ratios: Mapping[str, float],
    *,
    correct_drift: bool = False,
) -> CapacityAllocationResult:
    """
    Proportional allocation with an explicit outcome.

    A zero ratio total comes back as ``UNDEFINED`` rather than an empty map,
    so callers can tell it apart from "no buckets requested".

    With ``correct_drift`` the shares are distributed by largest remainder so
    they sum exactly to ``total_capacity``. Only meaningful for a
    non-negative capacity and non-negative ratios.
    """
    total_ratio = total_ratio_percentage(size_ratios)
    if total_ratio == 0:
        logger.debug(
            "Capacity allocation undefined",
            extra={"total_capacity": total_capacity, "bucket_count": len(size_ratios)},
        )
        return CapacityAllocationResult(
            status=AllocationStatus.UNDEFINED,
            total_capacity=total_capacity,
            total_ratio=total_ratio,
        )

    if correct_drift:
        allocation = _largest_remainder(total_capacity, size_ratios, total_ratio)
    else:
        allocation = calculate_capacity_allocation(total_capacity, size_ratios)

    drift = sum(allocation.values()) - total_capacity
    if drift:
        logger.debug(
            "Capacity allocation rounding drift",
            extra={"total_capacity": total_capacity, "drift": drift},
        )

    return CapacityAllocationResult(
        status=AllocationStatus.ALLOCATED,
        total_capacity=total_capacity,
        total_ratio=total_ratio,
        allocation=allocation,
        drift=drift,
    )
