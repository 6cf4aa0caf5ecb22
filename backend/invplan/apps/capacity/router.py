from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from invplan.utils.ratios import format_ratio_display, ratios_sum_to_one_hundred

from . import schemas, services

router = APIRouter(
    prefix="/capacity",
    tags=["capacity"],
)


@router.post(
    "/allocation",
    response_model=schemas.CapacityAllocationRead,
)
def allocate_capacity(payload: schemas.CapacityAllocationRequest):
    result = services.allocate_capacity(
        payload.total_capacity,
        payload.size_ratios,
        correct_drift=payload.correct_drift,
    )
    if not result.is_allocated:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Size ratios sum to zero; capacity cannot be allocated proportionally.",
        )
    return result


@router.post(
    "/ratios/check",
    response_model=schemas.SizeRatioCheckRead,
)
def check_size_ratios(payload: schemas.SizeRatioCheckRequest):
    ratios = payload.size_ratios
    return schemas.SizeRatioCheckRead(
        total_ratio_percentage=services.total_ratio_percentage(ratios),
        within_bounds=services.ratios_within_bounds(ratios),
        sums_to_one_hundred=ratios_sum_to_one_hundred(ratios),
        display=format_ratio_display(ratios),
    )
