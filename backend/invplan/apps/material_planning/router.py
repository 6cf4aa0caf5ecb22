from __future__ import annotations

from fastapi import APIRouter

from . import schemas, services

router = APIRouter(
    prefix="/material-planning",
    tags=["material-planning"],
)


@router.post(
    "/thresholds",
    response_model=schemas.ThresholdRead,
)
def resolve_thresholds(payload: schemas.ThresholdRequest):
    thresholds = services.calculate_thresholds(
        payload.thresholds,
        bucket=payload.bucket,
        month=payload.month,
    )
    status, percentage = services.calculate_status(
        payload.current_inventory,
        thresholds.min_threshold,
        thresholds.optimal_threshold,
    )
    return schemas.ThresholdRead(
        sku_code=payload.sku_code,
        min_threshold=thresholds.min_threshold,
        optimal_threshold=thresholds.optimal_threshold,
        source=thresholds.source,
        current_month=thresholds.current_month,
        is_configured=thresholds.is_configured,
        status=status,
        status_percentage=percentage,
    )


@router.post(
    "/statistics",
    response_model=schemas.MaterialPlanningStatistics,
)
def planning_statistics(payload: schemas.StatisticsRequest):
    return services.summarize_statuses(payload.items, month=payload.month)
