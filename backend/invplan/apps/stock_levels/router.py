from __future__ import annotations

from fastapi import APIRouter

from . import schemas, services

router = APIRouter(
    prefix="/stock-levels",
    tags=["stock-levels"],
)


@router.post(
    "/validate",
    response_model=schemas.StockLevelsValidateRead,
)
def validate_stock_levels(payload: schemas.StockLevelsValidateRequest):
    errors = services.stock_level_errors(payload.stock_levels)
    return schemas.StockLevelsValidateRead(
        valid=not errors,
        errors=[schemas.StockLevelError(**error) for error in errors],
    )


@router.post(
    "/defaults",
    response_model=schemas.DefaultStockLevelsRead,
)
def default_stock_levels(payload: schemas.DefaultStockLevelsRequest):
    stock_levels = services.get_default_stock_levels(payload.selected_buckets, year=payload.year)
    return schemas.DefaultStockLevelsRead(stock_levels=stock_levels)
