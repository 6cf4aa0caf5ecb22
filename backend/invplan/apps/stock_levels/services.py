from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from invplan.utils.ratios import ratios_sum_to_one_hundred, total_ratio_percentage

from .schemas import (
    MONTHS_PER_YEAR,
    MonthlyStockLevel,
    StockLevelsByBucket,
    stock_levels_adapter,
)

logger = logging.getLogger(__name__)

__all__ = [
    "get_default_stock_levels",
    "parse_stock_levels",
    "ratios_sum_to_one_hundred",
    "stock_level_errors",
    "total_ratio_percentage",
    "validate_monthly_stock_levels",
]

StockLevelErrors = List[Dict[str, str]]


def parse_stock_levels(raw: Any) -> StockLevelsByBucket:
    """
    Parse an untrusted payload into per-bucket monthly stock levels.

    Raises pydantic.ValidationError when the shape or any value is wrong.
    """
    return stock_levels_adapter.validate_python(raw)


def _error_field(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc) or "stock_levels"


def stock_level_errors(raw: Any) -> StockLevelErrors:
    """Return one {"field", "reason"} row per problem; empty when valid."""
    try:
        parse_stock_levels(raw)
    except ValidationError as exc:
        return [
            {"field": _error_field(error["loc"]), "reason": error["msg"]}
            for error in exc.errors()
        ]
    return []


def validate_monthly_stock_levels(raw: Any) -> bool:
    """
    True when every bucket holds a list of well-formed monthly records.

    Fails closed: anything that does not parse is simply invalid.
    """
    try:
        parse_stock_levels(raw)
    except ValidationError as exc:
        logger.debug(
            "Rejected monthly stock levels",
            extra={"error_count": exc.error_count()},
        )
        return False
    return True


def get_default_stock_levels(
    selected_buckets: Sequence[str],
    *,
    year: Optional[int] = None,
) -> StockLevelsByBucket:
    """
    Twelve zeroed monthly records per bucket, all stamped with one year.

    The year is read once so every bucket agrees even across New Year.
    Repeated bucket ids collapse into a single entry.
    """
    if year is None:
        year = date.today().year

    stock_levels: StockLevelsByBucket = {}
    for bucket in selected_buckets:
        stock_levels[bucket] = [
            MonthlyStockLevel(month=month, year=year, min_stock=0, max_stock=0)
            for month in range(1, MONTHS_PER_YEAR + 1)
        ]
    return stock_levels
