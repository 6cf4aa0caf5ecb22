from __future__ import annotations

from typing import Annotated, Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictStr, TypeAdapter, field_validator, model_validator

MONTHS_PER_YEAR = 12

# Whole or fractional; bools and numeric strings are rejected in strict mode.
Number = Union[int, float]


class MonthlyStockLevel(BaseModel):
    """
    Min/max stock target for one bucket in one calendar month.

    Strict: "5", True and NaN are not accepted as numbers.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, allow_inf_nan=False)

    month: Number
    year: Number
    min_stock: float = Field(ge=0, alias="minStock")
    max_stock: float = Field(ge=0, alias="maxStock")

    @field_validator("month")
    @classmethod
    def _month_in_calendar(cls, value: Number) -> Number:
        if not 1 <= value <= MONTHS_PER_YEAR:
            raise ValueError(f"month must be between 1 and {MONTHS_PER_YEAR}")
        return value

    @model_validator(mode="after")
    def _min_not_above_max(self) -> "MonthlyStockLevel":
        if self.min_stock > self.max_stock:
            raise ValueError("minStock must not exceed maxStock")
        return self


StockLevelsByBucket = Dict[str, List[MonthlyStockLevel]]

stock_levels_adapter: TypeAdapter[StockLevelsByBucket] = TypeAdapter(
    Annotated[Dict[StrictStr, Annotated[List[MonthlyStockLevel], Strict()]], Strict()]
)


class StockLevelsValidateRequest(BaseModel):
    # Untyped so shape errors come back in the response body.
    stock_levels: Any = None


class StockLevelError(BaseModel):
    field: str
    reason: str


class StockLevelsValidateRead(BaseModel):
    valid: bool
    errors: List[StockLevelError] = Field(default_factory=list)


class DefaultStockLevelsRequest(BaseModel):
    selected_buckets: List[str] = Field(default_factory=list)
    year: int | None = None


class DefaultStockLevelsRead(BaseModel):
    stock_levels: StockLevelsByBucket
