from __future__ import annotations

import math
from typing import Mapping

RATIO_SUM_TOLERANCE = 0.01
RATIO_PERCENT_MIN = 0.0
RATIO_PERCENT_MAX = 100.0


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (towards +inf).

    Matches the rounding the admin UI shows; Python's round() would send
    2.5 to 2.
    """
    return int(math.floor(value + 0.5))


def total_ratio_percentage(ratios: Mapping[str, float]) -> float:
    """Plain sum of the ratio values. No rounding, no bounds."""
    return sum(ratios.values(), 0)


def ratios_within_bounds(ratios: Mapping[str, float]) -> bool:
    """True when every ratio lies in [0, 100]. The total is not checked."""
    return all(RATIO_PERCENT_MIN <= ratio <= RATIO_PERCENT_MAX for ratio in ratios.values())


def ratios_sum_to_one_hundred(ratios: Mapping[str, float]) -> bool:
    """True when the ratios add up to 100, within RATIO_SUM_TOLERANCE."""
    return abs(total_ratio_percentage(ratios) - RATIO_PERCENT_MAX) <= RATIO_SUM_TOLERANCE


def format_ratio_display(ratios: Mapping[str, float]) -> str:
    """
    Render ratios as "a:b:c" in insertion order.

    Whole floats drop their trailing ".0" so {"S": 1.0, "M": 2.5}
    reads "1:2.5".
    """
    if not ratios:
        return ""
    return ":".join(_format_number(value) for value in ratios.values())


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
