# fra_dashboard/utils.py
import math
from typing import Iterable, List, Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (the dashboard's JS Math.round)."""
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    # 0 when there is nothing to divide by
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def distinct_sorted(values: Iterable[Optional[str]]) -> List[str]:
    """Unique, non-empty values in ordinal order."""
    return sorted({v for v in values if v})


def is_set(value: Optional[str]) -> bool:
    return bool(value)
