"""
Numeric and windowing helpers shared by every engine module.

Windows are always taken from a newest-first list. `newest_first` sorts a
copy, so callers may pass records in any order without the helpers ever
touching the caller's list.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; 0.0 for an empty iterable."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (74.5 -> 75)."""
    if not math.isfinite(value):
        return 0
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def as_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are converted to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


# ---------------------------------------------------------------------------
# Windowing
# ---------------------------------------------------------------------------

def newest_first(records: Iterable[T], key: Callable[[T], object]) -> list[T]:
    return sorted(records, key=key, reverse=True)


def most_recent(records: Sequence[T], n: int) -> list[T]:
    """The first `n` items of a newest-first sequence."""
    return list(records[:max(n, 0)])


def prior_window(records: Sequence[T], n: int, offset: int) -> list[T]:
    """`n` items of a newest-first sequence, skipping the `offset` newest."""
    start = max(offset, 0)
    return list(records[start:start + max(n, 0)])
