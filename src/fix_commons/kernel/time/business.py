"""Kernel time – business-day adjustment of modified date/times."""
from __future__ import annotations

import calendar
from collections.abc import Iterable
from datetime import datetime, timedelta

from fix_commons.kernel.errors import InvalidArgumentError
from fix_commons.kernel.time.modify import modify_datetime

_DAY_NAMES = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)

DEFAULT_WEEKENDS: frozenset[int] = frozenset({calendar.SATURDAY, calendar.SUNDAY})


def parse_weekends(weekends: Iterable[str] | None) -> frozenset[int]:
    """Map day names (case-insensitive) to ``datetime.weekday()`` numbers.

    ``None`` or an empty iterable yields :data:`DEFAULT_WEEKENDS`.
    """
    if weekends is None:
        return DEFAULT_WEEKENDS
    days: set[int] = set()
    for name in weekends:
        key = str(name).strip().upper()
        if key not in _DAY_NAMES:
            raise InvalidArgumentError(
                f"Unknown day of week {name!r}; expected one of {', '.join(_DAY_NAMES)}",
                argument="weekends",
                value=name,
            )
        days.add(_DAY_NAMES.index(key))
    if not days:
        return DEFAULT_WEEKENDS
    if len(days) == len(_DAY_NAMES):
        raise InvalidArgumentError("At least one business day is required", argument="weekends", value=sorted(days))
    return frozenset(days)


def adjust_to_business_days(
    original: datetime,
    modified: datetime,
    weekends: Iterable[str] | None = None,
) -> datetime:
    """Push *modified* away from *original* by one day per weekend day crossed.

    Walks day by day from *original* towards *modified* (inclusive); each
    weekend day seen extends the target by one more day in the same direction.
    """
    days = parse_weekends(weekends)
    past = modified < original
    step = timedelta(days=-1 if past else 1)
    target = modified
    cursor = original
    try:
        while (cursor.date() >= target.date()) if past else (cursor.date() <= target.date()):
            if cursor.weekday() in days:
                target += step
            cursor += step
    except OverflowError as exc:
        raise InvalidArgumentError(
            f"Skipping weekends moves {modified.isoformat()} out of the supported range",
            argument="modified",
            value=modified.isoformat(),
            cause=exc,
        ) from exc
    return target


def business_datetime(
    original: datetime,
    pattern: str | None,
    weekends: Iterable[str] | None = None,
) -> datetime:
    """Modify *original* by *pattern*, then skip weekend days."""
    return adjust_to_business_days(original, modify_datetime(original, pattern), weekends)


__all__ = [
    "DEFAULT_WEEKENDS",
    "adjust_to_business_days",
    "business_datetime",
    "parse_weekends",
]
