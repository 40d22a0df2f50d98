"""Kernel time – epoch-millis conversion and date/time merging."""
from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta

from fix_commons.kernel.errors import InvalidArgumentError
from fix_commons.kernel.time.modify import modify_datetime, modify_datetime_in_zone

_EPOCH = datetime(1970, 1, 1)


def from_epoch_millis(
    millis: int,
    pattern: str | None = None,
    zone_id: str | None = None,
) -> datetime:
    """Naive UTC date/time for *millis* since the epoch, optionally modified.

    With *zone_id* the modification happens on that zone's wall clock and the
    result is converted back to UTC (see :func:`modify_datetime_in_zone`).
    Inverse of :func:`to_epoch_millis` for naive values.
    """
    if isinstance(millis, bool) or not isinstance(millis, int):
        raise InvalidArgumentError(
            f"Epoch millis must be an int, got {type(millis).__name__}", argument="millis", value=millis
        )
    try:
        value = _EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise InvalidArgumentError(
            f"Epoch millis {millis} is out of the supported range", argument="millis", value=millis, cause=exc
        ) from exc
    if zone_id is not None:
        return modify_datetime_in_zone(value, pattern, zone_id)
    return modify_datetime(value, pattern)


def merge_datetime(
    day: date,
    time_of_day: time | datetime,
    pattern: str | None = None,
    zone_id: str | None = None,
) -> datetime:
    """Combine the date part of *day* with the time part of *time_of_day*.

    Either argument may be a ``datetime``; only the relevant half is used and
    any ``tzinfo`` is dropped. The merged value is naive UTC and is modified by
    *pattern* like :func:`from_epoch_millis`.
    """
    if day is None or time_of_day is None:
        raise InvalidArgumentError("Both date and time are required", argument="day/time_of_day")
    if isinstance(day, datetime):
        day = day.date()
    if isinstance(time_of_day, datetime):
        time_of_day = time_of_day.time()
    elif time_of_day.tzinfo is not None:
        time_of_day = time_of_day.replace(tzinfo=None)
    value = datetime.combine(day, time_of_day)
    if zone_id is not None:
        return modify_datetime_in_zone(value, pattern, zone_id)
    return modify_datetime(value, pattern)


def to_aware_utc(value: datetime) -> datetime:
    """Attach UTC to a naive value; aware values are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


__all__ = ["from_epoch_millis", "merge_datetime", "to_aware_utc"]
