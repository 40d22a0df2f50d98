"""Kernel time – modify patterns.

A modify pattern is a colon-separated list of ``<field><operator><value>``
modifiers applied left to right to a date/time value::

    Y+1:M-2:D=3:h+4:m-5:s=6:ms=7

turns ``2017-05-30T14:00:23.439`` into ``2018-03-03T17:55:06.007``.

Fields: ``Y`` year, ``M`` month, ``D`` day, ``h`` hour, ``m`` minute,
``s`` second, ``ms`` millisecond, ``mc`` microsecond, ``ns`` nanosecond.
Operators: ``+`` add, ``-`` subtract, ``=`` set. Values are unsigned integers.

Year and month arithmetic clamps the day to the end of the target month
(``2024-01-31`` with ``M+1`` gives ``2024-02-29``). Nanosecond amounts are
truncated to microsecond resolution.
"""
from __future__ import annotations

import calendar
import dataclasses
import enum
import re
from datetime import MAXYEAR, MINYEAR, UTC, date, datetime, time, timedelta

from fix_commons.kernel.errors import InvalidArgumentError, ParseError
from fix_commons.kernel.time.zones import resolve_zone

_MODIFIER_RE = re.compile(r"^(ms|mc|ns|[YMDhms])([+\-=])([0-9]+)$")
_SEPARATOR = ":"
# Date used to carry a bare ``time`` through datetime arithmetic.
_TIME_ANCHOR = date(2000, 1, 1)


class DateField(enum.Enum):
    """Date/time field addressed by a modifier."""

    YEAR = "Y"
    MONTH = "M"
    DAY = "D"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "mc"
    NANOSECOND = "ns"

    @property
    def is_date_field(self) -> bool:
        return self in (DateField.YEAR, DateField.MONTH, DateField.DAY)


class DateOperator(enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    SET = "="


_SET_LIMITS: dict[DateField, tuple[int, int]] = {
    DateField.YEAR: (MINYEAR, MAXYEAR),
    DateField.MONTH: (1, 12),
    DateField.DAY: (1, 31),
    DateField.HOUR: (0, 23),
    DateField.MINUTE: (0, 59),
    DateField.SECOND: (0, 59),
    DateField.MILLISECOND: (0, 999),
    DateField.MICROSECOND: (0, 999_999),
    DateField.NANOSECOND: (0, 999_999_999),
}

_DURATION_KWARG: dict[DateField, str] = {
    DateField.DAY: "days",
    DateField.HOUR: "hours",
    DateField.MINUTE: "minutes",
    DateField.SECOND: "seconds",
    DateField.MILLISECOND: "milliseconds",
    DateField.MICROSECOND: "microseconds",
}


@dataclasses.dataclass(frozen=True, slots=True)
class DateModifier:
    """A single ``<field><operator><value>`` step of a modify pattern."""

    field: DateField
    operator: DateOperator
    value: int

    def __str__(self) -> str:
        return f"{self.field.value}{self.operator.value}{self.value}"

    @classmethod
    def parse(cls, text: str) -> "DateModifier":
        """Parse one modifier; raises :class:`ParseError` when malformed."""
        segment = text.strip()
        match = _MODIFIER_RE.match(segment)
        if match is None:
            raise ParseError(
                f"Invalid date modifier {segment!r}",
                source=text,
                fragment=segment,
            )
        field, operator, value = match.groups()
        return cls(DateField(field), DateOperator(operator), int(value))

    def apply(self, value: datetime) -> datetime:
        """Return *value* with this modifier applied."""
        try:
            if self.operator is DateOperator.SET:
                return self._set(value)
            amount = self.value if self.operator is DateOperator.ADD else -self.value
            return self._shift(value, amount)
        except OverflowError as exc:
            raise InvalidArgumentError(
                f"Modifier {self} moves {value.isoformat()} out of the supported range",
                argument="modifier",
                value=str(self),
                cause=exc,
            ) from exc

    def _shift(self, value: datetime, amount: int) -> datetime:
        if self.field is DateField.YEAR:
            return _shift_months(value, amount * 12)
        if self.field is DateField.MONTH:
            return _shift_months(value, amount)
        if self.field is DateField.NANOSECOND:
            micros = abs(amount) // 1_000
            return value + timedelta(microseconds=micros if amount >= 0 else -micros)
        return value + timedelta(**{_DURATION_KWARG[self.field]: amount})

    def _set(self, value: datetime) -> datetime:
        low, high = _SET_LIMITS[self.field]
        if not low <= self.value <= high:
            raise InvalidArgumentError(
                f"Modifier {self} is out of range [{low}, {high}]",
                argument="modifier",
                value=str(self),
            )
        match self.field:
            case DateField.YEAR:
                return _with_year_month(value, self.value, value.month)
            case DateField.MONTH:
                return _with_year_month(value, value.year, self.value)
            case DateField.DAY:
                last = calendar.monthrange(value.year, value.month)[1]
                if self.value > last:
                    raise InvalidArgumentError(
                        f"Modifier {self} is invalid for {value.year:04d}-{value.month:02d}",
                        argument="modifier",
                        value=str(self),
                    )
                return value.replace(day=self.value)
            case DateField.HOUR:
                return value.replace(hour=self.value)
            case DateField.MINUTE:
                return value.replace(minute=self.value)
            case DateField.SECOND:
                return value.replace(second=self.value)
            case DateField.MILLISECOND:
                return value.replace(microsecond=self.value * 1_000)
            case DateField.MICROSECOND:
                return value.replace(microsecond=self.value)
            case DateField.NANOSECOND:
                return value.replace(microsecond=self.value // 1_000)
        raise AssertionError(self.field)  # pragma: no cover


def _shift_months(value: datetime, months: int) -> datetime:
    total = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(total, 12)
    return _with_year_month(value, year, month_index + 1)


def _with_year_month(value: datetime, year: int, month: int) -> datetime:
    if not MINYEAR <= year <= MAXYEAR:
        raise OverflowError(f"year {year} is out of range")
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def parse_modify_pattern(pattern: str | None) -> list[DateModifier]:
    """Split *pattern* into modifiers. ``None`` or blank yields ``[]``."""
    if pattern is None or not pattern.strip():
        return []
    modifiers: list[DateModifier] = []
    for segment in pattern.split(_SEPARATOR):
        try:
            modifiers.append(DateModifier.parse(segment))
        except ParseError as exc:
            raise ParseError(
                f"Invalid modify pattern {pattern!r}: bad segment {segment.strip()!r}",
                source=pattern,
                fragment=segment.strip(),
                cause=exc,
            ) from exc
    return modifiers


def modify_datetime(value: datetime, pattern: str | None, skip_weekends: bool = False) -> datetime:
    """Apply *pattern* to *value* (naive or aware, wall-clock arithmetic).

    With *skip_weekends* a result on Saturday or Sunday moves to the nearest
    weekday in the direction of the modification: forward (or unchanged) goes
    on to Monday, backward goes back to Friday.
    """
    modified = value
    for modifier in parse_modify_pattern(pattern):
        modified = modifier.apply(modified)
    if skip_weekends:
        return _skip_weekend(value, modified)
    return modified


def _skip_weekend(original: datetime, modified: datetime) -> datetime:
    weekday = modified.weekday()
    if weekday < calendar.SATURDAY:
        return modified
    forward = modified >= original
    if weekday == calendar.SATURDAY:
        shift = 2 if forward else -1
    else:
        shift = 1 if forward else -2
    try:
        return modified + timedelta(days=shift)
    except OverflowError as exc:
        raise InvalidArgumentError(
            f"Skipping the weekend moves {modified.isoformat()} out of the supported range",
            argument="skip_weekends",
            value=modified.isoformat(),
            cause=exc,
        ) from exc


def modify_date(value: date, pattern: str | None) -> date:
    """Apply *pattern* to a date; time fields act on midnight of that date."""
    return modify_datetime(datetime.combine(value, time()), pattern).date()


def modify_time(value: time, pattern: str | None) -> time:
    """Apply *pattern* to a time of day, wrapping around midnight.

    Date fields (``Y``, ``M``, ``D``) are rejected.
    """
    modifiers = parse_modify_pattern(pattern)
    for modifier in modifiers:
        if modifier.field.is_date_field:
            raise InvalidArgumentError(
                f"Modifier {modifier} cannot be applied to a time of day",
                argument="modify_pattern",
                value=pattern,
            )
    current = datetime.combine(_TIME_ANCHOR, value)
    for modifier in modifiers:
        current = modifier.apply(current)
    return current.timetz()


def as_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def modify_datetime_in_zone(
    value: datetime,
    pattern: str | None,
    zone_id: str,
    skip_weekends: bool = False,
) -> datetime:
    """Modify a UTC date/time as seen in *zone_id* (DST aware).

    *value* is naive UTC (aware values are converted first). The modification
    happens on the zone's wall clock and the result is returned as naive UTC.
    *skip_weekends* applies to the zone's calendar, as in :func:`modify_datetime`.
    """
    zone = resolve_zone(zone_id)
    local = as_naive_utc(value).replace(tzinfo=UTC).astimezone(zone).replace(tzinfo=None)
    modified = modify_datetime(local, pattern, skip_weekends)
    return modified.replace(tzinfo=zone).astimezone(UTC).replace(tzinfo=None)


__all__ = [
    "DateField",
    "DateModifier",
    "DateOperator",
    "as_naive_utc",
    "modify_date",
    "modify_datetime",
    "modify_datetime_in_zone",
    "modify_time",
    "parse_modify_pattern",
]
