"""Kernel time – date/time components: extraction and differences."""
from __future__ import annotations

import enum
from datetime import date, datetime, time, timedelta

from fix_commons.kernel.errors import InvalidArgumentError, ParseError
from fix_commons.kernel.time.modify import as_naive_utc

_ONE_MICRO = timedelta(microseconds=1)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _months_between(start: datetime, end: datetime) -> int:
    """Whole months from *start* to *end*, truncated toward zero."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    start_rest = (start.day, start.time())
    end_rest = (end.day, end.time())
    if months > 0 and end_rest < start_rest:
        months -= 1
    elif months < 0 and end_rest > start_rest:
        months += 1
    return months


class DateComponent(enum.Enum):
    """A named component of a date/time value (``Y``, ``M`` ... ``ns``)."""

    YEAR = "Y"
    MONTH = "M"
    DAY = "D"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "mc"
    NANOSECOND = "ns"

    @classmethod
    def parse(cls, code: str) -> "DateComponent":
        if not isinstance(code, str):
            raise InvalidArgumentError(
                f"Date component must be a string, got {type(code).__name__}", argument="component", value=code
            )
        try:
            return cls(code.strip())
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Unknown date component {code!r}", argument="component", value=code, cause=exc
            ) from exc

    @property
    def is_date_component(self) -> bool:
        return self in (DateComponent.YEAR, DateComponent.MONTH, DateComponent.DAY)

    def extract(self, value: date | time | datetime) -> int:
        """Return this component of *value*."""
        has_date = isinstance(value, date)
        has_time = isinstance(value, (time, datetime))
        if (self.is_date_component and not has_date) or (not self.is_date_component and not has_time):
            raise InvalidArgumentError(
                f"Can't extract {self.value} from {value!r} [{type(value).__name__}]",
                argument="component",
                value=self.value,
            )
        match self:
            case DateComponent.YEAR:
                return value.year  # type: ignore[union-attr]
            case DateComponent.MONTH:
                return value.month  # type: ignore[union-attr]
            case DateComponent.DAY:
                return value.day  # type: ignore[union-attr]
            case DateComponent.HOUR:
                return value.hour  # type: ignore[union-attr]
            case DateComponent.MINUTE:
                return value.minute  # type: ignore[union-attr]
            case DateComponent.SECOND:
                return value.second  # type: ignore[union-attr]
            case DateComponent.MILLISECOND:
                return value.microsecond // 1_000  # type: ignore[union-attr]
            case DateComponent.MICROSECOND:
                return value.microsecond  # type: ignore[union-attr]
            case DateComponent.NANOSECOND:
                return value.microsecond * 1_000  # type: ignore[union-attr]
        raise AssertionError(self)  # pragma: no cover

    def diff(self, minuend: datetime, subtrahend: datetime) -> int:
        """Whole units of this component from *subtrahend* to *minuend*.

        Truncated toward zero; negative when *minuend* is the earlier value.
        Aware values are compared in UTC.
        """
        end = as_naive_utc(minuend)
        start = as_naive_utc(subtrahend)
        if self is DateComponent.YEAR:
            return _trunc_div(_months_between(start, end), 12)
        if self is DateComponent.MONTH:
            return _months_between(start, end)
        micros = (end - start) // _ONE_MICRO
        if self is DateComponent.NANOSECOND:
            return micros * 1_000
        return _trunc_div(micros, _UNIT_MICROS[self])


_UNIT_MICROS: dict[DateComponent, int] = {
    DateComponent.DAY: 86_400_000_000,
    DateComponent.HOUR: 3_600_000_000,
    DateComponent.MINUTE: 60_000_000,
    DateComponent.SECOND: 1_000_000,
    DateComponent.MILLISECOND: 1_000,
    DateComponent.MICROSECOND: 1,
}


def get_component(value: date | time | datetime, component: str) -> int:
    """Return *component* (``"Y"``, ``"ms"`` ...) of *value*."""
    if value is None:
        raise InvalidArgumentError("Source value must not be None", argument="value", value=value)
    return DateComponent.parse(component).extract(value)


def diff_datetime(minuend: datetime, subtrahend: datetime, component: str) -> int:
    """Difference ``minuend - subtrahend`` expressed in *component* units."""
    if minuend is None or subtrahend is None:
        raise InvalidArgumentError("Both date/time arguments are required", argument="minuend/subtrahend")
    return DateComponent.parse(component).diff(minuend, subtrahend)


def _parse_iso(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Invalid ISO-8601 date/time {text!r}", source=text, fragment=text, cause=exc) from exc


def diff_datetime_iso(minuend: str, subtrahend: str, component: str) -> int:
    """:func:`diff_datetime` over ISO-8601 strings (offsets honoured, naive = UTC)."""
    if minuend is None or subtrahend is None:
        raise InvalidArgumentError("Both date/time arguments are required", argument="minuend/subtrahend")
    return diff_datetime(_parse_iso(minuend), _parse_iso(subtrahend), component)


__all__ = [
    "DateComponent",
    "diff_datetime",
    "diff_datetime_iso",
    "get_component",
]
