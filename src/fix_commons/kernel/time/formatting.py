"""Kernel time – date/time format patterns.

Format patterns use the letters of ``java.time.format.DateTimeFormatter``,
the notation counterparties and FIX tooling quote in their specs::

    yyyyMMdd-HH:mm:ss.SSS    ->  20170530-14:05:13.801

Supported letters (repeat a letter to choose the width or text style):

====  ==================================  =========================
Sym   Meaning                             Examples
====  ==================================  =========================
y u   year                                2004; 04
M L   month-of-year                       7; 07; Jul; July
d     day-of-month                        10
D     day-of-year                         189
E     day-of-week                         Tue; Tuesday
a     am-pm-of-day                        PM
H     hour-of-day (0-23)                  0
k     clock-hour-of-day (1-24)            24
K     hour-of-am-pm (0-11)                0
h     clock-hour-of-am-pm (1-12)          12
m     minute-of-hour                      30
s     second-of-minute                    55
S     fraction-of-second                  978
n     nano-of-second                      987654000
A     milli-of-day                        1234
N     nano-of-day                         1234000000
VV    time-zone id                        America/Los_Angeles; Z
z     time-zone name                      PST; UTC
Z     zone-offset                         +0000; GMT+08:00; -08:00
X     zone-offset, ``Z`` for zero         Z; -08; -0830; -08:30
x     zone-offset                         +00; -0830; -08:30
'     escape for text
''    single quote
====  ==================================  =========================

Month and day names are English. Parsing fills missing fields from
``1970-01-01T00:00``; a parsed zone or offset yields an aware value.
Optional sections (``[``, ``]``) are not supported.
"""
from __future__ import annotations

import dataclasses
import functools
import re
from datetime import UTC, date, datetime, time, timedelta, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from fix_commons.kernel.errors import InvalidArgumentError, ParseError
from fix_commons.kernel.time.convert import to_aware_utc
from fix_commons.kernel.time.modify import as_naive_utc, modify_datetime, modify_datetime_in_zone
from fix_commons.kernel.time.zones import resolve_zone

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Patterns tried by ``to_datetime`` when no format is given, keyed by length.
AUTO_PATTERNS: dict[int, str] = {
    4: "yyyy",
    7: "yyyy-MM",
    10: "yyyy-MM-dd",
    13: "yyyy-MM-dd HH",
    16: "yyyy-MM-dd HH:mm",
    19: "yyyy-MM-dd HH:mm:ss",
    23: "yyyy-MM-dd HH:mm:ss.SSS",
    29: "yyyy-MM-dd HH:mm:ss.SSS Z",
}

_COUNTS: dict[str, range] = {
    "y": range(1, 10),
    "u": range(1, 10),
    "M": range(1, 5),
    "L": range(1, 5),
    "d": range(1, 3),
    "D": range(1, 4),
    "E": range(1, 5),
    "a": range(1, 2),
    "H": range(1, 3),
    "k": range(1, 3),
    "K": range(1, 3),
    "h": range(1, 3),
    "m": range(1, 3),
    "s": range(1, 3),
    "S": range(1, 10),
    "n": range(1, 10),
    "A": range(1, 20),
    "N": range(1, 20),
    "V": range(2, 3),
    "z": range(1, 5),
    "Z": range(1, 6),
    "X": range(1, 6),
    "x": range(1, 6),
}
_ZONED_LETTERS = frozenset("VzZXx")
_RESERVED = frozenset("[]{}#")
_TWO_DIGITS = {1: r"\d{1,2}", 2: r"\d{2}"}
_OFFSET_RE = {
    1: r"[+\-]\d{2}(?:\d{2})?",
    2: r"[+\-]\d{4}",
    3: r"[+\-]\d{2}:\d{2}",
    4: r"[+\-]\d{4}(?:\d{2})?",
    5: r"[+\-]\d{2}:\d{2}(?::\d{2})?",
}
_ZONE_ID_RE = r"Z|[+\-]\d{1,2}(?::?\d{2}){0,2}|[A-Za-z][A-Za-z0-9_+\-]*(?:/[A-Za-z0-9_+\-]+)*"
_MAX_OFFSET = timedelta(hours=18)
_TIME_ANCHOR = date(1970, 1, 1)
_DAY_MICROS = 86_400_000_000


@dataclasses.dataclass(frozen=True, slots=True)
class _Token:
    letter: str
    count: int = 0
    text: str = ""


def _bad_pattern(pattern: str, reason: str) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"Invalid format pattern {pattern!r}: {reason}", argument="format_pattern", value=pattern
    )


def _tokenize(pattern: str) -> list[_Token]:
    tokens: list[_Token] = []
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch.isascii() and ch.isalpha():
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            if ch not in _COUNTS:
                raise _bad_pattern(pattern, f"unsupported letter {ch!r}")
            if j - i not in _COUNTS[ch]:
                raise _bad_pattern(pattern, f"too many or too few {ch!r}")
            tokens.append(_Token(ch, j - i))
            i = j
        elif ch == "'":
            if pattern.startswith("''", i):
                tokens.append(_Token("", text="'"))
                i += 2
                continue
            chunk: list[str] = []
            j = i + 1
            while True:
                if j >= n:
                    raise _bad_pattern(pattern, "unterminated quote")
                if pattern.startswith("''", j):
                    chunk.append("'")
                    j += 2
                elif pattern[j] == "'":
                    break
                else:
                    chunk.append(pattern[j])
                    j += 1
            tokens.append(_Token("", text="".join(chunk)))
            i = j + 1
        elif ch in _RESERVED:
            raise _bad_pattern(pattern, f"reserved character {ch!r}")
        else:
            tokens.append(_Token("", text=ch))
            i += 1
    return tokens


def _pad(number: int, width: int) -> str:
    return f"{number:0{width}d}"


def _zone_id(zone: tzinfo | None, value: datetime) -> str:
    if isinstance(zone, ZoneInfo):
        return zone.key
    offset = value.utcoffset() or timedelta(0)
    return "Z" if not offset else _render_offset("x", 5, offset)


def _render_offset(letter: str, count: int, offset: timedelta) -> str:
    total = int(offset.total_seconds())
    if total == 0 and (letter == "X" or (letter == "Z" and count == 5)):
        return "Z"
    if letter == "Z" and count == 4 and total == 0:
        return "GMT"
    sign = "+" if total >= 0 else "-"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    hh, mm, ss = f"{hours:02d}", f"{minutes:02d}", f"{seconds:02d}"
    if letter == "Z":
        if count <= 3:
            return f"{sign}{hh}{mm}"
        if count == 4:
            return f"GMT{sign}{hh}:{mm}"
        return f"{sign}{hh}:{mm}" + (f":{ss}" if seconds else "")
    match count:
        case 1:
            return f"{sign}{hh}" + (mm if minutes else "")
        case 2:
            return f"{sign}{hh}{mm}"
        case 3:
            return f"{sign}{hh}:{mm}"
        case 4:
            return f"{sign}{hh}{mm}" + (ss if seconds else "")
    return f"{sign}{hh}:{mm}" + (f":{ss}" if seconds else "")


def _parse_offset(raw: str) -> tzinfo:
    if raw in ("Z", "GMT"):
        return UTC
    digits = raw.removeprefix("GMT").replace(":", "")
    sign, digits = digits[0], digits[1:]
    offset = timedelta(
        hours=int(digits[0:2]),
        minutes=int(digits[2:4] or 0),
        seconds=int(digits[4:6] or 0),
    )
    if int(digits[2:4] or 0) > 59 or int(digits[4:6] or 0) > 59 or offset > _MAX_OFFSET:
        raise ValueError(f"offset {raw!r} is out of range")
    return timezone(-offset if sign == "-" else offset)


def _micros_of_day(value: datetime) -> int:
    return ((value.hour * 60 + value.minute) * 60 + value.second) * 1_000_000 + value.microsecond


class DateTimeFormat:
    """A compiled format pattern that formats and parses date/times.

    Example::

        fmt = DateTimeFormat("yyyyMMdd-HH:mm:ss.SSS")
        fmt.format(datetime(2017, 5, 30, 14, 5, 13, 801_000))  # '20170530-14:05:13.801'
        fmt.parse("20170530-14:05:13.801")                     # datetime(2017, 5, 30, 14, 5, 13, 801000)
    """

    def __init__(self, pattern: str) -> None:
        if not isinstance(pattern, str) or not pattern:
            raise InvalidArgumentError(
                "Format pattern must be a non-empty string", argument="format_pattern", value=pattern
            )
        self.pattern = pattern
        self._tokens = _tokenize(pattern)
        self._regex = re.compile(
            "".join(f"(?P<g{index}>{self._token_regex(token)})" for index, token in enumerate(self._tokens))
        )

    def __repr__(self) -> str:
        return f"DateTimeFormat({self.pattern!r})"

    @property
    def is_zoned(self) -> bool:
        """Whether formatting needs an aware value (zone or offset letters)."""
        return any(token.letter in _ZONED_LETTERS for token in self._tokens)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, value: datetime) -> str:
        """Render *value*; zone/offset letters require an aware value."""
        if value.tzinfo is None and self.is_zoned:
            raise InvalidArgumentError(
                f"Format pattern {self.pattern!r} needs a zone but {value.isoformat()} is naive",
                argument="value",
                value=value.isoformat(),
            )
        return "".join(self._render(token, value) for token in self._tokens)

    def _render(self, token: _Token, value: datetime) -> str:  # noqa: PLR0911
        count = token.count
        match token.letter:
            case "":
                return token.text
            case "y" | "u":
                return f"{value.year % 100:02d}" if count == 2 else _pad(value.year, count)
            case "M" | "L":
                if count >= 3:
                    name = _MONTH_NAMES[value.month - 1]
                    return name if count == 4 else name[:3]
                return _pad(value.month, count)
            case "d":
                return _pad(value.day, count)
            case "D":
                return _pad(value.timetuple().tm_yday, count)
            case "E":
                name = _DAY_NAMES[value.weekday()]
                return name if count == 4 else name[:3]
            case "a":
                return "AM" if value.hour < 12 else "PM"
            case "H":
                return _pad(value.hour, count)
            case "k":
                return _pad(value.hour or 24, count)
            case "K":
                return _pad(value.hour % 12, count)
            case "h":
                return _pad(value.hour % 12 or 12, count)
            case "m":
                return _pad(value.minute, count)
            case "s":
                return _pad(value.second, count)
            case "S":
                return f"{value.microsecond * 1_000:09d}"[:count]
            case "n":
                return _pad(value.microsecond * 1_000, count)
            case "A":
                return _pad(_micros_of_day(value) // 1_000, count)
            case "N":
                return _pad(_micros_of_day(value) * 1_000, count)
            case "V":
                return _zone_id(value.tzinfo, value)
            case "z":
                return value.tzname() or _zone_id(value.tzinfo, value)
        return _render_offset(token.letter, count, value.utcoffset() or timedelta(0))

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def _token_regex(token: _Token) -> str:  # noqa: PLR0911
        count = token.count
        match token.letter:
            case "":
                return re.escape(token.text)
            case "y" | "u":
                if count == 2:
                    return r"\d{2}"
                return r"\d{1,4}" if count < 4 else rf"\d{{{count}}}"
            case "M" | "L":
                if count >= 3:
                    names = _MONTH_NAMES if count == 4 else [name[:3] for name in _MONTH_NAMES]
                    return "|".join(names)
                return _TWO_DIGITS[count]
            case "d" | "H" | "k" | "K" | "h" | "m" | "s":
                return _TWO_DIGITS[count]
            case "D":
                return {1: r"\d{1,3}", 2: r"\d{2,3}", 3: r"\d{3}"}[count]
            case "E":
                return "|".join(_DAY_NAMES if count == 4 else [name[:3] for name in _DAY_NAMES])
            case "a":
                return "AM|PM"
            case "S":
                return rf"\d{{{count}}}"
            case "n":
                return rf"\d{{{count},9}}"
            case "A" | "N":
                return rf"\d{{{count},}}"
            case "V":
                return _ZONE_ID_RE
            case "z":
                return r"[A-Za-z][A-Za-z0-9_+\-/]*"
            case "Z":
                if count <= 3:
                    return r"[+\-]\d{4}"
                if count == 4:
                    return r"GMT(?:[+\-]\d{2}:\d{2})?"
                return "Z|" + _OFFSET_RE[5]
        prefix = "Z|" if token.letter == "X" else ""
        return prefix + _OFFSET_RE[count]

    def parse(self, text: str) -> datetime:
        """Parse *text*; the result is aware only when the pattern carries a zone."""
        if not isinstance(text, str):
            raise InvalidArgumentError("Date/time text must be a string", argument="source", value=text)
        match = self._regex.fullmatch(text)
        if match is None:
            raise ParseError(
                f"{text!r} does not match format pattern {self.pattern!r}", source=text, fragment=text
            )
        fields: dict[str, Any] = {}
        try:
            for index, token in enumerate(self._tokens):
                if token.letter:
                    self._store(token, match.group(f"g{index}"), fields)
            return self._resolve(fields)
        except (InvalidArgumentError, ValueError, OverflowError) as exc:
            raise ParseError(
                f"Invalid date/time value {text!r} for pattern {self.pattern!r}: {exc}",
                source=text,
                fragment=text,
                cause=exc,
            ) from exc

    @staticmethod
    def _store(token: _Token, raw: str, fields: dict[str, Any]) -> None:  # noqa: PLR0912
        match token.letter:
            case "y" | "u":
                fields["year"] = int(raw) + (2000 if token.count == 2 else 0)
            case "M" | "L":
                if token.count >= 3:
                    names = _MONTH_NAMES if token.count == 4 else [name[:3] for name in _MONTH_NAMES]
                    fields["month"] = names.index(raw) + 1
                else:
                    fields["month"] = int(raw)
            case "d":
                fields["day"] = int(raw)
            case "D":
                fields["day_of_year"] = int(raw)
            case "E":
                names = _DAY_NAMES if token.count == 4 else [name[:3] for name in _DAY_NAMES]
                fields["weekday"] = names.index(raw)
            case "a":
                fields["pm"] = raw == "PM"
            case "H":
                fields["hour"] = int(raw)
            case "k":
                fields["hour"] = 0 if int(raw) == 24 else int(raw)
            case "K" | "h":
                fields["hour12"] = int(raw) % 12
            case "m":
                fields["minute"] = int(raw)
            case "s":
                fields["second"] = int(raw)
            case "S":
                fields["microsecond"] = int(raw.ljust(9, "0")[:6])
            case "n":
                fields["microsecond"] = int(raw) // 1_000
            case "A":
                fields["micros_of_day"] = int(raw) * 1_000
            case "N":
                fields["micros_of_day"] = int(raw) // 1_000
            case "V" | "z":
                fields["zone"] = resolve_zone(raw)
            case _:
                fields["zone"] = _parse_offset(raw)

    @staticmethod
    def _resolve(fields: dict[str, Any]) -> datetime:
        year = fields.get("year", _TIME_ANCHOR.year)
        if "day_of_year" in fields:
            day = date(year, 1, 1) + timedelta(days=fields["day_of_year"] - 1)
            if day.year != year:
                raise ValueError(f"day-of-year {fields['day_of_year']} is out of range for {year}")
            if fields.get("month", day.month) != day.month or fields.get("day", day.day) != day.day:
                raise ValueError("day-of-year disagrees with month/day")
        else:
            day = date(year, fields.get("month", 1), fields.get("day", 1))
        if "micros_of_day" in fields:
            micros = fields["micros_of_day"]
            if micros >= _DAY_MICROS:
                raise ValueError("time of day is out of range")
            moment = datetime.combine(day, time()) + timedelta(microseconds=micros)
        else:
            hour = fields.get("hour")
            if hour is None:
                hour = fields.get("hour12", 0) + (12 if fields.get("pm") else 0)
            moment = datetime.combine(
                day,
                time(hour, fields.get("minute", 0), fields.get("second", 0), fields.get("microsecond", 0)),
            )
        if "weekday" in fields and fields["weekday"] != moment.weekday():
            raise ValueError(f"{moment.date().isoformat()} is not a {_DAY_NAMES[fields['weekday']]}")
        zone = fields.get("zone")
        return moment if zone is None else moment.replace(tzinfo=zone)


@functools.lru_cache(maxsize=64)
def compile_format(pattern: str) -> DateTimeFormat:
    """Cached :class:`DateTimeFormat` for *pattern*."""
    return DateTimeFormat(pattern)


def detect_format(source: str) -> str:
    """Pick the :data:`AUTO_PATTERNS` entry matching the length of *source*."""
    if not isinstance(source, str):
        raise InvalidArgumentError("Date/time text must be a string", argument="source", value=source)
    try:
        return AUTO_PATTERNS[len(source)]
    except KeyError:
        raise InvalidArgumentError(
            f"Unsupported date format {source!r}", argument="source", value=source
        ) from None


def to_datetime(
    source: str,
    format_pattern: str | None = None,
    modify_pattern: str | None = None,
    zone_id: str | None = None,
) -> datetime:
    """Parse *source* into a naive UTC date/time, then apply *modify_pattern*.

    Without *format_pattern* the format is detected from the length of
    *source* (``2000-01-01``, ``2000-01-01 00:00:00.000 -0700`` ...). Parsed
    offsets are converted to UTC. With *zone_id* the modification happens on
    that zone's wall clock.
    """
    pattern = format_pattern if format_pattern is not None else detect_format(source)
    value = as_naive_utc(compile_format(pattern).parse(source))
    if zone_id is not None:
        return modify_datetime_in_zone(value, modify_pattern, zone_id)
    return modify_datetime(value, modify_pattern)


def format_datetime(
    value: datetime,
    format_pattern: str,
    modify_pattern: str | None = None,
    zone_id: str | None = None,
) -> str:
    """Apply *modify_pattern* to *value* and render it with *format_pattern*.

    With *zone_id*, *value* is read as UTC (naive) or converted to UTC
    (aware), modified on the zone's wall clock and rendered in that zone, so
    zone and offset letters are available.
    """
    fmt = compile_format(format_pattern)
    if zone_id is None:
        return fmt.format(modify_datetime(value, modify_pattern))
    modified = modify_datetime_in_zone(value, modify_pattern, zone_id)
    return fmt.format(to_aware_utc(modified).astimezone(resolve_zone(zone_id)))


def format_date(
    value: date,
    format_pattern: str,
    modify_pattern: str | None = None,
    zone_id: str | None = None,
) -> str:
    """:func:`format_datetime` for midnight of *value*."""
    return format_datetime(datetime.combine(value, time()), format_pattern, modify_pattern, zone_id)


def format_time(
    value: time,
    format_pattern: str,
    modify_pattern: str | None = None,
    zone_id: str | None = None,
) -> str:
    """:func:`format_datetime` for *value* on 1970-01-01."""
    return format_datetime(datetime.combine(_TIME_ANCHOR, value), format_pattern, modify_pattern, zone_id)


def modify_formatted(
    source: str,
    format_pattern: str,
    modify_pattern: str | None,
    zone_id: str | None = None,
) -> str:
    """Parse *source*, modify it and render it back with the same pattern.

    Without *zone_id* a parsed offset is kept as is; with it the value is
    read as UTC and rendered in *zone_id* like :func:`format_datetime`.
    """
    fmt = compile_format(format_pattern)
    if zone_id is not None:
        return format_datetime(as_naive_utc(fmt.parse(source)), format_pattern, modify_pattern, zone_id)
    return fmt.format(modify_datetime(fmt.parse(source), modify_pattern))


__all__ = [
    "AUTO_PATTERNS",
    "DateTimeFormat",
    "compile_format",
    "detect_format",
    "format_date",
    "format_datetime",
    "format_time",
    "modify_formatted",
    "to_datetime",
]
