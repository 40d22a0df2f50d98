"""Kernel time – time-zone id resolution.

Accepted ids:

* ``UTC`` / ``Z``
* IANA region names (``Europe/London``, ``America/New_York``)
* fixed offsets ``±h``, ``±hh``, ``±hh:mm``, ``±hhmm``, ``±hh:mm:ss``,
  ``±hhmmss`` within ``-18:00`` .. ``+18:00`` inclusive
"""
from __future__ import annotations

import functools
import re
from datetime import UTC, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fix_commons.kernel.errors import InvalidArgumentError

_OFFSET_FORMATS = (
    re.compile(r"^(?P<sign>[+-])(?P<h>[0-9]{1,2})$"),
    re.compile(r"^(?P<sign>[+-])(?P<h>[0-9]{2}):(?P<m>[0-9]{2})$"),
    re.compile(r"^(?P<sign>[+-])(?P<h>[0-9]{2})(?P<m>[0-9]{2})$"),
    re.compile(r"^(?P<sign>[+-])(?P<h>[0-9]{2}):(?P<m>[0-9]{2}):(?P<s>[0-9]{2})$"),
    re.compile(r"^(?P<sign>[+-])(?P<h>[0-9]{2})(?P<m>[0-9]{2})(?P<s>[0-9]{2})$"),
)
_MAX_OFFSET = timedelta(hours=18)


def _parse_offset(zone_id: str) -> timezone | None:
    for fmt in _OFFSET_FORMATS:
        match = fmt.match(zone_id)
        if match is None:
            continue
        parts = match.groupdict()
        minutes = int(parts.get("m") or 0)
        seconds = int(parts.get("s") or 0)
        if minutes > 59 or seconds > 59:
            return None
        offset = timedelta(hours=int(match.group("h")), minutes=minutes, seconds=seconds)
        if offset > _MAX_OFFSET:
            return None
        if match.group("sign") == "-":
            offset = -offset
        return timezone(offset)
    return None


@functools.lru_cache(maxsize=128)
def resolve_zone(zone_id: str) -> tzinfo:
    """Return the ``tzinfo`` named by *zone_id*.

    Raises :class:`InvalidArgumentError` for anything unrecognised.
    """
    if not isinstance(zone_id, str) or not zone_id.strip():
        raise InvalidArgumentError("Time zone id must be a non-empty string", argument="zone_id", value=zone_id)
    key = zone_id.strip()
    if key in ("UTC", "Z"):
        return UTC
    if key[0] in "+-":
        offset = _parse_offset(key)
        if offset is None:
            raise InvalidArgumentError(f"Invalid zone offset {zone_id!r}", argument="zone_id", value=zone_id)
        return offset
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidArgumentError(
            f"Unknown time zone {zone_id!r}", argument="zone_id", value=zone_id, cause=exc
        ) from exc


__all__ = ["resolve_zone"]
