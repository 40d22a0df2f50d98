"""Kernel time – Clock port, modify patterns, zones, formats, business days, components."""
from fix_commons.kernel.time.business import (
    DEFAULT_WEEKENDS,
    adjust_to_business_days,
    business_datetime,
    parse_weekends,
)
from fix_commons.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    to_epoch_millis,
    utc_time_nanos,
)
from fix_commons.kernel.time.components import (
    DateComponent,
    diff_datetime,
    diff_datetime_iso,
    get_component,
)
from fix_commons.kernel.time.convert import from_epoch_millis, merge_datetime, to_aware_utc
from fix_commons.kernel.time.formatting import (
    AUTO_PATTERNS,
    DateTimeFormat,
    compile_format,
    detect_format,
    format_date,
    format_datetime,
    format_time,
    modify_formatted,
    to_datetime,
)
from fix_commons.kernel.time.modify import (
    DateField,
    DateModifier,
    DateOperator,
    as_naive_utc,
    modify_date,
    modify_datetime,
    modify_datetime_in_zone,
    modify_time,
    parse_modify_pattern,
)
from fix_commons.kernel.time.zones import resolve_zone

__all__ = [
    "AUTO_PATTERNS",
    "Clock",
    "DEFAULT_WEEKENDS",
    "DateComponent",
    "DateField",
    "DateModifier",
    "DateOperator",
    "DateTimeFormat",
    "FrozenClock",
    "SystemClock",
    "adjust_to_business_days",
    "as_naive_utc",
    "business_datetime",
    "compile_format",
    "detect_format",
    "diff_datetime",
    "diff_datetime_iso",
    "format_date",
    "format_datetime",
    "format_time",
    "from_epoch_millis",
    "get_component",
    "merge_datetime",
    "modify_date",
    "modify_datetime",
    "modify_datetime_in_zone",
    "modify_formatted",
    "modify_time",
    "parse_modify_pattern",
    "parse_weekends",
    "resolve_zone",
    "to_aware_utc",
    "to_datetime",
    "to_epoch_millis",
    "utc_time_nanos",
]
