"""
calendar-duration — календарная длительность между двумя датами.

Длительность раскладывается на целые годы, месяцы и дни с учётом реальной
длины пройденных месяцев и лет, и выводится английской фразой:

    >>> from datetime import date
    >>> str(calendar_duration_from(date(2020, 4, 8), date(1988, 6, 16)))
    '31 years, 9 months, 23 days ago'
"""

from calendar_duration.core.calendar import (
    CalendarInvariantViolation,
    DateCapability,
    DateOutOfRange,
    DateRangeExhausted,
    StdlibDateCapability,
    calendar_duration_between,
    calendar_duration_from,
    capability_for,
    decompose,
    register_capability,
)
from calendar_duration.core.domain import (
    DEFAULT_TEXT_CONFIG,
    CalendarDuration,
    DurationOrder,
    DurationTextConfig,
    format_duration,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarInvariantViolation",
    "DateRangeExhausted",
    "DateOutOfRange",
    "DateCapability",
    "StdlibDateCapability",
    "capability_for",
    "register_capability",
    "decompose",
    "calendar_duration_from",
    "calendar_duration_between",
    "CalendarDuration",
    "DurationOrder",
    "DurationTextConfig",
    "DEFAULT_TEXT_CONFIG",
    "format_duration",
]
