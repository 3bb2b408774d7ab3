"""
Календарная арифметика: примитивы дат, roll-forward конструктор и
декомпозиция интервала на годы, месяцы и дни.

Импорт пакета регистрирует StdlibDateCapability для datetime.date.
"""

from calendar_duration.core.calendar.capability import (
    CalendarInvariantViolation,
    DateCapability,
    DateOutOfRange,
    DateRangeExhausted,
    capability_for,
    register_capability,
)
from calendar_duration.core.calendar.stdlib_date import StdlibDateCapability
from calendar_duration.core.calendar.decomposition import (
    calendar_duration_between,
    calendar_duration_from,
    decompose,
)

__all__ = [
    # Exceptions
    "CalendarInvariantViolation",
    "DateRangeExhausted",
    "DateOutOfRange",
    # Capability
    "DateCapability",
    "StdlibDateCapability",
    "capability_for",
    "register_capability",
    # Decomposition
    "decompose",
    "calendar_duration_from",
    "calendar_duration_between",
]
