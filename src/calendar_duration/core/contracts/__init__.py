"""
Contract Validation Module

Модуль для валидации JSON контрактов calendar-duration.
"""

from .validators import (
    CalendarDurationValidator,
    ContractValidator,
    SchemaLoader,
    validate_calendar_duration,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalendarDurationValidator",
    # Functions
    "validate_calendar_duration",
]
