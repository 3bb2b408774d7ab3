"""
Доменные модели: CalendarDuration и его текстовое представление.
"""

from calendar_duration.core.domain.duration import (
    MONTHS_MAX,
    CalendarDuration,
    DurationOrder,
)
from calendar_duration.core.domain.formatting import (
    DEFAULT_TEXT_CONFIG,
    DurationTextConfig,
    format_duration,
)

__all__ = [
    # Duration model
    "MONTHS_MAX",
    "CalendarDuration",
    "DurationOrder",
    # Formatting
    "DEFAULT_TEXT_CONFIG",
    "DurationTextConfig",
    "format_duration",
]
