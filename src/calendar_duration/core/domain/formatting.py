"""
Форматирование CalendarDuration в английскую фразу

Правила:
- только ненулевые компоненты, в порядке years → months → days
- "<N> year" при N = 1, иначе "<N> years" (аналогично month/day)
- компоненты соединяются через ", "
- направленный вариант: " ago" для PAST, " to go" для FUTURE
- нулевая длительность: "same day"
"""

from dataclasses import dataclass
from typing import List, Optional

from calendar_duration.core.calendar.capability import CalendarInvariantViolation
from calendar_duration.core.domain.duration import CalendarDuration, DurationOrder


@dataclass(frozen=True)
class DurationTextConfig:
    """Шаблон английской фразы"""

    separator: str = ", "
    past_suffix: str = " ago"
    future_suffix: str = " to go"
    same_day: str = "same day"


DEFAULT_TEXT_CONFIG = DurationTextConfig()


def _unit(count: int, noun: str) -> str:
    if count == 1:
        return f"1 {noun}"
    return f"{count} {noun}s"


def format_duration(
    duration: CalendarDuration, config: Optional[DurationTextConfig] = None
) -> str:
    """
    Рендеринг длительности.

    Args:
        duration: Календарная длительность
        config: Шаблон фразы (default: DEFAULT_TEXT_CONFIG)

    Returns:
        Фраза без завершающей пунктуации

    Raises:
        CalendarInvariantViolation: Если ненулевая длительность имеет order=SAME

    Examples:
        >>> format_duration(CalendarDuration(years=31, months=9, days=23))
        '31 years, 9 months, 23 days'
        >>> format_duration(CalendarDuration(years=1, order=DurationOrder.PAST))
        '1 year ago'
    """
    config = config or DEFAULT_TEXT_CONFIG

    parts: List[str] = []
    if duration.years > 0:
        parts.append(_unit(duration.years, "year"))
    if duration.months > 0:
        parts.append(_unit(duration.months, "month"))
    if duration.days > 0:
        parts.append(_unit(duration.days, "day"))

    if not parts:
        return config.same_day

    text = config.separator.join(parts)

    if duration.order is DurationOrder.PAST:
        return text + config.past_suffix
    if duration.order is DurationOrder.FUTURE:
        return text + config.future_suffix
    if duration.order is DurationOrder.SAME:
        raise CalendarInvariantViolation("unexpected equal ordering with nonzero duration")
    return text
