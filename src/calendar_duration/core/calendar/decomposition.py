"""
Декомпозиция интервала между датами на годы, месяцы и дни

Жадный алгоритм, привязанный к более ранней дате (anchor):
1. Годы: шаг вперёд, пока anchor + 1 год (через roll-forward) не позже later
2. Месяцы: то же самое помесячно от результата фазы лет
3. Дни: пошагово через succ до совпадения с later

День месяца исходного anchor не меняется между фазами, roll-forward
подправляет только построенные кандидаты. Поэтому результат несимметричен
относительно выбора anchor: например, 2000-06-30 → 2000-08-31 даёт
"2 months, 1 day", а 2000-07-01 → 2000-08-31 даёт "1 month, 30 days".

Сложность: O(years + months + days).
"""

import logging
from typing import Any, Optional, Tuple, TypeVar

from calendar_duration.core.calendar.capability import (
    DECEMBER,
    DateCapability,
    DateOutOfRange,
    capability_for,
)
from calendar_duration.core.domain.duration import CalendarDuration, DurationOrder

logger = logging.getLogger(__name__)

D = TypeVar("D")


def _resolve_capability(first: Any, second: Any) -> DateCapability[Any]:
    if type(first) is not type(second):
        raise TypeError(
            f"cannot compare {type(first).__qualname__} with {type(second).__qualname__}"
        )
    return capability_for(first)


def _probe(capability: DateCapability[D], year: int, month: int, day: int) -> Optional[D]:
    """Кандидат фазы лет или месяцев; None, если он за пределами типа даты"""
    try:
        return capability.from_ymd_or_next(year, month, day)
    except DateOutOfRange:
        logger.debug("candidate (%d,%d,%d) beyond date range", year, month, day)
        return None


def decompose(
    first: D, second: D, capability: DateCapability[D]
) -> Tuple[int, int, int]:
    """
    Жадная декомпозиция интервала.

    Порядок аргументов не важен: anchor — всегда более ранняя дата.

    Args:
        first: Первая дата
        second: Вторая дата
        capability: Календарные примитивы для типа дат

    Returns:
        (years, months, days), months ∈ 0..11

    Raises:
        CalendarInvariantViolation: При нарушении roll-forward инварианта
        DateRangeExhausted: Если шаг по дням выходит за диапазон типа

    Кандидат за пределами диапазона типа (год 10000 для datetime.date)
    позже любой представимой даты и просто завершает фазу.
    """
    if first > second:
        later, earlier = first, second
    else:
        later, earlier = second, first

    y, m, d = capability.ymd(earlier)

    years = 0
    while True:
        candidate = _probe(capability, y + 1, m, d)
        if candidate is None or later < candidate:
            break
        years += 1
        y += 1
        earlier = candidate

    months = 0
    while True:
        next_y, next_m = (y + 1, 1) if m == DECEMBER else (y, m + 1)
        candidate = _probe(capability, next_y, next_m, d)
        if candidate is None or later < candidate:
            break
        months += 1
        y, m = next_y, next_m
        earlier = candidate

    days = 0
    while later > earlier:
        days += 1
        earlier = capability.succ(earlier)

    logger.debug("decomposed %s..%s into %d/%d/%d", first, second, years, months, days)
    return years, months, days


def calendar_duration_from(
    first: D, second: D, capability: Optional[DateCapability[D]] = None
) -> CalendarDuration:
    """
    Направленная календарная длительность first относительно second.

    Args:
        first: Дата, от которой ведётся отсчёт
        second: Опорная дата
        capability: Примитивы (default: из реестра по типу дат)

    Returns:
        CalendarDuration с order:
        - PAST если first > second
        - FUTURE если first < second
        - SAME если даты равны

    Raises:
        TypeError: Если типы дат различаются или не зарегистрированы

    Examples:
        >>> str(calendar_duration_from(date(2020, 4, 8), date(1988, 6, 16)))
        '31 years, 9 months, 23 days ago'
    """
    capability = capability or _resolve_capability(first, second)

    if first > second:
        order = DurationOrder.PAST
    elif first < second:
        order = DurationOrder.FUTURE
    else:
        order = DurationOrder.SAME

    years, months, days = decompose(first, second, capability)
    return CalendarDuration(years=years, months=months, days=days, order=order)


def calendar_duration_between(
    first: D, second: D, capability: Optional[DateCapability[D]] = None
) -> CalendarDuration:
    """
    Ненаправленная календарная длительность между двумя датами (order=None).

    Examples:
        >>> str(calendar_duration_between(date(2000, 8, 31), date(2000, 6, 30)))
        '2 months, 1 day'
    """
    capability = capability or _resolve_capability(first, second)
    years, months, days = decompose(first, second, capability)
    return CalendarDuration(years=years, months=months, days=days)
