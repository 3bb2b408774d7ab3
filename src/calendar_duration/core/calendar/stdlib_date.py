"""
DateCapability для datetime.date

Примитивы поверх стандартного типа даты. Диапазон: date.min .. date.max
(годы 1..9999). Год вне диапазона даёт DateOutOfRange, а не None: такая
дата существует в календаре, но не в типе.
"""

from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Final, Optional, Tuple

from calendar_duration.core.calendar.capability import (
    DateCapability,
    DateOutOfRange,
    DateRangeExhausted,
    register_capability,
)

ONE_DAY: Final[timedelta] = timedelta(days=1)


class StdlibDateCapability(DateCapability[date]):
    """Примитивы для datetime.date"""

    def ymd(self, value: date) -> Tuple[int, int, int]:
        return value.year, value.month, value.day

    def from_ymd(self, year: int, month: int, day: int) -> Optional[date]:
        if not MINYEAR <= year <= MAXYEAR:
            raise DateOutOfRange(f"year {year} outside {MINYEAR}..{MAXYEAR}")
        try:
            return date(year, month, day)
        except ValueError:
            return None

    def succ(self, value: date) -> date:
        try:
            return value + ONE_DAY
        except OverflowError as exc:
            raise DateRangeExhausted(f"no date after {value.isoformat()}") from exc


register_capability(date, StdlibDateCapability())
