"""
CalendarDuration — Календарная длительность между двумя датами

Immutable Pydantic модель: целые годы, месяцы и дни, посчитанные с учётом
реальной длины пройденных месяцев и лет. Единственный результат алгоритма
декомпозиции; после создания не изменяется.

Направленный вариант дополнительно хранит order:
- PAST: первая дата позже второй ("... ago")
- FUTURE: первая дата раньше второй ("... to go")
- SAME: даты совпадают, все счётчики равны нулю
"""

from enum import Enum
from typing import Any, Dict, Final

from pydantic import BaseModel, Field, field_validator

MONTHS_MAX: Final[int] = 11


# =============================================================================
# ENUMS
# =============================================================================


class DurationOrder(str, Enum):
    """Направление длительности относительно первой даты"""

    PAST = "past"
    FUTURE = "future"
    SAME = "same"


# =============================================================================
# CALENDAR DURATION MODEL
# =============================================================================


class CalendarDuration(BaseModel):
    """
    Календарная длительность.

    Immutable модель (frozen=True). Инвариант: years = months = days = 0
    тогда и только тогда, когда исходные даты равны.

    days обычно не превышает 30. Исключение: anchor на 31-е число перед
    30-дневным месяцем: 31 апреля переносится на 30 мая, и остаток может
    дойти до 59 дней (2025-03-31 → 2025-05-29).
    """

    years: int = Field(0, ge=0, description="Целые годы")
    months: int = Field(0, ge=0, le=MONTHS_MAX, description="Целые месяцы сверх years")
    days: int = Field(0, ge=0, description="Целые дни сверх years и months")
    order: DurationOrder | None = Field(
        None, description="Направление (None — ненаправленный вариант)"
    )

    model_config = {"frozen": True}

    @field_validator("order")
    @classmethod
    def validate_same_order_is_zero(cls, v: DurationOrder | None, info) -> DurationOrder | None:
        """Проверка, что order=SAME допускается только для нулевой длительности"""
        if v is DurationOrder.SAME:
            counts = [info.data.get(name, 0) for name in ("years", "months", "days")]
            if any(counts):
                raise ValueError(f"order=same requires a zero duration, got {counts}")
        return v

    def is_zero(self) -> bool:
        """Все счётчики равны нулю"""
        return self.years == 0 and self.months == 0 and self.days == 0

    def __str__(self) -> str:
        from calendar_duration.core.domain.formatting import format_duration

        return format_duration(self)

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в JSON контракт calendar_duration.

        Returns:
            dict с years, months, days, order ("past"/"future"/"same"/None)
            и text (английская фраза)
        """
        payload = self.model_dump(mode="json")
        payload["text"] = str(self)
        return payload

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "CalendarDuration":
        """
        Восстановление модели из JSON контракта.

        Поле text игнорируется: оно всегда выводится из счётчиков.

        Raises:
            ValidationError: Если счётчики нарушают ограничения модели
        """
        return cls.model_validate(
            {key: data[key] for key in ("years", "months", "days", "order") if key in data}
        )
