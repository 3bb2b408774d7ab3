"""
DateCapability — Контракт внешнего типа даты

Ядро не владеет представлением даты. Любой тип даты подключается через
реализацию DateCapability, которая предоставляет ровно четыре операции:
- ymd(date) → (year, month, day)
- from_ymd(year, month, day) → date | None
- succ(date) → следующий день
- сравнение и равенство (берутся у самого типа даты)

Поверх этих операций определён roll-forward конструктор from_ymd_or_next,
который превращает несуществующую дату (30 февраля, 31 апреля) в ближайшую
допустимую более позднюю дату.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. from_ymd_or_next — тотальная функция для month ∈ 1..12, day ∈ 1..31
2. Любой другой отказ конструктора — CalendarInvariantViolation
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Final, Generic, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

D = TypeVar("D")

# Месяцы, участвующие в roll-forward правилах
FEBRUARY: Final[int] = 2
MARCH: Final[int] = 3
DECEMBER: Final[int] = 12

# День, переполнение которого в 30-дневном месяце переносится на 30-е число
LONG_MONTH_LAST_DAY: Final[int] = 31
SHORT_MONTH_LAST_DAY: Final[int] = 30


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalendarInvariantViolation(RuntimeError):
    """
    Нарушение внутреннего инварианта календарной арифметики.

    Возникает, когда:
    1. Roll-forward конструктор не смог построить дату по неизвестной причине
    2. Форматтеру передана ненулевая длительность с order=SAME

    Это ошибка программирования, а не ожидаемый результат работы.
    Ядро никогда не перехватывает это исключение.
    """

    pass


class DateRangeExhausted(CalendarInvariantViolation):
    """
    Попытка перейти за максимальную представимую дату.

    Длительности, выходящие за диапазон типа даты, не определены.
    """

    pass


class DateOutOfRange(LookupError):
    """
    Год кандидата лежит за пределами диапазона типа даты.

    Не ошибка: такой кандидат позже любой представимой даты, и декомпозиция
    завершает на нём фазу лет или месяцев.
    """

    pass


# =============================================================================
# CAPABILITY
# =============================================================================


class DateCapability(ABC, Generic[D]):
    """
    Набор календарных примитивов для конкретного типа даты.

    Реализации не хранят состояния; один экземпляр можно разделять
    между потоками.
    """

    @abstractmethod
    def ymd(self, value: D) -> Tuple[int, int, int]:
        """
        Разложение даты на компоненты.

        Args:
            value: Дата

        Returns:
            (year, month, day), месяц и день с единицы
        """

    @abstractmethod
    def from_ymd(self, year: int, month: int, day: int) -> Optional[D]:
        """
        Построение даты по компонентам.

        Returns:
            Дата, либо None, если такой даты не существует

        Raises:
            DateOutOfRange: Если год вне диапазона типа даты
        """

    @abstractmethod
    def succ(self, value: D) -> D:
        """
        Следующий день.

        Raises:
            DateRangeExhausted: Если value — максимальная представимая дата
        """

    def from_ymd_or_next(self, year: int, month: int, day: int) -> D:
        """
        Roll-forward конструктор.

        Если дата существует, возвращается она сама. Иначе:
        - 29/30/31 февраля → 1 марта того же года
        - 31-е число 30-дневного месяца → 30-е число следующего месяца
          (декабрь переходит в январь следующего года)

        Args:
            year: Год
            month: Месяц (1..12)
            day: День (1..31)

        Returns:
            Существующая дата

        Raises:
            CalendarInvariantViolation: Если отказ не покрывается правилами выше
            DateOutOfRange: Если год кандидата вне диапазона типа даты

        Examples:
            >>> cap.from_ymd_or_next(2025, 2, 30)
            datetime.date(2025, 3, 1)
            >>> cap.from_ymd_or_next(2025, 4, 31)
            datetime.date(2025, 5, 30)
        """
        value = self.from_ymd(year, month, day)
        if value is not None:
            return value

        if month == FEBRUARY and day >= 29:
            rolled = self.from_ymd(year, MARCH, 1)
        elif day == LONG_MONTH_LAST_DAY:
            if month == DECEMBER:
                rolled = self.from_ymd(year + 1, 1, SHORT_MONTH_LAST_DAY)
            else:
                rolled = self.from_ymd(year, month + 1, SHORT_MONTH_LAST_DAY)
        else:
            rolled = None

        if rolled is None:
            raise CalendarInvariantViolation(
                f"constructing a date for ({year},{month},{day}) failed for unknown reason"
            )

        logger.debug("rolled (%d,%d,%d) forward to %s", year, month, day, rolled)
        return rolled


# =============================================================================
# REGISTRY
# =============================================================================

# Точный тип даты → реализация примитивов
_REGISTRY: Dict[type, DateCapability[Any]] = {}


def register_capability(date_type: type, capability: DateCapability[Any]) -> None:
    """
    Регистрация примитивов для типа даты.

    Поиск выполняется по точному типу: подклассы (например, datetime.datetime
    для datetime.date) нужно регистрировать отдельно.

    Args:
        date_type: Конкретный тип даты
        capability: Реализация DateCapability для этого типа
    """
    _REGISTRY[date_type] = capability
    logger.debug("registered %s for %s", type(capability).__name__, date_type.__qualname__)


def capability_for(value: Any) -> DateCapability[Any]:
    """
    Поиск примитивов для значения даты.

    Raises:
        TypeError: Если для типа значения ничего не зарегистрировано
    """
    try:
        return _REGISTRY[type(value)]
    except KeyError:
        raise TypeError(
            f"no DateCapability registered for {type(value).__qualname__}"
        ) from None
