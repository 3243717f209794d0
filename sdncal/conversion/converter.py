"""Converter — конверсия дат между календарями через SDN.

Надстройка над арифметическим ядром: сентинелы 0 / (0, 0, 0) заменяются
явным статусом результата, а валидность даты подтверждается законом
обратной конверсии (date → SDN → date должно вернуть исходную дату).

Ядро (sdncal.core.calendars) не меняется и сохраняет свои неполные проверки.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from sdncal.core.calendars.french import french_to_sdn, sdn_to_french
from sdncal.core.calendars.gregorian import (
    day_of_week,
    gregorian_to_sdn,
    sdn_to_gregorian,
)
from sdncal.core.domain.dates import FrenchDate, GregorianDate
from sdncal.core.domain.names import Weekday

logger = logging.getLogger(__name__)

CalendarDate = Union[GregorianDate, FrenchDate]


class CalendarKind(str, Enum):
    """Поддерживаемый календарь"""

    GREGORIAN = "gregorian"
    FRENCH = "french"


class ConversionStatus(str, Enum):
    """Исход конверсии.

    - VALID: дата существует в целевом календаре
    - INVALID_DATE: исходная дата отклонена ядром или не прошла обратную конверсию
    - OUT_OF_RANGE: SDN не имеет даты в целевом календаре
    """

    VALID = "valid"
    INVALID_DATE = "invalid_date"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class _CalendarOps:
    model: type
    to_sdn: Callable[[Any], int]
    from_sdn: Callable[[int], Any]


_CALENDARS: Dict[CalendarKind, _CalendarOps] = {
    CalendarKind.GREGORIAN: _CalendarOps(GregorianDate, gregorian_to_sdn, sdn_to_gregorian),
    CalendarKind.FRENCH: _CalendarOps(FrenchDate, french_to_sdn, sdn_to_french),
}


@dataclass(frozen=True)
class ConversionResult:
    """Результат конверсии в календарь `calendar`.

    sdn заполнен, если исходная дата валидна (в том числе при OUT_OF_RANGE);
    date заполнена только при VALID.
    """

    status: ConversionStatus
    calendar: CalendarKind
    sdn: Optional[int] = None
    date: Optional[CalendarDate] = None

    @property
    def ok(self) -> bool:
        return self.status is ConversionStatus.VALID

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация по контракту conversion_result.json."""
        return {
            "status": self.status.value,
            "calendar": self.calendar.value,
            "sdn": self.sdn,
            "date": self.date.model_dump() if self.date is not None else None,
        }


class DateConversionError(ValueError):
    """Конверсия не дала валидной даты.

    Атрибут result содержит неуспешный ConversionResult (None, если ошибка
    возникла до конверсии, например при проверке исходной даты).
    """

    def __init__(self, message: str, result: Optional[ConversionResult] = None):
        super().__init__(message)
        self.result = result


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def calendar_of(date: CalendarDate) -> CalendarKind:
    """
    Календарь, которому принадлежит модель даты.

    Raises:
        TypeError: Если объект не является поддерживаемой моделью даты
    """
    for kind, ops in _CALENDARS.items():
        if isinstance(date, ops.model):
            return kind
    raise TypeError(f"Unsupported date type: {type(date).__name__}")


def to_sdn(date: CalendarDate) -> Optional[int]:
    """
    SDN валидной даты.

    В отличие от gregorian_to_sdn / french_to_sdn, отклоняет даты,
    которые проходят неполные проверки ядра, но не переживают обратную
    конверсию (например, 31 апреля).

    Returns:
        SDN или None для невалидной даты
    """
    ops = _CALENDARS[calendar_of(date)]
    sdn = ops.to_sdn(date)
    if sdn <= 0:
        return None

    if ops.from_sdn(sdn) != date:
        logger.debug("Round trip rejected %r (sdn=%d)", date, sdn)
        return None

    return sdn


def from_sdn(sdn: int, calendar: CalendarKind) -> Optional[CalendarDate]:
    """Дата в календаре `calendar` или None, если SDN вне его диапазона."""
    date = _CALENDARS[CalendarKind(calendar)].from_sdn(sdn)
    if date.is_null:
        return None
    return date


def is_valid_date(date: CalendarDate) -> bool:
    """Существует ли дата в своём календаре."""
    return to_sdn(date) is not None


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def convert(date: CalendarDate, target: CalendarKind) -> ConversionResult:
    """
    Конверсия даты в календарь target.

    Args:
        date: Исходная дата (GregorianDate или FrenchDate)
        target: Целевой календарь

    Returns:
        ConversionResult со статусом VALID, INVALID_DATE или OUT_OF_RANGE

    Examples:
        >>> convert(FrenchDate(year=1, month=1, day=1), CalendarKind.GREGORIAN).date
        GregorianDate(year=1792, month=9, day=22)
    """
    target = CalendarKind(target)
    sdn = to_sdn(date)
    if sdn is None:
        return ConversionResult(status=ConversionStatus.INVALID_DATE, calendar=target)

    converted = from_sdn(sdn, target)
    if converted is None:
        return ConversionResult(status=ConversionStatus.OUT_OF_RANGE, calendar=target, sdn=sdn)

    return ConversionResult(
        status=ConversionStatus.VALID, calendar=target, sdn=sdn, date=converted
    )


def convert_strict(date: CalendarDate, target: CalendarKind) -> CalendarDate:
    """
    Конверсия даты с исключением вместо статуса.

    Raises:
        DateConversionError: Если результат не VALID
    """
    result = convert(date, target)
    if not result.ok:
        raise DateConversionError(
            f"Cannot convert {date!r} to {result.calendar.value}: {result.status.value}",
            result,
        )
    return result.date


def gregorian_to_french(date: GregorianDate) -> ConversionResult:
    """Григорианская дата → республиканская."""
    return convert(date, CalendarKind.FRENCH)


def french_to_gregorian(date: FrenchDate) -> ConversionResult:
    """Республиканская дата → григорианская."""
    return convert(date, CalendarKind.GREGORIAN)


# =============================================================================
# ВЫЧИСЛЕНИЯ С ДАТАМИ
# =============================================================================


def _require_sdn(date: CalendarDate) -> int:
    sdn = to_sdn(date)
    if sdn is None:
        raise DateConversionError(f"Invalid date: {date!r}")
    return sdn


def weekday_of(date: CalendarDate) -> Optional[Weekday]:
    """День недели даты или None для невалидной даты."""
    sdn = to_sdn(date)
    if sdn is None:
        return None
    return Weekday(day_of_week(sdn))


def days_between(start: CalendarDate, end: CalendarDate) -> int:
    """
    Количество дней от start до end (отрицательное, если end раньше).

    Даты могут принадлежать разным календарям.

    Raises:
        DateConversionError: Если одна из дат невалидна
    """
    return _require_sdn(end) - _require_sdn(start)


def add_days(date: CalendarDate, days: int) -> ConversionResult:
    """
    Сдвиг даты на days дней в пределах её календаря.

    Returns:
        ConversionResult; OUT_OF_RANGE, если результат выходит за диапазон
        календаря

    Raises:
        DateConversionError: Если исходная дата невалидна
    """
    calendar = calendar_of(date)
    sdn = _require_sdn(date) + days

    shifted = from_sdn(sdn, calendar)
    if shifted is None:
        return ConversionResult(
            status=ConversionStatus.OUT_OF_RANGE,
            calendar=calendar,
            sdn=sdn if sdn > 0 else None,
        )
    return ConversionResult(status=ConversionStatus.VALID, calendar=calendar, sdn=sdn, date=shifted)
