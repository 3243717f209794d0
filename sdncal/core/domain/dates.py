"""
Dates — Модели календарных дат

Immutable Pydantic модели дат для каждого поддерживаемого календаря.

Модели НЕ проверяют диапазоны полей при создании: GregorianDate(1990, 4, 31)
и сентинел (0, 0, 0) являются допустимыми экземплярами. Валидность даты определяется
только обратной конверсией через SDN (см. sdncal.conversion).

next_day() реализует независимую от SDN модель последовательных дней
(таблицы длин месяцев), которая используется для верификации алгоритмов.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ДЛИНЫ МЕСЯЦЕВ
# =============================================================================

GREGORIAN_MONTH_LENGTHS: Final[tuple[int, ...]] = (
    31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)

FRENCH_MONTH_LENGTH: Final[int] = 30
FRENCH_EXTRA_DAYS: Final[int] = 5


def is_gregorian_leap_year(year: int) -> bool:
    """
    Високосный ли год в пролептическом григорианском календаре.

    Годы до н.э. переводятся в астрономическую нумерацию (1 до н.э. = 0),
    поэтому високосными оказываются -1, -5, -9, ...

    Args:
        year: Год (отрицательный для до н.э., без года 0)

    Returns:
        True для високосного года
    """
    if year < 0:
        year += 1
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_french_leap_year(year: int) -> bool:
    """Високосный ли год республиканского календаря (III, VII, XI, ...)."""
    return (year + 1) % 4 == 0


def days_in_gregorian_month(year: int, month: int) -> int:
    """
    Количество дней в месяце григорианского календаря.

    Raises:
        ValueError: Если month вне 1..12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Gregorian month must be in 1..12, got {month}")

    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return GREGORIAN_MONTH_LENGTHS[month - 1]


def days_in_french_month(year: int, month: int) -> int:
    """
    Количество дней в месяце республиканского календаря.

    Месяцы 1..12 по 30 дней, месяц 13 (Extra) из 5 или 6 дней.

    Raises:
        ValueError: Если month вне 1..13
    """
    if not 1 <= month <= 13:
        raise ValueError(f"French month must be in 1..13, got {month}")

    if month == 13:
        return FRENCH_EXTRA_DAYS + (1 if is_french_leap_year(year) else 0)
    return FRENCH_MONTH_LENGTH


# =============================================================================
# МОДЕЛИ
# =============================================================================


class GregorianDate(BaseModel):
    """
    Дата пролептического григорианского календаря.

    year отрицательный для дат до н.э.; года 0 нет.
    Immutable модель (frozen=True), сравнение и хеширование по значению.
    """

    year: int = Field(..., description="Год (отрицательный до н.э., без 0)")
    month: int = Field(..., description="Месяц 1..12 (0 в сентинеле)")
    day: int = Field(..., description="День 1..31 (0 в сентинеле)")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def null(cls) -> "GregorianDate":
        """Сентинел "нет даты": (0, 0, 0)."""
        return cls(year=0, month=0, day=0)

    @property
    def is_null(self) -> bool:
        return self.year == 0 and self.month == 0 and self.day == 0

    def next_day(self) -> "GregorianDate":
        """
        Следующий день по таблице длин месяцев.

        За 31 декабря 1 г. до н.э. (-1) следует 1 января 1 г. н.э.

        Raises:
            ValueError: Если month вне 1..12 (в том числе для сентинела)
        """
        day = self.day + 1
        month = self.month
        year = self.year

        if day > days_in_gregorian_month(year, month):
            day = 1
            month += 1
            if month > 12:
                month = 1
                year += 1
                if year == 0:
                    year = 1

        return GregorianDate(year=year, month=month, day=day)


class FrenchDate(BaseModel):
    """
    Дата французского республиканского календаря.

    Месяц 13: праздничные дни в конце года (day 1..6).
    """

    year: int = Field(..., description="Год республики 1..14 (0 в сентинеле)")
    month: int = Field(..., description="Месяц 1..13, 13 = Extra (0 в сентинеле)")
    day: int = Field(..., description="День 1..30, 1..6 для Extra (0 в сентинеле)")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def null(cls) -> "FrenchDate":
        """Сентинел "нет даты": (0, 0, 0)."""
        return cls(year=0, month=0, day=0)

    @property
    def is_null(self) -> bool:
        return self.year == 0 and self.month == 0 and self.day == 0

    def next_day(self) -> "FrenchDate":
        """
        Следующий день по таблице длин месяцев.

        Raises:
            ValueError: Если month вне 1..13 (в том числе для сентинела)
        """
        day = self.day + 1
        month = self.month
        year = self.year

        if day > days_in_french_month(year, month):
            day = 1
            month += 1
            if month > 13:
                month = 1
                year += 1

        return FrenchDate(year=year, month=month, day=day)
