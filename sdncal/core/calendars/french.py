"""
French Republican — Французский республиканский календарь ↔ SDN

Год состоит из 12 месяцев по 30 дней и 5-6 праздничных дней в конце
(месяц 13, "Extra"). Эпоха (1 вандемьера I года) = 22 сентября 1792 г.
по григорианскому календарю. Високосные годы: каждый четвёртый
(III, VII, XI, ...), без векового исключения.

Диапазон: только годы 1..14 (22.09.1792 .. 22.09.1806), что покрывает
период реального использования календаря. Правило високосных лет после
XIV года исторически не определено, поэтому диапазон не расширяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции тотальны: исключения не выбрасываются
2. Валидный диапазон SDN: FIRST_VALID_SDN..LAST_VALID_SDN включительно
3. sdn_to_french точно обращает french_to_sdn на валидном диапазоне
4. Некоторые невалидные даты (Extra 6 в невисокосном году) дают
   положительный SDN
"""

from typing import Final

from sdncal.core.domain.dates import FrenchDate

# =============================================================================
# КОНСТАНТЫ АЛГОРИТМА
# =============================================================================

SDN_OFFSET: Final[int] = 2375474
DAYS_PER_4_YEARS: Final[int] = 1461
DAYS_PER_MONTH: Final[int] = 30

# 1 Vendemiaire I .. 5 Extra XIV
FIRST_VALID_SDN: Final[int] = 2375840
LAST_VALID_SDN: Final[int] = 2380952

FIRST_YEAR: Final[int] = 1
LAST_YEAR: Final[int] = 14

# Месяц 13: праздничные дни в конце года
EXTRA_MONTH: Final[int] = 13


# =============================================================================
# ТАБЛИЦА НАЗВАНИЙ
# =============================================================================

FRENCH_MONTH_NAME: Final[tuple[str, ...]] = (
    "",
    "Vendemiaire",
    "Brumaire",
    "Frimaire",
    "Nivose",
    "Pluviose",
    "Ventose",
    "Germinal",
    "Floreal",
    "Prairial",
    "Messidor",
    "Thermidor",
    "Fructidor",
    "Extra",
)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def sdn_to_french(sdn: int) -> FrenchDate:
    """
    Конверсия SDN → дата республиканского календаря.

    Args:
        sdn: Serial day number

    Returns:
        FrenchDate с year 1..14, month 1..13, day 1..30 (1..6 для month=13);
        FrenchDate(0, 0, 0) если sdn вне [FIRST_VALID_SDN, LAST_VALID_SDN]
    """
    if sdn < FIRST_VALID_SDN or sdn > LAST_VALID_SDN:
        return FrenchDate.null()

    temp = (sdn - SDN_OFFSET) * 4 - 1
    day_of_year = (temp % DAYS_PER_4_YEARS) // 4
    return FrenchDate(
        year=temp // DAYS_PER_4_YEARS,
        month=day_of_year // DAYS_PER_MONTH + 1,
        day=day_of_year % DAYS_PER_MONTH + 1,
    )


def french_to_sdn(date: FrenchDate) -> int:
    """
    Конверсия даты республиканского календаря → SDN.

    SDN = floor(year * 1461 / 4) + (month - 1) * 30 + day + 2375474

    Args:
        date: Дата республиканского календаря

    Returns:
        SDN > 0 для валидных дат; 0 если year вне 1..14, month вне 1..13
        или day вне 1..30
    """
    if (
        date.year < FIRST_YEAR
        or date.year > LAST_YEAR
        or date.month < 1
        or date.month > EXTRA_MONTH
        or date.day < 1
        or date.day > DAYS_PER_MONTH
    ):
        return 0

    return (
        (date.year * DAYS_PER_4_YEARS) // 4
        + (date.month - 1) * DAYS_PER_MONTH
        + date.day
        + SDN_OFFSET
    )
