"""
Gregorian — Пролептический григорианский календарь ↔ SDN

Конверсия дат григорианского календаря в serial day number (SDN) и обратно.
SDN 1 = 25 ноября 4714 г. до н.э., SDN 2447893 = 1 января 1990 г.

Диапазон: 4714 г. до н.э. .. как минимум 10000 г. н.э. Календарь
пролептический: правила применяются и до 15 октября 1582 г.

АЛГОРИТМ (Tantzen, CACM 199, 1963):
    Три цикла целочисленного деления:
    - 400 лет  = 146097 дней (правило вековых високосных лет)
    - 4 года   = 1461 день   (обычные високосные годы)
    - 5 месяцев = 153 дня    (чередование 31/30/31/30/31 начиная с марта)

    Внутри вычислений год начинается 1 марта, поэтому переменная длина
    февраля не участвует в циклах.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции тотальны: исключения не выбрасываются
2. 0 является единственным сигналом ошибки для gregorian_to_sdn
3. GregorianDate(0, 0, 0) является единственным сигналом ошибки для sdn_to_gregorian
4. Год 0 не существует: за -1 сразу следует 1
5. Некоторые невалидные даты (31 апреля) дают положительный SDN,
   валидность подтверждается только обратной конверсией
"""

from typing import Final

from sdncal.core.domain.dates import GregorianDate

# =============================================================================
# КОНСТАНТЫ АЛГОРИТМА
# =============================================================================

SDN_OFFSET: Final[int] = 32045
DAYS_PER_5_MONTHS: Final[int] = 153
DAYS_PER_4_YEARS: Final[int] = 1461
DAYS_PER_400_YEARS: Final[int] = 146097

# Смещение, делающее год всегда положительным (до н.э. +1 за отсутствие года 0)
YEAR_OFFSET: Final[int] = 4800

# Первая представимая дата: 25 ноября 4714 г. до н.э. (SDN 1)
FIRST_YEAR: Final[int] = -4714
FIRST_MONTH: Final[int] = 11
FIRST_DAY: Final[int] = 25
FIRST_VALID_SDN: Final[int] = 1

# Верхняя граница проверенного диапазона (не проверяется при конверсии)
LAST_VERIFIED_YEAR: Final[int] = 10000


# =============================================================================
# ТАБЛИЦЫ НАЗВАНИЙ
# =============================================================================

# Индекс 0 зарезервирован ("нет месяца")
SHORT_MONTH_NAME: Final[tuple[str, ...]] = (
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

LONG_MONTH_NAME: Final[tuple[str, ...]] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Индексируется результатом day_of_week (0 = воскресенье)
SHORT_DAY_NAME: Final[tuple[str, ...]] = (
    "Sun",
    "Mon",
    "Tue",
    "Wed",
    "Thu",
    "Fri",
    "Sat",
)

LONG_DAY_NAME: Final[tuple[str, ...]] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def sdn_to_gregorian(sdn: int) -> GregorianDate:
    """
    Конверсия SDN → григорианская дата.

    Args:
        sdn: Serial day number (любое целое)

    Returns:
        GregorianDate с year >= -4714 и != 0, month 1..12, day 1..31;
        GregorianDate(0, 0, 0) если sdn < 1

    Examples:
        >>> sdn_to_gregorian(2447893)
        GregorianDate(year=1990, month=1, day=1)
        >>> sdn_to_gregorian(0).is_null
        True
    """
    if sdn <= 0:
        return GregorianDate.null()

    # Все промежуточные значения неотрицательны: // и % совпадают с
    # усечённым делением
    temp = (sdn + SDN_OFFSET) * 4 - 1

    # Век (year / 100)
    century = temp // DAYS_PER_400_YEARS

    # Год и день года (1 <= day_of_year <= 366)
    temp = ((temp % DAYS_PER_400_YEARS) // 4) * 4 + 3
    year = (century * 100) + (temp // DAYS_PER_4_YEARS)
    day_of_year = (temp % DAYS_PER_4_YEARS) // 4 + 1

    # Месяц и день месяца
    temp = day_of_year * 5 - 3
    month = temp // DAYS_PER_5_MONTHS
    day = (temp % DAYS_PER_5_MONTHS) // 5 + 1

    # Возврат к году, начинающемуся с января
    if month < 10:
        month += 3
    else:
        year += 1
        month -= 9

    # Нумерация до н.э./н.э. без года 0
    year -= YEAR_OFFSET
    if year <= 0:
        year -= 1

    return GregorianDate(year=year, month=month, day=day)


def gregorian_to_sdn(date: GregorianDate) -> int:
    """
    Конверсия григорианской даты → SDN.

    Проверки неполные: month 1..12, day 1..31, year != 0, year >= -4714,
    дата не раньше 25.11.-4714. День 31 в 30-дневном месяце проходит
    проверку и даёт положительный SDN.

    Args:
        date: Григорианская дата

    Returns:
        SDN > 0 для всех валидных дат; 0 если дата отклонена проверками

    Examples:
        >>> gregorian_to_sdn(GregorianDate(year=1990, month=1, day=1))
        2447893
        >>> gregorian_to_sdn(GregorianDate(year=-4714, month=11, day=24))
        0
    """
    if (
        date.year == 0
        or date.year < FIRST_YEAR
        or date.month <= 0
        or date.month > 12
        or date.day <= 0
        or date.day > 31
    ):
        return 0

    # Даты до SDN 1
    if date.year == FIRST_YEAR and (
        date.month < FIRST_MONTH or (date.month == FIRST_MONTH and date.day < FIRST_DAY)
    ):
        return 0

    # Год всегда положительный
    if date.year < 0:
        year = date.year + YEAR_OFFSET + 1
    else:
        year = date.year + YEAR_OFFSET

    # Год начинается с марта
    if date.month > 2:
        month = date.month - 3
    else:
        month = date.month + 9
        year -= 1

    return (
        ((year // 100) * DAYS_PER_400_YEARS) // 4
        + ((year % 100) * DAYS_PER_4_YEARS) // 4
        + (month * DAYS_PER_5_MONTHS + 2) // 5
        + date.day
        - SDN_OFFSET
    )


# =============================================================================
# ДЕНЬ НЕДЕЛИ
# =============================================================================


def day_of_week(sdn: int) -> int:
    """
    День недели для SDN: 0 = воскресенье, 1 = понедельник, ..., 6 = суббота.

    Определён для любого целого, включая отрицательные.

    Examples:
        >>> day_of_week(2447893)  # 1 января 1990, понедельник
        1
    """
    # Python % с положительным делителем всегда возвращает 0..6
    return (sdn + 1) % 7
