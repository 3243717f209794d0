"""
sdncal — конверсия дат между календарями через serial day number (SDN)

SDN: сквозная нумерация дней, SDN 1 = 25 ноября 4714 г. до н.э.
(пролептический григорианский), SDN 2447893 = 1 января 1990 г.

Дата любого календаря переводится в SDN, а SDN затем в дату другого календаря.
SDN < 1 не поддерживаются; 0 от функций *_to_sdn означает невалидную или
неподдерживаемую дату.
"""

from sdncal.core.calendars import (
    FRENCH_MONTH_NAME,
    LONG_DAY_NAME,
    LONG_MONTH_NAME,
    SHORT_DAY_NAME,
    SHORT_MONTH_NAME,
    day_of_week,
    french_to_sdn,
    gregorian_to_sdn,
    sdn_to_french,
    sdn_to_gregorian,
)
from sdncal.core.domain import (
    FrenchDate,
    FrenchMonth,
    GregorianDate,
    GregorianMonth,
    Weekday,
)
from sdncal.conversion import (
    CalendarKind,
    ConversionResult,
    ConversionStatus,
    DateConversionError,
    convert,
    convert_strict,
    is_valid_date,
)

__version__ = "1.0.0"

__all__ = [
    # Core — Functions
    "gregorian_to_sdn",
    "sdn_to_gregorian",
    "french_to_sdn",
    "sdn_to_french",
    "day_of_week",
    # Core — Name tables
    "SHORT_MONTH_NAME",
    "LONG_MONTH_NAME",
    "SHORT_DAY_NAME",
    "LONG_DAY_NAME",
    "FRENCH_MONTH_NAME",
    # Domain
    "GregorianDate",
    "FrenchDate",
    "Weekday",
    "GregorianMonth",
    "FrenchMonth",
    # Conversion
    "CalendarKind",
    "ConversionResult",
    "ConversionStatus",
    "DateConversionError",
    "convert",
    "convert_strict",
    "is_valid_date",
]
