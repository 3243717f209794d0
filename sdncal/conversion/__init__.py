"""Conversion — конверсия дат между календарями с явным статусом результата.

- Закон обратной конверсии как проверка валидности
- ConversionResult вместо сентинелов 0 / (0, 0, 0)
- Разница дат и сдвиг на N дней через SDN
"""

from .converter import (
    CalendarDate,
    CalendarKind,
    ConversionResult,
    ConversionStatus,
    DateConversionError,
    add_days,
    calendar_of,
    convert,
    convert_strict,
    days_between,
    french_to_gregorian,
    from_sdn,
    gregorian_to_french,
    is_valid_date,
    to_sdn,
    weekday_of,
)

__all__ = [
    "CalendarDate",
    "CalendarKind",
    "ConversionResult",
    "ConversionStatus",
    "DateConversionError",
    "add_days",
    "calendar_of",
    "convert",
    "convert_strict",
    "days_between",
    "french_to_gregorian",
    "from_sdn",
    "gregorian_to_french",
    "is_valid_date",
    "to_sdn",
    "weekday_of",
]
