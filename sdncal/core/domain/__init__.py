"""
Domain models and value objects.

Contains calendar date models and name enums shared by all calendars.
"""

from sdncal.core.domain.dates import (
    FRENCH_EXTRA_DAYS,
    FRENCH_MONTH_LENGTH,
    GREGORIAN_MONTH_LENGTHS,
    FrenchDate,
    GregorianDate,
    days_in_french_month,
    days_in_gregorian_month,
    is_french_leap_year,
    is_gregorian_leap_year,
)
from sdncal.core.domain.names import FrenchMonth, GregorianMonth, Weekday

__all__ = [
    # Dates module
    "GregorianDate",
    "FrenchDate",
    "GREGORIAN_MONTH_LENGTHS",
    "FRENCH_MONTH_LENGTH",
    "FRENCH_EXTRA_DAYS",
    "is_gregorian_leap_year",
    "is_french_leap_year",
    "days_in_gregorian_month",
    "days_in_french_month",
    # Names module
    "Weekday",
    "GregorianMonth",
    "FrenchMonth",
]
