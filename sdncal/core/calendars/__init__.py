"""
Calendar modules для sdncal

Чистая целочисленная арифметика конверсии дат в SDN и обратно.
"""

# Gregorian
from sdncal.core.calendars.gregorian import (
    LONG_DAY_NAME,
    LONG_MONTH_NAME,
    SHORT_DAY_NAME,
    SHORT_MONTH_NAME,
    day_of_week,
    gregorian_to_sdn,
    sdn_to_gregorian,
)

# French Republican
from sdncal.core.calendars.french import (
    FRENCH_MONTH_NAME,
    french_to_sdn,
    sdn_to_french,
)

__all__ = [
    # Gregorian — Name tables
    "SHORT_MONTH_NAME",
    "LONG_MONTH_NAME",
    "SHORT_DAY_NAME",
    "LONG_DAY_NAME",
    # Gregorian — Functions
    "gregorian_to_sdn",
    "sdn_to_gregorian",
    "day_of_week",
    # French Republican — Name tables
    "FRENCH_MONTH_NAME",
    # French Republican — Functions
    "french_to_sdn",
    "sdn_to_french",
]
