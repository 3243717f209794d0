"""
Names — Перечисления месяцев и дней недели

Типизированные аналоги таблиц названий. Индекс 0 у месяцев зарезервирован
и представлен явным членом NONE.
"""

from enum import IntEnum


class Weekday(IntEnum):
    """День недели в нумерации day_of_week (0 = воскресенье)"""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class GregorianMonth(IntEnum):
    """Месяц григорианского календаря"""

    NONE = 0
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class FrenchMonth(IntEnum):
    """Месяц республиканского календаря; EXTRA: праздничные дни"""

    NONE = 0
    VENDEMIAIRE = 1
    BRUMAIRE = 2
    FRIMAIRE = 3
    NIVOSE = 4
    PLUVIOSE = 5
    VENTOSE = 6
    GERMINAL = 7
    FLOREAL = 8
    PRAIRIAL = 9
    MESSIDOR = 10
    THERMIDOR = 11
    FRUCTIDOR = 12
    EXTRA = 13
