"""Verification Harness — исчерпывающая проверка алгоритмов конверсии.

Каждая дата поддерживаемого диапазона проходит через SDN туда и обратно и
сравнивается с независимой моделью последовательных дней (next_day()):
- дата → SDN должна совпасть со счётчиком дней
- счётчик → дата должна совпасть с датой модели

Дополнительно проверяются 14 известных начал республиканских лет
(1 Vendemiaire) против григорианского календаря.

Проверка CPU-bound: полный григорианский диапазон содержит около 5.5 млн дат.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from sdncal.conversion.converter import CalendarDate
from sdncal.core.calendars.french import FIRST_VALID_SDN as FRENCH_FIRST_SDN
from sdncal.core.calendars.french import FIRST_YEAR as FRENCH_FIRST_YEAR
from sdncal.core.calendars.french import LAST_YEAR as FRENCH_LAST_YEAR
from sdncal.core.calendars.french import french_to_sdn, sdn_to_french
from sdncal.core.calendars.gregorian import (
    FIRST_DAY,
    FIRST_MONTH,
    FIRST_YEAR,
    LAST_VERIFIED_YEAR,
    gregorian_to_sdn,
    sdn_to_gregorian,
)
from sdncal.core.domain.dates import FrenchDate, GregorianDate

logger = logging.getLogger(__name__)

# День сентября, на который приходится 1 Vendemiaire лет I..XIV
FRENCH_YEAR_START_SEPTEMBER: Tuple[int, ...] = (
    22, 22, 22, 23, 22, 22, 22, 23, 23, 23, 23, 24, 23, 23,
)


@dataclass(frozen=True)
class VerificationConfig:
    """Параметры проверки.

    По умолчанию gregorian_start: первая представимая дата (SDN 1).
    """

    gregorian_start: GregorianDate = field(
        default_factory=lambda: GregorianDate(
            year=FIRST_YEAR,
            month=FIRST_MONTH,
            day=FIRST_DAY,
        )
    )
    gregorian_last_year: int = LAST_VERIFIED_YEAR
    french_last_year: int = FRENCH_LAST_YEAR
    max_reported_errors: int = 10
    progress_every_years: int = 500


@dataclass(frozen=True)
class Mismatch:
    """Расхождение между моделью дней и алгоритмом."""

    expected_sdn: int
    expected_date: CalendarDate
    computed_sdn: int
    computed_date: CalendarDate


@dataclass(frozen=True)
class VerificationReport:
    """Итог проверки одного календаря."""

    calendar: str
    first_sdn: int
    last_sdn: int
    dates_checked: int
    error_count: int
    mismatches: Tuple[Mismatch, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error_count == 0


def _record(
    mismatches: List[Mismatch], limit: int, calendar: str, mismatch: Mismatch
) -> None:
    if len(mismatches) < limit:
        mismatches.append(mismatch)
        logger.warning(
            "%s: sdn %d -> %r, erroneous: %d <- %r",
            calendar,
            mismatch.expected_sdn,
            mismatch.computed_date,
            mismatch.computed_sdn,
            mismatch.expected_date,
        )


def verify_gregorian(config: Optional[VerificationConfig] = None) -> VerificationReport:
    """
    Проверка всех григорианских дат от config.gregorian_start до конца
    config.gregorian_last_year.

    Raises:
        ValueError: Если начальная дата не существует (отклонена
            gregorian_to_sdn или не проходит обратную конверсию) или
            позже config.gregorian_last_year
    """
    config = config or VerificationConfig()
    date = config.gregorian_start
    first_sdn = gregorian_to_sdn(date)
    if first_sdn <= 0 or sdn_to_gregorian(first_sdn) != date:
        raise ValueError(f"Unsupported start date: {date!r}")
    if date.year > config.gregorian_last_year:
        raise ValueError(
            f"Start year {date.year} is after the last year {config.gregorian_last_year}"
        )

    logger.info(
        "Verifying all Gregorian calendar dates from the year %d to %d",
        date.year,
        config.gregorian_last_year,
    )

    sdn = first_sdn
    checked = 0
    errors = 0
    mismatches: List[Mismatch] = []

    while date.year <= config.gregorian_last_year:
        computed_sdn = gregorian_to_sdn(date)
        computed_date = sdn_to_gregorian(sdn)
        checked += 1

        if computed_sdn != sdn or computed_date != date:
            errors += 1
            _record(
                mismatches,
                config.max_reported_errors,
                "gregorian",
                Mismatch(sdn, date, computed_sdn, computed_date),
            )

        following = date.next_day()
        if (
            following.year != date.year
            and config.progress_every_years > 0
            and following.year % config.progress_every_years == 0
        ):
            if following.year >= 0:
                logger.info("%d A.D.", following.year)
            else:
                logger.info("%d B.C.", -following.year)

        date = following
        sdn += 1

    logger.info("Total number of errors found: %d", errors)
    return VerificationReport(
        calendar="gregorian",
        first_sdn=first_sdn,
        last_sdn=sdn - 1,
        dates_checked=checked,
        error_count=errors,
        mismatches=tuple(mismatches),
    )


def verify_french(config: Optional[VerificationConfig] = None) -> VerificationReport:
    """Проверка всех республиканских дат от 1 Vendemiaire I до конца
    config.french_last_year."""
    config = config or VerificationConfig()
    if config.french_last_year < FRENCH_FIRST_YEAR:
        raise ValueError(
            f"Last year {config.french_last_year} is before the first year {FRENCH_FIRST_YEAR}"
        )
    logger.info(
        "Verifying all French republican calendar dates from the year %d to %d",
        FRENCH_FIRST_YEAR,
        config.french_last_year,
    )

    date = FrenchDate(year=FRENCH_FIRST_YEAR, month=1, day=1)
    sdn = FRENCH_FIRST_SDN
    checked = 0
    errors = 0
    mismatches: List[Mismatch] = []

    while date.year <= config.french_last_year:
        computed_sdn = french_to_sdn(date)
        computed_date = sdn_to_french(sdn)
        checked += 1

        if computed_sdn != sdn or computed_date != date:
            errors += 1
            _record(
                mismatches,
                config.max_reported_errors,
                "french",
                Mismatch(sdn, date, computed_sdn, computed_date),
            )

        date = date.next_day()
        sdn += 1

    logger.info("Total number of errors found: %d", errors)
    return VerificationReport(
        calendar="french",
        first_sdn=FRENCH_FIRST_SDN,
        last_sdn=sdn - 1,
        dates_checked=checked,
        error_count=errors,
        mismatches=tuple(mismatches),
    )


def verify_french_year_starts() -> VerificationReport:
    """Проверка 14 известных дат: 1 Vendemiaire года Y = сентябрь 1791+Y."""
    logger.info("Verifying the French calendar with %d known dates", len(FRENCH_YEAR_START_SEPTEMBER))

    errors = 0
    mismatches: List[Mismatch] = []
    sdns: List[int] = []

    for index, september_day in enumerate(FRENCH_YEAR_START_SEPTEMBER):
        french_date = FrenchDate(year=index + 1, month=1, day=1)
        gregorian_date = GregorianDate(year=index + 1792, month=9, day=september_day)
        french_sdn = french_to_sdn(french_date)
        gregorian_sdn = gregorian_to_sdn(gregorian_date)
        sdns.append(gregorian_sdn)

        if french_sdn != gregorian_sdn:
            errors += 1
            mismatches.append(Mismatch(gregorian_sdn, gregorian_date, french_sdn, french_date))
            logger.warning(
                "error: %r=%d != %r=%d", french_date, french_sdn, gregorian_date, gregorian_sdn
            )

    return VerificationReport(
        calendar="french_year_starts",
        first_sdn=sdns[0],
        last_sdn=sdns[-1],
        dates_checked=len(sdns),
        error_count=errors,
        mismatches=tuple(mismatches),
    )


def verify_all(config: Optional[VerificationConfig] = None) -> List[VerificationReport]:
    """Все проверки: известные даты, республиканский и григорианский календари."""
    config = config or VerificationConfig()
    return [
        verify_french_year_starts(),
        verify_french(config),
        verify_gregorian(config),
    ]
