"""
Тесты для модуля French Republican

Проверяет:
1. Эпоху и границы валидного диапазона SDN
2. Отклонение дат вне годов 1..14, месяцев 1..13, дней 1..30
3. Праздничные дни (Extra) в високосных и обычных годах
4. Согласованность с григорианским календарём на известных датах
5. Обратную конверсию на всём диапазоне
6. Таблицу названий месяцев
"""

from sdncal.core.calendars.french import (
    FIRST_VALID_SDN,
    FRENCH_MONTH_NAME,
    LAST_VALID_SDN,
    french_to_sdn,
    sdn_to_french,
)
from sdncal.core.calendars.gregorian import gregorian_to_sdn
from sdncal.core.domain import FrenchDate, GregorianDate


def f(year: int, month: int, day: int) -> FrenchDate:
    return FrenchDate(year=year, month=month, day=day)


class TestRange:
    """Тесты границ диапазона"""

    def test_epoch(self) -> None:
        """1 Vendemiaire I = SDN 2375840"""
        assert french_to_sdn(f(1, 1, 1)) == FIRST_VALID_SDN == 2375840
        assert sdn_to_french(2375840) == f(1, 1, 1)

    def test_last_valid_day(self) -> None:
        """5 Extra XIV = SDN 2380952 (XIV невисокосный)"""
        assert french_to_sdn(f(14, 13, 5)) == LAST_VALID_SDN == 2380952
        assert sdn_to_french(2380952) == f(14, 13, 5)

    def test_sdn_outside_range_returns_null(self) -> None:
        """SDN на единицу вне диапазона → (0, 0, 0)"""
        assert sdn_to_french(2375839) == f(0, 0, 0)
        assert sdn_to_french(2380953) == f(0, 0, 0)
        assert sdn_to_french(0).is_null
        assert sdn_to_french(-10).is_null
        assert sdn_to_french(2447893).is_null

    def test_year_outside_range_rejected(self) -> None:
        assert french_to_sdn(f(0, 1, 1)) == 0
        assert french_to_sdn(f(15, 1, 1)) == 0
        assert french_to_sdn(f(-1, 1, 1)) == 0

    def test_month_outside_range_rejected(self) -> None:
        assert french_to_sdn(f(5, 0, 1)) == 0
        assert french_to_sdn(f(5, 14, 1)) == 0

    def test_day_outside_range_rejected(self) -> None:
        assert french_to_sdn(f(5, 1, 0)) == 0
        assert french_to_sdn(f(5, 1, 31)) == 0


class TestExtraDays:
    """Праздничные дни в конце года"""

    def test_leap_year_has_six_extra_days(self) -> None:
        """III год високосный: 6 Extra III существует"""
        sdn = french_to_sdn(f(3, 13, 6))
        assert sdn == 2376935
        assert sdn_to_french(sdn) == f(3, 13, 6)
        assert sdn_to_french(sdn + 1) == f(4, 1, 1)

    def test_common_year_sixth_extra_day_overflows(self) -> None:
        """6 Extra I даёт положительный SDN, равный 1 Vendemiaire II"""
        sdn = french_to_sdn(f(1, 13, 6))
        assert sdn > 0
        assert sdn == french_to_sdn(f(2, 1, 1))
        assert sdn_to_french(sdn) == f(2, 1, 1)

    def test_extra_day_30_accepted_by_checks(self) -> None:
        """Extra 30 проходит проверки ядра (day <= 30)"""
        assert french_to_sdn(f(2, 13, 30)) > 0


class TestGregorianAgreement:
    """Согласованность с григорианским календарём"""

    YEAR_START = (22, 22, 22, 23, 22, 22, 22, 23, 23, 23, 23, 24, 23, 23)

    def test_new_year_days(self) -> None:
        """1 Vendemiaire года Y = START[Y] сентября 1791+Y"""
        for index, day in enumerate(self.YEAR_START):
            year = index + 1
            assert french_to_sdn(f(year, 1, 1)) == gregorian_to_sdn(
                GregorianDate(year=1791 + year, month=9, day=day)
            )

    def test_historical_dates(self) -> None:
        """9 Thermidor II = 27.07.1794, 18 Brumaire VIII = 09.11.1799"""
        assert french_to_sdn(f(2, 11, 9)) == gregorian_to_sdn(
            GregorianDate(year=1794, month=7, day=27)
        )
        assert french_to_sdn(f(8, 2, 18)) == gregorian_to_sdn(
            GregorianDate(year=1799, month=11, day=9)
        )


class TestRoundTrip:
    """Обратная конверсия на всём диапазоне"""

    def test_every_valid_sdn_round_trips(self) -> None:
        for sdn in range(FIRST_VALID_SDN, LAST_VALID_SDN + 1):
            date = sdn_to_french(sdn)
            assert 1 <= date.year <= 14
            assert 1 <= date.month <= 13
            assert 1 <= date.day <= (30 if date.month < 13 else 6)
            assert french_to_sdn(date) == sdn


class TestMonthNames:
    """Тесты для FRENCH_MONTH_NAME"""

    def test_table_shape(self) -> None:
        assert len(FRENCH_MONTH_NAME) == 14
        assert FRENCH_MONTH_NAME[0] == ""

    def test_names(self) -> None:
        assert FRENCH_MONTH_NAME[1] == "Vendemiaire"
        assert FRENCH_MONTH_NAME[11] == "Thermidor"
        assert FRENCH_MONTH_NAME[12] == "Fructidor"
        assert FRENCH_MONTH_NAME[13] == "Extra"
