"""
Тесты для Verification Harness

Проверяет:
1. Полный проход по республиканскому календарю (годы 1..14)
2. Полный проход по григорианскому календарю (-4714..10000)
3. 14 известных начал республиканских лет
4. Конфигурацию: начальная дата, последний год, прогресс в логах
5. Обнаружение расхождений
"""

import logging

import pytest

from sdncal.core.calendars.gregorian import gregorian_to_sdn
from sdncal.core.domain import FrenchDate, GregorianDate
from sdncal.verification import (
    FRENCH_YEAR_START_SEPTEMBER,
    VerificationConfig,
    verify_all,
    verify_french,
    verify_french_year_starts,
    verify_gregorian,
)
from sdncal.verification import harness


class TestFrenchVerification:
    """Полная проверка республиканского календаря"""

    def test_full_range_has_no_errors(self) -> None:
        report = verify_french()
        assert report.ok
        assert report.calendar == "french"
        assert report.first_sdn == 2375840
        assert report.last_sdn == 2380952
        assert report.dates_checked == 2380952 - 2375840 + 1

    def test_shorter_range(self) -> None:
        report = verify_french(VerificationConfig(french_last_year=3))
        assert report.ok
        # I и II по 365 дней, III: 366
        assert report.dates_checked == 365 + 365 + 366

    def test_empty_range_raises(self) -> None:
        with pytest.raises(ValueError, match="before the first year"):
            verify_french(VerificationConfig(french_last_year=0))


class TestYearStarts:
    """Известные даты начала республиканских лет"""

    def test_table(self) -> None:
        assert len(FRENCH_YEAR_START_SEPTEMBER) == 14
        assert FRENCH_YEAR_START_SEPTEMBER[0] == 22
        assert FRENCH_YEAR_START_SEPTEMBER[11] == 24

    def test_all_agree(self) -> None:
        report = verify_french_year_starts()
        assert report.ok
        assert report.dates_checked == 14
        assert report.first_sdn == 2375840


class TestGregorianVerification:
    """Проверка григорианского календаря"""

    def test_full_range_has_no_errors(self, caplog) -> None:
        """Все даты от SDN 1 до 31.12.10000"""
        with caplog.at_level(logging.INFO, logger="sdncal.verification.harness"):
            report = verify_gregorian()

        assert report.ok, report.mismatches
        assert report.first_sdn == 1
        assert report.last_sdn == gregorian_to_sdn(GregorianDate(year=10000, month=12, day=31))
        assert report.dates_checked == report.last_sdn
        assert "4500 B.C." in caplog.text
        assert "500 A.D." in caplog.text
        assert "Total number of errors found: 0" in caplog.text

    def test_custom_window_across_bc_ad(self) -> None:
        config = VerificationConfig(
            gregorian_start=GregorianDate(year=-3, month=1, day=1),
            gregorian_last_year=2,
        )
        report = verify_gregorian(config)
        assert report.ok
        # -3, -2, -1 (високосный), 1, 2
        assert report.dates_checked == 365 + 365 + 366 + 365 + 365

    def test_unsupported_start_raises(self) -> None:
        config = VerificationConfig(gregorian_start=GregorianDate(year=-4714, month=1, day=1))
        with pytest.raises(ValueError, match="Unsupported start date"):
            verify_gregorian(config)

    def test_nonexistent_start_raises(self) -> None:
        """31 апреля даёт SDN > 0, но не проходит обратную конверсию"""
        config = VerificationConfig(
            gregorian_start=GregorianDate(year=2021, month=4, day=31),
            gregorian_last_year=2021,
        )
        with pytest.raises(ValueError, match="Unsupported start date"):
            verify_gregorian(config)

    def test_start_after_last_year_raises(self) -> None:
        """Пустое окно проверки отклоняется"""
        config = VerificationConfig(
            gregorian_start=GregorianDate(year=2030, month=1, day=1),
            gregorian_last_year=2021,
        )
        with pytest.raises(ValueError, match="after the last year"):
            verify_gregorian(config)

    def test_single_day_window(self) -> None:
        config = VerificationConfig(
            gregorian_start=GregorianDate(year=2021, month=12, day=31),
            gregorian_last_year=2021,
        )
        report = verify_gregorian(config)
        assert report.ok
        assert report.dates_checked == 1
        assert report.first_sdn == report.last_sdn


class TestMismatchDetection:
    """Расхождения обнаруживаются и ограничиваются в отчёте"""

    def test_broken_inverse_reported(self, monkeypatch, caplog) -> None:
        monkeypatch.setattr(harness, "sdn_to_french", lambda sdn: FrenchDate.null())
        with caplog.at_level(logging.WARNING, logger="sdncal.verification.harness"):
            report = verify_french(
                VerificationConfig(french_last_year=1, max_reported_errors=3)
            )

        assert not report.ok
        assert report.error_count == 365
        assert len(report.mismatches) == 3
        assert report.mismatches[0].expected_date == FrenchDate(year=1, month=1, day=1)
        assert report.mismatches[0].computed_date.is_null
        assert "erroneous" in caplog.text


class TestVerifyAll:
    """Все проверки вместе"""

    def test_reduced_ranges(self) -> None:
        config = VerificationConfig(
            gregorian_start=GregorianDate(year=1790, month=1, day=1),
            gregorian_last_year=1810,
        )
        reports = verify_all(config)
        assert [r.calendar for r in reports] == ["french_year_starts", "french", "gregorian"]
        assert all(r.ok for r in reports)
