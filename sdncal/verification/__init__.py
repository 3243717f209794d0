"""Verification — исчерпывающая проверка алгоритмов конверсии по всему
поддерживаемому диапазону дат.
"""

from .harness import (
    FRENCH_YEAR_START_SEPTEMBER,
    Mismatch,
    VerificationConfig,
    VerificationReport,
    verify_all,
    verify_french,
    verify_french_year_starts,
    verify_gregorian,
)

__all__ = [
    "FRENCH_YEAR_START_SEPTEMBER",
    "Mismatch",
    "VerificationConfig",
    "VerificationReport",
    "verify_all",
    "verify_french",
    "verify_french_year_starts",
    "verify_gregorian",
]
