"""
Contract Validation Module

Модуль для валидации JSON контрактов дат и результатов конверсии.
"""

from .validators import (
    ContractValidator,
    ConversionResultValidator,
    FrenchDateValidator,
    GregorianDateValidator,
    SchemaLoader,
    french_date_from_payload,
    gregorian_date_from_payload,
    validate_conversion_result,
    validate_french_date,
    validate_gregorian_date,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GregorianDateValidator",
    "FrenchDateValidator",
    "ConversionResultValidator",
    # Functions
    "validate_gregorian_date",
    "validate_french_date",
    "validate_conversion_result",
    "gregorian_date_from_payload",
    "french_date_from_payload",
]
