"""
Contract Validation Module

Модуль для валидации JSON payloads Peano numerals и результатов деления.
"""

from .validators import (
    DIVISION_RESULT_VALIDATOR,
    NUMERAL_VALIDATOR,
    PAYLOAD_VALUE_MAX,
    SCHEMA_DIR,
    ContractValidator,
    load_schema,
    numeral_from_payload,
    validate_division_result,
    validate_numeral,
)

__all__ = [
    # Constants
    "PAYLOAD_VALUE_MAX",
    "SCHEMA_DIR",
    # Validators
    "ContractValidator",
    "NUMERAL_VALIDATOR",
    "DIVISION_RESULT_VALIDATOR",
    # Functions
    "load_schema",
    "validate_numeral",
    "validate_division_result",
    "numeral_from_payload",
]
