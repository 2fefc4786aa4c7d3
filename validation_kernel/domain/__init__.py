"""
Pure domain layer.

Contains the validation outcome DTOs and decimal parsing, with NO
dependencies on I/O, clocks or configuration files. Everything here is
deterministic.
"""

from validation_kernel.domain.decimals import (
    DecimalParseError,
    DecimalParseResult,
    ParsedDecimal,
    parse_decimal,
)
from validation_kernel.domain.dtos import ValidationError, ValidationResult

__all__ = [
    "DecimalParseError",
    "DecimalParseResult",
    "ParsedDecimal",
    "ValidationError",
    "ValidationResult",
    "parse_decimal",
]
