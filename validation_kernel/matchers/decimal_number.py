"""
DecimalNumberMatcher -- Validates that a value is a decimal number or absent.

Responsibility:
    Checks a single field value: it must parse as a decimal number (the
    decimal separator is always "."), must not have more significant digits
    than the configured maximum, and, when a decimal-place limit is
    configured, must not have more fractional digits than that limit.

Architecture position:
    Kernel > Matchers -- pure, synchronous, zero I/O.
    Consumes domain.decimals (parsing) and domain.dtos (ValidationResult).

Invariants enforced:
    - None is valid; presence is checked by other rules
    - A value that does not parse yields exactly one error and nothing else
    - The total-digit and decimal-place checks are independent; both may
      report on the same value, total digits first
    - Configuration is frozen at construction; each match() builds a fresh
      result, so one instance may serve many callers and threads

Failure modes:
    - InvalidMatcherConfigError on malformed configuration (wrong type,
      negative limit, too many positional parameters)
    - Never raises for bad input
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from validation_kernel.domain.decimals import DecimalParseError, ParsedDecimal, parse_decimal
from validation_kernel.domain.dtos import ValidationResult
from validation_kernel.exceptions import InvalidMatcherConfigError
from validation_kernel.logging_config import LogContext, get_logger

logger = get_logger("matchers.decimal_number")

DEFAULT_MAX_OF_DIGITS = 11
ERROR_CODE_PREFIX = "doubleNumber."


class DecimalMatcherErrors(Enum):
    """Error registry for the decimal number matcher."""

    NOT_DECIMAL_NUMBER = (
        f"{ERROR_CODE_PREFIX}e001",
        "The value is not a valid decimal number.",
    )
    MAX_NUMBER_OF_DIGITS_EXCEEDED = (
        f"{ERROR_CODE_PREFIX}e002",
        "The value exceeded maximum number of digits.",
    )
    MAX_NUM_OF_DECIMAL_PLACES_EXCEEDED = (
        f"{ERROR_CODE_PREFIX}e003",
        "The value exceeded maximum number of decimal places.",
    )

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


def _check_limit(parameter: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidMatcherConfigError(parameter, value, "must be an integer")
    if value < 0:
        raise InvalidMatcherConfigError(parameter, value, "must not be negative")


@dataclass(frozen=True)
class DecimalMatcherConfig:
    """
    Limits applied by a DecimalNumberMatcher.

    max_total_digits falls back to DEFAULT_MAX_OF_DIGITS when None or 0.
    Decimal places are checked whenever max_decimal_places is not None,
    including an explicit 0.
    """

    max_total_digits: int | None = None
    max_decimal_places: int | None = None

    def __post_init__(self) -> None:
        _check_limit("max_total_digits", self.max_total_digits)
        _check_limit("max_decimal_places", self.max_decimal_places)

    @property
    def effective_max_total_digits(self) -> int:
        return self.max_total_digits or DEFAULT_MAX_OF_DIGITS

    @property
    def checks_decimal_places(self) -> bool:
        return self.max_decimal_places is not None


class DecimalNumberMatcher:
    """
    Matcher validating that a string value represents a decimal number or None.

    Configuration:
        - no limits: the number of digits must not exceed 11.
        - max_total_digits: replaces the default of 11.
        - max_decimal_places: additionally caps the digits after the
          decimal point. Both conditions must hold.
    """

    def __init__(self, config: DecimalMatcherConfig | None = None):
        self._config = config or DecimalMatcherConfig()

    @classmethod
    def from_params(cls, *params: Any) -> DecimalNumberMatcher:
        """
        Build a matcher from 0 to 2 positional limits.

        The first is the maximum total digits, the second the maximum
        decimal places. Supplying a second parameter enables the
        decimal-place check.
        """
        if len(params) > 2:
            raise InvalidMatcherConfigError(
                "params", params, "at most 2 positional parameters are accepted"
            )
        max_total_digits = params[0] if params else None
        max_decimal_places = params[1] if len(params) == 2 else None
        return cls(
            DecimalMatcherConfig(
                max_total_digits=max_total_digits,
                max_decimal_places=max_decimal_places,
            )
        )

    @property
    def config(self) -> DecimalMatcherConfig:
        return self._config

    def match(self, value: Any, field: str | None = None) -> ValidationResult:
        """
        Validate one value.

        ``field`` names the value being checked. It is copied onto every
        error and bound as ``field_path`` on the log records of this call.
        """
        result = ValidationResult()
        if value is None:
            return result

        with LogContext.bind(field_path=field):
            parsed = parse_decimal(value)
            if isinstance(parsed, DecimalParseError):
                logger.debug(
                    "decimal_match_not_a_number",
                    extra={"value": parsed.value, "reason": parsed.reason},
                )
                self._add_error(result, DecimalMatcherErrors.NOT_DECIMAL_NUMBER, field)
                self._log_failure(result)
                return result

            self._validate_max_number_of_digits(parsed, result, field)
            if self._config.checks_decimal_places:
                self._validate_max_decimal_places(parsed, result, field)

            if not result:
                self._log_failure(result)
        return result

    def _validate_max_number_of_digits(
        self, number: ParsedDecimal, result: ValidationResult, field: str | None
    ) -> None:
        limit = self._config.effective_max_total_digits
        if number.total_digits() > limit:
            logger.debug(
                "decimal_match_too_many_digits",
                extra={"limit": limit, "actual": number.total_digits()},
            )
            self._add_error(
                result,
                DecimalMatcherErrors.MAX_NUMBER_OF_DIGITS_EXCEEDED,
                field,
                limit=limit,
                actual=number.total_digits(),
            )

    def _validate_max_decimal_places(
        self, number: ParsedDecimal, result: ValidationResult, field: str | None
    ) -> None:
        limit = self._config.max_decimal_places
        if number.fractional_digits() > limit:
            logger.debug(
                "decimal_match_too_many_decimal_places",
                extra={"limit": limit, "actual": number.fractional_digits()},
            )
            self._add_error(
                result,
                DecimalMatcherErrors.MAX_NUM_OF_DECIMAL_PLACES_EXCEEDED,
                field,
                limit=limit,
                actual=number.fractional_digits(),
            )

    @staticmethod
    def _add_error(
        result: ValidationResult,
        error: DecimalMatcherErrors,
        field: str | None,
        **details: Any,
    ) -> None:
        result.add_error(error.code, error.message, field=field, details=details or None)

    @staticmethod
    def _log_failure(result: ValidationResult) -> None:
        logger.info(
            "decimal_match_failed",
            extra={"error_count": len(result), "error_codes": list(result.codes)},
        )

    def __repr__(self) -> str:
        return (
            f"DecimalNumberMatcher(max_total_digits="
            f"{self._config.effective_max_total_digits}, "
            f"max_decimal_places={self._config.max_decimal_places})"
        )
