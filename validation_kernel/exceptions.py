"""
Typed Exception Hierarchy for the Validation Kernel.

===============================================================================
WHEN EXCEPTIONS ARE RAISED
===============================================================================

Matchers never raise for bad input. A value that is not a decimal, or one
that exceeds a configured limit, is reported as an entry in the returned
ValidationResult:

    result = matcher.match("12.3.4")
    if not result:
        api_response(errors=result.to_dict())

Exceptions are reserved for programming errors: a matcher built with a
malformed configuration, or a caller asking for a matcher that was never
configured. Those are bugs in the caller, so they are raised and carry a
machine-readable code plus the structured data needed to find the bug:

    try:
        matcher = DecimalNumberMatcher.from_params(11, 2, 4)
    except InvalidMatcherConfigError as e:
        log.error(e.code, extra={"parameter": e.parameter})

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    ValidationKernelError (base)
    |
    +-- ConfigurationError
        +-- InvalidMatcherConfigError
        +-- UnknownMatcherError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Configuration   | INVALID_MATCHER_CONFIG      | Limit has wrong type, is negative, or
                |                             | too many positional parameters given
                | UNKNOWN_MATCHER             | Named matcher not in configuration set
"""

from typing import Any


class ValidationKernelError(Exception):
    """
    Base exception for all validation kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "VALIDATION_KERNEL_ERROR"


# Configuration-related exceptions


class ConfigurationError(ValidationKernelError):
    """Base exception for matcher configuration errors."""

    code: str = "CONFIGURATION_ERROR"


class InvalidMatcherConfigError(ConfigurationError):
    """A matcher was constructed with a malformed configuration value."""

    code: str = "INVALID_MATCHER_CONFIG"

    def __init__(self, parameter: str, value: Any, reason: str):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid matcher configuration for '{parameter}': {value!r} ({reason})"
        )


class UnknownMatcherError(ConfigurationError):
    """The requested matcher name is not defined in the configuration set."""

    code: str = "UNKNOWN_MATCHER"

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = sorted(available or [])
        super().__init__(f"Unknown matcher: '{name}'")
