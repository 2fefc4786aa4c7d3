"""Field matchers. Each exposes ``match(value) -> ValidationResult``."""

from validation_kernel.matchers.decimal_number import (
    DEFAULT_MAX_OF_DIGITS,
    DecimalMatcherConfig,
    DecimalMatcherErrors,
    DecimalNumberMatcher,
)

__all__ = [
    "DEFAULT_MAX_OF_DIGITS",
    "DecimalMatcherConfig",
    "DecimalMatcherErrors",
    "DecimalNumberMatcher",
]
