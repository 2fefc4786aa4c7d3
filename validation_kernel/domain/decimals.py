"""
Decimals -- Exact parsing of decimal literals.

Responsibility:
    Turns a user-supplied value into a ParsedDecimal exposing its precision
    (total significant digits) and scale (fractional digits), or into a
    DecimalParseError describing why it is not a decimal number. Parsing
    failures are returned, never raised.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Backed by the standard library Decimal, which is exact on construction
    from a string regardless of the active context precision.

Invariants enforced:
    - Only plain decimal literals with "." as the separator are accepted
    - Non-finite values (NaN, Infinity) are never a ParsedDecimal
    - Floats are read through their shortest repr (12.5 -> "12.5"), never
      through their binary expansion
    - Digit counts are taken from the normalized value: leading zeros and
      trailing fractional zeros are not counted, trailing zeros of the
      integer part are
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

# Sign, digits with an optional "." (at least one digit overall), exponent.
_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)

REASON_UNSUPPORTED_TYPE = "unsupported_type"
REASON_INVALID_SYNTAX = "invalid_syntax"
REASON_OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True, slots=True)
class ParsedDecimal:
    """
    A decimal number with its normalized digit counts.

    Guarantees:
        - value is finite
        - precision >= 1 (zero has one significant digit)
        - scale >= 0
    """

    value: Decimal
    precision: int
    scale: int

    def total_digits(self) -> int:
        return self.precision

    def fractional_digits(self) -> int:
        return self.scale


@dataclass(frozen=True, slots=True)
class DecimalParseError:
    """Why a value could not be read as a decimal number."""

    value: str
    reason: str


DecimalParseResult = ParsedDecimal | DecimalParseError


def parse_decimal(value: Any) -> DecimalParseResult:
    """
    Parse a value into a ParsedDecimal.

    Accepts strings holding a decimal literal, ints, finite floats and
    finite Decimals. Anything else, including bool, is a DecimalParseError.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        return DecimalParseError(value=repr(value), reason=REASON_UNSUPPORTED_TYPE)

    if isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, Decimal):
        if not value.is_finite():
            return DecimalParseError(value=repr(value), reason=REASON_INVALID_SYNTAX)
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return DecimalParseError(value=repr(value), reason=REASON_INVALID_SYNTAX)
        number = Decimal(repr(value))
    else:
        if _DECIMAL_LITERAL.fullmatch(value) is None:
            return DecimalParseError(value=repr(value), reason=REASON_INVALID_SYNTAX)
        try:
            number = Decimal(value)
        except InvalidOperation:
            # Exponent beyond what the decimal module can represent.
            return DecimalParseError(value=repr(value), reason=REASON_OUT_OF_RANGE)

    precision, scale = _digit_counts(number)
    return ParsedDecimal(value=number, precision=precision, scale=scale)


def _digit_counts(number: Decimal) -> tuple[int, int]:
    """Return (precision, scale) of a finite Decimal after normalization."""
    _, digits, exponent = number.as_tuple()
    if not any(digits):
        return 1, 0

    # Decimal drops leading zeros itself; drop trailing ones here.
    significant = len(digits)
    while digits[significant - 1] == 0:
        significant -= 1
        exponent += 1

    if exponent >= 0:
        return significant + exponent, 0
    return significant, -exponent
