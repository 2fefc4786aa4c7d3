"""
DTOs -- Validation outcome data structures.

Responsibility:
    Defines the structures a matcher hands back to its caller:
    ValidationError (one failed rule) and ValidationResult (the per-call
    accumulator of errors, readable as a code -> message mapping).

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by every matcher; imports nothing from the kernel.

Invariants enforced:
    - Error codes are always present (machine-readable, stable)
    - Errors keep insertion order; the first failed rule comes first
    - A result is valid exactly when it holds no errors

Failure modes:
    - KeyError when reading the message of a code that is not present
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """
    A single validation error.

    Contract:
        Carries a machine-readable code, human-readable message, optional field
        path, and optional details dict.

    Guarantees:
        - Immutable (frozen dataclass)
        - code is always present

    Non-goals:
        - Does NOT raise exceptions -- it IS the error representation.
    """

    code: str
    message: str
    field: str | None = None
    details: dict[str, Any] | None = None


@dataclass
class ValidationResult:
    """
    Result of validation.

    Contract:
        Accumulates zero or more ValidationErrors in the order they were
        added. A fresh instance is created for every match call and is owned
        by the caller once returned.

    Guarantees:
        - is_valid is True only when there are no errors
        - bool(result) == result.is_valid for convenience
        - Mapping-style reads by code: ``code in result``, ``result[code]``

    Non-goals:
        - Does NOT contain warnings -- only hard errors.
        - Does NOT deduplicate codes; a rule reports each failure once.
    """

    _errors: list[ValidationError] = field(default_factory=list)

    def add_error(
        self,
        code: str,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> ValidationError:
        """Append an error and return it."""
        error = ValidationError(
            code=code, message=message, field=field, details=details
        )
        self._errors.append(error)
        return error

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        return tuple(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(e.code for e in self._errors)

    def to_dict(self) -> dict[str, str]:
        """Code -> message mapping, in insertion order."""
        return {e.code: e.message for e in self._errors}

    def __getitem__(self, code: str) -> str:
        for error in self._errors:
            if error.code == code:
                return error.message
        raise KeyError(code)

    def __contains__(self, code: object) -> bool:
        return any(e.code == code for e in self._errors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.codes)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return self.is_valid
