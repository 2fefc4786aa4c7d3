"""
MatcherConfigurationSet schema.

Defines the human-authored, reviewable description of which matchers exist
and how they are limited. YAML files are parsed into these types by the
loader and turned into live matchers by ``validation_config.build_matchers``.
"""

from __future__ import annotations

from dataclasses import dataclass

DECIMAL_NUMBER = "decimal_number"

SUPPORTED_MATCHER_TYPES: frozenset[str] = frozenset({DECIMAL_NUMBER})


@dataclass(frozen=True)
class MatcherDefinition:
    """One named matcher and its limits."""

    name: str
    type: str
    max_total_digits: int | None = None
    max_decimal_places: int | None = None
    description: str = ""


@dataclass(frozen=True)
class MatcherConfigurationSet:
    """All matchers defined by one configuration file."""

    version: int
    matchers: tuple[MatcherDefinition, ...] = ()
    checksum: str = ""

    def get(self, name: str) -> MatcherDefinition | None:
        for definition in self.matchers:
            if definition.name == name:
                return definition
        return None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(m.name for m in self.matchers)
