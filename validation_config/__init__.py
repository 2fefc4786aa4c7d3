"""
validation_config -- YAML-driven matcher configuration.

Responsibility:
    Turns a matcher configuration file into ready-to-use matchers. Callers
    either build every matcher of a configuration set at once
    (``build_matchers``) or ask for a single one by name (``get_matcher``).

Architecture position:
    Configuration -- sits above ``validation_kernel``. The kernel MUST NEVER
    import from ``validation_config``; matchers receive plain config objects.

Failure modes:
    - ``FileNotFoundError`` / ``yaml.YAMLError`` -- unreadable configuration.
    - ``ValueError`` -- wrong document shape, unsupported matcher type or
      duplicate matcher name.
    - ``InvalidMatcherConfigError`` -- a limit has the wrong type or is negative.
    - ``UnknownMatcherError`` -- the requested name is not configured.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from validation_config.loader import load_configuration_set
from validation_config.schema import MatcherConfigurationSet, MatcherDefinition
from validation_kernel.exceptions import UnknownMatcherError
from validation_kernel.logging_config import LogContext, get_logger
from validation_kernel.matchers.decimal_number import (
    DecimalMatcherConfig,
    DecimalNumberMatcher,
)

_logger = get_logger("config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def build_matcher(definition: MatcherDefinition) -> DecimalNumberMatcher:
    """Create the matcher described by one definition."""
    return DecimalNumberMatcher(
        DecimalMatcherConfig(
            max_total_digits=definition.max_total_digits,
            max_decimal_places=definition.max_decimal_places,
        )
    )


def build_matchers(
    config_set: MatcherConfigurationSet,
) -> dict[str, DecimalNumberMatcher]:
    """Create every matcher of a configuration set, keyed by name."""
    return {m.name: build_matcher(m) for m in config_set.matchers}


def load_matchers(path: Path | None = None) -> dict[str, DecimalNumberMatcher]:
    """Load a configuration file and build all of its matchers."""
    config_path = path or DEFAULT_CONFIG_PATH
    with LogContext.bind(config_path=str(config_path)):
        config_set = load_configuration_set(config_path)
        _logger.info(
            "matcher_config_loaded",
            extra={
                "version": config_set.version,
                "checksum": config_set.checksum,
                "matcher_count": len(config_set.matchers),
            },
        )
    return build_matchers(config_set)


def get_matcher(
    name: str,
    path: Path | None = None,
    matchers: Mapping[str, DecimalNumberMatcher] | None = None,
) -> DecimalNumberMatcher:
    """
    Return the matcher configured under ``name``.

    Without ``matchers`` the configuration file is read, checksummed and
    every matcher rebuilt on each call. Callers looking up many names should
    build the mapping once with ``load_matchers`` or ``build_matchers`` and
    pass it in.
    """
    if matchers is None:
        matchers = load_matchers(path)
    if name not in matchers:
        raise UnknownMatcherError(name, list(matchers))
    return matchers[name]


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "build_matcher",
    "build_matchers",
    "get_matcher",
    "load_matchers",
]
