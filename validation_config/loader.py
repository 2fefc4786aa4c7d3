"""
Configuration Loader (``validation_config.loader``).

Responsibility
--------------
Loads a YAML matcher configuration file and parses it into the frozen
dataclasses of ``validation_config.schema``.

Invariants enforced
-------------------
* Every parsed object is a frozen dataclass from ``schema.py``.
* Matcher names are unique within a configuration set.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys in parsed dict  -> ``KeyError`` propagates.
* Wrong document shape, unsupported matcher type or duplicate name
  -> ``ValueError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from validation_config.schema import (
    SUPPORTED_MATCHER_TYPES,
    MatcherConfigurationSet,
    MatcherDefinition,
)


def load_yaml_file(path: Path) -> Any:
    """
    Load a single YAML file and return its parsed contents ({} when empty).

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_matcher_definition(data: dict[str, Any]) -> MatcherDefinition:
    """
    Parse a ``MatcherDefinition`` from a dict.

    Preconditions:
        - ``data`` must contain ``name`` and ``type``.
    Raises:
        KeyError: if required keys are missing.
        ValueError: if ``data`` is not a mapping or ``type`` is not a
            supported matcher type.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Matcher entry must be a mapping, got {data!r}")
    matcher_type = data["type"]
    if matcher_type not in SUPPORTED_MATCHER_TYPES:
        raise ValueError(
            f"Unsupported matcher type {matcher_type!r} for {data['name']!r}; "
            f"expected one of {sorted(SUPPORTED_MATCHER_TYPES)}"
        )
    return MatcherDefinition(
        name=data["name"],
        type=matcher_type,
        max_total_digits=data.get("max_total_digits"),
        max_decimal_places=data.get("max_decimal_places"),
        description=data.get("description", ""),
    )


def parse_configuration_set(data: dict[str, Any]) -> MatcherConfigurationSet:
    """
    Parse a ``MatcherConfigurationSet`` from the top-level YAML dict.

    Raises:
        ValueError: if the document, its ``matchers`` list or its
            ``version`` has the wrong shape, or a name is duplicated.
    """
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )
    raw_matchers = data.get("matchers") or []
    if not isinstance(raw_matchers, list):
        raise ValueError(
            f"'matchers' must be a list, got {type(raw_matchers).__name__}"
        )
    version = data.get("version", 1)
    if isinstance(version, bool) or not isinstance(version, int):
        raise ValueError(f"'version' must be an integer, got {version!r}")

    matchers = tuple(parse_matcher_definition(m) for m in raw_matchers)

    seen: set[str] = set()
    for definition in matchers:
        if definition.name in seen:
            raise ValueError(f"Duplicate matcher name: {definition.name!r}")
        seen.add(definition.name)

    return MatcherConfigurationSet(
        version=version,
        matchers=matchers,
        checksum=compute_checksum(data),
    )


def load_configuration_set(path: Path) -> MatcherConfigurationSet:
    """Load and parse a YAML configuration file."""
    return parse_configuration_set(load_yaml_file(path))


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums, regardless of
    key order in the source file.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
