"""
Pytest fixtures for the validation kernel test suite.

Provides:
- Matchers in the common configurations
- A temporary YAML configuration writer
"""

from pathlib import Path
from typing import Callable

import pytest
import yaml

from validation_kernel.logging_config import LogContext, reset_logging
from validation_kernel.matchers import DecimalNumberMatcher


@pytest.fixture(autouse=True)
def _isolated_logging():
    """Keep logger configuration and context from leaking between tests."""
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def default_matcher() -> DecimalNumberMatcher:
    """Matcher with no configuration: 11 digits, no decimal-place check."""
    return DecimalNumberMatcher()


@pytest.fixture
def amount_matcher() -> DecimalNumberMatcher:
    """Matcher with 5 total digits and 2 decimal places."""
    return DecimalNumberMatcher.from_params(5, 2)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict], Path]:
    """Write a dict as a YAML configuration file and return its path."""

    def _write(data: dict, name: str = "matchers.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False))
        return path

    return _write
