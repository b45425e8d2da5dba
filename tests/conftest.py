"""Pytest configuration and shared fixtures for csvprettydiff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path

import pytest

from csvprettydiff.utils.width import WidthCache

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


# Two files with different column counts and double-width values
INPUT_A = 'a,bb,ccc,ああああ\n1,"22",333,いいい\n4,"55",666,うう\n'
INPUT_B = 'aaa,bb,c\n111,"22",3\n444,"55",6\n'


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "e2e: End-to-end tests running the installed command")
    config.addinivalue_line("markers", "slow: Tests that take more than a second")


@pytest.fixture
def input_a() -> str:
    """Four-column sample with double-width values in the last column."""
    return INPUT_A


@pytest.fixture
def input_b() -> str:
    """Three-column sample with wider values in the first column."""
    return INPUT_B


@pytest.fixture
def width_cache() -> WidthCache:
    """Provide a fresh width cache isolated from the process-wide one."""
    return WidthCache()


@pytest.fixture
def csv_pair(tmp_path: Path) -> tuple[Path, Path]:
    """Write the two sample inputs to disk.

    Returns
    -------
    tuple[Path, Path]
        Paths of the first and second sample file

    """
    path_a = tmp_path / "a.csv"
    path_b = tmp_path / "b.csv"
    path_a.write_text(INPUT_A, encoding="utf-8")
    path_b.write_text(INPUT_B, encoding="utf-8")
    return path_a, path_b


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Restore root logger handlers replaced by CLI runs."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
