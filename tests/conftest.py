"""Shared pytest fixtures for qselect tests.

Provides reusable configuration objects, a seeded random generator, and
the descending worst-case input used across multiple test modules.
"""

from __future__ import annotations

import numpy as np
import pytest

from qselect.config import SelectConfig


@pytest.fixture
def default_config() -> SelectConfig:
    """Return a SelectConfig with all default values, ignoring any .env file."""
    return SelectConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> SelectConfig:
    """Return a config with no logging for noise-free tests."""
    return SelectConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> SelectConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return SelectConfig(  # type: ignore[call-arg]
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,
    )


@pytest.fixture
def rng() -> np.random.Generator:
    """Return a seeded generator so random cases are reproducible."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def descending_sequence() -> list[int]:
    """Return 200 distinct integers in strictly descending order."""
    return list(range(200, 0, -1))
