"""Pytest configuration and shared fixtures for the path tracer tests."""

import logging
import os
import random

# numba picks the TBB threading layer when a system libtbb is present; forking
# the renderer's worker pool after a TBB-parallel kernel hangs the interpreter
# at exit, so pin a fork-safe layer before numba is imported.
os.environ.setdefault("NUMBA_THREADING_LAYER", "workqueue")

import pytest

from core.vector import Color


def pytest_configure(config: pytest.Config) -> None:
    """Configure logging for tests."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(name)s [%(levelname)s] %(message)s",
    )


@pytest.fixture
def rng():
    """Seeded random stream so sampled results are reproducible."""
    return random.Random(12345)


@pytest.fixture
def grey():
    return Color(0.5, 0.5, 0.5)
