"""Shared fixtures for scalar transform tests."""

import logging

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random generator for reproducible draws."""
    return np.random.default_rng(20240611)


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records from the scalar_transforms loggers."""
    caplog.set_level(logging.DEBUG, logger="scalar_transforms")
    return caplog
