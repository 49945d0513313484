"""Shared fixtures for the shot simulator test suite."""

import pytest

from src.court_engine.court_geometry import CourtGeometry
from src.court_engine.probability_model import ProbabilityModel
from src.simulation_engine.random_source import SeededRandomSource
from src.simulation_engine.trial_simulator import TrialSimulator


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def geometry():
    return CourtGeometry()


@pytest.fixture(scope="module")
def model(geometry):
    return ProbabilityModel(geometry)


@pytest.fixture
def seeded_simulator():
    """Simulator with a fixed seed so runs are reproducible."""
    return TrialSimulator(SeededRandomSource(seed=2025))
