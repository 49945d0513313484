from src.simulation_engine.models import SimulationResult, TrialOutcome
from src.simulation_engine.random_source import (
    RandomSource,
    SeededRandomSource,
    SequenceRandomSource,
)
from src.simulation_engine.trial_simulator import TrialSimulator

__all__ = [
    "RandomSource",
    "SeededRandomSource",
    "SequenceRandomSource",
    "SimulationResult",
    "TrialOutcome",
    "TrialSimulator",
]
