"""Data models for the simulation engine."""

from dataclasses import dataclass
from typing import Dict, Tuple

import pandas as pd

from src.simulation_engine.config import PERCENTAGE_DECIMALS, PROGRESSION_COLUMNS


@dataclass(frozen=True)
class TrialOutcome:
    """One simulated shot plus the running totals up to and including it."""

    shot: int  # 1-based trial index
    made: bool
    cumulative_made: int
    cumulative_missed: int
    cumulative_percentage: float  # cumulative_made / shot * 100, one decimal


@dataclass(frozen=True)
class SimulationResult:
    """Complete, immutable output of a single simulation run."""

    probability_percent: float
    outcomes: Tuple[TrialOutcome, ...]
    total_made: int
    total_missed: int

    @property
    def trial_count(self) -> int:
        return len(self.outcomes)

    @property
    def accuracy(self) -> float:
        """Overall make percentage, one decimal."""
        return round(self.total_made / self.trial_count * 100, PERCENTAGE_DECIMALS)

    def to_dataframe(self) -> pd.DataFrame:
        """Progression curve, one row per trial.

        Columns: ``shot``, ``made`` and ``missed`` (running counts) and
        ``percentage`` (running make percentage).
        """
        return pd.DataFrame(
            [
                (o.shot, o.cumulative_made, o.cumulative_missed, o.cumulative_percentage)
                for o in self.outcomes
            ],
            columns=PROGRESSION_COLUMNS,
        )

    def to_dict(self) -> Dict:
        return {
            "probability": self.probability_percent,
            "made": self.total_made,
            "missed": self.total_missed,
            "accuracy": self.accuracy,
            "chart_data": [
                {
                    "shot": o.shot,
                    "made": o.cumulative_made,
                    "missed": o.cumulative_missed,
                    "percentage": o.cumulative_percentage,
                }
                for o in self.outcomes
            ],
        }
