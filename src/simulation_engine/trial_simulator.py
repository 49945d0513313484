"""Monte Carlo shot trials against a fixed make probability.

Each trial is an independent Bernoulli draw: a uniform value in
``[0, 100)`` is drawn and the shot is made iff the draw is strictly less
than the probability percentage.
"""

import logging
from typing import List, Optional

from src.court_engine.validation import require_probability, require_trial_count
from src.simulation_engine.config import MAX_TRIALS, PERCENTAGE_DECIMALS
from src.simulation_engine.models import SimulationResult, TrialOutcome
from src.simulation_engine.random_source import RandomSource, SeededRandomSource

logger = logging.getLogger(__name__)


class TrialSimulator:
    """Run repeated shot trials and collect running aggregates.

    The simulator keeps no state between runs apart from the random
    source it draws from. Inputs are validated strictly: clamping a trial
    count into a UI range is the caller's policy, not the simulator's.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        max_trials: int = MAX_TRIALS,
    ):
        self.random_source = random_source or SeededRandomSource()
        self.max_trials = max_trials

    def run(self, probability: float, trial_count: int) -> SimulationResult:
        """Simulate *trial_count* shots at *probability* percent.

        Args:
            probability: Make percentage in ``[1, 95]``.
            trial_count: Number of trials, ``1 <= trial_count <= max_trials``.

        Returns:
            A :class:`SimulationResult` holding one :class:`TrialOutcome`
            per trial and the terminal made/missed totals.

        Raises:
            InvalidArgumentError: If either argument is out of contract.
        """
        probability = require_probability(probability)
        trial_count = require_trial_count(trial_count, self.max_trials)

        outcomes: List[TrialOutcome] = []
        made_count = 0
        missed_count = 0
        for shot in range(1, trial_count + 1):
            made = self.random_source.draw_percent() < probability
            if made:
                made_count += 1
            else:
                missed_count += 1
            outcomes.append(TrialOutcome(
                shot=shot,
                made=made,
                cumulative_made=made_count,
                cumulative_missed=missed_count,
                cumulative_percentage=round(
                    made_count / shot * 100, PERCENTAGE_DECIMALS
                ),
            ))

        logger.debug(
            "Simulated %d shots at %.1f%%: %d made, %d missed",
            trial_count, probability, made_count, missed_count,
        )
        return SimulationResult(
            probability_percent=probability,
            outcomes=tuple(outcomes),
            total_made=made_count,
            total_missed=missed_count,
        )
