"""Session controller - the in-process boundary between UI shell and engines."""

import logging
import math
import re
from typing import Callable, Dict, Optional

from src.court_engine.models import BasketSelector, CourtPosition, ShotAssessment
from src.court_engine.probability_model import ProbabilityModel
from src.court_engine.validation import InvalidArgumentError
from src.shot_session.config import (
    DEFAULT_BASKET,
    DEFAULT_TRIAL_COUNT,
    MAX_TRIAL_COUNT,
    MIN_TRIAL_COUNT,
)
from src.shot_session.session_state import SessionState
from src.simulation_engine.models import SimulationResult
from src.simulation_engine.trial_simulator import TrialSimulator

logger = logging.getLogger(__name__)

AssessmentListener = Callable[[ShotAssessment], None]
SimulationListener = Callable[[SimulationResult], None]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def clamp_trial_count(value) -> int:
    """UI policy for the trial count input.

    Strings are read by their leading integer, so ``"5abc"`` is 5 and
    ``"1e3"`` is 1. Input with no leading integer falls back to the
    default; numbers are truncated and clamped into
    ``[MIN_TRIAL_COUNT, MAX_TRIAL_COUNT]``.
    """
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return DEFAULT_TRIAL_COUNT
        value = int(match.group(1))
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_TRIAL_COUNT
    if not math.isfinite(value):
        return DEFAULT_TRIAL_COUNT
    value = int(value)
    # An explicit zero reads as "no value" in the input field.
    if value == 0:
        return DEFAULT_TRIAL_COUNT
    return max(MIN_TRIAL_COUNT, min(MAX_TRIAL_COUNT, value))


class ShotSession:
    """Orchestrates shot placement, assessment and simulation.

    Every mutation recomputes the assessment by calling the probability
    model directly and discards any simulation result tied to the old
    inputs. Results are pushed to optional rendering and chart callbacks.
    """

    def __init__(
        self,
        model: Optional[ProbabilityModel] = None,
        simulator: Optional[TrialSimulator] = None,
        on_assessment: Optional[AssessmentListener] = None,
        on_simulation: Optional[SimulationListener] = None,
        trial_count: int = DEFAULT_TRIAL_COUNT,
        target=DEFAULT_BASKET,
    ):
        self.model = model or ProbabilityModel()
        self.simulator = simulator or TrialSimulator()
        self.on_assessment = on_assessment
        self.on_simulation = on_simulation
        self.state = SessionState(
            target=BasketSelector.parse(target),
            trial_count=clamp_trial_count(trial_count),
        )

    # ------------------------------------------------------------------
    # Input operations
    # ------------------------------------------------------------------

    def place_or_move_shot(self, position: CourtPosition) -> ShotAssessment:
        """Replace the shot position and reassess it.

        Raises:
            InvalidArgumentError: If *position* is malformed. The previous
                position and assessment are kept in that case.
        """
        try:
            assessment = self.model.assess(position, self.state.target)
        except InvalidArgumentError as exc:
            logger.warning("Rejected shot position %r: %s", position, exc)
            raise

        self.state.position = position
        self._publish_assessment(assessment)
        return assessment

    def select_basket(self, selector) -> Optional[ShotAssessment]:
        """Switch the target basket, reassessing the current shot if any."""
        try:
            target = BasketSelector.parse(selector)
        except InvalidArgumentError as exc:
            logger.warning("Rejected basket selection: %s", exc)
            raise

        self.state.target = target
        self.state.result = None
        if not self.state.has_shot:
            return None

        assessment = self.model.assess(self.state.position, target)
        self._publish_assessment(assessment)
        return assessment

    def set_trial_count(self, value) -> int:
        """Apply the UI clamping policy and store the trial count."""
        trial_count = clamp_trial_count(value)
        if trial_count != self.state.trial_count:
            self.state.result = None
        self.state.trial_count = trial_count
        return trial_count

    def request_simulation(
        self, trial_count: Optional[int] = None
    ) -> Optional[SimulationResult]:
        """Run the trial simulator against the current assessment.

        Returns:
            The new :class:`SimulationResult`, or None when no shot has
            been placed yet.
        """
        if trial_count is not None:
            self.set_trial_count(trial_count)

        assessment = self.state.assessment
        if assessment is None:
            logger.info("Simulation requested with no shot placed; ignoring")
            return None

        result = self.simulator.run(
            assessment.probability_percent, self.state.trial_count
        )
        self.state.result = result

        logger.info(
            "Simulated %d shots from %s (%.1f ft, %.1f%%): %d made, %d missed (%.1f%%)",
            result.trial_count,
            assessment.zone_label,
            assessment.distance_feet,
            assessment.probability_percent,
            result.total_made,
            result.total_missed,
            result.accuracy,
        )

        if self.on_simulation is not None:
            self.on_simulation(result)
        return result

    def reset(self):
        """Clear the shot and its results; basket and trial count are kept."""
        self.state.clear_shot()
        logger.debug("Session reset")

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def assessment(self) -> Optional[ShotAssessment]:
        return self.state.assessment

    @property
    def result(self) -> Optional[SimulationResult]:
        return self.state.result

    def snapshot(self) -> Dict:
        """Current session state as plain data for a rendering shell."""
        return self.state.to_dict()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _publish_assessment(self, assessment: ShotAssessment):
        self.state.assessment = assessment
        self.state.result = None
        if self.on_assessment is not None:
            self.on_assessment(assessment)
