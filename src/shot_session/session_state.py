"""Session state - the current shot, its assessment and the latest run."""

from dataclasses import dataclass
from typing import Dict, Optional

from src.court_engine.models import BasketSelector, CourtPosition, ShotAssessment
from src.shot_session.config import DEFAULT_TRIAL_COUNT
from src.simulation_engine.models import SimulationResult


@dataclass
class SessionState:
    """Single source of truth for one shot simulator session.

    A fresh session has no shot placed and no simulation result.
    """

    target: BasketSelector = BasketSelector.LEFT
    trial_count: int = DEFAULT_TRIAL_COUNT
    position: Optional[CourtPosition] = None
    assessment: Optional[ShotAssessment] = None
    result: Optional[SimulationResult] = None

    @property
    def has_shot(self) -> bool:
        return self.position is not None

    def clear_shot(self):
        """Forget the shot, its assessment and any simulation result."""
        self.position = None
        self.assessment = None
        self.result = None

    def to_dict(self) -> Dict:
        return {
            "target": self.target.value,
            "trial_count": self.trial_count,
            "position": (
                {"x": self.position.x, "y": self.position.y}
                if self.position is not None
                else None
            ),
            "assessment": self.assessment.to_dict() if self.assessment else None,
            "result": self.result.to_dict() if self.result else None,
        }
