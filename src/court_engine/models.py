"""Value types for court positions and shot assessments."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from src.court_engine.config import COURT_LENGTH
from src.court_engine.validation import InvalidArgumentError


class BasketSelector(Enum):
    """Which of the two baskets a shot is aimed at."""

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Union["BasketSelector", str]) -> "BasketSelector":
        """Accept a selector or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(
            f"Invalid basket selector: {value!r}. Must be 'left' or 'right'."
        )


@dataclass(frozen=True)
class CourtPosition:
    """A point on the court, in the geometry's scaled units.

    ``x`` runs along the court length from the left baseline, ``y`` along
    the width from the near sideline.
    """

    x: float
    y: float

    def mirrored(self, court_length: float = COURT_LENGTH) -> "CourtPosition":
        """Reflect across the midcourt line."""
        return CourtPosition(x=court_length - self.x, y=self.y)


@dataclass(frozen=True)
class ShotOffset:
    """Basket-to-shot offset in feet."""

    distance: float
    dx: float
    dy: float


@dataclass(frozen=True)
class ShotAssessment:
    """Make probability, distance and zone for one shot position."""

    probability_percent: float
    distance_feet: float
    zone_label: str

    def to_dict(self) -> Dict:
        return {
            "probability": self.probability_percent,
            "distance": self.distance_feet,
            "zone": self.zone_label,
        }
