from src.court_engine.court_geometry import CourtGeometry
from src.court_engine.court_grid import build_probability_grid, summarize_zones
from src.court_engine.models import (
    BasketSelector,
    CourtPosition,
    ShotAssessment,
    ShotOffset,
)
from src.court_engine.probability_model import ProbabilityModel
from src.court_engine.validation import InvalidArgumentError

__all__ = [
    "BasketSelector",
    "CourtGeometry",
    "CourtPosition",
    "InvalidArgumentError",
    "ProbabilityModel",
    "ShotAssessment",
    "ShotOffset",
    "build_probability_grid",
    "summarize_zones",
]
