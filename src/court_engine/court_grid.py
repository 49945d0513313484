"""Probability surface over the whole court (shot chart data).

Samples :class:`ProbabilityModel` on a regular grid of positions and
returns a tabular view that a heatmap or chart collaborator can render
directly.
"""

import logging

import pandas as pd

from src.court_engine.config import (
    COURT_LENGTH,
    COURT_WIDTH,
    DEFAULT_GRID_STEP_FEET,
    ZONE_LABELS,
)
from src.court_engine.models import BasketSelector, CourtPosition
from src.court_engine.probability_model import ProbabilityModel
from src.court_engine.validation import InvalidArgumentError, require_finite

logger = logging.getLogger(__name__)

GRID_COLUMNS = ["x", "y", "distance_feet", "zone", "probability"]


def _axis(length: float, step: float) -> list[float]:
    """Points from 0 to *length* inclusive, *step* apart."""
    count = int(length // step)
    points = [round(i * step, 6) for i in range(count + 1)]
    if points[-1] < length:
        points.append(length)
    return points


def build_probability_grid(
    model: ProbabilityModel,
    target: BasketSelector,
    step_feet: float = DEFAULT_GRID_STEP_FEET,
) -> pd.DataFrame:
    """Assess every grid point on the court against *target*.

    Coordinates in the returned frame are in feet regardless of the
    model's rendering scale.

    Raises:
        InvalidArgumentError: If *step_feet* is not a positive number.
    """
    step_feet = require_finite(step_feet, "step_feet")
    if step_feet <= 0:
        raise InvalidArgumentError(f"step_feet must be positive, got {step_feet!r}")
    target = BasketSelector.parse(target)
    geometry = model.geometry

    rows: list[dict] = []
    for x in _axis(COURT_LENGTH, step_feet):
        for y in _axis(COURT_WIDTH, step_feet):
            position = geometry.from_feet(CourtPosition(x=x, y=y))
            assessment = model.assess(position, target)
            rows.append({
                "x": x,
                "y": y,
                "distance_feet": assessment.distance_feet,
                "zone": assessment.zone_label,
                "probability": assessment.probability_percent,
            })

    grid = pd.DataFrame(rows, columns=GRID_COLUMNS)
    logger.info(
        "Built probability grid for %s basket: %d points (step %.2f ft)",
        target.value, len(grid), step_feet,
    )
    return grid


def summarize_zones(grid: pd.DataFrame) -> pd.DataFrame:
    """Per-zone sample count, mean probability and distance range.

    Zones appear in table order; zones with no samples are omitted.
    """
    summary = grid.groupby("zone").agg(
        samples=("probability", "size"),
        mean_probability=("probability", "mean"),
        min_distance=("distance_feet", "min"),
        max_distance=("distance_feet", "max"),
    )
    ordered = [zone for zone in ZONE_LABELS if zone in summary.index]
    return summary.loc[ordered]
