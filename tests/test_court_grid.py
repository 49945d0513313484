"""Tests for the court probability grid and zone summary."""

import pandas as pd
import pytest

from src.court_engine.config import (
    ZONE_FULL_COURT,
    ZONE_LABELS,
    ZONE_RESTRICTED_AREA,
)
from src.court_engine.court_grid import (
    GRID_COLUMNS,
    build_probability_grid,
    summarize_zones,
)
from src.court_engine.models import BasketSelector, CourtPosition
from src.court_engine.validation import InvalidArgumentError


@pytest.fixture(scope="module")
def left_grid(model):
    return build_probability_grid(model, BasketSelector.LEFT)


# ---------------------------------------------------------------------------
# Grid construction
# ---------------------------------------------------------------------------

class TestBuildProbabilityGrid:
    def test_columns(self, left_grid):
        assert list(left_grid.columns) == GRID_COLUMNS

    def test_covers_whole_court_inclusive(self, left_grid):
        assert len(left_grid) == 95 * 51
        assert left_grid["x"].min() == 0.0
        assert left_grid["x"].max() == 94.0
        assert left_grid["y"].min() == 0.0
        assert left_grid["y"].max() == 50.0

    def test_probabilities_in_range(self, left_grid):
        assert left_grid["probability"].between(1.0, 95.0).all()

    def test_zones_are_known(self, left_grid):
        assert set(left_grid["zone"]).issubset(ZONE_LABELS)
        assert ZONE_RESTRICTED_AREA in set(left_grid["zone"])
        assert ZONE_FULL_COURT in set(left_grid["zone"])

    def test_matches_point_assessment(self, model, left_grid):
        row = left_grid[(left_grid["x"] == 20.0) & (left_grid["y"] == 10.0)].iloc[0]
        expected = model.assess(CourtPosition(20.0, 10.0), BasketSelector.LEFT)
        assert row["zone"] == expected.zone_label
        assert row["probability"] == pytest.approx(expected.probability_percent)
        assert row["distance_feet"] == pytest.approx(expected.distance_feet)

    def test_right_grid_mirrors_left(self, model, left_grid):
        right = build_probability_grid(model, "right")
        merged = left_grid.merge(
            right.assign(x=94.0 - right["x"]),
            on=["x", "y"],
            suffixes=("_left", "_right"),
        )
        assert len(merged) == len(left_grid)
        assert (merged["zone_left"] == merged["zone_right"]).all()

    def test_coarse_step_keeps_far_edges(self, model):
        grid = build_probability_grid(model, BasketSelector.LEFT, step_feet=10.0)
        assert sorted(grid["x"].unique()) == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 94]
        assert sorted(grid["y"].unique()) == [0, 10, 20, 30, 40, 50]
        assert len(grid) == 11 * 6

    @pytest.mark.parametrize("step", [0, -1.0, float("nan")])
    def test_invalid_step_raises(self, model, step):
        with pytest.raises(InvalidArgumentError):
            build_probability_grid(model, BasketSelector.LEFT, step_feet=step)


# ---------------------------------------------------------------------------
# Zone summary
# ---------------------------------------------------------------------------

class TestSummarizeZones:
    def test_zone_order_follows_table(self, left_grid):
        summary = summarize_zones(left_grid)
        order = [ZONE_LABELS.index(zone) for zone in summary.index]
        assert order == sorted(order)

    def test_sample_counts_add_up(self, left_grid):
        summary = summarize_zones(left_grid)
        assert summary["samples"].sum() == len(left_grid)

    def test_restricted_area_stats(self, left_grid):
        summary = summarize_zones(left_grid)
        restricted = summary.loc[ZONE_RESTRICTED_AREA]
        assert restricted["mean_probability"] == pytest.approx(63.0)
        assert restricted["max_distance"] < 3.0

    def test_small_frame(self):
        grid = pd.DataFrame({
            "x": [0.0, 1.0, 2.0],
            "y": [0.0, 0.0, 0.0],
            "distance_feet": [60.0, 1.0, 80.0],
            "zone": [ZONE_FULL_COURT, ZONE_RESTRICTED_AREA, ZONE_FULL_COURT],
            "probability": [5.0, 63.0, 2.0],
        })
        summary = summarize_zones(grid)
        assert list(summary.index) == [ZONE_RESTRICTED_AREA, ZONE_FULL_COURT]
        assert summary.loc[ZONE_FULL_COURT, "samples"] == 2
        assert summary.loc[ZONE_FULL_COURT, "mean_probability"] == pytest.approx(3.5)
        assert summary.loc[ZONE_FULL_COURT, "min_distance"] == 60.0
