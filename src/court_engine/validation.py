"""Argument validation shared by the court and simulation engines."""

import math
from numbers import Integral, Real

from src.court_engine.config import MAX_PROBABILITY, MIN_PROBABILITY


class InvalidArgumentError(ValueError):
    """Raised when an engine receives an argument outside its contract."""

    pass


def require_finite(value, name: str) -> float:
    """Return *value* as a float, rejecting non-numeric and non-finite input."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value!r}")
    return value


def require_position(position) -> None:
    """Check that a position carries finite ``x`` and ``y`` coordinates."""
    if not hasattr(position, "x") or not hasattr(position, "y"):
        raise InvalidArgumentError(f"Expected a CourtPosition, got {position!r}")
    require_finite(position.x, "x")
    require_finite(position.y, "y")


def require_probability(probability) -> float:
    """Check that *probability* is a percentage inside the clamped range."""
    probability = require_finite(probability, "probability")
    if not MIN_PROBABILITY <= probability <= MAX_PROBABILITY:
        raise InvalidArgumentError(
            f"probability must be in [{MIN_PROBABILITY:g}, {MAX_PROBABILITY:g}], "
            f"got {probability!r}"
        )
    return probability


def require_trial_count(trial_count, max_trials: int) -> int:
    """Check that *trial_count* is an integer in ``[1, max_trials]``."""
    if isinstance(trial_count, bool) or not isinstance(trial_count, Integral):
        raise InvalidArgumentError(
            f"trial_count must be an integer, got {trial_count!r}"
        )
    if trial_count < 1:
        raise InvalidArgumentError(f"trial_count must be >= 1, got {trial_count}")
    if trial_count > max_trials:
        raise InvalidArgumentError(
            f"trial_count must be <= {max_trials}, got {trial_count}"
        )
    return int(trial_count)
