"""Injectable random sources for the trial simulator."""

import random
import threading
from typing import Iterable, Optional, Protocol

from src.court_engine.validation import InvalidArgumentError
from src.simulation_engine.config import PERCENT_SCALE


class RandomSource(Protocol):
    """Anything that yields uniform draws in ``[0, 100)``."""

    def draw_percent(self) -> float:
        ...


class SeededRandomSource:
    """Pseudo-random stream backed by :class:`random.Random`.

    Draws are serialized with a lock so one stream can be shared between
    simulations running on different threads.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def draw_percent(self) -> float:
        with self._lock:
            return self._rng.random() * PERCENT_SCALE


class SequenceRandomSource:
    """Replays a fixed sequence of draws, for deterministic runs."""

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        for value in self._values:
            if not 0 <= value < PERCENT_SCALE:
                raise InvalidArgumentError(
                    f"Draws must be in [0, {PERCENT_SCALE:g}), got {value!r}"
                )
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def draw_percent(self) -> float:
        if self._index >= len(self._values):
            raise InvalidArgumentError(
                f"Random sequence exhausted after {len(self._values)} draws"
            )
        value = self._values[self._index]
        self._index += 1
        return value
