"""Pointer input interpretation for the court rendering surface.

Turns raw press/move/release events in surface pixels into shot
placements and drags on a :class:`ShotSession`. The engines only ever
see the resulting court positions.
"""

import logging
import math
from typing import Optional, Tuple

from src.court_engine.config import COURT_LENGTH, COURT_WIDTH
from src.court_engine.models import CourtPosition
from src.court_engine.validation import InvalidArgumentError, require_finite
from src.shot_session.config import DRAG_THRESHOLD_PX, RENDER_SCALE
from src.shot_session.session_controller import ShotSession

logger = logging.getLogger(__name__)


def _require_positive(value, name: str) -> float:
    value = require_finite(value, name)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value!r}")
    return value


class PointerInterpreter:
    """Click-to-place and drag-to-move semantics over a pixel surface.

    The surface is ``94 x 50`` ft drawn at ``render_scale`` px/ft. When
    the surface is displayed at a different size, pass the displayed
    size to :meth:`to_surface` (or to the event methods) so client
    coordinates are rescaled first.
    """

    def __init__(
        self,
        session: ShotSession,
        render_scale: float = RENDER_SCALE,
        drag_threshold: float = DRAG_THRESHOLD_PX,
    ):
        self.session = session
        self.render_scale = _require_positive(render_scale, "render_scale")
        self.drag_threshold = _require_positive(drag_threshold, "drag_threshold")
        self.is_dragging = False
        self._marker: Optional[Tuple[float, float]] = None

    @property
    def surface_size(self) -> Tuple[float, float]:
        return COURT_LENGTH * self.render_scale, COURT_WIDTH * self.render_scale

    def to_surface(
        self,
        x: float,
        y: float,
        displayed_size: Optional[Tuple[float, float]] = None,
    ) -> Tuple[float, float]:
        """Map client coordinates to surface pixels."""
        x = require_finite(x, "x")
        y = require_finite(y, "y")
        if displayed_size is None:
            return x, y
        displayed_width, displayed_height = displayed_size
        displayed_width = _require_positive(displayed_width, "displayed width")
        displayed_height = _require_positive(displayed_height, "displayed height")
        width, height = self.surface_size
        return x * (width / displayed_width), y * (height / displayed_height)

    def to_court(self, px: float, py: float) -> CourtPosition:
        """Surface pixels to a position in the session model's units."""
        scale = self.session.model.geometry.scale
        return CourtPosition(
            x=px / self.render_scale * scale,
            y=py / self.render_scale * scale,
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def press(self, x: float, y: float, displayed_size=None):
        """Start a drag near the marker, otherwise place a new shot."""
        px, py = self.to_surface(x, y, displayed_size)

        if self._marker is not None and self.session.state.has_shot:
            if math.hypot(px - self._marker[0], py - self._marker[1]) < self.drag_threshold:
                self.is_dragging = True
                logger.debug("Drag started at (%.1f, %.1f)", px, py)
                return self.session.assessment

        assessment = self.session.place_or_move_shot(self.to_court(px, py))
        self._marker = (px, py)
        return assessment

    def move(self, x: float, y: float, displayed_size=None):
        """Move the shot while dragging; ignored otherwise.

        The marker is kept on the surface.
        """
        if not self.is_dragging:
            return None
        px, py = self.to_surface(x, y, displayed_size)
        width, height = self.surface_size
        px = max(0.0, min(width, px))
        py = max(0.0, min(height, py))

        assessment = self.session.place_or_move_shot(self.to_court(px, py))
        self._marker = (px, py)
        return assessment

    def release(self):
        """End any drag in progress (pointer up or leaving the surface)."""
        self.is_dragging = False

    def reset(self):
        """Reset the session and forget the marker."""
        self.release()
        self._marker = None
        self.session.reset()
