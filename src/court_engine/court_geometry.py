"""Court coordinate conversions between the court and a basket's frame."""

import logging
import math
from typing import Tuple

from src.court_engine.config import BASKET_OFFSET, COURT_LENGTH, COURT_WIDTH
from src.court_engine.models import BasketSelector, CourtPosition, ShotOffset
from src.court_engine.validation import (
    InvalidArgumentError,
    require_finite,
    require_position,
)

logger = logging.getLogger(__name__)


class CourtGeometry:
    """Fixed court constants and basket-relative conversions.

    Positions are expressed in scaled units: ``scale`` units per foot.
    With the default scale of 1.0 positions are plain feet; a rendering
    surface drawing at 7 px/ft can pass its pixel coordinates directly by
    using ``scale=7``. All distances returned are in feet.
    """

    def __init__(self, scale: float = 1.0):
        scale = require_finite(scale, "scale")
        if scale <= 0:
            raise InvalidArgumentError(f"scale must be positive, got {scale!r}")
        self.scale = scale

    def resolve_basket_coordinate(self, selector: BasketSelector) -> CourtPosition:
        """Return the fixed basket location for *selector* in scaled units."""
        selector = BasketSelector.parse(selector)
        if selector is BasketSelector.LEFT:
            basket_x = BASKET_OFFSET
        else:
            basket_x = COURT_LENGTH - BASKET_OFFSET
        return CourtPosition(x=basket_x * self.scale, y=(COURT_WIDTH / 2) * self.scale)

    def distance_and_offset(
        self, shot: CourtPosition, basket: CourtPosition
    ) -> ShotOffset:
        """Euclidean distance and signed basket-to-shot offsets, in feet.

        Any finite position is accepted, including positions beyond the
        court boundary.
        """
        require_position(shot)
        require_position(basket)
        dx = (shot.x - basket.x) / self.scale
        dy = (shot.y - basket.y) / self.scale
        return ShotOffset(distance=math.hypot(dx, dy), dx=dx, dy=dy)

    def court_bounds(self) -> Tuple[float, float]:
        """Court (length, width) in scaled units."""
        return COURT_LENGTH * self.scale, COURT_WIDTH * self.scale

    def is_on_court(self, position: CourtPosition) -> bool:
        """Whether *position* lies inside the court rectangle (edges included)."""
        require_position(position)
        length, width = self.court_bounds()
        return 0 <= position.x <= length and 0 <= position.y <= width

    def to_feet(self, position: CourtPosition) -> CourtPosition:
        """Strip the scale factor from *position*."""
        require_position(position)
        return CourtPosition(x=position.x / self.scale, y=position.y / self.scale)

    def from_feet(self, position: CourtPosition) -> CourtPosition:
        """Apply the scale factor to a position given in feet."""
        require_position(position)
        return CourtPosition(x=position.x * self.scale, y=position.y * self.scale)
