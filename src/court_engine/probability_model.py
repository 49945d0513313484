"""Shot make probability by court position.

Classifies a shot into a zone by its distance from the target basket,
looks up that zone's base make percentage, then applies:

* a linear falloff for three-point-band shots beyond 28 ft,
* a flat wing-angle bonus for 10-30 ft shots taken from wide angles,
* a final clamp into [1, 95] percent.

The zone label only ever depends on distance (plus lateral offset inside
the three-point band); the wing bonus changes the probability only.
"""

import logging
import math
from typing import Optional, Tuple

from src.court_engine.config import (
    CORNER_LATERAL_OFFSET,
    CORNER_THREE_PROBABILITY,
    DEEP_THREE_PROBABILITY,
    DEEP_THREE_RANGE,
    FULL_COURT_PROBABILITY,
    HALF_COURT_PROBABILITY,
    HEAVE_DISTANCE,
    HEAVE_PROBABILITY,
    INSIDE_ARC_BANDS,
    LONG_RANGE_FALLOFF,
    MAX_PROBABILITY,
    MIN_PROBABILITY,
    THREE_POINT_BAND_LIMIT,
    THREE_POINT_PROBABILITY,
    THREE_POINT_RANGE,
    WING_ANGLE,
    WING_BONUS,
    WING_MAX_DISTANCE,
    WING_MIN_DISTANCE,
    ZONE_CORNER_THREE,
    ZONE_DEEP_THREE,
    ZONE_FULL_COURT,
    ZONE_HALF_COURT,
    ZONE_THREE_POINT,
)
from src.court_engine.court_geometry import CourtGeometry
from src.court_engine.models import (
    BasketSelector,
    CourtPosition,
    ShotAssessment,
    ShotOffset,
)

logger = logging.getLogger(__name__)


class ProbabilityModel:
    """Map a court position and target basket to a :class:`ShotAssessment`.

    The model is stateless and pure; the only configuration is the
    geometry used to resolve baskets and strip the rendering scale.
    """

    def __init__(self, geometry: Optional[CourtGeometry] = None):
        self.geometry = geometry or CourtGeometry()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def assess(self, shot: CourtPosition, target: BasketSelector) -> ShotAssessment:
        """Assess a shot from *shot* at the *target* basket.

        Raises:
            InvalidArgumentError: If the position has non-finite
                coordinates or *target* is not a basket selector.
        """
        target = BasketSelector.parse(target)
        basket = self.geometry.resolve_basket_coordinate(target)
        offset = self.geometry.distance_and_offset(shot, basket)

        base, zone = self._classify(offset)
        if self._has_wing_bonus(offset):
            base += WING_BONUS

        probability = max(MIN_PROBABILITY, min(MAX_PROBABILITY, base))

        logger.debug(
            "Assessed shot (%.2f, %.2f) at %s basket: %.1f ft, %s, %.1f%%",
            shot.x, shot.y, target.value, offset.distance, zone, probability,
        )
        return ShotAssessment(
            probability_percent=probability,
            distance_feet=round(offset.distance, 1),
            zone_label=zone,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _classify(offset: ShotOffset) -> Tuple[float, str]:
        """Base probability and zone label; first matching band wins."""
        distance = offset.distance

        for upper, probability, zone in INSIDE_ARC_BANDS:
            if distance < upper:
                return probability, zone

        if distance < THREE_POINT_BAND_LIMIT:
            if abs(offset.dy) > CORNER_LATERAL_OFFSET and distance < THREE_POINT_RANGE:
                base, zone = CORNER_THREE_PROBABILITY, ZONE_CORNER_THREE
            elif distance < THREE_POINT_RANGE:
                base, zone = THREE_POINT_PROBABILITY, ZONE_THREE_POINT
            elif distance < DEEP_THREE_RANGE:
                base, zone = DEEP_THREE_PROBABILITY, ZONE_DEEP_THREE
            else:
                base, zone = HALF_COURT_PROBABILITY, ZONE_HALF_COURT

            # May go negative; the final clamp absorbs it.
            if distance > THREE_POINT_RANGE:
                base -= (distance - THREE_POINT_RANGE) * LONG_RANGE_FALLOFF
            return base, zone

        if distance > HEAVE_DISTANCE:
            return HEAVE_PROBABILITY, ZONE_FULL_COURT
        return FULL_COURT_PROBABILITY, ZONE_FULL_COURT

    @staticmethod
    def _has_wing_bonus(offset: ShotOffset) -> bool:
        """Wide-angle bonus window: angle > 45 degrees and 10 < d < 30 ft.

        The angle is taken on raw court offsets against the +x axis for
        both baskets, so the window is not mirrored for the right basket.
        """
        if not WING_MIN_DISTANCE < offset.distance < WING_MAX_DISTANCE:
            return False
        angle = abs(math.atan2(offset.dy, offset.dx))
        return angle > WING_ANGLE
