import math

# NBA court dimensions (feet)
COURT_LENGTH = 94.0
COURT_WIDTH = 50.0
THREE_POINT_ARC = 22.0
THREE_POINT_LINE = 23.75  # Corner three-point distance
KEY_WIDTH = 16.0
BASKET_OFFSET = 5.25  # Basket distance from each baseline

# Zone labels
ZONE_RESTRICTED_AREA = "Restricted Area"
ZONE_PAINT = "Paint"
ZONE_MID_RANGE = "Mid-Range"
ZONE_LONG_MID_RANGE = "Long Mid-Range"
ZONE_CORNER_THREE = "Corner Three"
ZONE_THREE_POINT = "Three-Point"
ZONE_DEEP_THREE = "Deep Three"
ZONE_HALF_COURT = "Half Court Range"
ZONE_FULL_COURT = "Full Court"

ZONE_LABELS = (
    ZONE_RESTRICTED_AREA,
    ZONE_PAINT,
    ZONE_MID_RANGE,
    ZONE_LONG_MID_RANGE,
    ZONE_CORNER_THREE,
    ZONE_THREE_POINT,
    ZONE_DEEP_THREE,
    ZONE_HALF_COURT,
    ZONE_FULL_COURT,
)

# Inside-the-arc bands: (upper distance bound, base probability, zone)
# First match wins on distance < upper bound.
INSIDE_ARC_BANDS = (
    (3.0, 63.0, ZONE_RESTRICTED_AREA),
    (8.0, 42.0, ZONE_PAINT),
    (16.0, 40.0, ZONE_MID_RANGE),
    (THREE_POINT_LINE, 38.0, ZONE_LONG_MID_RANGE),
)

# Three-point band (23.75 <= d < 47)
THREE_POINT_BAND_LIMIT = 47.0
CORNER_LATERAL_OFFSET = 14.0  # |dy| beyond this counts as a corner shot
THREE_POINT_RANGE = 28.0
DEEP_THREE_RANGE = 35.0
CORNER_THREE_PROBABILITY = 39.0
THREE_POINT_PROBABILITY = 36.0
DEEP_THREE_PROBABILITY = 25.0
HALF_COURT_PROBABILITY = 15.0
LONG_RANGE_FALLOFF = 0.8  # Percentage points lost per foot beyond THREE_POINT_RANGE

# Full court band (d >= 47)
FULL_COURT_PROBABILITY = 5.0
HEAVE_DISTANCE = 70.0
HEAVE_PROBABILITY = 2.0

# Wing-angle bonus
WING_ANGLE = math.pi / 4  # 45 degrees, exclusive
WING_MIN_DISTANCE = 10.0  # Exclusive
WING_MAX_DISTANCE = 30.0  # Exclusive
WING_BONUS = 2.0

# Final probability clamp (percent)
MIN_PROBABILITY = 1.0
MAX_PROBABILITY = 95.0

# Probability grid defaults
DEFAULT_GRID_STEP_FEET = 1.0
