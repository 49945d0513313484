# UI-layer trial count policy (the simulator itself rejects, never clamps)
MIN_TRIAL_COUNT = 1
MAX_TRIAL_COUNT = 1000
DEFAULT_TRIAL_COUNT = 10

# Rendering surface
RENDER_SCALE = 7.0  # Pixels per foot
DRAG_THRESHOLD_PX = 15.0  # Press within this radius of the marker starts a drag

DEFAULT_BASKET = "left"
