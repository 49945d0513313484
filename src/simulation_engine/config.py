# Monte Carlo shot parameters
MAX_TRIALS = 100_000  # Hard cap enforced by TrialSimulator
PERCENT_SCALE = 100.0  # Draws are uniform in [0, PERCENT_SCALE)

# Rounding for running make-percentage and accuracy
PERCENTAGE_DECIMALS = 1

# Progression frame columns (chart collaborator input)
PROGRESSION_COLUMNS = ["shot", "made", "missed", "percentage"]
