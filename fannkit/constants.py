"""Default parameters and numeric constants for networks and training."""

# Gradient descent
DEFAULT_LEARNING_RATE = 0.7
DEFAULT_LEARNING_MOMENTUM = 0.0

# Connection rates
DEFAULT_CONNECTION_RATE = 1.0
DEFAULT_SHORTCUT_CONNECTION_RATE = 0.0

# Quickprop
DEFAULT_QUICKPROP_DECAY = -0.0001
DEFAULT_QUICKPROP_MU = 1.75

# RPROP
DEFAULT_RPROP_INCREASE_FACTOR = 1.2
DEFAULT_RPROP_DECREASE_FACTOR = 0.5
DEFAULT_RPROP_DELTA_MIN = 0.000001
DEFAULT_RPROP_DELTA_MAX = 50.0
DEFAULT_RPROP_DELTA_ZERO = 0.0125

# SARPROP
DEFAULT_SARPROP_STEP_ERROR_THRESHOLD_FACTOR = 0.1
DEFAULT_SARPROP_STEP_ERROR_SHIFT = 1.385
DEFAULT_SARPROP_TEMPERATURE = 0.015
DEFAULT_SARPROP_WEIGHT_DECAY_SHIFT = -6.644
DEFAULT_SARPROP_EPOCH = 1

# Cascade training
DEFAULT_CASCADE_OUTPUT_CHANGE_FRACTION = 0.01
DEFAULT_CASCADE_CANDIDATE_CHANGE_FRACTION = 0.01
DEFAULT_CASCADE_OUTPUT_STAGNATION_EPOCHS = 12
DEFAULT_CASCADE_CANDIDATE_STAGNATION_EPOCHS = 12
DEFAULT_CASCADE_WEIGHT_MULTIPLIER = 0.4
DEFAULT_CASCADE_CANDIDATE_LIMIT = 1000.0
DEFAULT_CASCADE_MAX_OUT_EPOCHS = 150
DEFAULT_CASCADE_MAX_CAND_EPOCHS = 150
DEFAULT_CASCADE_MIN_OUT_EPOCHS = 50
DEFAULT_CASCADE_MIN_CAND_EPOCHS = 50
DEFAULT_CASCADE_NUM_CANDIDATE_GROUPS = 2

# Activation steepness
DEFAULT_ACTIVATION_STEEPNESS_HIDDEN = 0.5
DEFAULT_ACTIVATION_STEEPNESS_OUTPUT = 0.5

# Training
DEFAULT_BIT_FAIL_LIMIT = 0.35

# Small values for numerical stability
EPSILON_QUICKPROP = 0.000001
EPSILON_RPROP = 0.0001
EPSILON_DEFAULT = 0.000001

# Largest integer exactly representable in a double
MAX_SAFE_INTEGER = 1 << 53

# Reflective training
DEFAULT_TARGET_ACCURACY = 0.95
DEFAULT_IMPROVEMENT_THRESHOLD = 0.01
DEFAULT_MAX_REFLECTION_CYCLES = 100
DEFAULT_LEARNING_RATE_DECAY_FACTOR = 0.95
DEFAULT_PLATEAU_PATIENCE = 3
DEFAULT_WEAKNESS_THRESHOLD = 0.1
DEFAULT_MAX_WEAKNESSES = 5
DEFAULT_SAMPLES_PER_WEAKNESS = 10
DEFAULT_DIVERSITY_FACTOR = 0.2

# Mixture-of-experts router
DEFAULT_DIVERSITY_BONUS = 0.1
DEFAULT_CONFIDENCE_WEIGHT_FACTOR = 0.7
DEFAULT_DOMAIN_WEIGHT_FACTOR = 0.3
DEFAULT_ADAPTATION_RATE = 0.1

# Fixed-point arithmetic
DEFAULT_FIXED_POINT_DECIMALS = 10
FIXED_POINT_MULTIPLIER = 1024