# Seed for the default weight/bias initialization generator.
SAMPLE_SEED = 2147483647

NUM_INPUTS = 2

LEARNING_RATE = 0.1
TARGET_ACCURACY = 0.99
MOMENTUM = 0.8

# Momentum memory of a connection that has never been adjusted.
INITIAL_PREVIOUS_STEP = 1.0

DEFAULT_MAX_EPOCHS = 100_000

# Uniform ranges for random initialization: [low, high).
WEIGHT_RANGE = (0.0, 0.1)
BIAS_RANGE = (0.0, 1.0)

DEFAULT_CUTOFF = 0.5
