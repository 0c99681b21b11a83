"""Fixed game constants. None of these are meant to be tuned at runtime."""

# --- Debug ---
# Reveals the secret (and echoes parsed guesses) when True.
# The --debug command line flag overrides this per run.
DEBUG = False

# --- Secret range (inclusive) ---
SECRET_MIN = 1
SECRET_MAX = 100

# --- Feedback thresholds on |guess - secret| ---
NEAR_LIMIT = 5
MID_LIMIT = 20

# --- Accepted guess width (unsigned 8 bit) ---
GUESS_MIN = 0
GUESS_MAX = 255

# --- Exit codes ---
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

LOG_FORMAT = '[%(levelname)s] %(message)s'
