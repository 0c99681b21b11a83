from guess_game.config import MID_LIMIT, NEAR_LIMIT

# --- Buckets ---
EQUAL = "equal"
LESS_NEAR = "less-near"
LESS_MID = "less-mid"
LESS_FAR = "less-far"
GREATER_NEAR = "greater-near"
GREATER_MID = "greater-mid"
GREATER_FAR = "greater-far"

BUCKETS = (EQUAL, LESS_NEAR, LESS_MID, LESS_FAR,
           GREATER_NEAR, GREATER_MID, GREATER_FAR)


def distance_tier(absdiff):
    if absdiff <= NEAR_LIMIT:
        return "near"
    elif absdiff <= MID_LIMIT:
        return "mid"
    else:
        return "far"


def classify(guess, secret):
    """Map a guess to its feedback bucket relative to the secret."""
    diff = guess - secret
    if diff == 0:
        return EQUAL
    side = "less" if diff < 0 else "greater"
    return f"{side}-{distance_tier(abs(diff))}"
