# Scoring categories (9-cat); turnovers count against a team
CATEGORIES = (
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "three_pointers",
    "field_goal_percentage",
    "free_throw_percentage",
    "turnovers",
)
NEGATIVE_CATEGORIES = {"turnovers"}
PERCENTAGE_CATEGORIES = {"field_goal_percentage", "free_throw_percentage"}

# Roster construction targets used by the position-need strategy
POSITION_TARGETS = {
    "PG": 2,
    "SG": 2,
    "SF": 2,
    "PF": 2,
    "C": 2,
}

ROSTER_NEED_WEIGHT = 0.5  # How much to weight positional needs

# Computer drafter parameters
CANDIDATE_POOL_SIZE = 15  # Top N available players considered per pick
PERSONALITY_VARIANCE = 0.05  # +/- 5% randomness

DEFAULT_STRATEGY = "best-player-available"
