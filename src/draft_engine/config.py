from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DRAFTS_DIR = PROJECT_ROOT / "data" / "drafts"

# Default draft settings
DEFAULT_TOTAL_ROUNDS = 13
DEFAULT_TEAM_COUNT = 12
DEFAULT_TIME_PER_PICK = 90  # seconds
DEFAULT_SCORING_FORMAT = "standard"
DEFAULT_SERPENTINE = True

VALID_SCORING_FORMATS = ("standard", "points", "roto", "h2h", "custom")

# Bounds accepted at draft creation
MIN_TEAM_COUNT = 2
MAX_TEAM_COUNT = 20
MAX_TOTAL_ROUNDS = 25
