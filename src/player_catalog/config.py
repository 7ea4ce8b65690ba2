from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
PLAYER_DATA_DIR = DATA_DIR / "players"

# Catalog CSV name pattern (use .format(season=YYYY))
CATALOG_FILE_PATTERN = "players_{season}.csv"

VALID_POSITIONS = ("PG", "SG", "SF", "PF", "C", "G", "F", "UTIL")

STAT_FIELDS = (
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "three_pointers",
    "field_goal_percentage",
    "free_throw_percentage",
    "turnovers",
    "minutes",
    "games",
)

REQUIRED_COLUMNS = ("name", "team", "positions", "projected_rank")

# Header spellings seen in exported rankings -> canonical column
COLUMN_ALIASES = {
    "id": "player_id",
    "player": "name",
    "player_name": "name",
    "pos": "positions",
    "position": "positions",
    "rank": "projected_rank",
    "rk": "projected_rank",
    "injury": "injury_status",
    "pts": "points",
    "reb": "rebounds",
    "ast": "assists",
    "stl": "steals",
    "blk": "blocks",
    "3pm": "three_pointers",
    "fg%": "field_goal_percentage",
    "ft%": "free_throw_percentage",
    "to": "turnovers",
    "tov": "turnovers",
    "min": "minutes",
    "gp": "games",
}

DEFAULT_TIER = 10
PLAYERS_PER_TIER = 20
SEARCH_RESULT_LIMIT = 20
