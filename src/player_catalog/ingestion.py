"""CSV ingestion for the player catalog.

Handles the quirks of hand-maintained and exported ranking sheets:
- Header spellings vary (``PTS`` vs ``points``, ``FG%``, ``Player Name``)
- Comma-formatted numbers (e.g., "1,204.5")
- Multi-position cells ("PG/SG", "SF, PF")
- Blank placeholder rows
"""

import logging
import math
import re
from pathlib import Path
from typing import Dict, Iterable, List

import pandas as pd

from src.player_catalog.config import (
    COLUMN_ALIASES,
    DEFAULT_TIER,
    PLAYERS_PER_TIER,
    REQUIRED_COLUMNS,
    STAT_FIELDS,
    VALID_POSITIONS,
)
from src.player_catalog.models import Player, PlayerStats

logger = logging.getLogger(__name__)

_POSITION_SPLIT = re.compile(r"[/,;\s]+")
_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


class IngestionError(Exception):
    """Raised when catalog ingestion fails."""


def _parse_numeric(value):
    """Parse a numeric string that may contain commas (e.g., '1,204.5' -> 1204.5)."""
    if pd.isna(value):
        return float("nan")
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).replace(",", "").strip().strip('"')
    if s == "":
        return float("nan")
    try:
        return float(s)
    except ValueError:
        return float("nan")


def _normalize_column(name: str) -> str:
    key = str(name).strip().lower()
    if key in COLUMN_ALIASES:
        return COLUMN_ALIASES[key]
    key = re.sub(r"[\s\-]+", "_", key)
    return COLUMN_ALIASES.get(key, key)


def parse_positions(value) -> List[str]:
    """Split a position cell into canonical position codes.

    Examples:
        "PG/SG"   -> ["PG", "SG"]
        "sf, pf"  -> ["SF", "PF"]
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return []
    positions = []
    for token in _POSITION_SPLIT.split(str(value).upper()):
        if token and token not in positions:
            positions.append(token)
    return positions


def make_player_id(name: str, team: str) -> str:
    """Stable id for rows that do not carry one ("LeBron James", "LAL" -> "lebron-james-lal")."""
    return _SLUG_STRIP.sub("-", f"{name} {team}".lower()).strip("-")


class PlayerCatalogIngester:
    """Reads a player catalog CSV into :class:`Player` records.

    :meth:`read_frame` returns the cleaned pandas DataFrame; :meth:`read_players`
    converts it into a ``player_id -> Player`` dict in projected-rank order.
    """

    def __init__(self, csv_path: Path):
        self.csv_path = Path(csv_path)

    def read_frame(self) -> pd.DataFrame:
        """Read and clean the CSV.

        Raises:
            FileNotFoundError: If the file does not exist.
            IngestionError: If required columns are missing.
        """
        if not self.csv_path.exists():
            raise FileNotFoundError(f"Expected file not found: {self.csv_path}")

        logger.info("Reading player catalog: %s", self.csv_path.name)
        try:
            df = pd.read_csv(self.csv_path, quotechar='"', dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read {self.csv_path}: {e}") from e

        df = df.rename(columns=_normalize_column)

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise IngestionError(
                f"{self.csv_path.name} is missing required columns: {missing}"
            )

        # Clean string columns
        for col in df.columns:
            df[col] = df[col].str.strip().str.strip('"').str.strip()

        # Drop blank placeholder rows
        df = df[df["name"] != ""].reset_index(drop=True)

        df["projected_rank"] = df["projected_rank"].apply(_parse_numeric)
        bad_rank = df["projected_rank"].isna()
        if bad_rank.any():
            raise IngestionError(
                f"Non-numeric projected_rank for: {df.loc[bad_rank, 'name'].tolist()}"
            )

        for col in STAT_FIELDS + ("adp", "tier"):
            if col in df.columns:
                df[col] = df[col].apply(_parse_numeric)

        if "player_id" not in df.columns:
            df["player_id"] = ""
        no_id = df["player_id"] == ""
        if no_id.any():
            df.loc[no_id, "player_id"] = [
                make_player_id(name, team)
                for name, team in zip(df.loc[no_id, "name"], df.loc[no_id, "team"])
            ]

        dupes = df["player_id"][df["player_id"].duplicated()]
        if not dupes.empty:
            raise IngestionError(f"Duplicate player ids: {sorted(set(dupes))}")

        df = df.sort_values("projected_rank", kind="stable").reset_index(drop=True)
        logger.info("Loaded %d catalog rows", len(df))
        return df

    def read_players(self) -> Dict[str, Player]:
        """Read the CSV and build ``player_id -> Player`` in rank order."""
        df = self.read_frame()
        return {
            player.player_id: player
            for player in (self._row_to_player(row) for _, row in df.iterrows())
        }

    def _row_to_player(self, row: pd.Series) -> Player:
        positions = parse_positions(row["positions"])
        invalid = [p for p in positions if p not in VALID_POSITIONS]
        if not positions or invalid:
            raise IngestionError(
                f"Invalid positions {row['positions']!r} for {row['name']}"
            )

        rank = int(row["projected_rank"])
        stats = PlayerStats(
            **{
                name: _or_default(row.get(name), 0.0)
                for name in STAT_FIELDS
            }
        )
        return Player(
            player_id=row["player_id"],
            name=row["name"],
            team=row["team"],
            positions=positions,
            projected_rank=rank,
            stats=stats,
            adp=_or_default(row.get("adp"), float(rank)),
            tier=int(_or_default(row.get("tier"), default_tier(rank))),
            injury_status=row.get("injury_status", "") or "",
            notes=row.get("notes", "") or "",
        )


def _or_default(value, default):
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return default
    return float(value)


def default_tier(projected_rank: int) -> int:
    """Tier used when a row has none: blocks of twenty by rank."""
    if projected_rank <= 0:
        return DEFAULT_TIER
    return math.ceil(projected_rank / PLAYERS_PER_TIER)


def load_catalog(csv_path: Path) -> Dict[str, Player]:
    """Convenience wrapper: ``PlayerCatalogIngester(csv_path).read_players()``."""
    return PlayerCatalogIngester(csv_path).read_players()


def catalog_from_records(records: Iterable[Dict]) -> Dict[str, Player]:
    """Build a catalog from JSON-style dicts (as produced by ``Player.to_dict``)."""
    catalog: Dict[str, Player] = {}
    for record in records:
        rank = int(record["projected_rank"])
        player = Player(
            player_id=record.get("player_id") or make_player_id(record["name"], record["team"]),
            name=record["name"],
            team=record["team"],
            positions=parse_positions(record["positions"])
            if isinstance(record["positions"], str)
            else list(record["positions"]),
            projected_rank=rank,
            stats=PlayerStats(**record.get("stats", {})),
            adp=float(record.get("adp", rank)),
            tier=int(record.get("tier", default_tier(rank))),
            injury_status=record.get("injury_status", ""),
            notes=record.get("notes", ""),
        )
        if player.player_id in catalog:
            raise IngestionError(f"Duplicate player id: {player.player_id}")
        catalog[player.player_id] = player
    return catalog
