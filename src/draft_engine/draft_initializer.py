"""Draft initialization - creates new draft instances and loads their player pool."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from src.draft_engine.config import (
    DEFAULT_SCORING_FORMAT,
    DEFAULT_SERPENTINE,
    DEFAULT_TIME_PER_PICK,
    DEFAULT_TOTAL_ROUNDS,
    MAX_TEAM_COUNT,
    MAX_TOTAL_ROUNDS,
    MIN_TEAM_COUNT,
)
from src.draft_engine.draft_state import Draft, DraftSettings, Team
from src.draft_engine.errors import InvalidSettingsError
from src.player_catalog.config import CATALOG_FILE_PATTERN, PLAYER_DATA_DIR
from src.player_catalog.ingestion import load_catalog
from src.player_catalog.models import Player

logger = logging.getLogger(__name__)


class DraftInitializer:
    """Handles creation of new draft instances."""

    def __init__(self, player_data_dir: Optional[Path] = None):
        self.player_data_dir = player_data_dir or PLAYER_DATA_DIR

    def create_draft(
        self,
        name: str,
        team_names: List[str],
        total_rounds: int = DEFAULT_TOTAL_ROUNDS,
        time_per_pick_seconds: int = DEFAULT_TIME_PER_PICK,
        serpentine: bool = DEFAULT_SERPENTINE,
        scoring_format: str = DEFAULT_SCORING_FORMAT,
        owners: Optional[List[str]] = None,
        draft_positions: Optional[List[int]] = None,
    ) -> Draft:
        """
        Create a new draft instance.

        Args:
            name: Display name of the draft
            team_names: Team names; team ids are assigned in this order
                ("team_1", "team_2", ...)
            total_rounds: Number of rounds (1-25)
            time_per_pick_seconds: Pick clock length; 0 disables the clock
            serpentine: Reverse the order on even rounds
            scoring_format: "standard", "points", "roto", "h2h" or "custom"
            owners: Owner per team (defaults to empty)
            draft_positions: Round-1 slot per team (defaults to list order)

        Returns:
            Draft in "scheduled" status, ready to begin drafting

        Raises:
            InvalidSettingsError: If any input describes an invalid draft
        """
        team_count = len(team_names)
        self._validate_inputs(team_count, total_rounds, team_names, owners, draft_positions)

        settings = DraftSettings(
            total_rounds=total_rounds,
            team_count=team_count,
            time_per_pick_seconds=time_per_pick_seconds,
            serpentine=serpentine,
            scoring_format=scoring_format,
        )

        positions = draft_positions or list(range(1, team_count + 1))
        teams = [
            Team(
                team_id=f"team_{i + 1}",
                name=team_name,
                owner=owners[i] if owners else "",
                display_position=positions[i],
            )
            for i, team_name in enumerate(team_names)
        ]

        draft = Draft.create_new(name=name, settings=settings, teams=teams)

        logger.info(
            "Created draft %s (%s): %d teams, %d rounds, %s scoring, serpentine=%s",
            draft.draft_id,
            name,
            team_count,
            total_rounds,
            scoring_format,
            serpentine,
        )

        return draft

    def _validate_inputs(
        self,
        team_count: int,
        total_rounds: int,
        team_names: List[str],
        owners: Optional[List[str]],
        draft_positions: Optional[List[int]],
    ):
        """Validate draft configuration inputs."""
        if team_count < MIN_TEAM_COUNT or team_count > MAX_TEAM_COUNT:
            raise InvalidSettingsError(
                f"Team count must be between {MIN_TEAM_COUNT} and {MAX_TEAM_COUNT} "
                f"(got {team_count})"
            )

        if total_rounds < 1 or total_rounds > MAX_TOTAL_ROUNDS:
            raise InvalidSettingsError(
                f"Total rounds must be between 1 and {MAX_TOTAL_ROUNDS} (got {total_rounds})"
            )

        if any(not n or not n.strip() for n in team_names):
            raise InvalidSettingsError("Team names cannot be blank")

        if owners is not None and len(owners) != team_count:
            raise InvalidSettingsError(
                f"Number of owners ({len(owners)}) "
                f"must match number of teams ({team_count})"
            )

        if draft_positions is not None and len(draft_positions) != team_count:
            raise InvalidSettingsError(
                f"Number of draft positions ({len(draft_positions)}) "
                f"must match number of teams ({team_count})"
            )

    def load_players(self, season: int) -> Dict[str, Player]:
        """Load the player catalog CSV for a season."""
        csv_path = self.player_data_dir / CATALOG_FILE_PATTERN.format(season=season)

        if not csv_path.exists():
            raise FileNotFoundError(
                f"No player catalog found for {season} at {csv_path}"
            )

        players = load_catalog(csv_path)
        logger.info("Loaded %d players for %d season", len(players), season)
        return players
