"""Draft rule enforcement and pick validation."""

from typing import Mapping, Optional, Tuple

from src.draft_engine.draft_order import current_pick_number
from src.draft_engine.draft_state import Draft
from src.draft_engine.errors import (
    DraftCompleteError,
    DuplicatePickError,
    OutOfTurnError,
    PlayerAlreadyDraftedError,
    PlayerNotFoundError,
    UnknownTeamError,
    ValidationError,
)


class DraftRules:
    """Enforces all draft rules and validation logic.

    Checks only read the draft; nothing here mutates state.
    """

    def __init__(self, draft: Draft, catalog: Optional[Mapping] = None):
        self.draft = draft
        self.catalog = catalog

    def validate_pick(
        self, team_id: str, player_id: str
    ) -> Tuple[bool, Optional[ValidationError]]:
        """
        Validate if a pick is legal against the authoritative current pick.

        Returns:
            (is_valid, error) - (True, None) if valid
        """
        draft = self.draft
        current = draft.current_pick

        # Check 1: Is the draft still running?
        if draft.is_complete or current.is_terminal:
            return False, DraftCompleteError("Draft is already complete")

        # Check 2: Does the team belong to this draft?
        team = draft.get_team(team_id)
        if team is None:
            return False, UnknownTeamError(f"Team {team_id} is not part of this draft")

        # Check 3: Is it this team's turn?
        if team_id != current.team_id:
            return False, OutOfTurnError(
                f"Not team {team_id}'s turn "
                f"(round {current.round}, pick {current.pick_in_round}: "
                f"{current.team_id})"
            )

        # Check 4: Does the player exist in the catalog?
        if self.catalog is not None and player_id not in self.catalog:
            return False, PlayerNotFoundError(
                f"Player {player_id} not found in player catalog"
            )

        # Check 5: Has any team already drafted this player?
        if draft.is_player_drafted(player_id):
            return False, PlayerAlreadyDraftedError(
                f"{self._player_label(player_id)} has already been drafted"
            )

        # Check 6: Is the slot still empty?
        pick_number = current_pick_number(current, draft.settings.team_count)
        if team.has_pick_at(current.round, pick_number):
            return False, DuplicatePickError(
                f"Pick {pick_number} (round {current.round}) has already been made"
            )

        return True, None

    def _player_label(self, player_id: str) -> str:
        if self.catalog is not None and player_id in self.catalog:
            return getattr(self.catalog[player_id], "name", player_id)
        return player_id
