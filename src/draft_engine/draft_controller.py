"""Draft controller - orchestrates pick flow and state updates."""

import logging
import threading
from dataclasses import asdict
from datetime import datetime
from typing import Dict, List, Mapping, Optional

from src.draft_engine.draft_order import (
    BoardCell,
    advance,
    build_board,
    current_pick_number,
)
from src.draft_engine.draft_rules import DraftRules
from src.draft_engine.draft_state import Draft, DraftStatus, Pick, Team
from src.draft_engine.pick_queue import PickQueue
from src.draft_engine.pick_timer import PickTimer

logger = logging.getLogger(__name__)


class DraftController:
    """Main controller for draft orchestration.

    The only code path that mutates a :class:`Draft`. Coordinates DraftRules
    (validation), the draft order engine (advancement), the pick queue and
    the pick timer so that one recorded pick is applied as a single unit.
    """

    def __init__(
        self,
        draft: Draft,
        catalog: Optional[Mapping] = None,
        queue: Optional[PickQueue] = None,
        timer: Optional[PickTimer] = None,
    ):
        self.draft = draft
        self.catalog = catalog
        self.queue = queue
        self.timer = timer
        self.rules = DraftRules(draft, catalog)
        self._lock = threading.Lock()

    def start_draft(self):
        """Move a scheduled draft to in-progress and start the pick clock."""
        with self._lock:
            if self.draft.status != DraftStatus.SCHEDULED:
                return
            self.draft.status = DraftStatus.IN_PROGRESS
            self.draft.updated_at = datetime.now().isoformat()
            self._reset_timer()
        logger.info("Draft %s started", self.draft.draft_id)

    def make_pick(self, team_id: str, player_id: str) -> Pick:
        """Validate and record a draft pick.

        Args:
            team_id: ID of the team making the pick.
            player_id: ID of the player being drafted.

        Returns:
            The recorded Pick.

        Raises:
            ValidationError: If the pick is illegal (out of turn, player
                already drafted, slot filled, draft complete, etc.). The
                draft, queue and timer are left untouched.
        """
        with self._lock:
            is_valid, error = self.rules.validate_pick(team_id, player_id)
            if not is_valid:
                logger.warning("Invalid pick attempted: %s", error)
                raise error

            draft = self.draft
            current = draft.current_pick
            team = draft.get_team(team_id)
            pick = Pick.create(
                round=current.round,
                pick_number=current_pick_number(current, draft.settings.team_count),
                team_id=team_id,
                player_id=player_id,
            )
            next_pick = advance(current, draft.settings, draft.teams)

            # Commit
            team.picks.append(pick)
            if self.queue is not None:
                self.queue.remove(player_id)
            draft.current_pick = next_pick
            draft.updated_at = pick.timestamp
            if next_pick.is_terminal:
                draft.status = DraftStatus.COMPLETED
                draft.completed_at = pick.timestamp
                if self.timer is not None:
                    self.timer.stop()
            else:
                draft.status = DraftStatus.IN_PROGRESS
                self._reset_timer()

        logger.info(
            "Pick %d (Rd %d): %s (%s) selects %s",
            pick.pick_number,
            pick.round,
            team_id,
            team.name,
            self._player_name(player_id),
        )
        if draft.is_complete:
            logger.info("Draft %s complete after %d picks", draft.draft_id, pick.pick_number)

        return pick

    def _reset_timer(self):
        if self.timer is None or self.draft.current_pick.is_terminal:
            return
        self.timer.reset(
            current_pick_number(self.draft.current_pick, self.draft.settings.team_count)
        )

    # ------------------------------------------------------------------
    # Read-only views
    #
    # Every view holds the commit lock so a reader never sees a pick
    # recorded while the previous team is still on the clock.
    # ------------------------------------------------------------------
    @property
    def is_complete(self) -> bool:
        """Whether the draft is finished."""
        with self._lock:
            return self.draft.is_complete

    @property
    def current_pick_number(self) -> int:
        with self._lock:
            return current_pick_number(
                self.draft.current_pick, self.draft.settings.team_count
            )

    def get_current_team(self) -> Optional[Team]:
        """Get the team currently on the clock."""
        with self._lock:
            return self.draft.get_current_team()

    def get_board(self, player_lookup: Optional[Mapping] = None) -> List[List[BoardCell]]:
        """Board layout for rendering, decorated from the catalog by default."""
        lookup = player_lookup if player_lookup is not None else self.catalog
        with self._lock:
            draft = self.draft
            logger.debug(
                "Building board for draft %s at pick %d",
                draft.draft_id,
                current_pick_number(draft.current_pick, draft.settings.team_count),
            )
            return build_board(draft.settings, draft.teams, draft.current_pick, lookup)

    def get_available_players(self, position: Optional[str] = None) -> List:
        """Catalog players nobody has drafted yet, in catalog order.

        Args:
            position: If provided, keep only players eligible at it.
        """
        if self.catalog is None:
            return []
        with self._lock:
            drafted = self.draft.drafted_player_ids()
        players = []
        for player_id, player in self.catalog.items():
            if player_id in drafted:
                continue
            if position is None or position in player.positions:
                players.append(player)
        return players

    def get_team_roster(self, team_id: str) -> List:
        """Players drafted by a team, in pick order.

        Ids missing from the catalog are returned as bare ids.
        """
        with self._lock:
            team = self.draft.get_team(team_id)
            if team is None:
                return []
            player_ids = team.player_ids()
        catalog = self.catalog or {}
        return [catalog.get(pid, pid) for pid in player_ids]

    def get_draft_summary(self) -> Dict:
        """Generate summary of draft results.

        Returns dict with "error" key if draft is not yet complete.
        """
        with self._lock:
            if not self.draft.is_complete:
                return {"error": "Draft not complete"}

            summary = {
                "draft_id": self.draft.draft_id,
                "name": self.draft.name,
                "completed_at": self.draft.completed_at,
                "total_picks": self.draft.picks_made(),
                "teams": [],
            }
            for team in self.draft.ordered_teams():
                summary["teams"].append(
                    {
                        "team_id": team.team_id,
                        "team_name": team.name,
                        "owner": team.owner,
                        "display_position": team.display_position,
                        "picks": [asdict(pick) for pick in team.picks],
                    }
                )
        return summary

    def _player_name(self, player_id: str) -> str:
        if self.catalog is not None and player_id in self.catalog:
            return self.catalog[player_id].name
        return player_id
