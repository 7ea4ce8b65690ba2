"""Mock draft simulation - computer drafters pick until the user is up."""

import logging
from typing import Dict, List, Optional

from src.autopick.runner import autopick
from src.autopick.strategies import BestAvailableStrategy
from src.draft_engine.draft_controller import DraftController
from src.draft_engine.draft_state import Pick

logger = logging.getLogger(__name__)


class MockDraftSimulator:
    """Drives a draft with strategies for every team except the user's.

    Args:
        controller: Controller over the mock draft (with a catalog).
        strategies: Optional per-team strategy overrides.
        default_strategy: Strategy for teams without an override.
        user_team_id: Team the user drafts for; the simulation stops when it
            is on the clock. ``None`` simulates every pick.
    """

    def __init__(
        self,
        controller: DraftController,
        strategies: Optional[Dict[str, object]] = None,
        default_strategy=None,
        user_team_id: Optional[str] = None,
    ):
        if controller.catalog is None:
            raise ValueError("Mock drafts need a controller with a player catalog")
        if user_team_id is not None and controller.draft.get_team(user_team_id) is None:
            raise ValueError(f"Team {user_team_id} is not part of this draft")

        self.controller = controller
        self.strategies = dict(strategies or {})
        self.default_strategy = default_strategy or BestAvailableStrategy()
        self.user_team_id = user_team_id
        self.paused = False

    @property
    def picks_made(self) -> int:
        return self.controller.draft.picks_made()

    @property
    def total_picks(self) -> int:
        return self.controller.draft.total_picks

    @property
    def is_complete(self) -> bool:
        return self.controller.is_complete

    @property
    def is_waiting_for_user(self) -> bool:
        team = self.controller.get_current_team()
        return team is not None and team.team_id == self.user_team_id

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def strategy_for(self, team_id: str):
        return self.strategies.get(team_id, self.default_strategy)

    def step(self) -> Optional[Pick]:
        """Make the pick for the team on the clock.

        Returns None without picking when paused, complete, or the user is up.
        """
        if self.paused or self.is_complete or self.is_waiting_for_user:
            return None
        team = self.controller.get_current_team()
        return autopick(self.controller, self.strategy_for(team.team_id))

    def run(self, max_picks: Optional[int] = None) -> List[Pick]:
        """Simulate picks until complete, paused, the user is up, or ``max_picks``."""
        if self.controller.draft.picks_made() == 0:
            self.controller.start_draft()

        made: List[Pick] = []
        while max_picks is None or len(made) < max_picks:
            pick = self.step()
            if pick is None:
                break
            made.append(pick)

        logger.info(
            "Mock draft %s: simulated %d picks (%d/%d made)",
            self.controller.draft.draft_id,
            len(made),
            self.picks_made,
            self.total_picks,
        )
        return made
