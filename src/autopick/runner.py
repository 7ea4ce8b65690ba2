"""Submitting strategy choices as ordinary picks."""

import logging
from typing import Optional

from src.autopick.models import AutopickContext
from src.draft_engine.draft_controller import DraftController
from src.draft_engine.draft_state import Pick
from src.draft_engine.errors import DraftCompleteError, ValidationError
from src.draft_engine.pick_queue import PickQueue

logger = logging.getLogger(__name__)


def build_context(
    controller: DraftController, queue: Optional[PickQueue] = None
) -> AutopickContext:
    """Snapshot of what the team on the clock can choose from."""
    team = controller.get_current_team()
    if team is None:
        raise DraftCompleteError("Draft is already complete")
    roster = [p for p in controller.get_team_roster(team.team_id) if not isinstance(p, str)]
    available = sorted(
        controller.get_available_players(), key=lambda p: (p.projected_rank, p.adp)
    )
    return AutopickContext(
        draft=controller.draft,
        team=team,
        available_players=available,
        roster=roster,
        queue=queue if queue is not None else controller.queue,
    )


def autopick(controller: DraftController, strategy, queue: Optional[PickQueue] = None) -> Pick:
    """Ask ``strategy`` for a player and submit it for the team on the clock."""
    context = build_context(controller, queue)
    player_id = strategy.select_player(context)
    logger.info(
        "Autopick (%s) for %s: %s",
        getattr(strategy, "name", type(strategy).__name__),
        context.team.team_id,
        player_id,
    )
    return controller.make_pick(context.team.team_id, player_id)


class AutopickOnExpiry:
    """Pick-timer callback that autopicks when the clock runs out.

    Register with ``timer.on_expire(AutopickOnExpiry(controller, strategy))``.
    An expiry for a pick that is no longer on the clock is ignored.
    """

    def __init__(self, controller: DraftController, strategy, queue: Optional[PickQueue] = None):
        self.controller = controller
        self.strategy = strategy
        self.queue = queue

    def __call__(self, pick_number: int) -> Optional[Pick]:
        if self.controller.is_complete or pick_number != self.controller.current_pick_number:
            logger.info("Ignoring stale pick-clock expiry for pick %d", pick_number)
            return None
        try:
            return autopick(self.controller, self.strategy, self.queue)
        except ValidationError as e:
            # A manual pick landed between expiry and submission
            logger.warning("Autopick for pick %d rejected: %s", pick_number, e)
            return None
