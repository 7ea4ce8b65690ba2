"""Autopick strategies.

A strategy is any object with ``select_player(context) -> player_id``. They
are stateless apart from an optional seeded RNG, and never touch the draft:
the caller submits the returned id as an ordinary pick.
"""

import logging
import random
from typing import Dict, List, Optional

import pandas as pd

from src.autopick.config import (
    CANDIDATE_POOL_SIZE,
    CATEGORIES,
    NEGATIVE_CATEGORIES,
    PERSONALITY_VARIANCE,
    POSITION_TARGETS,
    ROSTER_NEED_WEIGHT,
)
from src.autopick.models import AutopickContext, NoPlayersAvailableError
from src.player_catalog.models import Player

logger = logging.getLogger(__name__)


def _require_pool(context: AutopickContext) -> List[Player]:
    if not context.available_players:
        raise NoPlayersAvailableError(
            f"No players left for {context.team.team_id} to draft"
        )
    return context.available_players


class BestAvailableStrategy:
    """Lowest projected rank wins; ADP breaks ties."""

    name = "best-player-available"

    def select_player(self, context: AutopickContext) -> str:
        pool = _require_pool(context)
        best = min(pool, key=lambda p: (p.projected_rank, p.adp))
        return best.player_id


class QueueFirstStrategy:
    """Take the first queued player still available, else defer to ``fallback``."""

    name = "queue"

    def __init__(self, fallback=None):
        self.fallback = fallback or BestAvailableStrategy()

    def select_player(self, context: AutopickContext) -> str:
        if context.queue is not None:
            available_ids = {p.player_id for p in context.available_players}
            for player_id in context.queue:
                if player_id in available_ids:
                    return player_id
        return self.fallback.select_player(context)


class PositionNeedStrategy:
    """Best available, weighted toward positions the roster still needs.

    For each candidate::

        value = (pool_size - index_in_pool) * need
        need  = 1 + (open_slots / target_slots) * need_weight

    using the most-needed of the player's positions. Only the top
    ``pool_size`` available players by rank are considered.
    """

    name = "position-scarcity"

    def __init__(
        self,
        targets: Optional[Dict[str, int]] = None,
        need_weight: float = ROSTER_NEED_WEIGHT,
        pool_size: int = CANDIDATE_POOL_SIZE,
    ):
        self.targets = dict(targets or POSITION_TARGETS)
        self.need_weight = need_weight
        self.pool_size = pool_size

    def select_player(self, context: AutopickContext) -> str:
        pool = _require_pool(context)[: self.pool_size]
        filled = self._count_positions(context.roster)

        best_id, best_value = None, float("-inf")
        for index, player in enumerate(pool):
            value = (len(pool) - index) * self._need_multiplier(player, filled)
            if value > best_value:
                best_id, best_value = player.player_id, value

        logger.debug(
            "Position-need pick for %s: %s (value %.2f)",
            context.team.team_id, best_id, best_value,
        )
        return best_id

    def _need_multiplier(self, player: Player, filled: Dict[str, int]) -> float:
        best = 1.0
        for position in player.positions:
            total = self.targets.get(position, 0)
            if total == 0:
                continue
            empty = max(total - filled.get(position, 0), 0)
            best = max(best, 1.0 + (empty / total) * self.need_weight)
        return best

    @staticmethod
    def _count_positions(roster: List[Player]) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for player in roster:
            for position in player.positions:
                counts[position] = counts.get(position, 0) + 1
        return counts


class BalancedStrategy:
    """Highest summed category z-score across the available pool.

    A small per-pick jitter (``variance``) keeps simulated drafters from all
    making identical choices; pass ``variance=0`` for deterministic picks.
    """

    name = "balanced"

    def __init__(self, variance: float = PERSONALITY_VARIANCE, seed: Optional[int] = None):
        self.variance = variance
        self.rng = random.Random(seed)

    def select_player(self, context: AutopickContext) -> str:
        pool = _require_pool(context)
        values = category_values(pool)

        best_id, best_value = None, float("-inf")
        for player_id, value in values.items():
            if self.variance:
                value += abs(value) * self.rng.uniform(-self.variance, self.variance)
            if value > best_value:
                best_id, best_value = player_id, value
        return best_id


def category_values(players: List[Player]) -> pd.Series:
    """Sum of per-category z-scores for each player, indexed by player_id.

    Turnovers are negated so a higher value is always better. Categories with
    no spread contribute zero.
    """
    df = pd.DataFrame(
        [{c: getattr(p.stats, c) for c in CATEGORIES} for p in players],
        index=[p.player_id for p in players],
    )
    std = df.std(ddof=0).replace(0, 1.0)
    z = (df - df.mean()) / std
    for category in NEGATIVE_CATEGORIES:
        z[category] = -z[category]
    return z.sum(axis=1)


STRATEGIES = {
    BestAvailableStrategy.name: BestAvailableStrategy,
    QueueFirstStrategy.name: QueueFirstStrategy,
    PositionNeedStrategy.name: PositionNeedStrategy,
    BalancedStrategy.name: BalancedStrategy,
}


def get_strategy(name: str, **kwargs):
    """Instantiate a strategy by its registered name."""
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown strategy {name!r}. Must be one of: {sorted(STRATEGIES)}"
        ) from None
    return strategy_cls(**kwargs)
