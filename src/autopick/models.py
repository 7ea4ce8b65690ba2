"""Data models for autopick and team analysis."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.draft_engine.draft_state import Draft, Team
from src.draft_engine.pick_queue import PickQueue
from src.player_catalog.models import Player


class NoPlayersAvailableError(Exception):
    """Raised when a strategy is asked to pick from an empty pool."""


@dataclass
class AutopickContext:
    """Board state handed to an autopick strategy."""

    draft: Draft
    team: Team
    available_players: List[Player]  # projected-rank order
    roster: List[Player]
    queue: Optional[PickQueue] = None


@dataclass
class CategoryScore:
    category: str
    score: float
    rank: int  # 1 = best in the league
    percentile: float


@dataclass
class TeamAnalysis:
    """Projected category standing of one drafted team."""

    team_id: str
    draft_id: str
    category_scores: List[CategoryScore]
    positional_breakdown: Dict[str, int]
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    projected_standing: int = 0

    def score_for(self, category: str) -> Optional[CategoryScore]:
        for score in self.category_scores:
            if score.category == category:
                return score
        return None
