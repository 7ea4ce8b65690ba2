"""Category analysis of drafted rosters.

Every team's projected category line is compared across the league:
counting stats are summed over the roster, shooting percentages averaged.
"""

import logging
import math
from typing import Dict, List, Mapping

import pandas as pd

from src.autopick.config import CATEGORIES, NEGATIVE_CATEGORIES, PERCENTAGE_CATEGORIES
from src.autopick.models import CategoryScore, TeamAnalysis
from src.draft_engine.draft_state import Draft, Team
from src.player_catalog.config import VALID_POSITIONS
from src.player_catalog.models import Player

logger = logging.getLogger(__name__)


class TeamAnalyzer:
    """Rank every team of a draft by projected category output."""

    def __init__(self, catalog: Mapping[str, Player]):
        self.catalog = catalog

    def analyze(self, draft: Draft) -> List[TeamAnalysis]:
        """Build one :class:`TeamAnalysis` per team, in draft-position order."""
        teams = draft.ordered_teams()
        totals = self.category_totals(teams)
        ranks = self._rank(totals)
        team_count = len(teams)

        band = math.ceil(team_count / 3)
        contested = [c for c in CATEGORIES if totals[c].nunique() > 1]

        standing = ranks.sum(axis=1).rank(method="min").astype(int)

        analyses = []
        for team in teams:
            scores = []
            for category in CATEGORIES:
                rank = int(ranks.at[team.team_id, category])
                scores.append(
                    CategoryScore(
                        category=category,
                        score=round(float(totals.at[team.team_id, category]), 3),
                        rank=rank,
                        percentile=_percentile(rank, team_count),
                    )
                )
            analyses.append(
                TeamAnalysis(
                    team_id=team.team_id,
                    draft_id=draft.draft_id,
                    category_scores=scores,
                    positional_breakdown=self.positional_breakdown(team),
                    strengths=[
                        c for c in contested if ranks.at[team.team_id, c] <= band
                    ],
                    weaknesses=[
                        c for c in contested
                        if ranks.at[team.team_id, c] > team_count - band
                    ],
                    projected_standing=int(standing[team.team_id]),
                )
            )

        logger.info("Analyzed %d teams for draft %s", team_count, draft.draft_id)
        return analyses

    def category_totals(self, teams: List[Team]) -> pd.DataFrame:
        """DataFrame indexed by team_id with one column per category."""
        rows = {}
        for team in teams:
            players = self._roster(team)
            row = {}
            for category in CATEGORIES:
                values = [getattr(p.stats, category) for p in players]
                if category in PERCENTAGE_CATEGORIES:
                    row[category] = sum(values) / len(values) if values else 0.0
                else:
                    row[category] = float(sum(values))
            rows[team.team_id] = row
        return pd.DataFrame.from_dict(rows, orient="index", columns=list(CATEGORIES))

    def positional_breakdown(self, team: Team) -> Dict[str, int]:
        """Rostered players eligible at each position (multi-position players count twice)."""
        breakdown = {position: 0 for position in VALID_POSITIONS}
        for player in self._roster(team):
            for position in player.positions:
                if position in breakdown:
                    breakdown[position] += 1
        return breakdown

    def _roster(self, team: Team) -> List[Player]:
        roster = []
        for player_id in team.player_ids():
            player = self.catalog.get(player_id)
            if player is None:
                logger.warning(
                    "Player %s drafted by %s missing from catalog", player_id, team.team_id
                )
                continue
            roster.append(player)
        return roster

    @staticmethod
    def _rank(totals: pd.DataFrame) -> pd.DataFrame:
        ranks = pd.DataFrame(index=totals.index)
        for category in CATEGORIES:
            ranks[category] = totals[category].rank(
                ascending=category in NEGATIVE_CATEGORIES, method="min"
            ).astype(int)
        return ranks


def _percentile(rank: int, team_count: int) -> float:
    if team_count <= 1:
        return 100.0
    return round((team_count - rank) / (team_count - 1) * 100, 1)
