"""Filtering and sorting of the player list (the rankings view)."""

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional

from src.player_catalog.config import SEARCH_RESULT_LIMIT
from src.player_catalog.models import Player

ASCENDING = "ascending"
DESCENDING = "descending"


@dataclass
class PlayerFilter:
    """Criteria for narrowing the player list. Empty lists mean "any"."""

    positions: List[str] = field(default_factory=list)
    teams: List[str] = field(default_factory=list)
    search_term: str = ""
    min_rank: int = 0
    max_rank: int = 1000
    injury_statuses: List[str] = field(default_factory=list)

    def matches(self, player: Player) -> bool:
        if self.positions and not any(p in self.positions for p in player.positions):
            return False
        if self.teams and player.team not in self.teams:
            return False
        if self.search_term:
            term = self.search_term.lower()
            if term not in player.name.lower() and term not in player.team.lower():
                return False
        if not self.min_rank <= player.projected_rank <= self.max_rank:
            return False
        if self.injury_statuses and player.injury_status not in self.injury_statuses:
            return False
        return True


@dataclass
class SortConfig:
    """Sort key (dotted for nested stats, e.g. ``stats.points``) and direction."""

    key: str = "projected_rank"
    direction: str = ASCENDING

    def __post_init__(self):
        if self.direction not in (ASCENDING, DESCENDING):
            raise ValueError(
                f"direction must be '{ASCENDING}' or '{DESCENDING}' "
                f"(got {self.direction!r})"
            )


def _sort_value(player: Player, key: str):
    value = player
    for part in key.split("."):
        try:
            value = getattr(value, part)
        except AttributeError:
            raise KeyError(f"Unknown sort key: {key}") from None
    if isinstance(value, str):
        return value.lower()
    return value


def filter_players(players: Iterable[Player], player_filter: PlayerFilter) -> List[Player]:
    return [p for p in players if player_filter.matches(p)]


def sort_players(players: Iterable[Player], sort: SortConfig) -> List[Player]:
    """Stable sort by ``sort.key``; strings compare case-insensitively."""
    return sorted(
        players,
        key=lambda p: _sort_value(p, sort.key),
        reverse=sort.direction == DESCENDING,
    )


def apply_view(
    players: Iterable[Player],
    player_filter: Optional[PlayerFilter] = None,
    sort: Optional[SortConfig] = None,
) -> List[Player]:
    """Filter then sort, the way the rankings table is rendered."""
    result = filter_players(players, player_filter or PlayerFilter())
    return sort_players(result, sort or SortConfig())


def search_players(
    catalog: Mapping[str, Player], query: str, limit: int = SEARCH_RESULT_LIMIT
) -> List[Player]:
    """Case-insensitive substring search over name and team."""
    term = query.lower()
    hits = [
        p for p in catalog.values()
        if term in p.name.lower() or term in p.team.lower()
    ]
    return hits[:limit]
