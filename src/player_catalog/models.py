"""Player catalog records."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class PlayerStats:
    """Projected per-game line (totals for ``games``)."""

    points: float = 0.0
    rebounds: float = 0.0
    assists: float = 0.0
    steals: float = 0.0
    blocks: float = 0.0
    three_pointers: float = 0.0
    field_goal_percentage: float = 0.0
    free_throw_percentage: float = 0.0
    turnovers: float = 0.0
    minutes: float = 0.0
    games: float = 0.0


@dataclass
class Player:
    """A draftable player. Drafts reference players by ``player_id`` only."""

    player_id: str
    name: str
    team: str
    positions: List[str]
    projected_rank: int
    stats: PlayerStats = field(default_factory=PlayerStats)
    adp: float = 999.0
    tier: int = 10
    injury_status: str = ""
    notes: str = ""

    def to_dict(self) -> Dict:
        return {
            "player_id": self.player_id,
            "name": self.name,
            "team": self.team,
            "positions": list(self.positions),
            "projected_rank": self.projected_rank,
            "stats": dict(vars(self.stats)),
            "adp": self.adp,
            "tier": self.tier,
            "injury_status": self.injury_status,
            "notes": self.notes,
        }
