"""Draft state data models - single source of truth for all draft information."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional
import uuid

from src.draft_engine.config import VALID_SCORING_FORMATS
from src.draft_engine.draft_order import (
    CurrentPick,
    current_pick_number,
    initial_pick,
    pick_in_round_for,
    round_for,
    team_for_slot,
)
from src.draft_engine.errors import InvalidSettingsError


class DraftStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class DraftSettings:
    """Draft configuration; fixed for the lifetime of a draft."""

    total_rounds: int
    team_count: int
    time_per_pick_seconds: int = 90
    serpentine: bool = True
    scoring_format: str = "standard"

    def __post_init__(self):
        if self.total_rounds < 1:
            raise InvalidSettingsError(
                f"total_rounds must be at least 1 (got {self.total_rounds})"
            )
        if self.team_count < 2:
            raise InvalidSettingsError(
                f"team_count must be at least 2 (got {self.team_count})"
            )
        if self.time_per_pick_seconds < 0:
            raise InvalidSettingsError(
                f"time_per_pick_seconds cannot be negative "
                f"(got {self.time_per_pick_seconds})"
            )
        if self.scoring_format not in VALID_SCORING_FORMATS:
            raise InvalidSettingsError(
                f"Invalid scoring format '{self.scoring_format}'. "
                f"Must be one of: {VALID_SCORING_FORMATS}"
            )

    def total_picks(self) -> int:
        return self.total_rounds * self.team_count


@dataclass(frozen=True)
class Pick:
    """Represents a single draft pick.

    ``pick_number`` is the global pick number across the whole draft.
    """

    round: int
    pick_number: int
    team_id: str
    player_id: str
    timestamp: str

    @classmethod
    def create(cls, round: int, pick_number: int, team_id: str, player_id: str):
        return cls(
            round=round,
            pick_number=pick_number,
            team_id=team_id,
            player_id=player_id,
            timestamp=datetime.now().isoformat(),
        )

    def pick_in_round(self, team_count: int) -> int:
        return pick_in_round_for(self.pick_number, team_count)


@dataclass
class Team:
    """A drafting team and the picks it has made, in the order made."""

    team_id: str
    name: str
    display_position: int
    owner: str = ""
    picks: List[Pick] = field(default_factory=list)

    def player_ids(self) -> List[str]:
        return [pick.player_id for pick in self.picks]

    def get_total_picks(self) -> int:
        return len(self.picks)

    def has_pick_at(self, round: int, pick_number: int) -> bool:
        return any(
            p.round == round and p.pick_number == pick_number for p in self.picks
        )


@dataclass
class Draft:
    """Complete draft state - settings, teams with their picks, and the pointer."""

    draft_id: str
    name: str
    settings: DraftSettings
    teams: List[Team]
    current_pick: CurrentPick
    status: DraftStatus = DraftStatus.SCHEDULED
    created_at: str = ""
    updated_at: str = ""
    completed_at: Optional[str] = None

    @classmethod
    def create_new(
        cls, name: str, settings: DraftSettings, teams: List[Team]
    ) -> "Draft":
        """Factory method to create a new, not yet started draft."""
        for team in teams:
            if team.picks:
                raise InvalidSettingsError(
                    f"Team {team.team_id} already has picks; "
                    "a new draft must start empty"
                )
        validate_teams(settings, teams)

        now = datetime.now().isoformat()
        return cls(
            draft_id=str(uuid.uuid4()),
            name=name,
            settings=settings,
            teams=list(teams),
            current_pick=initial_pick(settings, teams),
            status=DraftStatus.SCHEDULED,
            created_at=now,
            updated_at=now,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_complete(self) -> bool:
        return self.status == DraftStatus.COMPLETED

    @property
    def total_picks(self) -> int:
        return self.settings.total_picks()

    def get_team(self, team_id: str) -> Optional[Team]:
        for team in self.teams:
            if team.team_id == team_id:
                return team
        return None

    def get_current_team(self) -> Optional[Team]:
        """Team on the clock, or ``None`` once the draft is over."""
        if self.current_pick.is_terminal:
            return None
        return self.get_team(self.current_pick.team_id)

    def ordered_teams(self) -> List[Team]:
        return sorted(self.teams, key=lambda t: t.display_position)

    def all_picks(self) -> List[Pick]:
        """Every recorded pick, in global pick-number order."""
        picks = [pick for team in self.teams for pick in team.picks]
        return sorted(picks, key=lambda p: p.pick_number)

    def picks_made(self) -> int:
        return sum(len(team.picks) for team in self.teams)

    def drafted_player_ids(self) -> set:
        return {pick.player_id for team in self.teams for pick in team.picks}

    def is_player_drafted(self, player_id: str) -> bool:
        return any(
            pick.player_id == player_id for team in self.teams for pick in team.picks
        )

    def validate(self):
        """Check a loaded draft document for internal consistency.

        Raises:
            InvalidSettingsError: if the team list, current pick, status or
                recorded picks contradict the settings.
        """
        validate_teams(self.settings, self.teams)
        _validate_current_pick(self)
        _validate_recorded_picks(self)


def validate_teams(settings: DraftSettings, teams: List[Team]):
    """Reject team lists that do not fit the settings.

    The team count must match, team ids must be unique and display positions
    must be a permutation of ``1..team_count``.
    """
    if len(teams) != settings.team_count:
        raise InvalidSettingsError(
            f"Number of teams ({len(teams)}) must match "
            f"team_count ({settings.team_count})"
        )

    team_ids = [team.team_id for team in teams]
    if len(set(team_ids)) != len(team_ids):
        raise InvalidSettingsError(f"Duplicate team ids: {team_ids}")

    positions = sorted(team.display_position for team in teams)
    if positions != list(range(1, settings.team_count + 1)):
        raise InvalidSettingsError(
            f"Display positions {positions} must be a permutation of "
            f"1..{settings.team_count}"
        )


def _validate_current_pick(draft: Draft):
    settings = draft.settings
    current = draft.current_pick

    if current.is_terminal:
        if current.round != settings.total_rounds + 1:
            raise InvalidSettingsError(
                f"Terminal current pick must sit at round {settings.total_rounds + 1}"
            )
        if draft.status != DraftStatus.COMPLETED:
            raise InvalidSettingsError(
                f"Draft with a terminal current pick has status '{draft.status.value}'"
            )
        return

    if draft.status == DraftStatus.COMPLETED:
        raise InvalidSettingsError("Completed draft still has a team on the clock")
    if not 1 <= current.round <= settings.total_rounds:
        raise InvalidSettingsError(
            f"Current round {current.round} outside 1..{settings.total_rounds}"
        )
    if not 1 <= current.pick_in_round <= settings.team_count:
        raise InvalidSettingsError(
            f"Current pick {current.pick_in_round} outside 1..{settings.team_count}"
        )
    expected = team_for_slot(
        draft.teams, current.round, current.pick_in_round, settings.serpentine
    )
    if expected.team_id != current.team_id:
        raise InvalidSettingsError(
            f"Current pick names team {current.team_id} but round {current.round} "
            f"slot {current.pick_in_round} belongs to {expected.team_id}"
        )


def _validate_recorded_picks(draft: Draft):
    settings = draft.settings
    seen_slots = set()
    seen_players = set()

    for team in draft.teams:
        for pick in team.picks:
            if not 1 <= pick.pick_number <= settings.total_picks():
                raise InvalidSettingsError(
                    f"Pick number {pick.pick_number} outside 1..{settings.total_picks()}"
                )
            if round_for(pick.pick_number, settings.team_count) != pick.round:
                raise InvalidSettingsError(
                    f"Pick number {pick.pick_number} does not fall in round {pick.round}"
                )
            owner = team_for_slot(
                draft.teams,
                pick.round,
                pick.pick_in_round(settings.team_count),
                settings.serpentine,
            )
            if owner.team_id != team.team_id or pick.team_id != team.team_id:
                raise InvalidSettingsError(
                    f"Pick {pick.pick_number} recorded for {team.team_id} "
                    f"but belongs to {owner.team_id}"
                )
            if pick.pick_number in seen_slots:
                raise InvalidSettingsError(f"Pick {pick.pick_number} recorded twice")
            if pick.player_id in seen_players:
                raise InvalidSettingsError(
                    f"Player {pick.player_id} recorded in more than one pick"
                )
            seen_slots.add(pick.pick_number)
            seen_players.add(pick.player_id)

    # Recorded picks are exactly the ones before the pick on the clock.
    next_number = current_pick_number(draft.current_pick, settings.team_count)
    missing = sorted(set(range(1, next_number)) - seen_slots)
    if missing:
        raise InvalidSettingsError(
            f"Current pick is {next_number} but pick {missing[0]} was never recorded"
        )
    ahead = sorted(n for n in seen_slots if n >= next_number)
    if ahead:
        raise InvalidSettingsError(
            f"Pick {ahead[0]} recorded ahead of current pick {next_number}"
        )
    if seen_slots and draft.status == DraftStatus.SCHEDULED:
        raise InvalidSettingsError(
            f"Draft with {len(seen_slots)} recorded picks has status 'scheduled'"
        )
