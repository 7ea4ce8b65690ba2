"""Draft order engine - pick-order layout and turn advancement.

Pure functions over a small state shape. Nothing here mutates its inputs,
performs I/O or holds locks, so every function is safe to call from any
number of readers at once.

Settings objects need ``total_rounds``, ``team_count`` and ``serpentine``.
Team objects need ``team_id``, ``display_position`` and ``picks`` (each pick
exposing ``round``, ``pick_number`` and ``player_id``).

Pick numbers are always *global* (1 .. team_count * total_rounds). The
within-round position is derived from them and never stored.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple


class CellState(str, Enum):
    """Resolution of a single board cell relative to the current pick."""

    FILLED = "filled"
    CURRENT = "current"
    PENDING = "pending"
    MISSED = "missed"  # unfilled but already passed; an anomaly


@dataclass(frozen=True)
class CurrentPick:
    """Pointer to the slot that is on the clock.

    Once the draft is over this becomes a terminal sentinel: ``round`` is one
    past the final round and ``team_id`` is ``None``.
    """

    round: int
    pick_in_round: int
    team_id: Optional[str]

    @property
    def is_terminal(self) -> bool:
        return self.team_id is None

    @classmethod
    def terminal(cls, total_rounds: int) -> "CurrentPick":
        return cls(round=total_rounds + 1, pick_in_round=1, team_id=None)


@dataclass(frozen=True)
class BoardCell:
    """One (round, team) slot of the rendered draft board."""

    round: int
    pick_number: int
    pick_in_round: int
    team_id: str
    state: CellState
    player_id: Optional[str] = None
    player: Any = None

    @property
    def is_filled(self) -> bool:
        return self.state == CellState.FILLED

    @property
    def is_current(self) -> bool:
        return self.state == CellState.CURRENT

    @property
    def is_pending(self) -> bool:
        return self.state == CellState.PENDING


# ------------------------------------------------------------------
# Ordering
# ------------------------------------------------------------------

def is_reversed_round(round_number: int, serpentine: bool) -> bool:
    """Even rounds run backwards in a serpentine draft."""
    return serpentine and round_number % 2 == 0


def base_order(teams: Sequence) -> List:
    """Teams sorted ascending by their round-1 display position."""
    return sorted(teams, key=lambda t: t.display_position)


def round_order(teams: Sequence, round_number: int, serpentine: bool) -> List:
    """Teams in the order they pick during ``round_number``."""
    order = base_order(teams)
    if is_reversed_round(round_number, serpentine):
        order.reverse()
    return order


def global_pick_number(
    round_number: int, index: int, team_count: int, reversed_round: bool
) -> int:
    """Global pick number of the team at zero-based ``index`` in the base order.

    In a reversed round the last team of the base order picks first, so the
    team at ``index`` picks at slot ``team_count - index`` of that round.
    """
    offset = (round_number - 1) * team_count
    if reversed_round:
        return offset + (team_count - index)
    return offset + (index + 1)


def round_for(pick_number: int, team_count: int) -> int:
    return (pick_number - 1) // team_count + 1


def pick_in_round_for(pick_number: int, team_count: int) -> int:
    """Within-round slot (1-indexed) of a global pick number."""
    return (pick_number - 1) % team_count + 1


def pick_number_for(round_number: int, pick_in_round: int, team_count: int) -> int:
    """Global pick number of a (round, within-round slot) pair."""
    return (round_number - 1) * team_count + pick_in_round


def team_index_for(
    round_number: int, pick_in_round: int, team_count: int, serpentine: bool
) -> int:
    """Zero-based index into the base order of the team picking at this slot."""
    if is_reversed_round(round_number, serpentine):
        return team_count - pick_in_round
    return pick_in_round - 1


def team_for_slot(
    teams: Sequence, round_number: int, pick_in_round: int, serpentine: bool
):
    """Team that owns slot ``pick_in_round`` of ``round_number``."""
    order = base_order(teams)
    return order[team_index_for(round_number, pick_in_round, len(order), serpentine)]


def current_pick_number(current: CurrentPick, team_count: int) -> int:
    """Global pick number the pointer refers to.

    For the terminal sentinel this is one past the final pick.
    """
    return pick_number_for(current.round, current.pick_in_round, team_count)


# ------------------------------------------------------------------
# Turn advancement
# ------------------------------------------------------------------

def initial_pick(settings, teams: Sequence) -> CurrentPick:
    """Pointer for the very first pick of a draft."""
    first = team_for_slot(teams, 1, 1, settings.serpentine)
    return CurrentPick(round=1, pick_in_round=1, team_id=first.team_id)


def advance(current: CurrentPick, settings, teams: Sequence) -> CurrentPick:
    """Return the pointer that follows ``current``.

    Moving past the last slot of the final round yields the terminal
    sentinel; no team is looked up for a round that does not exist.
    Advancing the sentinel returns it unchanged.
    """
    if current.is_terminal:
        return current

    team_count = settings.team_count
    if current.pick_in_round < team_count:
        round_number = current.round
        pick_in_round = current.pick_in_round + 1
    else:
        round_number = current.round + 1
        pick_in_round = 1

    if round_number > settings.total_rounds:
        return CurrentPick.terminal(settings.total_rounds)

    team = team_for_slot(teams, round_number, pick_in_round, settings.serpentine)
    return CurrentPick(
        round=round_number, pick_in_round=pick_in_round, team_id=team.team_id
    )


def pick_sequence(settings, teams: Sequence) -> Iterator[Tuple[int, int, int, str]]:
    """Yield ``(pick_number, round, pick_in_round, team_id)`` for every pick."""
    for round_number in range(1, settings.total_rounds + 1):
        order = round_order(teams, round_number, settings.serpentine)
        for pick_in_round in range(1, settings.team_count + 1):
            team = order[pick_in_round - 1]
            yield (
                pick_number_for(round_number, pick_in_round, settings.team_count),
                round_number,
                pick_in_round,
                team.team_id,
            )


def picks_until_turn(current: CurrentPick, settings, teams: Sequence, team_id: str) -> int:
    """Number of picks made before ``team_id`` is next on the clock.

    Returns 0 when the team is on the clock now and -1 when it has no
    remaining pick.
    """
    if current.is_terminal:
        return -1
    now = current_pick_number(current, settings.team_count)
    for pick_number, _, _, owner in pick_sequence(settings, teams):
        if pick_number >= now and owner == team_id:
            return pick_number - now
    return -1


# ------------------------------------------------------------------
# Board layout
# ------------------------------------------------------------------

def _resolve_state(
    filled: bool, round_number: int, pick_number: int, team_id: str,
    current: CurrentPick, team_count: int,
) -> CellState:
    if filled:
        return CellState.FILLED
    if not current.is_terminal and (round_number, team_id) == (current.round, current.team_id):
        return CellState.CURRENT
    if pick_number > current_pick_number(current, team_count):
        return CellState.PENDING
    return CellState.MISSED


def build_board(
    settings,
    teams: Sequence,
    current: CurrentPick,
    player_lookup: Optional[Mapping[str, Any]] = None,
) -> List[List[BoardCell]]:
    """Lay out every round of the draft board.

    Args:
        settings: Draft settings (rounds, team count, serpentine flag).
        teams: Teams with display positions and recorded picks.
        current: The authoritative current-pick pointer.
        player_lookup: Optional ``player_id -> Player`` mapping used only to
            decorate filled cells.

    Returns:
        One list per round, each holding ``team_count`` cells in the order the
        teams pick in that round.
    """
    team_count = settings.team_count
    recorded = {
        (pick.round, pick.pick_number, team.team_id): pick
        for team in teams
        for pick in team.picks
    }

    ordered = base_order(teams)
    board: List[List[BoardCell]] = []
    for round_number in range(1, settings.total_rounds + 1):
        reversed_round = is_reversed_round(round_number, settings.serpentine)
        row = []
        for index, team in enumerate(ordered):
            pick_number = global_pick_number(round_number, index, team_count, reversed_round)
            pick = recorded.get((round_number, pick_number, team.team_id))
            player_id = pick.player_id if pick is not None else None
            player = None
            if player_id is not None and player_lookup is not None:
                player = player_lookup.get(player_id)

            row.append(
                BoardCell(
                    round=round_number,
                    pick_number=pick_number,
                    pick_in_round=pick_in_round_for(pick_number, team_count),
                    team_id=team.team_id,
                    state=_resolve_state(
                        pick is not None, round_number, pick_number,
                        team.team_id, current, team_count,
                    ),
                    player_id=player_id,
                    player=player,
                )
            )
        row.sort(key=lambda cell: cell.pick_number)
        board.append(row)
    return board
