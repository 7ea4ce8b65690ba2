"""Shared fixtures for the draft assistant test suite."""

import pytest

from src.player_catalog.models import Player, PlayerStats


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def _make_player(player_id, rank, positions=("PG",), **stats):
    return Player(
        player_id=player_id,
        name=f"Player {player_id}",
        team="TST",
        positions=list(positions),
        projected_rank=rank,
        stats=PlayerStats(**stats),
        adp=float(rank),
    )


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def catalog():
    """Forty players p1..p40, ranked in id order, cycling through positions."""
    positions = [("PG",), ("SG",), ("SF",), ("PF",), ("C",)]
    players = {}
    for i in range(1, 41):
        pid = f"p{i}"
        players[pid] = _make_player(
            pid,
            rank=i,
            positions=positions[(i - 1) % len(positions)],
            points=30.0 - i * 0.5,
            rebounds=4.0 + (i % 7),
            assists=2.0 + (i % 5),
            steals=1.0,
            blocks=0.5 + (i % 3) * 0.3,
            three_pointers=1.0 + (i % 4) * 0.5,
            field_goal_percentage=0.45 + (i % 6) * 0.01,
            free_throw_percentage=0.75 + (i % 4) * 0.02,
            turnovers=2.0 + (i % 3) * 0.4,
        )
    return players


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "drafts"
