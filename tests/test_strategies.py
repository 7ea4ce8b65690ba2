"""Tests for autopick strategies."""

import pytest

from src.autopick.models import AutopickContext, NoPlayersAvailableError
from src.autopick.strategies import (
    BalancedStrategy,
    BestAvailableStrategy,
    PositionNeedStrategy,
    QueueFirstStrategy,
    category_values,
    get_strategy,
)
from src.draft_engine.draft_state import Draft, DraftSettings, Team
from src.draft_engine.pick_queue import PickQueue
from src.player_catalog.models import Player, PlayerStats


# ── Helpers ──────────────────────────────────────────────────────────


def _make_player(pid, rank, positions=("PG",), adp=None, **stats):
    return Player(
        player_id=pid,
        name=pid,
        team="TST",
        positions=list(positions),
        projected_rank=rank,
        stats=PlayerStats(**stats),
        adp=float(rank) if adp is None else adp,
    )


def _make_context(available, roster=None, queue=None):
    settings = DraftSettings(total_rounds=2, team_count=2)
    teams = [
        Team(team_id="A", name="A", display_position=1),
        Team(team_id="B", name="B", display_position=2),
    ]
    draft = Draft.create_new("Strategy", settings, teams)
    return AutopickContext(
        draft=draft,
        team=teams[0],
        available_players=list(available),
        roster=list(roster or []),
        queue=queue,
    )


# ── Best available ───────────────────────────────────────────────────


class TestBestAvailable:
    def test_lowest_rank_wins(self):
        pool = [_make_player("b", 5), _make_player("a", 2), _make_player("c", 9)]
        assert BestAvailableStrategy().select_player(_make_context(pool)) == "a"

    def test_adp_breaks_ties(self):
        pool = [_make_player("x", 3, adp=4.0), _make_player("y", 3, adp=2.5)]
        assert BestAvailableStrategy().select_player(_make_context(pool)) == "y"

    def test_empty_pool_raises(self):
        with pytest.raises(NoPlayersAvailableError, match="No players left for A"):
            BestAvailableStrategy().select_player(_make_context([]))


# ── Queue first ──────────────────────────────────────────────────────


class TestQueueFirst:
    def test_takes_first_available_queued(self):
        pool = [_make_player("a", 1), _make_player("b", 2), _make_player("c", 3)]
        queue = PickQueue(["gone", "c", "b"])
        assert QueueFirstStrategy().select_player(_make_context(pool, queue=queue)) == "c"

    def test_falls_back_when_queue_exhausted(self):
        pool = [_make_player("a", 1), _make_player("b", 2)]
        queue = PickQueue(["gone"])
        assert QueueFirstStrategy().select_player(_make_context(pool, queue=queue)) == "a"

    def test_falls_back_without_queue(self):
        pool = [_make_player("a", 1)]
        assert QueueFirstStrategy().select_player(_make_context(pool)) == "a"


# ── Position need ────────────────────────────────────────────────────


class TestPositionNeed:
    def test_prefers_unfilled_position_over_slightly_better_player(self):
        pool = [_make_player("pg", 1, ["PG"]), _make_player("c", 2, ["C"])] + [
            _make_player(f"sf{i}", i, ["SF"]) for i in range(3, 7)
        ]
        roster = [_make_player("pg1", 10, ["PG"]), _make_player("pg2", 11, ["PG"])]

        pick = PositionNeedStrategy().select_player(_make_context(pool, roster=roster))

        assert pick == "c"

    def test_best_available_when_needs_equal(self):
        pool = [_make_player("pg", 1, ["PG"]), _make_player("c", 2, ["C"])]
        assert PositionNeedStrategy().select_player(_make_context(pool)) == "pg"

    def test_only_considers_pool_size(self):
        pool = [_make_player("pg", 1, ["PG"]), _make_player("c", 2, ["C"])]
        roster = [_make_player("pg1", 10, ["PG"]), _make_player("pg2", 11, ["PG"])]
        strategy = PositionNeedStrategy(pool_size=1)
        assert strategy.select_player(_make_context(pool, roster=roster)) == "pg"

    def test_multi_position_uses_most_needed(self):
        strategy = PositionNeedStrategy()
        player = _make_player("combo", 1, ["PG", "C"])
        filled = {"PG": 2}
        assert strategy._need_multiplier(player, filled) == pytest.approx(1.5)


# ── Balanced ─────────────────────────────────────────────────────────


class TestBalanced:
    def test_highest_total_value_without_variance(self):
        pool = [
            _make_player("scorer", 1, points=30, rebounds=4, assists=3),
            _make_player("allround", 2, points=25, rebounds=10, assists=8),
            _make_player("bench", 3, points=8, rebounds=2, assists=1),
        ]
        pick = BalancedStrategy(variance=0).select_player(_make_context(pool))
        assert pick == "allround"

    def test_seeded_choice_is_reproducible(self):
        pool = [
            _make_player(f"p{i}", i, points=20 + i % 3, rebounds=5 + i % 4)
            for i in range(1, 12)
        ]
        first = BalancedStrategy(variance=0.2, seed=7).select_player(_make_context(pool))
        second = BalancedStrategy(variance=0.2, seed=7).select_player(_make_context(pool))
        assert first == second

    def test_category_values_negate_turnovers(self):
        players = [
            _make_player("careful", 1, turnovers=1.0),
            _make_player("sloppy", 2, turnovers=4.0),
        ]
        values = category_values(players)
        assert values["careful"] > values["sloppy"]

    def test_flat_categories_contribute_nothing(self):
        players = [_make_player("a", 1, points=10), _make_player("b", 2, points=10)]
        values = category_values(players)
        assert values.tolist() == [0.0, 0.0]


class TestGetStrategy:
    @pytest.mark.parametrize(
        "name, cls",
        [
            ("best-player-available", BestAvailableStrategy),
            ("queue", QueueFirstStrategy),
            ("position-scarcity", PositionNeedStrategy),
            ("balanced", BalancedStrategy),
        ],
    )
    def test_registered_names(self, name, cls):
        assert isinstance(get_strategy(name), cls)

    def test_kwargs_forwarded(self):
        assert get_strategy("balanced", variance=0).variance == 0

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            get_strategy("auction")
