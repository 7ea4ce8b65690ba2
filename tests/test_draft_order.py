"""Tests for the draft order engine - serpentine layout and turn advancement."""

import pytest

from src.draft_engine.draft_order import (
    CellState,
    CurrentPick,
    advance,
    base_order,
    build_board,
    current_pick_number,
    global_pick_number,
    initial_pick,
    pick_in_round_for,
    pick_sequence,
    picks_until_turn,
    round_for,
    round_order,
    team_for_slot,
)
from src.draft_engine.draft_state import DraftSettings, Pick, Team


# ── Helpers ──────────────────────────────────────────────────────────


def _make_teams(count, names=None):
    names = names or [f"T{i}" for i in range(1, count + 1)]
    return [
        Team(team_id=name, name=name, display_position=i + 1)
        for i, name in enumerate(names)
    ]


def _make_settings(team_count=4, total_rounds=2, serpentine=True):
    return DraftSettings(
        total_rounds=total_rounds, team_count=team_count, serpentine=serpentine
    )


def _replay(settings, teams, picks):
    """Advance the pointer once per pick, recording a player each time."""
    current = initial_pick(settings, teams)
    for player_id in picks:
        team = next(t for t in teams if t.team_id == current.team_id)
        team.picks.append(
            Pick.create(
                round=current.round,
                pick_number=current_pick_number(current, settings.team_count),
                team_id=team.team_id,
                player_id=player_id,
            )
        )
        current = advance(current, settings, teams)
    return current


class _UntouchableTeams:
    """Team list that fails the test if anything iterates or indexes it."""

    def __iter__(self):
        raise AssertionError("team list was read")

    def __len__(self):
        raise AssertionError("team list was read")

    def __getitem__(self, item):
        raise AssertionError("team list was read")


# ── Ordering ─────────────────────────────────────────────────────────


class TestRoundOrder:
    def test_base_order_sorts_by_display_position(self):
        teams = [
            Team(team_id="C", name="C", display_position=3),
            Team(team_id="A", name="A", display_position=1),
            Team(team_id="B", name="B", display_position=2),
        ]
        assert [t.team_id for t in base_order(teams)] == ["A", "B", "C"]

    def test_ten_team_serpentine_alternates(self):
        teams = _make_teams(10)
        forward = [f"T{i}" for i in range(1, 11)]

        assert [t.team_id for t in round_order(teams, 1, True)] == forward
        assert [t.team_id for t in round_order(teams, 2, True)] == forward[::-1]
        assert [t.team_id for t in round_order(teams, 3, True)] == forward

    def test_non_serpentine_keeps_base_order(self):
        teams = _make_teams(6)
        forward = [f"T{i}" for i in range(1, 7)]
        for round_number in range(1, 6):
            assert [t.team_id for t in round_order(teams, round_number, False)] == forward

    def test_round_order_does_not_mutate_input(self):
        teams = _make_teams(4)
        round_order(teams, 2, True)
        assert [t.team_id for t in teams] == ["T1", "T2", "T3", "T4"]


class TestPickNumbers:
    @pytest.mark.parametrize("serpentine", [True, False])
    def test_each_round_covers_its_pick_range_exactly(self, serpentine):
        for team_count in range(2, 21):
            for round_number in range(1, 26):
                reversed_round = serpentine and round_number % 2 == 0
                numbers = [
                    global_pick_number(round_number, i, team_count, reversed_round)
                    for i in range(team_count)
                ]
                expected = set(
                    range((round_number - 1) * team_count + 1, round_number * team_count + 1)
                )
                assert len(numbers) == len(set(numbers))
                assert set(numbers) == expected

    def test_reversed_round_gives_last_team_first_pick(self):
        # 4 teams, round 2: index 3 (D) picks #5, index 0 (A) picks #8
        assert global_pick_number(2, 3, 4, True) == 5
        assert global_pick_number(2, 0, 4, True) == 8

    def test_round_and_slot_from_global_number(self):
        assert round_for(1, 12) == 1
        assert round_for(12, 12) == 1
        assert round_for(13, 12) == 2
        assert pick_in_round_for(13, 12) == 1
        assert pick_in_round_for(24, 12) == 12

    def test_team_for_slot_in_reversed_round(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        assert team_for_slot(teams, 2, 1, True).team_id == "D"
        assert team_for_slot(teams, 2, 4, True).team_id == "A"
        assert team_for_slot(teams, 2, 1, False).team_id == "A"


# ── Advancement ──────────────────────────────────────────────────────


class TestAdvance:
    def test_initial_pick_is_first_team(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        assert initial_pick(_make_settings(), teams) == CurrentPick(1, 1, "A")

    def test_four_team_two_round_sequence(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings(team_count=4, total_rounds=2)

        sequence = [(n, team_id) for n, _, _, team_id in pick_sequence(settings, teams)]
        assert sequence == [
            (1, "A"), (2, "B"), (3, "C"), (4, "D"),
            (5, "D"), (6, "C"), (7, "B"), (8, "A"),
        ]

    def test_pointer_after_three_picks(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings(team_count=4, total_rounds=2)

        current = _replay(settings, teams, ["p1", "p2", "p3"])

        assert current == CurrentPick(round=1, pick_in_round=4, team_id="D")

    def test_round_boundary_keeps_same_team_in_serpentine(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings()
        current = advance(CurrentPick(1, 4, "D"), settings, teams)
        assert current == CurrentPick(2, 1, "D")

    def test_round_boundary_restarts_order_without_serpentine(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings(serpentine=False)
        current = advance(CurrentPick(1, 4, "D"), settings, teams)
        assert current == CurrentPick(2, 1, "A")

    def test_replay_is_deterministic(self):
        settings = _make_settings(team_count=5, total_rounds=4)
        picks = [f"p{i}" for i in range(1, 14)]

        first = _replay(settings, _make_teams(5), picks)
        second = _replay(settings, _make_teams(5), picks)

        assert first == second
        assert current_pick_number(first, 5) == 14

    def test_final_slot_becomes_terminal(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings(team_count=4, total_rounds=2)

        current = advance(CurrentPick(2, 4, "A"), settings, teams)

        assert current.is_terminal
        assert current == CurrentPick.terminal(2)
        assert current.round == 3

    def test_final_slot_never_reads_team_list(self):
        settings = _make_settings(team_count=4, total_rounds=2)
        current = advance(CurrentPick(2, 4, "A"), settings, _UntouchableTeams())
        assert current.is_terminal

    def test_advancing_terminal_is_a_no_op(self):
        settings = _make_settings()
        terminal = CurrentPick.terminal(settings.total_rounds)
        assert advance(terminal, settings, _UntouchableTeams()) == terminal

    def test_full_draft_ends_terminal(self):
        settings = _make_settings(team_count=3, total_rounds=3)
        current = _replay(settings, _make_teams(3), [f"p{i}" for i in range(9)])
        assert current.is_terminal


class TestPicksUntilTurn:
    def test_zero_when_on_the_clock(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        assert picks_until_turn(CurrentPick(1, 2, "B"), _make_settings(), teams, "B") == 0

    def test_counts_through_the_turn(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        # From B at #2, A's next pick is #8
        assert picks_until_turn(CurrentPick(1, 2, "B"), _make_settings(), teams, "A") == 6
        # D picks #4 and #5 back to back
        assert picks_until_turn(CurrentPick(1, 2, "B"), _make_settings(), teams, "D") == 2

    def test_no_remaining_pick(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings()
        assert picks_until_turn(CurrentPick(2, 2, "C"), settings, teams, "D") == -1
        assert picks_until_turn(CurrentPick.terminal(2), settings, teams, "A") == -1


# ── Board ────────────────────────────────────────────────────────────


class TestBuildBoard:
    def test_board_shape_and_row_order(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings()

        board = build_board(settings, teams, initial_pick(settings, teams))

        assert len(board) == 2
        assert [c.team_id for c in board[0]] == ["A", "B", "C", "D"]
        assert [c.team_id for c in board[1]] == ["D", "C", "B", "A"]
        assert [c.pick_number for c in board[1]] == [5, 6, 7, 8]
        assert [c.pick_in_round for c in board[1]] == [1, 2, 3, 4]

    def test_cell_states_follow_pointer(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings()
        current = _replay(settings, teams, ["p1", "p2", "p3"])

        board = build_board(settings, teams, current)
        states = [c.state for c in board[0]]

        assert states == [
            CellState.FILLED, CellState.FILLED, CellState.FILLED, CellState.CURRENT,
        ]
        assert all(c.state == CellState.PENDING for c in board[1])
        assert board[0][1].player_id == "p2"

    def test_current_cell_matches_pointer_in_reversed_round(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings()
        current = _replay(settings, teams, ["p1", "p2", "p3", "p4", "p5"])

        board = build_board(settings, teams, current)
        current_cells = [c for row in board for c in row if c.is_current]

        assert len(current_cells) == 1
        assert current_cells[0].team_id == current.team_id == "C"
        assert current_cells[0].pick_number == 6

    def test_skipped_slot_is_missed(self):
        teams = _make_teams(4, ["A", "B", "C", "D"])
        settings = _make_settings()
        # Pointer moved on without B's pick being recorded
        board = build_board(settings, teams, CurrentPick(1, 3, "C"))
        assert board[0][1].state == CellState.MISSED

    def test_terminal_board_has_no_current_cell(self):
        teams = _make_teams(2, ["A", "B"])
        settings = _make_settings(team_count=2, total_rounds=2)
        current = _replay(settings, teams, ["p1", "p2", "p3", "p4"])

        board = build_board(settings, teams, current)

        assert all(c.is_filled for row in board for c in row)

    def test_player_lookup_decorates_filled_cells(self):
        teams = _make_teams(2, ["A", "B"])
        settings = _make_settings(team_count=2, total_rounds=1)
        current = _replay(settings, teams, ["p1"])

        board = build_board(settings, teams, current, player_lookup={"p1": "Player One"})

        assert board[0][0].player == "Player One"
        assert board[0][1].player is None

    def test_pick_in_wrong_slot_is_not_shown(self):
        teams = _make_teams(2, ["A", "B"])
        settings = _make_settings(team_count=2, total_rounds=1)
        # A pick recorded for A but numbered as B's slot
        teams[0].picks.append(Pick.create(round=1, pick_number=2, team_id="A", player_id="p1"))

        board = build_board(settings, teams, CurrentPick(1, 1, "A"))

        assert board[0][0].state == CellState.CURRENT
        assert board[0][0].player_id is None
