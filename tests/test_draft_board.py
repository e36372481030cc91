"""Tests for draft board and pick log reports."""

import pytest

from src.draft_engine.draft_board import (
    PICK_LOG_COLUMNS,
    build_draft_board,
    pick_log_frame,
    picks_per_participant,
)
from src.draft_engine.draft_item import NamedItem
from src.draft_engine.league import League, Pick


# ── Helpers ──────────────────────────────────────────────────────────

def _make_league(ids=("A", "B", "C"), team_size=2):
    league = League(list(ids), league_id=1, name="Board", team_size=team_size)
    league.activate()
    return league


def _lock_all(league, names):
    for name in names:
        league.lock(NamedItem(name))


# ── Pick log ─────────────────────────────────────────────────────────

class TestPickLogFrame:
    def test_empty_league(self):
        df = pick_log_frame(_make_league())
        assert df.empty
        assert list(df.columns) == PICK_LOG_COLUMNS

    def test_one_row_per_pick(self):
        league = _make_league()
        _lock_all(league, ["a1", "b1", "c1", "c2"])
        df = pick_log_frame(league)
        assert list(df["pick_number"]) == [1, 2, 3, 4]
        assert list(df["participant_id"]) == ["A", "B", "C", "C"]
        assert list(df["round"]) == [1, 1, 1, 2]

    def test_queued_flag(self):
        league = _make_league()
        league.add_to_player_queue("B", NamedItem("b1"))
        _lock_all(league, ["a1"])
        df = pick_log_frame(league)
        assert list(df["queued"]) == [False, True]


# ── Board ────────────────────────────────────────────────────────────

class TestBuildDraftBoard:
    def test_empty_board_shape(self):
        board = build_draft_board(_make_league())
        assert board.shape == (2, 3)
        assert list(board.columns) == ["A", "B", "C"]
        assert list(board.index) == [1, 2]
        assert (board == "").all().all()

    def test_snake_board(self):
        league = _make_league()
        _lock_all(league, ["a1", "b1", "c1", "c2", "b2", "a2"])
        board = build_draft_board(league)
        assert board.to_dict(orient="list") == {
            "A": ["a1", "a2"],
            "B": ["b1", "b2"],
            "C": ["c1", "c2"],
        }
        assert list(board.index) == [1, 2]
        assert board.index.name == "round"

    def test_partial_board(self):
        league = _make_league()
        _lock_all(league, ["a1", "b1"])
        board = build_draft_board(league)
        assert board.loc[1, "A"] == "a1"
        assert board.loc[1, "B"] == "b1"
        assert board.loc[1, "C"] == ""
        assert board.loc[2, "A"] == ""

    def test_skipped_seat_is_blank(self):
        league = _make_league()
        _lock_all(league, ["a1"])
        league.advance()  # skip B
        _lock_all(league, ["c1"])
        board = build_draft_board(league)
        assert board.loc[1, "B"] == ""
        assert board.loc[1, "C"] == "c1"

    def test_columns_follow_seat_order(self):
        league = _make_league(ids=(3, 1, 2), team_size=1)
        _lock_all(league, ["x", "y"])
        board = build_draft_board(league)
        assert list(board.columns) == [3, 1, 2]
        assert board.loc[1, 1] == "y"


# ── Counts ───────────────────────────────────────────────────────────

class TestPicksPerParticipant:
    def test_counts_include_admin_picks(self):
        league = _make_league()
        _lock_all(league, ["a1"])
        league.advance()  # skip B
        league.add_to_player_picks("B", NamedItem("late"))
        counts = picks_per_participant(league)
        assert counts.to_dict() == {"A": 1, "B": 1, "C": 0}
        assert counts.name == "picks"


# ── Corrupt history ──────────────────────────────────────────────────

class TestCorruptHistory:
    def test_duplicate_seat_in_round_raises(self):
        league = _make_league(ids=("A", "B"), team_size=1)
        _lock_all(league, ["a1", "b1"])
        league.picks.append(
            Pick.create(
                pick_number=2, round=1, seat=1, participant_id="B", item_name="extra"
            )
        )
        with pytest.raises(ValueError):
            build_draft_board(league)
