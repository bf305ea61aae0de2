"""Tests for frontend_adapter.py — command parsing, messages and rendering."""

import random

import pytest

from frontend_adapter import (
    CATEGORY_TOOLTIPS,
    COMMAND_HELP,
    HELP_TEXT,
    FrontendAdapter,
    describe_outcome,
    parse_hold_positions,
    render_dice_box,
)
from game_engine import CATEGORY_NAMES, DiceRow, Outcome, OutOfRolls

# ── Helpers ──────────────────────────────────────────────────────────────────

def _make_adapter(values=None, settings=None, seed=0):
    """Create an adapter with a seeded game, optionally forcing the dice."""
    adapter = FrontendAdapter(settings=settings, rng=random.Random(seed))
    if values is not None:
        adapter.state.row = DiceRow.from_values(values)
    return adapter


# ── Parsing ──────────────────────────────────────────────────────────────────

class TestParseHoldPositions:
    def test_ints(self):
        assert parse_hold_positions(["1", "3", "5"]) == [1, 3, 5]

    def test_empty(self):
        assert parse_hold_positions([]) == []

    def test_garbage_gives_none(self):
        assert parse_hold_positions(["1", "x"]) is None

    def test_empty_token_gives_none(self):
        assert parse_hold_positions(["1", "", "2"]) is None

    def test_out_of_range_is_left_to_engine(self):
        assert parse_hold_positions(["6"]) == [6]


# ── Messages ─────────────────────────────────────────────────────────────────

class TestMessages:
    def test_initial_message(self):
        assert _make_adapter().message == "Enter 'help' for commands."

    def test_roll_messages_count_down(self):
        adapter = _make_adapter()
        adapter.handle_line("roll")
        assert adapter.message == "One roll left."
        adapter.handle_line("roll")
        assert adapter.message == "Zero rolls left."
        adapter.handle_line("roll")
        assert adapter.message == "Roll failed. Out of rolls."

    def test_two_rolls_left_message(self):
        adapter = _make_adapter()
        adapter.state.rolls_left = 3
        adapter.handle_line("roll")
        assert adapter.message == "Two rolls left."

    def test_hold_one(self):
        adapter = _make_adapter()
        adapter.handle_line("hold 2")
        assert adapter.message == "Die 2 has been (un)held."

    def test_hold_two(self):
        adapter = _make_adapter()
        adapter.handle_line("hold 1 4")
        assert adapter.message == "Dice 1 and 4 have been (un)held."

    def test_hold_many(self):
        adapter = _make_adapter()
        adapter.handle_line("hold 1 2 5")
        assert adapter.message == "Dice 1, 2 and 5 have been (un)held."

    def test_hold_nothing(self):
        adapter = _make_adapter()
        adapter.handle_line("hold")
        assert adapter.message == "Nothing has been (un)held."

    @pytest.mark.parametrize("line", ["hold 1 6", "hold x", "hold 0", "hold 1  2"])
    def test_invalid_hold(self, line):
        adapter = _make_adapter()
        adapter.handle_line(line)
        assert adapter.message.startswith("Invalid hold command.")
        assert adapter.state.held == [False] * 5

    def test_score_message(self):
        adapter = _make_adapter([6, 6, 6, 6, 6])
        adapter.handle_line("score yahtzee")
        assert adapter.message == "Scored 50. New turn."

    def test_score_zero_message(self):
        adapter = _make_adapter([1, 2, 3, 4, 6])
        adapter.handle_line("score yahtzee")
        assert adapter.message == "Scored zero. New turn."

    def test_already_scored_message(self):
        adapter = _make_adapter()
        adapter.handle_line("score chance")
        adapter.handle_line("score chance")
        assert adapter.message == "This category was already scored."

    def test_not_found_message(self):
        adapter = _make_adapter()
        adapter.handle_line("score sevens")
        assert adapter.message == "This category was not found."

    def test_empty_line(self):
        adapter = _make_adapter()
        adapter.handle_line("   ")
        assert adapter.message == "No command was put in."

    def test_unknown_command(self):
        adapter = _make_adapter()
        adapter.handle_line("jump")
        assert adapter.message == "jump is not a command."

    def test_score_without_category_is_not_a_command(self):
        adapter = _make_adapter()
        adapter.handle_line("score")
        assert adapter.message == "score is not a command."

    def test_commands_are_case_insensitive(self):
        adapter = _make_adapter([2, 2, 3, 3, 3])
        adapter.handle_line("  SCORE House ")
        assert adapter.message == "Scored 25. New turn."

    def test_game_over_message(self):
        adapter = _make_adapter()
        for name in CATEGORY_NAMES:
            adapter.handle_line(f"score {name}")
        assert adapter.game_over
        assert adapter.message == (
            f"Game over! Final score: {adapter.state.score}. Enter 'new' to play again."
        )

    def test_describe_outcome_without_state(self):
        outcome = Outcome("roll", error=OutOfRolls("none"))
        assert describe_outcome(outcome) == "Roll failed. Out of rolls."
        assert describe_outcome(None) == "Enter 'help' for commands."


# ── Extra output ─────────────────────────────────────────────────────────────

class TestExtraOutput:
    def test_game_commands_print_nothing_extra(self):
        adapter = _make_adapter()
        assert adapter.handle_line("roll") is None
        assert adapter.handle_line("hold 1") is None
        assert adapter.handle_line("score 1") is None

    def test_cats_lists_categories(self):
        adapter = _make_adapter([1, 1, 2, 3, 4])
        adapter.handle_line("score 1")
        text = adapter.handle_line("cats")
        assert text.startswith("Upper:\n1: 2\n")
        assert "\nLower:\n" in text

    def test_help(self):
        assert _make_adapter().handle_line("help") == HELP_TEXT

    def test_help_for_one_command(self):
        assert _make_adapter().handle_line("help hold") == COMMAND_HELP["hold"]

    def test_help_for_unknown_command_lists_all(self):
        assert _make_adapter().handle_line("help fly") == HELP_TEXT

    def test_help_lists_every_command(self):
        for command in ("roll", "hold", "score", "cats"):
            assert command in HELP_TEXT

    def test_log_before_scoring(self):
        assert _make_adapter().handle_line("log") == "Nothing has been scored yet."

    def test_log_lists_scores(self):
        adapter = _make_adapter([6, 6, 6, 6, 6])
        adapter.handle_line("score yahtzee")
        adapter.state.row = DiceRow.from_values([1, 2, 3, 4, 6])
        adapter.handle_line("score house")
        assert adapter.handle_line("log") == "Round 1: yahtzee -> 50\nRound 2: house -> zero"

    def test_show_categories_setting(self):
        adapter = _make_adapter(settings={"show_categories": True, "dice_style": "plain"})
        text = adapter.handle_line("roll")
        assert text.startswith("Upper:")


# ── Game actions ─────────────────────────────────────────────────────────────

class TestActions:
    def test_commands_are_logged(self):
        adapter = _make_adapter()
        adapter.handle_line("roll")
        adapter.handle_line("hold 1")
        adapter.handle_line("score chance")
        assert [e.event_type for e in adapter.game_log.entries] == ["roll", "hold", "score"]
        assert all(e.turn == 1 for e in adapter.game_log.entries)

    def test_non_game_commands_are_not_logged(self):
        adapter = _make_adapter()
        adapter.handle_line("help")
        adapter.handle_line("cats")
        adapter.handle_line("bogus")
        assert adapter.game_log.entries == []

    def test_new_game_resets_everything(self):
        adapter = _make_adapter([6, 6, 6, 6, 6])
        adapter.handle_line("score yahtzee")
        adapter.handle_line("new")
        assert adapter.state.score == 0
        assert adapter.state.current_round == 1
        assert adapter.game_log.entries == []
        assert adapter.message == "New game started."

    def test_potential_score(self):
        adapter = _make_adapter([2, 2, 3, 3, 3])
        assert adapter.potential_score("house") == 25
        assert adapter.potential_score("l-straight") == 0
        adapter.handle_line("score house")
        assert adapter.potential_score("house") is None

    def test_every_category_has_a_tooltip(self):
        assert set(CATEGORY_TOOLTIPS) == set(CATEGORY_NAMES)


# ── Rendering ────────────────────────────────────────────────────────────────

class TestRendering:
    def test_board_layout(self):
        adapter = _make_adapter([1, 2, 3, 4, 5])
        adapter.handle_line("hold 2")
        assert adapter.render_board() == (
            " 1    2    3    4    5\n"
            "     held               \n"
            "Score: 0\n"
            "Rolls left: 2\n"
            "Die 2 has been (un)held."
        )

    def test_box_style(self):
        adapter = _make_adapter([1, 2, 3, 4, 5], settings={"show_categories": False, "dice_style": "box"})
        board = adapter.render_board()
        assert "┌───────┐" in board
        assert "[1]" in board and "[5]" in board

    def test_render_dice_box_marks_held(self):
        text = render_dice_box((6, 6, 6, 6, 6), [True, False, False, False, False])
        lines = text.split("\n")
        assert len(lines) == 6
        assert lines[0].startswith("╔═══════╗")
        assert "HELD" in lines[-1]
