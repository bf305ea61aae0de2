"""FrontendAdapter — Shared command handling and rendering for all Yahtzee frontends.

Parses typed commands, drives the game engine, records the game log and turns
engine outcomes into the messages a player reads. Pure Python — no terminal
or Textual dependency.

Each frontend (text loop, TUI) creates a FrontendAdapter and only handles
reading input and putting strings on screen.
"""

import logging

from game_engine import (
    AlreadyScored,
    CategoryNotFound,
    OutOfRolls,
    hold,
    is_game_over,
    new_game,
    roll,
    score,
)
from game_log import GameLog
from settings import DEFAULTS

logger = logging.getLogger(__name__)


# ── Shared constants ──────────────────────────────────────────────────────────

CATEGORY_TOOLTIPS = {
    "1": "Sum of all dice showing 1",
    "2": "Sum of all dice showing 2",
    "3": "Sum of all dice showing 3",
    "4": "Sum of all dice showing 4",
    "5": "Sum of all dice showing 5",
    "6": "Sum of all dice showing 6",
    "3-kind": "3 of the same, score = sum of all dice",
    "4-kind": "4 of the same, score = sum of all dice",
    "house": "3 of one + 2 of another = 25",
    "s-straight": "Exactly 4 consecutive dice = 30",
    "l-straight": "5 consecutive dice = 40",
    "yahtzee": "All 5 dice the same = 50",
    "chance": "Sum of all dice, no pattern needed",
}

COMMAND_HELP = {
    "roll": "roll -- Randomizes the dice that are not held.",
    "hold": "hold (1..5)... -- Hold or unhold the dice.",
    "score": "score (category) -- Score a category.",
    "cats": "cats -- List the categories.",
    "log": "log -- List the categories scored so far.",
    "new": "new -- Start a new game.",
    "help": "help [command] -- Show this list, or help for one command.",
}

HELP_TEXT = "COMMANDS:\n-----\n" + "\n".join(COMMAND_HELP.values()) + "\n-----"

NO_COMMAND_MESSAGE = "Enter 'help' for commands."


# ── Box-art dice ──────────────────────────────────────────────────────────────

BOX_ART = {
    1: [
        "┌───────┐",
        "│       │",
        "│   ●   │",
        "│       │",
        "└───────┘",
    ],
    2: [
        "┌───────┐",
        "│ ●     │",
        "│       │",
        "│     ● │",
        "└───────┘",
    ],
    3: [
        "┌───────┐",
        "│ ●     │",
        "│   ●   │",
        "│     ● │",
        "└───────┘",
    ],
    4: [
        "┌───────┐",
        "│ ●   ● │",
        "│       │",
        "│ ●   ● │",
        "└───────┘",
    ],
    5: [
        "┌───────┐",
        "│ ●   ● │",
        "│   ●   │",
        "│ ●   ● │",
        "└───────┘",
    ],
    6: [
        "┌───────┐",
        "│ ●   ● │",
        "│ ●   ● │",
        "│ ●   ● │",
        "└───────┘",
    ],
}

BOX_ART_HELD = {
    v: [
        line.replace("┌", "╔").replace("┐", "╗")
        .replace("└", "╚").replace("┘", "╝")
        .replace("─", "═").replace("│", "║")
        for line in lines
    ]
    for v, lines in BOX_ART.items()
}


def render_dice_box(values, held):
    """Render 5 dice as box art, side by side, with position labels below."""
    lines = []
    for row in range(5):
        parts = []
        for val, is_held in zip(values, held):
            art = BOX_ART_HELD if is_held else BOX_ART
            parts.append(art[val][row])
        lines.append("  ".join(parts))

    label_parts = []
    for i, is_held in enumerate(held):
        held_label = " HELD" if is_held else ""
        label_parts.append(f"  [{i+1}]{held_label}".ljust(11))
    lines.append("".join(label_parts))
    return "\n".join(lines)


def render_dice_plain(state):
    """The dice line followed by the held markers line."""
    held = " ".join("held" if h else "    " for h in state.held)
    return f"{state.row}\n{held}"


# ── Parsing ───────────────────────────────────────────────────────────────────

def parse_hold_positions(tokens):
    """Parse hold arguments to ints. Returns None if any token is not an integer.

    Range is not checked here; the engine rejects out-of-range positions.
    """
    try:
        return [int(t) for t in tokens]
    except ValueError:
        return None


def _join_positions(positions):
    if len(positions) == 1:
        return str(positions[0])
    head = ", ".join(str(p) for p in positions[:-1])
    return f"{head} and {positions[-1]}"


def describe_outcome(outcome, state=None):
    """Turn an engine Outcome into the message shown under the board."""
    if outcome is None:
        return NO_COMMAND_MESSAGE

    if outcome.command == "roll":
        if isinstance(outcome.error, OutOfRolls):
            return "Roll failed. Out of rolls."
        left = state.rolls_left if state is not None else 0
        return {2: "Two rolls left.", 1: "One roll left.", 0: "Zero rolls left."}[left]

    if outcome.command == "hold":
        if not outcome.ok:
            return "Invalid hold command. Use numbers between 1 and 5 separated by spaces."
        positions = outcome.positions
        if not positions:
            return "Nothing has been (un)held."
        if len(positions) == 1:
            return f"Die {positions[0]} has been (un)held."
        return f"Dice {_join_positions(positions)} have been (un)held."

    if outcome.command == "score":
        if isinstance(outcome.error, AlreadyScored):
            return "This category was already scored."
        if isinstance(outcome.error, CategoryNotFound):
            return "This category was not found."
        if state is not None and is_game_over(state):
            return f"Game over! Final score: {state.score}. Enter 'new' to play again."
        if outcome.points is None:
            return "Scored zero. New turn."
        return f"Scored {outcome.points}. New turn."

    return NO_COMMAND_MESSAGE


# ── Frontend Adapter ──────────────────────────────────────────────────────────

class FrontendAdapter:
    """Shared game driver for all Yahtzee frontends.

    Owns the GameState and GameLog, and the message line shown under the
    board. Frontends call handle_line() with whatever the player typed and
    print the result.
    """

    def __init__(self, state=None, settings=None, rng=None):
        self.rng = rng
        self.state = state if state is not None else new_game(rng)
        self.settings = dict(settings) if settings is not None else dict(DEFAULTS)
        self.game_log = GameLog()
        self.message = describe_outcome(self.state.last_outcome, self.state)

    @property
    def game_over(self):
        return is_game_over(self.state)

    # ── Game actions ──────────────────────────────────────────────────────

    def _record(self, turn, outcome):
        self.game_log.record(turn, outcome, self.state)
        self.message = describe_outcome(outcome, self.state)
        logger.debug("%s -> %s (dice=%s)", outcome.command,
                     "ok" if outcome.ok else type(outcome.error).__name__,
                     self.state.row.values())
        return outcome

    def do_roll(self):
        """Roll the unheld dice."""
        turn = self.state.current_round
        return self._record(turn, roll(self.state))

    def do_hold(self, positions):
        """Toggle held dice by 1-based position; None means unparseable input."""
        turn = self.state.current_round
        return self._record(turn, hold(self.state, positions))

    def do_score(self, name):
        """Score the current dice in the named category."""
        turn = self.state.current_round
        return self._record(turn, score(self.state, name))

    def do_new_game(self):
        """Discard the current game and start over."""
        self.state = new_game(self.rng)
        self.game_log.clear()
        self.message = "New game started."
        logger.debug("new game, dice=%s", self.state.row.values())

    # ── Text commands ─────────────────────────────────────────────────────

    def handle_line(self, line):
        """Run one typed command.

        Updates self.message for the board and returns any extra text to
        print before the board (help, category list, log), or None.
        """
        words = line.strip().lower().split(" ")
        command, args = words[0], words[1:]
        logger.debug("command %r args %r", command, args)

        if command == "roll" and not args:
            self.do_roll()
        elif command == "hold":
            self.do_hold(parse_hold_positions(args))
        elif command == "score" and len(args) == 1:
            self.do_score(args[0])
        elif command == "cats" and not args:
            return self.render_categories()
        elif command == "help":
            return self.render_help(args)
        elif command == "log" and not args:
            return self.render_log()
        elif command == "new" and not args:
            self.do_new_game()
        elif command == "":
            self.message = "No command was put in."
        else:
            self.message = f"{command} is not a command."

        if self.settings.get("show_categories"):
            return self.render_categories()
        return None

    # ── Rendering ─────────────────────────────────────────────────────────

    def render_dice(self):
        if self.settings.get("dice_style") == "box":
            return render_dice_box(self.state.row.values(), self.state.held)
        return render_dice_plain(self.state)

    def render_board(self):
        """Dice, held markers, score, rolls left and the message line."""
        return (
            f"{self.render_dice()}\n"
            f"Score: {self.state.score}\n"
            f"Rolls left: {self.state.rolls_left}\n"
            f"{self.message}"
        )

    def render_categories(self):
        return str(self.state.categories)

    def render_help(self, args=()):
        """Full command list, or the help line for one known command."""
        if args and args[0] in COMMAND_HELP:
            return COMMAND_HELP[args[0]]
        return HELP_TEXT

    def render_log(self):
        entries = self.game_log.get_score_entries()
        if not entries:
            return "Nothing has been scored yet."
        lines = []
        for e in entries:
            points = "zero" if e.score is None else e.score
            lines.append(f"Round {e.turn}: {e.category} -> {points}")
        return "\n".join(lines)

    def potential_score(self, name):
        """Points the current dice would earn in an open category, else None."""
        cat = self.state.categories[name]
        if cat.is_scored:
            return None
        return cat.potential(self.state.row)
