"""
Yahtzee Game Engine - Pure game logic without UI dependencies

This module contains the dice, the scoring categories and the turn state
machine. Nothing here reads input or prints; frontends drive the game through
new_game(), roll(), hold() and score() and render the read-only accessors.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from collections import Counter
import random

NUM_DICE = 5

# The row is pre-rolled when a turn starts, so only two explicit rolls remain.
TURN_START_ROLLS = 2


# ══════════════════════════════════════════════════════════════════════════════
# Errors
# ══════════════════════════════════════════════════════════════════════════════

class YahtzeeError(Exception):
    """Base class for all recoverable game errors."""


class InvalidValue(YahtzeeError, ValueError):
    """A die or dice row was built from a value outside 1-6."""


class OutOfRolls(YahtzeeError):
    """Roll attempted with no rolls left this turn."""


class InvalidHold(YahtzeeError):
    """Hold positions were missing, malformed or outside 1-5."""


class CategoryNotFound(YahtzeeError):
    """Score requested for a category name that does not exist."""


class AlreadyScored(YahtzeeError):
    """Score requested for a category that was already committed."""


# ══════════════════════════════════════════════════════════════════════════════
# Dice
# ══════════════════════════════════════════════════════════════════════════════

def _source(rng):
    """Return the random source to use (process-wide `random` by default)."""
    return random if rng is None else rng


class Die(IntEnum):
    """A single six-sided die face"""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6

    @classmethod
    def roll(cls, rng=None) -> Die:
        """Return a uniformly random face.

        Args:
            rng: Any object with randint(a, b). None uses the `random` module.
        """
        return cls(_source(rng).randint(1, 6))

    @classmethod
    def from_int(cls, value) -> Die:
        """Convert an integer 1-6 to a Die, raising InvalidValue otherwise."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidValue(f"{value!r} is not a die value (1-6)") from None


class DiceRow:
    """Exactly five dice, in order.

    Dice are never mutated; rerolling replaces the Die at each unheld position.
    """

    def __init__(self, dice):
        dice = list(dice)
        assert len(dice) == NUM_DICE, f"a dice row holds {NUM_DICE} dice, got {len(dice)}"
        self._dice = dice

    @classmethod
    def roll(cls, rng=None) -> DiceRow:
        """Build a row of five independently rolled dice."""
        return cls(Die.roll(rng) for _ in range(NUM_DICE))

    @classmethod
    def from_values(cls, values) -> DiceRow:
        """Build a row from five integers, raising InvalidValue on any bad face."""
        return cls(Die.from_int(v) for v in values)

    def reroll(self, held, rng=None) -> None:
        """Replace every die whose held flag is False with a fresh roll."""
        held = list(held)
        assert len(held) == NUM_DICE, f"held mask needs {NUM_DICE} entries, got {len(held)}"
        for i, is_held in enumerate(held):
            if not is_held:
                self._dice[i] = Die.roll(rng)

    def values(self) -> tuple[int, ...]:
        """Return the five face values as plain ints."""
        return tuple(int(d) for d in self._dice)

    def __iter__(self):
        return iter(self._dice)

    def __len__(self):
        return len(self._dice)

    def __getitem__(self, index):
        return self._dice[index]

    def __eq__(self, other):
        if not isinstance(other, DiceRow):
            return NotImplemented
        return self._dice == other._dice

    def __repr__(self):
        return f"DiceRow({list(self.values())})"

    def __str__(self):
        return " " + "    ".join(str(v) for v in self.values())


# ══════════════════════════════════════════════════════════════════════════════
# Scoring rules
# ══════════════════════════════════════════════════════════════════════════════

def count_values(row):
    """
    Count occurrences of each face in a row

    Args:
        row: DiceRow (or any iterable of dice / ints)

    Returns:
        Counter keyed by int face value
    """
    return Counter(int(d) for d in row)


def total(row):
    """Sum of all five dice."""
    return sum(int(d) for d in row)


def upper_score(row, face):
    """Number of dice showing `face`, times `face`."""
    return count_values(row)[face] * face


def has_n_of_kind(row, n):
    """
    Check if at least n dice share a face

    Args:
        row: DiceRow
        n: Number of matching dice required

    Returns:
        True if some face appears n or more times
    """
    return max(count_values(row).values()) >= n


def has_full_house(row):
    """
    Check if the row is exactly a triple plus a pair of a different face

    Five of a kind does not count: no face appears exactly twice.
    """
    counts = count_values(row)
    return sorted(counts.values(), reverse=True) == [3, 2]


def longest_run(row):
    """Length of the longest run of consecutive distinct faces."""
    faces = sorted(set(int(d) for d in row))
    best = current = 1
    for prev, face in zip(faces, faces[1:]):
        if face == prev + 1:
            current += 1
        else:
            current = 1
        best = max(best, current)
    return best


def has_n_straight(row, n):
    """
    Check if the longest straight in the row is exactly n long

    This is an equality test: a five-long run is a large straight, not also
    a small one.
    """
    return longest_run(row) == n


def has_yahtzee(row):
    """Check if all five dice show the same face."""
    return has_n_of_kind(row, 5)


def _always(row):
    return True


def _fixed(points):
    def scorer(row):
        return points
    return scorer


# ══════════════════════════════════════════════════════════════════════════════
# Category engine
# ══════════════════════════════════════════════════════════════════════════════

class ScoreStatus(Enum):
    """Whether a category slot has been used"""
    UNSCORED = "unscored"
    SCORED = "scored"


@dataclass
class Category:
    """A named (qualifies, scorer) pair that can be committed once."""
    name: str
    section: str                    # "upper" or "lower"
    qualifies: object               # DiceRow -> bool
    scorer: object                  # DiceRow -> int
    status: ScoreStatus = ScoreStatus.UNSCORED
    points: int | None = None       # None when scored without qualifying

    @property
    def is_scored(self) -> bool:
        return self.status is ScoreStatus.SCORED

    def potential(self, row) -> int:
        """Points this row would earn here, without committing."""
        return self.scorer(row) if self.qualifies(row) else 0

    def score(self, row) -> int | None:
        """Commit the row to this category.

        Returns the recorded points, or None if the row did not qualify
        (the slot is still consumed). Raises AlreadyScored on a second call.
        """
        if self.is_scored:
            raise AlreadyScored(self.name)
        self.points = self.scorer(row) if self.qualifies(row) else None
        self.status = ScoreStatus.SCORED
        return self.points

    def display_status(self) -> str:
        """'-' unscored, 'Z' scored as zero by not qualifying, else the points."""
        if not self.is_scored:
            return "-"
        if self.points is None:
            return "Z"
        return str(self.points)

    def __str__(self):
        return f"{self.name}: {self.display_status()}"


UPPER_NAMES = ("1", "2", "3", "4", "5", "6")
LOWER_NAMES = ("3-kind", "4-kind", "house", "s-straight", "l-straight", "yahtzee", "chance")
CATEGORY_NAMES = UPPER_NAMES + LOWER_NAMES


def _upper_category(face):
    return Category(
        name=str(face),
        section="upper",
        qualifies=_always,
        scorer=lambda row: upper_score(row, face),
    )


class Categories:
    """The 13 scoring categories of one game, in display order."""

    def __init__(self):
        cats = [_upper_category(face) for face in range(1, 7)]
        cats += [
            Category("3-kind", "lower", lambda row: has_n_of_kind(row, 3), total),
            Category("4-kind", "lower", lambda row: has_n_of_kind(row, 4), total),
            Category("house", "lower", has_full_house, _fixed(25)),
            Category("s-straight", "lower", lambda row: has_n_straight(row, 4), _fixed(30)),
            Category("l-straight", "lower", lambda row: has_n_straight(row, 5), _fixed(40)),
            Category("yahtzee", "lower", has_yahtzee, _fixed(50)),
            Category("chance", "lower", _always, total),
        ]
        self._by_name = {cat.name: cat for cat in cats}

    def __getitem__(self, name) -> Category:
        try:
            return self._by_name[name]
        except KeyError:
            raise CategoryNotFound(name) from None

    def __contains__(self, name):
        return name in self._by_name

    def __iter__(self):
        return iter(self._by_name.values())

    def __len__(self):
        return len(self._by_name)

    def score(self, name, row) -> int | None:
        """Commit `row` to the named category.

        Raises:
            CategoryNotFound: unknown name, nothing changes.
            AlreadyScored: category already committed, nothing changes.
        """
        return self[name].score(row)

    def upper(self) -> list[Category]:
        return [c for c in self if c.section == "upper"]

    def lower(self) -> list[Category]:
        return [c for c in self if c.section == "lower"]

    def is_complete(self) -> bool:
        """Check if all categories are scored"""
        return all(c.is_scored for c in self)

    def total(self) -> int:
        return sum(c.points or 0 for c in self)

    def __str__(self):
        upper = "\n".join(str(c) for c in self.upper())
        lower = "\n".join(str(c) for c in self.lower())
        return f"Upper:\n{upper}\nLower:\n{lower}"


# ══════════════════════════════════════════════════════════════════════════════
# Turn / game state machine
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Outcome:
    """What a player command did, for the frontend to report."""
    command: str                            # "roll", "hold", "score"
    error: YahtzeeError | None = None
    positions: tuple[int, ...] = ()         # hold: 1-based positions toggled
    category: str | None = None             # score: category name requested
    points: int | None = None               # score: None means scored zero

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class GameState:
    """Mutable state of one game.

    The dice, held mask and rolls_left belong to the current turn; the
    categories and score last for the whole game.
    """
    row: DiceRow
    held: list[bool] = field(default_factory=lambda: [False] * NUM_DICE)
    rolls_left: int = TURN_START_ROLLS
    score: int = 0
    categories: Categories = field(default_factory=Categories)
    current_round: int = 1
    last_outcome: Outcome | None = None
    rng: object = None


def new_game(rng=None) -> GameState:
    """
    Create a fresh game with the first roll of turn one already made.

    Args:
        rng: Optional random source with randint(a, b), kept for every later roll

    Returns:
        New GameState
    """
    return GameState(row=DiceRow.roll(rng), rng=rng)


def roll(state: GameState) -> Outcome:
    """
    Reroll every unheld die, using up one roll.

    With no rolls left nothing changes and the outcome carries OutOfRolls.
    """
    if state.rolls_left <= 0:
        outcome = Outcome("roll", error=OutOfRolls("no rolls left this turn"))
    else:
        state.rolls_left -= 1
        state.row.reroll(state.held, state.rng)
        outcome = Outcome("roll")
    state.last_outcome = outcome
    return outcome


def hold(state: GameState, positions) -> Outcome:
    """
    Toggle the held flag of each 1-based die position.

    The request is all-or-nothing: if `positions` is None or any entry is
    outside 1-5, no flag changes and the outcome carries InvalidHold.
    Naming a position twice toggles it twice.
    """
    if positions is None:
        outcome = Outcome("hold", error=InvalidHold("no positions given"))
    else:
        positions = tuple(positions)
        bad = [p for p in positions if not (isinstance(p, int) and 1 <= p <= NUM_DICE)]
        if bad:
            outcome = Outcome("hold", error=InvalidHold(f"positions out of range: {bad}"))
        else:
            for p in positions:
                state.held[p - 1] = not state.held[p - 1]
            outcome = Outcome("hold", positions=positions)
    state.last_outcome = outcome
    return outcome


def _start_next_turn(state: GameState) -> None:
    """Release all dice, make the next turn's implicit first roll, reset rolls."""
    state.held = [False] * NUM_DICE
    state.row.reroll(state.held, state.rng)
    state.rolls_left = TURN_START_ROLLS
    state.current_round += 1


def score(state: GameState, name: str) -> Outcome:
    """
    Commit the current dice to a category and start the next turn.

    A first-time score adds any earned points and starts the next turn,
    whether or not the dice qualified. Unknown or already-scored categories
    change nothing; the outcome carries the error.
    """
    try:
        points = state.categories.score(name, state.row)
    except (CategoryNotFound, AlreadyScored) as e:
        outcome = Outcome("score", error=e, category=name)
    else:
        state.score += points or 0
        _start_next_turn(state)
        outcome = Outcome("score", category=name, points=points)
    state.last_outcome = outcome
    return outcome


# ── Read-only accessors ───────────────────────────────────────────────────────

def dice_values(state: GameState) -> tuple[int, ...]:
    return state.row.values()


def held_mask(state: GameState) -> tuple[bool, ...]:
    return tuple(state.held)


def rolls_left(state: GameState) -> int:
    return state.rolls_left


def total_score(state: GameState) -> int:
    return state.score


def category_display(state: GameState) -> list[tuple[str, str]]:
    """(name, status) per category in display order; status is '-', 'Z' or points."""
    return [(c.name, c.display_status()) for c in state.categories]


def is_game_over(state: GameState) -> bool:
    """True once all 13 categories are scored. The engine never enforces it."""
    return state.categories.is_complete()
