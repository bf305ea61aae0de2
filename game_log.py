"""Game log for Yahtzee — records every command outcome for later review.

Pure Python, no UI dependency. Captures rolls, holds and scoring decisions
per round, including the rejected ones.
"""
from __future__ import annotations

from dataclasses import dataclass

from game_engine import GameState, Outcome


@dataclass
class LogEntry:
    """A single logged game event."""
    turn: int                                   # round the command was issued in
    event_type: str                             # "roll", "hold", "score"
    dice_values: tuple[int, ...]                # dice after the command
    ok: bool = True
    held_indices: tuple[int, ...] | None = None  # 0-based, holds only
    category: str | None = None
    score: int | None = None
    rolls_left: int = 0


class GameLog:
    """Accumulates LogEntry records during a game."""

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []

    def record(self, turn: int, outcome: Outcome, state: GameState) -> LogEntry:
        """Record the outcome of a command issued during round `turn`."""
        entry = LogEntry(
            turn=turn,
            event_type=outcome.command,
            dice_values=state.row.values(),
            ok=outcome.ok,
            rolls_left=state.rolls_left,
        )
        if outcome.command == "hold":
            entry.held_indices = tuple(i for i, h in enumerate(state.held) if h)
        elif outcome.command == "score":
            entry.category = outcome.category
            entry.score = outcome.points
        self.entries.append(entry)
        return entry

    def get_turn_entries(self, turn: int) -> list[LogEntry]:
        """Return all entries for a specific round."""
        return [e for e in self.entries if e.turn == turn]

    def get_score_entries(self) -> list[LogEntry]:
        """Return only successful scoring entries, in order."""
        return [e for e in self.entries if e.event_type == "score" and e.ok]

    def clear(self) -> None:
        """Remove all entries."""
        self.entries = []
