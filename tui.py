#!/usr/bin/env python3
"""
Yahtzee TUI — Terminal-based frontend using Textual.

Box-art dice, a live scorecard and a command input that accepts the same
commands as the text loop. Space rolls when the input is empty.
"""
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Header, Input, Static
from textual import on

from frontend_adapter import FrontendAdapter, CATEGORY_TOOLTIPS, HELP_TEXT, render_dice_box

logger = logging.getLogger(__name__)


# ── Widgets ──────────────────────────────────────────────────────────────────

class DiceDisplay(Static):
    """Renders the 5 dice using box art."""

    def render(self):
        state = self.app.adapter.state
        return render_dice_box(state.row.values(), state.held)


class StatusDisplay(Static):
    """Shows score, rolls left and the last message."""

    def render(self):
        adapter = self.app.adapter
        state = adapter.state
        lines = [
            f"[bold]Score: {state.score}[/bold]",
            f"Rolls left: {state.rolls_left}",
            "",
            adapter.message,
        ]
        if adapter.game_over:
            lines.append("[bold]═══ GAME OVER ═══[/bold]")
        return "\n".join(lines)


class ScorecardDisplay(Static):
    """Renders the categories with their status, or the potential score if open."""

    def render(self):
        adapter = self.app.adapter
        categories = adapter.state.categories

        lines = ["[bold]── UPPER SECTION ──[/bold]"]
        for cat in categories.upper():
            lines.append(self._format_row(cat, adapter))
        lines.append("[bold]── LOWER SECTION ──[/bold]")
        for cat in categories.lower():
            lines.append(self._format_row(cat, adapter))
        lines.append(f"[bold]  TOTAL: {categories.total()}[/bold]")
        return "\n".join(lines)

    def _format_row(self, cat, adapter):
        """Format a single scorecard row."""
        if cat.is_scored:
            return f"  {cat.name:<12} {cat.display_status():>3}"
        potential = adapter.potential_score(cat.name)
        tip = CATEGORY_TOOLTIPS.get(cat.name, "")
        if potential > 0:
            return f"  [green]{cat.name:<12} ({potential:>3})[/green] [dim]{tip}[/dim]"
        return f"  [dim]{cat.name:<12} ({potential:>3}) {tip}[/dim]"


# ── Modal Screens ────────────────────────────────────────────────────────────

class HelpScreen(ModalScreen):
    """Help overlay listing the commands."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close"),
        Binding("f1", "dismiss", "Close"),
    ]

    def compose(self) -> ComposeResult:
        text = HELP_TEXT + "\n\n[dim]Space rolls when the command line is empty. Esc to close.[/dim]"
        yield Static(text, id="help-panel")


class YahtzeeApp(App):
    """Yahtzee terminal UI application."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #game-area {
        layout: horizontal;
        height: 1fr;
    }

    #dice-panel {
        width: 60;
        padding: 1 2;
    }

    #scorecard-panel {
        width: 1fr;
        padding: 1 2;
    }

    #dice-display, #status-display, #output-display {
        height: auto;
    }

    #status-display {
        margin-top: 1;
    }

    #roll-btn {
        margin-top: 1;
        width: 20;
    }

    #help-panel {
        padding: 2 4;
        border: thick $accent;
        background: $surface;
        width: 70;
        height: auto;
        max-height: 80vh;
    }
    """

    BINDINGS = [
        Binding("f1", "help", "Help", show=True),
        Binding("ctrl+n", "new_game", "New game", show=True),
        Binding("escape", "quit_or_close", "Quit", show=True),
    ]

    def __init__(self, adapter=None):
        super().__init__()
        self.adapter = adapter if adapter is not None else FrontendAdapter()

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="game-area"):
            with Vertical(id="dice-panel"):
                yield DiceDisplay(id="dice-display")
                yield Button("ROLL", id="roll-btn", variant="primary")
                yield StatusDisplay(id="status-display")
                yield Static("", id="output-display")
            with Vertical(id="scorecard-panel"):
                yield ScorecardDisplay(id="scorecard-display")
        yield Input(placeholder="roll | hold 1 3 | score chance | help", id="command-input")
        yield Footer()

    def on_mount(self):
        self.title = "Yahtzee"
        self.query_one("#command-input", Input).focus()

    def _refresh_display(self, output=""):
        """Refresh all display widgets."""
        try:
            self.query_one("#dice-display", DiceDisplay).refresh()
            self.query_one("#status-display", StatusDisplay).refresh()
            self.query_one("#scorecard-display", ScorecardDisplay).refresh()
            self.query_one("#output-display", Static).update(output or "")
            self.query_one("#roll-btn", Button).disabled = (
                self.adapter.state.rolls_left == 0 or self.adapter.game_over
            )
        except Exception:
            logger.debug("Refresh error", exc_info=True)

    # ── Actions ──────────────────────────────────────────────────────────

    @on(Input.Submitted, "#command-input")
    def on_command(self, event: Input.Submitted):
        line = event.value
        event.input.value = ""
        if line.strip().lower() in ("quit", "exit"):
            self.exit()
            return
        output = self.adapter.handle_line(line)
        self._refresh_display(output)

    @on(Input.Changed, "#command-input")
    def on_command_changed(self, event: Input.Changed):
        # A lone space on an empty line is the roll shortcut.
        if event.value == " ":
            event.input.value = ""
            self.action_roll()

    @on(Button.Pressed, "#roll-btn")
    def on_roll_button(self):
        self.action_roll()

    def action_roll(self):
        self.adapter.do_roll()
        self._refresh_display()

    def action_help(self):
        self.push_screen(HelpScreen())

    def action_new_game(self):
        self.adapter.do_new_game()
        self._refresh_display()

    def action_quit_or_close(self):
        # If any screen is stacked, pop it
        if len(self.screen_stack) > 1:
            self.pop_screen()
        else:
            self.exit()


def main(args=None):
    """Entry point for the TUI, given parsed yahtzee.py arguments."""
    from settings import load_settings
    from yahtzee import make_rng, parse_args

    if args is None:
        args = parse_args([])
    adapter = FrontendAdapter(settings=load_settings(args.settings), rng=make_rng(args.seed))
    YahtzeeApp(adapter=adapter).run()


if __name__ == "__main__":
    main()
