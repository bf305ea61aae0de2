"""
Yahtzee text frontend - reads one command per line, prints the board.

The loop itself holds no game logic; FrontendAdapter does the parsing and
rendering. input_fn / output_fn are injectable so tests can script a game.
"""
import logging

from frontend_adapter import FrontendAdapter

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")


def run(adapter, input_fn=input, output_fn=print):
    """Run the command loop until quit, end of input or Ctrl-C."""
    while True:
        output_fn(adapter.render_board())
        try:
            line = input_fn()
        except (EOFError, KeyboardInterrupt):
            logger.debug("input closed, leaving text loop")
            break
        if line.strip().lower() in QUIT_COMMANDS:
            break
        extra = adapter.handle_line(line)
        if extra:
            output_fn(extra)


def main(args):
    """Entry point for the text frontend, given parsed yahtzee.py arguments."""
    from settings import load_settings
    from yahtzee import make_rng

    adapter = FrontendAdapter(settings=load_settings(args.settings), rng=make_rng(args.seed))
    run(adapter)
