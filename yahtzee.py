#!/usr/bin/env python3
"""
Unified entry point for all Yahtzee interfaces.

Usage:
    python yahtzee.py                       # Default: plain text loop
    python yahtzee.py --ui tui              # Terminal UI (Textual)
    python yahtzee.py --seed 42             # Reproducible dice
    python yahtzee.py --settings prefs.json # Read preferences from a file
"""
import argparse
import logging
import random


def make_rng(seed):
    """Return a seeded random source, or None for the process-wide one."""
    if seed is None:
        return None
    return random.Random(seed)


def parse_args(argv=None):
    """Parse command-line arguments.

    Args:
        argv: Optional list of args (for testing). None uses sys.argv.

    Returns:
        Parsed argparse.Namespace.
    """
    parser = argparse.ArgumentParser(description="Yahtzee — play in a text loop or terminal UI")
    parser.add_argument("--ui", choices=["text", "tui"], default="text",
                        help="Interface: text (default) or tui (Textual)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the dice for a reproducible game")
    parser.add_argument("--settings", default=None, metavar="PATH",
                        help="Settings file (default: ~/.yahtzee_settings.json)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.ui == "tui":
        from tui import main as run_tui
        run_tui(args)
    else:
        from main import main as run_text
        run_text(args)


if __name__ == "__main__":
    main()
