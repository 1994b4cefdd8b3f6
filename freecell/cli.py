"""
Freecell CLI - Command-line interface for the game.

Usage:
    freecell [--seed N] play          Play in the terminal (default)
    freecell [--seed N] deal          Print the initial layout
    freecell [--seed N] replay FILE   Feed recorded keystrokes, print the result

A seed is a 7-digit number without a leading zero; a random one is
drawn when none is given.
"""

import argparse
import logging
import sys

from .config import load_settings
from .observability import setup_logging

logger = logging.getLogger(__name__)


def _seed_arg(text: str) -> int:
    from .engine_core import SeedError, parse_seed

    try:
        return parse_seed(text)
    except SeedError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Freecell solitaire in the terminal",
        prog="freecell",
    )
    parser.add_argument("--seed", type=_seed_arg, default=None, help="7-digit deal number")
    parser.add_argument("--history-size", type=int, default=None, help="Number of undo snapshots kept")
    parser.add_argument("--log-level", default=None, help="Logging level (default from FREECELL_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("play", help="Play interactively (default)")
    subparsers.add_parser("deal", help="Print the dealt layout and exit")
    replay_parser = subparsers.add_parser("replay", help="Apply recorded keystrokes and print the board")
    replay_parser.add_argument("keys_file", help="File of raw key bytes, or - for stdin")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))
    history_size = args.history_size if args.history_size is not None else settings.history_size
    if history_size < 2:
        parser.error("--history-size must be at least 2")
    setup_logging(args.log_level or settings.log_level, settings.log_format, settings.log_file)

    from .engine_core import Engine, random_seed

    seed = args.seed if args.seed is not None else random_seed()
    engine = Engine.from_seed(seed, history_size=history_size)

    if args.command == "deal":
        return cmd_deal(engine)
    if args.command == "replay":
        return cmd_replay(engine, args.keys_file)
    return cmd_play(engine)


def cmd_play(engine) -> int:
    """Interactive terminal game."""
    from .tui import play

    play(engine)
    print("Bye!")
    return 0


def cmd_deal(engine) -> int:
    """Print the initial layout."""
    from .api import EngineSnapshot
    from .tui import render_text

    for line in render_text(EngineSnapshot.from_engine(engine)):
        print(line)
    return 0


def cmd_replay(engine, keys_file: str) -> int:
    """Apply recorded keystrokes, then print the final layout."""
    from .api import EngineSnapshot
    from .tui import TerminalApp, decode_keys, render_text

    try:
        if keys_file == "-":
            data = sys.stdin.buffer.read()
        else:
            with open(keys_file, "rb") as f:
                data = f.read()
    except FileNotFoundError:
        print(f"Error: File not found: {keys_file}", file=sys.stderr)
        return 1

    app = TerminalApp(engine)
    for key in decode_keys(data):
        app.handle_key(key)
        if not app.running:
            break

    for line in render_text(EngineSnapshot.from_engine(engine)):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
