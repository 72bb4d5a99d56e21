# Area: Shell
"""
emoji_hunt.cli — Command-line interface
=======================================

Provides the CLI entry point for playing in a terminal.

Usage:
    python -m emoji_hunt                          # Play with saved profile
    python -m emoji_hunt --difficulty hard        # Override difficulty
    python -m emoji_hunt --config settings.json   # Custom game constants

Settings can also come from EMOJI_HUNT_* environment variables or a
.env file in the working directory.
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from ._engine.enums import Difficulty
from ._shared.logging_config import log_error, setup_logging
from .config import load_settings
from .engine import GameSessionEngine
from .errors import ConfigurationError, ProfileStoreError
from .profile_store import JsonFileProfileStore
from .shell import TerminalShell

logger = logging.getLogger("emoji_hunt.cli")

DEFAULT_PROFILE_PATH = str(Path.home() / ".emoji_hunt" / "profile.json")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="emoji-hunt",
        description="Emoji Hunt - find the target emoji before time runs out",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  emoji-hunt
  emoji-hunt --difficulty easy --username Sam
  emoji-hunt --config settings.json --seed 42
  EMOJI_HUNT_MAX_LEVEL=10 emoji-hunt
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON file with game settings",
    )

    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value.lower() for d in Difficulty],
        help="Difficulty to store in the profile before playing",
    )

    parser.add_argument(
        "--username",
        type=str,
        help="Player name to store in the profile before playing",
    )

    parser.add_argument(
        "--profile",
        type=str,
        default=DEFAULT_PROFILE_PATH,
        help=f"Profile file (default: {DEFAULT_PROFILE_PATH})",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible grids",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default="emoji_hunt.log",
        help="JSON log file (default: emoji_hunt.log)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show engine logs on the terminal",
    )

    return parser.parse_args(argv)


def apply_profile_overrides(store: JsonFileProfileStore, args: argparse.Namespace) -> None:
    """Store --username/--difficulty in the profile; failures are logged."""
    try:
        if args.username:
            store.set_username(args.username)
        if args.difficulty:
            store.set_difficulty(Difficulty.parse(args.difficulty))
    except ProfileStoreError as e:
        logger.warning(f"Could not update profile: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)

    setup_logging(
        log_file_path=args.log_file,
        level=logging.DEBUG if args.verbose else logging.INFO,
        terminal_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        settings = load_settings(args.config)
    except ConfigurationError as e:
        log_error(e)
        return 1

    store = JsonFileProfileStore(args.profile)
    apply_profile_overrides(store, args)

    rng = random.Random(args.seed)
    engine = GameSessionEngine(settings=settings, rng=rng)
    shell = TerminalShell(engine, store, rng=rng)

    try:
        return shell.run()
    except KeyboardInterrupt:
        engine.reset_session()
        print(file=sys.stderr)
        logger.info("Interrupted by user")
        return 130
