"""
Command line interface: compute and print an Elo ladder.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import LadderSettings, load_settings
from .exceptions import LadderError
from .parsing import read_games, read_roster
from .report import render_summary

logger = logging.getLogger(__name__)

EPILOG = """\
file formats:
  PLAYERS  one player per line: <ID>,<Full name>,<Elo-rating>
           e.g. magnus,Magnus Carlsen,2870
  GAMES    one game per line: <date>,<White's ID>,<Black's ID>,<RES>
           where RES is 1., .5 or 0. for a win, draw or loss for white
           e.g. 14/03/2015,magnus,anand,.5
"""


def build_parser(settings: LadderSettings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="elo-ladder",
        description="Compute the Elo ratings for the players in PLAYERS after playing the games in GAMES.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("players", metavar="PLAYERS", help="Path to the players file.")
    p.add_argument("games", metavar="GAMES", help="Path to the games file.")
    p.add_argument(
        "-t",
        "--title",
        default=settings.title,
        help="Optionally print a title before printing the ladder.",
    )
    p.add_argument(
        "--gh-pages",
        action=argparse.BooleanOptionalAction,
        default=settings.gh_pages,
        help="Output markdown for Github pages publication of the ladder.",
    )
    p.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: %(default)s).",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"elo-ladder: {e}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        players = read_roster(args.players)
        games = read_games(args.games)
        logger.info("Replaying %d games for %d players", len(games), len(players))
        summary = render_summary(players, games, title=args.title, gh_pages=args.gh_pages)
    except OSError as e:
        logger.error("Could not read input: %s", e)
        print(f"elo-ladder: {e}", file=sys.stderr)
        return 1
    except LadderError as e:
        logger.error("Could not compute ladder: %s", e)
        print(f"elo-ladder: {e}", file=sys.stderr)
        return 1

    print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
