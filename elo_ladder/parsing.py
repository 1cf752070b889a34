"""
Reading rosters and game logs from CSV-like text.

Roster lines look like ``magnus,Magnus Carlsen,2870`` and game lines like
``14/03/2015,magnus,anand,.5``. Fields past the ones that are needed are
ignored, as are blank lines.
"""

import datetime
import logging
import math
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from .constants import DATE_FORMAT
from .core.player_store import Player, PlayerStore
from .core.replay import Game
from .exceptions import MalformedRecordError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_DATE_RE = re.compile(r"(\d*)/(\d*)/(\d*)")


def parse_date(text: str) -> datetime.date:
    """
    Parse a ``day/month/year`` date.

    Raises:
        ValueError: If the text is not a valid date
    """
    match = _DATE_RE.search(text)
    if match is None:
        raise ValueError(f"Invalid date: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    return datetime.date(year, month, day)


def format_date(date: datetime.date) -> str:
    return DATE_FORMAT % (date.day, date.month, date.year)


def _records(lines: Iterable[str]) -> Iterator[Tuple[int, str, List[str]]]:
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        yield line_number, line, line.split(",")


def parse_roster(lines: Iterable[str]) -> PlayerStore:
    """
    Build the initial store from roster lines.

    Each line is placed in front of the lines read before it, so the store
    lists the last roster line first. Tied players who never play a game
    therefore rank in reverse file order.

    Args:
        lines: Lines of ``<id>,<name>,<rating>`` records

    Returns:
        A PlayerStore with every player at zero games

    Raises:
        MalformedRecordError: If a line cannot be parsed
        DuplicatePlayerError: If an id appears twice
    """
    players: List[Player] = []
    for line_number, line, fields in _records(lines):
        if len(fields) < 3:
            raise MalformedRecordError("expected <id>,<name>,<rating>", line_number, line)
        player_id, name, rating = fields[0], fields[1], fields[2]
        try:
            rating_value = int(rating)
        except ValueError:
            raise MalformedRecordError(f"rating is not an integer: {rating!r}", line_number, line) from None
        players.append(Player(id=player_id, name=name, rating=float(rating_value)))

    players.reverse()
    store = PlayerStore.from_players(players)
    logger.debug("Parsed %d players", len(store))
    return store


def parse_games(lines: Iterable[str]) -> List[Game]:
    """
    Parse game log lines into chronological order.

    Games are sorted by date; games on the same date keep the order they
    have in the log.

    Args:
        lines: Lines of ``<date>,<player1 id>,<player2 id>,<result>`` records

    Returns:
        Games, oldest first

    Raises:
        MalformedRecordError: If a line cannot be parsed
    """
    games: List[Game] = []
    for line_number, line, fields in _records(lines):
        if len(fields) < 4:
            raise MalformedRecordError("expected <date>,<id>,<id>,<result>", line_number, line)
        date, player1_id, player2_id, result = fields[0], fields[1], fields[2], fields[3]
        try:
            game_date = parse_date(date)
        except ValueError as e:
            raise MalformedRecordError(str(e), line_number, line) from None
        try:
            game_result = float(result)
        except ValueError:
            raise MalformedRecordError(f"result is not a number: {result!r}", line_number, line) from None
        if not math.isfinite(game_result):
            raise MalformedRecordError(f"result is not finite: {result!r}", line_number, line)
        games.append(Game(game_date, player1_id, player2_id, game_result))

    games.sort(key=lambda game: game.date)
    logger.debug("Parsed %d games", len(games))
    return games


def read_roster(path: PathLike) -> PlayerStore:
    """Read a roster file. See :func:`parse_roster`."""
    logger.info("Reading players from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_roster(f)
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"{path}: not valid UTF-8 ({e.reason})") from None


def read_games(path: PathLike) -> List[Game]:
    """Read a game log file. See :func:`parse_games`."""
    logger.info("Reading games from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_games(f)
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"{path}: not valid UTF-8 ({e.reason})") from None
