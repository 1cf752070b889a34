"""
Rendering the ladder and the game log as plain text or GitHub Pages Markdown.
"""

import math
from typing import Dict, List, Optional, Sequence

from .constants import (
    DRAW,
    GAME_NAME_WIDTH,
    GAMES_HEADING,
    LADDER_HEADING,
    NAME_WIDTH,
    RANK_WIDTH,
    RATING_WIDTH,
    RESULT_DRAW,
    RESULT_LOSS,
    RESULT_WIN,
    SECTION_INDENT,
    WIN,
    YAML_HEADER,
)
from .core.player_store import PlayerStore
from .core.ranking import RankedPlayer, rank_players
from .core.replay import Game, replay_games
from .exceptions import UnknownPlayerError
from .parsing import format_date


def format_result(result: float) -> str:
    # Anything that is not a win or a draw is shown as a loss
    if result == WIN:
        return RESULT_WIN
    if result == DRAW:
        return RESULT_DRAW
    return RESULT_LOSS


def format_ladder_line(entry: RankedPlayer) -> str:
    player = entry.player
    # Ratings are truncated toward zero; infinities print as "inf"
    rating = str(int(player.rating)) if math.isfinite(player.rating) else str(player.rating)
    return "%*d.  %-*s  %*s  (%d)" % (
        RANK_WIDTH, entry.rank,
        NAME_WIDTH, player.name,
        RATING_WIDTH, rating,
        player.game_count,
    )


def format_game_line(game: Game, names: Dict[str, str]) -> str:
    """
    Format one game using the players' display names.

    Raises:
        UnknownPlayerError: If either id has no name
    """
    try:
        name1 = names[game.player1_id]
        name2 = names[game.player2_id]
    except KeyError as e:
        raise UnknownPlayerError(e.args[0]) from None
    return "%s   %*s - %-*s    %s" % (
        format_date(game.date),
        GAME_NAME_WIDTH, name1,
        GAME_NAME_WIDTH, name2,
        format_result(game.result),
    )


def ladder_lines(store: PlayerStore) -> List[str]:
    return [format_ladder_line(entry) for entry in rank_players(store)]


def game_lines(games: Sequence[Game], names: Dict[str, str]) -> List[str]:
    """Format games newest first."""
    return [format_game_line(game, names) for game in reversed(games)]


def format_title(title: str, gh_pages: bool = False) -> str:
    if gh_pages:
        return f"# {title}"
    return f"\n{title}\n{'=' * len(title)}"


def format_heading(heading: str, gh_pages: bool = False) -> str:
    if gh_pages:
        return f"### {heading}"
    return f"\n{heading}\n{'-' * len(heading)}"


def format_section(lines: Sequence[str]) -> str:
    return "\n".join(SECTION_INDENT + line for line in lines)


def render_summary(
    players: PlayerStore,
    games: Sequence[Game],
    title: Optional[str] = None,
    gh_pages: bool = False,
) -> str:
    """
    Replay the games and render the full report.

    The ladder section shows the ratings after every game. The games
    section uses the names from the initial roster.

    Args:
        players: The initial roster
        games: Games in chronological order
        title: Optional title printed before the ladder
        gh_pages: Produce Markdown for GitHub Pages instead of plain text

    Returns:
        The report, without a trailing newline
    """
    final = replay_games(players, games)

    parts: List[str] = []
    if gh_pages:
        parts.append(YAML_HEADER)
    if title is not None:
        parts.append(format_title(title, gh_pages))

    parts.append(format_heading(LADDER_HEADING, gh_pages))
    parts.append(format_section(ladder_lines(final)))

    parts.append(format_heading(GAMES_HEADING, gh_pages))
    parts.append(format_section(game_lines(games, players.names())))

    return "\n".join(parts)
