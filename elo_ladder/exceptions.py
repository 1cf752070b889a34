"""
Exceptions raised while building and replaying a ladder.
"""

from typing import Optional


class LadderError(Exception):
    """Base class for all ladder errors."""


class UnknownPlayerError(LadderError, KeyError):
    """A game references a player id that is not in the store."""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(player_id)

    def __str__(self) -> str:
        return f"Unknown player id: {self.player_id!r}"


class InvalidGameError(LadderError, ValueError):
    """A game pairs a player with themselves."""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"Player {player_id!r} cannot play against themselves")


class DuplicatePlayerError(LadderError, ValueError):
    """The same player id appears more than once in a roster."""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"Duplicate player id: {player_id!r}")


class MalformedRecordError(LadderError, ValueError):
    """A roster or game log line could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
