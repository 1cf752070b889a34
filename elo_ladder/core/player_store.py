"""
Immutable player records and the ordered store they live in.
"""

import dataclasses
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import DuplicatePlayerError, UnknownPlayerError


@dataclass(frozen=True)
class Player:
    """A ladder competitor."""

    id: str
    name: str
    rating: float
    game_count: int = 0

    def after_game(self, rating: float) -> "Player":
        """Return a copy with the new rating and one more game played."""
        return dataclasses.replace(self, rating=rating, game_count=self.game_count + 1)


class PlayerStore:
    """
    An ordered collection of players keyed by id.

    The order is used to break ties when ranking. Updating a player through
    :meth:`upsert` moves them to the front, so among equal ratings the most
    recently updated player comes first. Stores are never modified in place;
    every update returns a new store.
    """

    __slots__ = ("_order", "_players")

    def __init__(self, order: Tuple[str, ...] = (), players: Optional[Dict[str, Player]] = None):
        self._order = order
        self._players = dict(players or {})

    @classmethod
    def from_players(cls, players: Iterable[Player]) -> "PlayerStore":
        """
        Build a store that keeps the given order.

        Args:
            players: Players in the order they should appear in the store

        Returns:
            A new PlayerStore

        Raises:
            DuplicatePlayerError: If two players share an id
        """
        order: List[str] = []
        index: Dict[str, Player] = {}
        for player in players:
            if player.id in index:
                raise DuplicatePlayerError(player.id)
            order.append(player.id)
            index[player.id] = player
        return cls(tuple(order), index)

    def lookup(self, player_id: str) -> Player:
        """
        Get the player stored under an id.

        Raises:
            UnknownPlayerError: If no player has that id
        """
        try:
            return self._players[player_id]
        except KeyError:
            raise UnknownPlayerError(player_id) from None

    def upsert(self, player_id: str, player: Player) -> "PlayerStore":
        """
        Store a player under an id and promote it to the front.

        Any existing entry for the id is removed first; the remaining
        entries keep their relative order.

        Args:
            player_id: Key to store the player under
            player: The new player record

        Returns:
            A new PlayerStore with the player at the front
        """
        order = (player_id,) + tuple(pid for pid in self._order if pid != player_id)
        players = dict(self._players)
        players[player_id] = player
        return PlayerStore(order, players)

    def ids(self) -> Tuple[str, ...]:
        return self._order

    def players(self) -> List[Player]:
        return [self._players[pid] for pid in self._order]

    def names(self) -> Dict[str, str]:
        """Map each id to the player's display name."""
        return {pid: self._players[pid].name for pid in self._order}

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players())

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayerStore):
            return NotImplemented
        return self._order == other._order and self._players == other._players

    def __repr__(self) -> str:
        return f"PlayerStore({self.players()!r})"
