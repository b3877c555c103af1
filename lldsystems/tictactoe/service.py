"""A registry of running tic-tac-toe games."""

from __future__ import annotations

import random
import string
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

from lldsystems.tictactoe.game import Game, Player
from lldsystems.tictactoe.symbols import Symbol

__all__ = ["TicTacToeService", "GameNotFoundError", "get_instance"]

_ID_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
_ID_PREFIX = "GAME"
_ID_LENGTH = 8


class GameNotFoundError(KeyError):
    """No game is registered under the given id."""


class TicTacToeService:
    """Creates games and routes moves to them by id."""

    def __init__(self) -> None:
        self._games: dict[str, Game] = {}

    @property
    def games(self) -> Mapping[str, Game]:
        """Read-only view of registered games by id."""
        return MappingProxyType(self._games)

    def create_new_game(self, player1_name: str, player2_name: str, size: int = 3) -> Game:
        """Start a game; the first player plays X, the second O."""
        game_id = self._new_game_id()
        game = Game(
            game_id,
            Player(player1_name, Symbol.X),
            Player(player2_name, Symbol.O),
            size,
        )
        self._games[game_id] = game
        return game

    def make_move(self, game_id: str, player: Player, x: int, y: int) -> None:
        """Play a move in the given game."""
        self.get_game(game_id).make_move(player, x, y)

    def print_board(self, game_id: str) -> None:
        """Print the given game's board."""
        print(self.get_game(game_id).board.render())

    def get_game(self, game_id: str) -> Game:
        """Return the game with this id."""
        try:
            return self._games[game_id]
        except KeyError:
            raise GameNotFoundError(f"Game with ID {game_id} does not exist.") from None

    def _new_game_id(self) -> str:
        while True:
            candidate = _ID_PREFIX + "".join(random.choices(_ID_ALPHABET, k=_ID_LENGTH))
            if candidate not in self._games:
                return candidate


@lru_cache(maxsize=None)
def get_instance() -> TicTacToeService:
    """Return the process-wide shared service."""
    return TicTacToeService()