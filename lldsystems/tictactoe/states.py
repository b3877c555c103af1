"""Game states: what happens when a move is attempted."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lldsystems.tictactoe.symbols import GameStatus, Symbol

if TYPE_CHECKING:
    from lldsystems.tictactoe.game import Game

__all__ = ["MoveError", "GameState", "InProgressState", "WinState", "DrawState"]


class MoveError(RuntimeError):
    """A move was refused."""


class GameState(ABC):
    """Handles moves according to the game's current phase."""

    @abstractmethod
    def handle_move(self, game: Game, x: int, y: int, symbol: Symbol) -> None:
        """Apply or refuse a move of ``symbol`` at (x, y)."""


class InProgressState(GameState):
    """Moves are accepted in turn until someone wins or the board fills."""

    def handle_move(self, game: Game, x: int, y: int, symbol: Symbol) -> None:
        if game.status is not GameStatus.IN_PROGRESS:
            raise MoveError("Game is not in progress. Cannot make a move.")
        player = game.current_player
        if player.symbol is not symbol:
            raise MoveError("It's not your turn. Wait for your turn to make a move.")
        if not game.board.place_symbol(x, y, symbol):
            raise MoveError(f"Cell ({x}, {y}) is already taken.")

        if game.check_winner(player, x, y):
            game.status = (
                GameStatus.WINNER_X if symbol is Symbol.X else GameStatus.WINNER_Y
            )
            game.winner = player
            game.state = WinState()
        elif game.board.is_full():
            game.status = GameStatus.DRAW
            game.state = DrawState()
        else:
            game.swap_player()


class WinState(GameState):
    """The game has been won; no more moves."""

    def handle_move(self, game: Game, x: int, y: int, symbol: Symbol) -> None:
        raise MoveError("Game is already in a win state. No further moves can be made.")


class DrawState(GameState):
    """The game ended in a draw; no more moves."""

    def handle_move(self, game: Game, x: int, y: int, symbol: Symbol) -> None:
        raise MoveError(
            "Game is already in a draw state. No further moves can be made."
        )