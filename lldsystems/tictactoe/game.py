"""Players and a single tic-tac-toe game."""

from __future__ import annotations

from dataclasses import dataclass

from lldsystems.tictactoe.board import Board
from lldsystems.tictactoe.states import GameState, InProgressState
from lldsystems.tictactoe.strategies import (
    DiagonalStrategy,
    HorizontalStrategy,
    VerticalStrategy,
    WinningStrategy,
)
from lldsystems.tictactoe.symbols import GameStatus, Symbol

__all__ = ["Player", "Game"]


@dataclass(frozen=True, eq=False)
class Player:
    """A named player who plays one symbol."""

    name: str
    symbol: Symbol


class Game:
    """Two players taking turns on one board."""

    def __init__(self, game_id: str, player1: Player, player2: Player, size: int = 3) -> None:
        self.id = game_id
        self.player1 = player1
        self.player2 = player2
        self.board = Board(size)
        self.strategies: list[WinningStrategy] = [
            HorizontalStrategy(),
            VerticalStrategy(),
            DiagonalStrategy(),
        ]
        self.status = GameStatus.IN_PROGRESS
        self.current_player = player1
        self.winner: Player | None = None
        self.state: GameState = InProgressState()

    def __repr__(self) -> str:
        return f"Game(id={self.id!r}, status={self.status.name})"

    def swap_player(self) -> None:
        """Hand the turn to the other player."""
        self.current_player = (
            self.player2 if self.current_player is self.player1 else self.player1
        )

    def make_move(self, player: Player, x: int, y: int) -> None:
        """Play the player's symbol at (x, y)."""
        self.state.handle_move(self, x, y, player.symbol)

    def check_winner(self, player: Player, x: int, y: int) -> bool:
        """True if the player's move at (x, y) completed a line."""
        return any(
            strategy.check(self.board, player.symbol, x, y)
            for strategy in self.strategies
        )

    def reset(self) -> None:
        """Start over on an empty board with the first player to move."""
        self.board.reset()
        self.status = GameStatus.IN_PROGRESS
        self.current_player = self.player1
        self.winner = None
        self.state = InProgressState()