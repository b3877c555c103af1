"""Board symbols and game outcomes for tic-tac-toe."""

from __future__ import annotations

from enum import Enum

__all__ = ["Symbol", "GameStatus"]


class Symbol(Enum):
    """What a board cell can hold."""

    X = "X"
    O = "O"
    EMPTY = "."

    def __str__(self) -> str:
        return self.value


class GameStatus(Enum):
    """Where a game stands."""

    WINNER_X = "Win by first player"
    WINNER_Y = "Win by second player"
    IN_PROGRESS = "In_Progress"
    DRAW = "Draw"

    def __str__(self) -> str:
        return self.value