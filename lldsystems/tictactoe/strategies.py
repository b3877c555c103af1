"""Rules that decide whether a move completed a line."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lldsystems.tictactoe.board import Board
from lldsystems.tictactoe.symbols import Symbol

__all__ = [
    "WinningStrategy",
    "HorizontalStrategy",
    "VerticalStrategy",
    "DiagonalStrategy",
]


def _on_board(board: Board, x: int, y: int) -> bool:
    return 0 <= x < board.size and 0 <= y < board.size


class WinningStrategy(ABC):
    """Checks whether the move at (x, y) won the game for a symbol."""

    @abstractmethod
    def check(self, board: Board, symbol: Symbol, x: int, y: int) -> bool:
        """True if the line through (x, y) is all ``symbol``."""


class HorizontalStrategy(WinningStrategy):
    """Every cell sharing the move's y coordinate holds the symbol."""

    def check(self, board: Board, symbol: Symbol, x: int, y: int) -> bool:
        if not _on_board(board, x, y):
            return False
        return all(board.get_cell(i, y) is symbol for i in range(board.size))


class VerticalStrategy(WinningStrategy):
    """Every cell sharing the move's x coordinate holds the symbol."""

    def check(self, board: Board, symbol: Symbol, x: int, y: int) -> bool:
        if not _on_board(board, x, y):
            return False
        return all(board.get_cell(x, j) is symbol for j in range(board.size))


class DiagonalStrategy(WinningStrategy):
    """A diagonal through the move holds the symbol in every cell."""

    def check(self, board: Board, symbol: Symbol, x: int, y: int) -> bool:
        if not _on_board(board, x, y):
            return False
        size = board.size
        on_main = x == y
        on_anti = x == size - y - 1
        if on_main and all(board.get_cell(i, i) is symbol for i in range(size)):
            return True
        if on_anti and all(
            board.get_cell(i, size - i - 1) is symbol for i in range(size)
        ):
            return True
        return False