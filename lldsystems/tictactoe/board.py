"""A square tic-tac-toe board."""

from __future__ import annotations

from lldsystems.tictactoe.symbols import Symbol

__all__ = ["Board"]


class Board:
    """A size-by-size grid of symbols, addressed by (x, y)."""

    def __init__(self, size: int = 3) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        self.size = size
        self._cells: list[list[Symbol]] = []
        self._move_count = 0
        self.reset()

    def __repr__(self) -> str:
        return f"Board(size={self.size})"

    def __str__(self) -> str:
        return self.render()

    @property
    def move_count(self) -> int:
        """How many symbols have been placed."""
        return self._move_count

    def get_cell(self, x: int, y: int) -> Symbol:
        """Return the symbol at (x, y); raise IndexError off the board."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError("Coordinates out of bounds")
        return self._cells[x][y]

    def is_full(self) -> bool:
        """True once every cell holds a symbol."""
        return self._move_count == self.size * self.size

    def place_symbol(self, x: int, y: int, symbol: Symbol) -> bool:
        """Put a symbol in an empty cell; return False if it is taken."""
        if self.get_cell(x, y) is not Symbol.EMPTY:
            return False
        self._cells[x][y] = symbol
        self._move_count += 1
        return True

    def render(self) -> str:
        """The board as text, one row per line."""
        return "\n".join(" ".join(str(cell) for cell in row) for row in self._cells)

    def reset(self) -> None:
        """Clear every cell."""
        self._cells = [[Symbol.EMPTY] * self.size for _ in range(self.size)]
        self._move_count = 0