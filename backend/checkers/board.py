from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, Optional

from .errors import OutOfBounds
from .move import Coordinate
from .pieces import Color, Piece


BoardStatePiece = tuple[int, int, str, bool]
BoardState = tuple[int, int, tuple[BoardStatePiece, ...]]
SquareVisitor = Callable[[Coordinate, Optional[Piece]], None]


class SquareColor(Enum):
    DARK = "dark"
    LIGHT = "light"

    @property
    def playable(self) -> bool:
        return self is SquareColor.DARK


class Board:
    """Rows x cols grid of squares, each empty or holding one piece.

    The grid is the only place a piece's location is recorded. Squares are
    addressed as ``(col, row)``; storage is ``board[row][col]``.
    """

    def __init__(self, cols: int = 8, rows: int = 8, starting_ranks: int = 3) -> None:
        self.cols = cols
        self.rows = rows
        self.starting_ranks = starting_ranks
        self.board: list[list[Optional[Piece]]] = [[None for _ in range(cols)] for _ in range(rows)]
        self._set_start_pieces()

    @classmethod
    def empty(cls, cols: int = 8, rows: int = 8) -> "Board":
        return cls(cols, rows, starting_ranks=0)

    def to_state(self) -> BoardState:
        pieces: list[BoardStatePiece] = []
        for (col, row), piece in self.squares():
            if piece is None:
                continue
            pieces.append((col, row, piece.color.value, piece.is_king))
        return (self.cols, self.rows, tuple(pieces))

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        cols, rows, pieces = state
        board = cls.empty(cols, rows)
        for col, row, color_value, is_king in pieces:
            board.setPiece(col, row, Piece(Color(color_value), is_king))
        return board

    def copy(self) -> "Board":
        clone = Board.empty(self.cols, self.rows)
        clone.starting_ranks = self.starting_ranks
        clone.board = [list(row) for row in self.board]
        return clone

    def reset(self) -> None:
        self.board = [[None for _ in range(self.cols)] for _ in range(self.rows)]
        self._set_start_pieces()

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def squareColor(self, col: int, row: int) -> SquareColor:
        self._require_in_bounds(col, row)
        return SquareColor.DARK if (col + row) % 2 == 1 else SquareColor.LIGHT

    def getPiece(self, col: int, row: int) -> Optional[Piece]:
        self._require_in_bounds(col, row)
        return self.board[row][col]

    def setPiece(self, col: int, row: int, piece: Optional[Piece]) -> None:
        self._require_in_bounds(col, row)
        self.board[row][col] = piece

    def squares(self) -> Iterator[tuple[Coordinate, Optional[Piece]]]:
        """Yield every square and its occupant in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (col, row), self.board[row][col]

    def forEachSquare(self, visitor: SquareVisitor) -> None:
        for square, piece in self.squares():
            visitor(square, piece)

    def pieces(self, color: Optional[Color] = None) -> Iterator[tuple[Coordinate, Piece]]:
        for square, piece in self.squares():
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            yield square, piece

    def count(self, color: Color) -> int:
        return sum(1 for _ in self.pieces(color))

    def _set_start_pieces(self) -> None:
        for row in range(self.rows):
            for col in range(self.cols):
                if (col + row) % 2 != 1:
                    continue
                if row < self.starting_ranks:
                    self.board[row][col] = Piece(Color.BLACK)
                elif row >= self.rows - self.starting_ranks:
                    self.board[row][col] = Piece(Color.WHITE)

    def _require_in_bounds(self, col: int, row: int) -> None:
        if not self.in_bounds(col, row):
            raise OutOfBounds(col, row, self.cols, self.rows)

    def __str__(self) -> str:
        lines = []
        for row in range(self.rows):
            cells = []
            for col in range(self.cols):
                piece = self.board[row][col]
                if piece is None:
                    cells.append("." if (col + row) % 2 == 1 else " ")
                    continue
                symbol = "w" if piece.color is Color.WHITE else "b"
                cells.append(symbol.upper() if piece.is_king else symbol)
            lines.append("".join(cells))
        return "\n".join(lines)
