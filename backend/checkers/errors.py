from __future__ import annotations


class CheckersError(ValueError):
    """Base class for caller contract violations raised by the engine."""


class OutOfBounds(CheckersError, IndexError):
    def __init__(self, col: int, row: int, cols: int, rows: int) -> None:
        super().__init__(f"Square ({col}, {row}) is outside the {cols}x{rows} board.")
        self.col = col
        self.row = row


class InvalidPieceReference(CheckersError):
    pass


class InvalidMove(CheckersError):
    pass
