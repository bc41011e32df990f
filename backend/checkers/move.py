from __future__ import annotations

from dataclasses import dataclass

from .pieces import Piece

Coordinate = tuple[int, int]
MoveSequence = tuple[Coordinate, ...]


@dataclass(frozen=True, slots=True)
class CapturedPiece:
    square: Coordinate
    piece: Piece


CaptureSequence = tuple[CapturedPiece, ...]


@dataclass(frozen=True, slots=True)
class Move:
    """A single ply for one piece.

    ``piece`` is the mover as it stood on ``start`` before the move. Squares are
    ``(col, row)`` pairs. ``captures`` keeps each taken piece with its own owner
    and rank so the move can be reverted exactly.
    """

    piece: Piece
    start: Coordinate
    steps: MoveSequence
    captures: CaptureSequence = ()
    promoted: bool = False

    @property
    def end(self) -> Coordinate:
        return self.steps[-1] if self.steps else self.start

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    @property
    def captured_squares(self) -> tuple[Coordinate, ...]:
        return tuple(captured.square for captured in self.captures)

    @property
    def final_piece(self) -> Piece:
        return self.piece.promote() if self.promoted else self.piece

    def as_path(self) -> tuple[Coordinate, ...]:
        return (self.start, *self.steps)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return connector.join(f"{col},{row}" for col, row in self.as_path())
