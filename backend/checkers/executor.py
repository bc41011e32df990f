from __future__ import annotations

from .board import Board
from .errors import InvalidMove
from .move import Move
from .movegen import legal_moves


def _check_applicable(board: Board, move: Move) -> None:
    if not move.steps:
        raise InvalidMove("Move must contain at least one destination step.")
    if board.getPiece(*move.start) != move.piece:
        raise InvalidMove(f"Move start {move.start} does not hold {move.piece!r}.")
    if move not in legal_moves(board, move.start):
        raise InvalidMove(f"{move} is not a legal move on this board.")


def _check_revertible(board: Board, move: Move) -> None:
    if board.getPiece(*move.end) != move.final_piece:
        raise InvalidMove(f"Destination {move.end} does not hold the moved piece.")
    if move.end != move.start and board.getPiece(*move.start) is not None:
        raise InvalidMove(f"Move start {move.start} is not empty.")
    for captured in move.captures:
        if board.getPiece(*captured.square) is not None:
            raise InvalidMove(f"Capture square {captured.square} is occupied.")


def apply(board: Board, move: Move) -> Move:
    """Remove the captured pieces, relocate the mover and crown it if needed.

    The returned move holds everything ``revert`` needs.
    """
    _check_applicable(board, move)

    for captured in move.captures:
        board.setPiece(*captured.square, None)
    board.setPiece(*move.start, None)
    board.setPiece(*move.end, move.final_piece)
    return move


def revert(board: Board, move: Move) -> None:
    """Exact inverse of ``apply``.

    The mover returns to its start square demoted if this move crowned it, and
    every captured piece is put back with its recorded owner and rank.
    """
    _check_revertible(board, move)

    piece = board.getPiece(*move.end)
    if move.promoted:
        piece = piece.demote()
    board.setPiece(*move.end, None)
    board.setPiece(*move.start, piece)
    for captured in move.captures:
        board.setPiece(*captured.square, captured.piece)
