"""Legal move generation.

Capture chains are expanded with an explicit stack of partial chains rather
than recursion. Every maximal chain is emitted as its own move; there is no
longest-chain filtering.
"""

from __future__ import annotations

from typing import Iterator

from .board import Board
from .config import CaptureRule
from .errors import InvalidPieceReference
from .move import CapturedPiece, CaptureSequence, Coordinate, Move, MoveSequence
from .pieces import Color, Piece


MoveList = list[Move]
MoveMap = dict[Coordinate, tuple[Move, ...]]
Direction = tuple[int, int]
_ChainState = tuple[Coordinate, MoveSequence, CaptureSequence]


def _directions(piece: Piece, backward: bool) -> tuple[Direction, ...]:
    forward = piece.color.forward
    ahead = ((1, forward), (-1, forward))
    if piece.is_king or backward:
        return ahead + ((1, -forward), (-1, -forward))
    return ahead


def _require_piece(board: Board, square: Coordinate) -> Piece:
    col, row = square
    piece = board.getPiece(col, row)
    if piece is None:
        raise InvalidPieceReference(f"No piece at col {col}, row {row}.")
    return piece


def _crowns(board: Board, piece: Piece, square: Coordinate) -> bool:
    return not piece.is_king and square[1] == piece.promotion_row(board.rows)


def simple_moves(board: Board, square: Coordinate) -> MoveList:
    piece = _require_piece(board, square)
    col, row = square
    moves: MoveList = []
    for dc, dr in _directions(piece, backward=False):
        target = (col + dc, row + dr)
        if not board.in_bounds(*target) or board.getPiece(*target) is not None:
            continue
        moves.append(Move(piece=piece, start=square, steps=(target,), promoted=_crowns(board, piece, target)))
    return moves


def capture_moves(board: Board, square: Coordinate) -> MoveList:
    """Return one move per maximal capture chain starting at ``square``.

    A normal piece jumps forward on its first capture but may continue
    backward once the chain has started. A normal piece that lands on its
    promotion row is crowned and the chain ends there.
    """
    piece = _require_piece(board, square)
    moves: MoveList = []
    stack: list[_ChainState] = [(square, (), ())]

    while stack:
        (col, row), path, captured = stack.pop()
        continuations: list[_ChainState] = []

        if not (captured and _crowns(board, piece, (col, row))):
            taken = {entry.square for entry in captured}
            for dc, dr in _directions(piece, backward=bool(captured)):
                over = (col + dc, row + dr)
                landing = (col + 2 * dc, row + 2 * dr)
                if not board.in_bounds(*landing):
                    continue
                target = board.getPiece(*over)
                if target is None or target.color == piece.color or over in taken:
                    continue
                # the mover's own origin square is vacant for the rest of the chain
                if landing != square and board.getPiece(*landing) is not None:
                    continue
                continuations.append(
                    (landing, path + (landing,), captured + (CapturedPiece(over, target),))
                )

        if continuations:
            stack.extend(reversed(continuations))
        elif captured:
            end = path[-1]
            moves.append(
                Move(
                    piece=piece,
                    start=square,
                    steps=path,
                    captures=captured,
                    promoted=_crowns(board, piece, end),
                )
            )

    return moves


def legal_moves(board: Board, square: Coordinate) -> tuple[Move, ...]:
    """All moves for the piece on ``square``, simple steps first, then captures."""
    return tuple(simple_moves(board, square) + capture_moves(board, square))


def side_can_capture(board: Board, color: Color) -> bool:
    return any(capture_moves(board, square) for square, _ in board.pieces(color))


def moves_under_rule(board: Board, square: Coordinate, capture_rule: CaptureRule) -> tuple[Move, ...]:
    moves = legal_moves(board, square)
    if capture_rule is CaptureRule.OPTIONAL:
        return moves
    captures = tuple(move for move in moves if move.is_capture)
    if captures:
        return captures
    if capture_rule is CaptureRule.BOARD and side_can_capture(board, _require_piece(board, square).color):
        return ()
    return moves


def _iter_piece_moves(board: Board, color: Color) -> Iterator[tuple[Coordinate, tuple[Move, ...]]]:
    for square, _ in board.pieces(color):
        moves = legal_moves(board, square)
        if moves:
            yield square, moves


def all_legal_moves(board: Board, color: Color, capture_rule: CaptureRule = CaptureRule.OPTIONAL) -> MoveMap:
    """Map each movable piece of ``color`` to its moves, in row-major order."""
    move_map: MoveMap = {}
    for square, moves in _iter_piece_moves(board, color):
        if capture_rule is not CaptureRule.OPTIONAL:
            captures = tuple(move for move in moves if move.is_capture)
            moves = captures or moves
        move_map[square] = moves

    if capture_rule is CaptureRule.BOARD:
        capture_map = {
            square: moves
            for square, moves in move_map.items()
            if any(move.is_capture for move in moves)
        }
        if capture_map:
            return capture_map
    return move_map


def has_any_move(board: Board, color: Color) -> bool:
    """Stop at the first piece of ``color`` with at least one legal move.

    Capture rules only narrow a non-empty move set, so they never change the
    answer.
    """
    for _ in _iter_piece_moves(board, color):
        return True
    return False
