from __future__ import annotations

from collections import Counter
from typing import Any

from checkers.config import RulesConfig
from checkers.game import Game
from checkers.move import CapturedPiece, Move
from checkers.pieces import Color
from checkers.scoreboard import Scoreboard


def _coord_tuple_to_dict(coord: tuple[int, int]) -> dict[str, int]:
    col, row = coord
    return {"col": col, "row": row}


def serialize_capture(captured: CapturedPiece) -> dict[str, Any]:
    return {
        **_coord_tuple_to_dict(captured.square),
        "color": captured.piece.color.value,
        "isKing": captured.piece.is_king,
    }


def serialize_move(move: Move) -> dict[str, Any]:
    return {
        "start": _coord_tuple_to_dict(move.start),
        "steps": [_coord_tuple_to_dict(step) for step in move.steps],
        "captures": [serialize_capture(captured) for captured in move.captures],
        "isCapture": move.is_capture,
        "promoted": move.promoted,
    }


def serialize_rules(rules: RulesConfig) -> dict[str, Any]:
    return {
        "cols": rules.cols,
        "rows": rules.rows,
        "captureRule": rules.capture_rule.value,
        "startingPlayer": rules.starting_player.value,
        "quietMoveLimit": rules.quiet_move_limit,
    }


def serialize_game(game: Game, scoreboard: Scoreboard) -> dict[str, Any]:
    pieces = [
        {"col": col, "row": row, "color": piece.color.value, "isKing": piece.is_king}
        for (col, row), piece in game.board.pieces()
    ]
    king_counts = Counter(piece["color"] for piece in pieces if piece["isKing"])

    moves_map = game.getAllValidMoves()
    capture_available = any(move.is_capture for options in moves_map.values() for move in options)

    last_record = game.move_history[-1] if game.move_history else None
    last_move = serialize_move(last_record.move) if last_record else None

    return {
        "cols": game.board.cols,
        "rows": game.board.rows,
        "turn": game.activePlayer.value,
        "status": game.status.value,
        "winner": game.winner.value if game.winner else None,
        "draw": game.isDraw(),
        "pieces": pieces,
        "pieceCounts": {
            color.value: {
                "total": game.pieceCount(color),
                "kings": king_counts.get(color.value, 0),
            }
            for color in (Color.WHITE, Color.BLACK)
        },
        "captureAvailable": capture_available,
        "movablePieces": [_coord_tuple_to_dict(square) for square in moves_map],
        "moveCount": len(game.move_history),
        "canUndo": game.canUndo,
        "lastMove": last_move,
        "scores": scoreboard.to_dict(),
        "rules": serialize_rules(game.rules),
    }
