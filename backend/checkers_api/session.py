from __future__ import annotations

import dataclasses
import logging
from threading import Lock
from typing import Any, Iterable, Optional

from checkers.config import RulesConfig, parse_capture_rule, parse_color
from checkers.game import Game
from checkers.move import Move
from checkers.scoreboard import Scoreboard

from .schemas import MoveRequest, ResetRequest, RulesPayload
from .serializers import serialize_game, serialize_move

logger = logging.getLogger(__name__)


def _merge_rules(rules: RulesConfig, payload: Optional[RulesPayload]) -> RulesConfig:
    if payload is None:
        return rules
    overrides = payload.model_dump(exclude_unset=True)
    changes: dict[str, Any] = {}
    if overrides.get("captureRule") is not None:
        changes["capture_rule"] = parse_capture_rule(overrides["captureRule"])
    if overrides.get("startingPlayer") is not None:
        changes["starting_player"] = parse_color(overrides["startingPlayer"])
    if "quietMoveLimit" in overrides:
        changes["quiet_move_limit"] = overrides["quietMoveLimit"]
    return dataclasses.replace(rules, **changes)


class GameSession:
    """Thread-safe orchestrator around a single Game instance."""

    def __init__(self, rules: Optional[RulesConfig] = None) -> None:
        self.lock = Lock()
        self.game = Game(rules)
        self.scoreboard = Scoreboard()
        self.scoreboard.attach(self.game.events)

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def reset(self, payload: Optional[ResetRequest] = None) -> dict[str, Any]:
        with self.lock:
            rules = _merge_rules(self.game.rules, payload.rules if payload else None)
            self.game.reset(rules)
            return self._serialize_locked()

    def set_rules(self, payload: RulesPayload) -> dict[str, Any]:
        with self.lock:
            self.game.reset(_merge_rules(self.game.rules, payload))
            return self._serialize_locked()

    def get_valid_moves(self, col: int, row: int) -> dict[str, Any]:
        with self.lock:
            moves = self.game.getValidMoves(col, row)
            return {
                "piece": {"col": col, "row": row},
                "moves": [serialize_move(move) for move in moves],
            }

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            start = (payload.start.col, payload.start.row)
            piece = self.game.getPiece(*start)
            if piece is None:
                raise ValueError(f"No piece at col {start[0]}, row {start[1]}.")
            if piece.color != self.game.activePlayer:
                raise ValueError("Selected piece cannot move now.")
            steps = tuple((node.col, node.row) for node in payload.steps)
            move = self._locate_matching_move(start, steps)
            if move is None:
                logger.warning("No legal move from %s along %s.", start, steps)
                raise ValueError("Requested move path is invalid for this piece.")
            self.game.commitMove(move)
            return self._serialize_locked()

    def undo_move(self) -> dict[str, Any]:
        with self.lock:
            self.game.undoMove()
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game, self.scoreboard)

    def _locate_matching_move(
        self, start: tuple[int, int], steps: Iterable[tuple[int, int]]
    ) -> Optional[Move]:
        candidate = tuple(steps)
        for move in self.game.getValidMoves(*start):
            if move.steps == candidate:
                return move
        return None
