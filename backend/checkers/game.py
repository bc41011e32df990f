from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import executor
from .board import Board
from .config import RulesConfig
from .errors import InvalidMove
from .events import GameEvents
from .move import Move
from .movegen import MoveMap, all_legal_moves, has_any_move, moves_under_rule
from .pieces import Color, Piece

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


@dataclass
class MoveRecord:
    move: Move
    quiet_plies_before: int


class Game:
    """Turn sequencing, history and end-of-game detection for one session.

    Not thread-safe: callers that share a game across threads must serialise
    access themselves.
    """

    def __init__(self, rules: Optional[RulesConfig] = None, events: Optional[GameEvents] = None):
        self.rules = rules or RulesConfig()
        self.events = events or GameEvents()
        self.board = Board(self.rules.cols, self.rules.rows, self.rules.starting_ranks)
        self.current_player = self.rules.starting_player
        self.status = GameStatus.AWAITING_MOVE
        self.winner: Optional[Color] = None
        self.drawn = False
        self.move_history: list[MoveRecord] = []
        self.quiet_plies = 0
        self.piece_counts: dict[Color, int] = {}
        self._recount()
        self.beginTurn()

    def reset(self, rules: Optional[RulesConfig] = None) -> None:
        if rules is not None:
            self.rules = rules
        board = Board(self.rules.cols, self.rules.rows, self.rules.starting_ranks)
        self.setPosition(board, self.rules.starting_player)
        logger.info("Game reset; %s to move.", self.current_player.value)
        self.events.emit_reset()

    def setPosition(self, board: Board, turn: Color) -> None:
        """Start play from an arbitrary position, discarding history."""
        self.board = board
        self.current_player = turn
        self.status = GameStatus.AWAITING_MOVE
        self.winner = None
        self.drawn = False
        self.move_history.clear()
        self.quiet_plies = 0
        self._recount()
        self.beginTurn()

    # accessors ----------------------------------------------------------

    @property
    def activePlayer(self) -> Color:
        return self.current_player

    @property
    def canUndo(self) -> bool:
        return bool(self.move_history)

    def getPiece(self, col: int, row: int) -> Optional[Piece]:
        return self.board.getPiece(col, row)

    def pieceCount(self, color: Color) -> int:
        return self.piece_counts[color]

    def isGameOver(self) -> Optional[Color]:
        return self.winner

    def isDraw(self) -> bool:
        return self.drawn

    def getWinner(self) -> Optional[Color]:
        return self.winner

    # moves --------------------------------------------------------------

    def getValidMoves(self, col: int, row: int) -> tuple[Move, ...]:
        if self.status is GameStatus.GAME_OVER:
            return ()
        moves = moves_under_rule(self.board, (col, row), self.rules.capture_rule)
        if moves and moves[0].piece.color != self.current_player:
            return ()
        return moves

    def getAllValidMoves(self) -> MoveMap:
        if self.status is GameStatus.GAME_OVER:
            return {}
        return all_legal_moves(self.board, self.current_player, self.rules.capture_rule)

    def beginTurn(self) -> bool:
        """Return True when the side to move can play, ending the game otherwise."""
        if self.status is GameStatus.GAME_OVER:
            return False
        if self.checkWinByAttrition() is not None:
            return False
        if not has_any_move(self.board, self.current_player):
            logger.info("%s has no legal moves.", self.current_player.value)
            self._end_game(self.current_player.opponent)
            return False
        logger.debug("%s to move.", self.current_player.value)
        return True

    def commitMove(self, move: Move) -> Move:
        if self.status is GameStatus.GAME_OVER:
            raise InvalidMove("The game is over.")
        if move.piece.color != self.current_player:
            logger.warning("Rejected %s: %s is not on turn.", move, move.piece.color.value)
            raise InvalidMove("It is not this piece's turn.")
        if move not in moves_under_rule(self.board, move.start, self.rules.capture_rule):
            logger.warning("Rejected %s: not a legal move in this position.", move)
            raise InvalidMove("Move is not legal in the current position.")

        executor.apply(self.board, move)
        self.move_history.append(MoveRecord(move=move, quiet_plies_before=self.quiet_plies))
        for captured in move.captures:
            self.piece_counts[captured.piece.color] -= 1
            self.events.emit_capture(move.piece.color, captured)
        logger.debug("%s played %s.", self.current_player.value, move)
        self.events.emit_move(move)

        self.current_player = self.current_player.opponent
        if move.is_capture or not move.piece.is_king:
            self.quiet_plies = 0
        else:
            self.quiet_plies += 1

        if self.checkWinByAttrition() is None:
            limit = self.rules.quiet_move_limit
            if limit is not None and self.quiet_plies >= limit:
                logger.info("Drawn after %d plies without progress.", self.quiet_plies)
                self._end_game(None)
            else:
                self.beginTurn()
        return move

    def undoMove(self) -> Optional[Move]:
        if not self.move_history:
            logger.debug("No moves to undo.")
            return None
        record = self.move_history.pop()
        move = record.move
        executor.revert(self.board, move)
        for captured in move.captures:
            self.piece_counts[captured.piece.color] += 1
            self.events.emit_capture_reverted(move.piece.color, captured)

        self.current_player = move.piece.color
        self.quiet_plies = record.quiet_plies_before
        self.status = GameStatus.AWAITING_MOVE
        self.winner = None
        self.drawn = False
        logger.debug("Undid %s; %s to move.", move, self.current_player.value)
        self.events.emit_undo(move)
        return move

    def checkWinByAttrition(self) -> Optional[Color]:
        if self.status is GameStatus.GAME_OVER:
            return self.winner
        if self.piece_counts[Color.BLACK] == 0:
            self._end_game(Color.WHITE)
        elif self.piece_counts[Color.WHITE] == 0:
            self._end_game(Color.BLACK)
        return self.winner

    # helpers ------------------------------------------------------------

    def _recount(self) -> None:
        self.piece_counts = {color: self.board.count(color) for color in Color}

    def _end_game(self, winner: Optional[Color]) -> None:
        self.status = GameStatus.GAME_OVER
        self.winner = winner
        self.drawn = winner is None
        if winner is None:
            logger.info("Game over: draw.")
        else:
            logger.info("Game over! Winner: %s", winner.value)
        self.events.emit_game_over(winner)
