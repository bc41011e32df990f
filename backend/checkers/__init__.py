"""Core checkers engine package."""

from .board import Board, SquareColor
from .config import CaptureRule, RulesConfig
from .errors import CheckersError, InvalidMove, InvalidPieceReference, OutOfBounds
from .events import GameEvents
from .game import Game, GameStatus, MoveRecord
from .move import CapturedPiece, Coordinate, Move
from .movegen import all_legal_moves, has_any_move, legal_moves
from .pieces import Color, Piece
from .scoreboard import Scoreboard

__all__ = [
	"Board",
	"SquareColor",
	"CaptureRule",
	"RulesConfig",
	"CheckersError",
	"InvalidMove",
	"InvalidPieceReference",
	"OutOfBounds",
	"GameEvents",
	"Game",
	"GameStatus",
	"MoveRecord",
	"Move",
	"CapturedPiece",
	"Coordinate",
	"Color",
	"Piece",
	"Scoreboard",
	"legal_moves",
	"all_legal_moves",
	"has_any_move",
]
