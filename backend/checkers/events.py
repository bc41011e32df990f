"""Callbacks the presentation layer subscribes to.

The engine only invokes these; scores, banners and sounds belong to whoever
registers the handlers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .move import CapturedPiece, Move
from .pieces import Color

CaptureCallback = Callable[[Color, CapturedPiece], None]  # capturer, captured
MoveCallback = Callable[[Move], None]
GameOverCallback = Callable[[Optional[Color]], None]  # winner, None on a draw
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_capture_reverted: list[CaptureCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)

    def emit_capture(self, capturer: Color, captured: CapturedPiece) -> None:
        for cb in self.on_capture:
            cb(capturer, captured)

    def emit_capture_reverted(self, capturer: Color, captured: CapturedPiece) -> None:
        for cb in self.on_capture_reverted:
            cb(capturer, captured)

    def emit_move(self, move: Move) -> None:
        for cb in self.on_move:
            cb(move)

    def emit_undo(self, move: Move) -> None:
        for cb in self.on_undo:
            cb(move)

    def emit_game_over(self, winner: Optional[Color]) -> None:
        for cb in self.on_game_over:
            cb(winner)

    def emit_reset(self) -> None:
        for cb in self.on_reset:
            cb()
