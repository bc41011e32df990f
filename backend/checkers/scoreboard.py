from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .events import GameEvents
from .move import CapturedPiece
from .pieces import Color

POINTS_PER_CAPTURE = 5


@dataclass
class Score:
    points: int = 0
    captures: int = 0


@dataclass
class Scoreboard:
    """Per-player points and capture tally driven by game events."""

    points_per_capture: int = POINTS_PER_CAPTURE
    scores: dict[Color, Score] = field(default_factory=lambda: {color: Score() for color in Color})

    def attach(self, events: GameEvents) -> None:
        events.on_capture.append(self.award_capture)
        events.on_capture_reverted.append(self.revoke_capture)
        events.on_reset.append(self.reset)

    def award_capture(self, capturer: Color, captured: CapturedPiece) -> None:
        score = self.scores[capturer]
        score.points += self.points_per_capture
        score.captures += 1

    def revoke_capture(self, capturer: Color, captured: CapturedPiece) -> None:
        score = self.scores[capturer]
        score.points -= self.points_per_capture
        score.captures -= 1

    def reset(self) -> None:
        for score in self.scores.values():
            score.points = 0
            score.captures = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            color.value: {"points": score.points, "captures": score.captures}
            for color, score in self.scores.items()
        }
