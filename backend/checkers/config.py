from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .pieces import Color

ENV_CAPTURE_RULE = "CHECKERS_CAPTURE_RULE"
ENV_STARTING_PLAYER = "CHECKERS_STARTING_PLAYER"
ENV_QUIET_MOVE_LIMIT = "CHECKERS_QUIET_MOVE_LIMIT"


class CaptureRule(str, Enum):
    """How strictly available captures restrict the other moves."""

    OPTIONAL = "optional"
    PIECE = "piece"
    BOARD = "board"


@dataclass(frozen=True, slots=True)
class RulesConfig:
    cols: int = 8
    rows: int = 8
    starting_ranks: int = 3
    starting_player: Color = Color.WHITE
    capture_rule: CaptureRule = CaptureRule.OPTIONAL
    quiet_move_limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.cols < 2 or self.rows < 2:
            raise ValueError("Board must be at least 2x2.")
        if self.starting_ranks < 0 or 2 * self.starting_ranks > self.rows:
            raise ValueError("Starting ranks of both sides must fit on the board without overlapping.")
        if self.quiet_move_limit is not None and self.quiet_move_limit < 1:
            raise ValueError("Quiet move limit must be positive when set.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RulesConfig":
        env = os.environ if environ is None else environ
        kwargs = {}
        capture_rule = env.get(ENV_CAPTURE_RULE)
        if capture_rule:
            kwargs["capture_rule"] = parse_capture_rule(capture_rule)
        starting_player = env.get(ENV_STARTING_PLAYER)
        if starting_player:
            kwargs["starting_player"] = parse_color(starting_player)
        limit = env.get(ENV_QUIET_MOVE_LIMIT)
        if limit:
            try:
                kwargs["quiet_move_limit"] = int(limit)
            except ValueError as exc:
                raise ValueError(f"{ENV_QUIET_MOVE_LIMIT} must be an integer, got '{limit}'.") from exc
        return cls(**kwargs)


def parse_color(label: str) -> Color:
    try:
        return Color[label.upper()]
    except KeyError as exc:
        raise ValueError(f"Unsupported color '{label}'.") from exc


def parse_capture_rule(label: str) -> CaptureRule:
    try:
        return CaptureRule(label.lower())
    except ValueError as exc:
        raise ValueError(f"Unsupported capture rule '{label}'.") from exc
