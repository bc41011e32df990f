from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class CoordinateModel(BaseModel):
    col: int = Field(..., ge=0)
    row: int = Field(..., ge=0)


class MoveRequest(BaseModel):
    start: CoordinateModel
    steps: list[CoordinateModel] = Field(
        ..., min_length=1, description="Ordered landing squares after the starting square."
    )


class RulesPayload(BaseModel):
    captureRule: Optional[Literal["optional", "piece", "board"]] = None
    startingPlayer: Optional[Literal["white", "black"]] = None
    quietMoveLimit: Optional[int] = Field(default=None, ge=1, le=1000)


class ResetRequest(BaseModel):
    rules: Optional[RulesPayload] = None
