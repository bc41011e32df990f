from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row delta of a normal piece's single forward step."""
        return -1 if self is Color.WHITE else 1


@dataclass(frozen=True, slots=True)
class Piece:
    color: Color
    is_king: bool = False

    def promote(self) -> "Piece":
        return replace(self, is_king=True)

    def demote(self) -> "Piece":
        return replace(self, is_king=False)

    def promotion_row(self, rows: int) -> int:
        return 0 if self.color is Color.WHITE else rows - 1

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.color.name})"
