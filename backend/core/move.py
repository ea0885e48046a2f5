from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

Coordinate = tuple[int, int]


class Outcome(str, Enum):
    ILLEGAL = "illegal"
    MOVED = "moved"
    CAPTURED_MUST_CONTINUE = "captured_must_continue"
    CAPTURED_TURN_ENDS = "captured_turn_ends"
    NO_PIECE_AT_ORIGIN = "no_piece_at_origin"
    NOT_ACTIVE_TEAM = "not_active_team"

    @property
    def committed(self) -> bool:
        return self in (Outcome.MOVED, Outcome.CAPTURED_MUST_CONTINUE, Outcome.CAPTURED_TURN_ENDS)

    @property
    def ends_turn(self) -> bool:
        return self in (Outcome.MOVED, Outcome.CAPTURED_TURN_ENDS)


@dataclass(frozen=True, slots=True)
class MoveResult:
    outcome: Outcome
    start: Coordinate
    end: Coordinate
    captured: Optional[Coordinate] = None
    crowned: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @classmethod
    def rejected(cls, outcome: Outcome, start: Coordinate, end: Coordinate) -> "MoveResult":
        return cls(outcome=outcome, start=start, end=end)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return f"{self.start[0]},{self.start[1]}{connector}{self.end[0]},{self.end[1]} ({self.outcome.value})"
