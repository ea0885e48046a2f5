from __future__ import annotations

from enum import Enum
from itertools import count
from typing import Optional

from .move import Coordinate


DeltaList = tuple[Coordinate, ...]
_PIECE_ID_COUNTER = count()


class BoardSize(Enum):
    SMALL = ("S", 8)
    LARGE = ("L", 10)

    def __init__(self, symbol: str, dimension: int) -> None:
        self.symbol = symbol
        self.dimension = dimension

    @property
    def rows_to_fill(self) -> int:
        return 3 if self.dimension == 8 else 4

    @classmethod
    def fromSymbol(cls, symbol: str) -> Optional["BoardSize"]:
        for size in cls:
            if size.symbol == symbol:
                return size
        return None


class Team(Enum):
    FIRST = "W"
    SECOND = "R"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return "white" if self is Team.FIRST else "red"

    @property
    def opponent(self) -> "Team":
        return Team.SECOND if self is Team.FIRST else Team.FIRST

    @property
    def opponentSymbol(self) -> str:
        return self.opponent.symbol

    @property
    def forward(self) -> int:
        """Row step a man of this team takes toward the opposite edge."""
        return 1 if self is Team.FIRST else -1

    def promotionRow(self, dimension: int) -> int:
        return dimension - 1 if self is Team.FIRST else 0

    @classmethod
    def fromSymbol(cls, symbol: str) -> Optional["Team"]:
        for team in cls:
            if team.symbol == symbol:
                return team
        return None


class Rank(Enum):
    MAN = "M"
    KING = "K"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def fromSymbol(cls, symbol: str) -> Optional["Rank"]:
        for rank in cls:
            if rank.symbol == symbol:
                return rank
        return None


_ALL_DIAGONALS: DeltaList = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def legalSimpleDeltas(rank: Rank, team: Team) -> DeltaList:
    """(column, row) offsets of a one-step move for the given rank and team."""
    if rank is Rank.KING:
        return _ALL_DIAGONALS
    return ((-1, team.forward), (1, team.forward))


def legalCaptureDeltas(rank: Rank, team: Team) -> DeltaList:
    """Landing offsets of a jump; the jumped cell is half of each offset."""
    return tuple((2 * dc, 2 * dr) for dc, dr in legalSimpleDeltas(rank, team))


class Piece:
    def __init__(
        self,
        team: Team,
        column: int,
        row: int,
        rank: Rank = Rank.MAN,
    ) -> None:
        self.team = team
        self.column = column
        self.row = row
        self.rank = rank
        self.id = next(_PIECE_ID_COUNTER)

    @property
    def position(self) -> Coordinate:
        return (self.column, self.row)

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    @property
    def symbol(self) -> str:
        return f"{self.rank.symbol}{self.team.symbol}"

    def crown(self) -> bool:
        """Promote to king. Returns False when the piece already is one."""
        if self.is_king:
            return False
        self.rank = Rank.KING
        return True

    def canCrownOn(self, row: int, dimension: int) -> bool:
        return not self.is_king and row == self.team.promotionRow(dimension)

    def canCapture(self, other: "Piece") -> bool:
        return other.team is not self.team

    def simpleDeltas(self) -> DeltaList:
        return legalSimpleDeltas(self.rank, self.team)

    def captureDeltas(self) -> DeltaList:
        return legalCaptureDeltas(self.rank, self.team)

    def __repr__(self) -> str:
        return f"{self.rank.symbol}({self.team.name},{self.column},{self.row})"
