from __future__ import annotations

from typing import Optional

from .errors import MalformedToken
from .move import Coordinate
from .pieces import BoardSize, Piece, Rank, Team


BoardStatePiece = tuple[int, int, str, str]
BoardState = tuple[int, tuple[BoardStatePiece, ...]]

TOKEN_SEPARATOR = ","
TOKEN_WIDTH = 4
_DIGITS = "0123456789"


class Board:
    def __init__(self, size: BoardSize = BoardSize.SMALL) -> None:
        self.size = size
        self.dimension = size.dimension
        # indexed [column][row]
        self.cells: list[list[Optional[Piece]]] = [
            [None for _ in range(self.dimension)] for _ in range(self.dimension)
        ]

    @classmethod
    def standard(cls, size: BoardSize = BoardSize.SMALL) -> "Board":
        board = cls(size)
        rows_to_fill = size.rows_to_fill

        for row in range(board.dimension):
            for column in range(board.dimension):
                if (column + row) % 2 != 0:
                    continue
                if row < rows_to_fill:
                    board.place(Piece(Team.FIRST, column, row), column, row)
                elif row >= board.dimension - rows_to_fill:
                    board.place(Piece(Team.SECOND, column, row), column, row)
        return board

    @classmethod
    def newGameSetup(cls, size: BoardSize = BoardSize.SMALL) -> str:
        return cls.standard(size).encode()

    # access -------------------------------------------------------------

    def _is_within_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self.dimension and 0 <= row < self.dimension

    def pieceAt(self, column: int, row: int) -> Optional[Piece]:
        if self._is_within_bounds(column, row):
            return self.cells[column][row]
        return None

    def isOccupied(self, column: int, row: int) -> bool:
        return self.pieceAt(column, row) is not None

    def isFree(self, column: int, row: int) -> bool:
        """In range and empty, i.e. a square a piece may land on."""
        return self._is_within_bounds(column, row) and self.cells[column][row] is None

    def pieces(self) -> list[Piece]:
        found: list[Piece] = []
        for row in range(self.dimension):
            for column in range(self.dimension):
                piece = self.cells[column][row]
                if piece is not None:
                    found.append(piece)
        return found

    def piecesOf(self, team: Team) -> list[Piece]:
        return [piece for piece in self.pieces() if piece.team is team]

    # mutation -----------------------------------------------------------

    def place(self, piece: Piece, column: int, row: int) -> None:
        if not self._is_within_bounds(column, row):
            raise ValueError(f"Cell ({column}, {row}) is outside a {self.dimension}x{self.dimension} board.")
        occupant = self.cells[column][row]
        if occupant is not None and occupant is not piece:
            raise ValueError(f"Cell ({column}, {row}) already holds {occupant!r}.")
        if self.pieceAt(piece.column, piece.row) is piece:
            self.cells[piece.column][piece.row] = None
        piece.column = column
        piece.row = row
        self.cells[column][row] = piece

    def remove(self, column: int, row: int) -> Optional[Piece]:
        piece = self.pieceAt(column, row)
        if piece is not None:
            self.cells[column][row] = None
        return piece

    def move(self, piece: Piece, to: Coordinate) -> None:
        column, row = to
        if not self._is_within_bounds(column, row):
            raise ValueError("Move destination must stay within the board.")
        if self.pieceAt(piece.column, piece.row) is not piece:
            raise ValueError("Piece must occupy its recorded position before moving.")
        self.cells[piece.column][piece.row] = None
        piece.column = column
        piece.row = row
        self.cells[column][row] = piece

    # serialization ------------------------------------------------------

    def encode(self) -> str:
        return TOKEN_SEPARATOR.join(
            f"{piece.symbol}{piece.column}{piece.row}" for piece in self.pieces()
        )

    @classmethod
    def decode(cls, token: str, size: BoardSize = BoardSize.SMALL) -> "Board":
        board = cls(size)
        if token == "":
            return board

        for item in token.split(TOKEN_SEPARATOR):
            if len(item) != TOKEN_WIDTH:
                raise MalformedToken(f"Piece token {item!r} must be exactly {TOKEN_WIDTH} characters.")
            rank = Rank.fromSymbol(item[0])
            team = Team.fromSymbol(item[1])
            if rank is None or team is None:
                raise MalformedToken(f"Piece token {item!r} has an unknown rank or team symbol.")
            if item[2] not in _DIGITS or item[3] not in _DIGITS:
                raise MalformedToken(f"Piece token {item!r} must end with two coordinate digits.")
            column, row = int(item[2]), int(item[3])
            if not board._is_within_bounds(column, row):
                raise MalformedToken(f"Piece token {item!r} is outside a {board.dimension}x{board.dimension} board.")
            if board.isOccupied(column, row):
                raise MalformedToken(f"Piece token {item!r} repeats an occupied cell.")
            board.place(Piece(team, column, row, rank), column, row)
        return board

    def to_state(self) -> BoardState:
        return (
            self.dimension,
            tuple((p.column, p.row, p.team.symbol, p.rank.symbol) for p in self.pieces()),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.to_state() == other.to_state()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board({self.size.name}, {self.encode()!r})"
