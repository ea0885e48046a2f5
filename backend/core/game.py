from __future__ import annotations

import logging
from typing import Optional

from .board import Board
from .engine import TurnEngine
from .errors import InvalidToken, MalformedToken
from .move import Coordinate, MoveResult, Outcome
from .pieces import BoardSize, Piece, Team

logger = logging.getLogger(__name__)

GameToken = tuple[str, str, str]


class GameSession:
    """One game in progress: the board, the team on move and any open capture chain."""

    def __init__(self, size: BoardSize = BoardSize.SMALL, starting_team: Team = Team.FIRST) -> None:
        self.size = size
        self.board = Board.standard(size)
        self.active_team = starting_team
        self.last_mover: Optional[Team] = None
        self.engine = TurnEngine(self.board)

    @property
    def chainPiece(self) -> Optional[Piece]:
        return self.engine.chain_piece

    def newGame(self, size: Optional[BoardSize] = None, starting_team: Team = Team.FIRST) -> None:
        if size is not None:
            self.size = size
        self._install(Board.standard(self.size), starting_team)
        logger.info("New %s game, %s to move.", self.size.name.lower(), starting_team.label)

    def loadFromToken(self, board_token: str, size_symbol: str, team_symbol: str) -> None:
        size = BoardSize.fromSymbol(size_symbol)
        if size is None:
            raise InvalidToken(f"Unknown board size symbol {size_symbol!r}.")
        team = Team.fromSymbol(team_symbol)
        if team is None:
            raise InvalidToken(f"Unknown team symbol {team_symbol!r}.")
        try:
            board = Board.decode(board_token, size)
        except MalformedToken as exc:
            raise InvalidToken(str(exc)) from exc

        self.size = size
        self._install(board, team)
        logger.info("Loaded %s game with %d pieces, %s to move.", size.name.lower(), len(board.pieces()), team.label)

    def toToken(self) -> GameToken:
        """Return ``(board, size, set)`` where ``set`` names the team the recipient plays."""
        if self.last_mover is None:
            next_symbol = self.active_team.symbol
        else:
            next_symbol = self.last_mover.opponentSymbol
        return (self.board.encode(), self.size.symbol, next_symbol)

    def destinationsFrom(self, origin: Coordinate) -> list[Coordinate]:
        piece = self.board.pieceAt(*origin)
        if piece is None:
            return []
        if piece.team is not self.active_team and self.chainPiece is None:
            return []
        return self.engine.destinationsFor(piece)

    def attemptMove(self, origin: Coordinate, destination: Coordinate) -> MoveResult:
        piece = self.board.pieceAt(*origin)
        if piece is None:
            return MoveResult.rejected(Outcome.NO_PIECE_AT_ORIGIN, origin, destination)
        if piece.team is not self.active_team and self.chainPiece is None:
            return MoveResult.rejected(Outcome.NOT_ACTIVE_TEAM, origin, destination)

        result = self.engine.attemptMove(piece, destination)
        if result.outcome.ends_turn:
            self.last_mover = self.active_team
            self.active_team = self.active_team.opponent
            self.engine.reset()
        return result

    def _install(self, board: Board, team: Team) -> None:
        self.board = board
        self.active_team = team
        self.last_mover = None
        self.engine.reset(board)
