from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .board import Board
from .move import Coordinate, MoveResult, Outcome
from .pieces import Piece

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Capture:
    landing: Coordinate
    captured: Coordinate


class TurnEngine:
    """Applies single move attempts and tracks a piece locked into a capture chain.

    The engine is either idle or holds ``chain_piece``: the piece that just
    captured and still has a capture available. While a chain is open only that
    piece may move, and only by capturing.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.chain_piece: Optional[Piece] = None

    @property
    def must_continue(self) -> bool:
        return self.chain_piece is not None

    def reset(self, board: Optional[Board] = None) -> None:
        if board is not None:
            self.board = board
        self.chain_piece = None

    # move generation ----------------------------------------------------

    def capturesFor(self, piece: Piece) -> list[Capture]:
        captures: list[Capture] = []
        for dc, dr in piece.captureDeltas():
            landing = (piece.column + dc, piece.row + dr)
            middle = (piece.column + dc // 2, piece.row + dr // 2)
            target = self.board.pieceAt(*middle)
            if target is None or not piece.canCapture(target):
                continue
            if not self.board.isFree(*landing):
                continue
            captures.append(Capture(landing=landing, captured=middle))
        return captures

    def simpleMovesFor(self, piece: Piece) -> list[Coordinate]:
        moves: list[Coordinate] = []
        for dc, dr in piece.simpleDeltas():
            destination = (piece.column + dc, piece.row + dr)
            if self.board.isFree(*destination):
                moves.append(destination)
        return moves

    def destinationsFor(self, piece: Piece) -> list[Coordinate]:
        """Cells the piece may legally be dropped on right now."""
        if self.chain_piece is not None and piece is not self.chain_piece:
            return []
        captures = self.capturesFor(piece)
        if captures:
            return [capture.landing for capture in captures]
        if self.must_continue:
            return []
        return self.simpleMovesFor(piece)

    # move application ---------------------------------------------------

    def attemptMove(self, piece: Piece, destination: Coordinate) -> MoveResult:
        start = piece.position
        destination = (destination[0], destination[1])

        if self.chain_piece is not None and piece is not self.chain_piece:
            logger.debug("Rejected %s -> %s: %r must continue its capture chain.", start, destination, self.chain_piece)
            return MoveResult.rejected(Outcome.ILLEGAL, start, destination)

        captures = self.capturesFor(piece)
        if captures:
            return self._tryCapture(piece, destination, captures)

        if self.must_continue:
            return MoveResult.rejected(Outcome.ILLEGAL, start, destination)

        return self._tryMove(piece, destination)

    def _tryCapture(self, piece: Piece, destination: Coordinate, captures: list[Capture]) -> MoveResult:
        start = piece.position
        chosen = next((capture for capture in captures if capture.landing == destination), None)
        if chosen is None:
            return MoveResult.rejected(Outcome.ILLEGAL, start, destination)

        target = self.board.pieceAt(*chosen.captured)
        if target is None or not piece.canCapture(target):
            return MoveResult.rejected(Outcome.ILLEGAL, start, destination)

        self.board.remove(*chosen.captured)
        self.board.move(piece, destination)
        crowned = self._tryCrown(piece)
        logger.debug("%r captured %r landing on %s.", piece, target, destination)

        if self.capturesFor(piece):
            self.chain_piece = piece
            outcome = Outcome.CAPTURED_MUST_CONTINUE
        else:
            self.chain_piece = None
            outcome = Outcome.CAPTURED_TURN_ENDS

        return MoveResult(
            outcome=outcome,
            start=start,
            end=destination,
            captured=chosen.captured,
            crowned=crowned,
        )

    def _tryMove(self, piece: Piece, destination: Coordinate) -> MoveResult:
        start = piece.position
        if destination not in self.simpleMovesFor(piece):
            return MoveResult.rejected(Outcome.ILLEGAL, start, destination)

        self.board.move(piece, destination)
        crowned = self._tryCrown(piece)
        logger.debug("%r moved %s -> %s.", piece, start, destination)
        return MoveResult(outcome=Outcome.MOVED, start=start, end=destination, crowned=crowned)

    def _tryCrown(self, piece: Piece) -> bool:
        if piece.canCrownOn(piece.row, self.board.dimension):
            return piece.crown()
        return False
