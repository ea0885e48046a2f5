from __future__ import annotations

from typing import Any, Optional

from core.game import GameSession
from core.move import Coordinate, MoveResult
from core.pieces import Piece, Team


def _coord_tuple_to_dict(coord: Coordinate) -> dict[str, int]:
    column, row = coord
    return {"column": column, "row": row}


def serialize_piece(piece: Piece) -> dict[str, Any]:
    return {
        "id": piece.id,
        "column": piece.column,
        "row": piece.row,
        "team": piece.team.label,
        "isKing": piece.is_king,
    }


def serialize_result(result: MoveResult) -> dict[str, Any]:
    captured: Optional[dict[str, int]] = None
    if result.captured is not None:
        captured = _coord_tuple_to_dict(result.captured)
    return {
        "outcome": result.outcome.value,
        "committed": result.outcome.committed,
        "start": _coord_tuple_to_dict(result.start),
        "end": _coord_tuple_to_dict(result.end),
        "captured": captured,
        "crowned": result.crowned,
    }


def serialize_game(session: GameSession) -> dict[str, Any]:
    pieces = [serialize_piece(piece) for piece in session.board.pieces()]
    board_token, size_symbol, set_symbol = session.toToken()
    chain = session.chainPiece

    return {
        "size": session.size.symbol,
        "dimension": session.board.dimension,
        "activeTeam": session.active_team.label,
        "chainPiece": _coord_tuple_to_dict(chain.position) if chain is not None else None,
        "pieces": pieces,
        "pieceCounts": {
            team.label: {
                "total": len(session.board.piecesOf(team)),
                "kings": sum(1 for piece in session.board.piecesOf(team) if piece.is_king),
            }
            for team in Team
        },
        "token": {"board": board_token, "size": size_symbol, "set": set_symbol},
    }
