"""Core checkers engine package."""

from .board import Board
from .engine import Capture, TurnEngine
from .errors import InvalidToken, MalformedToken, TokenError
from .game import GameSession
from .link import buildQuery, parseQuery, sessionFromLink
from .move import Coordinate, MoveResult, Outcome
from .pieces import BoardSize, Piece, Rank, Team, legalCaptureDeltas, legalSimpleDeltas

__all__ = [
	"Board",
	"BoardSize",
	"Capture",
	"Coordinate",
	"GameSession",
	"InvalidToken",
	"MalformedToken",
	"MoveResult",
	"Outcome",
	"Piece",
	"Rank",
	"Team",
	"TokenError",
	"TurnEngine",
	"buildQuery",
	"legalCaptureDeltas",
	"legalSimpleDeltas",
	"parseQuery",
	"sessionFromLink",
]
