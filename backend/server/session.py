from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Optional

from core.game import GameSession
from core.link import buildQuery, sessionFromLink
from core.pieces import BoardSize, Team

from .config import Settings
from .schemas import LinkRequest, LoadRequest, MoveRequest, NewGameRequest
from .serializers import serialize_game, serialize_result

logger = logging.getLogger(__name__)


class LockedSession:
    """Thread-safe orchestrator around a single GameSession."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.lock = Lock()
        self.settings = settings or Settings()
        self.game = GameSession(self.settings.default_size, self.settings.default_team)

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def new_game(self, payload: Optional[NewGameRequest] = None) -> dict[str, Any]:
        with self.lock:
            size = self.settings.default_size
            team = self.settings.default_team
            if payload and payload.size:
                size = BoardSize.fromSymbol(payload.size) or size
            if payload and payload.team:
                team = Team.fromSymbol(payload.team) or team
            self.game.newGame(size, team)
            return self._serialize_locked()

    def get_destinations(self, column: int, row: int) -> dict[str, Any]:
        with self.lock:
            if self.game.board.pieceAt(column, row) is None:
                raise ValueError(f"No piece at column {column}, row {row}.")
            destinations = self.game.destinationsFrom((column, row))
            return {
                "piece": {"column": column, "row": row},
                "destinations": [{"column": c, "row": r} for c, r in destinations],
            }

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            result = self.game.attemptMove(payload.start.as_tuple(), payload.end.as_tuple())
            if not result.outcome.committed:
                logger.info("Move %s rejected.", result)
            state = self._serialize_locked()
            state["result"] = serialize_result(result)
            return state

    def share_link(self) -> dict[str, Any]:
        with self.lock:
            board, size, team = self.game.toToken()
            return {"board": board, "size": size, "set": team, "query": buildQuery(self.game)}

    def open_link(self, payload: LinkRequest) -> dict[str, Any]:
        with self.lock:
            self.game = sessionFromLink(
                payload.query,
                self.settings.default_size,
                self.settings.default_team,
            )
            return self._serialize_locked()

    def load(self, payload: LoadRequest) -> dict[str, Any]:
        with self.lock:
            self.game.loadFromToken(payload.board, payload.size, payload.set)
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game)
