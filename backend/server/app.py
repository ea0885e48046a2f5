from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .schemas import LinkRequest, LoadRequest, MoveRequest, NewGameRequest
from .session import LockedSession


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="Checkers Link Backend", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = LockedSession(settings)

    def get_session() -> LockedSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: LockedSession = Depends(get_session)):
        return session.serialize()

    @app.get("/moves")
    def read_destinations(
        column: int = Query(..., ge=0),
        row: int = Query(..., ge=0),
        session: LockedSession = Depends(get_session),
    ):
        try:
            return session.get_destinations(column, row)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/move")
    def play_move(payload: MoveRequest, session: LockedSession = Depends(get_session)):
        return session.make_move(payload)

    @app.post("/new-game")
    def new_game(payload: Optional[NewGameRequest] = None, session: LockedSession = Depends(get_session)):
        return session.new_game(payload)

    @app.get("/link")
    def read_link(session: LockedSession = Depends(get_session)):
        return session.share_link()

    @app.post("/link")
    def open_link(payload: LinkRequest, session: LockedSession = Depends(get_session)):
        return session.open_link(payload)

    @app.post("/load")
    def load_game(payload: LoadRequest, session: LockedSession = Depends(get_session)):
        try:
            return session.load(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    return app
