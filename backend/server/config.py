from __future__ import annotations

import os
from dataclasses import dataclass, field

from core.pieces import BoardSize, Team


def _size_from_env() -> BoardSize:
    symbol = os.getenv("CHECKERS_BOARD_SIZE", BoardSize.SMALL.symbol)
    size = BoardSize.fromSymbol(symbol)
    if size is None:
        raise ValueError(f"CHECKERS_BOARD_SIZE must be one of {[s.symbol for s in BoardSize]}, got {symbol!r}.")
    return size


def _team_from_env() -> Team:
    symbol = os.getenv("CHECKERS_STARTING_TEAM", Team.FIRST.symbol)
    team = Team.fromSymbol(symbol)
    if team is None:
        raise ValueError(f"CHECKERS_STARTING_TEAM must be one of {[t.symbol for t in Team]}, got {symbol!r}.")
    return team


def _cors_from_env() -> list[str]:
    return [origin.strip() for origin in os.getenv("CHECKERS_CORS_ORIGINS", "*").split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    default_size: BoardSize = BoardSize.SMALL
    default_team: Team = Team.FIRST
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            default_size=_size_from_env(),
            default_team=_team_from_env(),
            cors_origins=_cors_from_env(),
        )
