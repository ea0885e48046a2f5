from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class CellModel(BaseModel):
    column: int = Field(..., ge=0)
    row: int = Field(..., ge=0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.column, self.row)


class MoveRequest(BaseModel):
    start: CellModel
    end: CellModel = Field(..., description="Cell the piece was dropped on.")


class NewGameRequest(BaseModel):
    size: Optional[Literal["S", "L"]] = None
    team: Optional[Literal["W", "R"]] = None


class LinkRequest(BaseModel):
    query: str = Field(..., description="Query string or full URL carrying board, size and set.")


class LoadRequest(BaseModel):
    board: str
    size: str
    set: str
