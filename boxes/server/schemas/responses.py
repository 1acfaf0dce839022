"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class GameStateResponse(BaseModel):
    """Response containing current game state."""

    gameId: str  # noqa: N815
    turn: int
    winner: str | None
    state: dict


class CreateGameResponse(BaseModel):
    """Response after creating a new game."""

    gameId: str  # noqa: N815
    state: dict


class ClaimWallResponse(BaseModel):
    """Response after a successful wall claim."""

    turn: int
    mover: str
    completed: list[int] = Field(default_factory=list)
    nextPlayer: str  # noqa: N815
    winner: str | None = None
    state: dict

