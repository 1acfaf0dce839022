"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field

from ...utils.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, MAX_DIMENSION


class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    width: int = Field(
        default=DEFAULT_WIDTH, strict=True, ge=1, le=MAX_DIMENSION, description="Squares per row"
    )
    height: int = Field(
        default=DEFAULT_HEIGHT, strict=True, ge=1, le=MAX_DIMENSION, description="Squares per column"
    )
    firstPlayer: str = Field(  # noqa: N815
        default="p1", pattern="^p[12]$", description="Which player moves first: 'p1' or 'p2'"
    )


class ClaimWallRequest(BaseModel):
    """Single wall claim."""

    row: int = Field(strict=True, description="Wall row index")
    cell: int = Field(strict=True, description="Wall cell index within the row")
    expectedTurn: int | None = Field(  # noqa: N815
        default=None,
        strict=True,
        ge=0,
        description="Turn of the snapshot this move is based on; rejected if stale",
    )


class ResetGameRequest(BaseModel):
    """Request to restart a game, optionally with new dimensions."""

    width: int | None = Field(default=None, strict=True, ge=1, le=MAX_DIMENSION)
    height: int | None = Field(default=None, strict=True, ge=1, le=MAX_DIMENSION)
