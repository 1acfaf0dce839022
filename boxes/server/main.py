"""FastAPI server for Wall Squares.

Exposes game sessions over HTTP so a browser front end can act as the
presentation layer. Both players share one client (hot-seat).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..engine.errors import AlreadyClaimed, GameOver, InvalidConfiguration, InvalidCoordinate
from ..engine.session import GameSession, GameSessionManager, StaleStateError
from ..models.player import Player
from ..utils.serialization import state_to_dict
from .schemas.requests import ClaimWallRequest, CreateGameRequest, ResetGameRequest
from .schemas.responses import ClaimWallResponse, CreateGameResponse, GameStateResponse

logger = logging.getLogger(__name__)

# Global session manager
sessions = GameSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Wall Squares server starting...")
    yield
    logger.info("Wall Squares server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Wall Squares API",
    description="HTTP API for hot-seat Wall Squares games",
    version="1.0.0",
    lifespan=lifespan,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session(game_id: str) -> GameSession:
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Wall Squares",
        "status": "operational",
        "activeGames": len(sessions.sessions),
    }


@app.post("/api/games", response_model=CreateGameResponse)
async def create_game(request: CreateGameRequest):
    """Create a new game.

    Example:
        POST /api/games
        {"width": 3, "height": 3, "firstPlayer": "p1"}
    """
    try:
        session = sessions.create_session(
            width=request.width,
            height=request.height,
            first_player=Player(request.firstPlayer),
        )
    except InvalidConfiguration as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CreateGameResponse(gameId=session.id, state=state_to_dict(session.state))


@app.get("/api/games/{game_id}/state", response_model=GameStateResponse)
async def get_game_state(game_id: str):
    """Get current game state.

    Example:
        GET /api/games/game-abc123/state
    """
    session = _get_session(game_id)
    state = session.state
    state_dict = state_to_dict(state)

    return GameStateResponse(
        gameId=game_id,
        turn=state.turn,
        winner=state_dict["winner"],
        state=state_dict,
    )


@app.post("/api/games/{game_id}/moves", response_model=ClaimWallResponse)
async def claim_wall(game_id: str, request: ClaimWallRequest):
    """Claim one wall for the player to move.

    Example:
        POST /api/games/game-abc123/moves
        {"row": 0, "cell": 1, "expectedTurn": 4}
    """
    session = _get_session(game_id)

    try:
        state, result = session.claim_wall(
            request.row, request.cell, expected_turn=request.expectedTurn
        )
    except (InvalidCoordinate, AlreadyClaimed) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (GameOver, StaleStateError) as e:
        raise HTTPException(status_code=409, detail=str(e))

    state_dict = state_to_dict(state)
    return ClaimWallResponse(
        turn=state.turn,
        mover=result.mover.value,
        completed=list(result.completed),
        nextPlayer=result.next_player.value,
        winner=state_dict["winner"],
        state=state_dict,
    )


@app.post("/api/games/{game_id}/reset", response_model=GameStateResponse)
async def reset_game(game_id: str, request: ResetGameRequest):
    """Restart a game with the same or new dimensions.

    Example:
        POST /api/games/game-abc123/reset
        {"width": 4, "height": 4}
    """
    session = _get_session(game_id)

    try:
        state = session.reset(request.width, request.height)
    except InvalidConfiguration as e:
        raise HTTPException(status_code=400, detail=str(e))

    return GameStateResponse(
        gameId=game_id, turn=state.turn, winner=None, state=state_to_dict(state)
    )


@app.delete("/api/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session."""
    if sessions.delete(game_id):
        return {"message": f"Game {game_id} deleted"}
    raise HTTPException(status_code=404, detail="Game not found")
