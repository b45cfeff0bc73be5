"""
FastAPI Application - REST API for voice clients.

Endpoints:
    GET    /api/v1/health                           Health check
    POST   /api/v1/games                            Create and start a game
    GET    /api/v1/games                            List active games
    GET    /api/v1/games/{id}                       Get game state
    POST   /api/v1/games/{id}/utterances            Submit recognized text
    POST   /api/v1/games/{id}/playback-finished     Report end of playback
    DELETE /api/v1/games/{id}                       End game

Client Flow:
    1. POST /games returns the intro as a `speak` intent
    2. After playing it, POST /playback-finished returns `listen_for_guess`
    3. Each recognized utterance goes to POST /utterances
    4. Execute returned intents in order; report playback after speaking
    5. A `terminate` intent means the player is done

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import os

from .. import __version__

# Environment configuration
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import APIService
    from .schemas import (
        CreateGameRequest,
        UtteranceRequest,
        GameResponse,
        GameListResponse,
        EndGameResponse,
        HealthResponse,
        ErrorResponse,
        ErrorCode,
    )

    app = FastAPI(
        title="Adivina Engine API",
        description="""
Voice "guess the number" engine (Spanish).

The client owns the microphone and the speaker. It sends recognized text and
executes the returned intents in order: `speak`, `listen_for_guess`,
`listen_for_replay_answer`, `terminate`.

## Error Codes

| Code | Description |
|------|-------------|
| `GAME_NOT_FOUND` | Game does not exist |
| `INVALID_CONFIG` | Range or attempts are invalid |
| `INVALID_EVENT` | Game cannot take this event now |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {key: error.get(key) for key in ("loc", "msg", "type")}
            for error in exc.errors()
        ]
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            status_code=422,
            details={"errors": errors},
        )

    def to_http(response) -> Union[GameResponse, JSONResponse]:
        if isinstance(response, ErrorResponse):
            status_code = 404 if response.error_code == ErrorCode.GAME_NOT_FOUND else 409
            return make_error_response(
                response.error_code,
                response.error,
                status_code=status_code,
                details=response.details,
            )
        return response

    # =========================================================================
    # Health
    # =========================================================================

    @app.get("/api/v1/health", response_model=HealthResponse, tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=GameResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid configuration"}},
        tags=["Games"],
        summary="Create and start a game",
    )
    async def create_game(request: CreateGameRequest) -> Union[GameResponse, JSONResponse]:
        """
        Create a game. The response carries the intro `speak` intent.
        """
        try:
            return api_service.create_game(request)
        except ValueError as e:
            return make_error_response(ErrorCode.INVALID_CONFIG, str(e))

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List active games",
    )
    async def list_games() -> GameListResponse:
        games = api_service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.get(
        "/api/v1/games/{game_id}",
        response_model=GameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get game state",
    )
    async def get_game(game_id: str) -> Union[GameResponse, JSONResponse]:
        """Get the current state of a game and the intents of its last event."""
        return to_http(api_service.get_game(game_id))

    @app.post(
        "/api/v1/games/{game_id}/utterances",
        response_model=GameResponse,
        responses={
            404: {"model": ErrorResponse},
            409: {"model": ErrorResponse, "description": "Game is not listening"},
        },
        tags=["Games"],
        summary="Submit recognized speech",
    )
    async def submit_utterance(
        game_id: str, request: UtteranceRequest
    ) -> Union[GameResponse, JSONResponse]:
        """
        Submit text recognized by the client.

        Unrecognized numbers, out-of-range and repeated guesses are answered
        normally; `error_code` tells which one happened.
        """
        return to_http(api_service.submit_utterance(game_id, request))

    @app.post(
        "/api/v1/games/{game_id}/playback-finished",
        response_model=GameResponse,
        responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Report end of playback",
    )
    async def playback_finished(game_id: str) -> Union[GameResponse, JSONResponse]:
        """Report that every `speak` intent so far has been played."""
        return to_http(api_service.playback_finished(game_id))

    @app.delete(
        "/api/v1/games/{game_id}",
        response_model=EndGameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="End a game",
    )
    async def end_game(game_id: str) -> Union[EndGameResponse, JSONResponse]:
        if not api_service.end_game(game_id):
            return make_error_response(
                ErrorCode.GAME_NOT_FOUND, f"Game {game_id} not found", status_code=404
            )
        return EndGameResponse(game_id=game_id, ended=True)

    return app


# For running directly: uvicorn adivina.api.app:app
app = create_app()
