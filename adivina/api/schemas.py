"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between a voice client and the engine.
The client records and plays audio itself; the API only sees recognized
text and returns the intents the client must execute.

Error Codes:
- GAME_NOT_FOUND: Game does not exist or has been ended
- INVALID_CONFIG: Range or attempt settings are invalid
- INVALID_EVENT: The game cannot take this event in its current phase
- VALIDATION_ERROR: Request body failed validation
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class GameStatus(str, Enum):
    """Hosted game status values."""
    ACTIVE = "active"
    CLOSED = "closed"
    ABANDONED = "abandoned"


class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_EVENT = "INVALID_EVENT"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class ReplayMatch(str, Enum):
    """Matching policy for the play-again answer."""
    TOKEN = "token"
    SUBSTRING = "substring"


# =============================================================================
# Requests
# =============================================================================

class CreateGameRequest(BaseModel):
    """Settings for a new game."""
    min_number: int = Field(0, description="Lowest valid guess (inclusive)")
    max_number: int = Field(100, description="Highest valid guess (inclusive)")
    max_attempts: int = Field(5, ge=1, description="Attempts per session")
    replay_match: ReplayMatch = ReplayMatch.TOKEN
    log_secret: bool = Field(True, description="Log the secret on the server for debugging")
    seed: Optional[int] = Field(None, description="Seed for reproducible secrets")


class UtteranceRequest(BaseModel):
    """Text recognized by the client's speech-to-text. Empty means nothing recognized."""
    text: str = ""


# =============================================================================
# Responses
# =============================================================================

class IntentInfo(BaseModel):
    """An action the client must perform, in order."""
    kind: str = Field(description="speak, listen_for_guess, listen_for_replay_answer, terminate")
    message: Optional[str] = None
    category: Optional[str] = Field(
        None, description="Message category for clip-based clients (speak only)"
    )
    params: dict[str, Any] = Field(default_factory=dict)


class GameResponse(BaseModel):
    """Current state of a game plus the intents produced by the last event."""
    game_id: str
    status: GameStatus
    phase: str
    session_number: int = 1
    min_number: int
    max_number: int
    max_attempts: int
    attempts_remaining: int
    last_guess: Optional[int] = None
    intents: list[IntentInfo] = Field(default_factory=list)

    # Outcome of the last event
    error_code: Optional[str] = Field(
        None, description="PARSE_FAILURE, OUT_OF_RANGE, REPEATED_GUESS, AMBIGUOUS_REPLAY_ANSWER"
    )
    guess: Optional[int] = None
    outcome: Optional[str] = Field(None, description="correct, higher, lower, exhausted")

    # Only set once the session has been won or lost
    revealed_secret: Optional[int] = None


class GameListResponse(BaseModel):
    """List of active games."""
    games: list[str] = Field(default_factory=list)
    count: int = 0


class EndGameResponse(BaseModel):
    """Response to ending a game."""
    game_id: str
    ended: bool


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str


class ErrorResponse(BaseModel):
    """Standard error payload."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
